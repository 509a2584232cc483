"""
Selector catalog exceptions.
"""

from retail_search_harness.exceptions.base import ConfigurationError


class CatalogError(ConfigurationError):
    """Base exception for selector catalog errors."""
    
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, {"path": path})
        self.path = path


class CatalogLoadError(CatalogError):
    """
    The catalog file is missing or malformed.
    
    There is no safe default: an empty catalog would silently degrade
    every resolution to heuristics only, so this is fatal at startup.
    """
    pass


class CatalogPersistError(CatalogError):
    """
    The catalog could not be written back to disk.
    
    Raised by promote() when the discovered selector cannot be flushed.
    """
    pass
