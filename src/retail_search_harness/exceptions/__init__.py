"""
Exceptions module - Custom exception hierarchy.

This module defines all custom exceptions used throughout the harness,
providing clear error types for different failure scenarios.
"""

from retail_search_harness.exceptions.base import (
    HarnessError,
    ConfigurationError,
)
from retail_search_harness.exceptions.catalog import (
    CatalogError,
    CatalogLoadError,
    CatalogPersistError,
)
from retail_search_harness.exceptions.browser import (
    BrowserError,
    BrowserLaunchError,
    BrowserConnectionError,
    PageError,
    NavigationError,
    ElementNotFoundError,
)
from retail_search_harness.exceptions.search import (
    SearchFlowError,
    SearchError,
    NoResultsError,
    PriceFormatError,
)

__all__ = [
    # Base exceptions
    "HarnessError",
    "ConfigurationError",
    # Catalog exceptions
    "CatalogError",
    "CatalogLoadError",
    "CatalogPersistError",
    # Browser exceptions
    "BrowserError",
    "BrowserLaunchError",
    "BrowserConnectionError",
    "PageError",
    "NavigationError",
    "ElementNotFoundError",
    # Search flow exceptions
    "SearchFlowError",
    "SearchError",
    "NoResultsError",
    "PriceFormatError",
]
