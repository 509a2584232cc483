"""
Selector Catalog - Persisted, priority-ordered selectors per element key.

The catalog is a JSON object mapping each logical element key to an ordered
list of selector strings. Earlier entries are tried first. It is the only
durable state of the harness: discoveries made by the resolver are written
back so later runs start with the newest working selector.

Example file:
    {
      "searchBar": ["#twotabsearchtextbox", "input[name=field-keywords]"],
      "searchButton": ["#nav-search-submit-button"]
    }
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from retail_search_harness.exceptions.catalog import CatalogLoadError, CatalogPersistError

logger = logging.getLogger(__name__)

_CATALOG_ADAPTER = TypeAdapter(Dict[str, List[str]])


class SelectorCatalog:
    """
    In-memory view of the selector catalog file.
    
    promote() is the only mutating operation and always flushes the whole
    catalog to disk before returning.
    
    Usage:
        catalog = SelectorCatalog("locators/amazon-locators.json")
        catalog.load()
        catalog.get("searchBar")   # ['#twotabsearchtextbox', ...]
        catalog.promote("searchBar", "input[type='search']")
    """
    
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._selectors: Dict[str, List[str]] = {}
        self._loaded = False
    
    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "SelectorCatalog":
        """Create a catalog and load it immediately."""
        catalog = cls(path)
        catalog.load()
        return catalog
    
    def load(self) -> None:
        """
        Read the catalog file into memory.
        
        Raises:
            CatalogLoadError: If the file is missing, unreadable, not valid
                JSON, or not an object of string -> list of strings
        """
        if not self.path.is_file():
            raise CatalogLoadError(f"Selector catalog not found: {self.path}", path=str(self.path))
        
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise CatalogLoadError(f"Cannot read selector catalog {self.path}: {e}", path=str(self.path))
        
        try:
            self._selectors = _CATALOG_ADAPTER.validate_json(raw, strict=True)
        except ValidationError as e:
            raise CatalogLoadError(
                f"Malformed selector catalog {self.path}: {e.error_count()} error(s), "
                f"first: {e.errors()[0]['msg']}",
                path=str(self.path),
            )
        
        self._loaded = True
        logger.info(f"Loaded selector catalog {self.path} ({len(self._selectors)} keys)")
    
    @property
    def is_loaded(self) -> bool:
        return self._loaded
    
    def get(self, key: str) -> Optional[List[str]]:
        """
        Get the selectors for a key.
        
        Returns:
            A copy of the selector list in priority order, or None when the
            key is not in the catalog
        """
        selectors = self._selectors.get(key)
        if selectors is None:
            return None
        return list(selectors)
    
    def promote(self, key: str, selector: str) -> None:
        """
        Put a selector at the front of a key's list and persist the catalog.
        
        A selector that already heads the list leaves the content unchanged.
        A copy found further down is kept where it is. The in-memory catalog
        only changes once the file has been written.
        
        Args:
            key: Element key (created if absent)
            selector: Selector proven to match on the current page
            
        Raises:
            CatalogPersistError: If the catalog cannot be written; the
                catalog is left as it was
        """
        selectors = self._selectors.get(key, [])
        already_first = bool(selectors) and selectors[0] == selector

        updated = dict(self._selectors)
        if not already_first:
            updated[key] = [selector] + selectors

        self._save(updated)
        self._selectors = updated

        if already_first:
            logger.debug(f"Selector {selector!r} already heads {key}")
        else:
            logger.info(f"Promoted selector {selector!r} to front of {key}")
    
    def _save(self, selectors: Dict[str, List[str]]) -> None:
        """Write a full catalog to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(selectors, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise CatalogPersistError(f"Cannot write selector catalog {self.path}: {e}", path=str(self.path))
        logger.debug(f"Saved selector catalog {self.path}")
    
    def keys(self) -> List[str]:
        """Element keys in file order."""
        return list(self._selectors)
    
    def to_dict(self) -> Dict[str, List[str]]:
        """Deep copy of the catalog contents."""
        return {key: list(selectors) for key, selectors in self._selectors.items()}
    
    def __contains__(self, key: object) -> bool:
        return key in self._selectors
    
    def __len__(self) -> int:
        return len(self._selectors)
    
    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
