"""
Heuristic selectors - built-in fallbacks per element key.

Generic structural and attribute-based selectors, independent of any page
snapshot. They are only consulted once every catalog selector for a key has
failed; the first one that matches is promoted into the catalog.

Covering a new key means adding an entry here.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

_PRICE: Tuple[str, ...] = (
    ".a-price",
    '[data-a-color="price"]',
    ".s-price",
    '//span[contains(@class, "a-price")]',
)

HEURISTIC_SELECTORS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "searchBar": (
        'input[type="search"]',
        'input[role="searchbox"]',
        'input[placeholder*="search" i]',
        '//input[contains(@placeholder, "search") or contains(@aria-label, "search")]',
    ),
    "searchButton": (
        'button[type="submit"]',
        'input[type="submit"]',
        'button:has-text("Search")',
        '//button[contains(., "Search")]',
    ),
    "productTitle": (
        '[data-component-type="s-search-result"] h2',
        ".s-result-item h2",
        ".s-search-results h2",
        '//div[contains(@class, "s-result-item")]//h2',
    ),
    "price": _PRICE,
    "firstProductPrice": _PRICE,
})


def heuristics_for(key: str, table: Mapping[str, Tuple[str, ...]] = HEURISTIC_SELECTORS) -> Tuple[str, ...]:
    """Candidate selectors for a key, or an empty tuple if it has none."""
    return tuple(table.get(key, ()))
