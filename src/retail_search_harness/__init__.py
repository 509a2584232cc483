"""
Retail Search Harness - browser acceptance tests for a storefront search flow.

Its core is a resilient element locator: logical keys such as "searchBar"
are resolved against a persisted selector catalog, falling back to built-in
heuristics whose discoveries are written back to the catalog.

Example:
    >>> from retail_search_harness import LocatorResolver, SelectorCatalog
    >>> resolver = LocatorResolver(SelectorCatalog.from_path("locators/amazon-locators.json"))
    >>> handle = await resolver.resolve(page, "searchBar", "Search input field")
"""

__version__ = "0.1.0"

from retail_search_harness.config.settings import Settings
from retail_search_harness.exceptions import ElementNotFoundError
from retail_search_harness.locators import LocatorResolver, ResolvedHandle, SelectorCatalog

__all__ = [
    "Settings",
    "ElementNotFoundError",
    "LocatorResolver",
    "ResolvedHandle",
    "SelectorCatalog",
    "__version__",
]
