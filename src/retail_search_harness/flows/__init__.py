"""
Flows module - end-to-end storefront flows built on the locator resolver.
"""

from retail_search_harness.flows.search import SearchFlow, SearchOutcome

__all__ = [
    "SearchFlow",
    "SearchOutcome",
]
