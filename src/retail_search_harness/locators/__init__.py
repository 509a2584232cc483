"""
Locators module - selector catalog, heuristics and the resolution engine.
"""

from retail_search_harness.locators.catalog import SelectorCatalog
from retail_search_harness.locators.heuristics import HEURISTIC_SELECTORS, heuristics_for
from retail_search_harness.locators.resolver import (
    AttemptOutcome,
    LocatorResolver,
    ResolutionSource,
    ResolvedHandle,
    SelectorAttempt,
)
from retail_search_harness.locators.waits import WaitOutcome, bounded_wait

__all__ = [
    "SelectorCatalog",
    "HEURISTIC_SELECTORS",
    "heuristics_for",
    "AttemptOutcome",
    "LocatorResolver",
    "ResolutionSource",
    "ResolvedHandle",
    "SelectorAttempt",
    "WaitOutcome",
    "bounded_wait",
]
