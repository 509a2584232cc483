"""
Interfaces module - Abstract base classes for pluggable components.

The resolver and flows depend on these contracts rather than on
Playwright directly.
"""

from retail_search_harness.interfaces.page import (
    IPage,
    IElementHandle,
    TagCategory,
    INPUT_TAGS,
)

__all__ = [
    "IPage",
    "IElementHandle",
    "TagCategory",
    "INPUT_TAGS",
]
