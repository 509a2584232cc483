"""
Browsers module - Browser automation implementations.
"""

from retail_search_harness.browsers.playwright_browser import (
    BrowserType,
    PlaywrightBrowser,
    PlaywrightPage,
    PlaywrightElementHandle,
)

__all__ = [
    "BrowserType",
    "PlaywrightBrowser",
    "PlaywrightPage",
    "PlaywrightElementHandle",
]
