"""
Playwright Browser - Implementation of the page interface using Playwright.

This module provides a Playwright-based implementation of the page-query
capability consumed by the locator resolver and the search flow.
"""

from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Union
import logging

from retail_search_harness.interfaces.page import IElementHandle, IPage
from retail_search_harness.exceptions.browser import (
    BrowserLaunchError,
    BrowserConnectionError,
    NavigationError,
)

logger = logging.getLogger(__name__)


class BrowserType(Enum):
    """Supported browser types."""
    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"


class PlaywrightElementHandle(IElementHandle):
    """
    Playwright implementation of IElementHandle.
    
    Wraps the first match of a Playwright Locator.
    """
    
    def __init__(self, locator: Any, selector: str):
        """
        Initialize the handle.
        
        Args:
            locator: Playwright Locator already narrowed to its first match
            selector: The selector used to create the locator
        """
        self._locator = locator
        self._selector = selector
    
    @property
    def selector(self) -> str:
        return self._selector
    
    @property
    def locator(self) -> Any:
        """The underlying Playwright Locator."""
        return self._locator
    
    async def is_visible(self) -> bool:
        """Check if visible."""
        return await self._locator.is_visible()
    
    async def tag_name(self) -> str:
        """Get the lowercase tag name."""
        return await self._locator.evaluate("el => el.tagName.toLowerCase()")
    
    async def text_content(self) -> Optional[str]:
        """Get text content."""
        return await self._locator.text_content()
    
    async def wait_for_visible(self, timeout_ms: int) -> None:
        """Wait until visible."""
        await self._locator.wait_for(state="visible", timeout=timeout_ms)
    
    async def fill(self, value: str) -> None:
        """Fill input."""
        await self._locator.fill(value)
    
    async def click(self) -> None:
        """Click element."""
        await self._locator.click()
    
    def __repr__(self) -> str:
        return f"PlaywrightElementHandle({self._selector!r})"


class PlaywrightPage(IPage):
    """
    Playwright implementation of IPage.
    
    Wraps a Playwright Page for navigation and querying.
    """
    
    def __init__(self, page: Any):
        """
        Initialize the page wrapper.
        
        Args:
            page: Playwright Page object
        """
        self._page = page
    
    @property
    def url(self) -> str:
        """Get current URL."""
        return self._page.url
    
    async def title(self) -> str:
        """Get page title."""
        return await self._page.title()
    
    async def goto(self, url: str, timeout_ms: Optional[int] = None) -> None:
        """Navigate to URL."""
        try:
            await self._page.goto(url, timeout=timeout_ms)
        except Exception as e:
            raise NavigationError(f"Failed to navigate to {url}: {e}", url=url)
    
    async def count(self, selector: str) -> int:
        """Count matching elements."""
        return await self._page.locator(selector).count()
    
    def locate(self, selector: str) -> PlaywrightElementHandle:
        """Get a handle to the first match."""
        return PlaywrightElementHandle(self._page.locator(selector).first, selector)
    
    async def all_text_contents(self, selector: str) -> List[str]:
        """Get text of all matches."""
        return await self._page.locator(selector).all_text_contents()
    
    async def wait_for_selector(
        self,
        selector: str,
        timeout_ms: Optional[int] = None,
        state: str = "attached",
    ) -> None:
        """Wait for element."""
        await self._page.wait_for_selector(selector, timeout=timeout_ms, state=state)
    
    async def wait_for_load_state(self, state: str = "load", timeout_ms: Optional[int] = None) -> None:
        """Wait for load state."""
        await self._page.wait_for_load_state(state, timeout=timeout_ms)
    
    async def wait_for_timeout(self, timeout_ms: int) -> None:
        """Wait for timeout."""
        await self._page.wait_for_timeout(timeout_ms)
    
    async def screenshot(self, path: Union[str, Path], full_page: bool = False) -> bytes:
        """Take screenshot."""
        return await self._page.screenshot(path=str(path), full_page=full_page)
    
    async def close(self) -> None:
        """Close page."""
        await self._page.close()


class PlaywrightBrowser:
    """
    Owns the Playwright driver, one browser and its default context.
    
    Example:
        >>> browser = PlaywrightBrowser()
        >>> await browser.launch(headless=True)
        >>> page = await browser.new_page()
        >>> await page.goto("https://www.amazon.com/")
        >>> await browser.close()
    """
    
    def __init__(self):
        """Initialize the browser (not launched yet)."""
        self._playwright: Any = None
        self._browser: Any = None
        self._default_context: Any = None
    
    @property
    def is_connected(self) -> bool:
        """Check if browser is connected."""
        return self._browser is not None and self._browser.is_connected()
    
    async def launch(
        self,
        headless: bool = True,
        browser_type: BrowserType = BrowserType.CHROMIUM,
        **options: Any,
    ) -> None:
        """
        Launch the browser.
        
        Args:
            headless: Whether to run headless
            browser_type: Type of browser to launch
            **options: Additional Playwright launch options
        """
        try:
            from playwright.async_api import async_playwright
            
            self._playwright = await async_playwright().start()
            
            browser_launchers = {
                BrowserType.CHROMIUM: self._playwright.chromium,
                BrowserType.FIREFOX: self._playwright.firefox,
                BrowserType.WEBKIT: self._playwright.webkit,
            }
            launcher = browser_launchers.get(browser_type, self._playwright.chromium)
            
            self._browser = await launcher.launch(
                headless=headless,
                **options,
            )
            
            logger.info(f"Launched {browser_type.value} browser (headless={headless})")
            
        except Exception as e:
            raise BrowserLaunchError(f"Failed to launch browser: {e}")
    
    async def new_page(self, default_timeout_ms: Optional[int] = None, **options: Any) -> PlaywrightPage:
        """
        Create a new page.
        
        Args:
            default_timeout_ms: Default timeout for actions that are not
                given one explicitly, set when the default context is created
            **options: Context options (viewport, ignore_https_errors, ...)
                applied when the default context is first created
            
        Returns:
            New page instance
        """
        if not self._browser:
            raise BrowserConnectionError("Browser not launched. Call launch() first.")
        
        if not self._default_context:
            self._default_context = await self._browser.new_context(**options)
            if default_timeout_ms is not None:
                self._default_context.set_default_timeout(default_timeout_ms)
        
        page = await self._default_context.new_page()
        return PlaywrightPage(page)
    
    async def close(self) -> None:
        """Close the browser and cleanup."""
        if self._default_context:
            await self._default_context.close()
            self._default_context = None
        
        if self._browser:
            await self._browser.close()
            self._browser = None
        
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
        
        logger.info("Browser closed")
