"""
Browser-related exceptions.
"""

from typing import TYPE_CHECKING, List, Optional

from retail_search_harness.exceptions.base import HarnessError

if TYPE_CHECKING:
    from retail_search_harness.locators.resolver import SelectorAttempt


class BrowserError(HarnessError):
    """Base exception for browser-related errors."""
    pass


class BrowserLaunchError(BrowserError):
    """
    Error launching the browser.
    
    Raised when the browser fails to start, which could be due to:
    - Missing browser binaries
    - Invalid browser options
    - Resource constraints
    """
    pass


class BrowserConnectionError(BrowserError):
    """
    Error connecting to the browser.
    
    Raised when the browser has not been launched or the connection was lost.
    """
    pass


class PageError(BrowserError):
    """Base exception for page-related errors."""
    pass


class NavigationError(PageError):
    """
    Error during page navigation.
    
    Raised when navigation fails or lands on an unexpected page.
    """
    
    def __init__(self, message: str, url: str | None = None):
        super().__init__(message, {"url": url})
        self.url = url


class ElementNotFoundError(PageError):
    """
    No strategy could resolve a logical element key.
    
    Raised by the locator resolver once the catalog and the heuristic
    table are both exhausted, or straight away when neither knows the key.
    
    Attributes:
        key: Logical element key that was requested
        description: Human-readable description supplied by the caller
        screenshot_path: Where the diagnostic screenshot was written, if it was
        screenshot_attempted: Whether a diagnostic screenshot was attempted
        attempts: Every selector probe made during the resolution
    """
    
    def __init__(
        self,
        message: str,
        key: str,
        description: str,
        screenshot_path: Optional[str] = None,
        screenshot_attempted: bool = False,
        attempts: Optional[List["SelectorAttempt"]] = None,
    ):
        super().__init__(message, {
            "key": key,
            "description": description,
            "screenshot": screenshot_path,
        })
        self.key = key
        self.description = description
        self.screenshot_path = screenshot_path
        self.screenshot_attempted = screenshot_attempted
        self.attempts = attempts or []
