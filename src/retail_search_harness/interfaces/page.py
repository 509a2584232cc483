"""
Page Interface - Abstract base classes for the page-query capability.

The locator resolver and the search flow only talk to these interfaces, so
the Playwright adapter can be swapped for a fake page in tests.

Example:
    >>> from retail_search_harness.browsers import PlaywrightBrowser
    >>> browser = PlaywrightBrowser()
    >>> await browser.launch(headless=True)
    >>> page = await browser.new_page()
    >>> count = await page.count("#twotabsearchtextbox")
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Union


class TagCategory(Enum):
    """Whether an element is expected to carry visible text."""
    INPUT = "input"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag_name: Optional[str]) -> "TagCategory":
        """Classify a tag name; form controls carry no meaningful text."""
        if tag_name and tag_name.lower() in INPUT_TAGS:
            return cls.INPUT
        return cls.OTHER


INPUT_TAGS = frozenset({"input", "textarea", "select"})


class IElementHandle(ABC):
    """
    A live reference to the first element matching a selector.

    Handles are only valid for the current page state and must not be
    kept across navigations.
    """

    @property
    @abstractmethod
    def selector(self) -> str:
        """The selector this handle was created from."""
        ...

    @abstractmethod
    async def is_visible(self) -> bool:
        """Check if the element is visible."""
        ...

    @abstractmethod
    async def tag_name(self) -> str:
        """Get the lowercase tag name."""
        ...

    async def tag_category(self) -> TagCategory:
        """Classify the element as an input-like control or not."""
        return TagCategory.from_tag(await self.tag_name())

    @abstractmethod
    async def text_content(self) -> Optional[str]:
        """
        Get the text content of this element.

        Returns:
            The text content, or None if the element has none
        """
        ...

    @abstractmethod
    async def wait_for_visible(self, timeout_ms: int) -> None:
        """
        Wait for the element to become visible.

        Args:
            timeout_ms: Maximum time to wait
        """
        ...

    @abstractmethod
    async def fill(self, value: str) -> None:
        """Fill this element with text."""
        ...

    @abstractmethod
    async def click(self) -> None:
        """Click on this element."""
        ...


class IPage(ABC):
    """
    Abstract interface for the page operations the harness needs.

    Any of the query methods may raise a transient error; callers decide
    whether that is fatal.
    """

    @property
    @abstractmethod
    def url(self) -> str:
        """Get the current page URL."""
        ...

    @abstractmethod
    async def title(self) -> str:
        """Get the current page title."""
        ...

    @abstractmethod
    async def goto(self, url: str, timeout_ms: Optional[int] = None) -> None:
        """
        Navigate to a URL.

        Args:
            url: The URL to navigate to
            timeout_ms: Navigation timeout
        """
        ...

    @abstractmethod
    async def count(self, selector: str) -> int:
        """
        Count the elements matching a selector.

        Args:
            selector: CSS, XPath or Playwright selector

        Returns:
            Number of matching elements
        """
        ...

    @abstractmethod
    def locate(self, selector: str) -> IElementHandle:
        """
        Get a handle to the first element matching a selector.

        The handle is lazy: nothing is queried until it is used.
        """
        ...

    @abstractmethod
    async def all_text_contents(self, selector: str) -> List[str]:
        """Get the text content of every element matching a selector."""
        ...

    @abstractmethod
    async def wait_for_selector(
        self,
        selector: str,
        timeout_ms: Optional[int] = None,
        state: str = "attached",
    ) -> None:
        """
        Wait until an element matching the selector reaches a state.

        Raises:
            Exception: The underlying engine's timeout error
        """
        ...

    @abstractmethod
    async def wait_for_load_state(self, state: str = "load", timeout_ms: Optional[int] = None) -> None:
        """
        Wait for a load state.

        Args:
            state: "load", "domcontentloaded" or "networkidle"
            timeout_ms: Maximum time to wait
        """
        ...

    @abstractmethod
    async def wait_for_timeout(self, timeout_ms: int) -> None:
        """Pause for a fixed amount of time."""
        ...

    @abstractmethod
    async def screenshot(self, path: Union[str, Path], full_page: bool = False) -> Any:
        """
        Capture a screenshot to a file.

        Args:
            path: Output file path
            full_page: Capture the full scrollable page
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the page."""
        ...
