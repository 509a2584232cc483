"""
Search Flow - drive the storefront search end to end.

Open the homepage, submit a search through resolved elements, check that
a matching product title is listed and that the first price is well formed.
Elements with drifting markup (search bar, search button, price) go through
the LocatorResolver; stable page-level checks use plain selectors.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TYPE_CHECKING
import asyncio
import logging
import time

from retail_search_harness.config.settings import SearchSettings
from retail_search_harness.exceptions.browser import NavigationError
from retail_search_harness.exceptions.search import NoResultsError, SearchError
from retail_search_harness.locators.waits import bounded_wait
from retail_search_harness.utils.price import Price, parse_price
from retail_search_harness.utils.retry import RetryConfig, retry_async

if TYPE_CHECKING:
    from retail_search_harness.interfaces.page import IPage
    from retail_search_harness.locators.resolver import LocatorResolver

logger = logging.getLogger(__name__)

RESULT_INDICATORS = (
    ".s-result-list",
    ".s-search-results",
    '[data-component-type="s-search-results"]',
    ".s-main-slot",
    ".s-result-item",
)

RESULTS_CONTAINER = ".s-result-list, .s-search-results"

NO_RESULTS_SELECTOR = ".s-no-results-result"

TITLE_SELECTORS = (
    ".s-search-results h2 .a-text-normal",
    ".s-result-item h2 .a-link-normal",
    ".s-card-container h2 a",
    '[data-cel-widget*="search_result_"] h2 span',
)


@dataclass
class SearchOutcome:
    """Everything a completed search run verified."""
    term: str
    url: str
    title: str
    price: Price


class SearchFlow:
    """
    Search steps for one page session.

    Example:
        >>> flow = SearchFlow(page, resolver)
        >>> await flow.open_homepage()
        >>> await flow.search("laptop")
        >>> title = await flow.verify_product_results("laptop")
        >>> price = await flow.verify_price()
    """

    def __init__(
        self,
        page: "IPage",
        resolver: "LocatorResolver",
        settings: Optional[SearchSettings] = None,
    ):
        self.page = page
        self.resolver = resolver
        self.settings = settings or SearchSettings()

    async def open_homepage(self) -> None:
        """
        Navigate to the storefront and check its title.

        Raises:
            NavigationError: If navigation fails or the title is unexpected
        """
        s = self.settings
        await self.page.goto(s.base_url, timeout_ms=s.navigation_timeout_ms)
        await self.page.wait_for_load_state("networkidle", timeout_ms=s.navigation_timeout_ms)

        title = await self.page.title()
        if s.expected_title not in title:
            raise NavigationError(
                f"Unexpected homepage title {title!r}, expected it to contain {s.expected_title!r}",
                url=self.page.url,
            )
        logger.info(f"Opened {s.base_url} ({title})")

    async def search(self, term: str) -> str:
        """
        Submit a search, retrying the whole interaction on failure.

        An attempt that lands on a URL without a search query is repeated at
        once; an attempt that raises is repeated after the retry delay and the
        error is re-raised on the last attempt. Either way the final URL must
        look like a results page.

        Args:
            term: Search term

        Returns:
            URL of the results page

        Raises:
            SearchError: If the search never reached a results page
        """
        s = self.settings
        attempt_number = 0

        async def attempt() -> bool:
            nonlocal attempt_number
            attempt_number += 1
            logger.info(f"Search attempt {attempt_number} of {s.max_attempts}")
            return await self._submit_search(term)

        config = RetryConfig(
            max_attempts=s.max_attempts,
            initial_delay_ms=s.retry_delay_ms,
            backoff_multiplier=1.0,
            retry_if_result=lambda reached: not reached,
        )
        await retry_async(attempt, config)

        url = self.page.url
        logger.info(f"Current URL after search: {url}")
        if "/s?k=" not in url and "search" not in url:
            raise SearchError("Failed to reach search results page", term=term, url=url)
        return url

    async def _submit_search(self, term: str) -> bool:
        """Run one search interaction; False if no search URL was reached."""
        s = self.settings

        search_bar = await self.resolver.resolve(self.page, "searchBar", "Search input field")
        await search_bar.element.wait_for_visible(s.visible_timeout_ms)
        await search_bar.element.fill(term)

        button = await self.resolver.resolve(self.page, "searchButton", "Search button")
        await button.element.wait_for_visible(s.visible_timeout_ms)
        await button.element.click()

        logger.info("Waiting for navigation...")
        await bounded_wait(
            self.page.wait_for_load_state("networkidle", timeout_ms=s.navigation_timeout_ms),
            "navigation",
        )
        await asyncio.gather(
            bounded_wait(
                self.page.wait_for_load_state("domcontentloaded", timeout_ms=s.indicator_timeout_ms),
                "domcontentloaded",
            ),
            bounded_wait(
                self.page.wait_for_load_state("networkidle", timeout_ms=s.indicator_timeout_ms),
                "networkidle",
            ),
        )

        if "s?k=" not in self.page.url:
            logger.info("Search URL not detected, retrying...")
            return False

        await self._wait_for_any(RESULT_INDICATORS + (NO_RESULTS_SELECTOR,), s.indicator_timeout_ms)
        return True

    async def _wait_for_any(self, selectors: Sequence[str], timeout_ms: int) -> str:
        """Wait until any of the selectors is attached; return the first one seen."""
        tasks = {
            asyncio.ensure_future(self.page.wait_for_selector(selector, timeout_ms=timeout_ms)): selector
            for selector in selectors
        }
        pending = set(tasks)
        try:
            while pending:
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                for task in done:
                    if task.exception() is None:
                        logger.debug(f"Result indicator appeared: {tasks[task]}")
                        return tasks[task]
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
                elif not task.cancelled():
                    task.exception()
        raise SearchError(f"None of {len(selectors)} result indicators appeared", url=self.page.url)

    async def product_titles(self, term: str) -> tuple[Optional[str], List[str]]:
        """
        Scan the listing for a title containing the term.

        Returns:
            (matching title or None, titles from the last selector that found any)
        """
        all_titles: List[str] = []
        for selector in TITLE_SELECTORS:
            try:
                texts = await self.page.all_text_contents(selector)
            except Exception as e:
                logger.debug(f"Title selector {selector} failed: {e}")
                continue

            titles = [t.strip() for t in texts if t and t.strip()]
            logger.info(f"Found {len(titles)} titles with selector: {selector}")
            if titles:
                all_titles = titles

            for title in titles:
                if term.lower() in title.lower():
                    logger.info(f"Found matching title: {title}")
                    return title, all_titles
        return None, all_titles

    async def verify_product_results(self, term: str) -> str:
        """
        Check that the results list a product matching the term.

        Returns:
            The first matching product title

        Raises:
            NoResultsError: If the site reports no results
            SearchError: If no listed title contains the term
        """
        try:
            logger.info("Waiting for search results container...")
            await self.page.wait_for_selector(
                RESULTS_CONTAINER,
                timeout_ms=self.settings.results_timeout_ms,
                state="visible",
            )

            notice = await self._no_results_notice()
            if notice:
                raise NoResultsError(f"Site returned no results: {notice}", notice=notice)

            logger.info(f"Looking for product title containing: {term}")
            title, all_titles = await self.product_titles(term)
            if title is None:
                logger.info(f"All found titles: {all_titles}")
                raise SearchError(
                    f'Could not find any product title containing "{term}". '
                    f"Available titles: {', '.join(all_titles[:3])}...",
                    term=term,
                    url=self.page.url,
                )
            return title
        except Exception:
            await self._capture("search-results-error")
            raise

    async def _no_results_notice(self) -> Optional[str]:
        try:
            if await self.page.count(NO_RESULTS_SELECTOR) == 0:
                return None
            text = await self.page.locate(NO_RESULTS_SELECTOR).text_content()
        except Exception as e:
            logger.debug(f"No-results check failed: {e}")
            return None
        return text.strip() if text and text.strip() else None

    async def verify_price(self) -> Price:
        """
        Check the first product's price.

        Raises:
            ElementNotFoundError: If no price element can be resolved
            PriceFormatError: If the price text is malformed
        """
        handle = await self.resolver.resolve(self.page, "firstProductPrice", "First product price")
        await handle.element.wait_for_visible(self.settings.indicator_timeout_ms)

        price = parse_price(await handle.element.text_content(), self.settings.currency_symbol)
        logger.info(f"Verified price: {price.text} (numeric value: {price.amount})")
        return price

    async def run(self, term: str) -> SearchOutcome:
        """Run every step for one search term."""
        await self.open_homepage()
        url = await self.search(term)
        title = await self.verify_product_results(term)
        price = await self.verify_price()
        return SearchOutcome(term=term, url=url, title=title, price=price)

    async def _capture(self, prefix: str) -> Optional[Path]:
        """Best-effort screenshot next to the resolver's diagnostics."""
        path = Path(self.resolver.settings.screenshot_dir) / f"{prefix}-{int(time.time() * 1000)}.png"
        try:
            await self.page.screenshot(path, full_page=True)
        except Exception as e:
            logger.warning(f"Could not write screenshot {path}: {e}")
            return None
        return path
