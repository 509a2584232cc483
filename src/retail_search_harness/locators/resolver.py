"""
Locator Resolver - resilient element resolution for third-party markup.

Phases (each short-circuits on the first success):
1. SETTLE    - best-effort wait for load states and a quiescence delay
2. CATALOG   - persisted selectors in priority order, with visibility and
               content checks
3. DISCOVERY - built-in heuristic selectors; the first one that matches
               anything is promoted into the catalog
4. FAILURE   - diagnostic screenshot, then ElementNotFoundError
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Mapping, Optional, Tuple, TYPE_CHECKING
import asyncio
import logging
import time

from retail_search_harness.config.settings import LocatorSettings
from retail_search_harness.exceptions.browser import ElementNotFoundError
from retail_search_harness.interfaces.page import TagCategory
from retail_search_harness.locators.heuristics import HEURISTIC_SELECTORS, heuristics_for
from retail_search_harness.locators.waits import WaitOutcome, bounded_wait

if TYPE_CHECKING:
    from retail_search_harness.interfaces.page import IElementHandle, IPage
    from retail_search_harness.locators.catalog import SelectorCatalog

logger = logging.getLogger(__name__)


class ResolutionSource(Enum):
    """Where the winning selector came from."""
    CATALOG = "catalog"
    HEURISTIC = "heuristic"


class AttemptOutcome(Enum):
    """What happened when a single selector was probed."""
    ACCEPTED = "accepted"
    NO_MATCH = "no_match"
    NOT_VISIBLE = "not_visible"
    EMPTY_TEXT = "empty_text"
    ERROR = "error"


@dataclass
class SelectorAttempt:
    """One selector probe, kept for diagnostics."""
    source: ResolutionSource
    selector: str
    outcome: AttemptOutcome
    match_count: int = 0
    visible: Optional[bool] = None
    error: Optional[str] = None


@dataclass
class ResolvedHandle:
    """
    A resolved element.

    Only valid for the current page state; callers should discard it after
    use and resolve again after navigating.
    """
    key: str
    selector: str
    source: ResolutionSource
    element: "IElementHandle"
    match_count: int = 1
    attempts: List[SelectorAttempt] = field(default_factory=list)

    @property
    def discovered(self) -> bool:
        return self.source == ResolutionSource.HEURISTIC


class LocatorResolver:
    """
    Resolve logical element keys to live element handles.

    The catalog is owned by the caller and shared with the resolver;
    promote() on discovery is the only write the resolver makes.

    Usage:
        catalog = SelectorCatalog.from_path("locators/amazon-locators.json")
        resolver = LocatorResolver(catalog)
        handle = await resolver.resolve(page, "searchBar", "Search input field")
        await handle.element.fill("laptop")
    """

    def __init__(
        self,
        catalog: "SelectorCatalog",
        settings: Optional[LocatorSettings] = None,
        heuristics: Mapping[str, Tuple[str, ...]] = HEURISTIC_SELECTORS,
    ):
        self.catalog = catalog
        self.settings = settings or LocatorSettings()
        self.heuristics = heuristics

    async def resolve(self, page: "IPage", key: str, description: str) -> ResolvedHandle:
        """
        Find a usable element for a key.

        Args:
            page: Page-query capability for the current session
            key: Logical element key (e.g. "searchBar")
            description: Human-readable description for logs and errors

        Returns:
            ResolvedHandle bound to the first match of the winning selector

        Raises:
            ElementNotFoundError: If neither the catalog nor the heuristics
                produce an element
            CatalogPersistError: If a discovered selector cannot be written
                back; the catalog keeps its previous contents
        """
        selectors = self.catalog.get(key)
        candidates = heuristics_for(key, self.heuristics)

        if selectors is None and not candidates:
            logger.error(f"[{key}] no catalog entry and no heuristics for {description}")
            raise ElementNotFoundError(
                f'No locators configured for element "{key}" ({description})',
                key=key,
                description=description,
            )

        selectors = selectors or []
        attempts: List[SelectorAttempt] = []

        logger.info(f"[{key}] looking for {description} using {len(selectors)} catalog selectors")
        await self._settle(page)

        for selector in selectors:
            attempt, element = await self._try_catalog_selector(page, key, selector)
            attempts.append(attempt)
            if element is not None:
                logger.info(f"[{key}] found {description} using selector: {selector}")
                return ResolvedHandle(
                    key=key,
                    selector=selector,
                    source=ResolutionSource.CATALOG,
                    element=element,
                    match_count=attempt.match_count,
                    attempts=attempts,
                )

        logger.info(f"[{key}] catalog exhausted, trying {len(candidates)} heuristics for {description}")
        handle = await self._discover(page, key, candidates, attempts)
        if handle is not None:
            return handle

        screenshot_path, attempted = await self._capture_failure(page, key)
        raise ElementNotFoundError(
            f'Unable to find element "{description}" with any known selector. '
            f"Check the error screenshot.",
            key=key,
            description=description,
            screenshot_path=screenshot_path,
            screenshot_attempted=attempted,
            attempts=attempts,
        )

    async def _settle(self, page: "IPage") -> Tuple[WaitOutcome, ...]:
        """Give asynchronous rendering a chance before probing."""
        timeout = self.settings.settle_timeout_ms
        outcomes = await asyncio.gather(
            bounded_wait(page.wait_for_load_state("domcontentloaded", timeout_ms=timeout), "domcontentloaded"),
            bounded_wait(page.wait_for_load_state("networkidle", timeout_ms=timeout), "networkidle"),
            bounded_wait(page.wait_for_timeout(self.settings.quiescence_ms), "quiescence"),
        )
        return tuple(outcomes)

    async def _try_catalog_selector(
        self,
        page: "IPage",
        key: str,
        selector: str,
    ) -> Tuple[SelectorAttempt, Optional["IElementHandle"]]:
        """Probe one catalog selector; any probe error just fails this selector."""
        attempt = SelectorAttempt(ResolutionSource.CATALOG, selector, AttemptOutcome.NO_MATCH)
        logger.info(f"[{key}] trying selector: {selector}")

        try:
            attempt.match_count = await page.count(selector)
            if attempt.match_count == 0:
                logger.info(f"[{key}] no elements found for selector: {selector}")
                return attempt, None
            logger.info(f"[{key}] found {attempt.match_count} elements for selector: {selector}")

            element = page.locate(selector)
            attempt.visible = await element.is_visible()
            logger.info(f"[{key}] visible={attempt.visible} for selector: {selector}")
            if not attempt.visible:
                attempt.outcome = AttemptOutcome.NOT_VISIBLE
                return attempt, None

            if await element.tag_category() == TagCategory.INPUT:
                attempt.outcome = AttemptOutcome.ACCEPTED
                return attempt, element

            content = await element.text_content()
            logger.info(f'[{key}] visible element has content: "{content}"')
            if content and content.strip():
                attempt.outcome = AttemptOutcome.ACCEPTED
                return attempt, element

            logger.info(f"[{key}] element found but has no text content")
            attempt.outcome = AttemptOutcome.EMPTY_TEXT
            return attempt, None

        except Exception as e:
            logger.warning(f"[{key}] error trying selector {selector}: {e}")
            attempt.outcome = AttemptOutcome.ERROR
            attempt.error = str(e)
            return attempt, None

    async def _discover(
        self,
        page: "IPage",
        key: str,
        candidates: Tuple[str, ...],
        attempts: List[SelectorAttempt],
    ) -> Optional[ResolvedHandle]:
        """Take the first heuristic selector that matches anything and promote it."""
        for selector in candidates:
            attempt = SelectorAttempt(ResolutionSource.HEURISTIC, selector, AttemptOutcome.NO_MATCH)
            attempts.append(attempt)
            try:
                attempt.match_count = await page.count(selector)
            except Exception as e:
                logger.warning(f"[{key}] error trying heuristic {selector}: {e}")
                attempt.outcome = AttemptOutcome.ERROR
                attempt.error = str(e)
                continue

            logger.info(f"[{key}] heuristic {selector} matched {attempt.match_count} elements")
            if attempt.match_count == 0:
                continue

            attempt.outcome = AttemptOutcome.ACCEPTED
            self.catalog.promote(key, selector)
            logger.info(f"[{key}] discovered new selector: {selector}")

            element = page.locate(selector)
            await bounded_wait(
                element.wait_for_visible(self.settings.discovery_visible_timeout_ms),
                f"{key} to become visible",
            )
            return ResolvedHandle(
                key=key,
                selector=selector,
                source=ResolutionSource.HEURISTIC,
                element=element,
                match_count=attempt.match_count,
                attempts=attempts,
            )
        return None

    async def _capture_failure(self, page: "IPage", key: str) -> Tuple[Optional[str], bool]:
        """Best-effort screenshot and URL log for a failed resolution."""
        logger.info("Taking error screenshot and capturing debug info...")
        path = Path(self.settings.screenshot_dir) / f"error-{key}-{int(time.time() * 1000)}.png"
        written: Optional[str] = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            await page.screenshot(path)
            written = str(path)
        except Exception as e:
            logger.warning(f"[{key}] could not write error screenshot {path}: {e}")

        try:
            logger.info(f"Current page URL: {page.url}")
        except Exception:
            logger.debug("Current page URL unavailable")
        return written, True
