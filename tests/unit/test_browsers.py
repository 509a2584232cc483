"""
Tests for the Playwright browser adapter.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from retail_search_harness.exceptions import BrowserConnectionError, NavigationError
from retail_search_harness.interfaces import TagCategory


class TestPlaywrightElementHandle:
    """Test the PlaywrightElementHandle wrapper."""
    
    @pytest.fixture
    def mock_locator(self):
        """Create a mock Playwright locator."""
        locator = AsyncMock()
        locator.is_visible = AsyncMock(return_value=True)
        locator.evaluate = AsyncMock(return_value="input")
        locator.text_content = AsyncMock(return_value="Test Text")
        locator.wait_for = AsyncMock()
        locator.fill = AsyncMock()
        locator.click = AsyncMock()
        return locator
    
    @pytest.fixture
    def handle(self, mock_locator):
        from retail_search_harness.browsers import PlaywrightElementHandle
        return PlaywrightElementHandle(mock_locator, "#twotabsearchtextbox")
    
    def test_selector(self, handle):
        assert handle.selector == "#twotabsearchtextbox"
    
    @pytest.mark.asyncio
    async def test_is_visible(self, handle):
        assert await handle.is_visible() is True
    
    @pytest.mark.asyncio
    async def test_tag_category(self, handle, mock_locator):
        assert await handle.tag_name() == "input"
        assert await handle.tag_category() == TagCategory.INPUT
        
        mock_locator.evaluate = AsyncMock(return_value="h2")
        assert await handle.tag_category() == TagCategory.OTHER
    
    @pytest.mark.asyncio
    async def test_text_content(self, handle):
        assert await handle.text_content() == "Test Text"
    
    @pytest.mark.asyncio
    async def test_wait_for_visible(self, handle, mock_locator):
        await handle.wait_for_visible(5000)
        mock_locator.wait_for.assert_called_once_with(state="visible", timeout=5000)
    
    @pytest.mark.asyncio
    async def test_fill_and_click(self, handle, mock_locator):
        await handle.fill("laptop")
        await handle.click()
        mock_locator.fill.assert_called_once_with("laptop")
        mock_locator.click.assert_called_once()


class TestPlaywrightPage:
    """Test the PlaywrightPage wrapper."""
    
    @pytest.fixture
    def mock_page(self):
        page = MagicMock()
        page.url = "https://www.amazon.com/"
        locator = MagicMock()
        locator.count = AsyncMock(return_value=2)
        locator.all_text_contents = AsyncMock(return_value=["a", "b"])
        locator.first = MagicMock(name="first")
        page.locator = MagicMock(return_value=locator)
        page.goto = AsyncMock()
        page.title = AsyncMock(return_value="Amazon.com. Spend less.")
        page.wait_for_load_state = AsyncMock()
        page.wait_for_selector = AsyncMock()
        page.screenshot = AsyncMock(return_value=b"png")
        return page
    
    @pytest.fixture
    def page(self, mock_page):
        from retail_search_harness.browsers import PlaywrightPage
        return PlaywrightPage(mock_page)
    
    @pytest.mark.asyncio
    async def test_count(self, page, mock_page):
        assert await page.count(".s-result-item") == 2
        mock_page.locator.assert_called_with(".s-result-item")
    
    def test_locate_uses_first_match(self, page, mock_page):
        handle = page.locate("#twotabsearchtextbox")
        assert handle.selector == "#twotabsearchtextbox"
        assert handle.locator is mock_page.locator.return_value.first
    
    @pytest.mark.asyncio
    async def test_all_text_contents(self, page):
        assert await page.all_text_contents("h2") == ["a", "b"]
    
    @pytest.mark.asyncio
    async def test_title(self, page):
        assert await page.title() == "Amazon.com. Spend less."
    
    @pytest.mark.asyncio
    async def test_goto_failure_raises_navigation_error(self, page, mock_page):
        mock_page.goto = AsyncMock(side_effect=RuntimeError("net::ERR_NAME_NOT_RESOLVED"))
        with pytest.raises(NavigationError) as exc_info:
            await page.goto("https://www.amazon.com/", timeout_ms=1000)
        assert exc_info.value.url == "https://www.amazon.com/"
    
    @pytest.mark.asyncio
    async def test_wait_for_load_state(self, page, mock_page):
        await page.wait_for_load_state("networkidle", timeout_ms=10000)
        mock_page.wait_for_load_state.assert_called_once_with("networkidle", timeout=10000)
    
    @pytest.mark.asyncio
    async def test_screenshot_path_is_str(self, page, mock_page, tmp_path):
        await page.screenshot(tmp_path / "x.png")
        mock_page.screenshot.assert_called_once_with(path=str(tmp_path / "x.png"), full_page=False)


class TestPlaywrightBrowser:
    """Test the PlaywrightBrowser lifecycle guards."""
    
    def test_not_connected_before_launch(self):
        from retail_search_harness.browsers import PlaywrightBrowser
        assert PlaywrightBrowser().is_connected is False
    
    @pytest.mark.asyncio
    async def test_new_page_requires_launch(self):
        from retail_search_harness.browsers import PlaywrightBrowser
        with pytest.raises(BrowserConnectionError):
            await PlaywrightBrowser().new_page()
    
    @pytest.mark.asyncio
    async def test_close_without_launch(self):
        from retail_search_harness.browsers import PlaywrightBrowser
        await PlaywrightBrowser().close()
    
    @pytest.mark.asyncio
    async def test_new_page_applies_context_options_and_timeout(self):
        from retail_search_harness.browsers import PlaywrightBrowser, PlaywrightPage
        
        context = MagicMock()
        context.new_page = AsyncMock(return_value=MagicMock())
        browser = PlaywrightBrowser()
        browser._browser = MagicMock()
        browser._browser.new_context = AsyncMock(return_value=context)
        
        page = await browser.new_page(default_timeout_ms=5000, viewport={"width": 1280, "height": 720})
        await browser.new_page(default_timeout_ms=9000)
        
        assert isinstance(page, PlaywrightPage)
        browser._browser.new_context.assert_called_once_with(viewport={"width": 1280, "height": 720})
        context.set_default_timeout.assert_called_once_with(5000)
        assert context.new_page.call_count == 2
