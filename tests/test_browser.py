"""
Tests for browser session helpers with Playwright mocked out.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from nepthic_e2e import browser
from nepthic_e2e.config import BrowserSettings


def test_context_options():
    settings = BrowserSettings(
        base_url="https://staging.nepthic.com",
        viewport_width=390,
        viewport_height=844,
    )

    options = browser.context_options(settings)

    assert options["viewport"] == {"width": 390, "height": 844}
    assert options["base_url"] == "https://staging.nepthic.com"
    assert "record_video_dir" not in options


def test_context_options_with_video(tmp_path):
    settings = BrowserSettings(record_video=True, results_dir=str(tmp_path))

    options = browser.context_options(settings)

    assert options["record_video_dir"] == str(tmp_path / "videos")


@pytest.fixture
def playwright_mocks():
    context = MagicMock()
    context.close = AsyncMock()

    launched = MagicMock()
    launched.new_context = AsyncMock(return_value=context)
    launched.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=launched)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=playwright)
    manager.__aexit__ = AsyncMock(return_value=False)

    with patch.object(browser, "async_playwright", return_value=manager):
        yield playwright, launched, context


class TestBrowserSession:

    @pytest.mark.asyncio
    async def test_yields_configured_context(self, playwright_mocks):
        playwright, launched, context = playwright_mocks
        settings = BrowserSettings(headless=False, slow_mo=100, timeout=5000)

        async with browser.browser_session(settings) as session_context:
            assert session_context is context

        playwright.chromium.launch.assert_awaited_once_with(headless=False, slow_mo=100)
        context.set_default_timeout.assert_called_once_with(5000)
        context.set_default_navigation_timeout.assert_called_once_with(30000)
        context.close.assert_awaited_once()
        launched.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_closes_on_error(self, playwright_mocks):
        _, launched, context = playwright_mocks

        with pytest.raises(RuntimeError):
            async with browser.browser_session(BrowserSettings()):
                raise RuntimeError("flow failed")

        context.close.assert_awaited_once()
        launched.close.assert_awaited_once()
