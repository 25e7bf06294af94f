"""
Browser session helpers.

Launches Chromium and opens a configured browser context, the same way the
E2E fixtures do, for code that runs outside pytest (the CLI).
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Optional

from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright

from .config import BrowserSettings

logger = logging.getLogger(__name__)


def context_options(settings: BrowserSettings) -> dict[str, Any]:
    """Keyword arguments for ``Browser.new_context``."""
    options: dict[str, Any] = {
        "viewport": {
            "width": settings.viewport_width,
            "height": settings.viewport_height,
        },
        "base_url": settings.base_url,
        "locale": "en-US",
    }
    if settings.record_video:
        options["record_video_dir"] = str(Path(settings.results_dir) / "videos")
    return options


async def launch_browser(playwright: Playwright, settings: BrowserSettings) -> Browser:
    """Launch Chromium with the configured headless and slow-mo options."""
    logger.debug(
        "Launching chromium (headless=%s, slow_mo=%s)",
        settings.headless,
        settings.slow_mo,
    )
    return await playwright.chromium.launch(
        headless=settings.headless,
        slow_mo=settings.slow_mo,
    )


async def new_context(browser: Browser, settings: BrowserSettings) -> BrowserContext:
    """Open an isolated browser context with default timeouts applied."""
    context = await browser.new_context(**context_options(settings))
    context.set_default_timeout(settings.timeout)
    context.set_default_navigation_timeout(settings.navigation_timeout)
    return context


@asynccontextmanager
async def browser_session(
    settings: Optional[BrowserSettings] = None,
) -> AsyncIterator[BrowserContext]:
    """
    Start Playwright, launch a browser and yield a fresh context.

    The context and the browser are closed when the block exits, whether it
    returns normally or raises.
    """
    settings = settings or BrowserSettings()

    async with async_playwright() as playwright:
        browser = await launch_browser(playwright, settings)
        try:
            context = await new_context(browser, settings)
            try:
                yield context
            finally:
                await context.close()
        finally:
            await browser.close()
            logger.debug("Browser closed")
