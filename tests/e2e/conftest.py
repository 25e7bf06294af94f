"""
Pytest fixtures for Playwright E2E tests.

This module provides fixtures for the browser, isolated contexts and pages,
and the storefront page objects. Every fixture shares the session event
loop so the browser launched once per session can serve every test.
"""

import logging
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from nepthic_e2e.browser import launch_browser, new_context
from nepthic_e2e.config import BrowserSettings, Settings, get_settings
from nepthic_e2e.data import SignUpFormData, build_sign_up_form
from nepthic_e2e.data import registered_user as registered_user_data
from nepthic_e2e.pages import BasePage, HomePage, ProfilePage, SignInPage, SignUpPage

logger = logging.getLogger(__name__)

MOBILE_VIEWPORT = {"width": 390, "height": 844}


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Suite settings loaded from the environment or config file."""
    return get_settings()


@pytest.fixture(scope="session")
def browser_settings(settings: Settings) -> BrowserSettings:
    return settings.browser


@pytest.fixture(scope="session")
def base_url(browser_settings: BrowserSettings) -> str:
    return browser_settings.base_url


# =============================================================================
# Playwright Fixtures
# =============================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def playwright() -> AsyncGenerator[Playwright, None]:
    """Create a Playwright instance for the test session."""
    async with async_playwright() as pw:
        yield pw


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser(
    playwright: Playwright, browser_settings: BrowserSettings
) -> AsyncGenerator[Browser, None]:
    """Launch Chromium once for the test session."""
    browser = await launch_browser(playwright, browser_settings)
    yield browser
    await browser.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    browser: Browser, browser_settings: BrowserSettings
) -> AsyncGenerator[BrowserContext, None]:
    """
    Create a new browser context for each test.

    This provides isolation between tests with separate cookies,
    storage, and other browser state.
    """
    context = await new_context(browser, browser_settings)
    yield context
    await context.close()


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    request, context: BrowserContext, browser_settings: BrowserSettings
) -> AsyncGenerator[Page, None]:
    """Create a new page for each test; screenshot it if the test fails."""
    page = await context.new_page()
    page.on("framenavigated", lambda frame: logger.debug("Navigated to: %s", frame.url))

    yield page

    rep_call = getattr(request.node, "rep_call", None)
    if rep_call is not None and rep_call.failed and not page.is_closed():
        screenshot_dir = Path(browser_settings.results_dir) / "screenshots"
        screenshot_dir.mkdir(parents=True, exist_ok=True)
        await BasePage(page, browser_settings.base_url).take_screenshot(
            request.node.name, str(screenshot_dir))

    await page.close()


@pytest_asyncio.fixture(loop_scope="session")
async def mobile_page(
    browser: Browser, browser_settings: BrowserSettings
) -> AsyncGenerator[Page, None]:
    """Page in a phone-sized context."""
    mobile_settings = browser_settings.model_copy(update={
        "viewport_width": MOBILE_VIEWPORT["width"],
        "viewport_height": MOBILE_VIEWPORT["height"],
    })
    context = await new_context(browser, mobile_settings)
    page = await context.new_page()
    yield page
    await context.close()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Hook to store test result for the page fixture's failure screenshot."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


# =============================================================================
# Page Object Fixtures
# =============================================================================

@pytest.fixture
def sign_up_page(page: Page, base_url: str) -> SignUpPage:
    return SignUpPage(page, base_url)


@pytest.fixture
def sign_in_page(page: Page, base_url: str) -> SignInPage:
    return SignInPage(page, base_url)


@pytest.fixture
def home_page(page: Page, base_url: str) -> HomePage:
    return HomePage(page, base_url)


@pytest.fixture
def profile_page(page: Page, base_url: str) -> ProfilePage:
    return ProfilePage(page, base_url)


# =============================================================================
# Test Data Fixtures
# =============================================================================

@pytest.fixture
def new_user() -> SignUpFormData:
    """Fresh sign-up data with its own disposable mailbox."""
    return build_sign_up_form()


@pytest.fixture
def registered_user(settings: Settings) -> SignUpFormData:
    """The account that already exists on the storefront."""
    return registered_user_data(settings.user)
