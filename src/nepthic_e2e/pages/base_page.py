"""
Base Page Object class with common functionality for all storefront pages.
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Pattern, Union

from playwright.async_api import Locator, Page, expect
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..urls import DEFAULT_BASE_URL


class BasePage:
    """Base class for all Page Objects with common functionality."""

    def __init__(self, page: Page, base_url: str = DEFAULT_BASE_URL):
        self.page = page
        self.base_url = base_url.rstrip("/")

    # Header selectors
    @property
    def logo(self) -> Locator:
        """Brand logo linking to the home page."""
        return self.page.locator('a:has-text("NEPTHIC")').first

    @property
    def drops_link(self) -> Locator:
        """Drops navigation link."""
        return self.page.get_by_role("link", name="Drops").first

    @property
    def collections_link(self) -> Locator:
        """Collections navigation link."""
        return self.page.get_by_role("link", name="Collections").first

    @property
    def about_link(self) -> Locator:
        """About navigation link."""
        return self.page.get_by_role("link", name="About").first

    @property
    def theme_toggle_button(self) -> Locator:
        """Light/dark theme switch."""
        return self.page.locator('button[title*="Switch to"]').first

    @property
    def profile_button(self) -> Locator:
        """Profile entry in the header."""
        return self.page.locator('a[href="/profile"]').first

    @property
    def cart_button(self) -> Locator:
        """Cart button in the header."""
        return self.page.locator('a[href="/cart"] button').first

    @property
    def login_button(self) -> Locator:
        """Login button shown to anonymous visitors."""
        return self.page.get_by_role("button", name="Login").first

    @property
    def mobile_menu_button(self) -> Locator:
        """Hamburger menu on narrow viewports."""
        return self.page.locator('button[aria-haspopup="dialog"]')

    @property
    def toast_close_button(self) -> Locator:
        """Close button of a toast notification."""
        return self.page.get_by_role("button", name="Close toast")

    # Footer selectors
    @property
    def footer(self) -> Locator:
        """Page footer."""
        return self.page.locator("footer")

    @property
    def footer_logo(self) -> Locator:
        """Brand heading in the footer."""
        return self.page.locator('footer h3:has-text("NEPTHIC")')

    @property
    def footer_description(self) -> Locator:
        """Tagline in the footer."""
        return self.page.get_by_text("Premium streetwear for the next generation.")

    @property
    def instagram_link(self) -> Locator:
        return self.page.get_by_role("link", name="Instagram")

    @property
    def twitter_link(self) -> Locator:
        return self.page.get_by_role("link", name="X (Twitter)")

    @property
    def tiktok_link(self) -> Locator:
        return self.page.get_by_role("link", name="TikTok")

    @property
    def footer_copyright(self) -> Locator:
        return self.page.get_by_text(re.compile(r"NEPTHIC\. All rights reserved\."))

    # Navigation methods
    async def goto(self, path: str = "") -> None:
        """Navigate to a path relative to the base URL."""
        url = f"{self.base_url}/{path.lstrip('/')}" if path else self.base_url
        await self.page.goto(url)

    async def get_title(self) -> str:
        """Get the page title."""
        return await self.page.title()

    async def get_current_url(self) -> str:
        """Get the current URL."""
        return self.page.url

    async def wait_for_url(self, url_pattern: Union[str, Pattern[str]]) -> None:
        """Wait for the URL to match a string or regex."""
        await self.page.wait_for_url(url_pattern)

    async def reload(self) -> None:
        await self.page.reload()

    async def go_back(self) -> None:
        await self.page.go_back()

    async def go_forward(self) -> None:
        await self.page.go_forward()

    async def wait_for_timeout(self, ms: float) -> None:
        """Wait for a fixed time."""
        await self.page.wait_for_timeout(ms)

    async def wait_for_page_load(self, timeout: int = 30000) -> None:
        """Wait for page to fully load."""
        await self.page.wait_for_load_state("networkidle", timeout=timeout)

    async def wait_for_network_idle(self, timeout: int = 5000) -> None:
        """Wait until there are no network connections for 500 ms."""
        await self.page.wait_for_load_state("networkidle", timeout=timeout)

    async def wait_for_dom_ready(self) -> None:
        await self.page.wait_for_load_state("domcontentloaded")

    # Header actions
    async def click_logo(self) -> None:
        await self.logo.click()

    async def navigate_to_drops(self) -> None:
        await self.drops_link.click()

    async def navigate_to_collections(self) -> None:
        await self.collections_link.click()

    async def navigate_to_about(self) -> None:
        await self.about_link.click()

    async def navigate_to_login(self) -> None:
        await self.login_button.click()

    async def toggle_theme(self) -> None:
        await self.theme_toggle_button.click()

    async def click_profile_button(self) -> None:
        await self.profile_button.click()

    async def click_cart_button(self) -> None:
        await self.cart_button.click()

    async def open_mobile_menu(self) -> None:
        await self.mobile_menu_button.click()

    # Common interaction methods
    async def fill_input(
        self, locator: Locator, value: str, clear_first: bool = True
    ) -> None:
        """Fill an input field."""
        if clear_first:
            await locator.clear()
        await locator.fill(value)

    async def scroll_to(self, locator: Locator) -> None:
        await locator.scroll_into_view_if_needed()

    async def is_visible_within(self, locator: Locator, timeout: int = 5000) -> bool:
        """Wait up to ``timeout`` ms for an element to become visible."""
        try:
            await locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError:
            return False
        return True

    async def wait_and_click(self, locator: Locator, timeout: int = 5000) -> None:
        """Wait for an element to be visible, then click it."""
        await locator.wait_for(state="visible", timeout=timeout)
        await locator.click()

    async def close_toast(self) -> None:
        """Dismiss the toast shown after sign-in and similar actions."""
        await self.toast_close_button.click()

    async def is_dark_mode(self) -> bool:
        """Check whether the dark theme is active."""
        classes = await self.page.locator("html").get_attribute("class") or ""
        return "dark" in classes.split()

    async def take_screenshot(
        self, name: str, directory: str = "test-results/screenshots"
    ) -> bytes:
        """Take a timestamped screenshot."""
        timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S-%f")
        path = Path(directory) / f"{name}-{timestamp}.png"
        return await self.page.screenshot(path=str(path))

    # Common verification helpers
    async def verify_footer_visible(self) -> bool:
        return await self.footer.is_visible()

    async def verify_footer_links_present(self) -> bool:
        """Check that all social links in the footer are visible."""
        return (
            await self.instagram_link.is_visible()
            and await self.twitter_link.is_visible()
            and await self.tiktok_link.is_visible()
        )

    # Common assertion helpers
    async def assert_url_contains(self, text: str) -> None:
        """Assert that current URL contains specific text."""
        await expect(self.page).to_have_url(re.compile(re.escape(text)))

    async def assert_visible(self, locator: Locator) -> None:
        """Assert that an element is visible."""
        await expect(locator).to_be_visible()

    async def assert_text_content(self, locator: Locator, text: str) -> None:
        """Assert that element contains specific text."""
        await expect(locator).to_contain_text(text)

    async def wait_for_toast(
            self, text: Optional[str] = None, timeout: int = 5000) -> None:
        """Wait for a toast notification to appear."""
        toast = self.page.locator("[data-sonner-toast], [role='status'], [role='alert']")
        if text:
            await expect(toast.filter(has_text=text).first).to_be_visible(timeout=timeout)
        else:
            await expect(toast.first).to_be_visible(timeout=timeout)
