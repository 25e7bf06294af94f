"""
Home Page Object for the storefront landing page.
"""

import re
from typing import List, Optional

from playwright.async_api import Locator, Page

from ..urls import DEFAULT_BASE_URL, HOMEPAGE
from .base_page import BasePage


class HomePage(BasePage):
    """Page Object for the NEPTHIC home page."""

    def __init__(self, page: Page, base_url: str = DEFAULT_BASE_URL):
        super().__init__(page, base_url)
        self.path = HOMEPAGE

    # Selectors - Header
    @property
    def logo(self) -> Locator:
        return self.page.locator('a[href="/"]').filter(has_text="NEPTHIC").first

    @property
    def drops_link(self) -> Locator:
        return self.page.get_by_role("link", name=re.compile(r"^Drops$")).first

    @property
    def collections_link(self) -> Locator:
        return self.page.get_by_role("link", name=re.compile(r"^Collections$")).first

    @property
    def about_link(self) -> Locator:
        return self.page.get_by_role("link", name=re.compile(r"^About$")).first

    @property
    def profile_button(self) -> Locator:
        return self.page.locator('a[href="/profile"] button').first

    @property
    def logout_button(self) -> Locator:
        return self.page.get_by_role("button", name="Logout").first

    @property
    def welcome_text(self) -> Locator:
        """Greeting shown to a signed-in user."""
        return self.page.get_by_text(re.compile(r"Welcome, \w+"))

    @property
    def mobile_menu_button(self) -> Locator:
        return self.page.locator('button[aria-haspopup="dialog"]').last

    # Selectors - Hero
    @property
    def hero_section(self) -> Locator:
        return self.page.locator("section").filter(has=self.page.locator("canvas"))

    @property
    def hero_canvas(self) -> Locator:
        """3D animation canvas."""
        return self.page.locator("canvas[data-engine^='three.js']")

    @property
    def hero_heading(self) -> Locator:
        return self.page.get_by_role("heading", name="NEPTHIC", level=1)

    @property
    def shop_latest_drop_button(self) -> Locator:
        return self.page.get_by_role(
            "link", name=re.compile("Shop Latest Drop")).locator("button")

    # Selectors - Latest Drops
    @property
    def latest_drops_section(self) -> Locator:
        return self.page.locator("section").filter(has_text="Latest Drops")

    @property
    def latest_drops_heading(self) -> Locator:
        return self.page.get_by_role("heading", name="Latest Drops")

    @property
    def no_products_message(self) -> Locator:
        return self.page.get_by_text("No products available at the moment")

    # Selectors - Newsletter
    @property
    def newsletter_section(self) -> Locator:
        return self.page.locator("section").filter(has_text="Stay Updated")

    @property
    def newsletter_email_input(self) -> Locator:
        return self.newsletter_section.locator('input[type="email"]')

    @property
    def subscribe_button(self) -> Locator:
        return self.newsletter_section.get_by_role("button", name="Subscribe")

    # Selectors - Footer
    @property
    def footer_logo(self) -> Locator:
        return self.footer.get_by_role("heading", name="NEPTHIC")

    @property
    def instagram_link(self) -> Locator:
        return self.footer.get_by_role("link", name="Instagram")

    @property
    def twitter_link(self) -> Locator:
        return self.footer.get_by_role("link", name="Twitter")

    @property
    def tiktok_link(self) -> Locator:
        return self.footer.get_by_role("link", name="TikTok")

    def footer_link(self, name: str) -> Locator:
        """Footer link by its visible name, e.g. "Our Story" or "FAQ"."""
        return self.footer.get_by_role("link", name=name)

    # Actions
    async def navigate_to_home_page(self) -> None:
        await self.goto(self.path)

    async def click_logout(self) -> None:
        await self.logout_button.click()

    async def go_to_profile_page(self) -> None:
        """Open the profile page from the header."""
        await self.profile_button.click(force=True)

    async def click_shop_latest_drop(self) -> None:
        await self.shop_latest_drop_button.click()

    async def subscribe_to_newsletter(self, email: str) -> None:
        await self.newsletter_email_input.fill(email)
        await self.subscribe_button.click()

    async def click_footer_link(self, name: str) -> None:
        await self.footer_link(name).click()

    async def scroll_to_footer(self) -> None:
        await self.scroll_to(self.footer)

    # Verifications
    async def verify_home_page_loaded(self) -> bool:
        return await self.is_visible_within(self.hero_heading)

    async def is_user_logged_in(self) -> bool:
        return await self.is_visible_within(self.welcome_text, timeout=3000)

    async def get_welcome_message(self) -> Optional[str]:
        if not await self.is_user_logged_in():
            return None
        return await self.welcome_text.text_content()

    async def is_hero_section_visible(self) -> bool:
        return await self.is_visible_within(self.hero_section)

    async def is_canvas_rendered(self) -> bool:
        return await self.is_visible_within(self.hero_canvas)

    async def is_latest_drops_section_visible(self) -> bool:
        return await self.is_visible_within(self.latest_drops_section)

    async def is_newsletter_section_visible(self) -> bool:
        return await self.is_visible_within(self.newsletter_section)

    async def is_footer_visible(self) -> bool:
        return await self.is_visible_within(self.footer)

    async def get_newsletter_email_value(self) -> str:
        return await self.newsletter_email_input.input_value()

    async def get_footer_section_headings(self) -> List[str]:
        headings = await self.footer.locator("h4").all_text_contents()
        return [heading.strip() for heading in headings]

    async def verify_all_sections_visible(self) -> bool:
        """Check hero, latest drops, newsletter and footer sections."""
        return (
            await self.is_hero_section_visible()
            and await self.is_latest_drops_section_visible()
            and await self.is_newsletter_section_visible()
            and await self.is_footer_visible()
        )

    async def verify_log_out_button_visible(self) -> bool:
        return await self.is_visible_within(self.logout_button)
