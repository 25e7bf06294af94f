"""
Profile Page Object for account details tests.
"""

from playwright.async_api import Locator, Page

from ..urls import DEFAULT_BASE_URL, PROFILE
from .base_page import BasePage


class ProfilePage(BasePage):
    """Page Object for the personal information page."""

    def __init__(self, page: Page, base_url: str = DEFAULT_BASE_URL):
        super().__init__(page, base_url)
        self.path = PROFILE

    # Selectors
    @property
    def heading(self) -> Locator:
        return self.page.get_by_role("heading", name="Personal Information")

    @property
    def subheading(self) -> Locator:
        return self.page.get_by_text(
            "Update your personal details and account information")

    @property
    def full_name_input(self) -> Locator:
        return self.page.locator('input[id="name"]')

    @property
    def username_input(self) -> Locator:
        return self.page.locator('input[id="username"]')

    @property
    def phone_input(self) -> Locator:
        return self.page.locator('input[id="phone"]')

    @property
    def email_input(self) -> Locator:
        return self.page.locator('input[id="email"]')

    @property
    def role_input(self) -> Locator:
        return self.page.locator('input[id="role"]')

    @property
    def update_profile_button(self) -> Locator:
        return self.page.get_by_role("button", name="Update Profile")

    @property
    def orders_tab(self) -> Locator:
        return self.page.get_by_role("button", name="Orders")

    @property
    def favorites_tab(self) -> Locator:
        return self.page.get_by_role("button", name="Favorites")

    # Actions
    async def navigate_to_profile(self) -> None:
        await self.goto(self.path)

    async def update_profile(self, full_name: str, username: str, phone: str) -> None:
        """Edit the personal details and submit them."""
        await self.full_name_input.fill(full_name)
        await self.phone_input.fill(phone)
        await self.username_input.fill(username)
        await self.update_profile_button.click()

    # Verifications
    async def verify_profile_page_loaded(self) -> bool:
        return (
            await self.is_visible_within(self.heading)
            and await self.is_visible_within(self.subheading)
        )

    async def verify_all_form_fields_visible(self) -> bool:
        for field in (
            self.full_name_input,
            self.username_input,
            self.phone_input,
            self.email_input,
            self.role_input,
            self.update_profile_button,
        ):
            if not await self.is_visible_within(field):
                return False
        return True

    async def get_full_name(self) -> str:
        return await self.full_name_input.input_value()

    async def get_username(self) -> str:
        return await self.username_input.input_value()

    async def get_email(self) -> str:
        return await self.email_input.input_value()
