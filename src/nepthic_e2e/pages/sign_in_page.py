"""
Sign In Page Object for authentication-related tests.
"""

import re

from playwright.async_api import Locator, Page, expect

from ..urls import DEFAULT_BASE_URL, SIGNIN_PAGE
from .base_page import BasePage


class SignInPage(BasePage):
    """Page Object for the NEPTHIC sign-in page."""

    def __init__(self, page: Page, base_url: str = DEFAULT_BASE_URL):
        super().__init__(page, base_url)
        self.path = SIGNIN_PAGE

    # Selectors
    @property
    def theme_toggle_button(self) -> Locator:
        return self.page.locator('button[title="Switch to light mode"]').first

    @property
    def profile_button(self) -> Locator:
        return (
            self.page.get_by_role("link", name="")
            .filter(has=self.page.locator("svg.lucide-user"))
            .first
        )

    @property
    def sign_in_heading(self) -> Locator:
        return self.page.get_by_role(
            "heading", name=re.compile("Sign In|Login", re.IGNORECASE)).first

    @property
    def sign_in_sub_heading(self) -> Locator:
        return self.page.get_by_text(
            re.compile("Welcome back|Enter your credentials", re.IGNORECASE)).first

    @property
    def google_sign_in_button(self) -> Locator:
        return self.page.get_by_role(
            "button", name=re.compile("Sign in with Google", re.IGNORECASE))

    @property
    def email_input(self) -> Locator:
        """Email or username input field."""
        return self.page.locator(
            'input[placeholder="Enter your email or username"]').first

    @property
    def password_input(self) -> Locator:
        return self.page.locator('input[type="password"]').first

    @property
    def remember_me_checkbox(self) -> Locator:
        return self.page.locator('input[type="checkbox"]')

    @property
    def remember_me_label(self) -> Locator:
        return self.page.get_by_text("Remember me")

    @property
    def forgot_password_link(self) -> Locator:
        return self.page.get_by_role(
            "link", name=re.compile(r"Forgot password|Forgot\?", re.IGNORECASE))

    @property
    def sign_in_submit_button(self) -> Locator:
        return self.page.get_by_role(
            "button", name=re.compile("Sign In|Login", re.IGNORECASE)).last

    @property
    def divider_text(self) -> Locator:
        return self.page.get_by_text("Or sign in with email")

    @property
    def sign_up_link(self) -> Locator:
        return self.page.get_by_role("link", name="Sign up")

    @property
    def sign_up_link_text(self) -> Locator:
        return self.page.get_by_text("Don't have an account?")

    @property
    def footer_copyright(self) -> Locator:
        return self.page.get_by_text("© 2025 NEPTHIC. All rights reserved.")

    # Actions
    async def navigate_to_sign_in(self) -> None:
        """Navigate to the sign-in page."""
        await self.goto(self.path)

    async def fill_email(self, email: str) -> None:
        await self.email_input.fill(email)

    async def fill_password(self, password: str) -> None:
        await self.password_input.fill(password)

    async def fill_sign_in_form(self, email: str, password: str) -> None:
        await self.fill_email(email)
        await self.fill_password(password)

    async def check_remember_me(self) -> None:
        if not await self.remember_me_checkbox.is_checked():
            await self.remember_me_checkbox.check()

    async def uncheck_remember_me(self) -> None:
        if await self.remember_me_checkbox.is_checked():
            await self.remember_me_checkbox.uncheck()

    async def submit_sign_in(self) -> None:
        await self.sign_in_submit_button.click()

    async def sign_in_with_google(self) -> None:
        await self.google_sign_in_button.click()

    async def click_forgot_password(self) -> None:
        await self.forgot_password_link.click()

    async def click_sign_up_link(self) -> None:
        await self.sign_up_link.click()

    async def sign_in(
        self, email: str, password: str, remember_me: bool = False
    ) -> None:
        """
        Perform sign-in with given credentials.

        Args:
            email: User email or username
            password: User password
            remember_me: Whether to check remember me option
        """
        await self.fill_sign_in_form(email, password)
        if remember_me:
            await self.check_remember_me()
        await self.submit_sign_in()

    # Verifications
    async def verify_sign_in_page_loaded(self) -> bool:
        return await self.sign_in_heading.is_visible()

    async def verify_email_field_visible(self) -> bool:
        return await self.email_input.is_visible()

    async def verify_password_field_visible(self) -> bool:
        return await self.password_input.is_visible()

    async def verify_all_form_fields_visible(self) -> bool:
        return (
            await self.email_input.is_visible()
            and await self.password_input.is_visible()
            and await self.sign_in_submit_button.is_visible()
        )

    async def verify_sign_in_button_enabled(self) -> bool:
        return await self.sign_in_submit_button.is_enabled()

    async def verify_google_sign_in_button_visible(self) -> bool:
        return await self.google_sign_in_button.is_visible()

    async def verify_sign_up_link_visible(self) -> bool:
        return await self.sign_up_link.is_visible()

    async def verify_forgot_password_link_visible(self) -> bool:
        return await self.forgot_password_link.is_visible()

    async def get_email_value(self) -> str:
        return await self.email_input.input_value()

    async def get_password_value(self) -> str:
        return await self.password_input.input_value()

    async def is_remember_me_checked(self) -> bool:
        return await self.remember_me_checkbox.is_checked()

    async def get_sign_in_heading_text(self) -> str:
        return await self.sign_in_heading.text_content() or ""

    # Assertions
    async def assert_on_sign_in_page(self) -> None:
        await expect(self.sign_in_heading).to_be_visible()
