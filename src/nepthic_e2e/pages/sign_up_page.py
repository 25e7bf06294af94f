"""
Sign Up Page Object for registration and email verification tests.
"""

import re

from playwright.async_api import Locator, Page, expect

from ..data.auth import SignUpFormData
from ..urls import DEFAULT_BASE_URL, SIGNUP_PAGE
from .base_page import BasePage


class SignUpPage(BasePage):
    """Page Object for the NEPTHIC sign-up page."""

    def __init__(self, page: Page, base_url: str = DEFAULT_BASE_URL):
        super().__init__(page, base_url)
        self.path = SIGNUP_PAGE

    # Selectors - Sign Up Form
    @property
    def sign_up_heading(self) -> Locator:
        return self.page.get_by_role("heading", name="Join NEPTHIC")

    @property
    def sign_up_sub_heading(self) -> Locator:
        return self.page.get_by_text("Create your account to get started")

    @property
    def google_sign_up_button(self) -> Locator:
        return self.page.get_by_role(
            "button", name=re.compile("Sign up with Google", re.IGNORECASE))

    @property
    def full_name_input(self) -> Locator:
        return self.page.locator('input[name="fullName"]')

    @property
    def username_input(self) -> Locator:
        return self.page.locator('input[name="username"]')

    @property
    def email_input(self) -> Locator:
        return self.page.locator('input[name="email"]')

    @property
    def email_hint(self) -> Locator:
        """Hint telling the user a code will be emailed."""
        return self.page.get_by_text("Verification code will be sent")

    @property
    def phone_input(self) -> Locator:
        return self.page.locator('input[name="phone"]')

    @property
    def password_input(self) -> Locator:
        return self.page.locator('input[name="password"]')

    @property
    def confirm_password_input(self) -> Locator:
        return self.page.locator('input[name="confirmPassword"]')

    @property
    def sign_up_submit_button(self) -> Locator:
        return self.page.get_by_role("button", name="Sign Up", exact=True)

    @property
    def divider_text(self) -> Locator:
        return self.page.get_by_text("Or sign up with email")

    @property
    def sign_in_link(self) -> Locator:
        return self.page.get_by_role("link", name="Sign in")

    @property
    def sign_in_link_text(self) -> Locator:
        return self.page.get_by_text("Already a member?")

    # Selectors - Verification Form
    @property
    def verification_code_input(self) -> Locator:
        """Code textbox shown after the sign-up form is submitted."""
        return self.page.get_by_role("textbox")

    @property
    def verification_code_submit_button(self) -> Locator:
        return self.page.get_by_role("button", name="Verify")

    # Actions
    async def navigate_to_sign_up(self) -> None:
        """Navigate to the sign-up page."""
        await self.goto(self.path)

    async def fill_full_name(self, full_name: str) -> None:
        await self.full_name_input.fill(full_name)

    async def fill_username(self, username: str) -> None:
        await self.username_input.fill(username)

    async def fill_email(self, email: str) -> None:
        await self.email_input.fill(email)

    async def fill_phone_number(self, phone: str) -> None:
        await self.phone_input.fill(phone)

    async def fill_password(self, password: str) -> None:
        await self.password_input.fill(password)

    async def fill_confirm_password(self, confirm_password: str) -> None:
        await self.confirm_password_input.fill(confirm_password)

    async def fill_sign_up_form(self, form: SignUpFormData) -> None:
        """
        Fill every field of the sign-up form.

        Args:
            form: Values to enter.
        """
        await self.fill_full_name(form.full_name)
        await self.fill_username(form.username)
        await self.fill_email(form.email)
        await self.fill_phone_number(form.phone)
        await self.fill_password(form.password)
        await self.fill_confirm_password(form.confirm_password)

    async def submit_sign_up(self) -> None:
        await self.sign_up_submit_button.click()

    async def fill_verification_code(self, code: str) -> None:
        """Enter the one-time code received by email."""
        await self.fill_input(self.verification_code_input, code)

    async def submit_verification_code(self) -> None:
        await self.wait_and_click(self.verification_code_submit_button)

    async def sign_up_with_google(self) -> None:
        await self.google_sign_up_button.click()

    async def click_sign_in_link(self) -> None:
        await self.sign_in_link.click()

    # Verifications
    async def verify_sign_up_page_loaded(self) -> bool:
        return await self.sign_up_heading.is_visible()

    async def verify_full_name_field_visible(self) -> bool:
        return await self.full_name_input.is_visible()

    async def verify_all_form_fields_visible(self) -> bool:
        """Check that every input of the sign-up form is visible."""
        for field in (
            self.full_name_input,
            self.username_input,
            self.email_input,
            self.phone_input,
            self.password_input,
            self.confirm_password_input,
        ):
            if not await field.is_visible():
                return False
        return True

    async def verify_sign_up_button_enabled(self) -> bool:
        return await self.sign_up_submit_button.is_enabled()

    async def verify_email_hint_displayed(self) -> bool:
        return await self.email_hint.is_visible()

    async def verify_google_sign_up_button_visible(self) -> bool:
        return await self.google_sign_up_button.is_visible()

    async def verify_sign_in_link_visible(self) -> bool:
        return await self.sign_in_link.is_visible()

    async def get_full_name_value(self) -> str:
        return await self.full_name_input.input_value()

    async def get_username_value(self) -> str:
        return await self.username_input.input_value()

    async def get_email_value(self) -> str:
        return await self.email_input.input_value()

    async def get_phone_value(self) -> str:
        return await self.phone_input.input_value()

    async def get_sign_up_heading_text(self) -> str:
        return await self.sign_up_heading.text_content() or ""

    # Assertions
    async def assert_on_sign_up_page(self) -> None:
        await expect(self.sign_up_heading).to_be_visible()

    async def assert_verification_form_shown(self) -> None:
        """Assert that the form asking for the emailed code is displayed."""
        await expect(self.verification_code_submit_button).to_be_visible()
