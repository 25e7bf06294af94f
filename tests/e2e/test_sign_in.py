"""
E2E tests for the sign-in page.

Covers:
- Page elements and form fields
- Form interaction and remember-me option
- Navigation to sign-up, forgot password and header links
- Theme toggle and responsive layout
- Signing in with the registered account
"""

import re

import pytest
import pytest_asyncio
from playwright.async_api import Page

from nepthic_e2e.data import VALID_CREDENTIALS
from nepthic_e2e.pages import HomePage, SignInPage

pytestmark = [pytest.mark.e2e, pytest.mark.asyncio(loop_scope="session")]


@pytest_asyncio.fixture(loop_scope="session")
async def opened_sign_in_page(sign_in_page: SignInPage) -> SignInPage:
    await sign_in_page.navigate_to_sign_in()
    return sign_in_page


class TestSignInPageUI:
    """Tests for sign-in page elements."""

    async def test_page_loads_with_all_elements(self, opened_sign_in_page: SignInPage):
        assert await opened_sign_in_page.verify_sign_in_page_loaded()
        assert await opened_sign_in_page.verify_all_form_fields_visible()

    async def test_email_field_visible(self, opened_sign_in_page: SignInPage):
        assert await opened_sign_in_page.verify_email_field_visible()

    async def test_password_field_visible(self, opened_sign_in_page: SignInPage):
        assert await opened_sign_in_page.verify_password_field_visible()

    async def test_google_sign_in_button_visible(self, opened_sign_in_page: SignInPage):
        assert await opened_sign_in_page.verify_google_sign_in_button_visible()

    async def test_sign_up_link_visible(self, opened_sign_in_page: SignInPage):
        assert await opened_sign_in_page.verify_sign_up_link_visible()

    async def test_forgot_password_link_visible(self, opened_sign_in_page: SignInPage):
        assert await opened_sign_in_page.verify_forgot_password_link_visible()

    async def test_footer_visible(self, opened_sign_in_page: SignInPage):
        assert await opened_sign_in_page.verify_footer_visible()

    async def test_footer_links_present(self, opened_sign_in_page: SignInPage):
        assert await opened_sign_in_page.verify_footer_links_present()


class TestSignInFormInteraction:
    """Tests for filling the sign-in form."""

    async def test_fill_email_and_password(self, opened_sign_in_page: SignInPage):
        await opened_sign_in_page.fill_sign_in_form(
            VALID_CREDENTIALS.email, VALID_CREDENTIALS.password)

        assert await opened_sign_in_page.get_email_value() == VALID_CREDENTIALS.email
        assert await opened_sign_in_page.get_password_value() == VALID_CREDENTIALS.password

    async def test_fill_email_only(self, opened_sign_in_page: SignInPage):
        await opened_sign_in_page.fill_email(VALID_CREDENTIALS.email)

        assert await opened_sign_in_page.get_email_value() == VALID_CREDENTIALS.email

    async def test_fill_password_only(self, opened_sign_in_page: SignInPage):
        await opened_sign_in_page.fill_password(VALID_CREDENTIALS.password)

        assert await opened_sign_in_page.get_password_value() == VALID_CREDENTIALS.password

    async def test_clear_fields(self, opened_sign_in_page: SignInPage):
        await opened_sign_in_page.fill_sign_in_form(
            VALID_CREDENTIALS.email, VALID_CREDENTIALS.password)

        await opened_sign_in_page.email_input.clear()
        await opened_sign_in_page.password_input.clear()

        assert await opened_sign_in_page.get_email_value() == ""
        assert await opened_sign_in_page.get_password_value() == ""

    async def test_remember_me_toggle(self, opened_sign_in_page: SignInPage):
        await opened_sign_in_page.check_remember_me()
        assert await opened_sign_in_page.is_remember_me_checked()

        await opened_sign_in_page.uncheck_remember_me()
        assert not await opened_sign_in_page.is_remember_me_checked()

    async def test_sign_in_button_enabled(self, opened_sign_in_page: SignInPage):
        assert await opened_sign_in_page.verify_sign_in_button_enabled()


class TestSignInNavigation:
    """Tests for links leaving the sign-in page."""

    async def test_sign_up_link(self, opened_sign_in_page: SignInPage, page: Page):
        await opened_sign_in_page.click_sign_up_link()
        await opened_sign_in_page.wait_for_url(re.compile(r"sign-up"))

        assert "/sign-up" in page.url

    async def test_forgot_password_link(self, opened_sign_in_page: SignInPage, page: Page):
        await opened_sign_in_page.click_forgot_password()
        await opened_sign_in_page.wait_for_dom_ready()

        await opened_sign_in_page.assert_url_contains("/forgot-password")

    @pytest.mark.parametrize(
        "action,path",
        [
            ("navigate_to_drops", "/drops"),
            ("navigate_to_collections", "/collections"),
            ("navigate_to_about", "/about"),
            ("click_cart_button", "/cart"),
        ],
    )
    async def test_header_links(self, opened_sign_in_page: SignInPage, action, path):
        await getattr(opened_sign_in_page, action)()

        await opened_sign_in_page.assert_url_contains(path)


class TestSignInAppearance:
    """Tests for theme switching and small viewports."""

    async def test_toggle_theme_switches_mode(self, opened_sign_in_page: SignInPage):
        was_dark = await opened_sign_in_page.is_dark_mode()

        await opened_sign_in_page.toggle_theme()
        await opened_sign_in_page.wait_for_timeout(500)

        assert await opened_sign_in_page.is_dark_mode() is not was_dark

    async def test_mobile_layout(self, mobile_page: Page, base_url: str):
        sign_in_page = SignInPage(mobile_page, base_url)
        await sign_in_page.navigate_to_sign_in()

        assert await sign_in_page.is_visible_within(sign_in_page.mobile_menu_button)
        assert await sign_in_page.is_visible_within(sign_in_page.sign_in_submit_button)


class TestSignInWithAccount:
    """Tests that sign in with the already-registered account."""

    async def test_sign_in_shows_logged_in_home(
        self, opened_sign_in_page: SignInPage, page: Page, base_url: str, registered_user
    ):
        await opened_sign_in_page.sign_in(registered_user.email, registered_user.password)

        home_page = HomePage(page, base_url)
        assert await home_page.verify_home_page_loaded()
        assert await home_page.verify_log_out_button_visible()
