"""
E2E tests for the profile page of a signed-in user.
"""

import pytest
import pytest_asyncio

from nepthic_e2e.pages import HomePage, ProfilePage, SignInPage

pytestmark = [pytest.mark.e2e, pytest.mark.asyncio(loop_scope="session")]


@pytest_asyncio.fixture(loop_scope="session")
async def signed_in_home_page(sign_in_page: SignInPage, home_page: HomePage,
                              registered_user) -> HomePage:
    """Home page after signing in with the registered account."""
    await sign_in_page.navigate_to_sign_in()
    await sign_in_page.sign_in(registered_user.username, registered_user.password)

    if await home_page.is_visible_within(home_page.toast_close_button, timeout=3000):
        await home_page.close_toast()
    await home_page.wait_for_timeout(1000)
    return home_page


class TestProfilePage:
    """Tests for the personal information page."""

    async def test_profile_page_loads_with_all_elements(
        self, signed_in_home_page: HomePage, profile_page: ProfilePage, registered_user
    ):
        await signed_in_home_page.go_to_profile_page()

        assert await profile_page.verify_profile_page_loaded()
        assert await profile_page.verify_all_form_fields_visible()
        assert await profile_page.get_username() == registered_user.username
        assert await profile_page.get_email()

    async def test_direct_navigation(self, signed_in_home_page: HomePage,
                                     profile_page: ProfilePage):
        await profile_page.navigate_to_profile()

        await profile_page.assert_url_contains("/profile")
        assert await profile_page.verify_profile_page_loaded()
