"""
Multi-page user flows built from the page objects.
"""

import logging
import re
from typing import Optional

from playwright.async_api import Page

from .config import Settings, get_settings
from .data.auth import SignUpFormData
from .exceptions import VerificationEmailNotFoundError
from .inbox import VERIFICATION_EMAIL_NOT_FOUND, retrieve_verification_code
from .pages import SignInPage, SignUpPage

logger = logging.getLogger(__name__)

SIGN_IN_URL_PATTERN = re.compile(r".*/sign-in")


async def register_user(
    page: Page,
    form: SignUpFormData,
    *,
    settings: Optional[Settings] = None,
    sign_in: bool = True,
) -> str:
    """
    Register a new account and confirm it with the emailed code.

    Fills and submits the sign-up form, reads the verification code from
    the disposable inbox, submits it and waits for the redirect to the
    sign-in page. When ``sign_in`` is set, signs in with the new
    credentials afterwards.

    Args:
        page: Page to drive. Its context is also used for the inbox page.
        form: Sign-up form values. ``form.email`` must be a disposable
            mailbox the inbox provider can read.
        settings: Settings to use. Defaults to the global settings.
        sign_in: Sign in after the account is confirmed.

    Returns:
        The verification code that was submitted.

    Raises:
        VerificationEmailNotFoundError: If the newest message in the
            mailbox was not sent by the application.
    """
    settings = settings or get_settings()
    base_url = settings.browser.base_url

    sign_up_page = SignUpPage(page, base_url)
    await sign_up_page.navigate_to_sign_up()
    await sign_up_page.fill_sign_up_form(form)
    await sign_up_page.submit_sign_up()
    logger.info("Submitted sign-up form for %s", form.email)

    code = await retrieve_verification_code(
        page.context, form.email, settings=settings.inbox)
    if code == VERIFICATION_EMAIL_NOT_FOUND:
        raise VerificationEmailNotFoundError(form.email)

    await sign_up_page.fill_verification_code(code)
    await sign_up_page.submit_verification_code()
    await sign_up_page.wait_for_url(SIGN_IN_URL_PATTERN)
    logger.info("Account %s verified", form.email)

    if sign_in:
        sign_in_page = SignInPage(page, base_url)
        await sign_in_page.sign_in(form.email, form.password)
        logger.info("Signed in as %s", form.email)

    return code
