"""
Verification code retrieval.

The application emails a one-time 6-digit code after sign-up. This module
reads it back out of a disposable inbox so an automated sign-up flow can
complete.

The call has exactly two kinds of outcome:

* a return value, which is either the 6-digit code or the sentinel
  ``VERIFICATION_EMAIL_NOT_FOUND`` when the newest message was not sent by
  the application;
* a raised error, when the inbox never produced a message in time
  (``InboxTimeoutError``), polling was cancelled (``InboxCancelledError``),
  the application's message held no code (``VerificationCodeMissingError``)
  or the browser failed to drive the viewer (Playwright errors, unwrapped).
"""

import asyncio
import logging
import re
from typing import Callable, Optional

from playwright.async_api import BrowserContext

from ..config import InboxSettings, get_settings
from ..exceptions import VerificationCodeMissingError
from .base import InboxProvider
from .yopmail import YopmailInbox

logger = logging.getLogger(__name__)

VERIFICATION_EMAIL_NOT_FOUND = "Verification email not found"

_CODE_PATTERN = re.compile(r"(?<!\d)\d{6}(?!\d)")

InboxFactory = Callable[[BrowserContext, InboxSettings], InboxProvider]


def extract_verification_code(text: str) -> Optional[str]:
    """Return the first run of exactly six digits in ``text``, or None."""
    match = _CODE_PATTERN.search(text or "")
    if match is None:
        return None
    return match.group(0).strip()


def is_verification_code(value: Optional[str]) -> bool:
    """Check whether ``value`` is a 6-digit code rather than the sentinel."""
    return value is not None and len(value) == 6 and value.isascii() and value.isdigit()


async def retrieve_verification_code(
    context: BrowserContext,
    recipient_email: str,
    sender_token: Optional[str] = None,
    *,
    settings: Optional[InboxSettings] = None,
    inbox_factory: Optional[InboxFactory] = None,
    max_attempts: Optional[int] = None,
    poll_interval: Optional[float] = None,
    timeout: Optional[float] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> str:
    """
    Read the verification code sent to ``recipient_email``.

    Opens an auxiliary inbox page in ``context``, waits for the newest
    message, and extracts the code if the message row names
    ``sender_token``. The auxiliary page is closed before returning or
    raising.

    Callers must not poll the same mailbox from two concurrent calls; the
    refresh and click of one call would disturb the other.

    Args:
        context: Browser context used to open the inbox page.
        recipient_email: Mailbox to query. Not validated here.
        sender_token: Text identifying the application as sender.
            Defaults to ``settings.sender_token``.
        settings: Inbox settings. Defaults to the global settings.
        inbox_factory: Builds the inbox provider. Defaults to Yopmail.
        max_attempts: Overrides ``settings.max_attempts``.
        poll_interval: Overrides ``settings.poll_interval``.
        timeout: Overrides ``settings.timeout``.
        cancel_event: Aborts polling when set.

    Returns:
        The 6-digit code, or ``VERIFICATION_EMAIL_NOT_FOUND``.

    Raises:
        InboxTimeoutError: If no message arrives within the polling budget.
        InboxCancelledError: If ``cancel_event`` is set while polling.
        VerificationCodeMissingError: If the application's message holds
            no 6-digit code.
        ValueError: If ``max_attempts`` is below 1 or ``poll_interval`` is not
            positive.
    """
    settings = settings or get_settings().inbox
    sender_token = sender_token or settings.sender_token
    factory = inbox_factory or YopmailInbox

    if max_attempts is None:
        max_attempts = settings.max_attempts
    elif max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    if poll_interval is None:
        poll_interval = settings.poll_interval
    elif poll_interval <= 0:
        raise ValueError(f"poll_interval must be greater than 0, got {poll_interval}")

    async with factory(context, settings) as inbox:
        message = await inbox.fetch_latest_message(
            recipient_email,
            max_attempts=max_attempts,
            poll_interval=poll_interval,
            timeout=timeout if timeout is not None else settings.timeout,
            cancel_event=cancel_event,
        )

        if not message.is_from(sender_token):
            logger.warning(
                "Newest message for %s is not from %s: %r",
                recipient_email,
                sender_token,
                message.display_text,
            )
            return VERIFICATION_EMAIL_NOT_FOUND

        body = await inbox.read_message_body()

    code = extract_verification_code(body)
    if code is None:
        raise VerificationCodeMissingError(
            recipient_email, details={"sender": message.display_text.strip()})

    logger.info("Retrieved verification code for %s", recipient_email)
    return code
