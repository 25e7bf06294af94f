"""
Yopmail inbox provider.

Drives the public Yopmail web viewer in an auxiliary page of the caller's
browser context. The viewer renders the inbox listing and the opened
message in two separate iframes.
"""

import logging
from typing import Optional

from playwright.async_api import BrowserContext, FrameLocator, Locator, Page

from ..config import InboxSettings
from .base import InboxProvider, MessageSummary

logger = logging.getLogger(__name__)


class YopmailInbox(InboxProvider):
    """Inbox provider backed by the Yopmail web viewer."""

    def __init__(self, context: BrowserContext,
                 settings: Optional[InboxSettings] = None) -> None:
        self.context = context
        self.settings = settings or InboxSettings()
        self._page: Optional[Page] = None

    @property
    def page(self) -> Page:
        """The auxiliary viewer page."""
        if self._page is None:
            raise RuntimeError("Mailbox is not open; call open_mailbox() first")
        return self._page

    # Selectors
    @property
    def login_input(self) -> Locator:
        """Mailbox name textbox."""
        return self.page.get_by_role("textbox", name=self.settings.login_field_name)

    @property
    def submit_button(self) -> Locator:
        """Button that loads the typed mailbox."""
        return self.page.locator(self.settings.submit_selector)

    @property
    def refresh_button(self) -> Locator:
        """Button that reloads the inbox listing."""
        return self.page.locator(self.settings.refresh_selector)

    @property
    def inbox_frame(self) -> FrameLocator:
        """Frame holding the inbox listing."""
        return self.page.frame_locator(self.settings.inbox_frame)

    @property
    def mail_frame(self) -> FrameLocator:
        """Frame holding the opened message."""
        return self.page.frame_locator(self.settings.mail_frame)

    @property
    def latest_message_row(self) -> Locator:
        """First (newest) message row of the listing."""
        return self.inbox_frame.get_by_role("button").first

    # Actions
    async def open_mailbox(self, mailbox: str) -> None:
        self._page = await self.context.new_page()
        await self.page.goto(self.settings.url)
        await self.login_input.fill(mailbox)
        await self.submit_button.click()
        await self.page.wait_for_selector(self.settings.inbox_frame, state="attached")

    async def message_arrived(self) -> bool:
        return await self.latest_message_row.is_visible()

    async def refresh(self) -> None:
        await self.refresh_button.click()

    async def open_latest_message(self) -> MessageSummary:
        row = self.latest_message_row
        await row.click()
        text = await row.text_content()
        return MessageSummary(display_text=text or "")

    async def read_message_body(self) -> str:
        return await self.mail_frame.locator(self.settings.body_selector).inner_text()

    async def close(self) -> None:
        if self._page is None:
            return
        page, self._page = self._page, None
        if not page.is_closed():
            await page.close()
        logger.debug("Closed inbox page")
