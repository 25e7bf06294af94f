"""
Inbox provider interface.

An inbox provider hides how a mailbox is read (a scraped web viewer, a
mailbox API) behind a small set of async primitives. The polling loop that
waits for a message lives here so every provider gets the same attempt cap,
deadline and cancellation behaviour.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from ..exceptions import InboxCancelledError, InboxTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class MessageSummary:
    """The newest row of an inbox listing."""

    display_text: str
    arrived: bool = True

    def is_from(self, sender_token: str) -> bool:
        """Check whether the row text names the expected sender."""
        return self.arrived and sender_token in self.display_text


class InboxProvider(ABC):
    """
    Base class for disposable inbox readers.

    Providers are async context managers; leaving the ``async with`` block
    releases whatever the provider opened, on every exit path.
    """

    async def __aenter__(self) -> "InboxProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @abstractmethod
    async def open_mailbox(self, mailbox: str) -> None:
        """Select the mailbox and wait for the inbox listing to attach."""

    @abstractmethod
    async def message_arrived(self) -> bool:
        """Return True once the first message row is visible."""

    @abstractmethod
    async def refresh(self) -> None:
        """Ask the viewer to reload the inbox listing."""

    @abstractmethod
    async def open_latest_message(self) -> MessageSummary:
        """Open the first (newest) message row and describe it."""

    @abstractmethod
    async def read_message_body(self) -> str:
        """Return the text of the currently opened message."""

    @abstractmethod
    async def close(self) -> None:
        """Release resources held by the provider."""

    async def fetch_latest_message(
        self,
        mailbox: str,
        *,
        max_attempts: int,
        poll_interval: float,
        timeout: Optional[float] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> MessageSummary:
        """
        Wait for a message in ``mailbox`` and open the newest one.

        Every viewer step, not only the pause between refreshes, is
        abandoned as soon as the deadline passes or ``cancel_event`` fires.

        Args:
            mailbox: Mailbox identifier to query.
            max_attempts: Maximum number of arrival checks.
            poll_interval: Seconds to pause after each refresh.
            timeout: Optional wall-clock deadline in seconds, counted from
                the start of the call.
            cancel_event: Optional event that aborts polling when set.

        Returns:
            Summary of the opened message row.

        Raises:
            InboxTimeoutError: If no message shows up within the budget, or a
                viewer step is still running at the deadline.
            InboxCancelledError: If ``cancel_event`` is set while polling.
        """
        self._check_cancelled(mailbox, cancel_event)

        loop = asyncio.get_running_loop()
        start_time = loop.time()
        deadline = None if timeout is None else start_time + timeout
        attempts = 0

        def timed_out() -> InboxTimeoutError:
            return InboxTimeoutError(mailbox, attempts, loop.time() - start_time)

        async def guarded(awaitable: Awaitable[T]) -> T:
            return await self._run_guarded(
                mailbox, awaitable, deadline, cancel_event, timed_out)

        await guarded(self.open_mailbox(mailbox))
        logger.info("Opened inbox for %s", mailbox)

        while True:
            self._check_cancelled(mailbox, cancel_event)
            attempts += 1

            if await guarded(self.message_arrived()):
                logger.debug("Message arrived for %s on attempt %d", mailbox, attempts)
                break

            if attempts >= max_attempts or (deadline is not None and loop.time() >= deadline):
                raise timed_out()

            logger.debug(
                "No message for %s yet (attempt %d/%d), refreshing",
                mailbox,
                attempts,
                max_attempts,
            )
            await guarded(self.refresh())

            pause = poll_interval
            if deadline is not None:
                pause = max(0.0, min(pause, deadline - loop.time()))
            await self._pause(mailbox, pause, cancel_event)

        return await guarded(self.open_latest_message())

    @staticmethod
    def _check_cancelled(
        mailbox: str, cancel_event: Optional[asyncio.Event]
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise InboxCancelledError(mailbox)

    @classmethod
    async def _run_guarded(
        cls,
        mailbox: str,
        awaitable: Awaitable[T],
        deadline: Optional[float],
        cancel_event: Optional[asyncio.Event],
        timed_out: Callable[[], InboxTimeoutError],
    ) -> T:
        """
        Await a provider step, racing it against the deadline and cancel event.

        The step is cancelled and awaited before the deadline or cancellation
        error is raised, so the viewer page is idle when the caller closes it.
        """
        if deadline is None and cancel_event is None:
            return await awaitable

        loop = asyncio.get_running_loop()
        step = asyncio.ensure_future(awaitable)
        watcher = None
        waiters = {step}
        if cancel_event is not None:
            watcher = asyncio.ensure_future(cancel_event.wait())
            waiters.add(watcher)

        remaining = None if deadline is None else max(0.0, deadline - loop.time())
        try:
            await asyncio.wait(waiters, timeout=remaining, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in waiters:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*waiters, return_exceptions=True)

        cls._check_cancelled(mailbox, cancel_event)
        if step.cancelled():
            raise timed_out()
        return step.result()

    @classmethod
    async def _pause(
        cls,
        mailbox: str,
        seconds: float,
        cancel_event: Optional[asyncio.Event],
    ) -> None:
        """Sleep for ``seconds`` unless ``cancel_event`` fires first."""
        if cancel_event is None:
            await asyncio.sleep(seconds)
            return

        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return
        cls._check_cancelled(mailbox, cancel_event)
