"""
Disposable inbox access for the NEPTHIC E2E suite.

Provides:
- InboxProvider: interface for reading the newest message of a mailbox
- YopmailInbox: Playwright-driven Yopmail web viewer provider
- retrieve_verification_code: sign-up verification code retrieval
"""

from .base import InboxProvider, MessageSummary
from .retriever import (
    VERIFICATION_EMAIL_NOT_FOUND,
    extract_verification_code,
    is_verification_code,
    retrieve_verification_code,
)
from .yopmail import YopmailInbox

__all__ = [
    "InboxProvider",
    "MessageSummary",
    "YopmailInbox",
    "VERIFICATION_EMAIL_NOT_FOUND",
    "extract_verification_code",
    "is_verification_code",
    "retrieve_verification_code",
]
