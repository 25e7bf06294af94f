"""
Custom exceptions for the NEPTHIC E2E suite.

This module defines the exceptions raised by the suite's helpers. Errors
raised by the browser automation library itself are not wrapped and
propagate to the caller unchanged.
"""

from typing import Any, Optional


class NepthicE2EError(Exception):
    """Base exception for all NEPTHIC E2E errors."""

    def __init__(self, message: str,
                 details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Configuration Exceptions
class ConfigurationError(NepthicE2EError):
    """Base exception for configuration-related errors."""


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(
        self, config_key: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        """
        Initialize missing config error.

        Args:
            config_key: The missing configuration key.
            details: Optional dictionary with additional error details.
        """
        super().__init__(
            f"Missing required configuration: '{config_key}'", details)
        self.config_key = config_key


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        config_key: str,
        value: Any,
        reason: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize invalid config error.

        Args:
            config_key: The configuration key with invalid value.
            value: The invalid value.
            reason: Optional reason why the value is invalid.
            details: Optional dictionary with additional error details.
        """
        message = f"Invalid configuration value for '{config_key}': {value}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, details)
        self.config_key = config_key
        self.value = value
        self.reason = reason


# Inbox Exceptions
class InboxError(NepthicE2EError):
    """Base exception for disposable inbox errors."""


class InboxTimeoutError(InboxError):
    """Raised when no message arrives within the polling budget."""

    def __init__(
        self,
        mailbox: str,
        attempts: int,
        elapsed: float,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize inbox timeout error.

        Args:
            mailbox: The mailbox that was polled.
            attempts: Number of polling attempts made.
            elapsed: Seconds spent polling.
            details: Optional dictionary with additional error details.
        """
        super().__init__(
            f"No message arrived for '{mailbox}' after {attempts} attempts "
            f"({elapsed:.1f}s)",
            details,
        )
        self.mailbox = mailbox
        self.attempts = attempts
        self.elapsed = elapsed


class InboxCancelledError(InboxError):
    """Raised when polling is cancelled through the cancel signal."""

    def __init__(
        self, mailbox: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(f"Polling cancelled for '{mailbox}'", details)
        self.mailbox = mailbox


class VerificationCodeMissingError(InboxError):
    """Raised when a message from the application holds no 6-digit code."""

    def __init__(
        self, mailbox: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            f"No verification code found in the message for '{mailbox}'",
            details,
        )
        self.mailbox = mailbox


# Registration Exceptions
class RegistrationError(NepthicE2EError):
    """Base exception for registration flow errors."""


class VerificationEmailNotFoundError(RegistrationError):
    """Raised when the newest inbox message was not sent by the application."""

    def __init__(
        self, email: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(f"Verification email not found for '{email}'", details)
        self.email = email
