"""
Configuration management for the NEPTHIC E2E suite.

This module provides configuration loading from environment variables,
an optional ``.env`` file and an optional TOML file, with type-safe
settings classes.
"""

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfigError, MissingConfigError
from .urls import DEFAULT_BASE_URL


def _validate_http_url(v: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError("URL must start with http:// or https://")
    return v


class BrowserSettings(BaseSettings):
    """Browser and application-under-test settings."""

    model_config = SettingsConfigDict(
        env_prefix="E2E_",
        env_file=".env",
        extra="ignore",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Storefront base URL"
    )
    headless: bool = Field(default=True, description="Run browsers headless")
    slow_mo: int = Field(default=0, ge=0, description="Slow motion delay in ms")
    timeout: int = Field(
        default=10000, ge=0, description="Default action timeout in ms"
    )
    navigation_timeout: int = Field(
        default=30000, ge=0, description="Navigation timeout in ms"
    )
    viewport_width: int = Field(default=1280, description="Viewport width")
    viewport_height: int = Field(default=720, description="Viewport height")
    record_video: bool = Field(default=False, description="Record test videos")
    results_dir: str = Field(
        default="test-results", description="Directory for screenshots and videos"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        return _validate_http_url(v).rstrip("/")


class InboxSettings(BaseSettings):
    """Disposable inbox viewer settings."""

    model_config = SettingsConfigDict(
        env_prefix="INBOX_",
        env_file=".env",
        extra="ignore",
    )

    url: str = Field(
        default="https://yopmail.com/en/", description="Inbox viewer entry URL"
    )
    sender_token: str = Field(
        default="NEPTHIC",
        description="Text that identifies messages sent by the application",
    )
    poll_interval: float = Field(
        default=2.5, gt=0, description="Pause between inbox refreshes in seconds"
    )
    max_attempts: int = Field(
        default=48, ge=1, description="Maximum number of inbox checks"
    )
    timeout: Optional[float] = Field(
        None, gt=0, description="Wall-clock polling deadline in seconds"
    )

    # Viewer markup
    login_field_name: str = Field(
        default="Login", description="Accessible name of the mailbox textbox"
    )
    submit_selector: str = Field(
        default="#refreshbut button", description="Mailbox lookup button"
    )
    refresh_selector: str = Field(
        default="#refresh", description="Inbox refresh button"
    )
    inbox_frame: str = Field(
        default='iframe[name="ifinbox"]', description="Inbox list frame"
    )
    mail_frame: str = Field(
        default='iframe[name="ifmail"]', description="Message body frame"
    )
    body_selector: str = Field(
        default="body", description="Element holding the message text"
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate inbox viewer URL format."""
        return _validate_http_url(v)


class UserSettings(BaseSettings):
    """Credentials of the already-registered test account."""

    model_config = SettingsConfigDict(
        env_prefix="NEPTHIC_E2E_USER_",
        env_file=".env",
        extra="ignore",
    )

    full_name: str = Field(default="test", description="Full name")
    username: str = Field(default="test", description="Username")
    email: str = Field(default="testuser@yopmail.com", description="Email")
    password: str = Field(default="test@123", description="Password")


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""

    model_config = SettingsConfigDict(
        env_prefix="NEPTHIC_E2E_",
        extra="ignore",
    )

    # Sub-settings
    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    inbox: InboxSettings = Field(default_factory=InboxSettings)
    user: UserSettings = Field(default_factory=UserSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml(cls, path: str | Path) -> "Settings":
        """
        Load settings from a TOML configuration file.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            Settings instance with loaded configuration.

        Raises:
            MissingConfigError: If the file does not exist.
            InvalidConfigError: If the file cannot be parsed.
        """
        path = Path(path)
        if not path.exists():
            raise MissingConfigError(
                "NEPTHIC_E2E_CONFIG_FILE", details={"path": str(path)})

        try:
            with open(path, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise InvalidConfigError(
                config_key="NEPTHIC_E2E_CONFIG_FILE",
                value=str(path),
                reason=f"Failed to parse TOML: {e}",
            ) from e

        return cls._from_dict(config_data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Settings":
        """
        Create settings from a dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            Settings instance.
        """
        settings_kwargs: dict[str, Any] = {}

        if "browser" in data:
            settings_kwargs["browser"] = BrowserSettings(**data["browser"])

        if "inbox" in data:
            settings_kwargs["inbox"] = InboxSettings(**data["inbox"])

        if "user" in data:
            settings_kwargs["user"] = UserSettings(**data["user"])

        if "logging" in data:
            settings_kwargs["logging"] = LoggingSettings(**data["logging"])

        return cls(**settings_kwargs)

    def validate_required(self) -> None:
        """
        Validate that all required configuration is present.

        Raises:
            MissingConfigError: If required configuration is missing.
        """
        if not self.browser.base_url:
            raise MissingConfigError("E2E_BASE_URL")
        if not self.inbox.url:
            raise MissingConfigError("INBOX_URL")
        if not self.inbox.sender_token:
            raise MissingConfigError("INBOX_SENDER_TOKEN")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings.

    Settings are read from the TOML file named by ``NEPTHIC_E2E_CONFIG_FILE``
    when it exists, otherwise from the environment.

    Returns:
        Settings instance.
    """
    config_file = os.getenv("NEPTHIC_E2E_CONFIG_FILE")

    if config_file and Path(config_file).exists():
        settings = Settings.from_toml(config_file)
    else:
        settings = Settings()

    return settings


def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings instance.
    """
    get_settings.cache_clear()
    return get_settings()
