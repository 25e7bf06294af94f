#!/usr/bin/env python3
"""
Command-line interface for the NEPTHIC E2E suite.

Usage:
    nepthic-e2e [OPTIONS] COMMAND [ARGS]

Commands:
    create-user     Register, verify and sign in a new storefront account
    fetch-code      Print the verification code waiting in a mailbox

Options:
    --debug         Enable debug logging
    --version       Show version and exit
    --help          Show this message and exit
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from playwright.async_api import Error as PlaywrightError
from pydantic import ValidationError

from nepthic_e2e import __version__
from nepthic_e2e.browser import browser_session
from nepthic_e2e.config import BrowserSettings, Settings, get_settings
from nepthic_e2e.data.auth import SignUpFormData, build_sign_up_form
from nepthic_e2e.exceptions import NepthicE2EError
from nepthic_e2e.flows import register_user
from nepthic_e2e.inbox import VERIFICATION_EMAIL_NOT_FOUND, retrieve_verification_code

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 2

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, settings: Optional[Settings] = None) -> None:
    """
    Configure logging for the command-line tools.

    Args:
        debug: Enable debug logging.
        settings: Settings supplying the default level and format.
    """
    settings = settings or get_settings()
    log_level = logging.DEBUG if debug else getattr(logging, settings.logging.level)

    logging.basicConfig(
        level=log_level,
        format=settings.logging.format,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    if not debug:
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def _http_url(value: str) -> str:
    if not value.startswith(("http://", "https://")):
        raise argparse.ArgumentTypeError(
            f"{value!r} must start with http:// or https://")
    return value.rstrip("/")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="nepthic-e2e",
        description="NEPTHIC E2E - storefront test tooling",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Create a fresh verified account:
        nepthic-e2e create-user

    Create an account with a chosen mailbox, watching the browser:
        nepthic-e2e create-user --email qa123@yopmail.com --headed

    Read the code waiting in a mailbox:
        nepthic-e2e fetch-code qa123@yopmail.com --timeout 60

Environment Variables:
    E2E_BASE_URL              Storefront base URL
    E2E_HEADLESS              Run the browser headless (true/false)
    INBOX_SENDER_TOKEN        Text identifying the application's emails
    INBOX_MAX_ATTEMPTS        Maximum number of inbox checks
    NEPTHIC_E2E_CONFIG_FILE   TOML configuration file
        """,
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"nepthic-e2e {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    create_user = subparsers.add_parser(
        "create-user",
        help="Register, verify and sign in a new account",
    )
    create_user.add_argument(
        "--email",
        help="Disposable mailbox to register (default: a generated address)",
    )
    create_user.add_argument(
        "--password",
        help="Account password (default: a generated password)",
    )
    create_user.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )
    create_user.add_argument(
        "--base-url",
        type=_http_url,
        help="Storefront base URL (default: E2E_BASE_URL)",
    )
    create_user.add_argument(
        "--no-sign-in",
        dest="sign_in",
        action="store_false",
        help="Stop after the account is verified",
    )

    fetch_code = subparsers.add_parser(
        "fetch-code",
        help="Print the verification code waiting in a mailbox",
    )
    fetch_code.add_argument("email", help="Mailbox to read")
    fetch_code.add_argument(
        "--sender-token",
        help="Text identifying the application as sender (default: INBOX_SENDER_TOKEN)",
    )
    fetch_code.add_argument(
        "--max-attempts",
        type=_positive_int,
        help="Maximum number of inbox checks",
    )
    fetch_code.add_argument(
        "--timeout",
        type=_positive_float,
        help="Polling deadline in seconds",
    )
    fetch_code.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    return build_parser().parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return settings with the browser options given on the command line."""
    overrides = {}
    if getattr(args, "base_url", None):
        overrides["base_url"] = args.base_url
    if getattr(args, "headed", False):
        overrides["headless"] = False
    if not overrides:
        return settings

    browser = BrowserSettings(**{**settings.browser.model_dump(), **overrides})
    return settings.model_copy(update={"browser": browser})


def form_from_args(args: argparse.Namespace) -> SignUpFormData:
    """Build the sign-up form, keeping any email or password given."""
    overrides = {}
    if args.email:
        overrides["email"] = args.email
    if args.password:
        overrides["password"] = args.password
    return build_sign_up_form(**overrides)


async def create_user(form: SignUpFormData, settings: Settings, sign_in: bool = True) -> str:
    """Register ``form`` in a fresh browser session."""
    async with browser_session(settings.browser) as context:
        page = await context.new_page()
        return await register_user(page, form, settings=settings, sign_in=sign_in)


async def fetch_code(
    email: str,
    settings: Settings,
    sender_token: Optional[str] = None,
    max_attempts: Optional[int] = None,
    timeout: Optional[float] = None,
) -> str:
    """Read the verification code for ``email`` in a fresh browser session."""
    async with browser_session(settings.browser) as context:
        return await retrieve_verification_code(
            context,
            email,
            sender_token,
            settings=settings.inbox,
            max_attempts=max_attempts,
            timeout=timeout,
        )


def run_create_user(args: argparse.Namespace, settings: Settings) -> int:
    form = form_from_args(args)
    logger.info("Creating user %s against %s", form.email, settings.browser.base_url)

    code = asyncio.run(create_user(form, settings, sign_in=args.sign_in))

    logger.debug("Account confirmed with code %s", code)
    print(f"email={form.email}")
    print(f"password={form.password}")
    return EXIT_OK


def run_fetch_code(args: argparse.Namespace, settings: Settings) -> int:
    result = asyncio.run(
        fetch_code(
            args.email,
            settings,
            sender_token=args.sender_token,
            max_attempts=args.max_attempts,
            timeout=args.timeout,
        )
    )

    if result == VERIFICATION_EMAIL_NOT_FOUND:
        print(result, file=sys.stderr)
        return EXIT_NOT_FOUND

    print(result)
    return EXIT_OK


COMMANDS = {
    "create-user": run_create_user,
    "fetch-code": run_fetch_code,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the command-line tools.

    Returns:
        Exit code (0 for success, 2 when no verification email was found,
        1 for any other failure).
    """
    args = parse_args(argv)

    try:
        settings = get_settings()
        setup_logging(args.debug, settings)
        settings.validate_required()
        settings = apply_overrides(settings, args)
        return COMMANDS[args.command](args, settings)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_FAILURE

    except NepthicE2EError as e:
        logger.error("%s", e)
        return EXIT_FAILURE

    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        return EXIT_FAILURE

    except PlaywrightError as e:
        logger.error("Browser error: %s", e.message)
        return EXIT_FAILURE

    except Exception as e:
        logger.exception("Command failed: %s", e)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
