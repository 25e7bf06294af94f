"""
Pytest fixtures for the NEPTHIC E2E suite's own tests.

This module provides common fixtures and the marker setup used across
test modules. Live browser tests under ``tests/e2e`` are marked ``e2e``
and only run when ``E2E_LIVE=true``.
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from nepthic_e2e.config import get_settings  # noqa: E402

LIVE_TESTS_ENABLED = os.environ.get("E2E_LIVE", "false").lower() in ("true", "1", "yes")


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "e2e: live browser test against the deployed storefront")
    config.addinivalue_line(
        "markers", "slow: test waits on a real inbox")


def pytest_collection_modifyitems(config, items):
    """Skip live browser tests unless E2E_LIVE is set."""
    if LIVE_TESTS_ENABLED:
        return

    skip_live = pytest.mark.skip(reason="set E2E_LIVE=true to run live browser tests")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(autouse=True)
def clean_settings_cache():
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
