"""Version information for the NEPTHIC E2E suite."""

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Release information
__title__ = "nepthic-e2e"
__description__ = "End-to-end browser tests and tooling for the NEPTHIC storefront"
__author__ = "NEPTHIC QA Team"
__license__ = "MIT"


def get_version() -> str:
    """Return the current version string."""
    return __version__
