"""
Page Object Model classes for the NEPTHIC storefront.

These classes provide reusable selectors and methods for interacting
with the storefront pages covered by the E2E suite.
"""

from .base_page import BasePage
from .home_page import HomePage
from .profile_page import ProfilePage
from .sign_in_page import SignInPage
from .sign_up_page import SignUpPage

__all__ = [
    "BasePage",
    "HomePage",
    "ProfilePage",
    "SignInPage",
    "SignUpPage",
]
