"""Storefront paths used by page objects and tests."""

DEFAULT_BASE_URL = "https://dev.nepthic.com"

SIGNUP_PAGE = "/sign-up"
SIGNIN_PAGE = "/sign-in"
HOMEPAGE = "/"
DASHBOARD = "/dashboard"
DROPS = "/drops"
COLLECTIONS = "/collections"
ABOUT = "/about"
CART = "/cart"
PROFILE = "/profile"
FORGOT_PASSWORD = "/forgot-password"
