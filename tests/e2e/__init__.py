"""
NEPTHIC storefront E2E tests.

These tests drive the live storefront with Playwright and are skipped
unless E2E_LIVE=true.

Test Modules:
    - test_sign_up: Sign-up page and registration with email verification
    - test_sign_in: Sign-in page
    - test_profile: Profile page of a signed-in user
    - test_home_page: Home page sections

Running Tests:
    # Run all E2E tests
    E2E_LIVE=true pytest tests/e2e/

    # Skip tests that wait on a real inbox
    E2E_LIVE=true pytest tests/e2e/ -m "not slow"

    # Run in headed mode with slow motion
    E2E_LIVE=true E2E_HEADLESS=false E2E_SLOW_MO=500 pytest tests/e2e/

Environment Variables:
    E2E_BASE_URL: Storefront base URL (default: https://dev.nepthic.com)
    E2E_HEADLESS: Run in headless mode (default: true)
    E2E_SLOW_MO: Slow motion delay in ms (default: 0)
    E2E_TIMEOUT: Default action timeout in ms (default: 10000)
    E2E_RECORD_VIDEO: Record video (default: false)
    NEPTHIC_E2E_USER_EMAIL: Registered account email
    NEPTHIC_E2E_USER_PASSWORD: Registered account password
"""
