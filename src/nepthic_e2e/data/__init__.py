"""
Test data for the NEPTHIC E2E suite.
"""

from .auth import (
    ALREADY_REGISTERED_USER,
    ERROR_MESSAGES,
    SIGN_UP_FORMS,
    SIGN_UP_VERIFICATION_USER,
    SUCCESS_MESSAGES,
    TEST_PASSWORDS,
    VALID_CREDENTIALS,
    SignUpFormData,
    build_disposable_email,
    build_sign_up_form,
    registered_user,
)

__all__ = [
    "ALREADY_REGISTERED_USER",
    "ERROR_MESSAGES",
    "SIGN_UP_FORMS",
    "SIGN_UP_VERIFICATION_USER",
    "SUCCESS_MESSAGES",
    "TEST_PASSWORDS",
    "VALID_CREDENTIALS",
    "SignUpFormData",
    "build_disposable_email",
    "build_sign_up_form",
    "registered_user",
]
