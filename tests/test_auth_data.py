"""
Tests for the authentication test data builders.
"""

from nepthic_e2e.config import UserSettings
from nepthic_e2e.data import (
    SIGN_UP_FORMS,
    SIGN_UP_VERIFICATION_USER,
    TEST_PASSWORDS,
    VALID_CREDENTIALS,
    SignUpFormData,
    build_disposable_email,
    build_sign_up_form,
    registered_user,
)
from nepthic_e2e.data.auth import DISPOSABLE_DOMAIN


class TestBuilders:

    def test_disposable_email_is_unique(self):
        emails = {build_disposable_email() for _ in range(50)}

        assert len(emails) == 50
        assert all(email.endswith(f"@{DISPOSABLE_DOMAIN}") for email in emails)

    def test_disposable_email_prefix(self):
        assert build_disposable_email("qa").startswith("qa")

    def test_sign_up_form_defaults(self):
        form = build_sign_up_form()

        assert form.full_name
        assert form.username
        assert form.email.endswith(f"@{DISPOSABLE_DOMAIN}")
        assert form.phone.startswith("+")
        assert form.passwords_match

    def test_sign_up_form_overrides(self):
        form = build_sign_up_form(email="qa1@yopmail.com", password="Secret123!")

        assert form.email == "qa1@yopmail.com"
        assert form.password == "Secret123!"
        assert form.confirm_password == "Secret123!"

    def test_confirm_password_override(self):
        form = build_sign_up_form(password="Secret123!", confirm_password="Other123!")

        assert not form.passwords_match

    def test_registered_user_from_settings(self):
        settings = UserSettings(email="qa-lead@yopmail.com", password="s3cret!")

        user = registered_user(settings)

        assert user.email == "qa-lead@yopmail.com"
        assert user.password == "s3cret!"
        assert user.passwords_match


class TestSignUpFormData:

    def test_with_password(self):
        form = VALID_CREDENTIALS.with_password("NewPass123!")

        assert form.password == form.confirm_password == "NewPass123!"
        assert VALID_CREDENTIALS.password == "test@123"

    def test_to_dict(self):
        data = VALID_CREDENTIALS.to_dict()

        assert data["email"] == "testuser@yopmail.com"
        assert SignUpFormData(**data) == VALID_CREDENTIALS


class TestFixedRecords:

    def test_sign_up_forms(self):
        assert SIGN_UP_FORMS["valid"].passwords_match
        assert not SIGN_UP_FORMS["mismatched_passwords"].passwords_match
        assert SIGN_UP_FORMS["weak_password"].password == TEST_PASSWORDS["weak"]

    def test_verification_user_uses_disposable_mailbox(self):
        assert SIGN_UP_VERIFICATION_USER.email.endswith(f"@{DISPOSABLE_DOMAIN}")
        assert SIGN_UP_VERIFICATION_USER.email != VALID_CREDENTIALS.email
