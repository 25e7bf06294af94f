"""
Authentication test data.

Fixed records and Faker-backed builders for the sign-up and sign-in forms,
plus the messages the storefront shows for them.
"""

import uuid
from dataclasses import asdict, dataclass, replace
from typing import Any, Optional

from faker import Faker

from ..config import UserSettings

DISPOSABLE_DOMAIN = "yopmail.com"

_fake = Faker()


@dataclass(frozen=True)
class SignUpFormData:
    """Values for every field of the sign-up form."""

    full_name: str
    username: str
    email: str
    phone: str
    password: str
    confirm_password: str

    @property
    def passwords_match(self) -> bool:
        return self.password == self.confirm_password

    def with_password(self, password: str,
                      confirm_password: Optional[str] = None) -> "SignUpFormData":
        """Copy with a new password, confirmed unless told otherwise."""
        return replace(
            self,
            password=password,
            confirm_password=password if confirm_password is None else confirm_password,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def international_phone_number() -> str:
    """Random phone number in international format."""
    return f"+{_fake.msisdn()}"


def build_disposable_email(prefix: str = "nepthic") -> str:
    """Unique address on the disposable inbox domain."""
    return f"{prefix}{uuid.uuid4().hex[:10]}@{DISPOSABLE_DOMAIN}"


def build_sign_up_form(**overrides: Any) -> SignUpFormData:
    """
    Build sign-up form data for a brand-new account.

    The email is a fresh disposable address so concurrent tests never share
    a mailbox.

    Args:
        **overrides: Field values to use instead of generated ones.

    Returns:
        SignUpFormData instance.
    """
    password = overrides.pop("password", None) or _fake.password(
        length=12, special_chars=True, digits=True, upper_case=True)
    data = {
        "full_name": _fake.name(),
        "username": f"{_fake.user_name()}{_fake.random_int(100, 999)}",
        "email": build_disposable_email(),
        "phone": international_phone_number(),
        "password": password,
        "confirm_password": password,
    }
    data.update(overrides)
    return SignUpFormData(**data)


def registered_user(settings: Optional[UserSettings] = None) -> SignUpFormData:
    """The already-registered account, as configured in the environment."""
    settings = settings or UserSettings()
    return SignUpFormData(
        full_name=settings.full_name,
        username=settings.username,
        email=settings.email,
        phone=international_phone_number(),
        password=settings.password,
        confirm_password=settings.password,
    )


TEST_PASSWORDS = {
    "weak": "123456",
    "valid": "StrongPass123!",
    "mismatch": "DifferentPass123!",
}

VALID_CREDENTIALS = SignUpFormData(
    full_name="test",
    username="test",
    email=f"testuser@{DISPOSABLE_DOMAIN}",
    phone=international_phone_number(),
    password="test@123",
    confirm_password="test@123",
)

ALREADY_REGISTERED_USER = registered_user()

SIGN_UP_VERIFICATION_USER = build_sign_up_form(full_name="test", password="test@123")

_EXAMPLE_USER = SignUpFormData(
    full_name="John Doe",
    username="johndoe",
    email="john.doe@example.com",
    phone="+1 (555) 123-4567",
    password="SecurePassword123!",
    confirm_password="SecurePassword123!",
)

SIGN_UP_FORMS = {
    "valid": _EXAMPLE_USER,
    "mismatched_passwords": _EXAMPLE_USER.with_password(
        _EXAMPLE_USER.password, TEST_PASSWORDS["mismatch"]),
    "weak_password": _EXAMPLE_USER.with_password(TEST_PASSWORDS["weak"]),
}

ERROR_MESSAGES = {
    "invalid_email": "Please enter a valid email address",
    "password_mismatch": "Passwords do not match",
    "password_too_weak": "Password must be at least 8 characters",
    "username_taken": "Username is already taken",
    "email_taken": "Email is already registered",
    "missing_field": "This field is required",
    "invalid_credentials": "Invalid email or password",
}

SUCCESS_MESSAGES = {
    "sign_up_success": "Account created successfully",
    "sign_in_success": "Signed in successfully",
    "verification_sent": "Verification code sent to your email",
}
