"""
Field rules shared by the registration and company I/O models.

The messages are user facing and match what the signup form shows, so the
frontend can display server-side errors without translating them.
"""

from __future__ import annotations

import re

from email_validator import EmailNotValidError, validate_email


class ValidationText:
    """User-facing validation messages."""

    EMAIL_REQUIRED = "A valid email is required"
    COMPANY_LENGTH = "Company name must be at least 3 characters"
    COMPANY_MAX_LENGTH = "Company name must be at most 100 characters"
    COMPANY_REGEX = "Company name can only contain letters and numbers"
    PASSWORD_LENGTH = "Password must be at least 8 characters"
    PASSWORD_CONTAINS_EMAIL = "Password cannot contain your email"
    PASSWORD_MATCH = "Passwords do not match"
    THEME_INVALID = "Theme must be one of: light, dark, system"
    COLOR_INVALID = "Primary color must be a hex color like #6366f1"


COMPANY_NAME_MIN_LENGTH = 3
COMPANY_NAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 8
EMAIL_LOCAL_PART_MIN_LENGTH = 3
COMPANY_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")
HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_company_name(value: str) -> bool:
    """Whether ``value`` passes every company name rule."""
    if not COMPANY_NAME_MIN_LENGTH <= len(value) <= COMPANY_NAME_MAX_LENGTH:
        return False
    return COMPANY_NAME_PATTERN.fullmatch(value) is not None


def check_company_name(value: str) -> str:
    """Validate a company name exactly as submitted."""
    if len(value) < COMPANY_NAME_MIN_LENGTH:
        raise ValueError(ValidationText.COMPANY_LENGTH)
    if len(value) > COMPANY_NAME_MAX_LENGTH:
        raise ValueError(ValidationText.COMPANY_MAX_LENGTH)
    if not COMPANY_NAME_PATTERN.fullmatch(value):
        raise ValueError(ValidationText.COMPANY_REGEX)
    return value


def check_email(value: str) -> str:
    """Validate an email address syntactically and return it lower-cased."""
    try:
        info = validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        raise ValueError(ValidationText.EMAIL_REQUIRED)
    return info.normalized.lower()


def check_password(password: str, email: str | None) -> str:
    """Validate password length and that it does not embed the email."""
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValueError(ValidationText.PASSWORD_LENGTH)
    if email:
        lowered = password.lower()
        local_part = email.split("@", 1)[0]
        if email.lower() in lowered or (
            len(local_part) >= EMAIL_LOCAL_PART_MIN_LENGTH and local_part.lower() in lowered
        ):
            raise ValueError(ValidationText.PASSWORD_CONTAINS_EMAIL)
    return password


def check_hex_color(value: str) -> str:
    if not HEX_COLOR_PATTERN.match(value):
        raise ValueError(ValidationText.COLOR_INVALID)
    return value.lower()
