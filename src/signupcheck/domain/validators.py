"""ABOUTME: Email address validators used as oracles for the signup flow
ABOUTME: Permissive and strict format checks, normalisation, disposable-domain detection and a WTForms validator"""

import re
from collections.abc import Iterable
from typing import Any

from wtforms import ValidationError

from signupcheck.config import get_disposable_domains
from signupcheck.messages import ERROR_MESSAGES

# local part, "@", then a domain with at least one dot - no whitespace or extra "@" anywhere
PERMISSIVE_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

_ATOM = r"[a-z0-9!#$%&'*+/=?^_`{|}~-]+"
_DOT_ATOM = _ATOM + r"(?:\." + _ATOM + r")*"
_QUOTED_LOCAL = r'"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*"'
_LABEL = r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
_HOSTNAME = r"(?:" + _LABEL + r"\.)+" + _LABEL
_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"
_ADDRESS_LITERAL = (
    r"\[(?:" + _OCTET + r"\.){3}"
    r"(?:" + _OCTET + r"|[a-z0-9-]*[a-z0-9]:(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)"
    r"\]"
)

STRICT_EMAIL_RE = re.compile(
    r"(?:" + _DOT_ATOM + r"|" + _QUOTED_LOCAL + r")@(?:" + _HOSTNAME + r"|" + _ADDRESS_LITERAL + r")",
    re.IGNORECASE | re.ASCII,
)


def is_valid_email(email: str) -> bool:
    """Permissive format check: something@something.something, no spaces.

    Accepts consecutive dots and does not look at the TLD - use
    is_valid_email_strict() for the RFC 5322 style check.
    """
    return PERMISSIVE_EMAIL_RE.fullmatch(email) is not None


def is_valid_email_strict(email: str) -> bool:
    """RFC 5322 inspired check. Rejects consecutive dots in the local part and dotless domains."""
    return STRICT_EMAIL_RE.fullmatch(email) is not None


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_email_domain(email: str) -> str | None:
    """The segment after the first "@" (up to any further "@"), or None if there is none."""
    parts = email.split("@")
    if len(parts) < 2:
        return None
    return parts[1]


def is_disposable_email(email: str, domains: Iterable[str] | None = None) -> bool:
    """True if the email's domain is on the disposable list (case-insensitive exact match)."""
    domain = get_email_domain(email)
    if not domain:
        return False
    disposable = get_disposable_domains() if domains is None else frozenset(d.lower() for d in domains)
    return domain.lower() in disposable


class SignupEmailValidator:
    """
    Validator for the email field of a signup form.

    Applies the checks in the order the signup page does:
    1. Not empty
    2. A valid email format (permissive by default, or strict)
    3. Not from a disposable email provider (unless allowed)

    Can be used both as a WTForms validator and directly with validate_str().
    """

    def __init__(self, strict: bool = False, allow_disposable: bool = False, message: str | None = None) -> None:
        self.strict = strict
        self.allow_disposable = allow_disposable
        self.message = message

    def validate_str(self, email: str | None) -> None:
        """
        Validate a raw string as a signup email address.

        Args:
            email: The email string to validate

        Raises:
            ValidationError: If the email would be rejected
        """
        mock_field = MockField(email)
        self(None, mock_field)

    def __call__(self, form: Any, field: Any) -> None:
        email = field.data

        if not email:
            raise ValidationError(self.message or ERROR_MESSAGES["invalid_email"])

        email = normalize_email(email)
        format_check = is_valid_email_strict if self.strict else is_valid_email
        if not format_check(email):
            raise ValidationError(self.message or ERROR_MESSAGES["invalid_email"])

        if not self.allow_disposable and is_disposable_email(email):
            raise ValidationError(self.message or ERROR_MESSAGES["disposable_email"])


class MockField:
    """Mock field object for internal use with WTForms validators."""

    def __init__(self, data: str | None) -> None:
        self.data = data

    def gettext(self, message: str) -> str:
        """Mock gettext method for WTForms compatibility."""
        return message
