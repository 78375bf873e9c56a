"""Email validation and extraction helpers used as test oracles."""

from .extraction import extract_token_from_email, extract_verification_url, is_valid_verification_code
from .validators import (
    SignupEmailValidator,
    is_disposable_email,
    is_valid_email,
    is_valid_email_strict,
    normalize_email,
)

__all__ = [
    "SignupEmailValidator",
    "extract_token_from_email",
    "extract_verification_url",
    "is_disposable_email",
    "is_valid_email",
    "is_valid_email_strict",
    "is_valid_verification_code",
    "normalize_email",
]
