"""ABOUTME: Pull verification tokens, codes and links out of email bodies
ABOUTME: Regex based, first match in pattern-priority order wins"""

import re

_TOKEN_CHARS = r"([a-z0-9_-]+)"

# Tried in this order regardless of where in the body each would match.
TOKEN_PATTERNS = (
    re.compile(r"verify[?&]token=" + _TOKEN_CHARS, re.IGNORECASE | re.ASCII),
    re.compile(r"verification[?&]code=" + _TOKEN_CHARS, re.IGNORECASE | re.ASCII),
    re.compile(r"token=" + _TOKEN_CHARS, re.IGNORECASE | re.ASCII),
    re.compile(r"code=" + _TOKEN_CHARS, re.IGNORECASE | re.ASCII),
)

VERIFICATION_URL_RE = re.compile(r"https?://\S*(?:verify|confirm)\S*", re.IGNORECASE)

VERIFICATION_CODE_RE = re.compile(r"[0-9]{6}")


def extract_token_from_email(email_body: str) -> str | None:
    """Return the verification token or code embedded in an email body, or None."""
    for pattern in TOKEN_PATTERNS:
        match = pattern.search(email_body)
        if match:
            return match.group(1)
    return None


def extract_verification_url(email_body: str) -> str | None:
    """Return the first http(s) URL mentioning "verify" or "confirm", exactly as written."""
    match = VERIFICATION_URL_RE.search(email_body)
    return match.group(0) if match else None


def is_valid_verification_code(code: str) -> bool:
    """Verification codes are exactly six digits."""
    return VERIFICATION_CODE_RE.fullmatch(code) is not None
