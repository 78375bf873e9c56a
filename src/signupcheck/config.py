"""ABOUTME: Configuration management for the signup/verification test suite
ABOUTME: Loads environment variables and provides URL, wait-time, browser and disposable-domain settings"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from signupcheck.exceptions import InvalidConfig

load_dotenv()

DEFAULT_BASE_URL = "http://localhost:3000"

DEFAULT_DISPOSABLE_DOMAINS = frozenset({
    "tempmail.com",
    "guerrillamail.com",
    "mailinator.com",
    "10minutemail.com",
    "throwaway.email",
})

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


def to_bool(value: str | None, context_str: str = "") -> bool:
    """
    Convert string to boolean. Valid options (after stripping whitespace and making lower-case)
    - False: "false", "no", "off", "0", None, ""
    - True: "true", "yes", "on", "1"

    The `context_str` is there for the error message, to help find the issue.
    """
    if value is None:
        return False
    value = value.lower().strip()
    if value in ("false", "no", "off", "0", ""):
        return False
    if value in ("true", "yes", "on", "1"):
        return True
    raise ValueError(
        f"Cannot convert '{context_str}{value}' to boolean. Valid values are: true/false, 1/0, yes/no, on/off (case-insensitive)"
    )


def _env_milliseconds(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as err:
        raise InvalidConfig(f"{name} must be a whole number of milliseconds, got '{raw}'") from err
    if value < 0:
        raise InvalidConfig(f"{name} must not be negative, got {value}")
    return value


@dataclass(slots=True, kw_only=True, frozen=True)
class AppUrls:
    signup: str
    verification: str
    dashboard: str

    @classmethod
    def from_env(cls) -> "AppUrls":
        base = os.environ.get("SIGNUPCHECK_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
        return AppUrls(
            signup=os.environ.get("SIGNUPCHECK_SIGNUP_URL", f"{base}/signup"),
            verification=os.environ.get("SIGNUPCHECK_VERIFICATION_URL", f"{base}/verify"),
            dashboard=os.environ.get("SIGNUPCHECK_DASHBOARD_URL", f"{base}/dashboard"),
        )


@dataclass(slots=True, kw_only=True, frozen=True)
class WaitTimes:
    """Wait thresholds in milliseconds."""

    short: int = 3000
    medium: int = 5000
    long: int = 10000

    @classmethod
    def from_env(cls) -> "WaitTimes":
        defaults = WaitTimes()
        return WaitTimes(
            short=_env_milliseconds("WAIT_SHORT_MS", defaults.short),
            medium=_env_milliseconds("WAIT_MEDIUM_MS", defaults.medium),
            long=_env_milliseconds("WAIT_LONG_MS", defaults.long),
        )


@dataclass(slots=True, kw_only=True, frozen=True)
class BrowserCfg:
    browser_name: str
    headless: bool

    @classmethod
    def from_env(cls) -> "BrowserCfg":
        browser_name = os.environ.get("BROWSER", "chromium").lower().strip()
        if browser_name not in SUPPORTED_BROWSERS:
            raise InvalidConfig(f"BROWSER must be one of {', '.join(SUPPORTED_BROWSERS)}, got '{browser_name}'")
        # default to headless on CI, headed locally
        headless_default = "true" if to_bool(os.environ.get("CI", "false"), context_str="CI=") else "false"
        headless = to_bool(os.environ.get("HEADLESS", headless_default), context_str="HEADLESS=")
        return BrowserCfg(browser_name=browser_name, headless=headless)


def get_disposable_domains() -> frozenset[str]:
    """Default disposable domains plus any listed in DISPOSABLE_EMAIL_DOMAINS (comma separated)."""
    extra = os.environ.get("DISPOSABLE_EMAIL_DOMAINS", "")
    extra_domains = {domain.strip().lower() for domain in extra.split(",") if domain.strip()}
    return DEFAULT_DISPOSABLE_DOMAINS | extra_domains


def is_development() -> bool:
    return os.environ.get("SIGNUPCHECK_ENV", "development").lower().strip() == "development"


def get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper().strip()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise InvalidConfig(f"LOG_LEVEL '{level_name}' is not a valid logging level")
    return level
