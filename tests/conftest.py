"""ABOUTME: Pytest configuration and fixtures for signupcheck tests
ABOUTME: Provides environment helpers for unit tests and the app probe used by the BDD scenarios"""

import os
import urllib.request

import pytest
from tenacity import retry, stop_after_delay, wait_fixed

pytest_plugins = [
    "tests.bdd.shared.signup_steps",
    "tests.bdd.shared.verification_steps",
]


@pytest.fixture
def clear_env_vars():
    """Fixture to temporarily remove environment variables for testing."""
    original_vars = {}

    def _clear_env_vars(*args):
        for key in args:
            original_vars[key] = os.environ.get(key)
            os.environ.pop(key, None)

    yield _clear_env_vars

    # Restore original environment variables
    for key, value in original_vars.items():
        if value is not None:
            os.environ[key] = value


@pytest.fixture
def temp_env_vars():
    """Fixture to temporarily set environment variables for testing."""
    original_vars = {}

    def _set_env_vars(**kwargs):
        for key, value in kwargs.items():
            original_vars.setdefault(key, os.environ.get(key))
            os.environ[key] = value

    yield _set_env_vars

    # Restore original environment variables
    for key, value in original_vars.items():
        if value is not None:
            os.environ[key] = value
        else:
            os.environ.pop(key, None)


@retry(stop=stop_after_delay(5), wait=wait_fixed(0.5), reraise=True)
def wait_for_webapp_to_come_up(url: str) -> bytes:
    return urllib.request.urlopen(url, timeout=2).read()  # noqa: S310
