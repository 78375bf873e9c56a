"""ABOUTME: Custom exceptions for signupcheck
ABOUTME: Configuration errors and the signal used when the app under test cannot be reached"""


class SignupCheckError(Exception):
    """Base exception for all our custom errors."""


class InvalidConfig(SignupCheckError):
    """Error for when the config is not valid"""


class AppNotReachable(SignupCheckError):
    """Raised when the signup application under test does not answer."""

    def __init__(self, url: str = "") -> None:
        message = f"Application under test is not reachable at {url}" if url else "Application under test is not reachable"
        super().__init__(message)
        self.url = url
