"""Page objects for the signup application under test."""

from .signup_page import EmailSignupPage, Selectors

__all__ = ["EmailSignupPage", "Selectors"]
