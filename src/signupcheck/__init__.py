"""End-to-end checks for a signup and email verification flow."""

__version__ = "0.1.0"
