"""ABOUTME: Page object for the email signup and verification pages
ABOUTME: Fills the signup form, submits verification codes and reads back error/success messages"""

import logging

from playwright.sync_api import Page

from signupcheck.config import WaitTimes
from signupcheck.pages.waiting import poll_until_visible, text_if_visible

logger = logging.getLogger(__name__)


class Selectors:
    email_input = 'input[type="email"], input[name*="email" i]'
    password_input = 'input[type="password"]'
    signup_button = 'button[type="submit"]:has-text("Sign Up"), button[type="submit"]:has-text("Register")'
    error_message = '[role="alert"], .error, .error-message, .alert-danger'
    success_message = ".success, .success-message, .alert-success"
    verification_input = 'input[placeholder*="verification" i], input[placeholder*="code" i]'
    verify_button = 'button:has-text("Verify"), button:has-text("Confirm")'


class EmailSignupPage:
    """
    Drives the signup/verification UI through a Playwright page.

    Actions are sequential per page: fill before submit, submit before reading
    the result. Reads that wait for an element return None/False when the
    element does not show up in time.
    """

    def __init__(self, page: Page, wait_times: WaitTimes | None = None) -> None:
        self.page = page
        self.wait_times = wait_times or WaitTimes()

    def goto(self, url: str) -> None:
        logger.debug("navigating to %s", url)
        self.page.goto(url)
        self.page.wait_for_load_state("networkidle")

    def fill_email(self, email: str) -> None:
        self.page.fill(Selectors.email_input, email)

    def fill_password(self, password: str) -> None:
        self.page.fill(Selectors.password_input, password)

    def click_signup(self) -> None:
        self.page.click(Selectors.signup_button)
        self.page.wait_for_load_state("networkidle")

    def signup_with_email(self, email: str, password: str) -> None:
        """Fill email and password and submit."""
        self.fill_email(email)
        self.fill_password(password)
        self.click_signup()

    def get_error_message(self) -> str | None:
        return text_if_visible(self.page, Selectors.error_message, self.wait_times.medium)

    def get_success_message(self) -> str | None:
        return text_if_visible(self.page, Selectors.success_message, self.wait_times.medium)

    def is_error_displayed(self) -> bool:
        return poll_until_visible(self.page, Selectors.error_message, self.wait_times.short)

    def fill_verification_code(self, code: str) -> None:
        self.page.fill(Selectors.verification_input, code)

    def click_verify(self) -> None:
        self.page.click(Selectors.verify_button)
        self.page.wait_for_load_state("networkidle")

    def verify_with_code(self, code: str) -> None:
        """Fill in the verification code and submit it."""
        self.fill_verification_code(code)
        self.click_verify()

    def is_email_input_visible(self) -> bool:
        return self.page.is_visible(Selectors.email_input)

    def is_verification_input_visible(self, timeout_ms: int | None = None) -> bool:
        if timeout_ms is None:
            timeout_ms = self.wait_times.medium
        return poll_until_visible(self.page, Selectors.verification_input, timeout_ms)

    def get_current_url(self) -> str:
        return self.page.url
