"""ABOUTME: Unit tests for the signup page object with a mocked Playwright page
ABOUTME: Checks selectors, action ordering and the absent-element sentinels"""

from unittest.mock import Mock, call

import pytest

from signupcheck.config import WaitTimes
from signupcheck.pages.signup_page import EmailSignupPage, Selectors


@pytest.fixture
def page() -> Mock:
    return Mock()


@pytest.fixture
def signup_page(page: Mock) -> EmailSignupPage:
    # tiny waits so absent elements time out quickly
    return EmailSignupPage(page, wait_times=WaitTimes(short=20, medium=30, long=50))


class TestNavigation:
    def test_goto_waits_for_network_idle(self, signup_page, page):
        signup_page.goto("http://localhost:3000/signup")

        assert page.method_calls == [
            call.goto("http://localhost:3000/signup"),
            call.wait_for_load_state("networkidle"),
        ]

    def test_get_current_url(self, signup_page, page):
        page.url = "http://localhost:3000/verify"

        assert signup_page.get_current_url() == "http://localhost:3000/verify"

    def test_default_wait_times(self, page):
        assert EmailSignupPage(page).wait_times == WaitTimes()


class TestSignupForm:
    def test_signup_with_email_fills_then_submits(self, signup_page, page):
        signup_page.signup_with_email("user.name@example.com", "SecurePass123!")

        assert page.method_calls == [
            call.fill(Selectors.email_input, "user.name@example.com"),
            call.fill(Selectors.password_input, "SecurePass123!"),
            call.click(Selectors.signup_button),
            call.wait_for_load_state("networkidle"),
        ]

    def test_is_email_input_visible(self, signup_page, page):
        page.is_visible.return_value = True

        assert signup_page.is_email_input_visible() is True
        page.is_visible.assert_called_once_with(Selectors.email_input)

    def test_signup_button_matches_sign_up_and_register(self):
        assert 'has-text("Sign Up")' in Selectors.signup_button
        assert 'has-text("Register")' in Selectors.signup_button


class TestMessages:
    def test_get_error_message(self, signup_page, page):
        page.is_visible.return_value = True
        page.text_content.return_value = "Please enter a valid email address"

        assert signup_page.get_error_message() == "Please enter a valid email address"
        page.is_visible.assert_called_with(Selectors.error_message)

    def test_get_error_message_absent(self, signup_page, page):
        page.is_visible.return_value = False

        assert signup_page.get_error_message() is None

    def test_get_success_message(self, signup_page, page):
        page.is_visible.return_value = True
        page.text_content.return_value = "Check your email to verify your account"

        assert signup_page.get_success_message() == "Check your email to verify your account"
        page.text_content.assert_called_once_with(Selectors.success_message, timeout=30)

    def test_get_success_message_absent(self, signup_page, page):
        page.is_visible.return_value = False

        assert signup_page.get_success_message() is None

    def test_is_error_displayed(self, signup_page, page):
        page.is_visible.side_effect = [False, True]

        assert signup_page.is_error_displayed() is True

    def test_is_error_displayed_times_out_as_false(self, signup_page, page):
        page.is_visible.return_value = False

        assert signup_page.is_error_displayed() is False


class TestVerification:
    def test_verify_with_code_fills_then_submits(self, signup_page, page):
        signup_page.verify_with_code("123456")

        assert page.method_calls == [
            call.fill(Selectors.verification_input, "123456"),
            call.click(Selectors.verify_button),
            call.wait_for_load_state("networkidle"),
        ]

    def test_is_verification_input_visible(self, signup_page, page):
        page.is_visible.return_value = True

        assert signup_page.is_verification_input_visible() is True
        page.is_visible.assert_called_with(Selectors.verification_input)

    def test_is_verification_input_visible_absent(self, signup_page, page):
        page.is_visible.return_value = False

        assert signup_page.is_verification_input_visible(timeout_ms=10) is False
