import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright

from signupcheck.exceptions import AppNotReachable
from signupcheck.pages import EmailSignupPage
from tests.conftest import wait_for_webapp_to_come_up

from .config import BROWSER_CFG, WAITS, Urls


def ensure_app_reachable(url: str) -> None:
    try:
        wait_for_webapp_to_come_up(url)
    except OSError as err:
        raise AppNotReachable(url) from err


@pytest.fixture(scope="session")
def signup_app():
    """The signup application under test. Scenarios are skipped if it is not running."""
    try:
        ensure_app_reachable(Urls.signup)
    except AppNotReachable as err:
        pytest.skip(str(err))


@pytest.fixture(scope="session")
def browser(signup_app):
    """Browser instance for all tests"""
    with sync_playwright() as p:
        browser_type = getattr(p, BROWSER_CFG.browser_name)
        try:
            browser = browser_type.launch(headless=BROWSER_CFG.headless)
        except PlaywrightError as err:
            pytest.skip(f"Could not launch {BROWSER_CFG.browser_name} - are the playwright browsers installed? {err}")
        yield browser
        browser.close()


@pytest.fixture(scope="session")
def context(browser):
    context = browser.new_context()
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context):
    """Fresh page for each test"""
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def signup_page(page: Page) -> EmailSignupPage:
    # Clear any existing session/cookies to ensure clean state
    page.context.clear_cookies()
    return EmailSignupPage(page, wait_times=WAITS)
