"""ABOUTME: Bounded polling for page elements
ABOUTME: A wait that runs out means the element is absent - it never raises"""

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page
from tenacity import Retrying, retry_if_exception_type, retry_if_result, stop_after_delay, wait_fixed

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_MS = 100


def poll_until_visible(
    page: Page,
    selector: str,
    timeout_ms: int,
    interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
) -> bool:
    """
    Poll until an element matching `selector` is visible, for at most `timeout_ms`.

    The selector is always checked at least once, even with a zero timeout.
    Playwright errors raised while checking (eg. the page is mid-navigation)
    count as "not visible yet".

    Returns:
        True as soon as the element is visible, False if the time runs out.
    """

    def _gave_up(retry_state: object) -> bool:
        logger.debug("element not visible after %sms: %s", timeout_ms, selector)
        return False

    retrying = Retrying(
        stop=stop_after_delay(timeout_ms / 1000),
        wait=wait_fixed(interval_ms / 1000),
        retry=retry_if_result(lambda visible: not visible) | retry_if_exception_type(PlaywrightError),
        retry_error_callback=_gave_up,
    )
    return retrying(page.is_visible, selector)


def text_if_visible(page: Page, selector: str, timeout_ms: int, interval_ms: int = DEFAULT_POLL_INTERVAL_MS) -> str | None:
    """Text content of the first element matching `selector`, or None if it never shows up."""
    if not poll_until_visible(page, selector, timeout_ms, interval_ms):
        return None
    try:
        return page.text_content(selector, timeout=timeout_ms)
    except PlaywrightError:
        # gone again between the visibility check and the read
        logger.debug("element disappeared before its text could be read: %s", selector)
        return None
