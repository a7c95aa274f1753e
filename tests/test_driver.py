"""Tests for the Playwright-backed browser driver."""

from unittest.mock import MagicMock, patch

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from loginharness.runner import DriverError, ElementNotFoundError, SessionInitError
from loginharness.runner.driver import PlaywrightDriver, PlaywrightElement, PlaywrightSession
from loginharness.runner.models import BrowserKind, Locator


@pytest.fixture
def page() -> MagicMock:
    return MagicMock()


@pytest.fixture
def session(page: MagicMock) -> PlaywrightSession:
    return PlaywrightSession(MagicMock(), MagicMock(), page)


class TestPlaywrightSession:
    def test_find_element_waits_for_attached(self, session, page):
        element = session.find_element(Locator.by_id("username"), timeout=10)
        page.wait_for_selector.assert_called_once_with(
            "#username", state="attached", timeout=10000
        )
        assert isinstance(element, PlaywrightElement)

    def test_find_element_clickable_waits_for_visible(self, session, page):
        session.find_element(Locator.css(".button.secondary"), timeout=2, clickable=True)
        page.wait_for_selector.assert_called_once_with(
            ".button.secondary", state="visible", timeout=2000
        )

    def test_find_element_timeout_maps_to_element_not_found(self, session, page):
        page.wait_for_selector.side_effect = PlaywrightTimeoutError("Timeout 10000ms exceeded")
        with pytest.raises(ElementNotFoundError) as excinfo:
            session.find_element(Locator.by_id("username"), timeout=10)
        assert excinfo.value.locator == Locator.by_id("username")

    def test_find_element_other_error_maps_to_driver_error(self, session, page):
        page.wait_for_selector.side_effect = PlaywrightError("Target page has been closed")
        with pytest.raises(DriverError, match="has been closed"):
            session.find_element(Locator.by_id("username"), timeout=10)

    def test_find_elements_wraps_handles(self, session, page):
        page.query_selector_all.return_value = [MagicMock(), MagicMock()]
        assert len(session.find_elements(Locator.css(".flash.success"))) == 2
        page.query_selector_all.assert_called_once_with(".flash.success")

    def test_navigate_error_maps_to_driver_error(self, session, page):
        page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")
        with pytest.raises(DriverError, match="ERR_NAME_NOT_RESOLVED"):
            session.navigate("https://nowhere.invalid/login")

    def test_maximize_and_implicit_wait(self, session, page):
        session.maximize((1280, 720))
        session.set_implicit_wait(7.5)
        page.set_viewport_size.assert_called_once_with({"width": 1280, "height": 720})
        page.set_default_timeout.assert_called_once_with(7500)

    def test_quit_stops_playwright_even_if_close_fails(self):
        playwright, browser = MagicMock(), MagicMock()
        browser.close.side_effect = PlaywrightError("Browser has been closed")
        session = PlaywrightSession(playwright, browser, MagicMock())
        with pytest.raises(DriverError):
            session.quit()
        playwright.stop.assert_called_once()


class TestPlaywrightElement:
    def test_element_operations(self):
        handle = MagicMock()
        handle.inner_text.return_value = "You logged into a secure area!"
        element = PlaywrightElement(handle)
        element.clear()
        element.set_value("tomsmith")
        element.click()
        assert element.text() == "You logged into a secure area!"
        assert [c.args for c in handle.fill.call_args_list] == [("",), ("tomsmith",)]
        handle.click.assert_called_once()

    def test_click_error_maps_to_driver_error(self):
        handle = MagicMock()
        handle.click.side_effect = PlaywrightError("Element is not attached to the DOM")
        with pytest.raises(DriverError):
            PlaywrightElement(handle).click()


class TestPlaywrightDriver:
    def test_start_launches_requested_browser(self):
        playwright = MagicMock()
        with patch("loginharness.runner.driver.sync_playwright") as mock_sync:
            mock_sync.return_value.start.return_value = playwright
            session = PlaywrightDriver().start(BrowserKind.FIREFOX, headless=True)
        playwright.firefox.launch.assert_called_once_with(headless=True)
        playwright.chromium.launch.assert_not_called()
        assert isinstance(session, PlaywrightSession)

    def test_launch_failure_raises_session_init_error(self):
        playwright = MagicMock()
        playwright.chromium.launch.side_effect = PlaywrightError("Executable doesn't exist")
        with patch("loginharness.runner.driver.sync_playwright") as mock_sync:
            mock_sync.return_value.start.return_value = playwright
            with pytest.raises(SessionInitError, match="Executable doesn't exist"):
                PlaywrightDriver().start(BrowserKind.CHROMIUM)
        playwright.stop.assert_called_once()

    def test_playwright_start_failure_raises_session_init_error(self):
        with patch("loginharness.runner.driver.sync_playwright") as mock_sync:
            mock_sync.return_value.start.side_effect = PlaywrightError(
                "It looks like you are using Playwright Sync API inside the asyncio loop"
            )
            with pytest.raises(SessionInitError):
                PlaywrightDriver().start(BrowserKind.CHROMIUM)
