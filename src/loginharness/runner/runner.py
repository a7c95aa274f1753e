"""LoginTestRunner: drives one browser session through a login form."""

from __future__ import annotations

import logging
import math
import time

from .driver import BrowserDriver, BrowserSession, Element, PlaywrightDriver
from .errors import (
    DriverError,
    ElementNotFoundError,
    HarnessError,
    RunnerStateError,
    SessionInitError,
)
from .models import BrowserKind, Credentials, Locator, LoginResult, PageLocators, RunnerState

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://the-internet.herokuapp.com/login"
DEFAULT_TIMEOUT = 10.0
DEFAULT_VIEWPORT = (1920, 1080)
POLL_INTERVAL = 0.1
UNDETERMINED_MESSAGE = "Login status could not be determined"

# Close glyph rendered inside the flash banners.
_FLASH_DISMISS = "×"


class LoginTestRunner:
    """Runs login attempts against a fixed login page.

    The runner owns at most one browser session. ``setup()`` acquires it,
    ``tear_down()`` releases it; ``tear_down()`` is safe to call at any
    point and more than once. Used as a context manager, setup and teardown
    are paired automatically.

    ``perform_login`` never raises: in-session failures come back as a
    failed :class:`LoginResult`.
    """

    def __init__(
        self,
        browser_kind: str = BrowserKind.CHROMIUM.value,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        locators: PageLocators | None = None,
        headless: bool = False,
        viewport: tuple[int, int] = DEFAULT_VIEWPORT,
        driver: BrowserDriver | None = None,
    ) -> None:
        self.browser_kind = BrowserKind.parse(browser_kind)
        if not math.isfinite(timeout) or timeout <= 0:
            raise ValueError(f"timeout must be a positive number of seconds, got {timeout!r}")
        self.base_url = base_url
        self.timeout = float(timeout)
        self.locators = locators or PageLocators()
        self.headless = headless
        self.viewport = viewport
        self._driver = driver if driver is not None else PlaywrightDriver()
        self._session: BrowserSession | None = None
        self._state = RunnerState.CREATED

    def __enter__(self) -> LoginTestRunner:
        try:
            self.setup()
        except BaseException:
            self.tear_down()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.tear_down()

    @property
    def state(self) -> RunnerState:
        return self._state

    @property
    def has_session(self) -> bool:
        return self._session is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def setup(self) -> None:
        """Start the browser, size the window and open the login page."""
        if self._state is RunnerState.CLOSED:
            raise RunnerStateError("Runner is closed; create a new runner")
        if self._session is not None:
            raise RunnerStateError("A browser session is already live")

        try:
            session = self._driver.start(self.browser_kind, headless=self.headless)
        except SessionInitError as exc:
            logger.error("Failed to initialize driver: %s", exc)
            raise
        except Exception as exc:  # noqa: BLE001
            logger.error("Failed to initialize driver: %s", exc)
            raise SessionInitError(f"Driver initialization failed: {exc}") from exc

        self._session = session
        logger.info("Browser initialized: %s", self.browser_kind.value)

        try:
            session.maximize(self.viewport)
            session.set_implicit_wait(self.timeout)
            self.navigate_to_login_page()
        except Exception as exc:  # noqa: BLE001
            logger.error("Setup failed: %s", exc)
            self._release_session()
            raise SessionInitError(f"Setup failed: {exc}") from exc

        self._state = RunnerState.READY

    def navigate_to_login_page(self) -> None:
        session = self._require_session()
        session.navigate(self.base_url)
        logger.info("Navigated to: %s", self.base_url)

    def tear_down(self) -> None:
        """Close the browser if one is open. Idempotent."""
        if self._session is not None:
            self._release_session()
            logger.info("Browser closed")
        self._state = RunnerState.CLOSED

    # ------------------------------------------------------------------
    # Login / logout
    # ------------------------------------------------------------------

    def perform_login(self, username: str, password: str) -> LoginResult:
        """Submit the login form and classify the page that follows."""
        credentials = Credentials(username, password)
        logger.info("Attempting login with username: %s", credentials.username)
        try:
            self._require_session()
            self._fill(self.locators.username_field, credentials.username)
            self._fill(self.locators.password_field, credentials.password)
            self._wait_for(self.locators.login_button).click()
            logger.info("Login form submitted")
        except ElementNotFoundError as exc:
            logger.error("Element not found: %s", exc.locator)
            return LoginResult(False, f"Element not found: {exc.locator}")
        except HarnessError as exc:
            logger.error("Login process failed: %s", exc)
            return LoginResult(False, f"Login process failed: {exc}")
        except Exception as exc:  # noqa: BLE001
            logger.exception("Login process failed")
            return LoginResult(False, f"Login process failed: {exc}")

        return self._check_login_status()

    def logout(self) -> bool:
        """Log out, falling back to reloading the login page on failure.

        Returns True when the logout control was used and the login form
        came back.
        """
        try:
            self._require_session()
            self._wait_for(self.locators.logout_button, clickable=True).click()
            logger.info("Logged out successfully")
            self._wait_for(self.locators.username_field)
            return True
        except RunnerStateError:
            raise
        except DriverError as exc:
            logger.error("Logout failed: %s", exc)
        except HarnessError as exc:
            logger.warning("Logout failed: %s", exc)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Logout failed: %s", exc)

        self.navigate_to_login_page()
        return False

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_session(self) -> BrowserSession:
        if self._session is None:
            if self._state is RunnerState.CLOSED:
                raise RunnerStateError("Runner is closed; create a new runner")
            raise RunnerStateError("No live browser session; call setup() first")
        return self._session

    def _release_session(self) -> None:
        session, self._session = self._session, None
        if session is None:
            return
        try:
            session.quit()
        except HarnessError as exc:
            logger.warning("Browser did not shut down cleanly: %s", exc)

    def _wait_for(self, locator: Locator, clickable: bool = False) -> Element:
        return self._require_session().find_element(locator, self.timeout, clickable=clickable)

    def _fill(self, locator: Locator, text: str) -> None:
        element = self._wait_for(locator)
        element.clear()
        element.set_value(text)

    def _wait_for_any(self, *locators: Locator) -> tuple[Locator, Element]:
        """Poll until one of *locators* is present; earlier locators win ties.

        Driver errors while polling (the page navigating away under the query)
        are retried until the deadline; if the final poll still failed, that
        error is raised instead of a timeout.
        """
        session = self._require_session()
        deadline = time.monotonic() + self.timeout
        last_error: DriverError | None = None
        while True:
            try:
                for locator in locators:
                    elements = session.find_elements(locator)
                    if elements:
                        return locator, elements[0]
            except DriverError as exc:
                logger.debug("Flash query failed, retrying: %s", exc)
                last_error = exc
            else:
                last_error = None
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                if last_error is not None:
                    raise last_error
                raise ElementNotFoundError(" or ".join(str(loc) for loc in locators), self.timeout)
            time.sleep(min(POLL_INTERVAL, remaining))

    def _check_login_status(self) -> LoginResult:
        try:
            locator, element = self._wait_for_any(
                self.locators.success_message, self.locators.error_message
            )
            text = _flash_text(element.text())
        except ElementNotFoundError:
            logger.error(
                "Could not determine login status: no flash message after %gs", self.timeout
            )
            return LoginResult(False, UNDETERMINED_MESSAGE)
        except HarnessError as exc:
            logger.error("Could not determine login status: %s", exc)
            return LoginResult(False, UNDETERMINED_MESSAGE)
        except Exception:  # noqa: BLE001
            logger.exception("Could not determine login status")
            return LoginResult(False, UNDETERMINED_MESSAGE)

        if locator == self.locators.success_message:
            logger.info("Login Successful: %s", text)
            return LoginResult(True, text)
        logger.warning("Login Failed: %s", text)
        return LoginResult(False, text)


def _flash_text(raw: str) -> str:
    text = raw.strip()
    if text.endswith(_FLASH_DISMISS):
        text = text[: -len(_FLASH_DISMISS)].rstrip()
    return text
