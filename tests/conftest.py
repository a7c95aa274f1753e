"""Test configuration and fixtures for loginharness."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from loginharness.runner import LoginTestRunner
from loginharness.runner.errors import DriverError, ElementNotFoundError
from loginharness.runner.models import BrowserKind, Locator

BASE_URL = "https://the-internet.herokuapp.com/login"
VALID_USERS = {"tomsmith": "SuperSecretPassword!"}

SUCCESS_TEXT = "You logged into a secure area!\n×"
BAD_USERNAME_TEXT = "Your username is invalid!\n×"
BAD_PASSWORD_TEXT = "Your password is invalid!\n×"
LOGOUT_TEXT = "You logged out of the secure area!\n×"


class FakeElement:
    """An element on a FakePage, addressed by its CSS selector."""

    def __init__(self, page: "FakePage", selector: str) -> None:
        self.page = page
        self.selector = selector

    def clear(self) -> None:
        self.page.check_failure("clear")
        self.page.values[self.selector] = ""

    def set_value(self, text: str) -> None:
        self.page.check_failure("set_value")
        self.page.values[self.selector] = text

    def click(self) -> None:
        self.page.check_failure("click")
        self.page.clicks.append(self.selector)
        if self.selector == "button[type='submit']":
            self.page.submit()
        elif self.selector == ".button.secondary":
            self.page.log_out()

    def text(self) -> str:
        self.page.check_failure("text")
        return self.page.texts.get(self.selector, "")


class FakePage:
    """In-memory model of the-internet.herokuapp.com's login flow."""

    def __init__(self) -> None:
        self.location = "blank"
        self.values: dict[str, str] = {}
        self.texts: dict[str, str] = {}
        self.clicks: list[str] = []
        self.hidden: set[str] = set()
        self.failures: dict[str, Exception] = {}
        self.silent_submit = False
        # Flash banners render only after this many find_elements queries.
        self.flash_delay = 0
        self.pending_flash: dict[str, str] = {}
        self.polls = 0
        # The first N find_elements queries fail as if the page were navigating.
        self.flaky_polls = 0
        self.extra_flash: dict[str, str] = {}

    def check_failure(self, operation: str) -> None:
        if operation in self.failures:
            raise self.failures[operation]

    def show_login(self, flash: tuple[str, str] | None = None) -> None:
        self.location = "login"
        self.values = {}
        self.texts = {}
        if flash:
            self.texts[flash[0]] = flash[1]

    def submit(self) -> None:
        if self.silent_submit:
            self.location = "limbo"
            self.texts = {}
            return
        username = self.values.get("#username", "")
        password = self.values.get("#password", "")
        if username not in VALID_USERS:
            self.show_login((".flash.error", BAD_USERNAME_TEXT))
        elif VALID_USERS[username] != password:
            self.show_login((".flash.error", BAD_PASSWORD_TEXT))
        else:
            self.location = "secure"
            self.texts = {".flash.success": SUCCESS_TEXT}
        self.texts.update(self.extra_flash)
        self.polls = 0
        if self.flash_delay:
            self.pending_flash, self.texts = self.texts, {}

    def poll(self) -> None:
        self.polls += 1
        if self.polls <= self.flaky_polls:
            raise DriverError("Execution context was destroyed")
        if self.pending_flash and self.polls >= self.flash_delay:
            self.texts, self.pending_flash = self.pending_flash, {}

    def log_out(self) -> None:
        self.show_login((".flash.success", LOGOUT_TEXT))

    def present(self) -> set[str]:
        if self.location == "login":
            selectors = {"#username", "#password", "button[type='submit']"}
        elif self.location == "secure":
            selectors = {".button.secondary"}
        else:
            selectors = set()
        selectors |= set(self.texts)
        return selectors - self.hidden


class FakeSession:
    """BrowserSession over a FakePage; waits resolve immediately."""

    def __init__(self, driver: "FakeDriver") -> None:
        self.driver = driver
        self.page = driver.page
        self.viewport: tuple[int, int] | None = None
        self.implicit_wait: float | None = None
        self.quit_calls = 0

    def maximize(self, viewport: tuple[int, int]) -> None:
        self.viewport = viewport

    def set_implicit_wait(self, seconds: float) -> None:
        self.implicit_wait = seconds

    def navigate(self, url: str) -> None:
        self.page.check_failure("navigate")
        self.driver.navigations.append(url)
        self.page.show_login()

    def find_element(self, locator: Locator, timeout: float, clickable: bool = False):
        self.page.check_failure("find_element")
        if locator.selector not in self.page.present():
            raise ElementNotFoundError(locator, timeout)
        return FakeElement(self.page, locator.selector)

    def find_elements(self, locator: Locator) -> list[FakeElement]:
        self.page.check_failure("find_elements")
        self.page.poll()
        if locator.selector in self.page.present():
            return [FakeElement(self.page, locator.selector)]
        return []

    def quit(self) -> None:
        self.quit_calls += 1
        self.page.check_failure("quit")


class FakeDriver:
    """BrowserDriver that hands out FakeSessions and records what happened."""

    def __init__(self) -> None:
        self.page = FakePage()
        self.sessions: list[FakeSession] = []
        self.navigations: list[str] = []
        self.started_with: list[tuple[BrowserKind, bool]] = []
        self.start_error: Exception | None = None

    def start(self, kind: BrowserKind, headless: bool = False) -> FakeSession:
        self.started_with.append((kind, headless))
        if self.start_error is not None:
            raise self.start_error
        session = FakeSession(self)
        self.sessions.append(session)
        return session

    @property
    def quit_calls(self) -> int:
        return sum(session.quit_calls for session in self.sessions)


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[Path, None, None]:
    """Keep config lookups and log files away from the real home and cwd."""
    import os

    for key in list(os.environ):
        if key.startswith("LOGINHARNESS_"):
            monkeypatch.delenv(key)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(tmp_path)
    yield tmp_path

    logger = logging.getLogger("loginharness")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def fake_driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def runner(fake_driver: FakeDriver) -> LoginTestRunner:
    """A runner wired to the fake driver, not yet set up."""
    return LoginTestRunner("chromium", BASE_URL, timeout=0.05, driver=fake_driver)


@pytest.fixture
def ready_runner(runner: LoginTestRunner) -> Generator[LoginTestRunner, None, None]:
    """A runner with a live session positioned on the login page."""
    runner.setup()
    yield runner
    runner.tear_down()
