"""Data models for login test runs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import UnsupportedBrowserError

BROWSER_ALIASES: dict[str, str] = {"chrome": "chromium"}


class BrowserKind(str, Enum):
    """Browsers the runner knows how to launch."""

    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"

    @classmethod
    def parse(cls, value: str) -> BrowserKind:
        """Resolve a user-supplied browser name, case-insensitively."""
        key = (value or "").strip().lower()
        key = BROWSER_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedBrowserError(value) from None


class RunnerState(str, Enum):
    """Lifecycle state of a LoginTestRunner."""

    CREATED = "created"
    READY = "ready"
    CLOSED = "closed"


@dataclass(frozen=True)
class Locator:
    """A strategy for finding a DOM element."""

    strategy: str
    value: str

    @classmethod
    def by_id(cls, element_id: str) -> Locator:
        return cls("id", element_id)

    @classmethod
    def css(cls, selector: str) -> Locator:
        return cls("css", selector)

    @property
    def selector(self) -> str:
        """CSS selector equivalent of this locator."""
        if self.strategy == "id":
            return f"#{self.value}"
        return self.value

    def __str__(self) -> str:
        return f"By.{self.strategy}: {self.value}"


@dataclass(frozen=True)
class PageLocators:
    """Locators for the login page and the pages reached from it."""

    username_field: Locator = Locator.by_id("username")
    password_field: Locator = Locator.by_id("password")
    login_button: Locator = Locator.css("button[type='submit']")
    success_message: Locator = Locator.css(".flash.success")
    error_message: Locator = Locator.css(".flash.error")
    logout_button: Locator = Locator.css(".button.secondary")


@dataclass(frozen=True)
class Credentials:
    """A username/password pair for one login attempt."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a login attempt.

    ``message`` holds the page's flash text, or a diagnostic when the
    outcome could not be read from the page.
    """

    success: bool
    message: str

    def __str__(self) -> str:
        prefix = "Login Successful" if self.success else "Login Failed"
        return f"{prefix}: {self.message}"
