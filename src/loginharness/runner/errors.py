"""Error hierarchy for the login test runner."""

from __future__ import annotations


class HarnessError(Exception):
    """Base class for all harness errors."""


class UnsupportedBrowserError(HarnessError):
    """Raised when a runner is created for a browser kind we cannot drive."""

    def __init__(self, browser_kind: str) -> None:
        self.browser_kind = browser_kind
        super().__init__(f"Unsupported browser: {browser_kind}")


class SessionInitError(HarnessError):
    """Raised when the browser session cannot be started."""


class RunnerStateError(HarnessError):
    """Raised when an operation is invalid for the runner's lifecycle state."""


class ElementNotFoundError(HarnessError):
    """Raised by the driver when a bounded wait for an element expires."""

    def __init__(self, locator: object, timeout: float) -> None:
        self.locator = locator
        self.timeout = timeout
        super().__init__(f"Element not found: {locator} (waited {timeout:g}s)")


class DriverError(HarnessError):
    """Raised by the driver for in-session failures other than a missing element."""


class ConfigError(HarnessError):
    """Raised when a configuration value cannot be parsed."""
