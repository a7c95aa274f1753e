"""Login test runner: browser session lifecycle and login classification."""

from .errors import (
    ConfigError,
    DriverError,
    ElementNotFoundError,
    HarnessError,
    RunnerStateError,
    SessionInitError,
    UnsupportedBrowserError,
)
from .models import BrowserKind, Credentials, Locator, LoginResult, PageLocators, RunnerState
from .runner import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, LoginTestRunner
from .scenarios import Scenario, ScenarioOutcome, default_scenarios, run_scenarios

__all__ = [
    "BrowserKind",
    "ConfigError",
    "Credentials",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DriverError",
    "ElementNotFoundError",
    "HarnessError",
    "Locator",
    "LoginResult",
    "LoginTestRunner",
    "PageLocators",
    "RunnerState",
    "RunnerStateError",
    "Scenario",
    "ScenarioOutcome",
    "SessionInitError",
    "UnsupportedBrowserError",
    "default_scenarios",
    "run_scenarios",
]
