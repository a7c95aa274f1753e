"""Configuration getter functions."""

import math
import os
from pathlib import Path
from typing import Any

from loginharness.runner.errors import ConfigError
from loginharness.runner.models import Credentials
from loginharness.runner.runner import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

from .env_loader import load_global_config, load_project_config

DEFAULT_BROWSER = "chromium"
DEFAULT_LOG_FILE = "login_automation.log"
DEFAULT_PAUSE = 2.0
DEFAULT_VALID_CREDENTIALS = Credentials("tomsmith", "SuperSecretPassword!")
DEFAULT_INVALID_CREDENTIALS = Credentials("wronguser", "wrongpassword")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Project .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        project_dir: Optional project directory
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check project .env file
    project_config = load_project_config(project_dir)
    if key in project_config:
        return project_config[key]

    # 3. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 4. Return default
    return default


def parse_float(key: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ConfigError(f"{key} must be a finite number, got {value!r}")
    if number < 0:
        raise ConfigError(f"{key} must not be negative, got {value!r}")
    return number


def parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be true or false, got {value!r}")


def get_browser_kind(project_dir: Path | None = None) -> str:
    """Get browser kind (default: chromium)."""
    return str(get_config("LOGINHARNESS_BROWSER", project_dir, default=DEFAULT_BROWSER))


def get_base_url(project_dir: Path | None = None) -> str:
    """Get the login page URL."""
    return str(get_config("LOGINHARNESS_BASE_URL", project_dir, default=DEFAULT_BASE_URL))


def get_timeout(project_dir: Path | None = None) -> float:
    """Get the bounded wait, in seconds."""
    value = get_config("LOGINHARNESS_TIMEOUT", project_dir, default=DEFAULT_TIMEOUT)
    timeout = parse_float("LOGINHARNESS_TIMEOUT", value)
    if timeout == 0:
        raise ConfigError("LOGINHARNESS_TIMEOUT must be greater than zero")
    return timeout


def get_headless(project_dir: Path | None = None) -> bool:
    return parse_bool(
        "LOGINHARNESS_HEADLESS", get_config("LOGINHARNESS_HEADLESS", project_dir, default=False)
    )


def get_log_file(project_dir: Path | None = None) -> str:
    return str(get_config("LOGINHARNESS_LOG_FILE", project_dir, default=DEFAULT_LOG_FILE))


def get_pause(project_dir: Path | None = None) -> float:
    """Get the pause between scenarios, in seconds."""
    value = get_config("LOGINHARNESS_PAUSE", project_dir, default=DEFAULT_PAUSE)
    return parse_float("LOGINHARNESS_PAUSE", value)


def get_credentials(kind: str, project_dir: Path | None = None) -> Credentials:
    """
    Get the credentials for a scenario.

    Args:
        kind: "valid" or "invalid"
        project_dir: Optional project directory

    Returns:
        Configured credentials, falling back to the built-in pair
    """
    defaults = {
        "valid": DEFAULT_VALID_CREDENTIALS,
        "invalid": DEFAULT_INVALID_CREDENTIALS,
    }.get(kind)
    if defaults is None:
        raise ValueError(f"Unknown credentials kind: {kind}")

    prefix = f"LOGINHARNESS_{kind.upper()}"
    username = get_config(f"{prefix}_USERNAME", project_dir, default=defaults.username)
    password = get_config(f"{prefix}_PASSWORD", project_dir, default=defaults.password)
    return Credentials(str(username), str(password))
