"""
Configuration management for loginharness.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file (.loginharness/.env)
3. Global config file (~/.loginharness/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_global_config_dir,
    get_project_dir,
    get_project_env_path,
    is_global_config_dir,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import (
    get_base_url,
    get_browser_kind,
    get_config,
    get_credentials,
    get_headless,
    get_log_file,
    get_pause,
    get_timeout,
)
from .settings import HarnessSettings, load_settings

__all__ = [
    # env_loader
    "get_global_config_dir",
    "get_project_dir",
    "get_project_env_path",
    "is_global_config_dir",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "get_base_url",
    "get_browser_kind",
    "get_config",
    "get_credentials",
    "get_headless",
    "get_log_file",
    "get_pause",
    "get_timeout",
    # settings
    "HarnessSettings",
    "load_settings",
]
