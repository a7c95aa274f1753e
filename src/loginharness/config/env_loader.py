"""Environment variable and configuration file loading."""

import tempfile
from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR_NAME = ".loginharness"


def get_global_config_dir() -> Path:
    return Path.home() / CONFIG_DIR_NAME


def is_global_config_dir(path: Path) -> bool:
    """Return True if the path is the global ~/.loginharness config directory."""
    home_config = get_global_config_dir()
    try:
        return path.resolve() == home_config.resolve()
    except FileNotFoundError:
        return path == home_config


def get_project_dir(start: Path | None = None) -> Path | None:
    """Find the nearest ancestor of *start* (default: cwd) holding a .loginharness dir.

    The global config directory in $HOME does not count as a project marker,
    and the walk stops at the system temp root.
    """
    current = start or Path.cwd()
    try:
        temp_root = Path(tempfile.gettempdir()).resolve()
    except OSError:
        temp_root = None
    while current != current.parent:
        if temp_root and current.resolve() == temp_root:
            return None
        marker = current / CONFIG_DIR_NAME
        if marker.is_dir() and not is_global_config_dir(marker):
            return current
        current = current.parent
    return None


def get_project_env_path(project_dir: Path) -> Path:
    return project_dir / CONFIG_DIR_NAME / ".env"


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.loginharness/config.yml."""
    config_path = get_global_config_dir() / "config.yml"
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from .loginharness/.env."""
    if project_dir is None:
        project_dir = get_project_dir()

    if project_dir:
        return load_env_file(get_project_env_path(project_dir))

    return {}
