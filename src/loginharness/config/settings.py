"""Resolved harness settings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from loginharness.runner.models import Credentials

from .getters import (
    get_base_url,
    get_browser_kind,
    get_credentials,
    get_headless,
    get_log_file,
    get_pause,
    get_timeout,
)


@dataclass(frozen=True)
class HarnessSettings:
    """Everything a scenario run needs, after layering config sources."""

    browser_kind: str
    base_url: str
    timeout: float
    headless: bool
    log_file: str
    pause: float
    valid_credentials: Credentials
    invalid_credentials: Credentials

    def with_overrides(self, **overrides: object) -> HarnessSettings:
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def load_settings(project_dir: Path | None = None) -> HarnessSettings:
    """Resolve settings from env vars, project .env, global config and defaults."""
    return HarnessSettings(
        browser_kind=get_browser_kind(project_dir),
        base_url=get_base_url(project_dir),
        timeout=get_timeout(project_dir),
        headless=get_headless(project_dir),
        log_file=get_log_file(project_dir),
        pause=get_pause(project_dir),
        valid_credentials=get_credentials("valid", project_dir),
        invalid_credentials=get_credentials("invalid", project_dir),
    )
