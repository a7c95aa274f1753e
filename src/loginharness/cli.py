"""loginharness CLI - scripted browser checks against a login form."""

from loginharness.cli_commands.shared import app, console
from loginharness.config import get_project_dir, load_settings
from loginharness.logging_setup import configure_logging
from loginharness.runner import LoginTestRunner, default_scenarios, run_scenarios
from loginharness.runner.driver import PlaywrightDriver

# Importing the command modules registers them on ``app``.
from loginharness.cli_commands import doctor_command, login_command, run_command  # noqa: F401

__all__ = [
    "PlaywrightDriver",
    "LoginTestRunner",
    "app",
    "configure_logging",
    "console",
    "default_scenarios",
    "get_project_dir",
    "load_settings",
    "main",
    "run_scenarios",
]


@app.command()
def version() -> None:
    """Show the installed loginharness version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("loginharness")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"loginharness {current_version}")


def main():
    """Entry point for the CLI."""
    app()
