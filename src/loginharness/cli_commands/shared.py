"""Shared CLI app objects and option helpers."""

from types import ModuleType

import typer
from rich.console import Console

from loginharness.config import HarnessSettings
from loginharness.runner import (
    ConfigError,
    LoginResult,
    LoginTestRunner,
    ScenarioOutcome,
    UnsupportedBrowserError,
)

app = typer.Typer(
    name="loginharness",
    help="Scripted browser checks against a login form",
    no_args_is_help=True,
)
console = Console()

BROWSER_OPTION = typer.Option(
    None, "--browser", "-b", help="Browser to drive: chromium, firefox, webkit"
)
BASE_URL_OPTION = typer.Option(None, "--base-url", "-u", help="Login page URL")
TIMEOUT_OPTION = typer.Option(None, "--timeout", "-t", help="Bounded wait in seconds")
HEADLESS_OPTION = typer.Option(
    None, "--headless/--headed", help="Run the browser without a window"
)
LOG_FILE_OPTION = typer.Option(None, "--log-file", help="Append lifecycle log lines here")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Echo INFO log lines to the console")


def resolve_settings(cli: ModuleType, **overrides: object) -> HarnessSettings:
    """Load layered settings and apply command-line overrides."""
    try:
        settings = cli.load_settings(cli.get_project_dir())
    except ConfigError as exc:
        console.print(f"[red]Configuration error: {exc}[/red]")
        raise typer.Exit(1) from exc
    return settings.with_overrides(**overrides)


def build_runner(cli: ModuleType, settings: HarnessSettings) -> LoginTestRunner:
    """Create a runner for *settings*, exiting with status 1 on bad input."""
    try:
        return cli.LoginTestRunner(
            settings.browser_kind,
            settings.base_url,
            settings.timeout,
            headless=settings.headless,
            driver=cli.PlaywrightDriver(),
        )
    except (UnsupportedBrowserError, ValueError) as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(1) from exc


def print_result(result: LoginResult) -> None:
    style = "green" if result.success else "yellow"
    console.print(str(result), style=style, markup=False, highlight=False)


def print_outcome(outcome: ScenarioOutcome) -> None:
    console.print(f"[bold]{outcome.scenario.name}[/bold]")
    print_result(outcome.result)
    if not outcome.passed:
        expected = "success" if outcome.scenario.expect_success else "failure"
        console.print(f"  [red]✗ expected {expected}[/red]")
