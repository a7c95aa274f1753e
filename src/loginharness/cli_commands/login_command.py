"""``loginharness login`` - one login attempt with explicit credentials."""

import typer

from loginharness.runner import HarnessError

from .deps import cli_module
from .shared import (
    BASE_URL_OPTION,
    BROWSER_OPTION,
    HEADLESS_OPTION,
    LOG_FILE_OPTION,
    TIMEOUT_OPTION,
    VERBOSE_OPTION,
    app,
    build_runner,
    console,
    print_result,
    resolve_settings,
)


@app.command("login")
def login(
    username: str = typer.Argument(..., help="Username to submit"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Password to submit"
    ),
    browser: str | None = BROWSER_OPTION,
    base_url: str | None = BASE_URL_OPTION,
    timeout: float | None = TIMEOUT_OPTION,
    headless: bool | None = HEADLESS_OPTION,
    log_file: str | None = LOG_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Submit one username/password pair and print the result."""
    cli = cli_module()
    settings = resolve_settings(
        cli,
        browser_kind=browser,
        base_url=base_url,
        timeout=timeout,
        headless=headless,
        log_file=log_file,
    )
    cli.configure_logging(settings.log_file, verbose=verbose)
    runner = build_runner(cli, settings)

    try:
        with runner:
            result = runner.perform_login(username, password)
    except HarnessError as exc:
        console.print(f"[red]Harness failure: {exc}[/red]")
        raise typer.Exit(1) from exc

    print_result(result)
