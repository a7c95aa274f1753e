"""``loginharness run`` - the scripted valid/invalid login scenario."""

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
    print_outcome,
    resolve_settings,
)


@app.command("run")
def run(
    browser: str | None = BROWSER_OPTION,
    base_url: str | None = BASE_URL_OPTION,
    timeout: float | None = TIMEOUT_OPTION,
    headless: bool | None = HEADLESS_OPTION,
    log_file: str | None = LOG_FILE_OPTION,
    pause: float | None = typer.Option(
        None, "--pause", help="Seconds to wait after each scenario"
    ),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Log in with valid credentials, log out, then try invalid ones.

    Exits 0 whatever the login outcomes are; only harness failures
    (bad configuration, browser that will not start) exit 1.
    """
    cli = cli_module()
    settings = resolve_settings(
        cli,
        browser_kind=browser,
        base_url=base_url,
        timeout=timeout,
        headless=headless,
        log_file=log_file,
        pause=pause,
    )
    cli.configure_logging(settings.log_file, verbose=verbose)
    runner = build_runner(cli, settings)
    scenarios = cli.default_scenarios(settings.valid_credentials, settings.invalid_credentials)

    console.print(
        f"[blue]Running {len(scenarios)} login scenarios against {settings.base_url} "
        f"({runner.browser_kind.value})...[/blue]"
    )
    try:
        outcomes = cli.run_scenarios(
            runner, scenarios, pause=settings.pause, on_outcome=print_outcome
        )
    except HarnessError as exc:
        console.print(f"[red]Harness failure: {exc}[/red]")
        raise typer.Exit(1) from exc

    passed = sum(1 for outcome in outcomes if outcome.passed)
    console.print()
    console.print(f"  Summary: {passed}/{len(outcomes)} scenarios behaved as expected")
