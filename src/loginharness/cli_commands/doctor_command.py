"""``loginharness doctor`` - pre-flight health check command."""

from __future__ import annotations

import typer

from .deps import cli_module
from .shared import app, console, resolve_settings

STATUS_ICONS = {
    "pass": "[green]✓[/green]",
    "fail": "[red]✗[/red]",
    "warn": "[yellow]![/yellow]",
}


@app.command()
def doctor(
    browser: str | None = typer.Option(None, "--browser", "-b", help="Browser to check"),
    base_url: str | None = typer.Option(None, "--base-url", "-u", help="Login page URL"),
) -> None:
    """Check that a login run can start: browser, binaries, target page."""
    from .doctor_checks import (
        CheckResult,
        check_base_url,
        check_browser_installed,
        check_browser_kind,
        check_python_version,
    )

    cli = cli_module()
    settings = resolve_settings(cli, browser_kind=browser, base_url=base_url)

    console.print("\n[bold]loginharness doctor[/bold]")
    console.print("─" * 36)
    console.print()

    results: list[CheckResult] = [
        check_python_version(),
        check_browser_kind(settings.browser_kind),
        check_browser_installed(settings.browser_kind),
        check_base_url(settings.base_url, timeout=settings.timeout),
    ]

    for r in results:
        icon = STATUS_ICONS.get(r.status, "?")
        console.print(f"  {icon} {r.message}", highlight=False)
        if r.fix and r.status in ("fail", "warn"):
            for line in r.fix.splitlines():
                console.print(f"    {line}")

    counts = {"pass": 0, "fail": 0, "warn": 0}
    for r in results:
        counts[r.status] = counts.get(r.status, 0) + 1

    console.print()
    console.print(
        f"  Summary: {counts['pass']} passed, {counts['warn']} warnings, {counts['fail']} failed"
    )
    console.print()

    if counts["fail"] > 0:
        raise typer.Exit(1)
