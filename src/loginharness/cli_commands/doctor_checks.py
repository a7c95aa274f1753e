"""Individual health-check functions for ``loginharness doctor``."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import httpx

from loginharness.runner import BrowserKind, UnsupportedBrowserError

# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass
class CheckResult:
    """Outcome of a single diagnostic check."""

    name: str
    status: str  # "pass", "fail", "warn"
    message: str
    fix: str = ""


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def check_python_version() -> CheckResult:
    """Verify Python >= 3.10."""
    v = sys.version_info
    ver = f"{v.major}.{v.minor}.{v.micro}"
    if (v.major, v.minor) >= (3, 10):
        return CheckResult("Python version", "pass", f"Python {ver}")
    return CheckResult(
        "Python version", "fail", f"Python {ver} (requires >= 3.10)", fix="Install Python 3.10+"
    )


def check_browser_kind(browser_kind: str) -> CheckResult:
    """Check that the configured browser is one we can drive."""
    try:
        kind = BrowserKind.parse(browser_kind)
    except UnsupportedBrowserError as exc:
        supported = ", ".join(k.value for k in BrowserKind)
        return CheckResult(
            "Browser", "fail", str(exc), fix=f"Set LOGINHARNESS_BROWSER to one of: {supported}"
        )
    return CheckResult("Browser", "pass", f"Browser: {kind.value}")


def check_browser_installed(browser_kind: str) -> CheckResult:
    """Check that Playwright has a binary for the configured browser."""
    try:
        kind = BrowserKind.parse(browser_kind)
    except UnsupportedBrowserError:
        return CheckResult("Browser binary", "warn", "Skipped (unsupported browser)")

    fix = f"Run: playwright install {kind.value}"
    try:
        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import sync_playwright
    except ImportError:
        return CheckResult(
            "Browser binary", "fail", "Playwright is not installed", fix="pip install playwright"
        )

    try:
        with sync_playwright() as playwright:
            executable = getattr(playwright, kind.value).executable_path
    except PlaywrightError as exc:
        return CheckResult("Browser binary", "fail", f"Playwright error: {exc.message}", fix=fix)

    if executable and Path(executable).exists():
        return CheckResult("Browser binary", "pass", f"{kind.value} binary: {executable}")
    return CheckResult("Browser binary", "fail", f"{kind.value} binary missing", fix=fix)


def check_base_url(base_url: str, timeout: float = 10.0) -> CheckResult:
    """Check that the login page answers over HTTP."""
    try:
        response = httpx.get(base_url, timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as exc:
        return CheckResult(
            "Login page",
            "fail",
            f"{base_url} unreachable: {exc}",
            fix="Check LOGINHARNESS_BASE_URL and your network connection",
        )
    if response.status_code >= 400:
        return CheckResult(
            "Login page",
            "warn",
            f"{base_url} returned HTTP {response.status_code}",
            fix="Check LOGINHARNESS_BASE_URL",
        )
    return CheckResult("Login page", "pass", f"{base_url} (HTTP {response.status_code})")
