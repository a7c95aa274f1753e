"""Browser-driver collaborator.

The runner only talks to the ``BrowserDriver``/``BrowserSession``/``Element``
protocols below. ``PlaywrightDriver`` is the production implementation;
tests substitute an in-memory driver.
"""

from __future__ import annotations

from typing import Any, Protocol

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from .errors import DriverError, ElementNotFoundError, SessionInitError
from .models import BrowserKind, Locator


class Element(Protocol):
    def clear(self) -> None: ...

    def set_value(self, text: str) -> None: ...

    def click(self) -> None: ...

    def text(self) -> str: ...


class BrowserSession(Protocol):
    def maximize(self, viewport: tuple[int, int]) -> None: ...

    def set_implicit_wait(self, seconds: float) -> None: ...

    def navigate(self, url: str) -> None: ...

    def find_element(
        self, locator: Locator, timeout: float, clickable: bool = False
    ) -> Element: ...

    def find_elements(self, locator: Locator) -> list[Element]: ...

    def quit(self) -> None: ...


class BrowserDriver(Protocol):
    def start(self, kind: BrowserKind, headless: bool = False) -> BrowserSession: ...


def _call(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Invoke a Playwright call, mapping its errors onto DriverError."""
    try:
        return func(*args, **kwargs)
    except PlaywrightError as exc:
        raise DriverError(exc.message or str(exc)) from exc


class PlaywrightElement:
    """Element backed by a Playwright ElementHandle."""

    def __init__(self, handle: Any) -> None:
        self._handle = handle

    def clear(self) -> None:
        _call(self._handle.fill, "")

    def set_value(self, text: str) -> None:
        _call(self._handle.fill, text)

    def click(self) -> None:
        _call(self._handle.click)

    def text(self) -> str:
        return _call(self._handle.inner_text)


class PlaywrightSession:
    """One browser process with a single page."""

    def __init__(self, playwright: Any, browser: Any, page: Any) -> None:
        self._playwright = playwright
        self._browser = browser
        self._page = page

    def maximize(self, viewport: tuple[int, int]) -> None:
        width, height = viewport
        _call(self._page.set_viewport_size, {"width": width, "height": height})

    def set_implicit_wait(self, seconds: float) -> None:
        self._page.set_default_timeout(seconds * 1000)

    def navigate(self, url: str) -> None:
        _call(self._page.goto, url)

    def find_element(self, locator: Locator, timeout: float, clickable: bool = False) -> Element:
        state = "visible" if clickable else "attached"
        try:
            handle = self._page.wait_for_selector(
                locator.selector, state=state, timeout=timeout * 1000
            )
        except PlaywrightTimeoutError as exc:
            raise ElementNotFoundError(locator, timeout) from exc
        except PlaywrightError as exc:
            raise DriverError(exc.message or str(exc)) from exc
        if handle is None:
            raise ElementNotFoundError(locator, timeout)
        return PlaywrightElement(handle)

    def find_elements(self, locator: Locator) -> list[Element]:
        handles = _call(self._page.query_selector_all, locator.selector)
        return [PlaywrightElement(handle) for handle in handles]

    def quit(self) -> None:
        try:
            _call(self._browser.close)
        finally:
            self._playwright.stop()


class PlaywrightDriver:
    """Starts browser sessions through ``playwright.sync_api``."""

    def start(self, kind: BrowserKind, headless: bool = False) -> BrowserSession:
        try:
            playwright = sync_playwright().start()
        except PlaywrightError as exc:
            raise SessionInitError(f"Could not start Playwright: {exc}") from exc

        try:
            browser = getattr(playwright, kind.value).launch(headless=headless)
            page = browser.new_context().new_page()
        except PlaywrightError as exc:
            playwright.stop()
            raise SessionInitError(f"Failed to launch {kind.value}: {exc.message}") from exc
        return PlaywrightSession(playwright, browser, page)
