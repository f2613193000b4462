"""pomkit exception hierarchy."""

from __future__ import annotations

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class PomkitError(Exception):
    """Base exception for all pomkit errors."""


class PompTimeoutError(PomkitError, PlaywrightTimeoutError):
    """Raised when no element matches a selector within the timeout.

    Also a Playwright ``TimeoutError``, so callers already handling driver
    timeouts catch it too.
    """

    def __init__(self, selector: str, timeout: float) -> None:
        self.selector = selector
        self.timeout = timeout
        super().__init__(
            f'waiting for selector "{selector}" failed: '
            f"timeout {timeout:g}ms exceeded"
        )


class BrowserError(PomkitError):
    """Raised on browser lifecycle errors."""
