"""Polling helpers and timeout resolution."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

from pomkit.config import get_config
from pomkit.logger import get_logger

if TYPE_CHECKING:
    from playwright.async_api import Page

log = get_logger(__name__)

T = TypeVar("T")


def driver_timeout(page: Page | None) -> float | None:
    """Default timeout configured on the Playwright page, if it can be read.

    Playwright keeps this value on the page's implementation object only, so
    anything unexpected there is treated as "not configured".
    """
    impl = getattr(page, "_impl_obj", None)
    timeout_settings = getattr(impl, "_timeout_settings", None)
    reader = getattr(timeout_settings, "timeout", None)
    if reader is None or inspect.iscoroutinefunction(reader):
        return None
    try:
        value = reader()
    except TypeError:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if value > 0 else None


def resolve_timeout(page: Page | None, timeout: float | None = None) -> float:
    """Effective timeout in milliseconds for a lookup on ``page``."""
    if timeout:
        return timeout
    config = get_config()
    if config.default_timeout_ms:
        return config.default_timeout_ms
    return driver_timeout(page) or config.fallback_timeout_ms


async def _attempt(predicate: Callable[[], T | Awaitable[T]]) -> T:
    result = predicate()
    if inspect.isawaitable(result):
        result = await result
    return result


async def wait_for(
    page: Page | None,
    predicate: Callable[[], T | Awaitable[T]],
    timeout: float | None = None,
    interval: float | None = None,
) -> T | None:
    """Call ``predicate`` until it returns a truthy value or the timeout passes.

    Attempts are serialized: the next one starts ``interval`` ms after the
    previous one finished. An attempt still running at the deadline is
    cancelled, so the predicate is never running once this returns.

    Args:
        page: Playwright page, used to read the driver's default timeout.
        predicate: Zero-argument callable, sync or async.
        timeout: Overall timeout in milliseconds. See ``resolve_timeout``.
        interval: Milliseconds between attempts. Defaults to the configured
            poll interval.

    Returns:
        The first truthy predicate result, or None on timeout.
    """
    timeout_ms = resolve_timeout(page, timeout)
    interval_ms = interval if interval is not None else get_config().poll_interval_ms

    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout_ms / 1000
    attempts = 0

    while True:
        remaining = deadline - loop.time()
        if remaining <= 0:
            break
        attempts += 1
        try:
            result: Any = await asyncio.wait_for(_attempt(predicate), timeout=remaining)
        except asyncio.TimeoutError:
            break
        if result:
            log.debug("wait_succeeded", attempts=attempts, timeout_ms=timeout_ms)
            return result

        remaining = deadline - loop.time()
        if remaining <= 0:
            break
        await asyncio.sleep(min(interval_ms / 1000, remaining))

    log.debug("wait_timed_out", attempts=attempts, timeout_ms=timeout_ms)
    return None
