"""Playwright browser manager for page objects."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from playwright.async_api import Browser, BrowserContext, Page, async_playwright

from pomkit.config import get_config
from pomkit.exceptions import BrowserError
from pomkit.logger import get_logger

log = get_logger(__name__)

P = TypeVar("P")


class BrowserManager:
    """Manages Playwright browser lifecycle."""

    def __init__(self) -> None:
        self._playwright = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def start(self, headless: bool | None = None) -> None:
        """Launch browser."""
        if headless is None:
            headless = get_config().headless
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=headless)
            self._context = await self._browser.new_context()
            self._page = await self._context.new_page()
            log.info("browser_started", headless=headless)
        except Exception as exc:
            raise BrowserError(f"Failed to start browser: {exc}") from exc

    async def stop(self) -> None:
        """Close browser and cleanup."""
        try:
            if self._page and not self._page.is_closed():
                await self._page.close()
            if self._context:
                await self._context.close()
            if self._browser:
                await self._browser.close()
            if self._playwright:
                await self._playwright.stop()
        except Exception as exc:
            log.warning("browser_stop_error", error=str(exc))
        finally:
            self._page = None
            self._context = None
            self._browser = None
            self._playwright = None
            log.info("browser_stopped")

    async def __aenter__(self) -> BrowserManager:
        await self.start()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.stop()

    async def get_page(self) -> Page:
        """Get the current page, reopening it if it was closed."""
        if self._page and not self._page.is_closed():
            return self._page
        if self._context:
            self._page = await self._context.new_page()
            return self._page
        raise BrowserError("Browser not started, call start() first")

    async def open(self, page_cls: Callable[[Page], P], url: str | None = None) -> P:
        """Build a page object on the current page, navigating first if asked."""
        page = await self.get_page()
        if url:
            await page.goto(url)
            log.info("page_opened", url=url)
        return page_cls(page)
