"""Selector models and the callables that tie elements to the DOM."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TYPE_CHECKING, Union

from pydantic import BaseModel, ConfigDict

from pomkit.config import get_config
from pomkit.exceptions import PompTimeoutError
from pomkit.logger import get_logger
from pomkit.waiting import resolve_timeout, wait_for

if TYPE_CHECKING:
    from playwright.async_api import ElementHandle, Page

log = get_logger(__name__)

# Anything with query_selector / query_selector_all: a Page or an ElementHandle.
Root = Union["Page", "ElementHandle"]

Fetcher = Callable[..., Awaitable["ElementHandle"]]
CollectionFetcher = Callable[..., Awaitable[list["ElementHandle"]]]


class SelectorKind(str, Enum):
    """Supported selector strategies."""

    CSS = "css"
    XPATH = "xpath"


class Locator(BaseModel):
    """A selector and the strategy used to evaluate it."""

    model_config = ConfigDict(frozen=True)

    kind: SelectorKind
    selector: str

    @property
    def query(self) -> str:
        """Selector string for Playwright's selector engines."""
        return f"{self.kind.value}={self.selector}"

    async def first(
        self, page: Page, root: Root, timeout: float | None = None
    ) -> ElementHandle:
        """Poll ``root`` for the first match.

        Raises:
            PompTimeoutError: If nothing matches within the timeout.
        """
        handle = await wait_for(
            page, lambda: root.query_selector(self.query), timeout
        )
        if not handle:
            raise PompTimeoutError(self.selector, resolve_timeout(page, timeout))
        log.debug("element_found", kind=self.kind.value, selector=self.selector)
        return handle

    async def all(
        self,
        page: Page,
        root: Root,
        timeout: float | None = None,
        strict: bool | None = None,
    ) -> list[ElementHandle]:
        """Wait for at least one match, then return every current match.

        Zero matches give an empty list unless ``strict`` is set, in which
        case ``PompTimeoutError`` is raised. ``strict=None`` uses the
        configured default.
        """
        if strict is None:
            strict = get_config().strict_collections

        found = await wait_for(
            page, lambda: root.query_selector_all(self.query), timeout
        )
        if not found:
            if strict:
                raise PompTimeoutError(
                    self.selector, resolve_timeout(page, timeout)
                )
            log.debug(
                "collection_empty", kind=self.kind.value, selector=self.selector
            )
        handles = await root.query_selector_all(self.query)
        log.debug(
            "collection_found",
            kind=self.kind.value,
            selector=self.selector,
            count=len(handles),
        )
        return handles
