"""Reusable element wrappers for page objects."""

from __future__ import annotations

import asyncio
import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pomkit.logger import get_logger
from pomkit.models import (
    CollectionFetcher,
    Fetcher,
    Locator,
    Root,
    SelectorKind,
)

if TYPE_CHECKING:
    from playwright.async_api import ElementHandle, Page

log = get_logger(__name__)

E = TypeVar("E", bound="PageElement")

_JS_CLICK = "(e) => e.click()"
_COMPUTED_STYLE = """(e) => {
    const style = getComputedStyle(e);
    const out = {};
    for (let i = 0; i < style.length; i++) {
        out[style[i]] = style.getPropertyValue(style[i]);
    }
    return out;
}"""


class Scope(ABC):
    """Something child selectors can be evaluated against.

    Subclasses provide ``root()``, the handle that child queries run on.
    The selector methods only build fetchers. Nothing touches the browser
    until one of those fetchers is awaited.
    """

    page: Page

    @abstractmethod
    async def root(self, timeout: float | None = None) -> Root:
        """Resolve the node child selectors are relative to."""

    def _single(
        self,
        locator: Locator,
        element_cls: Callable[[Page, Fetcher], E] | None,
    ) -> E:
        async def fetch(timeout: float | None = None) -> ElementHandle:
            root = await self.root(timeout)
            return await locator.first(self.page, root, timeout)

        factory = element_cls or PageElement
        return factory(self.page, fetch)

    def _collection(
        self,
        locator: Locator,
        element_cls: Callable[[Page, Fetcher], E] | None,
        strict: bool | None,
    ) -> ElementCollection[E]:
        async def fetch_all(timeout: float | None = None) -> list[ElementHandle]:
            root = await self.root(timeout)
            return await locator.all(self.page, root, timeout, strict=strict)

        return ElementCollection(self.page, fetch_all, element_cls)

    def css(
        self,
        selector: str,
        element_cls: Callable[[Page, Fetcher], E] | None = None,
    ) -> E:
        """A single element located by CSS selector."""
        return self._single(Locator(kind=SelectorKind.CSS, selector=selector), element_cls)

    def css_all(
        self,
        selector: str,
        element_cls: Callable[[Page, Fetcher], E] | None = None,
        strict: bool | None = None,
    ) -> ElementCollection[E]:
        """A collection of elements located by CSS selector."""
        return self._collection(
            Locator(kind=SelectorKind.CSS, selector=selector), element_cls, strict
        )

    def xpath(
        self,
        selector: str,
        element_cls: Callable[[Page, Fetcher], E] | None = None,
    ) -> E:
        """A single element located by XPath.

        Relative to the scope: start with ``.//`` to search descendants of
        an element.
        """
        return self._single(Locator(kind=SelectorKind.XPATH, selector=selector), element_cls)

    def xpath_all(
        self,
        selector: str,
        element_cls: Callable[[Page, Fetcher], E] | None = None,
        strict: bool | None = None,
    ) -> ElementCollection[E]:
        """A collection of elements located by XPath."""
        return self._collection(
            Locator(kind=SelectorKind.XPATH, selector=selector), element_cls, strict
        )


class PageElement(Scope):
    """A lazily located element with nesting support.

    Subclass it to build reusable components. ``fetch`` is called again for
    every interaction, so the wrapper never holds on to a stale handle.
    """

    def __init__(self, page: Page, fetch: Fetcher) -> None:
        self.page = page
        self.fetch = fetch

    async def root(self, timeout: float | None = None) -> ElementHandle:
        return await self.fetch(timeout)

    async def exists(self, timeout: float | None = None) -> bool:
        """Check whether the element can be located. Never raises."""
        try:
            return bool(await self.fetch(timeout))
        except Exception as exc:
            log.debug("element_missing", error=str(exc))
            return False

    async def click(self, **options: Any) -> None:
        """Fetch the element and click it with Playwright's native click."""
        element = await self.fetch()
        await element.click(**options)

    async def js_click(self) -> None:
        """Fetch the element and call its DOM ``click()``."""
        element = await self.fetch()
        await element.evaluate(_JS_CLICK)

    async def classes(self) -> set[str]:
        """CSS class names of the element."""
        element = await self.fetch()
        prop = await element.get_property("className")
        value = await prop.json_value()
        return set((value or "").split())

    async def styles(self) -> dict[str, str]:
        """Computed style of the element as a plain mapping."""
        element = await self.fetch()
        return await element.evaluate(_COMPUTED_STYLE)

    async def text(self) -> str:
        """Text content of the element, stripped of surrounding whitespace."""
        element = await self.fetch()
        prop = await element.get_property("textContent")
        value = await prop.json_value()
        return (value or "").strip()

    async def get_attribute(self, name: str) -> str | None:
        """Value of the named attribute, or None when it is absent."""
        element = await self.fetch()
        return await element.get_attribute(name)


def _pinned(handle: ElementHandle) -> Fetcher:
    async def fetch(timeout: float | None = None) -> ElementHandle:
        return handle

    return fetch


class ElementCollection(Generic[E]):
    """A list of repeating elements, such as rows or cards.

    Items are built fresh on every ``fetch`` and each one is pinned to the
    handle it was built from.
    """

    def __init__(
        self,
        page: Page,
        fetch_all: CollectionFetcher,
        element_cls: Callable[[Page, Fetcher], E] | None = None,
    ) -> None:
        self.page = page
        self._fetch_all = fetch_all
        self._element_cls = element_cls or PageElement

    async def fetch(self, timeout: float | None = None) -> list[E]:
        handles = await self._fetch_all(timeout)
        return [self._element_cls(self.page, _pinned(handle)) for handle in handles]

    async def count(self, timeout: float | None = None) -> int:
        return len(await self.fetch(timeout))

    async def find(
        self, predicate: Callable[[E], bool | Awaitable[bool]]
    ) -> E | None:
        """Return the first item matching ``predicate``, checked in order."""
        for element in await self.fetch():
            if await _check(predicate, element):
                return element
        return None

    async def filter(
        self, predicate: Callable[[E], bool | Awaitable[bool]]
    ) -> list[E]:
        """Return every item matching ``predicate``, in original order.

        The predicate runs on all items concurrently. If one check raises,
        the others are cancelled before the error propagates.
        """
        elements = await self.fetch()
        tasks = [
            asyncio.create_task(_check(predicate, element)) for element in elements
        ]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return [element for element, ok in zip(elements, results) if ok]


async def _check(predicate: Callable[[Any], Any], element: Any) -> bool:
    result = predicate(element)
    if inspect.isawaitable(result):
        result = await result
    return bool(result)
