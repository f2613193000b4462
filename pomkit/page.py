"""Root page object."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pomkit.element import Scope

if TYPE_CHECKING:
    from playwright.async_api import Page


class BasePage(Scope):
    """Base class for page objects.

    Subclass it and declare the page's elements with the selector methods::

        class LoginPage(BasePage):
            @property
            def username(self) -> PageElement:
                return self.css("#username")

    Selectors run against the whole document.
    """

    def __init__(self, page: Page) -> None:
        self.page = page

    async def root(self, timeout: float | None = None) -> Page:
        return self.page
