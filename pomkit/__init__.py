"""pomkit: lazy, nestable Page Object Models on top of Playwright."""

from pomkit.browser import BrowserManager
from pomkit.config import PomkitConfig, get_config, set_config
from pomkit.element import ElementCollection, PageElement, Scope
from pomkit.exceptions import BrowserError, PomkitError, PompTimeoutError
from pomkit.logger import configure_logging, get_logger
from pomkit.models import Locator, SelectorKind
from pomkit.page import BasePage
from pomkit.waiting import resolve_timeout, wait_for

__version__ = "0.1.0"

__all__ = [
    "BasePage",
    "BrowserError",
    "BrowserManager",
    "ElementCollection",
    "Locator",
    "PageElement",
    "PomkitConfig",
    "PomkitError",
    "PompTimeoutError",
    "Scope",
    "SelectorKind",
    "__version__",
    "configure_logging",
    "get_config",
    "get_logger",
    "resolve_timeout",
    "set_config",
    "wait_for",
]
