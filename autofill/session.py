"""
Playwright implementation of the browser session capability.

``PlaywrightSession`` wraps an already open Playwright page; launching and
closing the browser stays with the caller.

Usage:
    from playwright.sync_api import sync_playwright
    from autofill import PlaywrightSession, autofill

    with sync_playwright() as p:
        browser = p.chromium.launch()
        page = browser.new_page()
        page.goto("http://localhost:8080/start")
        autofill(PlaywrightSession(page), "/confirmation", {"name": "Sterling"})
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, List, Optional

from .errors import ElementNotInteractableError

if TYPE_CHECKING:
    from playwright.sync_api import ElementHandle, Page

logger = logging.getLogger(__name__)


class PlaywrightSession:
    """``BrowserSession`` over a Playwright sync ``Page``."""

    def __init__(self, page: "Page"):
        self.page = page

    def _require_visible(self, element: "ElementHandle", action: str):
        # fill() and click() would otherwise wait out the default timeout
        if not element.is_visible():
            raise ElementNotInteractableError(action, element.get_attribute("name"))

    def elements(self, selector: str) -> List["ElementHandle"]:
        return self.page.query_selector_all(selector)

    def child_elements(self, element: "ElementHandle", selector: str) -> List["ElementHandle"]:
        return element.query_selector_all(selector)

    def get_attribute(self, element: "ElementHandle", name: str) -> Optional[str]:
        return element.get_attribute(name)

    def is_checked(self, element: "ElementHandle") -> bool:
        return element.is_checked()

    def clear(self, element: "ElementHandle") -> None:
        self._require_visible(element, "clear")
        element.fill("")

    def set_value(self, element: "ElementHandle", value: str) -> None:
        # File inputs cannot be typed into and are often visually hidden
        if (element.get_attribute("type") or "").lower() == "file":
            element.set_input_files(value)
            return
        self._require_visible(element, "fill")
        element.fill(value)

    def click(self, element: "ElementHandle") -> None:
        self._require_visible(element, "click")
        element.click()

    def upload_file(self, path: str) -> str:
        """
        Make a local file available to the browser.

        The browser runs on this machine, so the remote reference is the
        absolute local path.
        """
        local = Path(path).expanduser().resolve()
        if not local.exists():
            raise FileNotFoundError(f"Upload file not found: {local}")
        return str(local)

    def select_by_index(self, element: "ElementHandle", index: int) -> None:
        element.select_option(index=index)

    def select_by_value(self, element: "ElementHandle", value: Any) -> None:
        if isinstance(value, (list, tuple, set, frozenset)):
            element.select_option(value=[str(v) for v in value])
        else:
            element.select_option(value=str(value))

    def save_screenshot(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(path))
        logger.debug(f"Screenshot saved: {path}")

    def current_url(self) -> str:
        return self.page.url

    def get_text(self, selector: str) -> str:
        return self.page.inner_text(selector)
