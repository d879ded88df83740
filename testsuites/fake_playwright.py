"""
================================================================================
Fake Playwright Page
================================================================================

In-memory stand-in for the subset of `playwright.async_api` used by the
locator property getters and the page objects.

Elements are addressed by the exact selector string a Locator is queried
with, so a test DOM is built from the selectors of the resolved locator set:

    menubar = FakeElement()
    page = FakePage().add(selector(locators.components.menu.title_bar), menubar)

A query returns every child registered under that selector. Waiting for a
hidden or missing element raises Playwright's TimeoutError.

================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from theia_tools.locator_loader import Selector


def selector(entry: Any) -> str:
    """Playwright selector string of a Selector or a locator entry."""
    if isinstance(entry, Selector):
        return entry.to_playwright()
    constructor = entry.get("constructor")
    if constructor is not None:
        entry = constructor
    return entry["locator"].to_playwright()


class FakeElement:
    """DOM node with attributes, text and children keyed by selector."""

    def __init__(
        self,
        text: str = "",
        attributes: Optional[Dict[str, str]] = None,
        visible: bool = True,
        on_click: Optional[Callable[["FakeElement"], None]] = None,
        on_hover: Optional[Callable[["FakeElement"], None]] = None,
    ):
        self.text = text
        self.attributes = dict(attributes or {})
        self.visible = visible
        self.on_click = on_click
        self.on_hover = on_hover
        self.children: Dict[str, List[FakeElement]] = {}
        self.clicks = 0

    def add(self, query: str, *elements: "FakeElement") -> "FakeElement":
        self.children.setdefault(query, []).extend(elements)
        return self

    def remove(self, query: str, element: "FakeElement") -> None:
        self.children[query].remove(element)


class FakeLocator:
    """Lazy query over FakeElements, mirroring playwright's Locator."""

    def __init__(self, elements: List[FakeElement], query: str = ""):
        self._elements = elements
        self.query = query

    def locator(self, query: str) -> "FakeLocator":
        found = [child for element in self._elements for child in element.children.get(query, [])]
        return FakeLocator(found, query)

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self._elements[:1], self.query)

    @property
    def last(self) -> "FakeLocator":
        return FakeLocator(self._elements[-1:], self.query)

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(self._elements[index:index + 1], self.query)

    async def all(self) -> List["FakeLocator"]:
        return [FakeLocator([element], self.query) for element in self._elements]

    async def count(self) -> int:
        return len(self._elements)

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        if state == "visible" and not any(element.visible for element in self._elements):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.query!r}")

    async def is_visible(self) -> bool:
        return bool(self._elements) and self._elements[0].visible

    def _element(self) -> FakeElement:
        if not self._elements:
            raise PlaywrightTimeoutError(f"No element matches {self.query!r}")
        return self._elements[0]

    async def click(self) -> None:
        element = self._element()
        element.clicks += 1
        if element.on_click is not None:
            element.on_click(element)

    async def hover(self) -> None:
        element = self._element()
        if element.on_hover is not None:
            element.on_hover(element)

    async def get_attribute(self, name: str) -> Optional[str]:
        return self._element().attributes.get(name)

    async def inner_text(self) -> str:
        return self._element().text


class FakeKeyboard:
    def __init__(self):
        self.pressed: List[str] = []

    async def press(self, key: str) -> None:
        self.pressed.append(key)


class FakePage(FakeLocator):
    """Page whose document root is a FakeElement."""

    def __init__(self, root: Optional[FakeElement] = None):
        self.root = root or FakeElement()
        super().__init__([self.root], "page")
        self.keyboard = FakeKeyboard()
        self.url = ""

    def add(self, query: str, *elements: FakeElement) -> "FakePage":
        self.root.add(query, *elements)
        return self

    async def goto(self, url: str, wait_until: Optional[str] = None) -> None:
        self.url = url


__all__ = [
    "FakeElement",
    "FakeLocator",
    "FakePage",
    "selector",
]
