"""
================================================================================
Locator Property Getters
================================================================================

Builders for ExtractionFunction descriptors used in locator files::

    "item": {
        "locator": By.css("[role='treeitem']"),
        "properties": {
            "focused": has("class", "focused"),
            "index": get_integer_attribute("aria-posinset"),
        },
    }

Every builder accepts an optional element path walked before the attribute
is read. A path item is one of:
    - Selector: searched below the current element
    - mapping with a "locator" key: its selector is searched
    - callable(locators): returns one of the above from the resolved set

Elements are Playwright locators.

================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Union

from playwright.async_api import Locator

from .models import ExtractionFunction, LocatorSet, Selector


PathItem = Union[Selector, Mapping[str, Any], Callable[[LocatorSet], Any]]


def _to_selector(item: Any) -> Selector:
    if isinstance(item, Selector):
        return item
    if isinstance(item, Mapping) and isinstance(item.get("locator"), Selector):
        return item["locator"]
    raise TypeError(f"Cannot use {item!r} as element path item")


async def element_from_path(element: Locator, locators: LocatorSet, path: tuple) -> Locator:
    """Walk `path` below `element` and return the innermost element."""
    for item in path:
        if callable(item) and not isinstance(item, (Selector, Mapping)):
            item = item(locators)
        element = element.locator(_to_selector(item).to_playwright()).first
    return element


async def _read_attribute(element: Locator, attribute: str) -> str:
    return await element.get_attribute(attribute) or ""


def has(attribute: str, value: str, *path: PathItem) -> ExtractionFunction:
    """True if `attribute` contains `value`."""
    async def getter(element: Locator, locators: LocatorSet) -> bool:
        element = await element_from_path(element, locators, path)
        return value in await _read_attribute(element, attribute)

    return ExtractionFunction(f"has({attribute}, {value})", getter)


def has_not(attribute: str, value: str, *path: PathItem) -> ExtractionFunction:
    """True if `attribute` does not contain `value`."""
    async def getter(element: Locator, locators: LocatorSet) -> bool:
        element = await element_from_path(element, locators, path)
        return value not in await _read_attribute(element, attribute)

    return ExtractionFunction(f"has_not({attribute}, {value})", getter)


def get_attribute(attribute: str, *path: PathItem) -> ExtractionFunction:
    """Raw attribute value ("" when absent)."""
    async def getter(element: Locator, locators: LocatorSet) -> str:
        element = await element_from_path(element, locators, path)
        return await _read_attribute(element, attribute)

    return ExtractionFunction(f"get_attribute({attribute})", getter)


def get_integer_attribute(attribute: str, *path: PathItem) -> ExtractionFunction:
    """Attribute value parsed as an integer."""
    async def getter(element: Locator, locators: LocatorSet) -> int:
        element = await element_from_path(element, locators, path)
        return int(await _read_attribute(element, attribute))

    return ExtractionFunction(f"get_integer_attribute({attribute})", getter)


def attribute_equals(attribute: str, comparator: Any, *path: PathItem) -> ExtractionFunction:
    """
    Compare an attribute value.

    `comparator` is either the expected value or an (optionally async)
    predicate receiving the attribute value.
    """
    async def getter(element: Locator, locators: LocatorSet) -> bool:
        element = await element_from_path(element, locators, path)
        attribute_value = await _read_attribute(element, attribute)
        if callable(comparator):
            result = comparator(attribute_value)
            if hasattr(result, "__await__"):
                result = await result
            return bool(result)
        return attribute_value == comparator

    return ExtractionFunction(f"attribute_equals({attribute})", getter)


def text_of(*path: PathItem) -> ExtractionFunction:
    """Inner text of the element (or of the element reached through `path`)."""
    async def getter(element: Locator, locators: LocatorSet) -> str:
        element = await element_from_path(element, locators, path)
        return (await element.inner_text()).strip()

    return ExtractionFunction("text", getter)


def has_class(name: str) -> str:
    """XPath predicate matching elements carrying the CSS class `name`."""
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"


__all__ = [
    "attribute_equals",
    "element_from_path",
    "get_attribute",
    "get_integer_attribute",
    "has",
    "has_class",
    "has_not",
    "text_of",
]
