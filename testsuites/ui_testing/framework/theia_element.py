"""
================================================================================
Theia Element
================================================================================

A Playwright locator bound to the locator entry it was found with.

Properties declared in the entry ("properties" mapping) are read through
their ExtractionFunction descriptors; a property that is not declared for
the IDE version under test raises PropertyNotSupportedError.

================================================================================
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from loguru import logger
from playwright.async_api import Locator

from theia_tools.locator_loader import ExtractionFunction, LocatorSet

from .smart_locator import SmartLocator, Target


class PropertyNotSupportedError(Exception):
    """Raised when a locator entry does not declare the requested property."""
    pass


class TheiaElement:
    """
    Element wrapper used by all page objects (by composition).

    Attributes:
        locator: Playwright locator of the element
        entry: Locator entry the element was found with
        smart: SmartLocator sharing the page and the resolved locator set
    """

    def __init__(self, locator: Locator, entry: Mapping[str, Any], smart: SmartLocator):
        self.locator = locator
        self.entry = entry
        self.smart = smart

    @property
    def locators(self) -> LocatorSet:
        return self.smart.locators

    def supports(self, name: str) -> bool:
        return isinstance(self.entry.get("properties", {}).get(name), ExtractionFunction)

    async def get_property(self, name: str) -> Any:
        """
        Read a declared property.

        Raises:
            PropertyNotSupportedError: If the entry does not declare it
        """
        prop = self.entry.get("properties", {}).get(name)
        if isinstance(prop, ExtractionFunction):
            return await prop(self.locator, self.locators)
        if prop is None:
            raise PropertyNotSupportedError(f"Property '{name}' is not defined for this element")
        raise TypeError(f"Property '{name}' is not an extraction function: {prop!r}")

    async def get_property_or(self, name: str, default: Any) -> Any:
        if not self.supports(name):
            return default
        return await self.get_property(name)

    async def click(self) -> None:
        await self.locator.click()

    async def text(self) -> str:
        return (await self.locator.inner_text()).strip()

    async def find(self, target: Target, timeout: int = 5000, **arguments: str) -> "TheiaElement":
        """Find a single child element (waits for visibility)."""
        entry = self.smart.entry(target)
        locator = await self.smart.locate(entry, parent=self.locator, timeout=timeout, **arguments)
        return TheiaElement(locator, entry, self.smart)

    async def find_all(self, target: Target, **arguments: str) -> List["TheiaElement"]:
        """Find every child element matching the entry."""
        entry = self.smart.entry(target)
        locators = await self.smart.locate_all(entry, parent=self.locator, **arguments)
        return [TheiaElement(locator, entry, self.smart) for locator in locators]


async def find_by_title(elements: List[Any], title: str) -> Optional[Any]:
    """Return the first page object whose `title` property equals `title`."""
    for element in elements:
        if await element.get_title() == title:
            return element
    logger.debug(f"No element titled '{title}' among {len(elements)} candidates")
    return None


__all__ = [
    "PropertyNotSupportedError",
    "TheiaElement",
    "find_by_title",
]
