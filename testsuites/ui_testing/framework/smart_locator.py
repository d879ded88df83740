"""
================================================================================
Smart Locator
================================================================================

Turns entries of a resolved LocatorSet into Playwright locators.

An entry is a mapping such as::

    {
        "locator": By.class_name("p-MenuBar-item"),
        "fallbacks": (By.css("[role='menubar'] > li"),),
        "properties": {"title": text_of(...)},
    }

The "locator" leaf is dispatched on its descriptor type:
    - Selector: used as is
    - SelectorQuery: built from keyword arguments passed by the caller
    - anything else: TypeError

Fallback selectors are tried in order when the primary selector does not
become visible; their use is recorded for the health report.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from theia_tools.locator_loader import LocatorSet, Selector, SelectorQuery


class ElementNotFoundError(Exception):
    """Raised when all locator strategies fail to find element."""
    pass


@dataclass
class LocatorHealth:
    """
    Tracks locator health and usage statistics.

    Attributes:
        element_name: Locator path or display name
        primary_selector: The preferred selector
        used_fallback: Whether a fallback was used
        fallback_selector: The fallback selector used (if any)
    """
    element_name: str
    primary_selector: str
    used_fallback: bool = False
    fallback_selector: Optional[str] = None


Target = Union[str, Mapping[str, Any]]


def element_entry(entry: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the entry describing the element root ("constructor" if nested)."""
    constructor = entry.get("constructor")
    if isinstance(constructor, Mapping):
        return constructor
    return entry


def to_selector(descriptor: Any, **arguments: str) -> Selector:
    """Dispatch a locator descriptor to a concrete Selector."""
    if isinstance(descriptor, Selector):
        return descriptor
    if isinstance(descriptor, SelectorQuery):
        return descriptor.query(**arguments)
    raise TypeError(f"Expected Selector or SelectorQuery, got {type(descriptor).__name__}")


class SmartLocator:
    """
    Locator resolution against a Playwright page.

    Usage:
        >>> smart = SmartLocator(page, locators)
        >>> await smart.click("components.menu.title_bar")
        >>> items = await smart.locate_all("components.menu.title_bar_item")
    """

    def __init__(self, page: Page, locators: LocatorSet):
        """
        Initialize SmartLocator.

        Args:
            page: Playwright Page object
            locators: Resolved locator set for the IDE version under test
        """
        self.page = page
        self.locators = locators
        self._health_records: List[LocatorHealth] = []
        self._fallback_used: Dict[str, LocatorHealth] = {}

    def entry(self, target: Target) -> Mapping[str, Any]:
        """
        Look up a locator entry.

        Args:
            target: Dot-notation path into the locator set, or an entry

        Raises:
            ElementNotFoundError: When the path does not exist
        """
        if isinstance(target, Mapping):
            return element_entry(target)
        entry = self.locators.get_path(target)
        if not isinstance(entry, Mapping):
            raise ElementNotFoundError(f"No locator defined for: {target}")
        return element_entry(entry)

    def selectors(self, target: Target, **arguments: str) -> List[str]:
        """Return the primary and fallback selectors as Playwright strings."""
        entry = self.entry(target)
        if "locator" not in entry:
            raise ElementNotFoundError(f"Locator entry has no 'locator': {target}")
        selectors = [to_selector(entry["locator"], **arguments).to_playwright()]
        for fallback in entry.get("fallbacks", ()):
            selectors.append(to_selector(fallback, **arguments).to_playwright())
        return selectors

    def resolve(
        self,
        target: Target,
        parent: Optional[Locator] = None,
        **arguments: str,
    ) -> Locator:
        """Build a locator from the primary selector without waiting."""
        root = parent if parent is not None else self.page
        return root.locator(self.selectors(target, **arguments)[0])

    async def locate(
        self,
        target: Target,
        parent: Optional[Locator] = None,
        timeout: int = 5000,
        **arguments: str,
    ) -> Locator:
        """
        Locate element using the primary selector, then the fallbacks.

        Args:
            target: Locator path or entry
            parent: Element to search below (page if omitted)
            timeout: Timeout in milliseconds for each attempt
            **arguments: Arguments for SelectorQuery locators

        Returns:
            Playwright Locator for the first visible match

        Raises:
            ElementNotFoundError: When all strategies fail
        """
        display_name = target if isinstance(target, str) else "custom_element"
        root = parent if parent is not None else self.page
        selectors = self.selectors(target, **arguments)
        errors = []

        for index, selector in enumerate(selectors):
            locator = root.locator(selector).first
            try:
                await locator.wait_for(state="visible", timeout=timeout)
            except PlaywrightTimeoutError as e:
                errors.append(f"{selector} -> {str(e)[:50]}")
                continue

            health = LocatorHealth(
                element_name=display_name,
                primary_selector=selectors[0],
                used_fallback=index > 0,
                fallback_selector=selector if index > 0 else None,
            )
            self._health_records.append(health)
            if index > 0:
                logger.warning(f"Element '{display_name}' used fallback: {selector}")
                self._fallback_used[display_name] = health
            else:
                logger.debug(f"Element '{display_name}' found: {selector}")
            return locator

        error_msg = (
            f"All locators failed for '{display_name}':\n" +
            "\n".join(f"  - {err}" for err in errors)
        )
        logger.error(error_msg)
        raise ElementNotFoundError(error_msg)

    async def locate_all(
        self,
        target: Target,
        parent: Optional[Locator] = None,
        **arguments: str,
    ) -> List[Locator]:
        """Return every element currently matching the primary selector."""
        return await self.resolve(target, parent, **arguments).all()

    async def click(self, target: Target, timeout: int = 5000, **arguments: str) -> None:
        locator = await self.locate(target, timeout=timeout, **arguments)
        await locator.click()

    async def is_visible(self, target: Target, timeout: int = 2000, **arguments: str) -> bool:
        """Check if element is visible."""
        try:
            await self.locate(target, timeout=timeout, **arguments)
            return True
        except ElementNotFoundError:
            return False

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists locators that needed a fallback; their primary selectors are
        candidates for a new version diff.
        """
        if not self._fallback_used:
            return "All elements used primary locators. No maintenance needed."

        report_lines = [
            "Locator Health Report - Fallbacks Used:",
            "",
        ]
        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    Failed primary: {health.primary_selector}",
                f"    Used: {health.fallback_selector}",
                "",
            ])
        return "\n".join(report_lines)


__all__ = [
    "ElementNotFoundError",
    "LocatorHealth",
    "SmartLocator",
    "element_entry",
    "to_selector",
]
