"""
================================================================================
Context Menu Page Object (Async / Playwright)
================================================================================

Phosphor menus opened from the title bar or by right click. Submenus are
attached to the document as separate menu elements, so the most recently
opened menu is the last one in the DOM.

================================================================================
"""

from __future__ import annotations

from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Page

from theia_tools.locator_loader import LocatorSet
from testsuites.ui_testing.framework import BasePage, ElementNotFoundError, SmartLocator, TheiaElement
from testsuites.ui_testing.framework.theia_element import find_by_title


CONTEXT_MENU = "components.menu.context_menu"
CONTEXT_MENU_ITEM = "components.menu.context_menu_item"


class ContextMenuItem:
    """Menu entry. Clickable, and MenuLike when it opens a submenu."""

    def __init__(self, element: TheiaElement, menu: "ContextMenu"):
        self.element = element
        self.menu = menu

    async def get_title(self) -> str:
        return await self.element.get_property("title")

    async def is_enabled(self) -> bool:
        return await self.element.get_property_or("enabled", True)

    async def is_expandable(self) -> bool:
        return await self.element.get_property_or("expandable", False)

    async def click(self) -> None:
        await self.element.click()

    async def open(self) -> "ContextMenu":
        """Open the submenu of this item."""
        if not await self.is_expandable():
            raise ElementNotFoundError(f"Menu item '{await self.get_title()}' has no submenu")
        await self.element.locator.hover()
        return await ContextMenu.opened(self.menu.page, self.menu.locators)

    async def get_items(self) -> List["ContextMenuItem"]:
        return await (await self.open()).get_items()

    async def get_item(self, title: str) -> "ContextMenuItem":
        return await (await self.open()).get_item(title)

    async def select(self, *path: str) -> Optional["ContextMenuItem"]:
        if not path:
            await self.click()
            return None
        return await (await self.open()).select(*path)


class ContextMenu(BasePage):
    """An opened context menu."""

    def __init__(self, page: Page, locators: LocatorSet, container: TheiaElement, base_url: str = ""):
        super().__init__(page, locators, base_url)
        self.container = container

    @classmethod
    async def opened(cls, page: Page, locators: LocatorSet, timeout: int = 5000) -> "ContextMenu":
        """Wrap the most recently opened menu."""
        smart = SmartLocator(page, locators)
        entry = smart.entry(CONTEXT_MENU)
        locator = smart.resolve(entry).last
        await locator.wait_for(state="visible", timeout=timeout)
        return cls(page, locators, TheiaElement(locator, entry, smart))

    async def get_items(self) -> List[ContextMenuItem]:
        elements = await self.container.find_all(CONTEXT_MENU_ITEM)
        return [ContextMenuItem(element, self) for element in elements]

    async def get_item(self, title: str) -> ContextMenuItem:
        item = await find_by_title(await self.get_items(), title)
        if item is None:
            raise ElementNotFoundError(f"Context menu has no item '{title}'")
        return item

    async def select(self, *path: str) -> Optional[ContextMenuItem]:
        """
        Walk a menu path, opening submenus on the way.

        Returns the submenu item when the path ends on an expandable item,
        None after clicking a leaf.
        """
        if not path:
            return None
        title, rest = path[0], path[1:]
        with allure.step(f"Select menu item: {title}"):
            item = await self.get_item(title)
            if rest:
                return await item.select(*rest)
            if await item.is_expandable():
                return item
            if not await item.is_enabled():
                logger.warning(f"Clicking disabled menu item '{title}'")
            await item.click()
            return None

    async def close(self) -> None:
        with allure.step("Close context menu"):
            await self.page.keyboard.press("Escape")


__all__ = [
    "ContextMenu",
    "ContextMenuItem",
]
