"""
================================================================================
Title Bar Page Object (Async / Playwright)
================================================================================

The workbench menu bar ("File", "Edit", ...). Each item opens a context menu.

Usage:
    title_bar = TitleBar(page, locators)
    await title_bar.select("File", "New File")

================================================================================
"""

from __future__ import annotations

from typing import List, Optional

import allure

from testsuites.ui_testing.framework import BasePage, ElementNotFoundError, TheiaElement
from testsuites.ui_testing.framework.theia_element import find_by_title

from .context_menu import ContextMenu, ContextMenuItem


TITLE_BAR_ITEM = "components.menu.title_bar_item"


class TitleBarItem:
    """Top-level menu item. Clickable and MenuLike."""

    def __init__(self, element: TheiaElement, bar: "TitleBar"):
        self.element = element
        self.bar = bar

    async def get_title(self) -> str:
        return await self.element.get_property("title")

    async def click(self) -> None:
        await self.element.click()

    async def open(self) -> ContextMenu:
        """Click the item and return the menu it opens."""
        with allure.step(f"Open title bar menu: {await self.get_title()}"):
            await self.click()
            return await ContextMenu.opened(self.bar.page, self.bar.locators)

    async def get_items(self) -> List[ContextMenuItem]:
        return await (await self.open()).get_items()

    async def get_item(self, title: str) -> ContextMenuItem:
        return await (await self.open()).get_item(title)

    async def select(self, *path: str) -> Optional[ContextMenuItem]:
        if not path:
            await self.click()
            return None
        return await (await self.open()).select(*path)


class TitleBar(BasePage):
    """Workbench title bar. MenuLike."""

    ROOT = "components.menu.title_bar"

    async def get_items(self) -> List[TitleBarItem]:
        root = await self.root()
        return [TitleBarItem(element, self) for element in await root.find_all(TITLE_BAR_ITEM)]

    async def get_item(self, title: str) -> TitleBarItem:
        item = await find_by_title(await self.get_items(), title)
        if item is None:
            raise ElementNotFoundError(f"Title bar has no item '{title}'")
        return item

    async def get_titles(self) -> List[str]:
        return [await item.get_title() for item in await self.get_items()]

    async def select(self, *path: str) -> Optional[ContextMenuItem]:
        """
        Click through a menu path, e.g. select("File", "Open Recent", "foo").

        Returns:
            The last item when it opens a submenu, otherwise None
        """
        if not path:
            raise ValueError("Menu path must not be empty")
        with allure.step(f"Select title bar path: {' > '.join(path)}"):
            item = await self.get_item(path[0])
            return await item.select(*path[1:])


__all__ = [
    "TitleBar",
    "TitleBarItem",
]
