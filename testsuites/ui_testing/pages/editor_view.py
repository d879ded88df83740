"""
================================================================================
Editor View Page Object (Async / Playwright)
================================================================================

The main editor area and its tabs.

================================================================================
"""

from __future__ import annotations

from typing import List, Optional

import allure

from testsuites.ui_testing.framework import BasePage, ElementNotFoundError, TheiaElement
from testsuites.ui_testing.framework.theia_element import find_by_title


EDITOR_TAB = "components.editor.tab_bar.tab"


class EditorTab:
    """Editor tab. Clickable and Closeable."""

    def __init__(self, element: TheiaElement):
        self.element = element

    async def get_title(self) -> str:
        return await self.element.get_property("title")

    async def is_dirty(self) -> bool:
        return await self.element.get_property("dirty")

    async def is_selected(self) -> bool:
        return await self.element.get_property("selected")

    async def click(self) -> None:
        await self.element.click()

    async def select(self) -> None:
        with allure.step(f"Select editor tab: {await self.get_title()}"):
            await self.click()

    async def close(self) -> None:
        with allure.step(f"Close editor tab: {await self.get_title()}"):
            icon = await self.element.find(f"{EDITOR_TAB}.close")
            await icon.click()


class EditorView(BasePage):
    """Main content panel holding the editors."""

    ROOT = "components.editor.view"

    async def get_tabs(self) -> List[EditorTab]:
        root = await self.root()
        return [EditorTab(element) for element in await root.find_all(EDITOR_TAB)]

    async def get_tab(self, title: str) -> EditorTab:
        tab = await find_by_title(await self.get_tabs(), title)
        if tab is None:
            raise ElementNotFoundError(f"No editor tab titled '{title}'")
        return tab

    async def get_opened_titles(self) -> List[str]:
        return [await tab.get_title() for tab in await self.get_tabs()]

    async def get_active_tab(self) -> Optional[EditorTab]:
        for tab in await self.get_tabs():
            if await tab.is_selected():
                return tab
        return None

    async def open_editor(self, title: str) -> EditorTab:
        tab = await self.get_tab(title)
        await tab.select()
        return tab

    async def close_editor(self, title: str) -> None:
        await (await self.get_tab(title)).close()

    async def close_all_editors(self) -> None:
        with allure.step("Close all editors"):
            for tab in await self.get_tabs():
                await tab.close()


__all__ = [
    "EditorTab",
    "EditorView",
]
