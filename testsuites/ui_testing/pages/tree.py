"""
================================================================================
Tree Page Objects (Async / Playwright)
================================================================================

Theia tree widget (file explorer and other side bar trees).

================================================================================
"""

from __future__ import annotations

from typing import List, Optional

import allure

from testsuites.ui_testing.framework import BasePage, TheiaElement


TREE_NODE = "widgets.tree.node"
EXPAND_TOGGLE = "widgets.tree.file.expand_toggle"
NODE_LABEL = "widgets.tree.file.label"


class DefaultTreeItem:
    """Tree node. Clickable and Expandable."""

    def __init__(self, element: TheiaElement):
        self.element = element

    async def get_label(self) -> str:
        label = await self.element.find(NODE_LABEL)
        return await label.text()

    async def get_title(self) -> str:
        return await self.get_label()

    async def is_expandable(self) -> bool:
        return await self.element.get_property("expandable")

    async def is_selected(self) -> bool:
        return await self.element.get_property("selected")

    async def is_focused(self) -> bool:
        return await self.element.get_property("focused")

    async def click(self) -> None:
        await self.element.click()

    async def _toggle(self) -> TheiaElement:
        return await self.element.find(EXPAND_TOGGLE)

    async def is_expanded(self) -> bool:
        if not await self.is_expandable():
            return False
        toggle = await self._toggle()
        return not await toggle.get_property("collapsed")

    async def expand(self) -> None:
        if await self.is_expandable() and not await self.is_expanded():
            with allure.step(f"Expand tree item: {await self.get_label()}"):
                await (await self._toggle()).click()

    async def collapse(self) -> None:
        if await self.is_expanded():
            with allure.step(f"Collapse tree item: {await self.get_label()}"):
                await (await self._toggle()).click()


class Tree(BasePage):
    """A tree widget; ROOT may point at a more specific tree."""

    ROOT = "widgets.tree"

    async def get_items(self) -> List[DefaultTreeItem]:
        root = await self.root()
        return [DefaultTreeItem(element) for element in await root.find_all(TREE_NODE)]

    async def find_item(self, label: str) -> Optional[DefaultTreeItem]:
        for item in await self.get_items():
            if await item.get_label() == label:
                return item
        return None


class FileTree(Tree):
    ROOT = "components.side_bar.tree.default"


__all__ = [
    "DefaultTreeItem",
    "FileTree",
    "Tree",
]
