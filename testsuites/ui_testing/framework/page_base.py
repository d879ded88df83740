"""
================================================================================
Base Page Object
================================================================================

Foundation class for Theia page objects.

Provides:
    - Constructor injection of the resolved LocatorSet
    - Element lookup by locator path
    - Navigation and workbench wait helpers

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from theia_tools.common import get_config
from theia_tools.locator_loader import LocatorSet

from .smart_locator import SmartLocator, Target
from .theia_element import TheiaElement


class BasePage:
    """
    Base class for all page objects.

    Every page object receives the locator set resolved for the IDE version
    under test; nothing is read from global state.

    Usage:
        class StatusBar(BasePage):
            ROOT = "components.status_bar"

            async def open_notifications(self):
                await self.click("components.status_bar.open_notification_center")

        locators = load_locators("theia", "1.17.0")
        status_bar = StatusBar(page, locators)
    """

    # Locator path of the page object's root element (override in subclasses)
    ROOT: Optional[str] = None

    def __init__(
        self,
        page: Page,
        locators: LocatorSet,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            locators: Resolved locator set
            base_url: IDE URL. Defaults to UI_BASE_URL, then config theia.base_url.
        """
        self.page = page
        self.locators = locators
        if not base_url:
            base_url = os.getenv("UI_BASE_URL") or get_config("theia.base_url", "http://localhost:3000")
        self.base_url = base_url.rstrip("/")
        self.smart = SmartLocator(page, locators)
        self.timeout = int(get_config("timeouts.implicit", 30000))

    async def navigate(self, wait_for: str = "domcontentloaded") -> None:
        """
        Open the IDE.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.base_url}"):
            await self.page.goto(self.base_url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.base_url}")

    async def wait_for_workbench(self, timeout: Optional[int] = None) -> None:
        """Wait until the workbench layout is rendered."""
        timeout = timeout or int(get_config("timeouts.page_load", 120000))
        with allure.step("Wait for workbench"):
            await self.smart.locate("widgets.editor_loaded_component", timeout=timeout)

    # =========================================================================
    # Element Lookup
    # =========================================================================

    async def root(self, timeout: Optional[int] = None) -> TheiaElement:
        """Return the root element of this page object."""
        if self.ROOT is None:
            raise NotImplementedError(f"{type(self).__name__} does not define ROOT")
        return await self.element(self.ROOT, timeout=timeout)

    async def element(
        self,
        target: Target,
        parent: Optional[Locator] = None,
        timeout: Optional[int] = None,
        **arguments: str,
    ) -> TheiaElement:
        """Locate one element by locator path (waits up to timeouts.implicit by default)."""
        timeout = timeout or self.timeout
        entry = self.smart.entry(target)
        locator = await self.smart.locate(entry, parent=parent, timeout=timeout, **arguments)
        return TheiaElement(locator, entry, self.smart)

    async def elements(
        self,
        target: Target,
        parent: Optional[Locator] = None,
        **arguments: str,
    ) -> List[TheiaElement]:
        """Return every element matching a locator path."""
        entry = self.smart.entry(target)
        locators = await self.smart.locate_all(entry, parent=parent, **arguments)
        return [TheiaElement(locator, entry, self.smart) for locator in locators]

    async def click(self, target: Target, timeout: int = 5000, **arguments: str) -> None:
        with allure.step(f"Click: {target}"):
            await self.smart.click(target, timeout=timeout, **arguments)

    async def is_visible(self, target: Target, timeout: int = 2000) -> bool:
        return await self.smart.is_visible(target, timeout)

    def get_locator_health_report(self) -> str:
        """Get smart locator health report."""
        return self.smart.get_health_report()


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias
PageBase = BasePage
