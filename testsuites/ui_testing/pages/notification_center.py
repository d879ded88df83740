"""
================================================================================
Notification Page Objects (Async / Playwright)
================================================================================

Notification toasts and the notification center opened from the status bar.

================================================================================
"""

from __future__ import annotations

from typing import List

import allure
from loguru import logger

from testsuites.ui_testing.framework import BasePage, ElementNotFoundError, TheiaElement
from testsuites.ui_testing.framework.theia_element import find_by_title


NOTIFICATION = "components.workbench.notification"


class NotificationAction:
    """Button of a notification."""

    def __init__(self, element: TheiaElement):
        self.element = element

    async def get_title(self) -> str:
        return await self.element.get_property("title")

    async def click(self) -> None:
        await self.element.click()


class Notification:
    """A single notification. Closeable."""

    def __init__(self, element: TheiaElement):
        self.element = element

    async def get_message(self) -> str:
        return await self.element.get_property("title")

    async def get_title(self) -> str:
        return await self.get_message()

    async def get_source(self) -> str:
        source = await self.element.find(f"{NOTIFICATION}.source")
        return await source.text()

    async def get_actions(self) -> List[NotificationAction]:
        return [NotificationAction(e) for e in await self.element.find_all(f"{NOTIFICATION}.action")]

    async def take_action(self, title: str) -> None:
        with allure.step(f"Take notification action: {title}"):
            action = await find_by_title(await self.get_actions(), title)
            if action is None:
                raise ElementNotFoundError(f"Notification has no action '{title}'")
            await action.click()

    async def dismiss(self) -> None:
        with allure.step("Dismiss notification"):
            button = await self.element.find(f"{NOTIFICATION}.close")
            await button.click()

    async def close(self) -> None:
        await self.dismiss()


class NotificationCenter(BasePage):
    """Notification center. Closeable."""

    ROOT = f"{NOTIFICATION}.center"

    async def is_open(self) -> bool:
        return await self.is_visible(self.ROOT)

    async def open(self) -> "NotificationCenter":
        if not await self.is_open():
            with allure.step("Open notification center"):
                status_bar = await self.element("components.status_bar")
                button = await status_bar.find("components.status_bar.open_notification_center")
                await button.click()
        return self

    async def get_notifications(self) -> List[Notification]:
        root = await self.root()
        notifications = [Notification(e) for e in await root.find_all(NOTIFICATION)]
        logger.debug(f"Notification center holds {len(notifications)} notifications")
        return notifications

    async def get_notification(self, message: str) -> Notification:
        notification = await find_by_title(await self.get_notifications(), message)
        if notification is None:
            raise ElementNotFoundError(f"No notification with message '{message}'")
        return notification

    async def clear_all(self) -> None:
        with allure.step("Clear all notifications"):
            root = await self.root()
            await (await root.find(f"{self.ROOT}.clear_all")).click()

    async def close(self) -> None:
        with allure.step("Close notification center"):
            root = await self.root()
            await (await root.find(f"{self.ROOT}.close")).click()


class StandaloneNotifications(BasePage):
    """Toasts shown outside of the notification center."""

    ROOT = f"{NOTIFICATION}.standalone"

    async def get_notifications(self) -> List[Notification]:
        root = await self.root()
        return [Notification(e) for e in await root.find_all(NOTIFICATION)]


__all__ = [
    "Notification",
    "NotificationAction",
    "NotificationCenter",
    "StandaloneNotifications",
]
