"""
================================================================================
Notification Tests (Async / Fake Playwright)
================================================================================

Showcase:
  - Notification center opened from the status bar
  - Toolbar buttons located with version-specific selectors
    (class names up to 1.16, title based XPath from 1.17)

================================================================================
"""

import allure
import pytest

from testsuites.fake_playwright import FakeElement, selector
from testsuites.ui_testing.framework import Closeable, ElementNotFoundError
from testsuites.ui_testing.pages import Notification, NotificationCenter, StandaloneNotifications


def _notification(locators, data) -> FakeElement:
    notification_locators = locators.components.workbench.notification
    element = FakeElement(attributes={"class": "theia-notification-list-item"})
    element.add(".theia-notification-message", FakeElement(text=data["message"]))
    element.add(selector(notification_locators.source), FakeElement(text=data["source"]))
    for title in data["actions"]:
        element.add(selector(notification_locators.action), FakeElement(text=title))
    element.add(selector(notification_locators.close), FakeElement())
    return element


@pytest.fixture
def notification_center(page, locators, test_data):
    """Status bar whose bell button attaches the notification center."""
    notification_locators = locators.components.workbench.notification
    notification_query = selector(notification_locators)

    center = FakeElement()
    for data in test_data["notifications"]:
        notification = _notification(locators, data)
        close = notification.children[selector(notification_locators.close)][0]
        close.on_click = lambda _, n=notification: center.remove(notification_query, n)
        center.add(notification_query, notification)
    center.add(
        selector(notification_locators.center.clear_all),
        FakeElement(on_click=lambda _: center.children[notification_query].clear()),
    )

    def hide(_):
        center.visible = False

    center.add(selector(notification_locators.center.close), FakeElement(on_click=hide))

    bell = FakeElement(on_click=lambda _: page.add(selector(notification_locators.center), center))
    status_bar = FakeElement()
    status_bar.add(selector(locators.components.status_bar.open_notification_center), bell)
    page.add(selector(locators.components.status_bar), status_bar)
    return center


@allure.epic("UI Testing")
@allure.feature("Notifications")
class TestNotificationCenter:
    """Notification center page object suite."""

    @allure.story("Open")
    @allure.title("Notification center opens from the status bar")
    @pytest.mark.P0
    @pytest.mark.notification
    @pytest.mark.asyncio
    async def test_open(self, page, locators, notification_center):
        center = NotificationCenter(page, locators)
        assert not await center.is_open()

        await center.open()
        assert await center.is_open()

        await center.open()
        status_bar = page.root.children[selector(locators.components.status_bar)][0]
        bell = status_bar.children[selector(locators.components.status_bar.open_notification_center)][0]
        assert bell.clicks == 1

    @allure.story("Read")
    @allure.title("Notifications expose message, source and actions")
    @pytest.mark.P0
    @pytest.mark.notification
    @pytest.mark.asyncio
    async def test_read_notifications(self, page, locators, notification_center, test_data):
        center = await NotificationCenter(page, locators).open()
        notifications = await center.get_notifications()

        assert [await n.get_message() for n in notifications] == [
            data["message"] for data in test_data["notifications"]
        ]
        reload = await center.get_notification("Reload required")
        assert await reload.get_source() == "Extensions"
        assert [await a.get_title() for a in await reload.get_actions()] == ["Reload", "Later"]

    @allure.story("Actions")
    @allure.title("Notification action is clicked by title")
    @pytest.mark.P1
    @pytest.mark.notification
    @pytest.mark.asyncio
    async def test_take_action(self, page, locators, notification_center):
        center = await NotificationCenter(page, locators).open()
        notification = await center.get_notification("Reload required")

        await notification.take_action("Later")

        later = notification_center.children[selector(locators.components.workbench.notification)][1]
        buttons = later.children[selector(locators.components.workbench.notification.action)]
        assert [b.clicks for b in buttons] == [0, 1]
        with pytest.raises(ElementNotFoundError):
            await notification.take_action("Never")

    @allure.story("Dismiss")
    @allure.title("Dismissing removes a single notification")
    @pytest.mark.P1
    @pytest.mark.notification
    @pytest.mark.asyncio
    async def test_dismiss(self, page, locators, notification_center):
        center = await NotificationCenter(page, locators).open()
        notification = await center.get_notification("Indexing finished")

        assert isinstance(notification, Closeable)
        await notification.dismiss()

        assert [await n.get_message() for n in await center.get_notifications()] == ["Reload required"]

    @allure.story("Clear")
    @allure.title("Clear all uses the toolbar button of the running version")
    @pytest.mark.P0
    @pytest.mark.notification
    @pytest.mark.asyncio
    async def test_clear_all_and_close(self, page, locators, notification_center):
        center = await NotificationCenter(page, locators).open()

        await center.clear_all()
        assert await center.get_notifications() == []

        await center.close()
        assert not await center.is_open()
        with pytest.raises(ElementNotFoundError):
            await center.get_notification("Reload required")

    @allure.story("Toasts")
    @allure.title("Standalone toasts are read like center entries")
    @pytest.mark.P2
    @pytest.mark.notification
    @pytest.mark.asyncio
    async def test_standalone(self, page, locators, test_data):
        toasts = FakeElement()
        toasts.add(
            selector(locators.components.workbench.notification),
            _notification(locators, test_data["notifications"][0]),
        )
        page.add(selector(locators.components.workbench.notification.standalone), toasts)

        notifications = await StandaloneNotifications(page, locators).get_notifications()
        assert [await n.get_title() for n in notifications] == ["Indexing finished"]
        assert isinstance(notifications[0], Notification)
