"""
================================================================================
Editor View Tests (Async / Fake Playwright)
================================================================================

Showcase:
  - Editor tabs read through extraction functions (title, dirty, selected)
  - Selecting and closing tabs

================================================================================
"""

import allure
import pytest

from testsuites.fake_playwright import FakeElement, selector
from testsuites.ui_testing.framework import Clickable, Closeable, ElementNotFoundError
from testsuites.ui_testing.pages import EditorTab, EditorView


@pytest.fixture
def editors(page, locators, test_data):
    """Main panel with the editors from test data, the first one active."""
    tab_locators = locators.components.editor.tab_bar.tab
    tab_query = selector(tab_locators)
    view = FakeElement()

    def select(tab):
        for other in view.children[tab_query]:
            other.attributes["class"] = other.attributes["class"].replace(" p-mod-current", "")
        tab.attributes["class"] += " p-mod-current"

    for index, data in enumerate(test_data["editors"]):
        classes = "p-TabBar-tab"
        if data["dirty"]:
            classes += " theia-mod-dirty"
        if index == 0:
            classes += " p-mod-current"
        tab = FakeElement(attributes={"class": classes}, on_click=select)
        tab.add(".p-TabBar-tabLabel", FakeElement(text=data["title"]))
        tab.add(
            selector(tab_locators.close),
            FakeElement(on_click=lambda _, t=tab: view.remove(tab_query, t)),
        )
        view.add(tab_query, tab)

    page.add(selector(locators.components.editor.view), view)
    return view


@allure.epic("UI Testing")
@allure.feature("Editor")
class TestEditorView:
    """Editor view page object suite."""

    @allure.story("Tabs")
    @allure.title("Opened editors are listed with their state")
    @pytest.mark.P0
    @pytest.mark.editor
    @pytest.mark.asyncio
    async def test_tabs(self, page, locators, editors):
        view = EditorView(page, locators)

        assert await view.get_opened_titles() == ["README.md", "main.py"]
        readme, main = await view.get_tabs()
        assert isinstance(readme, EditorTab)
        assert isinstance(readme, Clickable) and isinstance(readme, Closeable)
        assert await readme.is_selected() and not await readme.is_dirty()
        assert not await main.is_selected() and await main.is_dirty()

    @allure.story("Tabs")
    @allure.title("Selecting a tab makes it active")
    @pytest.mark.P1
    @pytest.mark.editor
    @pytest.mark.asyncio
    async def test_select_tab(self, page, locators, editors):
        view = EditorView(page, locators)

        await view.open_editor("main.py")

        active = await view.get_active_tab()
        assert await active.get_title() == "main.py"

    @allure.story("Close")
    @allure.title("Closing editors removes their tabs")
    @pytest.mark.P1
    @pytest.mark.editor
    @pytest.mark.asyncio
    async def test_close_editors(self, page, locators, editors):
        view = EditorView(page, locators)

        await view.close_editor("README.md")
        assert await view.get_opened_titles() == ["main.py"]
        assert await view.get_active_tab() is None

        await view.close_all_editors()
        assert await view.get_tabs() == []

    @allure.story("Errors")
    @allure.title("Unknown editor raises ElementNotFoundError")
    @pytest.mark.P2
    @pytest.mark.editor
    @pytest.mark.asyncio
    async def test_unknown_editor(self, page, locators, editors):
        with pytest.raises(ElementNotFoundError):
            await EditorView(page, locators).get_tab("missing.txt")
