import pytest

from theia_tools.errors import DiffNotFound
from theia_tools.locator_loader import By, ExtractionFunction, LocatorSet
from theia_tools.locators import (
    BASE_VERSION,
    LATEST_VERSION,
    Distribution,
    get_loader,
    get_locators_path,
    load_locators,
)


def test_catalog_folders_exist():
    for distribution in Distribution:
        assert get_locators_path(distribution).is_dir()
        loader = get_loader(distribution)
        assert BASE_VERSION not in loader.repository.list_available()
        assert isinstance(loader.repository.load_baseline(BASE_VERSION), LocatorSet)


def test_theia_baseline():
    locators = load_locators("theia", BASE_VERSION)

    assert locators.widgets.editor_frame.locator == By.tag_name("body")
    assert locators.components.workbench.notification.close.locator == By.class_name("clear")
    assert locators.components.workbench.input.message.locator == By.class_name("monaco-highlighted-label")


def test_theia_1_16_quick_input():
    locators = load_locators(Distribution.THEIA, "1.16.0")
    quick_input = locators.components.workbench.input

    assert quick_input.message.locator == By.id("quickInput_message")
    assert isinstance(quick_input.constructor.properties.title, ExtractionFunction)
    assert isinstance(quick_input.constructor.properties.focused, ExtractionFunction)
    assert locators.widgets.monaco_scroll.item.locator == By.css("[role='option']")
    assert locators.components.workbench.input.scroll.item.locator == By.css("[role='treeitem']")
    assert locators.components.workbench.notification.close.locator == By.class_name("clear")


def test_theia_1_17_folds_yaml_diff_on_top_of_1_16():
    locators = load_locators("theia", "1.17.0")
    notification = locators.components.workbench.notification

    assert notification.close.locator == By.xpath('.//li[@title="Clear"]')
    assert notification.center.clear_all.locator == By.xpath('.//li[@title="Clear All"]')
    assert notification.center.close.locator == By.xpath('.//li[@title="Hide Notification Center"]')
    assert notification.center.constructor.locator == By.class_name("theia-notification-center")
    assert locators.components.activity_bar.action.constructor.locator == By.css(".theia-sidebar-menu .codicon")
    assert locators.components.workbench.input.message.locator == By.id("quickInput_message")


def test_latest_version_includes_every_theia_diff():
    assert load_locators("theia", LATEST_VERSION) == load_locators("theia", "1.17.0")


def test_yaml_extras_are_loaded():
    diff = get_loader(Distribution.THEIA).repository.load("1.17.0")
    assert diff.extras["changelog"].endswith("v1.17.0")


def test_downgrade_to_baseline_returns_baseline():
    loader = get_loader(Distribution.THEIA)
    assert loader.resolve("1.10") is loader.base_locators


def test_distribution_baselines_do_not_share_state():
    theia = load_locators("theia", BASE_VERSION)
    che = load_locators("che", BASE_VERSION)
    codeready = load_locators("codeready", BASE_VERSION)

    assert che.widgets.editor_frame.locator == By.id("ide-iframe")
    assert theia.widgets.editor_frame.locator == By.tag_name("body")
    assert codeready.dashboard.menu.locator == By.id("chenavbar")
    assert che.dashboard.menu.locator == By.id("page-sidebar")
    assert codeready.widgets.tab.locator == By.css("md-tab-item")
    assert isinstance(che.widgets.tab.properties.selected, ExtractionFunction)
    assert isinstance(codeready.widgets.tab.properties.selected, ExtractionFunction)


def test_load_locators_reads_config(monkeypatch):
    monkeypatch.setenv("THEIA__DISTRIBUTION", "che")
    monkeypatch.setenv("THEIA__VERSION", "1.16.0")

    locators = load_locators()

    assert isinstance(locators, LocatorSet)
    assert locators.widgets.editor_frame.locator == By.id("ide-iframe")


def test_unknown_distribution_raises():
    with pytest.raises(ValueError):
        load_locators("vscode", BASE_VERSION)


def test_base_version_comes_from_config(monkeypatch):
    monkeypatch.setenv("THEIA__BASE_VERSION", "1.10")
    loader = get_loader("theia")

    assert loader.base_version == "1.10"
    assert loader.plan("1.17.0") == ["1.16.0", "1.17.0"]
    assert get_loader(Distribution.THEIA, "1.10.0").base_version == "1.10.0"


def test_base_version_without_baseline_file_fails(monkeypatch):
    monkeypatch.setenv("THEIA__BASE_VERSION", "1.16.0")
    with pytest.raises(DiffNotFound, match="does not define 'locators'"):
        get_loader("theia")
