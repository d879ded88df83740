"""CodeReady Workspaces 1.10.0 baseline: Che locators with the older dashboard."""

from theia_tools.locator_loader import By, merge
from theia_tools.locators.common import base_locators

locators = merge(base_locators(), {
    "dashboard": {
        "menu": {"locator": By.id("chenavbar")},
    },
    "widgets": {
        "list": {"locator": By.css("md-list")},
        "list_item": {"locator": By.css("md-list-item")},
        "tabs": {"locator": By.css("md-tabs")},
        "tab": {"locator": By.css("md-tab-item")},
    },
})
