"""Eclipse Theia 1.10.0 baseline locators."""

from theia_tools.locator_loader import By, merge
from theia_tools.locators.common import base_locators

locators = merge(base_locators(), {
    "widgets": {
        # plain Theia is served without the Che iframe
        "editor_frame": {"locator": By.tag_name("body")},
    },
})
