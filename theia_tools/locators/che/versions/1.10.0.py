"""Eclipse Che 1.10.0 baseline locators."""

from theia_tools.locators.common import base_locators

locators = base_locators()
