"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based page-object framework for Eclipse Theia / Eclipse Che.

Components:
    - smart_locator: Locator entries to Playwright locators, with fallbacks
    - theia_element: Element wrapper reading version-specific properties
    - capabilities: Clickable / Expandable / MenuLike interfaces
    - page_base: Base page object with locator injection

Author: Automation Team
License: MIT
================================================================================
"""

from .smart_locator import SmartLocator, ElementNotFoundError
from .theia_element import PropertyNotSupportedError, TheiaElement
from .capabilities import Clickable, Closeable, Expandable, HasProperties, MenuLike
from .page_base import BasePage

__all__ = [
    "BasePage",
    "Clickable",
    "Closeable",
    "ElementNotFoundError",
    "Expandable",
    "HasProperties",
    "MenuLike",
    "PropertyNotSupportedError",
    "SmartLocator",
    "TheiaElement",
]
