"""
================================================================================
Theia Tools
================================================================================

Locator infrastructure for Eclipse Theia / Eclipse Che UI automation.

Modules:
    - common: Shared configuration and logging utilities
    - version_checker: Version parsing and ordering
    - locator_loader: Version-aware locator resolution
    - locators: Bundled locator catalogs per distribution

Example:
    from theia_tools.locators import load_locators

    locators = load_locators("theia", "1.17.0")
    locators.components.menu.title_bar.locator

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "errors",
    "version_checker",
    "locator_loader",
    "locators",
]
