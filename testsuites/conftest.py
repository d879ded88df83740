"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and provides shared fixtures.

================================================================================
"""

import pytest

from theia_tools.common import reset_config


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Locator resolution unit tests"
    )
    config.addinivalue_line(
        "markers", "ui: Page object tests"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "menu: Tests related to title bar and context menus"
    )
    config.addinivalue_line(
        "markers", "notification: Tests related to notifications"
    )
    config.addinivalue_line(
        "markers", "editor: Tests related to editor tabs"
    )
    config.addinivalue_line(
        "markers", "tree: Tests related to tree widgets"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds the domain marker matching the directory a test lives in.
    """
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)


@pytest.fixture(autouse=True)
def _fresh_config():
    """Every test starts from freshly loaded configuration."""
    reset_config()
    yield
    reset_config()


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Theia Locator Resolution Test Suite",
        "=" * 60,
        "",
    ]
