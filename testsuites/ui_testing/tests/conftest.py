"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for page-object tests.

Page objects run against an in-memory fake page whose DOM is built from the
selectors of the locator set under test, so every test runs once per
supported Theia release with a different selector layout.

Key Features:
- Locator sets resolved per IDE version
- Fake Playwright page
- Test data for the fake workbench

================================================================================
"""

import pytest

from theia_tools.locator_loader import LocatorSet
from theia_tools.locators import BASE_VERSION, Distribution, load_locators
from testsuites.fake_playwright import FakePage


# ================================================================================
# Locator Fixtures
# ================================================================================

@pytest.fixture(params=[BASE_VERSION, "1.16.0", "1.17.0"])
def theia_version(request) -> str:
    """IDE version the page objects are exercised against."""
    return request.param


@pytest.fixture
def locators(theia_version: str) -> LocatorSet:
    """
    Locator set resolved for `theia_version`.

    Resolution goes through the shared per-distribution loader, so every
    version is folded once per session.
    """
    return load_locators(Distribution.THEIA, theia_version)


# ================================================================================
# Page Fixtures
# ================================================================================

@pytest.fixture
def page() -> FakePage:
    """Empty fake page; tests attach the workbench parts they need."""
    return FakePage()


@pytest.fixture
def test_data():
    """
    Provides common test data for UI tests.
    """
    return {
        "menus": {
            "File": ["New File", "Open Recent", "Save"],
            "Edit": ["Undo", "Redo"],
        },
        "recent_workspaces": ["/projects/theia", "/projects/che"],
        "notifications": [
            {"message": "Indexing finished", "source": "Java", "actions": ["Details"]},
            {"message": "Reload required", "source": "Extensions", "actions": ["Reload", "Later"]},
        ],
        "editors": [
            {"title": "README.md", "dirty": False},
            {"title": "main.py", "dirty": True},
        ],
    }
