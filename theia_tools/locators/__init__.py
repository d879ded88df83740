"""
================================================================================
Bundled Locators
================================================================================

Locator catalogs shipped for each supported distribution:

    theia/versions/       Eclipse Theia
    che/versions/         Eclipse Che
    codeready/versions/   CodeReady Workspaces

Every catalog holds a complete baseline for BASE_VERSION and sparse diffs
for later releases. Config `theia.base_version` selects another baseline
file when a catalog ships more than one.

Usage:
    from theia_tools.locators import load_locators

    locators = load_locators("theia", "1.17.0")
    page = TitleBar(page, locators)

================================================================================
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from theia_tools.common import get_config
from theia_tools.locator_loader import LocatorLoader, LocatorSet


BASE_VERSION = "1.10.0"
LATEST_VERSION = "1.18.0"

LOCATORS_ROOT = Path(__file__).parent


class Distribution(str, Enum):
    """IDE distribution under test."""
    THEIA = "theia"
    CHE = "che"
    CODEREADY = "codeready"


def get_locators_path(distribution: Union[str, Distribution]) -> Path:
    """Return the folder holding the catalog for a distribution."""
    return LOCATORS_ROOT / Distribution(distribution).value / "versions"


def get_loader(
    distribution: Union[str, Distribution],
    base_version: Optional[str] = None,
) -> LocatorLoader:
    """
    Return the shared loader for a distribution.

    Args:
        distribution: Distribution name
        base_version: Baseline file to start from. Defaults to config
            `theia.base_version`, then to BASE_VERSION.
    """
    base_version = str(base_version or get_config("theia.base_version", BASE_VERSION))
    return _build_loader(Distribution(distribution), base_version)


@lru_cache(maxsize=None)
def _build_loader(distribution: Distribution, base_version: str) -> LocatorLoader:
    return LocatorLoader.from_directory(get_locators_path(distribution), base_version)


def load_locators(
    distribution: Union[str, Distribution, None] = None,
    version: Optional[str] = None,
) -> LocatorSet:
    """
    Resolve bundled locators.

    Args:
        distribution: Distribution name. Defaults to config `theia.distribution`.
        version: IDE version under test. Defaults to config `theia.version`,
            then to LATEST_VERSION.

    Returns:
        Read-only locator set for the version
    """
    distribution = Distribution(distribution or get_config("theia.distribution", Distribution.THEIA.value))
    version = str(version or get_config("theia.version", LATEST_VERSION))
    logger.info(f"Using {distribution.value} locators for version {version}")
    return get_loader(distribution).resolve(version)


__all__ = [
    "BASE_VERSION",
    "LATEST_VERSION",
    "Distribution",
    "get_loader",
    "get_locators_path",
    "load_locators",
]
