"""
================================================================================
Locator Loader
================================================================================

Resolves the locator set for a given IDE version.

Starting from one baseline locator set, the loader folds every diff lying
between the baseline version and the target version:

    upgrade   (target > base):  base < v <= target, ascending
    downgrade (target < base):  base > v >= target, descending

Each diff is defined relative to the previous folded state, so the order is
always the release order and never the discovery order.

Usage:
    >>> repo = DirectoryDiffRepository("theia_tools/locators/theia/versions")
    >>> loader = LocatorLoader("1.10.0", repo.load_baseline("1.10.0"), repo)
    >>> locators = loader.resolve("1.17.0")
    >>> locators.components.workbench.notification.close.locator

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from loguru import logger

from theia_tools.errors import LocatorLoaderError
from theia_tools.version_checker import (
    Version,
    VersionComparisonResult,
    compare_versions,
    sort_versions,
    versions_between,
)

from .merge import merge_diff
from .models import LocatorSet
from .repository import DiffRepository, DirectoryDiffRepository, check_unique_versions


class Direction(Enum):
    """Direction of travel from the baseline version to the target."""
    NONE = "none"
    UPGRADE = "upgrade"
    DOWNGRADE = "downgrade"


class LocatorLoader:
    """
    Version-aware locator resolver.

    The baseline is never mutated. Resolved sets are read-only and cached
    per target version for the lifetime of the loader, so callers should
    build one loader per run and share the result.
    """

    def __init__(
        self,
        base_version: str,
        base_locators: Mapping[str, Any],
        repository: DiffRepository,
    ):
        """
        Initialize loader.

        Args:
            base_version: Version the baseline locators were written for
            base_locators: Complete locator tree for `base_version`
            repository: Source of version diffs

        Raises:
            InvalidVersionFormat: If `base_version` cannot be parsed
        """
        Version.parse(base_version)
        self.base_version = base_version
        self.base_locators = LocatorSet(base_locators)
        self.repository = repository
        self._resolved: Dict[Version, LocatorSet] = {}

    @classmethod
    def from_directory(cls, folder: Union[str, Path], base_version: str) -> "LocatorLoader":
        """Build a loader whose baseline and diffs live in the same folder."""
        repository = DirectoryDiffRepository(folder)
        logger.info(f"Loading \"{repository.folder}\" locators.")
        return cls(base_version, repository.load_baseline(base_version), repository)

    def direction(self, target_version: str) -> Direction:
        """Return whether resolving `target_version` upgrades or downgrades."""
        result = compare_versions(target_version, self.base_version)
        if result is VersionComparisonResult.EQUAL:
            return Direction.NONE
        if result is VersionComparisonResult.GREATER:
            return Direction.UPGRADE
        return Direction.DOWNGRADE

    def plan(self, target_version: str) -> List[str]:
        """
        Return the diff versions to apply for `target_version`, in fold order.

        The baseline's own version is never part of the plan; the target's
        diff, if present, always is.
        """
        direction = self.direction(target_version)
        if direction is Direction.NONE:
            return []

        available = self.repository.list_available()
        check_unique_versions(available, type(self.repository).__name__)
        logger.debug(f"Found following locator versions: {', '.join(sort_versions(available))}")

        if direction is Direction.UPGRADE:
            selected = versions_between(available, self.base_version, target_version)
            return sort_versions(selected)

        selected = versions_between(available, target_version, self.base_version,
                                    include_lower=True, include_upper=False)
        return sort_versions(selected, descending=True)

    def resolve(self, target_version: str) -> LocatorSet:
        """
        Resolve the locator set for `target_version`.

        Args:
            target_version: IDE version under test

        Returns:
            Read-only locator set

        Raises:
            InvalidVersionFormat: If a version cannot be parsed
            DiffNotFound: If a listed diff cannot be loaded
            LocatorLoaderError: If the repository lists one version twice
        """
        key = Version.parse(target_version)
        if key in self._resolved:
            return self._resolved[key]

        direction = self.direction(target_version)
        if direction is Direction.NONE:
            self._resolved[key] = self.base_locators
            return self.base_locators

        plan = self.plan(target_version)
        logger.info(
            f"Resolving locators {self.base_version} -> {target_version} "
            f"({direction.value}, {len(plan)} diff(s))"
        )

        current: Mapping[str, Any] = self.base_locators
        for version in plan:
            try:
                diff = self.repository.load(version)
            except LocatorLoaderError as e:
                logger.error(f"Locator resolution for {target_version} aborted at {version}: {e}")
                raise
            logger.debug(f"Applying \"{version}\" locators.")
            current = merge_diff(current, diff)

        resolved = LocatorSet(current)
        self._resolved[key] = resolved
        return resolved


__all__ = [
    "Direction",
    "LocatorLoader",
]
