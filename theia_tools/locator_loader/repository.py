"""
================================================================================
Locator Diff Repository
================================================================================

Catalog of version-tagged locator diffs.

Two storage layouts are supported:
    - InMemoryDiffRepository: diffs held in a mapping (tests, embedding)
    - DirectoryDiffRepository: one file per version in a folder

Directory layout::

    versions/
        1.10.0.py     # baseline: module attribute `locators`
        1.16.0.py     # diff: module attribute `diff`
        1.17.0.yaml   # diff: top-level key `diff`

YAML files describe selectors as ``{by: css, value: ".theia-app"}``. Python
files may use every descriptor type, including extraction functions.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import importlib.util
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Set, Union

import yaml
from loguru import logger

from theia_tools.errors import DiffNotFound, LocatorLoaderError
from theia_tools.version_checker import Version, compare_versions, is_version, VersionComparisonResult

from .models import By, LocatorDiff, LocatorSet


PYTHON_SUFFIXES = (".py",)
YAML_SUFFIXES = (".yaml", ".yml")


class DiffRepository(ABC):
    """Read-only source of locator diffs keyed by version string."""

    @abstractmethod
    def list_available(self) -> Set[str]:
        """Return every version for which a diff can be loaded."""

    @abstractmethod
    def load(self, version: str) -> LocatorDiff:
        """
        Load the diff for one version.

        Raises:
            DiffNotFound: If the version is not available
        """

    def _find_listed(self, version: str, available: Optional[Set[str]] = None) -> Optional[str]:
        """Return the listed spelling of a version ("1.16" matches "1.16.0")."""
        if available is None:
            available = self.list_available()
        if version in available:
            return version
        for candidate in available:
            if compare_versions(candidate, version) is VersionComparisonResult.EQUAL:
                return candidate
        return None


class InMemoryDiffRepository(DiffRepository):
    """
    Diff catalog backed by a mapping.

    Usage:
        >>> repo = InMemoryDiffRepository({
        ...     "1.16.0": {"components": {"editor": {"tab": {"locator": By.css(".tab")}}}},
        ... })
        >>> repo.load("1.16.0").locators["components"]
    """

    def __init__(self, diffs: Optional[Mapping[str, Union[Mapping[str, Any], LocatorDiff]]] = None):
        self._diffs: Dict[str, LocatorDiff] = {}
        check_unique_versions(diffs or {}, "in-memory repository")
        for version, payload in (diffs or {}).items():
            if isinstance(payload, LocatorDiff):
                self._diffs[version] = payload
            else:
                self._diffs[version] = LocatorDiff(version=version, locators=payload)

    def list_available(self) -> Set[str]:
        return set(self._diffs)

    def load(self, version: str) -> LocatorDiff:
        listed = self._find_listed(version)
        if listed is None:
            raise DiffNotFound(version, "not listed in repository")
        return self._diffs[listed]


class DirectoryDiffRepository(DiffRepository):
    """
    Diff catalog backed by a folder of version-named files.

    Files whose stem is not a version (``__init__.py``, ``helpers.py``) are
    ignored. Payloads are read once and cached per repository instance.
    """

    def __init__(self, folder: Union[str, Path]):
        self.folder = Path(folder).resolve()
        if not self.folder.is_dir():
            raise LocatorLoaderError(f"Locator folder not found: {self.folder}")
        self._files: Optional[Dict[str, Path]] = None
        self._cache: Dict[str, Dict[str, Any]] = {}

    def _scan(self) -> Dict[str, Path]:
        if self._files is None:
            files: Dict[str, Path] = {}
            for path in sorted(self.folder.iterdir()):
                if not path.is_file() or path.suffix not in PYTHON_SUFFIXES + YAML_SUFFIXES:
                    continue
                if not is_version(path.stem):
                    continue
                if path.stem in files:
                    raise LocatorLoaderError(
                        f"Duplicate locator files for {path.stem}: {files[path.stem].name}, {path.name}"
                    )
                files[path.stem] = path
            check_unique_versions(files, str(self.folder))
            self._files = files
            logger.debug(f"Found locator versions in {self.folder}: {', '.join(sorted(files))}")
        return self._files

    def list_available(self) -> Set[str]:
        """
        Return the versions whose file defines `diff`.

        Every version file is read, so a broken file fails the listing.
        Baseline-only files are reachable through `load_baseline`.
        """
        return {version for version in self._scan() if "diff" in self._read(version)}

    def load(self, version: str) -> LocatorDiff:
        listed = self._find_listed(version)
        if listed is None:
            raise DiffNotFound(version, f"no locator file in {self.folder}")

        diff = self._read(listed)["diff"]
        if isinstance(diff, LocatorDiff):
            return diff
        if not isinstance(diff, Mapping):
            raise DiffNotFound(version, "'diff' must be a mapping")

        # {"locators": {...}, "extras": {...}} or a bare locator tree
        if "locators" in diff and isinstance(diff["locators"], Mapping):
            return LocatorDiff(version=listed, locators=diff["locators"], extras=diff.get("extras") or {})
        return LocatorDiff(version=listed, locators=diff)

    def load_baseline(self, version: str) -> LocatorSet:
        """
        Load the full locator tree stored for the baseline version.

        Raises:
            DiffNotFound: If no file for the version defines `locators`
        """
        listed = self._find_listed(version, set(self._scan()))
        if listed is None:
            raise DiffNotFound(version, f"no baseline locator file in {self.folder}")

        payload = self._read(listed)
        locators = payload.get("locators")
        if not isinstance(locators, Mapping):
            raise DiffNotFound(version, f"{self._scan()[listed].name} does not define 'locators'")
        return LocatorSet(locators)

    def _read(self, version: str) -> Dict[str, Any]:
        if version not in self._cache:
            path = self._scan()[version]
            logger.debug(f"Loading \"{version}\" locators from {path.name}")
            if path.suffix in YAML_SUFFIXES:
                self._cache[version] = _read_yaml(path, version)
            else:
                self._cache[version] = _read_module(path, version)
        return self._cache[version]


def check_unique_versions(versions: Iterable[str], source: str) -> None:
    """
    Reject catalogs listing one version under two spellings ("1.1", "1.1.0").

    Raises:
        LocatorLoaderError: On the first pair of equal versions
    """
    seen: Dict[Version, str] = {}
    for spelling in versions:
        if not is_version(spelling):
            continue
        version = Version.parse(spelling)
        if version in seen:
            raise LocatorLoaderError(
                f"Version {spelling} is listed twice in {source} (also as {seen[version]})"
            )
        seen[version] = spelling


def _read_module(path: Path, version: str) -> Dict[str, Any]:
    module_name = f"_theia_locators_{path.parent.name}_{version.replace('.', '_').replace('-', '_')}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise DiffNotFound(version, f"cannot import {path}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        logger.error(f"Failed to import locator file {path}: {e}")
        raise DiffNotFound(version, f"failed to import {path.name}: {e}") from e

    return {
        name: getattr(module, name)
        for name in ("locators", "diff")
        if hasattr(module, name)
    }


def _read_yaml(path: Path, version: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(f"Invalid YAML in locator file {path}: {e}")
        raise DiffNotFound(version, f"invalid YAML in {path.name}: {e}") from e

    if not isinstance(data, Mapping):
        raise DiffNotFound(version, f"{path.name} must contain a mapping")
    return {key: _decode_selectors(value) for key, value in data.items()}


def _decode_selectors(value: Any) -> Any:
    """Turn ``{by: ..., value: ...}`` leaves into Selector objects."""
    if isinstance(value, Mapping):
        if set(value) == {"by", "value"}:
            try:
                return By.from_spec(str(value["by"]), str(value["value"]))
            except ValueError as e:
                raise LocatorLoaderError(str(e)) from e
        return {key: _decode_selectors(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_decode_selectors(item) for item in value]
    return value


__all__ = [
    "DiffRepository",
    "InMemoryDiffRepository",
    "DirectoryDiffRepository",
    "check_unique_versions",
]
