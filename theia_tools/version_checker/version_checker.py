"""
================================================================================
Version Checker Tool
================================================================================

Total ordering over IDE version identifiers.

Used by the locator loader to decide which version diffs lie between a
baseline and a target version and in which order they must be applied.

Features:
- Dotted numeric versions of any length ("1.10", "1.10.0", "v2.0.1.4")
- Pre-release ordering ("1.18.0-rc.1" < "1.18.0")
- Build metadata ignored ("1.18.0+next" == "1.18.0")
- Sorting and bound partitioning helpers

================================================================================
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import cmp_to_key, total_ordering
from typing import Iterable, List, Optional, Tuple, Union

from theia_tools.errors import InvalidVersionFormat


# ================================================================================
# Version Models
# ================================================================================

class VersionComparisonResult(Enum):
    """Result of version comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


# Numeric prerelease identifiers must not carry leading zeros ("rc.01")
_PRERELEASE_ID = r'0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*'
_BUILD_ID = r'[0-9A-Za-z-]+'

_VERSION_PATTERN = re.compile(
    rf'^v?(\d+(?:\.\d+)*)'
    rf'(?:-((?:{_PRERELEASE_ID})(?:\.(?:{_PRERELEASE_ID}))*))?'
    rf'(?:\+({_BUILD_ID}(?:\.{_BUILD_ID})*))?$'
)


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """
    Parsed IDE version.

    Attributes:
        components: Numeric release components ("1.10.0" -> (1, 10, 0))
        prerelease: Optional prerelease identifier ("rc.1")
        build: Optional build metadata, ignored when comparing
        original: Text the version was parsed from
    """
    components: Tuple[int, ...]
    prerelease: Optional[str] = None
    build: Optional[str] = None
    original: str = field(default="", compare=False)

    @classmethod
    def parse(cls, version_string: Union[str, "Version"]) -> "Version":
        """
        Parse version string to Version.

        Args:
            version_string: Version string (e.g., "1.10", "v1.17.0-rc.1+build")

        Returns:
            Version instance

        Raises:
            InvalidVersionFormat: If version string is invalid
        """
        if isinstance(version_string, Version):
            return version_string
        if not isinstance(version_string, str):
            raise InvalidVersionFormat(repr(version_string))

        match = _VERSION_PATTERN.match(version_string.strip())
        if not match:
            raise InvalidVersionFormat(version_string)

        return cls(
            components=tuple(int(part) for part in match.group(1).split('.')),
            prerelease=match.group(2),
            build=match.group(3),
            original=version_string,
        )

    def _release_key(self, length: int) -> Tuple[int, ...]:
        return self.components + (0,) * (length - len(self.components))

    def compare(self, other: "Version") -> VersionComparisonResult:
        """Compare with another version, component-wise and numerically."""
        length = max(len(self.components), len(other.components))
        mine, theirs = self._release_key(length), other._release_key(length)
        if mine != theirs:
            return VersionComparisonResult.LESS if mine < theirs else VersionComparisonResult.GREATER

        # Prerelease versions are less than release
        if self.prerelease == other.prerelease:
            return VersionComparisonResult.EQUAL
        if self.prerelease is None:
            return VersionComparisonResult.GREATER
        if other.prerelease is None:
            return VersionComparisonResult.LESS
        return _compare_prerelease(self.prerelease, other.prerelease)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is VersionComparisonResult.EQUAL

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is VersionComparisonResult.LESS

    def __hash__(self) -> int:
        components = list(self.components)
        while components and components[-1] == 0:
            components.pop()
        return hash((tuple(components), self.prerelease))

    def __str__(self) -> str:
        """Convert to version string."""
        version = ".".join(str(part) for part in self.components)
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version


def _compare_prerelease(left: str, right: str) -> VersionComparisonResult:
    """Semver prerelease ordering: numeric identifiers sort below alphanumerics."""
    for a, b in zip(left.split('.'), right.split('.')):
        if a == b:
            continue
        if a.isdigit() and b.isdigit():
            less = int(a) < int(b)
        elif a.isdigit() or b.isdigit():
            less = a.isdigit()
        else:
            less = a < b
        return VersionComparisonResult.LESS if less else VersionComparisonResult.GREATER

    left_len, right_len = len(left.split('.')), len(right.split('.'))
    if left_len == right_len:
        return VersionComparisonResult.EQUAL
    return VersionComparisonResult.LESS if left_len < right_len else VersionComparisonResult.GREATER


# ================================================================================
# Convenience Functions
# ================================================================================

def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> VersionComparisonResult:
    """
    Compare two version strings.

    Args:
        version1: First version string
        version2: Second version string

    Returns:
        LESS, EQUAL or GREATER, read as "version1 is ... version2"

    Raises:
        InvalidVersionFormat: If either version cannot be parsed
    """
    return Version.parse(version1).compare(Version.parse(version2))


def sort_versions(versions: Iterable[str], descending: bool = False) -> List[str]:
    """
    Sort version strings by version order.

    Equal versions keep their input order (the sort is stable).
    """
    def _cmp(a: str, b: str) -> int:
        return compare_versions(a, b).value

    return sorted(versions, key=cmp_to_key(_cmp), reverse=descending)


def versions_between(
    versions: Iterable[str],
    lower: str,
    upper: str,
    include_lower: bool = False,
    include_upper: bool = True,
) -> List[str]:
    """
    Select versions lying between two bounds.

    Args:
        versions: Candidate version strings
        lower: Lower bound
        upper: Upper bound
        include_lower: Whether a version equal to `lower` is selected
        include_upper: Whether a version equal to `upper` is selected

    Returns:
        Selected versions in input order
    """
    low, high = Version.parse(lower), Version.parse(upper)
    selected = []
    for candidate in versions:
        version = Version.parse(candidate)
        above = version > low or (include_lower and version == low)
        below = version < high or (include_upper and version == high)
        if above and below:
            selected.append(candidate)
    return selected


def is_version(version_string: str) -> bool:
    """Return True if the string parses as a version."""
    try:
        Version.parse(version_string)
    except InvalidVersionFormat:
        return False
    return True


__all__ = [
    "Version",
    "VersionComparisonResult",
    "compare_versions",
    "sort_versions",
    "versions_between",
    "is_version",
]
