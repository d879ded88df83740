"""
Version comparison utilities for IDE builds.

Example:
    from theia_tools.version_checker import compare_versions, sort_versions

    compare_versions("1.10.0", "1.9.0")      # VersionComparisonResult.GREATER
    sort_versions(["1.17.0", "1.16.0"])      # ["1.16.0", "1.17.0"]
"""

from .version_checker import (
    Version,
    VersionComparisonResult,
    compare_versions,
    is_version,
    sort_versions,
    versions_between,
)

__all__ = [
    "Version",
    "VersionComparisonResult",
    "compare_versions",
    "is_version",
    "sort_versions",
    "versions_between",
]
