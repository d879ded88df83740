"""
================================================================================
Locator Loader Errors
================================================================================

Failures raised while discovering, ordering or folding locator diffs.

A silent override during merge is the defined behaviour and is therefore
not represented here.

================================================================================
"""

from typing import Optional


class LocatorLoaderError(Exception):
    """Base class for all locator resolution failures."""
    pass


class InvalidVersionFormat(LocatorLoaderError, ValueError):
    """Raised when a version string cannot be parsed or compared."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Invalid version string: {version!r}")


class DiffNotFound(LocatorLoaderError, LookupError):
    """Raised when a diff payload for a listed version cannot be loaded."""

    def __init__(self, version: str, reason: Optional[str] = None):
        self.version = version
        self.reason = reason
        message = f"Locator diff not found for version {version!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


__all__ = [
    "LocatorLoaderError",
    "InvalidVersionFormat",
    "DiffNotFound",
]
