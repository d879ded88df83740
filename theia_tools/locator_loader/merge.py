"""
================================================================================
Locator Merge
================================================================================

Deep merge of a partial locator tree onto a full one.

Rules:
    - mapping over mapping: merged recursively
    - anything else: the override value replaces the base value wholesale
      (descriptors are never merged field by field)
    - keys missing from the override are carried over from the base
    - reserved meta keys are skipped entirely

Neither input is mutated. Every mapping on a modified path is a fresh dict;
untouched subtrees are shared with the base.

================================================================================
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping

from loguru import logger

from .models import LocatorDiff, is_descriptor


RESERVED_KEYS = frozenset({"__proto__", "prototype"})


def is_reserved_key(key: Any) -> bool:
    """Return True for meta keys which must never be copied or merged."""
    if not isinstance(key, str):
        return False
    if key in RESERVED_KEYS:
        return True
    return len(key) > 4 and key.startswith("__") and key.endswith("__")


def merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge `override` onto `base` and return the merged tree.

    Args:
        base: Full locator tree
        override: Sparse locator tree

    Returns:
        New tree where every leaf present in `override` replaces the
        corresponding leaf of `base`
    """
    result = dict(base)
    for key, value in override.items():
        if is_reserved_key(key):
            logger.debug(f"Skipping reserved locator key: {key}")
            continue

        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = merge(current, value)
        else:
            result[key] = _copy_value(value)
    return result


def merge_diff(base: Mapping[str, Any], diff: LocatorDiff) -> Dict[str, Any]:
    """Apply one version diff onto a locator tree."""
    return merge(base, diff.locators)


def _copy_value(value: Any) -> Any:
    """Fresh copy of an override value with reserved keys removed."""
    if isinstance(value, Mapping):
        return {
            key: _copy_value(item)
            for key, item in value.items()
            if not is_reserved_key(key)
        }
    if is_descriptor(value):
        return value
    return copy.deepcopy(value)


__all__ = [
    "RESERVED_KEYS",
    "is_reserved_key",
    "merge",
    "merge_diff",
]
