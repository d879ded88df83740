"""
================================================================================
Locator Loader Module
================================================================================

Version-aware locator resolution for Eclipse Theia / Eclipse Che.

Exports:
    - LocatorLoader: folds version diffs onto a baseline locator set
    - DiffRepository, InMemoryDiffRepository, DirectoryDiffRepository
    - merge: deep merge of a partial locator tree
    - By, Selector, SelectorQuery, Constructor, ExtractionFunction
    - LocatorSet, LocatorDiff
    - has, has_not, get_attribute, get_integer_attribute, attribute_equals

Usage:
    from theia_tools.locator_loader import LocatorLoader

    loader = LocatorLoader.from_directory("path/to/versions", "1.10.0")
    locators = loader.resolve("1.17.0")

================================================================================
"""

from theia_tools.errors import DiffNotFound, InvalidVersionFormat, LocatorLoaderError

from .models import (
    By,
    Constructor,
    ExtractionFunction,
    LocatorDiff,
    LocatorSet,
    Selector,
    SelectorQuery,
    is_descriptor,
)
from .merge import merge, merge_diff
from .repository import DiffRepository, DirectoryDiffRepository, InMemoryDiffRepository
from .loader import Direction, LocatorLoader
from .properties import (
    attribute_equals,
    element_from_path,
    get_attribute,
    get_integer_attribute,
    has,
    has_class,
    has_not,
    text_of,
)

__all__ = [
    "By",
    "Constructor",
    "DiffNotFound",
    "DiffRepository",
    "Direction",
    "DirectoryDiffRepository",
    "ExtractionFunction",
    "InMemoryDiffRepository",
    "InvalidVersionFormat",
    "LocatorDiff",
    "LocatorLoader",
    "LocatorLoaderError",
    "LocatorSet",
    "Selector",
    "SelectorQuery",
    "attribute_equals",
    "element_from_path",
    "get_attribute",
    "get_integer_attribute",
    "has",
    "has_class",
    "has_not",
    "is_descriptor",
    "merge",
    "merge_diff",
    "text_of",
]
