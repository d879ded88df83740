"""
================================================================================
Locator Models
================================================================================

Descriptor types stored at the leaves of a locator tree and the read-only
LocatorSet that holds a resolved tree.

A leaf is exactly one of:
    - Selector: how to find an element (css, xpath, id, ...)
    - SelectorQuery: a Selector built from runtime arguments
    - Constructor: the page-object class wrapping matched elements
    - ExtractionFunction: async getter reading a property off an element

Descriptors are terminal values. The merge engine replaces them wholesale
and never merges their fields.

The bundled catalogs nest a root entry under a "constructor" key and leave
the wrapping class to the page objects. Constructor leaves are for catalogs
embedded next to their page objects, where the class can be imported.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Iterator, Mapping, Optional


# ================================================================================
# Descriptors
# ================================================================================

@dataclass(frozen=True)
class Selector:
    """
    Concrete element lookup.

    Attributes:
        strategy: Lookup strategy (css, xpath, id, class_name, name,
            tag_name, link_text, partial_link_text)
        value: Strategy-specific selector text
    """
    strategy: str
    value: str

    def to_playwright(self) -> str:
        """Render as a Playwright selector string."""
        if self.strategy == "css":
            return self.value
        if self.strategy == "xpath":
            return f"xpath={self.value}"
        if self.strategy == "id":
            return f"[id=\"{self.value}\"]"
        if self.strategy == "class_name":
            return f".{self.value}"
        if self.strategy == "name":
            return f"[name=\"{self.value}\"]"
        if self.strategy == "tag_name":
            return self.value
        if self.strategy == "link_text":
            return f"a:text-is(\"{self.value}\")"
        if self.strategy == "partial_link_text":
            return f"a:has-text(\"{self.value}\")"
        raise ValueError(f"Unknown selector strategy: {self.strategy}")

    def __str__(self) -> str:
        return f"By.{self.strategy}({self.value!r})"


class By:
    """Selector factory mirroring the WebDriver `By` vocabulary."""

    STRATEGIES = (
        "css",
        "xpath",
        "id",
        "class_name",
        "name",
        "tag_name",
        "link_text",
        "partial_link_text",
    )

    @staticmethod
    def css(value: str) -> Selector:
        return Selector("css", value)

    @staticmethod
    def xpath(value: str) -> Selector:
        return Selector("xpath", value)

    @staticmethod
    def id(value: str) -> Selector:
        return Selector("id", value)

    @staticmethod
    def class_name(value: str) -> Selector:
        return Selector("class_name", value)

    @staticmethod
    def name(value: str) -> Selector:
        return Selector("name", value)

    @staticmethod
    def tag_name(value: str) -> Selector:
        return Selector("tag_name", value)

    @staticmethod
    def link_text(value: str) -> Selector:
        return Selector("link_text", value)

    @staticmethod
    def partial_link_text(value: str) -> Selector:
        return Selector("partial_link_text", value)

    @classmethod
    def from_spec(cls, strategy: str, value: str) -> Selector:
        """Build a selector from a (strategy, value) pair read from data files."""
        if strategy not in cls.STRATEGIES:
            raise ValueError(f"Unknown selector strategy: {strategy}")
        return Selector(strategy, value)


@dataclass(frozen=True)
class SelectorQuery:
    """Selector parameterised by runtime arguments, e.g. a menu item label."""
    build: Callable[..., Selector]
    description: str = ""

    def query(self, **arguments: str) -> Selector:
        return self.build(**arguments)


@dataclass(frozen=True)
class Constructor:
    """
    Page-object class used to wrap elements found by a sibling selector.

    Not used by the bundled catalogs; see the module docstring.
    """
    target: type

    def create(self, *args: Any, **kwargs: Any) -> Any:
        return self.target(*args, **kwargs)


PropertyGetter = Callable[[Any, "LocatorSet"], Awaitable[Any]]


@dataclass(frozen=True)
class ExtractionFunction:
    """Async property getter: ``await func(element, locators)``."""
    name: str
    func: PropertyGetter

    async def __call__(self, element: Any, locators: "LocatorSet") -> Any:
        return await self.func(element, locators)


DESCRIPTOR_TYPES = (Selector, SelectorQuery, Constructor, ExtractionFunction)


@dataclass(frozen=True)
class LocatorDiff:
    """
    Sparse, version-tagged override of a locator tree.

    Attributes:
        version: IDE version the diff moves the locators to
        locators: Partial locator tree; only the leaves it names change
        extras: Free-form metadata shipped with the diff, never merged
    """
    version: str
    locators: Mapping[str, Any]
    extras: Mapping[str, Any] = field(default_factory=dict)


def is_descriptor(value: Any) -> bool:
    """Return True if the value is a terminal locator descriptor."""
    return isinstance(value, DESCRIPTOR_TYPES)


# ================================================================================
# Locator Set
# ================================================================================

class LocatorSet(Mapping[str, Any]):
    """
    Read-only nested locator mapping.

    Nested mappings are exposed as LocatorSet instances and may be read as
    attributes::

        locators.components.editor.tab["locator"]
        locators.components.editor.tab.locator

    Any attempt to assign or delete raises TypeError.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        object.__setattr__(self, "_data", {
            key: freeze(value) for key, value in (data or {}).items()
        })

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError("LocatorSet is read-only")

    def __delattr__(self, name: str) -> None:
        raise TypeError("LocatorSet is read-only")

    def __setitem__(self, key: str, value: Any) -> None:
        raise TypeError("LocatorSet is read-only")

    def __delitem__(self, key: str) -> None:
        raise TypeError("LocatorSet is read-only")

    def __copy__(self) -> "LocatorSet":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "LocatorSet":
        return self

    def __reduce__(self):
        return (LocatorSet, (self.to_dict(),))

    def __repr__(self) -> str:
        return f"LocatorSet({self._data!r})"

    def get_path(self, path: str, default: Any = None) -> Any:
        """Read a value by dot-notation path ("components.editor.tab")."""
        value: Any = self
        for part in path.split("."):
            if not isinstance(value, Mapping) or part not in value:
                return default
            value = value[part]
        return value

    def to_dict(self) -> Dict[str, Any]:
        """Return an independent, mutable deep copy as plain dicts and lists."""
        return {key: thaw(value) for key, value in self._data.items()}


def freeze(value: Any) -> Any:
    """Convert nested mappings into LocatorSet and sequences into tuples."""
    if isinstance(value, LocatorSet):
        return value
    if isinstance(value, Mapping):
        return LocatorSet(value)
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze: plain, mutable copies of frozen structures."""
    if isinstance(value, LocatorSet):
        return value.to_dict()
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return copy.deepcopy(value)


__all__ = [
    "By",
    "Constructor",
    "DESCRIPTOR_TYPES",
    "ExtractionFunction",
    "LocatorDiff",
    "LocatorSet",
    "PropertyGetter",
    "Selector",
    "SelectorQuery",
    "freeze",
    "is_descriptor",
    "thaw",
]
