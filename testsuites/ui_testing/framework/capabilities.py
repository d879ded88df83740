"""
================================================================================
Element Capabilities
================================================================================

Small interfaces implemented by concrete page objects. Page objects compose
a TheiaElement and implement only the capabilities their widget supports,
e.g. a title bar item is Clickable and MenuLike, a tree item is Clickable
and Expandable.

================================================================================
"""

from __future__ import annotations

from typing import Any, List, Protocol, runtime_checkable


@runtime_checkable
class HasProperties(Protocol):
    async def get_property(self, name: str) -> Any: ...


@runtime_checkable
class Clickable(Protocol):
    async def click(self) -> None: ...


@runtime_checkable
class Expandable(Protocol):
    async def is_expanded(self) -> bool: ...

    async def expand(self) -> None: ...

    async def collapse(self) -> None: ...


@runtime_checkable
class MenuLike(Protocol):
    """Something that opens a list of titled, clickable items."""

    async def get_items(self) -> List[Any]: ...

    async def get_item(self, title: str) -> Any: ...

    async def select(self, *path: str) -> Any: ...


@runtime_checkable
class Closeable(Protocol):
    async def close(self) -> None: ...


__all__ = [
    "Clickable",
    "Closeable",
    "Expandable",
    "HasProperties",
    "MenuLike",
]
