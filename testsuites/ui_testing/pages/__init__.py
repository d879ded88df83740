"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Theia workbench.

Each page object:
    - Receives the LocatorSet resolved for the IDE version under test
    - Wraps found elements in TheiaElement (composition)
    - Implements the capabilities its widget supports

Author: Automation Team
License: MIT
================================================================================
"""

from .context_menu import ContextMenu, ContextMenuItem
from .editor_view import EditorTab, EditorView
from .notification_center import (
    Notification,
    NotificationAction,
    NotificationCenter,
    StandaloneNotifications,
)
from .title_bar import TitleBar, TitleBarItem
from .tree import DefaultTreeItem, FileTree, Tree

__all__ = [
    "ContextMenu",
    "ContextMenuItem",
    "DefaultTreeItem",
    "EditorTab",
    "EditorView",
    "FileTree",
    "Notification",
    "NotificationAction",
    "NotificationCenter",
    "StandaloneNotifications",
    "TitleBar",
    "TitleBarItem",
    "Tree",
]
