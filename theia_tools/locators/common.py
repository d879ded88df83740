"""
Locator tree shared by every distribution at version 1.10.0.

`base_locators()` returns a fresh tree on each call so that distribution
baselines can derive from it without touching each other.
"""

from typing import Any, Dict

from theia_tools.locator_loader import (
    By,
    attribute_equals,
    get_attribute,
    get_integer_attribute,
    has,
    has_class,
    has_not,
    text_of,
)


def monaco_scroll() -> Dict[str, Any]:
    return {
        "constructor": {
            "locator": By.class_name("monaco-scrollable-element"),
        },
        "item": {
            "locator": By.css("[role='treeitem']"),
            "properties": {
                "focused": has("class", "focused"),
                "selected": attribute_equals("aria-selected", "true"),
                "index": get_integer_attribute("aria-posinset"),
            },
        },
        "vertical_scroll": {
            "constructor": {"locator": By.class_name("slider")},
            "container": {"locator": By.css(".scrollbar.vertical")},
        },
        "horizontal_scroll": {
            "constructor": {"locator": By.class_name("slider")},
            "container": {"locator": By.css(".scrollbar.horizontal")},
        },
    }


def base_locators() -> Dict[str, Any]:
    return {
        "dashboard": {
            "menu": {"locator": By.id("page-sidebar")},
            "get_started": {
                "main_section": {"locator": By.class_name("pf-c-page__main")},
            },
            "che_chevron": {"locator": By.class_name("che-dashboard")},
        },
        "widgets": {
            "tabs": {"locator": By.xpath(f".//*[{has_class('pf-c-tabs')}]")},
            "tab": {
                "locator": By.xpath(f".//*[{has_class('pf-c-tabs__item')}]"),
                "properties": {"selected": has("class", "md-active")},
            },
            "list": {"locator": By.xpath(f".//*[{has_class('pf-c-nav')}]")},
            "list_item": {"locator": By.xpath(f".//*[{has_class('pf-c-nav__item')}]")},
            "input": {"locator": By.css("input")},
            "tree": {
                "constructor": {"locator": By.class_name("theia-Tree")},
                "node": {
                    "locator": By.class_name("theia-TreeNode"),
                    "properties": {
                        "focused": has("class", "theia-mod-focus"),
                        "selected": has("class", "theia-mod-selected"),
                        "expandable": has("class", "theia-ExpandableTreeNode"),
                        "enabled": has_not("class", "theia-mod-busy"),
                    },
                },
                "file": {
                    "expand_toggle": {
                        "locator": By.class_name("theia-ExpansionToggle"),
                        "properties": {
                            "collapsed": has("class", "theia-mod-collapsed"),
                            "enabled": has_not("class", "theia-mod-busy"),
                        },
                    },
                    "label": {
                        "locator": By.css(".theia-TreeNodeSegment:not(.theia-ExpansionToggle)"),
                    },
                },
            },
            "editor_frame": {"locator": By.id("ide-iframe")},
            "editor_loaded_component": {"locator": By.id("theia-left-right-split-panel")},
            "monaco_scroll": monaco_scroll(),
        },
        "components": {
            "activity_bar": {
                "constructor": {"locator": By.class_name("theia-app-sidebar-container")},
                "view_control": {
                    "constructor": {
                        "locator": By.css(".p-TabBar-content li"),
                        "properties": {
                            "title": get_attribute("title"),
                            "selected": has("class", "p-mod-current"),
                        },
                    },
                },
                "action": {
                    "constructor": {
                        "locator": By.css(".theia-sidebar-bottom-menu .codicon"),
                        "properties": {"title": get_attribute("title")},
                    },
                },
            },
            "workbench": {
                "input": {
                    "constructor": {
                        "locator": By.class_name("quick-input-widget"),
                        "properties": {
                            "focused": has("class", "synthetic-focus", By.class_name("monaco-inputbox")),
                        },
                    },
                    "field": {"locator": By.class_name("input")},
                    "message": {"locator": By.class_name("monaco-highlighted-label")},
                    "scroll": monaco_scroll(),
                },
                "notification": {
                    "constructor": {
                        "locator": By.class_name("theia-notification-list-item"),
                        "properties": {
                            "title": text_of(By.class_name("theia-notification-message")),
                        },
                    },
                    "action": {
                        "locator": By.css(".theia-notification-buttons > .theia-button"),
                        "properties": {"title": text_of()},
                    },
                    "close": {"locator": By.class_name("clear")},
                    "source": {"locator": By.class_name("theia-notification-source")},
                    "center": {
                        "constructor": {"locator": By.class_name("theia-notification-center")},
                        "clear_all": {"locator": By.class_name("clear-all")},
                        "close": {"locator": By.class_name("collapse")},
                    },
                    "standalone": {
                        "constructor": {"locator": By.class_name("theia-notification-toasts")},
                    },
                },
            },
            "menu": {
                "title_bar": {"locator": By.id("theia:menubar")},
                "title_bar_item": {
                    "locator": By.class_name("p-MenuBar-item"),
                    "properties": {"title": text_of(By.class_name("p-MenuBar-itemLabel"))},
                },
                "context_menu": {"locator": By.class_name("p-Menu")},
                "context_menu_item": {
                    "locator": By.class_name("p-Menu-item"),
                    "properties": {
                        "title": text_of(By.class_name("p-Menu-itemLabel")),
                        "expandable": attribute_equals("data-type", "submenu"),
                        "enabled": has_not("class", "p-mod-disabled"),
                    },
                },
                "label": {"locator": By.css(".p-MenuBar-itemLabel, .p-Menu-itemLabel")},
            },
            "editor": {
                "constructor": {
                    "locator": By.class_name("p-DockPanel-widget"),
                    "properties": {"focused": has("class", "focused")},
                },
                "tab_bar": {
                    "constructor": {"locator": By.class_name("p-TabBar")},
                    "tab": {
                        "constructor": {
                            "locator": By.class_name("p-TabBar-tab"),
                            "properties": {
                                "dirty": has("class", "theia-mod-dirty"),
                                "selected": has("class", "p-mod-current"),
                                "title": text_of(By.class_name("p-TabBar-tabLabel")),
                            },
                        },
                        "close": {"locator": By.class_name("p-TabBar-tabCloseIcon")},
                    },
                },
                "view": {"locator": By.id("theia-main-content-panel")},
                "content_assist": {
                    "constructor": {"locator": By.class_name("suggest-widget")},
                    "scroll": monaco_scroll(),
                    "item_label": {"locator": By.class_name("monaco-highlighted-label")},
                    "loading": {
                        "locator": By.xpath(f".//*[{has_class('message')} and text() = 'loading']"),
                    },
                },
                "lines": {"locator": By.class_name("view-lines")},
                "line": {"locator": By.class_name("view-line")},
            },
            "side_bar": {
                "constructor": {
                    "locator": By.css("#theia-left-content-panel > :not(.theia-app-sidebar-container)"),
                },
                "tree": {
                    "default": {"constructor": {"locator": By.class_name("theia-FileTree")}},
                },
            },
            "status_bar": {
                "constructor": {"locator": By.id("theia-statusBar")},
                "open_notification_center": {
                    "locator": By.xpath(
                        f".//*[{has_class('hasCommand')} and contains(@title, 'Notification')]"
                    ),
                },
            },
        },
    }
