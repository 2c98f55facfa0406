"""Enumerations for localepack type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PackStatus(StrEnum):
    """Outcome of scanning a single pack file.

    StrEnum provides automatic string conversion: str(PackStatus.ADMITTED) == "admitted"
    """

    ADMITTED = "admitted"
    """Pack parsed and added to the store."""

    UNKNOWN_LOCALE = "unknown_locale"
    """File name is not a recognized locale code."""

    DUPLICATE = "duplicate"
    """A pack for the same locale was already admitted."""

    EMPTY = "empty"
    """File could not be read or held no usable entries."""


class ElementKind(StrEnum):
    """Structural capability of a UI node.

    Decides how the translator descends from a node:

    - LEAF: text only, no descendants
    - CONTAINER: hosts child elements (windows, panels, group boxes)
    - STRIP: hosts a linear sequence of menu items (menu bars, toolbars)
    - MENU_ITEM: an item that may own a nested drop-down list
    """

    LEAF = "leaf"
    CONTAINER = "container"
    STRIP = "strip"
    MENU_ITEM = "menu_item"


__all__ = [
    "ElementKind",
    "PackStatus",
]
