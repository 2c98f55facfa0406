"""UI package: element tree, translator and locale switcher.

Submodules:
    elements   - UIElement, ContextMenu, MenuItem
    translator - Translator (recursive text replacement)
    switcher   - LocaleSwitcher, SelectLocale, apply_selection, RestartRequested

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localepack.enums import ElementKind
from localepack.ui.elements import ContextMenu, MenuItem, UIElement
from localepack.ui.switcher import (
    LocaleSwitcher,
    RestartRequested,
    SelectionOutcome,
    SelectLocale,
    apply_selection,
)
from localepack.ui.translator import Translator

__all__ = [
    # Element tree
    "ElementKind",
    "UIElement",
    "ContextMenu",
    "MenuItem",
    # Translation
    "Translator",
    # Locale switching
    "LocaleSwitcher",
    "SelectLocale",
    "SelectionOutcome",
    "RestartRequested",
    "apply_selection",
]
