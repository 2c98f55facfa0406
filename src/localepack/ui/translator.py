"""Recursive translation of UI element trees.

Walks an element tree depth-first, parent before children, siblings in
display order, and replaces each node's text with the active pack's text
for the node's structural name. Blank lookups leave the text untouched.

Translation is keyed only by structural name, never by the text currently
displayed, so translating the same tree twice with the same active locale
gives the same result. ``None`` nodes and collections are ignored.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, assert_never

from localepack.enums import ElementKind
from localepack.ui.elements import ContextMenu, MenuItem, UIElement

if TYPE_CHECKING:
    from localepack.packs.store import LanguagePackStore

__all__ = ["Translator"]

logger = logging.getLogger(__name__)

type TranslationTarget = UIElement | ContextMenu | MenuItem | Iterable[UIElement | None] | None


class Translator:
    """Applies the active language pack to UI element trees.

    Example:
        >>> translator = Translator(store)
        >>> translator.translate(main_window)
        >>> main_window.children[0].text
        'Welcome'
    """

    __slots__ = ("_store",)

    def __init__(self, store: LanguagePackStore) -> None:
        """Initialize Translator.

        Args:
            store: Loaded pack store providing text lookups
        """
        self._store = store

    def translate(self, target: TranslationTarget) -> None:
        """Translate an element, context menu, menu item or element collection."""
        match target:
            case None:
                return
            case UIElement():
                self.translate_element(target)
            case ContextMenu():
                self.translate_context_menu(target)
            case MenuItem():
                self.translate_item(target)
            case Iterable():
                self.translate_elements(target)
            case _:
                logger.debug("Ignoring untranslatable target of type %s", type(target).__name__)

    def translate_elements(self, elements: Iterable[UIElement | None] | None) -> None:
        """Translate every element of a collection in order."""
        if elements is None:
            return
        for element in elements:
            if UIElement.guard(element):
                self.translate_element(element)

    def translate_element(self, element: UIElement | None) -> None:
        """Translate an element and everything beneath it."""
        if element is None:
            return

        self._apply(element)

        match element.kind:
            case ElementKind.LEAF:
                pass
            case ElementKind.CONTAINER:
                self.translate_elements(element.children)
            case ElementKind.STRIP:
                for item in element.items:
                    self.translate_item(item)
            case ElementKind.MENU_ITEM:
                logger.debug("Element '%s' tagged as menu item; skipping descent", element.name)
            case _:
                assert_never(element.kind)

        self.translate_context_menu(element.context_menu)

    def translate_context_menu(self, menu: ContextMenu | None) -> None:
        """Translate every item of a context menu."""
        if menu is None:
            return
        for item in menu.items:
            self.translate_item(item)

    def translate_item(self, item: MenuItem | None) -> None:
        """Translate a menu item and its drop-down items."""
        if item is None:
            return
        self._apply(item)
        for child in item.drop_down_items:
            self.translate_item(child)

    def _apply(self, node: UIElement | MenuItem) -> None:
        text = self._store.data(node.name)
        if text.strip():
            node.text = text
