"""Toolkit-neutral UI element tree.

Hosts adapt their widgets to these nodes (or build the tree directly) so
the translator and the locale switcher never depend on a specific GUI
toolkit. Nodes are mutable: translation rewrites ``text`` and the switcher
rewrites ``checked``. Identity matters, so nodes compare by identity.

Node types:
    UIElement   - Leaf, container or strip, tagged by ElementKind
    ContextMenu - Popup list of menu items attached to an element
    MenuItem    - Item in a strip, context menu or drop-down

Example:
    window = UIElement.container(
        "mainWindow",
        UIElement.strip("menuBar", MenuItem("fileMenu", "File", [MenuItem("exitItem", "Exit")])),
        UIElement.leaf("welcomeTitle", "Welcome"),
    )

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeIs

from localepack.enums import ElementKind

__all__ = ["ContextMenu", "MenuItem", "UIElement"]


@dataclass(slots=True, eq=False)
class MenuItem:
    """Menu entry that may own a nested drop-down list.

    Attributes:
        name: Structural name, used as the translation key
        text: Displayed label
        drop_down_items: Nested submenu items, in display order
        checked: Whether the item shows a check mark
        check_on_click: Toggle ``checked`` before running the click handler
        on_click: Handler invoked by click() with this item
    """

    name: str
    text: str = ""
    drop_down_items: list[MenuItem] = field(default_factory=list)
    checked: bool = False
    check_on_click: bool = False
    on_click: Callable[[MenuItem], object] | None = field(default=None, repr=False)

    @property
    def kind(self) -> ElementKind:
        return ElementKind.MENU_ITEM

    def click(self) -> object:
        """Simulate a user click.

        Returns:
            Whatever the click handler returns, or None without a handler
        """
        if self.check_on_click:
            self.checked = not self.checked
        if self.on_click is None:
            return None
        return self.on_click(self)

    @staticmethod
    def guard(node: object) -> TypeIs[MenuItem]:
        """Type guard for MenuItem (used in translator dispatch)."""
        return isinstance(node, MenuItem)


@dataclass(slots=True, eq=False)
class ContextMenu:
    """Popup menu attached to an element."""

    items: list[MenuItem] = field(default_factory=list)

    @staticmethod
    def guard(node: object) -> TypeIs[ContextMenu]:
        """Type guard for ContextMenu (used in translator dispatch)."""
        return isinstance(node, ContextMenu)


@dataclass(slots=True, eq=False)
class UIElement:
    """Window, control or menu strip.

    Only containers hold child elements and only strips hold menu items;
    any element may carry a context menu.

    Attributes:
        name: Structural name, used as the translation key
        text: Displayed text
        kind: Structural capability (LEAF, CONTAINER or STRIP)
        children: Child elements of a container, in display order
        items: Menu items of a strip, in display order
        context_menu: Attached popup menu, if any
    """

    name: str
    text: str = ""
    kind: ElementKind = ElementKind.LEAF
    children: list[UIElement] = field(default_factory=list)
    items: list[MenuItem] = field(default_factory=list)
    context_menu: ContextMenu | None = None

    def __post_init__(self) -> None:
        """Validate the element's shape against its kind.

        Raises:
            ValueError: If kind is MENU_ITEM, or children/items do not
                match the kind
        """
        if self.kind == ElementKind.MENU_ITEM:
            msg = f"Element '{self.name}': use MenuItem for menu items"
            raise ValueError(msg)
        if self.children and self.kind != ElementKind.CONTAINER:
            msg = f"Element '{self.name}': only containers can hold child elements"
            raise ValueError(msg)
        if self.items and self.kind != ElementKind.STRIP:
            msg = f"Element '{self.name}': only strips can hold menu items"
            raise ValueError(msg)

    @classmethod
    def leaf(
        cls, name: str, text: str = "", *, context_menu: ContextMenu | None = None
    ) -> UIElement:
        return cls(name, text, context_menu=context_menu)

    @classmethod
    def container(
        cls,
        name: str,
        *children: UIElement,
        text: str = "",
        context_menu: ContextMenu | None = None,
    ) -> UIElement:
        return cls(
            name,
            text,
            ElementKind.CONTAINER,
            children=list(children),
            context_menu=context_menu,
        )

    @classmethod
    def strip(cls, name: str, *items: MenuItem, text: str = "") -> UIElement:
        return cls(name, text, ElementKind.STRIP, items=list(items))

    @staticmethod
    def guard(node: object) -> TypeIs[UIElement]:
        """Type guard for UIElement (used in translator dispatch)."""
        return isinstance(node, UIElement)
