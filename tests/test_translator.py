"""Tests for Translator tree traversal."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localepack.enums import ElementKind
from localepack.packs.store import LanguagePackStore
from localepack.ui.elements import ContextMenu, MenuItem, UIElement
from localepack.ui.translator import Translator

ENTRIES = {
    "mainWindow": "Borderless",
    "menuBar": "Menu",
    "fileMenu": "File",
    "exitItem": "Exit",
    "recentMenu": "Recent",
    "recentFirst": "First",
    "welcomeTitle": "Welcome",
    "settingsPanel": "Settings",
    "okButton": "OK",
    "trayMenuShow": "Show",
    "contextCopy": "Copy",
    "blankKey": "   ",
}


@pytest.fixture
def store(make_store, write_pack) -> LanguagePackStore:
    write_pack("en", ENTRIES)
    store = make_store()
    store.load(default_locale="en")
    return store


@pytest.fixture
def translator(store: LanguagePackStore) -> Translator:
    return Translator(store)


def build_window() -> UIElement:
    return UIElement.container(
        "mainWindow",
        UIElement.strip(
            "menuBar",
            MenuItem(
                "fileMenu",
                "&File",
                [
                    MenuItem("recentMenu", "Recent", [MenuItem("recentFirst", "1")]),
                    MenuItem("exitItem", "E&xit"),
                ],
            ),
        ),
        UIElement.leaf("welcomeTitle", "placeholder"),
        UIElement.container(
            "settingsPanel",
            UIElement.leaf("okButton", "ok", context_menu=ContextMenu([MenuItem("contextCopy")])),
            UIElement.leaf("unknownKey", "Original"),
        ),
        text="untitled",
        context_menu=ContextMenu([MenuItem("trayMenuShow", "show")]),
    )


def texts(node: UIElement | MenuItem | ContextMenu) -> list[str]:
    """Collect displayed text depth-first, parent before children."""
    match node:
        case MenuItem():
            return [node.text] + [t for child in node.drop_down_items for t in texts(child)]
        case ContextMenu():
            return [t for item in node.items for t in texts(item)]
        case UIElement():
            result = [node.text]
            for child in node.children:
                result.extend(texts(child))
            for item in node.items:
                result.extend(texts(item))
            if node.context_menu is not None:
                result.extend(texts(node.context_menu))
            return result
    raise AssertionError(node)


class TestTranslateElement:
    def test_full_tree(self, translator: Translator) -> None:
        window = build_window()

        translator.translate(window)

        assert texts(window) == [
            "Borderless",
            "Menu",
            "File",
            "Recent",
            "First",
            "Exit",
            "Welcome",
            "Settings",
            "OK",
            "Copy",
            "Original",
            "Show",
        ]

    def test_unknown_key_keeps_text(self, translator: Translator) -> None:
        element = UIElement.leaf("unknownKey", "Original")
        translator.translate_element(element)
        assert element.text == "Original"

    def test_blank_translation_keeps_text(self, translator: Translator) -> None:
        element = UIElement.leaf("blankKey", "Original")
        translator.translate_element(element)
        assert element.text == "Original"

    def test_lookup_by_name_case_insensitive(self, translator: Translator) -> None:
        element = UIElement.leaf("WELCOMETITLE", "x")
        translator.translate_element(element)
        assert element.text == "Welcome"

    def test_none_is_noop(self, translator: Translator) -> None:
        translator.translate_element(None)
        translator.translate_elements(None)
        translator.translate_context_menu(None)
        translator.translate_item(None)
        translator.translate(None)

    def test_none_children_skipped(self, translator: Translator) -> None:
        title = UIElement.leaf("welcomeTitle")
        translator.translate_elements([None, title, None])
        assert title.text == "Welcome"


class TestTranslateDispatch:
    def test_collection(self, translator: Translator) -> None:
        first, second = UIElement.leaf("okButton"), UIElement.leaf("welcomeTitle")
        translator.translate([first, second])
        assert (first.text, second.text) == ("OK", "Welcome")

    def test_context_menu(self, translator: Translator) -> None:
        menu = ContextMenu([MenuItem("contextCopy"), MenuItem("trayMenuShow")])
        translator.translate(menu)
        assert [item.text for item in menu.items] == ["Copy", "Show"]

    def test_menu_item_with_submenu(self, translator: Translator) -> None:
        item = MenuItem("fileMenu", drop_down_items=[MenuItem("exitItem")])
        translator.translate(item)
        assert (item.text, item.drop_down_items[0].text) == ("File", "Exit")

    def test_unsupported_target_ignored(self, translator: Translator) -> None:
        translator.translate(42)  # type: ignore[arg-type]

    def test_strings_in_collection_ignored(self, translator: Translator) -> None:
        translator.translate(["okButton"])  # type: ignore[list-item]


class TestIdempotence:
    def test_translate_twice_same_text(self, translator: Translator) -> None:
        window = build_window()

        translator.translate(window)
        first_pass = texts(window)
        translator.translate(window)

        assert texts(window) == first_pass

    def test_keyed_by_name_not_text(self, translator: Translator) -> None:
        """An element whose text equals another key is still keyed by its name."""
        element = UIElement.leaf("okButton", "welcomeTitle")
        translator.translate(element)
        assert element.text == "OK"

    @given(st.lists(st.sampled_from([*ENTRIES, "missingA", "missingB"]), max_size=12))
    def test_idempotent_for_any_leaf_names(self, store: LanguagePackStore, names: list[str]) -> None:
        translator = Translator(store)
        root = UIElement.container(
            "mainWindow", *(UIElement.leaf(name, f"orig-{i}") for i, name in enumerate(names))
        )

        translator.translate(root)
        first_pass = texts(root)
        translator.translate(root)

        assert texts(root) == first_pass


class TestActiveLocaleChange:
    def test_retranslate_after_activate(self, make_store, write_pack) -> None:
        write_pack("en", {"okButton": "OK"})
        write_pack("de", {"okButton": "Bestätigen"})
        store = make_store()
        store.load(default_locale="en")
        translator = Translator(store)
        button = UIElement.leaf("okButton")

        translator.translate(button)
        assert button.text == "OK"
        store.activate("de")
        translator.translate(button)

        assert button.text == "Bestätigen"


class TestElementModel:
    def test_leaf_cannot_hold_children(self) -> None:
        with pytest.raises(ValueError, match="only containers"):
            UIElement("x", children=[UIElement.leaf("y")])

    def test_container_cannot_hold_items(self) -> None:
        with pytest.raises(ValueError, match="only strips"):
            UIElement("x", kind=ElementKind.CONTAINER, items=[MenuItem("y")])

    def test_menu_item_kind_rejected(self) -> None:
        with pytest.raises(ValueError, match="use MenuItem"):
            UIElement("x", kind=ElementKind.MENU_ITEM)

    def test_menu_item_click_toggles_and_returns_handler_result(self) -> None:
        item = MenuItem("lang", check_on_click=True, on_click=lambda i: ("clicked", i.checked))

        assert item.click() == ("clicked", True)
        assert item.click() == ("clicked", False)

    def test_click_without_handler(self) -> None:
        item = MenuItem("plain")
        assert item.click() is None
        assert not item.checked
        assert item.kind == ElementKind.MENU_ITEM
