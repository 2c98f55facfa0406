"""localepack Example - Desktop Application Startup and Locale Switching.

Demonstrates the full lifecycle of language packs in a desktop host:
unpacking an archive, loading packs, translating a window tree, building
the language menu, and handling a locale switch.

Scenarios covered:
1. First launch: Languages.zip is unpacked into Languages/
2. Translating a window with a menu bar, submenus and a context menu
3. Inspecting skipped pack files through the LoadSummary
4. Switching locale from the language menu

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
import tempfile
import zipfile
from pathlib import Path

from localepack import (
    ContextMenu,
    JsonSettings,
    LanguagePackStore,
    LocaleSwitcher,
    MenuItem,
    RestartRequested,
    Translator,
    UIElement,
)
from localepack.host import load_or_exit

PACKS = {
    "en.lang": """
# English
mainWindow = Borderless Gaming
toolStripOptions = Options
toolStripLanguages = Language
toolStripExit = Exit
trayShow = Show window
statusReady = Ready
settingConfirmationPrompt = Restart now to apply the new language?
settingConfirmationTitle = Language
""",
    "lv.lang": """
# Latviešu
mainWindow = Spēles bez apmales
toolStripOptions = Iestatījumi
toolStripLanguages = Valoda
toolStripExit = Iziet
trayShow = Rādīt logu
statusReady = Gatavs
settingConfirmationPrompt = Restartēt tagad, lai lietotu jauno valodu?
settingConfirmationTitle = Valoda
""",
    "notes.lang": "this file is not named after a locale\n",
}


def build_main_window() -> tuple[UIElement, MenuItem]:
    languages = MenuItem("toolStripLanguages", "Language")
    options = MenuItem("toolStripOptions", "Options", [languages])
    window = UIElement.container(
        "mainWindow",
        UIElement.strip("menuStrip", options, MenuItem("toolStripExit", "Exit")),
        UIElement.leaf("statusReady", "Ready"),
        context_menu=ContextMenu([MenuItem("trayShow", "Show")]),
    )
    return window, languages


def example_1_first_launch(workdir: Path) -> LanguagePackStore:
    """Example 1: Unpack Languages.zip and load packs."""
    print("=" * 60)
    print("Example 1: First Launch")
    print("=" * 60)

    with zipfile.ZipFile(workdir / "Languages.zip", "w") as archive:
        for name, body in PACKS.items():
            archive.writestr(name, body)

    settings = JsonSettings.load(workdir / "settings.json")
    store = LanguagePackStore()
    summary = load_or_exit(store, settings.default_locale, report=print)

    print(f"\n{summary!r}")
    print(f"Archive still present: {(workdir / 'Languages.zip').exists()}")
    print(f"Active locale: {store.active_locale}")
    return store


def example_2_translate_window(store: LanguagePackStore) -> tuple[UIElement, MenuItem]:
    """Example 2: Translate a window tree."""
    print("\n" + "=" * 60)
    print("Example 2: Translating a Window")
    print("=" * 60)

    window, languages = build_main_window()
    Translator(store).translate(window)

    print(f"\nWindow title: {window.text}")
    print(f"Menu bar: {[item.text for item in window.children[0].items]}")
    print(f"Tray menu: {[item.text for item in window.context_menu.items]}")  # type: ignore[union-attr]
    return window, languages


def example_3_skipped_files(workdir: Path) -> None:
    """Example 3: Files that were not admitted."""
    print("\n" + "=" * 60)
    print("Example 3: Skipped Pack Files")
    print("=" * 60)

    for path in sorted((workdir / "Languages").iterdir()):
        print(f"  {path.name}")
    print("\n'notes.lang' is ignored: 'notes' is not a locale code.")


def example_4_switch_locale(store: LanguagePackStore, languages: MenuItem, workdir: Path) -> None:
    """Example 4: Switch locale from the language menu."""
    print("\n" + "=" * 60)
    print("Example 4: Switching Locale")
    print("=" * 60)

    settings = JsonSettings.load(workdir / "settings.json")

    def confirm(prompt: str, title: str) -> bool:
        print(f"\n[{title}] {prompt} -> yes")
        return True

    switcher = LocaleSwitcher(store, settings, confirm)
    switcher.setup(languages)
    print(f"\nLanguage menu: {[(i.text, i.checked) for i in languages.drop_down_items]}")

    result = languages.drop_down_items[-1].click()
    if isinstance(result, RestartRequested):
        # A real host would call localepack.host.relaunch(result) and exit here.
        print(f"Restart requested for '{result.locale}' in {result.delay_seconds}s")
    print(f"Persisted default: {JsonSettings.load(workdir / 'settings.json').default_locale}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    with tempfile.TemporaryDirectory() as tmp_dir_main:
        previous = Path.cwd()
        os.chdir(tmp_dir_main)
        try:
            workdir = Path(tmp_dir_main)
            store = example_1_first_launch(workdir)
            _window, languages = example_2_translate_window(store)
            example_3_skipped_files(workdir)
            example_4_switch_locale(store, languages, workdir)
        finally:
            os.chdir(previous)

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
