"""Locale selection menu and switching.

The switcher appends one checkable entry per loaded pack to a host menu
and turns clicks into ``SelectLocale`` commands. Commands go through the
pure ``apply_selection`` transition, which keeps the checked set valid:

- Checking an entry unchecks every other entry and requests a switch
- Unchecking the only checked entry is rejected (it stays checked)
- Unchecking an entry while another is checked is accepted

A switch persists the new default, activates it in the store, and asks
the user whether to restart now. A confirmed restart is returned to the
caller as ``RestartRequested``; performing it is the host's job (see
``localepack.host.relaunch``). A declined restart leaves the new locale
active while the displayed UI keeps its old text until the next launch.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localepack.constants import PROMPT_KEY, PROMPT_TITLE_KEY, RESTART_DELAY_SECONDS
from localepack.locale_utils import normalize_locale
from localepack.ui.elements import MenuItem

if TYPE_CHECKING:
    from localepack.packs.store import LanguagePackStore
    from localepack.packs.types import LocaleCode
    from localepack.settings import SettingsStore

__all__ = [
    "LocaleSwitcher",
    "RestartRequested",
    "SelectLocale",
    "SelectionOutcome",
    "apply_selection",
]

logger = logging.getLogger(__name__)

type ConfirmCallback = Callable[[str, str], bool]
"""Ask the user a yes/no question: (prompt, title) -> answer."""


@dataclass(frozen=True, slots=True)
class SelectLocale:
    """User toggled a locale entry.

    Attributes:
        locale: Locale code of the toggled entry
        checked: Check state the entry was toggled to
    """

    locale: LocaleCode
    checked: bool = True


@dataclass(frozen=True, slots=True)
class SelectionOutcome:
    """Result of applying a SelectLocale command.

    Attributes:
        checked: Normalized locale codes checked after the command
        switch_to: Normalized locale code to switch to, or None
    """

    checked: frozenset[str]
    switch_to: str | None = None


@dataclass(frozen=True, slots=True)
class RestartRequested:
    """The user confirmed relaunching the application in a new locale.

    Attributes:
        locale: Culture of the newly active pack
        delay_seconds: How long the relaunch should wait for this process to exit
    """

    locale: LocaleCode
    delay_seconds: float = RESTART_DELAY_SECONDS


def apply_selection(checked: frozenset[str], command: SelectLocale) -> SelectionOutcome:
    """Compute the checked set after a selection command.

    Pure function: never touches menus, settings or the store.

    Args:
        checked: Normalized locale codes currently checked
        command: Toggle to apply

    Returns:
        New checked set and the locale to switch to, if any

    Example:
        >>> apply_selection(frozenset({"en"}), SelectLocale("en", checked=False))
        SelectionOutcome(checked=frozenset({'en'}), switch_to=None)
        >>> apply_selection(frozenset({"en"}), SelectLocale("de"))
        SelectionOutcome(checked=frozenset({'de'}), switch_to='de')
    """
    key = normalize_locale(command.locale)

    if command.checked:
        return SelectionOutcome(frozenset({key}), switch_to=key)

    others = checked - {key}
    if not others:
        return SelectionOutcome(checked | {key})
    return SelectionOutcome(others)


class LocaleSwitcher:
    """Locale selection menu bound to a pack store and settings.

    Example:
        >>> switcher = LocaleSwitcher(store, settings, confirm=ask_yes_no)
        >>> switcher.setup(language_menu)
        >>> result = language_menu.drop_down_items[1].click()
        >>> if isinstance(result, RestartRequested):
        ...     relaunch(result)
    """

    __slots__ = ("_checked", "_confirm", "_entries", "_settings", "_store")

    def __init__(
        self,
        store: LanguagePackStore,
        settings: SettingsStore,
        confirm: ConfirmCallback,
    ) -> None:
        """Initialize LocaleSwitcher.

        Args:
            store: Loaded pack store
            settings: Configuration collaborator holding the default locale
            confirm: Yes/no prompt shown after a switch
        """
        self._store = store
        self._settings = settings
        self._confirm = confirm
        self._entries: dict[str, MenuItem] = {}
        self._checked: frozenset[str] = frozenset()

    @property
    def checked(self) -> frozenset[str]:
        """Normalized locale codes whose entries are checked."""
        return self._checked

    @property
    def entries(self) -> dict[str, MenuItem]:
        """Menu entries keyed by normalized locale code."""
        return dict(self._entries)

    def setup(self, menu_host: MenuItem) -> None:
        """Append one checkable entry per loaded pack to menu_host.

        The entry for the persisted default locale starts checked.
        """
        default = self._settings.default_locale
        default_key = normalize_locale(default) if default else None

        for pack in self._store.packs:
            item = MenuItem(
                name="",
                text=pack.display_name,
                checked=pack.key == default_key,
                check_on_click=True,
                on_click=self._make_handler(pack.culture),
            )
            menu_host.drop_down_items.append(item)
            self._entries[pack.key] = item

        self._checked = frozenset(k for k, item in self._entries.items() if item.checked)
        logger.debug("Locale menu set up with %d entries", len(self._entries))

    def _make_handler(self, culture: LocaleCode) -> Callable[[MenuItem], RestartRequested | None]:
        def on_click(item: MenuItem) -> RestartRequested | None:
            return self.select(SelectLocale(culture, item.checked))

        return on_click

    def select(self, command: SelectLocale) -> RestartRequested | None:
        """Handle a selection command.

        Args:
            command: Toggle produced by the menu

        Returns:
            RestartRequested if the user switched locale and confirmed a
            restart, otherwise None

        Raises:
            ValueError: If no pack is loaded for the command's locale
        """
        if command.locale not in self._store:
            msg = f"No language pack loaded for locale '{command.locale}'"
            raise ValueError(msg)

        outcome = apply_selection(self._checked, command)
        culture = None
        if outcome.switch_to is not None:
            culture = self._commit(outcome.switch_to)
            if culture is None:
                # Restore the entries the menu toggled before this handler ran.
                self._sync_items(self._checked)
                return None

        self._checked = outcome.checked
        self._sync_items(outcome.checked)

        if culture is None:
            return None
        return self._prompt(culture)

    def _sync_items(self, checked: frozenset[str]) -> None:
        for key, item in self._entries.items():
            item.checked = key in checked

    def _commit(self, key: str) -> LocaleCode | None:
        """Persist key as the default locale and activate it.

        Returns:
            Culture of the activated pack, or None if the settings could
            not be written; nothing changes then
        """
        pack = self._store.get_pack(key)
        if pack is None:
            msg = f"No language pack loaded for locale '{key}'"
            raise ValueError(msg)

        previous = self._settings.default_locale
        self._settings.default_locale = pack.culture
        try:
            self._settings.persist()
        except OSError:
            logger.exception("Failed to persist default locale '%s'", pack.culture)
            self._settings.default_locale = previous
            return None

        self._store.activate(key)
        logger.info("Default locale changed to '%s'", pack.culture)
        return pack.culture

    def _prompt(self, culture: LocaleCode) -> RestartRequested | None:
        prompt = self._store.data(PROMPT_KEY)
        title = self._store.data(PROMPT_TITLE_KEY)
        if not self._confirm(prompt, title):
            logger.info("Restart declined; '%s' applies from the next launch", culture)
            return None
        return RestartRequested(culture)
