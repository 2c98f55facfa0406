"""Language pack store with a single active locale.

Owns the in-memory table of loaded packs and the active locale pointer.
The store is an explicit service object: the host builds it, loads it once
at startup, and passes it to the Translator and LocaleSwitcher.

Load sequence:
    1. Extract the archive over the pack directory, if an archive exists
    2. Require the pack directory to exist
    3. Scan pack files: skip unknown locales and duplicates, discard
       packs with no entries
    4. Require at least one admitted pack
    5. Activate the default locale, falling back to the system locale and
       then to the first pack in scan order

Steps 1, 2 and 4 raise ``LocalePackError`` subclasses; everything else
degrades silently and is reported through the returned ``LoadSummary``.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from localepack.enums import PackStatus
from localepack.errors import NoLanguagePacksError, PackDirectoryMissingError
from localepack.locale_utils import (
    get_display_name,
    get_system_locale,
    language_subtag,
    normalize_locale,
)
from localepack.packs.loading import (
    LoadSummary,
    PackLoadResult,
    PackStoreConfig,
    extract_archive,
    iter_pack_files,
)
from localepack.packs.parser import load_pack_file
from localepack.packs.types import LocaleCode, PackEntries, TextKey
from localepack.registry import LocaleRegistry, get_default_registry

__all__ = ["LanguagePack", "LanguagePackStore"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LanguagePack:
    """Translated text for one locale.

    Attributes:
        culture: Locale code as written in the pack's file name
        display_name: Human-readable label for the locale selection menu
        entries: Read-only mapping from lowercase key to text
    """

    culture: LocaleCode
    display_name: str
    entries: Mapping[TextKey, str]

    @classmethod
    def create(
        cls, culture: LocaleCode, entries: PackEntries, display_name: str | None = None
    ) -> LanguagePack:
        """Create a pack, freezing its entries.

        Args:
            culture: Locale code of the pack
            entries: Parsed entries; keys are lowercased
            display_name: Label override (default: Babel's native name)

        Raises:
            ValueError: If entries is empty
        """
        if not entries:
            msg = f"Language pack '{culture}' has no entries"
            raise ValueError(msg)
        frozen = MappingProxyType({k.lower(): v for k, v in entries.items()})
        return cls(culture, display_name or get_display_name(culture), frozen)

    @property
    def key(self) -> str:
        """Normalized locale code used as the store key."""
        return normalize_locale(self.culture)

    def text(self, key: TextKey) -> str:
        """Return text for an already-lowercased key, or empty string."""
        return self.entries.get(key, "")

    def __str__(self) -> str:
        return self.display_name


class LanguagePackStore:
    """Loaded language packs and the active locale.

    Example:
        >>> store = LanguagePackStore()
        >>> summary = store.load(default_locale="en")
        >>> store.data("welcomeTitle")
        'Welcome'
        >>> store.data("noSuchKey")
        ''

    Attributes:
        config: Where packs are loaded from
        registry: Locale codes accepted as pack names
    """

    __slots__ = ("_active", "_loaded", "_packs", "config", "registry")

    def __init__(
        self,
        config: PackStoreConfig | None = None,
        registry: LocaleRegistry | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            config: Load locations (default: ``PackStoreConfig()``)
            registry: Accepted locale codes (default: Babel's full catalog)
        """
        self.config = config or PackStoreConfig()
        self.registry = registry if registry is not None else get_default_registry()
        self._packs: dict[str, LanguagePack] = {}
        self._active: str | None = None
        self._loaded = False

    def __repr__(self) -> str:
        return (
            f"LanguagePackStore(packs={list(self._packs)!r}, "
            f"active={self._active!r}, loaded={self._loaded})"
        )

    def __len__(self) -> int:
        return len(self._packs)

    def __contains__(self, locale: object) -> bool:
        return isinstance(locale, str) and normalize_locale(locale) in self._packs

    @property
    def is_loaded(self) -> bool:
        """Whether load() has completed successfully."""
        return self._loaded

    @property
    def packs(self) -> tuple[LanguagePack, ...]:
        """Loaded packs in scan order."""
        return tuple(self._packs.values())

    @property
    def active_pack(self) -> LanguagePack | None:
        """Pack for the active locale, or None before load."""
        if self._active is None:
            return None
        return self._packs[self._active]

    @property
    def active_locale(self) -> LocaleCode | None:
        """Culture of the active pack, or None before load."""
        pack = self.active_pack
        return pack.culture if pack is not None else None

    def get_pack(self, locale: LocaleCode) -> LanguagePack | None:
        """Return the pack for a locale (case-insensitive), or None."""
        return self._packs.get(normalize_locale(locale))

    def load(
        self,
        archive_path: str | Path | None = None,
        pack_directory: str | Path | None = None,
        default_locale: LocaleCode | None = None,
    ) -> LoadSummary:
        """Load all language packs and activate the default locale.

        Args:
            archive_path: Archive to extract first (default: from config)
            pack_directory: Directory to scan (default: from config)
            default_locale: Persisted default locale from settings

        Returns:
            Summary of every scanned pack file

        Raises:
            RuntimeError: If the store was already loaded
            PackExtractionError: If the archive exists but cannot be extracted
            PackDirectoryMissingError: If the pack directory does not exist
            NoLanguagePacksError: If no pack was admitted
        """
        if self._loaded:
            msg = "Language packs are already loaded"
            raise RuntimeError(msg)

        archive = Path(archive_path if archive_path is not None else self.config.archive_path)
        directory = Path(
            pack_directory if pack_directory is not None else self.config.pack_directory
        )

        if archive.is_file():
            extract_archive(archive, directory)

        if not directory.is_dir():
            msg = "UI translations are missing from disk."
            raise PackDirectoryMissingError(msg, pack_directory=str(directory))

        results = tuple(self._scan(directory))

        if not self._packs:
            msg = (
                f"No languages have been loaded! Ensure {directory} exists "
                f"with at least one {self.config.extension} file."
            )
            raise NoLanguagePacksError(msg, pack_directory=str(directory))

        self._active = self._resolve_initial(default_locale)
        self._loaded = True

        summary = LoadSummary(results, self.active_locale)
        logger.info("Language packs loaded: %r", summary)
        return summary

    def _scan(self, directory: Path) -> list[PackLoadResult]:
        results: list[PackLoadResult] = []
        for path in iter_pack_files(directory, self.config.extension):
            culture = path.stem
            key = normalize_locale(culture)

            if not self.registry.contains(culture):
                status = PackStatus.UNKNOWN_LOCALE
            elif key in self._packs:
                status = PackStatus.DUPLICATE
            else:
                entries = load_pack_file(path)
                if entries is None:
                    status = PackStatus.EMPTY
                else:
                    self._packs[key] = LanguagePack.create(culture, entries)
                    status = PackStatus.ADMITTED

            if status == PackStatus.ADMITTED:
                logger.debug("Admitted language pack '%s' from %s", culture, path.name)
            else:
                logger.debug("Skipped %s: %s", path.name, status)
            results.append(PackLoadResult(culture, path, status))
        return results

    def _resolve_initial(self, default_locale: LocaleCode | None) -> str:
        if default_locale and normalize_locale(default_locale) in self._packs:
            return normalize_locale(default_locale)

        first = next(iter(self._packs))
        system_locale = get_system_locale()
        fallback = first
        if system_locale:
            for candidate in (normalize_locale(system_locale), language_subtag(system_locale)):
                if candidate in self._packs:
                    fallback = candidate
                    break

        logger.warning(
            "Default locale %r has no language pack; using '%s'",
            default_locale,
            self._packs[fallback].culture,
        )
        return fallback

    def activate(self, locale: LocaleCode) -> LanguagePack:
        """Make a loaded locale the active one.

        Args:
            locale: Locale code (case-insensitive)

        Returns:
            The newly active pack

        Raises:
            ValueError: If no pack is loaded for the locale
        """
        key = normalize_locale(locale)
        if key not in self._packs:
            msg = f"No language pack loaded for locale '{locale}'"
            raise ValueError(msg)
        self._active = key
        logger.info("Active locale set to '%s'", self._packs[key].culture)
        return self._packs[key]

    def data(self, key: TextKey) -> str:
        """Look up translated text in the active pack.

        Lookup is case-insensitive. Misses return an empty string rather
        than raising, so incomplete translations degrade to blank text.

        Args:
            key: Lookup key, usually an element's structural name

        Returns:
            Stored text, or empty string if the key or active pack is missing
        """
        pack = self.active_pack
        if pack is None or not isinstance(key, str):
            return ""
        text = pack.text(key.lower())
        if not text.strip():
            logger.debug("Locale '%s' is missing a translation for '%s'", pack.culture, key)
        return text
