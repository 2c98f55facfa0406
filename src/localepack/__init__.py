"""localepack - Runtime language packs for desktop application UIs.

Loads one text pack per locale from disk (optionally unpacking an archive
first), validates pack names against Babel's locale catalog, looks up text
by key in the active locale, and applies it across whole UI element trees.

Public API:
    LanguagePackStore - Loaded packs and the active locale
    LanguagePack - Translated text for one locale
    PackStoreConfig - Archive/directory/extension configuration
    LocaleRegistry - Recognized locale codes
    Translator - Recursive UI tree translation
    LocaleSwitcher - Locale selection menu and switching
    UIElement, ContextMenu, MenuItem - Toolkit-neutral element tree
    JsonSettings - JSON file backed settings

Exceptions:
    LocalePackError - Base exception class (fatal load errors)
    PackExtractionError - Archive could not be unpacked
    PackDirectoryMissingError - Pack directory does not exist
    NoLanguagePacksError - No pack could be loaded

Submodules:
    localepack.packs - Pack parsing, loading and the store
    localepack.ui - Element tree, translator and switcher
    localepack.host - Composition root helpers (exit on fatal error, relaunch)
"""

from .errors import (
    LocalePackError,
    NoLanguagePacksError,
    PackDirectoryMissingError,
    PackExtractionError,
)
from .packs import LanguagePack, LanguagePackStore, LoadSummary, PackStoreConfig
from .registry import LocaleRegistry, get_default_registry
from .settings import JsonSettings, SettingsStore
from .ui import (
    ContextMenu,
    ElementKind,
    LocaleSwitcher,
    MenuItem,
    RestartRequested,
    SelectLocale,
    Translator,
    UIElement,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localepack")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ContextMenu",
    "ElementKind",
    "JsonSettings",
    "LanguagePack",
    "LanguagePackStore",
    "LoadSummary",
    "LocalePackError",
    "LocaleRegistry",
    "LocaleSwitcher",
    "MenuItem",
    "NoLanguagePacksError",
    "PackDirectoryMissingError",
    "PackExtractionError",
    "PackStoreConfig",
    "RestartRequested",
    "SelectLocale",
    "SettingsStore",
    "Translator",
    "UIElement",
    "__version__",
    "get_default_registry",
]
