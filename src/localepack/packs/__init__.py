"""Language pack package for LanguagePackStore.

Provides the full pack stack: type aliases, the pack file parser, loading
infrastructure, and the store with its active locale.

Submodules:
    types   - PEP 695 type aliases (LocaleCode, TextKey, PackEntries)
    parser  - parse_pack, load_pack_file
    loading - PackStoreConfig, PackLoadResult, LoadSummary, extract_archive
    store   - LanguagePack, LanguagePackStore

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localepack.enums import PackStatus
from localepack.packs.loading import LoadSummary, PackLoadResult, PackStoreConfig
from localepack.packs.parser import load_pack_file, parse_pack
from localepack.packs.store import LanguagePack, LanguagePackStore
from localepack.packs.types import LocaleCode, PackEntries, TextKey

__all__ = [
    # Store
    "LanguagePackStore",
    "LanguagePack",
    # Configuration
    "PackStoreConfig",
    # Load tracking
    "PackStatus",
    "PackLoadResult",
    "LoadSummary",
    # Parsing
    "parse_pack",
    "load_pack_file",
    # Type aliases for user code type annotations
    "LocaleCode",
    "PackEntries",
    "TextKey",
]
