"""Registry of recognized locale identifiers.

The registry answers one question: is this name a locale we know about?
It is built once per process from Babel's CLDR locale catalog, collecting
every locale identifier together with its language-only subtag, and is
immutable afterwards.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from localepack.locale_utils import language_subtag, normalize_locale

__all__ = ["LocaleRegistry", "get_default_registry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleRegistry:
    """Immutable, case-insensitive set of known locale codes.

    Codes are stored in normalized form (lowercase POSIX), so "en-US",
    "en_US" and "EN-us" are all the same entry.

    Example:
        >>> registry = LocaleRegistry.from_codes(["en_US", "lv"])
        >>> registry.contains("en-us")
        True
        >>> registry.contains("en")
        True
        >>> "fr" in registry
        False

    Attributes:
        codes: Normalized locale codes, including language-only subtags
    """

    codes: frozenset[str]

    @classmethod
    def from_codes(cls, codes: Iterable[str]) -> LocaleRegistry:
        """Build a registry from explicit locale codes.

        Each code contributes both its full form and its language subtag.

        Args:
            codes: Locale codes in BCP-47 or POSIX form

        Returns:
            New registry
        """
        names: set[str] = set()
        for code in codes:
            if not code:
                continue
            names.add(normalize_locale(code))
            names.add(language_subtag(code))
        return cls(frozenset(names))

    @classmethod
    def from_catalog(cls) -> LocaleRegistry:
        """Build a registry from Babel's full locale catalog."""
        from babel.localedata import locale_identifiers  # noqa: PLC0415

        identifiers = [code for code in locale_identifiers() if code != "root"]
        registry = cls.from_codes(identifiers)
        logger.debug(
            "Locale registry built: %d catalog identifiers, %d names",
            len(identifiers),
            len(registry.codes),
        )
        return registry

    def contains(self, name: object) -> bool:
        """Check whether name is a recognized locale code.

        Never raises: non-string and empty input are simply not contained.
        """
        if not isinstance(name, str) or not name:
            return False
        return normalize_locale(name) in self.codes

    def __contains__(self, name: object) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return len(self.codes)


@functools.cache
def get_default_registry() -> LocaleRegistry:
    """Return the process-wide registry built from Babel's catalog.

    Built on first call and cached for the lifetime of the process.
    """
    return LocaleRegistry.from_catalog()
