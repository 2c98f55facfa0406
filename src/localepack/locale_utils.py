"""Locale utilities for case-insensitive locale comparison.

Centralizes locale code normalization used throughout the codebase.
Provides canonical locale handling so that pack file names, persisted
settings and registry entries compare equal regardless of case or
separator style.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_display_name",
    "get_system_locale",
    "language_subtag",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a locale code to its canonical comparison key.

    BCP-47 uses hyphens (en-US) while Babel/POSIX uses underscores (en_US),
    and both are case-insensitive. The canonical key is lowercase POSIX.

    Args:
        locale_code: Locale code in BCP-47 or POSIX form

    Returns:
        Lowercase POSIX locale key

    Example:
        >>> normalize_locale("en-US")
        'en_us'
        >>> normalize_locale("zh-Hans-CN")
        'zh_hans_cn'
        >>> normalize_locale("EN")
        'en'
    """
    return locale_code.replace("-", "_").lower()


def language_subtag(locale_code: str) -> str:
    """Return the language-only part of a locale code.

    Example:
        >>> language_subtag("pt-BR")
        'pt'
    """
    return normalize_locale(locale_code).split("_", 1)[0]


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(locale_code.replace("-", "_"))


def get_display_name(locale_code: str) -> str:
    """Return the native display name for a locale.

    Falls back to the code itself when Babel does not know the locale or
    has no name for it.

    Example:
        >>> get_display_name("de")
        'Deutsch'
        >>> get_display_name("not-a-locale")
        'not-a-locale'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        name = get_babel_locale(locale_code).display_name
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug("No display name for locale '%s': %s", locale_code, e)
        return locale_code
    return name or locale_code


def get_system_locale() -> str | None:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding
    suffixes.

    Returns:
        Detected locale code (as found, encoding stripped), or None if
        the system locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale:
            system_locale = system_locale.split(".")[0]
            if system_locale not in ("C", "POSIX"):
                return system_locale
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var, "").split(".")[0]
        if value and value not in ("C", "POSIX"):
            return value

    return None
