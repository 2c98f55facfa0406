"""Type aliases for the language pack domain.

Provides semantic type aliases used throughout the packs and ui packages
and by host code when annotating call sites.

Python 3.13+.
"""

__all__ = [
    "LocaleCode",
    "PackEntries",
    "TextKey",
]

type LocaleCode = str
"""Locale code as written by the user or in a file name (e.g., 'en', 'pt-BR')."""

type TextKey = str
"""Lookup key for a piece of UI text, normally an element's structural name."""

type PackEntries = dict[TextKey, str]
"""Mapping from lowercase key to translated text."""
