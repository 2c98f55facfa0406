"""Parser for language pack files.

Pack files are UTF-8 text with one ``key = value`` entry per line::

    # Main window
    welcomeTitle = Welcome
    settingConfirmationPrompt = Restart now?\\nUnsaved changes are kept.

Rules:
    - Lines starting with ``#`` (after leading whitespace) are comments
    - Blank lines are ignored
    - Keys are stripped and lowercased; the first occurrence of a key wins
    - Values are stripped; ``\\n``, ``\\t`` and ``\\\\`` are unescaped
    - Lines without ``=`` or with an empty key are skipped

The parser never raises on malformed content. It returns ``None`` when
nothing usable remains, which tells the store to discard the pack.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from localepack.constants import COMMENT_PREFIX, KEY_VALUE_SEPARATOR, PACK_ENCODING
from localepack.packs.types import PackEntries

__all__ = ["load_pack_file", "parse_pack"]

logger = logging.getLogger(__name__)

_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}
_ESCAPE_PATTERN = re.compile(r"\\([nt\\])")


def _unescape(value: str) -> str:
    return _ESCAPE_PATTERN.sub(lambda m: _ESCAPES[m.group(1)], value)


def parse_pack(source: str) -> PackEntries | None:
    """Parse pack source text into a key to text mapping.

    Args:
        source: Full text of a pack file

    Returns:
        Entries keyed by lowercase key, or None if no entry was found

    Example:
        >>> parse_pack("Title = Hello\\n# comment\\nbroken line")
        {'title': 'Hello'}
        >>> parse_pack("# nothing here") is None
        True
    """
    entries: PackEntries = {}
    for line_number, raw_line in enumerate(source.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        key, separator, value = line.partition(KEY_VALUE_SEPARATOR)
        key = key.strip().lower()
        if not separator or not key:
            logger.debug("Skipping malformed pack line %d: %r", line_number, raw_line)
            continue
        if key in entries:
            logger.debug("Ignoring duplicate key '%s' on line %d", key, line_number)
            continue

        entries[key] = _unescape(value.strip())

    return entries or None


def load_pack_file(path: Path) -> PackEntries | None:
    """Read and parse a pack file from disk.

    Unreadable files (I/O errors, invalid UTF-8) are treated like files
    with no entries.

    Args:
        path: Pack file to read

    Returns:
        Parsed entries, or None if the file is unreadable or empty
    """
    try:
        source = path.read_text(encoding=PACK_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read language pack %s: %s", path, e)
        return None
    # Strip a leading UTF-8 byte order mark.
    return parse_pack(source.removeprefix("\ufeff"))
