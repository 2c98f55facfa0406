"""Shared constants for localepack.

Centralizes the well-known file locations, pack file conventions, lookup
keys and process exit statuses used across the packs and ui packages.

Constants are grouped by domain:
- Locations: Where packs are found relative to the working directory
- Pack files: File naming and parsing conventions
- Switching: Prompt keys and relaunch timing
- Exit statuses: Process termination codes for fatal load errors

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locations
    "DEFAULT_ARCHIVE_NAME",
    "DEFAULT_PACK_DIRECTORY",
    # Pack files
    "PACK_EXTENSION",
    "PACK_ENCODING",
    "COMMENT_PREFIX",
    "KEY_VALUE_SEPARATOR",
    # Switching
    "PROMPT_KEY",
    "PROMPT_TITLE_KEY",
    "RESTART_DELAY_SECONDS",
    # Exit statuses
    "EXIT_FATAL",
]

# ============================================================================
# LOCATIONS
# ============================================================================

DEFAULT_ARCHIVE_NAME: str = "Languages.zip"
"""Packed archive consumed once at startup, then deleted."""

DEFAULT_PACK_DIRECTORY: str = "Languages"
"""Directory holding one pack file per locale."""

# ============================================================================
# PACK FILES
# ============================================================================

PACK_EXTENSION: str = ".lang"
"""Suffix marking a file as a language pack (compared case-insensitively)."""

PACK_ENCODING: str = "utf-8"

COMMENT_PREFIX: str = "#"

KEY_VALUE_SEPARATOR: str = "="

# ============================================================================
# SWITCHING
# ============================================================================

PROMPT_KEY: str = "settingconfirmationprompt"
"""Pack key holding the restart confirmation question."""

PROMPT_TITLE_KEY: str = "settingconfirmationtitle"
"""Pack key holding the restart confirmation dialog title."""

RESTART_DELAY_SECONDS: float = 6.0
"""Delay before the relaunched process starts, giving this one time to exit."""

# ============================================================================
# EXIT STATUSES
# ============================================================================

# Every fatal load path (extraction failure, missing directory, no packs)
# terminates with the same status.
EXIT_FATAL: int = 1
