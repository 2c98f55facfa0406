"""localepack exception hierarchy.

Fatal load errors carry a user-facing message and the process exit status
the host should terminate with. The store raises them; the host decides how
to show the message (see ``localepack.host.load_or_exit``).

Recoverable conditions (unknown or duplicate pack files, missing keys,
``None`` UI nodes) never raise.

Python 3.13+.
"""

from localepack.constants import EXIT_FATAL

__all__ = [
    "LocalePackError",
    "NoLanguagePacksError",
    "PackDirectoryMissingError",
    "PackExtractionError",
]


class LocalePackError(Exception):
    """Base exception for all fatal localepack errors.

    Attributes:
        exit_code: Status the process should terminate with
    """

    exit_code: int = EXIT_FATAL

    def __init__(self, message: str) -> None:
        """Initialize LocalePackError.

        Args:
            message: Message suitable for showing to the user
        """
        super().__init__(message)
        self.message = message


class PackExtractionError(LocalePackError):
    """The language pack archive could not be unpacked.

    Attributes:
        archive_path: Archive that failed to extract
    """

    def __init__(self, message: str, *, archive_path: str = "") -> None:
        super().__init__(message)
        self.archive_path = archive_path


class PackDirectoryMissingError(LocalePackError):
    """The pack directory does not exist after the extraction step."""

    def __init__(self, message: str, *, pack_directory: str = "") -> None:
        super().__init__(message)
        self.pack_directory = pack_directory


class NoLanguagePacksError(LocalePackError):
    """The pack directory was scanned but no pack was admitted."""

    def __init__(self, message: str, *, pack_directory: str = "") -> None:
        super().__init__(message)
        self.pack_directory = pack_directory
