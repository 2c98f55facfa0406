"""Pack loading infrastructure for LanguagePackStore.

Provides the store configuration, archive extraction, pack file discovery,
and result/summary data structures for tracking what a load admitted and
what it skipped.

Components:
    PackStoreConfig - Immutable archive/directory/extension configuration
    PackLoadResult - Immutable outcome of scanning one pack file
    LoadSummary - Immutable aggregate of all results from one load
    extract_archive - Replace the pack directory with an archive's contents
    iter_pack_files - Discover pack files in scan order

Python 3.13+.
"""

from __future__ import annotations

import logging
import shutil
import zipfile
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from localepack.constants import (
    DEFAULT_ARCHIVE_NAME,
    DEFAULT_PACK_DIRECTORY,
    PACK_EXTENSION,
)
from localepack.enums import PackStatus
from localepack.errors import PackExtractionError
from localepack.packs.types import LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Configuration
    "PackStoreConfig",
    # Load result types
    "PackLoadResult",
    "LoadSummary",
    # Filesystem steps
    "extract_archive",
    "iter_pack_files",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PackStoreConfig:
    """Immutable configuration for where and how packs are loaded.

    All fields have defaults matching the application's layout: an optional
    ``Languages.zip`` and a ``Languages`` directory in the working directory.

    Example:
        >>> config = PackStoreConfig(pack_directory="resources/lang")
        >>> config.extension
        '.lang'

    Attributes:
        archive_path: Packed archive consumed (and deleted) at startup if present
        pack_directory: Directory holding one pack file per locale
        extension: File suffix marking pack files, with leading dot
    """

    archive_path: str | Path = DEFAULT_ARCHIVE_NAME
    pack_directory: str | Path = DEFAULT_PACK_DIRECTORY
    extension: str = PACK_EXTENSION

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If extension does not start with a dot or a path is empty
        """
        if not self.extension.startswith(".") or len(self.extension) < 2:
            msg = f"extension must start with '.' and name a suffix, got: '{self.extension}'"
            raise ValueError(msg)
        if not str(self.archive_path) or not str(self.pack_directory):
            msg = "archive_path and pack_directory must not be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class PackLoadResult:
    """Result of scanning a single pack file.

    Attributes:
        locale: Candidate locale code derived from the file name
        path: Pack file that was scanned
        status: What happened to the file
    """

    locale: LocaleCode
    path: Path
    status: PackStatus

    @property
    def is_admitted(self) -> bool:
        """Check if the pack was added to the store."""
        return self.status == PackStatus.ADMITTED


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of pack scan results from one load.

    Skipped files never raise; this summary is the only place they are
    visible to the host.

    Example:
        >>> summary = store.load()
        >>> for result in summary.get_skipped():
        ...     print(f"Skipped {result.path.name}: {result.status}")

    Attributes:
        results: Results in scan order
        active_locale: Locale activated by the load
    """

    results: tuple[PackLoadResult, ...]
    active_locale: LocaleCode | None = None

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_scanned}, "
            f"admitted={self.admitted}, "
            f"skipped={self.skipped}, "
            f"active={self.active_locale!r})"
        )

    @property
    def total_scanned(self) -> int:
        """Total number of pack files scanned."""
        return len(self.results)

    @property
    def admitted(self) -> int:
        """Number of packs added to the store."""
        return sum(1 for r in self.results if r.is_admitted)

    @property
    def skipped(self) -> int:
        """Number of pack files not added to the store."""
        return self.total_scanned - self.admitted

    def get_admitted(self) -> tuple[PackLoadResult, ...]:
        """Get all results for admitted packs."""
        return tuple(r for r in self.results if r.is_admitted)

    def get_skipped(self) -> tuple[PackLoadResult, ...]:
        """Get all results for files that were not admitted."""
        return tuple(r for r in self.results if not r.is_admitted)

    def get_by_status(self, status: PackStatus) -> tuple[PackLoadResult, ...]:
        """Get all results with a specific status."""
        return tuple(r for r in self.results if r.status == status)


def _is_within(base_dir: Path, target: Path) -> bool:
    try:
        target.resolve().relative_to(base_dir.resolve())
        return True
    except ValueError:
        return False


def extract_archive(archive_path: Path, pack_directory: Path) -> None:
    """Replace the pack directory with the contents of an archive.

    An existing pack directory is deleted recursively and recreated, every
    archive member is extracted into it, and the archive is deleted.

    Args:
        archive_path: Zip archive containing pack files
        pack_directory: Destination directory

    Raises:
        PackExtractionError: If any step fails, including members that
            would be written outside pack_directory
    """
    try:
        if pack_directory.exists():
            shutil.rmtree(pack_directory)
        pack_directory.mkdir(parents=True, exist_ok=True)

        with zipfile.ZipFile(archive_path) as archive:
            for member in archive.namelist():
                if not _is_within(pack_directory, pack_directory / member):
                    msg = f"Archive member escapes the pack directory: '{member}'"
                    raise PackExtractionError(msg, archive_path=str(archive_path))
            archive.extractall(pack_directory)
            member_count = len(archive.namelist())

        archive_path.unlink()
    except PackExtractionError:
        raise
    except Exception as e:
        msg = f"Failed to extract the language pack. Please report this: {e}"
        raise PackExtractionError(msg, archive_path=str(archive_path)) from e

    logger.info(
        "Extracted %d language pack members from %s into %s",
        member_count,
        archive_path,
        pack_directory,
    )


def iter_pack_files(pack_directory: Path, extension: str) -> Iterator[Path]:
    """Yield pack files in the directory in scan order.

    Scan order is sorted file name order. The extension is compared
    case-insensitively; subdirectories are not descended into.

    Args:
        pack_directory: Directory to scan
        extension: Suffix marking pack files, with leading dot
    """
    suffix = extension.lower()
    for path in sorted(pack_directory.iterdir(), key=lambda p: p.name):
        if path.is_file() and path.suffix.lower() == suffix:
            yield path
