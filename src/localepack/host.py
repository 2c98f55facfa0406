"""Composition root helpers for desktop hosts.

The store and switcher never terminate the process or spawn processes
themselves. These helpers do it on the host's behalf:

    load_or_exit - Load packs; on a fatal error report it and exit
    relaunch     - Start a detached process that relaunches the app later

Typical startup:
    settings = JsonSettings.load(settings_path)
    store = LanguagePackStore()
    load_or_exit(store, settings.default_locale, report=show_message_box)
    Translator(store).translate(main_window)

Python 3.13+.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from localepack.errors import LocalePackError

if TYPE_CHECKING:
    from localepack.packs.loading import LoadSummary
    from localepack.packs.store import LanguagePackStore
    from localepack.packs.types import LocaleCode
    from localepack.ui.switcher import RestartRequested

__all__ = ["load_or_exit", "relaunch"]

logger = logging.getLogger(__name__)

_RELAUNCH_SCRIPT = (
    "import subprocess, sys, time; "
    "time.sleep(float(sys.argv[1])); "
    "subprocess.Popen(sys.argv[2:])"
)


def load_or_exit(
    store: LanguagePackStore,
    default_locale: LocaleCode | None,
    report: Callable[[str], None],
) -> LoadSummary:
    """Load language packs, terminating the process on a fatal error.

    Args:
        store: Store to load, using its configured locations
        default_locale: Persisted default locale from settings
        report: Shows a message to the user (e.g., a message box)

    Returns:
        Load summary on success

    Raises:
        SystemExit: With the error's exit code if loading failed
    """
    try:
        return store.load(default_locale=default_locale)
    except LocalePackError as e:
        logger.critical("Language pack loading failed: %s", e)
        report(e.message)
        raise SystemExit(e.exit_code) from e


def relaunch(
    request: RestartRequested,
    command: Sequence[str] | None = None,
) -> subprocess.Popen[bytes]:
    """Spawn a detached process that restarts the application after a delay.

    Fire and forget: the spawned process is not tracked and its failure
    cannot be observed. The caller is expected to exit right after.

    Args:
        request: Restart request returned by the switcher
        command: Command line to relaunch (default: this interpreter and argv)

    Returns:
        Handle of the spawned waiter process
    """
    argv = list(command) if command is not None else [sys.executable, *sys.argv]
    waiter = [sys.executable, "-c", _RELAUNCH_SCRIPT, str(request.delay_seconds), *argv]

    if sys.platform.startswith("win"):
        flags = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
        process = subprocess.Popen(waiter, creationflags=flags, close_fds=True)
    else:
        process = subprocess.Popen(waiter, start_new_session=True, close_fds=True)

    logger.info(
        "Relaunch in %.1fs requested for locale '%s'", request.delay_seconds, request.locale
    )
    return process
