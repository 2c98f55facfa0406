"""Persisted application settings.

Defines the configuration collaborator the switcher writes to, and a JSON
file implementation for hosts without a settings store of their own.

Components:
    SettingsStore - Protocol: default_locale property plus persist()
    JsonSettings  - JSON file backed settings with merged defaults

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from localepack.packs.types import LocaleCode

__all__ = ["DEFAULT_SETTINGS", "JsonSettings", "SettingsStore"]

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "default_locale": "en",
}


class SettingsStore(Protocol):
    """Protocol for the store holding the persisted default locale.

    This is a Protocol (structural typing) so hosts can pass their existing
    configuration objects without subclassing.
    """

    @property
    def default_locale(self) -> LocaleCode | None:
        """Persisted default locale code."""
        ...

    @default_locale.setter
    def default_locale(self, value: LocaleCode | None) -> None: ...

    def persist(self) -> None:
        """Write pending changes to durable storage.

        Raises:
            OSError: If the settings cannot be written
        """
        ...


class JsonSettings:
    """Settings stored as a JSON object in a file.

    Unknown keys in the file are preserved on persist. Missing keys take
    their value from ``DEFAULT_SETTINGS``.

    Example:
        >>> settings = JsonSettings.load(Path("settings.json"))
        >>> settings.default_locale
        'en'
        >>> settings.default_locale = "de"
        >>> settings.persist()
    """

    __slots__ = ("_data", "path")

    def __init__(self, path: Path, data: dict[str, Any] | None = None) -> None:
        self.path = Path(path)
        self._data: dict[str, Any] = {**DEFAULT_SETTINGS, **(data or {})}

    @classmethod
    def load(cls, path: Path) -> JsonSettings:
        """Read settings from path, falling back to defaults.

        A missing file yields defaults silently. An unreadable or malformed
        file is logged and also yields defaults; it is overwritten on the
        next persist().
        """
        path = Path(path)
        if not path.exists():
            return cls(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", path, e)
            return cls(path)
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: top level is not an object", path)
            return cls(path)
        return cls(path, data)

    @property
    def default_locale(self) -> LocaleCode | None:
        value = self._data.get("default_locale")
        return value if isinstance(value, str) and value else None

    @default_locale.setter
    def default_locale(self, value: LocaleCode | None) -> None:
        self._data["default_locale"] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def persist(self) -> None:
        """Write settings to the file, creating parent directories."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(self._data, f, ensure_ascii=False, indent=2)
        logger.debug("Settings written to %s", self.path)
