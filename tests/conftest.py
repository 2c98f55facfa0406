"""Pytest configuration for localepack test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import os
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from localepack.packs.loading import PackStoreConfig
from localepack.packs.store import LanguagePackStore
from localepack.registry import LocaleRegistry

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Property tests write pack files to tmp_path, so function-scoped fixtures
# are shared across examples; every test clears its directory itself.
_SUPPRESSED = [HealthCheck.function_scoped_fixture]

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=_SUPPRESSED,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=_SUPPRESSED,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
    suppress_health_check=_SUPPRESSED,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# PACK FIXTURES
# =============================================================================

TEST_LOCALES = ("en", "en-US", "de", "lv", "pt-BR", "zh-Hans-CN")

type PackWriter = Callable[..., Path]


@pytest.fixture
def registry() -> LocaleRegistry:
    """Small explicit registry, independent of Babel's catalog."""
    return LocaleRegistry.from_codes(TEST_LOCALES)


@pytest.fixture
def pack_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "Languages"
    directory.mkdir()
    return directory


@pytest.fixture
def write_pack(pack_dir: Path) -> PackWriter:
    """Write a pack file into pack_dir from a mapping or raw text."""

    def _write(
        name: str,
        entries: dict[str, str] | str,
        *,
        extension: str = ".lang",
        directory: Path | None = None,
    ) -> Path:
        target = (directory or pack_dir) / f"{name}{extension}"
        if isinstance(entries, str):
            body = entries
        else:
            body = "".join(f"{key} = {value}\n" for key, value in entries.items())
        target.write_text(body, encoding="utf-8")
        return target

    return _write


@pytest.fixture
def unsupported_archive(tmp_path: Path) -> Path:
    """Languages.zip whose only member declares an unknown compression method."""
    path = tmp_path / "Languages.zip"
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("en.lang", "title = Hello\n")

    data = bytearray(path.read_bytes())
    method = (99).to_bytes(2, "little")
    # Compression method fields of the local and central directory headers.
    local = data.index(b"PK\x03\x04")
    data[local + 8 : local + 10] = method
    central = data.index(b"PK\x01\x02")
    data[central + 10 : central + 12] = method
    path.write_bytes(data)
    return path


@pytest.fixture
def make_store(tmp_path: Path, pack_dir: Path, registry: LocaleRegistry):
    """Build a store reading pack_dir with the small test registry."""

    def _make(**overrides: object) -> LanguagePackStore:
        config = PackStoreConfig(
            archive_path=overrides.pop("archive_path", tmp_path / "Languages.zip"),  # type: ignore[arg-type]
            pack_directory=overrides.pop("pack_directory", pack_dir),  # type: ignore[arg-type]
        )
        return LanguagePackStore(config, overrides.pop("registry", registry))  # type: ignore[arg-type]

    return _make


@pytest.fixture(autouse=True)
def _no_system_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make default-locale fallback independent of the machine running tests."""
    monkeypatch.setattr("localepack.packs.store.get_system_locale", lambda: None)
