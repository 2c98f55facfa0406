"""Property-based tests for LanguagePackStore.

Each example builds its own temporary pack directory, so examples are
independent of each other.
"""

from __future__ import annotations

import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from hypothesis import event, given
from hypothesis import strategies as st

from localepack.locale_utils import normalize_locale
from localepack.packs.loading import PackStoreConfig
from localepack.packs.store import LanguagePackStore
from localepack.registry import LocaleRegistry

KNOWN = ("en", "en-US", "de", "de-AT", "lv", "lt", "pt-BR", "fr-CA", "zh-Hans-CN")
REGISTRY = LocaleRegistry.from_codes(KNOWN)

known_locales = st.sampled_from(KNOWN)
unknown_names = st.from_regex(r"[a-z]{5,10}", fullmatch=True).filter(
    lambda name: not REGISTRY.contains(name)
)
keys = st.from_regex(r"[a-z][a-z0-9]{0,10}", fullmatch=True)
texts = st.from_regex(r"[A-Za-z][A-Za-z0-9 ]{0,20}", fullmatch=True).map(str.strip)


@contextmanager
def pack_store(files: dict[str, str]) -> Iterator[LanguagePackStore]:
    with tempfile.TemporaryDirectory() as tmp:
        directory = Path(tmp) / "Languages"
        directory.mkdir()
        for name, body in files.items():
            (directory / f"{name}.lang").write_text(body, encoding="utf-8")
        config = PackStoreConfig(archive_path=Path(tmp) / "none.zip", pack_directory=directory)
        yield LanguagePackStore(config, REGISTRY)


class TestStoreProperties:
    @given(st.lists(known_locales, min_size=1, unique_by=normalize_locale))
    def test_one_pack_per_accepted_locale(self, locales: list[str]) -> None:
        """Every accepted locale yields exactly one pack, in any file order."""
        files = {code: f"title = {code}\n" for code in locales}
        with pack_store(files) as store:
            summary = store.load()

            assert len(store) == len(locales)
            assert summary.admitted == len(locales)
            for code in locales:
                pack = store.get_pack(code)
                assert pack is not None
                assert pack.entries["title"] == code

    @given(known_locales, st.lists(unknown_names, min_size=1, max_size=5, unique=True))
    def test_unknown_locales_ignored(self, known: str, unknown: list[str]) -> None:
        """Files not named after a recognized locale never become packs."""
        files = {known: "title = ok\n"} | {name: "title = ignored\n" for name in unknown}
        with pack_store(files) as store:
            summary = store.load()

            assert len(store) == 1
            assert summary.skipped == len(unknown)
            for name in unknown:
                assert name not in store

    @given(known_locales, st.data())
    def test_duplicates_do_not_grow_store(self, code: str, data: st.DataObject) -> None:
        """Case variants of one locale admit only the first file in scan order."""
        variants = {code, code.upper(), code.lower(), code.replace("-", "_")}
        event(f"variants={len(variants)}")
        files = {variant: f"title = {variant}\n" for variant in variants}
        with pack_store(files) as store:
            store.load(default_locale=code)

            assert len(store) == 1
            assert store.data("title") == sorted(variants)[0]

    @given(st.dictionaries(keys, texts.filter(bool), min_size=1, max_size=10), st.text())
    def test_data_exact_or_empty(self, entries: dict[str, str], probe: str) -> None:
        """data() returns stored text for present keys and never raises."""
        body = "".join(f"{k} = {v}\n" for k, v in entries.items())
        with pack_store({"en": body}) as store:
            store.load(default_locale="en")

            for key, value in entries.items():
                assert store.data(key) == value
                assert store.data(key.upper()) == value
            assert store.data(probe) == entries.get(probe.lower(), "")
