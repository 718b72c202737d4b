"""Tests for Apple resource emission."""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path

import pytest

from resbridge.emit import ResourceEmitter
from resbridge.localization import LocaleTable, PluralItem, ValueBucket
from resbridge.runtime import LocaleResolver, ValueNormalizer

BOM = b"\xef\xbb\xbf"


def _emitter(**buckets: ValueBucket) -> ResourceEmitter:
    table = LocaleTable()
    for locale, bucket in buckets.items():
        table.keys.strings.update(bucket.strings)
        table.keys.arrays.update(bucket.arrays)
        table.keys.plurals.update(bucket.plurals)
        table.register(locale, bucket)
    resolver = LocaleResolver(table)
    return ResourceEmitter(resolver, ValueNormalizer(resolver))


def _text(content: bytes | None) -> str:
    assert content is not None
    assert content.startswith(BOM)
    return content[len(BOM) :].decode("utf-8")


class TestRenderStrings:
    """Test Localizable.strings rendering."""

    def test_sorted_lines(self) -> None:
        """One line per key, keys ascending."""
        emitter = _emitter(Base=ValueBucket(strings={"b": "Bee", "a": "Hi %s"}))
        assert _text(emitter.render_strings("Base")) == '"a" = "Hi %@";\n"b" = "Bee";\n'

    def test_global_keys_with_fallback(self) -> None:
        """Keys missing in a locale are filled from its fallback chain."""
        emitter = _emitter(
            Base=ValueBucket(strings={"a": "A", "b": "B"}),
            fr=ValueBucket(strings={"a": "Fa"}),
        )
        assert _text(emitter.render_strings("fr")) == '"a" = "Fa";\n"b" = "B";\n'

    def test_unresolvable_keys_omitted(self) -> None:
        """Keys defined outside a locale's chain are omitted."""
        emitter = _emitter(
            Base=ValueBucket(strings={"a": "A"}),
            fr=ValueBucket(strings={"only_fr": "F"}),
        )
        assert _text(emitter.render_strings("de")) == '"a" = "A";\n'

    def test_nothing_resolves(self) -> None:
        """No file content when no key resolves."""
        emitter = _emitter(fr=ValueBucket(arrays={"a": ("x",)}))
        assert emitter.render_strings("fr") is None


class TestRenderArrays:
    """Test LocalizableArray.strings rendering."""

    def test_items_keep_source_order(self) -> None:
        """Array items are emitted in source order."""
        emitter = _emitter(Base=ValueBucket(arrays={"letters": ("c", "a", "b")}))
        assert _text(emitter.render_arrays("Base")) == (
            '"letters" = (\n    "c",\n    "a",\n    "b",\n);\n\n'
        )

    def test_items_normalized(self) -> None:
        """Array items get placeholder rewriting."""
        emitter = _emitter(Base=ValueBucket(arrays={"k": ('Say "%s"',)}))
        assert _text(emitter.render_arrays("Base")) == '"k" = (\n    "Say \\"%@\\"",\n);\n\n'


class TestRenderPlurals:
    """Test Localizable.stringsdict rendering."""

    def test_plist_structure(self) -> None:
        """Each key gets the format-key scaffold and its quantities."""
        items = (PluralItem("one", "%1$d song"), PluralItem("other", "%1$,d songs"))
        emitter = _emitter(Base=ValueBucket(plurals={"songs": items}))

        content = emitter.render_plurals("Base")
        assert content is not None and content.startswith(BOM)
        plist = plistlib.loads(content[len(BOM) :])

        assert plist == {
            "songs": {
                "NSStringLocalizedFormatKey": "%#@x@",
                "x": {
                    "NSStringFormatSpecTypeKey": "NSStringPluralRuleType",
                    "NSStringFormatValueTypeKey": "d",
                    "one": "%d song",
                    "other": "%d songs",
                },
            },
        }

    def test_quantity_order_preserved(self) -> None:
        """Quantities appear in source order."""
        items = (PluralItem("other", "many"), PluralItem("one", "single"))
        emitter = _emitter(Base=ValueBucket(plurals={"p": items}))
        content = emitter.render_plurals("Base")
        assert content is not None
        rule = plistlib.loads(content[len(BOM) :])["p"]["x"]
        assert list(rule)[-2:] == ["other", "one"]

    def test_fallback_to_base_plurals(self) -> None:
        """A locale without the key uses Base's plural text."""
        items = (PluralItem("one", "%d file"), PluralItem("other", "%d files"))
        emitter = _emitter(
            Base=ValueBucket(plurals={"files": items}),
            fr=ValueBucket(strings={"a": "b"}),
        )
        content = emitter.render_plurals("fr")
        assert content is not None
        rule = plistlib.loads(content[len(BOM) :])["files"]["x"]
        assert rule["one"] == "%d file"
        assert rule["other"] == "%d files"

    def test_missing_cldr_category_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        """Missing CLDR categories are logged without changing output."""
        items = (PluralItem("one", "1"), PluralItem("other", "n"))
        emitter = _emitter(ru=ValueBucket(plurals={"p": items}))
        with caplog.at_level(logging.WARNING):
            content = emitter.render_plurals("ru")
        assert content is not None
        assert "lacks categories: few, many" in caplog.text


class TestEmitLocale:
    """Test writing files to disk."""

    def test_writes_only_non_empty_files(self, tmp_path: Path) -> None:
        """Only files with at least one resolved key are written."""
        emitter = _emitter(Base=ValueBucket(strings={"a": "A"}))
        written = emitter.emit_locale(tmp_path, "Base")
        assert written == [tmp_path / "Base.lproj" / "Localizable.strings"]
        assert not (tmp_path / "Base.lproj" / "LocalizableArray.strings").exists()
        assert not (tmp_path / "Base.lproj" / "Localizable.stringsdict").exists()

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        """Existing output is replaced, never appended to."""
        target = tmp_path / "Base.lproj" / "Localizable.strings"
        target.parent.mkdir(parents=True)
        target.write_bytes(b"stale content that is much longer than the new file\n" * 10)

        _emitter(Base=ValueBucket(strings={"a": "A"})).emit_locale(tmp_path, "Base")

        assert target.read_bytes() == BOM + b'"a" = "A";\n'

    def test_idempotent(self, tmp_path: Path) -> None:
        """Emitting twice yields byte-identical files."""
        emitter = _emitter(
            Base=ValueBucket(
                strings={"a": "A"},
                arrays={"b": ("1", "2")},
                plurals={"c": (PluralItem("other", "%d"),)},
            ),
            fr=ValueBucket(strings={"a": "Fa"}),
        )
        first = {path: path.read_bytes() for path in emitter.emit_all(tmp_path)}
        second = {path: path.read_bytes() for path in emitter.emit_all(tmp_path)}
        assert first == second
        assert len(first) == 6


class TestRepeatedQuantity:
    """Test plurals repeating a quantity."""

    def test_last_item_wins(self) -> None:
        """The later item of a repeated quantity is written."""
        items = (PluralItem("one", "first"), PluralItem("one", "second"))
        emitter = _emitter(Base=ValueBucket(plurals={"p": items}))
        content = emitter.render_plurals("Base")
        assert content is not None
        assert plistlib.loads(content[len(BOM) :])["p"]["x"]["one"] == "second"
