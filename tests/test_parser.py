"""Tests for Android resource XML extraction."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from lxml import etree

from resbridge.diagnostics import ResourceParseError
from resbridge.localization import (
    GlobalKeySets,
    PluralItem,
    ValueBucket,
    parse_document,
    read_document,
)


def _parse(body: str) -> tuple[ValueBucket, GlobalKeySets]:
    document = etree.fromstring(f"<resources>{body}</resources>".encode())
    bucket = ValueBucket()
    keys = GlobalKeySets()
    parse_document(document, bucket, keys)
    return bucket, keys


class TestStrings:
    """Test <string> extraction."""

    def test_plain_string(self) -> None:
        """Plain strings are recorded with their text."""
        bucket, keys = _parse('<string name="greeting">Hi %s</string>')
        assert bucket.strings == {"greeting": "Hi %s"}
        assert keys.strings == {"greeting"}

    def test_non_translatable_skipped(self) -> None:
        """translatable="false" entries are skipped."""
        bucket, keys = _parse('<string name="app" translatable="false">App</string>')
        assert bucket.strings == {}
        assert keys.strings == set()

    def test_empty_string_skipped(self) -> None:
        """Entries without text are skipped."""
        bucket, _ = _parse('<string name="a"/><string name="b"></string>')
        assert bucket.strings == {}

    def test_markup_descends_to_innermost_child(self) -> None:
        """Markup-wrapped text is taken from the innermost element."""
        bucket, _ = _parse('<string name="bold"><b><i>Bold</i></b></string>')
        assert bucket.strings == {"bold": "Bold"}

    def test_markup_uses_last_child(self) -> None:
        """With several child elements the last one is followed."""
        bucket, _ = _parse('<string name="x"><b>first</b><i>second</i></string>')
        assert bucket.strings == {"x": "second"}

    def test_entities_decoded(self) -> None:
        """Standard XML entities are decoded."""
        bucket, _ = _parse('<string name="amp">Salt &amp; Pepper</string>')
        assert bucket.strings == {"amp": "Salt & Pepper"}

    def test_duplicate_key_later_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        """A repeated key keeps the later value and logs a warning."""
        with caplog.at_level(logging.WARNING):
            bucket, _ = _parse('<string name="a">one</string><string name="a">two</string>')
        assert bucket.strings == {"a": "two"}
        assert "Duplicate string 'a'" in caplog.text


class TestStringArrays:
    """Test <string-array> extraction."""

    def test_items_in_document_order(self) -> None:
        """Items keep source order."""
        bucket, keys = _parse(
            '<string-array name="days"><item>c</item><item>a</item><item>b</item></string-array>'
        )
        assert bucket.arrays == {"days": ("c", "a", "b")}
        assert keys.arrays == {"days"}

    def test_empty_array_skipped(self) -> None:
        """Arrays without items are skipped."""
        bucket, keys = _parse('<string-array name="none"></string-array>')
        assert bucket.arrays == {}
        assert keys.arrays == set()

    def test_empty_item_kept_as_empty_text(self) -> None:
        """Items without text are recorded as empty strings."""
        bucket, _ = _parse('<string-array name="a"><item>x</item><item/></string-array>')
        assert bucket.arrays == {"a": ("x", "")}

    def test_non_translatable_skipped(self) -> None:
        """Non-translatable arrays are skipped."""
        bucket, _ = _parse(
            '<string-array name="a" translatable="false"><item>x</item></string-array>'
        )
        assert bucket.arrays == {}


class TestPlurals:
    """Test <plurals> extraction."""

    def test_quantities_in_document_order(self) -> None:
        """Quantity items keep source order."""
        bucket, keys = _parse(
            '<plurals name="songs">'
            '<item quantity="other">%d songs</item>'
            '<item quantity="one">%d song</item>'
            "</plurals>"
        )
        assert bucket.plurals == {
            "songs": (PluralItem("other", "%d songs"), PluralItem("one", "%d song")),
        }
        assert keys.plurals == {"songs"}

    def test_empty_plurals_skipped(self) -> None:
        """Plurals without items are skipped."""
        bucket, _ = _parse('<plurals name="p"></plurals>')
        assert bucket.plurals == {}


class TestDocument:
    """Test document-level behavior."""

    def test_counts(self) -> None:
        """parse_document reports counts per kind."""
        document = etree.fromstring(
            b'<resources><string name="a">A</string><string name="b">B</string>'
            b'<string-array name="c"><item>x</item></string-array></resources>'
        )
        counts = parse_document(document, ValueBucket(), GlobalKeySets())
        assert (counts.strings, counts.arrays, counts.plurals) == (2, 1, 0)
        assert counts.total == 3

    def test_non_resources_root(self) -> None:
        """Documents with another root element contribute nothing."""
        document = etree.fromstring(b'<layout><string name="a">A</string></layout>')
        counts = parse_document(document, ValueBucket(), GlobalKeySets())
        assert counts.total == 0

    def test_comments_ignored(self) -> None:
        """Comments between entries are ignored."""
        bucket, _ = _parse('<!-- note --><string name="a">A</string>')
        assert bucket.strings == {"a": "A"}

    def test_read_document_malformed(self, tmp_path: Path) -> None:
        """Malformed XML raises ResourceParseError with the path."""
        path = tmp_path / "broken.xml"
        path.write_text("<resources><string name='a'>oops</resources>", encoding="utf-8")
        with pytest.raises(ResourceParseError) as exc_info:
            read_document(path)
        assert exc_info.value.path == path
        assert isinstance(exc_info.value.__cause__, etree.XMLSyntaxError)


class TestEntitiesAndDuplicates:
    """Test DTD entities and repeated plural quantities."""

    def test_internal_entity_expanded(self, tmp_path: Path) -> None:
        """Internal DTD entities are expanded into the string text."""
        path = tmp_path / "strings.xml"
        path.write_text(
            '<?xml version="1.0" encoding="utf-8"?>\n'
            '<!DOCTYPE resources [<!ENTITY app "MyApp">]>\n'
            '<resources><string name="welcome">Welcome to &app;!</string></resources>\n',
            encoding="utf-8",
        )
        bucket = ValueBucket()
        parse_document(read_document(path), bucket, GlobalKeySets())
        assert bucket.strings == {"welcome": "Welcome to MyApp!"}

    def test_repeated_quantity_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        """A quantity repeated within one plurals entry logs a warning."""
        with caplog.at_level(logging.WARNING):
            bucket, _ = _parse(
                '<plurals name="p">'
                '<item quantity="one">first</item>'
                '<item quantity="one">second</item>'
                "</plurals>"
            )
        assert len(bucket.plurals["p"]) == 2
        assert "Duplicate quantity 'one' in plurals 'p'" in caplog.text
