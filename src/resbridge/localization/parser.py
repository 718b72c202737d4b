"""Android resource XML parsing.

Extracts translatable <string>, <string-array> and <plurals> entries from a
parsed `<resources>` document into a locale's ValueBucket, and records every
extracted key in the table-wide GlobalKeySets.

Python 3.13+. Depends on lxml for XML parsing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from lxml import etree

from resbridge.diagnostics import ResourceParseError
from resbridge.localization.table import GlobalKeySets, PluralItem, ValueBucket
from resbridge.localization.types import Text

__all__ = [
    "ParseCounts",
    "parse_document",
    "read_document",
]

logger = logging.getLogger(__name__)

_ROOT_TAG = "resources"
_STRING_TAG = "string"
_ARRAY_TAG = "string-array"
_PLURALS_TAG = "plurals"
_ITEM_TAG = "item"


@dataclass(frozen=True, slots=True)
class ParseCounts:
    """Number of entries extracted from one document, per kind."""

    strings: int = 0
    arrays: int = 0
    plurals: int = 0

    @property
    def total(self) -> int:
        """Total entries extracted."""
        return self.strings + self.arrays + self.plurals


def read_document(path: Path) -> etree._ElementTree:
    """Parse an XML resource file.

    Args:
        path: XML file to parse

    Returns:
        Parsed document

    Raises:
        ResourceParseError: If the file is not well-formed XML
    """
    parser = etree.XMLParser(remove_comments=True)
    try:
        return etree.parse(str(path), parser)
    except etree.XMLSyntaxError as e:
        raise ResourceParseError(str(e), path=path) from e


def _is_translatable(element: etree._Element) -> bool:
    return element.get("translatable") != "false"


def _child_elements(element: etree._Element) -> list[etree._Element]:
    # Comments and processing instructions have non-string tags
    return [child for child in element if isinstance(child.tag, str)]


def _innermost_text(element: etree._Element) -> Text | None:
    """Return the text of the innermost element of a markup-wrapped string.

    `<string name="x"><b><i>Bold</i></b></string>` yields "Bold": descend
    into the last child element until an element without children is reached.
    """
    children = _child_elements(element)
    while children:
        element = children[-1]
        children = _child_elements(element)
    return element.text


def _items(element: etree._Element) -> list[etree._Element]:
    return [child for child in _child_elements(element) if child.tag == _ITEM_TAG]


def _store[V](mapping: dict[str, V], key: str, value: V, kind: str) -> None:
    if key in mapping:
        logger.warning("Duplicate %s '%s': later definition wins", kind, key)
    mapping[key] = value


def _warn_repeated_quantities(key: str, quantities: tuple[PluralItem, ...]) -> None:
    seen: set[str] = set()
    for item in quantities:
        if item.quantity in seen:
            logger.warning(
                "Duplicate quantity '%s' in plurals '%s': later item wins", item.quantity, key
            )
        seen.add(item.quantity)


def parse_document(
    document: etree._ElementTree | etree._Element,
    bucket: ValueBucket,
    keys: GlobalKeySets,
) -> ParseCounts:
    """Extract translatable entries from a `<resources>` document.

    Entries marked translatable="false", entries without a name and entries
    without any text are skipped. Array and plural items are kept in
    document order; an item without text is recorded as an empty string.

    Args:
        document: Parsed XML document (or its root element)
        bucket: Bucket of the locale the document belongs to
        keys: Global key sets, extended with every extracted key

    Returns:
        Counts of extracted entries per kind
    """
    root = document.getroot() if isinstance(document, etree._ElementTree) else document
    if root.tag != _ROOT_TAG:
        logger.warning("Skipping document with root <%s>, expected <%s>", root.tag, _ROOT_TAG)
        return ParseCounts()

    strings = arrays = plurals = 0

    for element in _child_elements(root):
        key = element.get("name")
        if not key or not _is_translatable(element):
            continue

        match element.tag:
            case "string":
                logger.debug("string: %s", key)
                text = _innermost_text(element)
                if text is None:
                    continue
                _store(bucket.strings, key, text, _STRING_TAG)
                keys.strings.add(key)
                strings += 1

            case "string-array":
                logger.debug("string-array: %s", key)
                items = tuple(item.text or "" for item in _items(element))
                if not items:
                    continue
                _store(bucket.arrays, key, items, _ARRAY_TAG)
                keys.arrays.add(key)
                arrays += 1

            case "plurals":
                logger.debug("plurals: %s", key)
                quantities = tuple(
                    PluralItem(quantity=item.get("quantity", ""), text=item.text or "")
                    for item in _items(element)
                )
                if not quantities:
                    continue
                _warn_repeated_quantities(key, quantities)
                _store(bucket.plurals, key, quantities, _PLURALS_TAG)
                keys.plurals.add(key)
                plurals += 1

    return ParseCounts(strings=strings, arrays=arrays, plurals=plurals)
