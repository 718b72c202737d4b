"""In-memory locale table built from parsed resources.

Components:
    PluralItem - One quantity/text pair of a plurals entry
    ValueBucket - A locale's strings, arrays and plurals
    GlobalKeySets - Union of keys seen across every locale, per kind
    LocaleTable - LocaleId -> ValueBucket, plus the global key sets

The table is populated once by the loading phase and only read afterwards.
Array and plural item order is the source document order and is never sorted.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from resbridge.enums import ResourceKind
from resbridge.localization.types import LocaleId, QuantityTag, ResourceKey, Text

__all__ = [
    "GlobalKeySets",
    "LocaleTable",
    "PluralItem",
    "ValueBucket",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PluralItem:
    """One `<item quantity="...">` of a plurals entry.

    Attributes:
        quantity: Plural category (e.g., 'one', 'other')
        text: Raw item text
    """

    quantity: QuantityTag
    text: Text


@dataclass(slots=True)
class ValueBucket:
    """Translatable values of one locale, split by resource kind.

    Attributes:
        strings: key -> text
        arrays: key -> items in document order
        plurals: key -> quantity items in document order
    """

    strings: dict[ResourceKey, Text] = field(default_factory=dict)
    arrays: dict[ResourceKey, tuple[Text, ...]] = field(default_factory=dict)
    plurals: dict[ResourceKey, tuple[PluralItem, ...]] = field(default_factory=dict)

    def of_kind(self, kind: ResourceKind) -> Mapping[ResourceKey, object]:
        """Return the mapping holding values of the given kind."""
        match kind:
            case ResourceKind.STRINGS:
                return self.strings
            case ResourceKind.ARRAYS:
                return self.arrays
            case ResourceKind.PLURALS:
                return self.plurals

    @property
    def is_empty(self) -> bool:
        """Check if no kind holds any value."""
        return not (self.strings or self.arrays or self.plurals)

    def merge(self, other: ValueBucket) -> None:
        """Merge another bucket into this one; values from `other` win."""
        self.strings.update(other.strings)
        self.arrays.update(other.arrays)
        self.plurals.update(other.plurals)


@dataclass(slots=True)
class GlobalKeySets:
    """Every key seen in any locale, per resource kind.

    Output iterates these sets rather than a locale's own keys, so a key
    defined only in Base is still emitted (via fallback) for every locale.
    """

    strings: set[ResourceKey] = field(default_factory=set)
    arrays: set[ResourceKey] = field(default_factory=set)
    plurals: set[ResourceKey] = field(default_factory=set)

    def of_kind(self, kind: ResourceKind) -> set[ResourceKey]:
        """Return the key set for the given kind."""
        match kind:
            case ResourceKind.STRINGS:
                return self.strings
            case ResourceKind.ARRAYS:
                return self.arrays
            case ResourceKind.PLURALS:
                return self.plurals

    def sorted_keys(self, kind: ResourceKind) -> list[ResourceKey]:
        """Return the keys of a kind in ascending order."""
        return sorted(self.of_kind(kind))


class LocaleTable:
    """Map from locale identifier to its value bucket.

    A locale is registered only with a non-empty bucket. Registering a locale
    that already exists merges the new bucket into the existing one.

    Example:
        >>> table = LocaleTable()
        >>> bucket = ValueBucket(strings={"hello": "Hello"})
        >>> table.keys.strings.add("hello")
        >>> table.register("Base", bucket)
        True
        >>> table.locales
        ('Base',)
    """

    __slots__ = ("_buckets", "_keys")

    def __init__(self) -> None:
        self._buckets: dict[LocaleId, ValueBucket] = {}
        self._keys = GlobalKeySets()

    def __contains__(self, locale: object) -> bool:
        return locale in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def __iter__(self) -> Iterator[LocaleId]:
        return iter(self._buckets)

    def __repr__(self) -> str:
        return f"LocaleTable(locales={list(self._buckets)!r})"

    @property
    def keys(self) -> GlobalKeySets:
        """Global key sets shared by all locales."""
        return self._keys

    @property
    def locales(self) -> tuple[LocaleId, ...]:
        """Registered locales in registration order."""
        return tuple(self._buckets)

    def get(self, locale: LocaleId) -> ValueBucket | None:
        """Return the bucket of a locale, or None if not registered."""
        return self._buckets.get(locale)

    def register(self, locale: LocaleId, bucket: ValueBucket) -> bool:
        """Register (or extend) a locale with the given bucket.

        Args:
            locale: Locale identifier
            bucket: Parsed values for the locale

        Returns:
            True if the bucket was stored, False if it was empty and ignored.
        """
        if bucket.is_empty:
            logger.debug("Ignoring empty bucket for locale: %s", locale)
            return False

        existing = self._buckets.get(locale)
        if existing is None:
            self._buckets[locale] = bucket
            logger.info("Registered locale: %s", locale)
        else:
            existing.merge(bucket)
            logger.info("Merged additional resources into locale: %s", locale)
        return True
