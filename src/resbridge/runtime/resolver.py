"""Locale fallback resolution.

Looks a key up along the fallback chain of a locale: the locale itself,
then progressively truncated locales, then Base. The first locale that
defines the key wins. A key defined nowhere in the chain resolves to None.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resbridge.enums import ResourceKind
from resbridge.locale_utils import parent_locale

if TYPE_CHECKING:
    from resbridge.localization.table import LocaleTable, PluralItem
    from resbridge.localization.types import LocaleId, ResourceKey, Text

__all__ = ["LocaleResolver"]


class LocaleResolver:
    """Resolves keys against a LocaleTable using locale fallback.

    The table must not be modified while a resolver is in use.

    Example:
        >>> resolver = LocaleResolver(table)
        >>> resolver.resolve_string("pt-BR", "greeting")
        # Tries pt-BR, then pt, then Base
    """

    __slots__ = ("_table",)

    def __init__(self, table: LocaleTable) -> None:
        self._table = table

    @property
    def table(self) -> LocaleTable:
        """Table resolved against."""
        return self._table

    def find(
        self, locale: LocaleId, kind: ResourceKind, key: ResourceKey
    ) -> tuple[LocaleId, object] | None:
        """Find the locale that supplies a key, walking the fallback chain.

        Args:
            locale: Locale to start from
            kind: Bucket to search
            key: Resource key

        Returns:
            Tuple of (supplying locale, value), or None on a resolution miss
        """
        current: LocaleId | None = locale
        while current is not None:
            bucket = self._table.get(current)
            if bucket is not None:
                values = bucket.of_kind(kind)
                if key in values:
                    return current, values[key]
            current = parent_locale(current)
        return None

    def resolve(self, locale: LocaleId, kind: ResourceKind, key: ResourceKey) -> object | None:
        """Return the value of a key for a locale, or None if absent everywhere."""
        found = self.find(locale, kind, key)
        return None if found is None else found[1]

    def resolve_string(self, locale: LocaleId, key: ResourceKey) -> Text | None:
        """Resolve a string key."""
        value = self.resolve(locale, ResourceKind.STRINGS, key)
        return value if isinstance(value, str) else None

    def resolve_array(self, locale: LocaleId, key: ResourceKey) -> tuple[Text, ...] | None:
        """Resolve a string-array key; items keep their source order."""
        value = self.resolve(locale, ResourceKind.ARRAYS, key)
        return value if isinstance(value, tuple) else None

    def resolve_plural(self, locale: LocaleId, key: ResourceKey) -> tuple[PluralItem, ...] | None:
        """Resolve a plurals key; items keep their source order."""
        value = self.resolve(locale, ResourceKind.PLURALS, key)
        return value if isinstance(value, tuple) else None
