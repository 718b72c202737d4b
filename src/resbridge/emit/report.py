"""CSV translation report emission.

One column per locale (Base and en first, the rest sorted), one row per
string key, one row per array index and one row per plural quantity.
Values are resolved through each column's fallback chain; a cell with no
value anywhere in the chain is left empty and unquoted.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from resbridge.emit.files import encode_with_bom, write_output
from resbridge.enums import ResourceKind
from resbridge.locale_utils import report_order
from resbridge.runtime.plural_rules import order_quantities

if TYPE_CHECKING:
    from resbridge.localization.types import LocaleId, Text
    from resbridge.runtime.normalizer import ValueNormalizer
    from resbridge.runtime.resolver import LocaleResolver

__all__ = ["CsvEmitter"]

logger = logging.getLogger(__name__)

_ID_COLUMN = "ID"


class CsvEmitter:
    """Writes a wide CSV report of all locales of a LocaleTable."""

    __slots__ = ("_normalizer", "_resolver")

    def __init__(self, resolver: LocaleResolver, normalizer: ValueNormalizer) -> None:
        self._resolver = resolver
        self._normalizer = normalizer

    @property
    def locales(self) -> list[LocaleId]:
        """Report columns in order."""
        return report_order(self._resolver.table.locales)

    def _cell(self, locale: LocaleId, text: Text | None) -> str:
        if text is None:
            return ""
        return self._normalizer.to_csv_format(locale, text)

    def _string_rows(self, locales: Sequence[LocaleId]) -> Iterator[list[str]]:
        for key in self._resolver.table.keys.sorted_keys(ResourceKind.STRINGS):
            yield [key] + [
                self._cell(locale, self._resolver.resolve_string(locale, key))
                for locale in locales
            ]

    def _array_rows(self, locales: Sequence[LocaleId]) -> Iterator[list[str]]:
        for key in self._resolver.table.keys.sorted_keys(ResourceKind.ARRAYS):
            columns = [self._resolver.resolve_array(locale, key) or () for locale in locales]
            size = max((len(items) for items in columns), default=0)
            for index in range(size):
                yield [f"{key}.{index + 1}"] + [
                    self._cell(locale, items[index] if index < len(items) else None)
                    for locale, items in zip(locales, columns, strict=True)
                ]

    def _plural_rows(self, locales: Sequence[LocaleId]) -> Iterator[list[str]]:
        for key in self._resolver.table.keys.sorted_keys(ResourceKind.PLURALS):
            # Last item wins when a quantity repeats within an entry
            columns: list[dict[str, Text]] = []
            for locale in locales:
                by_quantity: dict[str, Text] = {}
                for item in self._resolver.resolve_plural(locale, key) or ():
                    by_quantity[item.quantity] = item.text
                columns.append(by_quantity)

            quantities = order_quantities(q for column in columns for q in column)
            for quantity in quantities:
                yield [f"{key}.{quantity}"] + [
                    self._cell(locale, column.get(quantity))
                    for locale, column in zip(locales, columns, strict=True)
                ]

    def render(self) -> bytes:
        """Render the complete report, UTF-8 with a leading byte-order mark."""
        locales = self.locales
        rows: list[list[str]] = [[_ID_COLUMN, *locales]]
        rows.extend(self._string_rows(locales))
        rows.extend(self._array_rows(locales))
        rows.extend(self._plural_rows(locales))
        # Cells arrive pre-quoted by quote_csv; ID and header cells stay bare
        return encode_with_bom("".join(",".join(row) + "\n" for row in rows))

    def emit(self, report_path: Path) -> Path:
        """Write the report to `report_path`, replacing any existing file.

        Raises:
            OutputWriteError: If the file cannot be written
        """
        path = write_output(report_path, self.render())
        logger.info("Wrote report %s (%d locales)", path, len(self.locales))
        return path
