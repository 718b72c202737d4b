"""Apple localization resource emission.

Renders one locale into up to three files inside `<locale>.lproj`:

    Localizable.strings       "key" = "value";
    LocalizableArray.strings  "key" = ( "item", ... );
    Localizable.stringsdict   property list of plural rules

Keys are taken from the table-wide key sets in ascending order and resolved
through the locale's fallback chain; keys missing everywhere are omitted.

Python 3.13+.
"""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from typing import TYPE_CHECKING

from resbridge.constants import (
    ARRAYS_FILENAME,
    LPROJ_SUFFIX,
    PLURAL_FORMAT_KEY,
    PLURAL_VARIABLE,
    PLURALS_FILENAME,
    STRINGS_FILENAME,
    UTF8_BOM,
)
from resbridge.emit.files import encode_with_bom, write_output
from resbridge.enums import ResourceKind
from resbridge.runtime.plural_rules import missing_categories

if TYPE_CHECKING:
    from resbridge.localization.types import LocaleId
    from resbridge.runtime.normalizer import ValueNormalizer
    from resbridge.runtime.resolver import LocaleResolver

__all__ = ["ResourceEmitter"]

logger = logging.getLogger(__name__)


class ResourceEmitter:
    """Writes `.lproj` resources for the locales of a LocaleTable.

    Example:
        >>> emitter = ResourceEmitter(resolver, normalizer)
        >>> emitter.emit_all(Path("ios/Resources"))
        # Writes Base.lproj/Localizable.strings, fr.lproj/Localizable.strings, ...
    """

    __slots__ = ("_normalizer", "_resolver")

    def __init__(self, resolver: LocaleResolver, normalizer: ValueNormalizer) -> None:
        self._resolver = resolver
        self._normalizer = normalizer

    def _sorted_keys(self, kind: ResourceKind) -> list[str]:
        return self._resolver.table.keys.sorted_keys(kind)

    def render_strings(self, locale: LocaleId) -> bytes | None:
        """Render Localizable.strings, or None if no key resolves."""
        lines: list[str] = []
        for key in self._sorted_keys(ResourceKind.STRINGS):
            value = self._resolver.resolve_string(locale, key)
            if value is None:
                continue
            lines.append(f'"{key}" = "{self._normalizer.to_apple_format(locale, value)}";\n')

        return encode_with_bom("".join(lines)) if lines else None

    def render_arrays(self, locale: LocaleId) -> bytes | None:
        """Render LocalizableArray.strings, or None if no key resolves."""
        blocks: list[str] = []
        for key in self._sorted_keys(ResourceKind.ARRAYS):
            items = self._resolver.resolve_array(locale, key)
            if items is None:
                continue
            body = "".join(
                f'    "{self._normalizer.to_apple_format(locale, item)}",\n' for item in items
            )
            blocks.append(f'"{key}" = (\n{body});\n\n')

        return encode_with_bom("".join(blocks)) if blocks else None

    def render_plurals(self, locale: LocaleId) -> bytes | None:
        """Render Localizable.stringsdict, or None if no key resolves."""
        entries: dict[str, dict[str, object]] = {}
        for key in self._sorted_keys(ResourceKind.PLURALS):
            items = self._resolver.resolve_plural(locale, key)
            if items is None:
                continue

            missing = missing_categories(locale, (item.quantity for item in items))
            if missing:
                logger.warning(
                    "Plural '%s' for locale %s lacks categories: %s",
                    key,
                    locale,
                    ", ".join(missing),
                )

            rule: dict[str, str] = {
                "NSStringFormatSpecTypeKey": "NSStringPluralRuleType",
                "NSStringFormatValueTypeKey": "d",
            }
            for item in items:
                rule[item.quantity] = self._normalizer.to_plural_format(locale, item.text)

            entries[key] = {
                "NSStringLocalizedFormatKey": PLURAL_FORMAT_KEY,
                PLURAL_VARIABLE: rule,
            }

        if not entries:
            return None
        return UTF8_BOM + plistlib.dumps(entries, sort_keys=False)

    def emit_locale(self, dest_dir: Path, locale: LocaleId) -> list[Path]:
        """Write all non-empty resource files of one locale.

        Args:
            dest_dir: Destination root holding the `.lproj` directories
            locale: Locale to render

        Returns:
            Paths written

        Raises:
            OutputWriteError: If a file cannot be written
        """
        locale_dir = dest_dir / f"{locale}{LPROJ_SUFFIX}"
        rendered = (
            (STRINGS_FILENAME, self.render_strings(locale)),
            (ARRAYS_FILENAME, self.render_arrays(locale)),
            (PLURALS_FILENAME, self.render_plurals(locale)),
        )

        written = [
            write_output(locale_dir / filename, content)
            for filename, content in rendered
            if content is not None
        ]
        logger.info("Wrote %d file(s) for locale %s", len(written), locale)
        return written

    def emit_all(self, dest_dir: Path) -> list[Path]:
        """Write resources for every locale of the table.

        Returns:
            All paths written
        """
        written: list[Path] = []
        for locale in self._resolver.table.locales:
            written.extend(self.emit_locale(dest_dir, locale))
        return written
