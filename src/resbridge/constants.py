"""Shared constants for resbridge.

Constants are grouped by domain:
- Locales: Base locale, report pinning, directory remaps
- Plurals: Canonical quantity ordering
- Output: File names and encoding markers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locales
    "BASE_LOCALE",
    "PINNED_REPORT_LOCALES",
    "LOCALE_REMAPS",
    "SECONDARY_LOCALE_ALIASES",
    "VALUES_DIR_PREFIX",
    # Plurals
    "QUANTITY_ORDER",
    # Output
    "UTF8_BOM",
    "LPROJ_SUFFIX",
    "STRINGS_FILENAME",
    "ARRAYS_FILENAME",
    "PLURALS_FILENAME",
    "PLURAL_FORMAT_KEY",
    "PLURAL_VARIABLE",
]

# ============================================================================
# LOCALES
# ============================================================================

# Root of every fallback chain. Also the locale of the unqualified `values` directory.
BASE_LOCALE: str = "Base"

# Report columns pinned ahead of the sorted remainder, in this order.
PINNED_REPORT_LOCALES: tuple[str, ...] = (BASE_LOCALE, "en")

# Applied after region markers are collapsed (values-zh-rTW -> zh-TW -> zh-Hant).
LOCALE_REMAPS: dict[str, str] = {
    "zh-TW": "zh-Hant",
    "zh-HK": "zh-Hant",
    "zh-CN": "zh-Hans",
}

# Tags that only fill a remapped locale when nothing else has registered it.
SECONDARY_LOCALE_ALIASES: frozenset[str] = frozenset({"zh-HK"})

VALUES_DIR_PREFIX: str = "values"

# ============================================================================
# PLURALS
# ============================================================================

# CLDR plural categories in canonical order. Unknown tags sort after these.
QUANTITY_ORDER: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# ============================================================================
# OUTPUT
# ============================================================================

UTF8_BOM: bytes = b"\xef\xbb\xbf"

LPROJ_SUFFIX: str = ".lproj"
STRINGS_FILENAME: str = "Localizable.strings"
ARRAYS_FILENAME: str = "LocalizableArray.strings"
PLURALS_FILENAME: str = "Localizable.stringsdict"

# Stringsdict scaffold: one integer variable named PLURAL_VARIABLE per entry.
PLURAL_VARIABLE: str = "x"
PLURAL_FORMAT_KEY: str = f"%#@{PLURAL_VARIABLE}@"
