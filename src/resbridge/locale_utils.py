"""Locale utilities for resource directory naming and fallback chains.

Centralizes every transformation applied to locale identifiers:
- Android `values*` directory name -> LocaleId
- LocaleId truncation toward Base (fallback chain)
- Report column ordering
- BCP-47 -> POSIX conversion and cached Babel Locale lookup

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from resbridge.constants import (
    BASE_LOCALE,
    LOCALE_REMAPS,
    PINNED_REPORT_LOCALES,
    VALUES_DIR_PREFIX,
)

if TYPE_CHECKING:
    from babel import Locale

    from resbridge.localization.types import LocaleId

__all__ = [
    "directory_tag",
    "fallback_chain",
    "get_babel_locale",
    "locale_from_directory",
    "normalize_locale",
    "parent_locale",
    "report_order",
]

# Android region qualifier: "-r" followed by an ISO 3166 code or UN M.49 number.
_REGION_MARKER = re.compile(r"-r([A-Z]{2}|[0-9]{3})(?=-|$)")


def locale_from_directory(dir_name: str) -> LocaleId | None:
    """Map an Android resource directory name to a locale identifier.

    Args:
        dir_name: Directory name (e.g., "values", "values-pt-rBR")

    Returns:
        Locale identifier, or None if the directory is not a values directory.

    Example:
        >>> locale_from_directory("values")
        'Base'
        >>> locale_from_directory("values-zh-rTW")
        'zh-Hant'
        >>> locale_from_directory("values-b+sr+Latn")
        'sr-Latn'
        >>> locale_from_directory("drawable") is None
        True
    """
    if dir_name == VALUES_DIR_PREFIX:
        return BASE_LOCALE

    prefix = f"{VALUES_DIR_PREFIX}-"
    if not dir_name.startswith(prefix) or len(dir_name) == len(prefix):
        return None

    tag = dir_name[len(prefix) :]
    if tag.startswith("b+"):
        # BCP-47 form: values-b+sr+Latn
        tag = tag[2:].replace("+", "-")
    else:
        tag = _REGION_MARKER.sub(r"-\1", tag)

    return LOCALE_REMAPS.get(tag, tag)


def directory_tag(dir_name: str) -> str:
    """Return the locale tag of a directory before remapping.

    Used to tell `values-zh-rHK` apart from `values-zh-rTW`, which both map
    to the same locale identifier.

    Example:
        >>> directory_tag("values-zh-rHK")
        'zh-HK'
    """
    tag = dir_name.removeprefix(f"{VALUES_DIR_PREFIX}-")
    if tag.startswith("b+"):
        return tag[2:].replace("+", "-")
    return _REGION_MARKER.sub(r"-\1", tag)


def parent_locale(locale: LocaleId) -> LocaleId | None:
    """Return the next, more general locale in the fallback chain.

    Drops the last hyphen-delimited segment. A locale without a hyphen falls
    back to Base; Base itself has no parent.

    Example:
        >>> parent_locale("zh-Hant-TW")
        'zh-Hant'
        >>> parent_locale("pt")
        'Base'
        >>> parent_locale("Base") is None
        True
    """
    if locale == BASE_LOCALE:
        return None
    head, sep, _ = locale.rpartition("-")
    return head if sep and head else BASE_LOCALE


def fallback_chain(locale: LocaleId) -> tuple[LocaleId, ...]:
    """Return the full fallback chain for a locale, most specific first.

    Example:
        >>> fallback_chain("pt-BR")
        ('pt-BR', 'pt', 'Base')
    """
    chain: list[LocaleId] = []
    current: LocaleId | None = locale
    while current is not None:
        chain.append(current)
        current = parent_locale(current)
    return tuple(chain)


def report_order(locales: Iterable[LocaleId]) -> list[LocaleId]:
    """Order locales for report columns.

    Locales are sorted ascending, except Base and en, which are pinned first
    (in that order) when present.

    Example:
        >>> report_order(["fr", "en", "de", "Base"])
        ['Base', 'en', 'de', 'fr']
    """
    present = set(locales)
    pinned = [locale for locale in PINNED_REPORT_LOCALES if locale in present]
    return pinned + sorted(present.difference(PINNED_REPORT_LOCALES))


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("zh-Hant")
        'zh_Hant'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
