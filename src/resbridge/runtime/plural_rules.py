"""CLDR plural categories using Babel.

Provides the plural categories a locale distinguishes, and the canonical
ordering of quantity tags used by reports.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from babel.core import UnknownLocaleError

from resbridge.constants import BASE_LOCALE, QUANTITY_ORDER
from resbridge.locale_utils import get_babel_locale

__all__ = [
    "missing_categories",
    "order_quantities",
    "plural_categories",
]

logger = logging.getLogger(__name__)


def plural_categories(locale: str) -> frozenset[str] | None:
    """Return the CLDR plural categories used by a locale.

    Args:
        locale: Locale identifier (e.g., "ru", "zh-Hant")

    Returns:
        Categories including the implicit "other", or None for Base and for
        locales Babel does not know.

    Examples:
        >>> sorted(plural_categories("en"))
        ['one', 'other']
        >>> sorted(plural_categories("ru"))
        ['few', 'many', 'one', 'other']
        >>> plural_categories("Base") is None
        True
    """
    if locale == BASE_LOCALE:
        return None
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        logger.debug("No CLDR plural data for locale: %s", locale)
        return None

    # PluralRule.tags omits the implicit default category
    return frozenset(locale_obj.plural_form.tags) | {"other"}


def missing_categories(locale: str, quantities: Iterable[str]) -> tuple[str, ...]:
    """Return CLDR categories of `locale` not covered by `quantities`.

    Example:
        >>> missing_categories("ru", ["one", "other"])
        ('few', 'many')
    """
    required = plural_categories(locale)
    if required is None:
        return ()
    return tuple(order_quantities(required.difference(quantities)))


def order_quantities(quantities: Iterable[str]) -> list[str]:
    """Order quantity tags canonically.

    Known tags follow zero, one, two, few, many, other; unknown tags are
    appended in alphabetical order.

    Example:
        >>> order_quantities(["other", "custom", "one"])
        ['one', 'other', 'custom']
    """
    present = set(quantities)
    known = [tag for tag in QUANTITY_ORDER if tag in present]
    return known + sorted(present.difference(QUANTITY_ORDER))
