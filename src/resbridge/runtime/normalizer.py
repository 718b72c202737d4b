"""Value normalization for Apple string resources and CSV reports.

Resolves `@string/key` references and rewrites Android printf placeholders
into their Apple equivalents. Rewrites are expressed as ordered rule tables
applied left to right, once per call.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resbridge.localization.types import LocaleId, Text
    from resbridge.runtime.resolver import LocaleResolver

__all__ = [
    "APPLE_RULES",
    "PLURAL_RULES",
    "RewriteRule",
    "ValueNormalizer",
    "apply_rules",
    "quote_csv",
]

logger = logging.getLogger(__name__)

# The whole text must be a reference; "See @string/foo" is literal text.
_REFERENCE = re.compile(r"@string/([A-Za-z0-9_.]+)")


@dataclass(frozen=True, slots=True)
class RewriteRule:
    """One regular-expression substitution.

    Attributes:
        name: Short description used in logs and test ids
        pattern: Compiled pattern to search for
        replacement: re.sub replacement template
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: Text) -> Text:
        """Apply this rule to every match in `text`."""
        return self.pattern.sub(self.replacement, text)


def apply_rules(text: Text, rules: Sequence[RewriteRule]) -> Text:
    """Apply rules in order, each to the output of the previous one."""
    for rule in rules:
        text = rule.apply(text)
    return text


APPLE_RULES: tuple[RewriteRule, ...] = (
    # %s -> %@, %1$s -> %1$@
    RewriteRule("object-placeholder", re.compile(r"(%(?:\d+\$)?)s"), r"\1@"),
    # %1$,d -> %1$d (grouping flag is not supported)
    RewriteRule("grouped-decimal", re.compile(r"(%(?:\d+\$)?),d"), r"\1d"),
    # " -> \" unless already escaped
    RewriteRule("double-quote", re.compile(r'(?<!\\)"'), r'\\"'),
)
"""Rules turning Android text into a `.strings` literal body."""

PLURAL_RULES: tuple[RewriteRule, ...] = (
    # %1$d -> %d: the stringsdict variable supplies the number
    RewriteRule("positional-decimal", re.compile(r"%\d+\$,?d"), "%d"),
)
"""Rules applied after APPLE_RULES to stringsdict plural variants."""


def quote_csv(text: Text) -> Text:
    """Quote a CSV field, doubling embedded double quotes.

    Example:
        >>> quote_csv('He said "hi"')
        '"He said ""hi""\"'
    """
    return '"' + text.replace('"', '""') + '"'


class ValueNormalizer:
    """Normalizes raw resource text for a given locale.

    Reference resolution follows the locale fallback chain of the locale the
    text is emitted for, not the locale the text came from.
    """

    __slots__ = ("_resolver",)

    def __init__(self, resolver: LocaleResolver) -> None:
        self._resolver = resolver

    def resolve_references(self, locale: LocaleId, text: Text) -> Text | None:
        """Replace a text consisting solely of `@string/key` by the key's value.

        Repeats while the result is still a pure reference.

        Args:
            locale: Locale whose fallback chain is used for lookups
            text: Raw text

        Returns:
            Resolved text, or None if a referenced key is missing everywhere
            in the chain or the references form a cycle
        """
        seen: set[str] = set()
        current: Text | None = text
        while current is not None:
            match = _REFERENCE.fullmatch(current)
            if match is None:
                return current

            key = match.group(1)
            if key in seen:
                logger.warning("Cyclic string reference '%s' for locale %s", key, locale)
                return None
            seen.add(key)

            current = self._resolver.resolve_string(locale, key)
            if current is None:
                logger.warning("Unresolved string reference '%s' for locale %s", key, locale)
        return None

    def to_apple_format(self, locale: LocaleId, text: Text) -> Text:
        """Normalize text for a `.strings` value.

        Unresolvable references produce an empty string.
        """
        resolved = self.resolve_references(locale, text)
        return apply_rules(resolved or "", APPLE_RULES)

    def to_plural_format(self, locale: LocaleId, text: Text) -> Text:
        """Normalize text for a stringsdict plural variant."""
        return apply_rules(self.to_apple_format(locale, text), PLURAL_RULES)

    def to_csv_format(self, locale: LocaleId, text: Text) -> Text:
        """Normalize text into a quoted CSV field; placeholders are kept as-is."""
        return quote_csv(self.resolve_references(locale, text) or "")
