"""Resolution runtime: locale fallback, value normalization, plural rules.

Python 3.13+.
"""

from .normalizer import APPLE_RULES, PLURAL_RULES, RewriteRule, ValueNormalizer
from .plural_rules import missing_categories, order_quantities, plural_categories
from .resolver import LocaleResolver

__all__ = [
    "APPLE_RULES",
    "PLURAL_RULES",
    "LocaleResolver",
    "RewriteRule",
    "ValueNormalizer",
    "missing_categories",
    "order_quantities",
    "plural_categories",
]
