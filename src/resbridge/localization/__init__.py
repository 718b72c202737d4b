"""Locale table and resource loading.

Submodules:
    types   - PEP 695 type aliases (LocaleId, ResourceKey, Text, QuantityTag)
    table   - ValueBucket, PluralItem, GlobalKeySets, LocaleTable
    parser  - Android resource XML extraction (lxml)
    loading - load_locale_table, ResourceLoadResult, LoadSummary

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from resbridge.localization.loading import (
    LoadSummary,
    ResourceLoadResult,
    iter_values_directories,
    load_locale_table,
)
from resbridge.localization.parser import ParseCounts, parse_document, read_document
from resbridge.localization.table import GlobalKeySets, LocaleTable, PluralItem, ValueBucket
from resbridge.localization.types import LocaleId, QuantityTag, ResourceKey, Text

__all__ = [
    # Table
    "LocaleTable",
    "ValueBucket",
    "PluralItem",
    "GlobalKeySets",
    # Parsing
    "parse_document",
    "read_document",
    "ParseCounts",
    # Loading
    "load_locale_table",
    "iter_values_directories",
    "LoadSummary",
    "ResourceLoadResult",
    # Type aliases for user code type annotations
    "LocaleId",
    "QuantityTag",
    "ResourceKey",
    "Text",
]
