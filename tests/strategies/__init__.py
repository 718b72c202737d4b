"""Hypothesis strategies for resbridge property-based testing."""

from .locales import locale_ids, locale_tables, resource_keys

__all__ = ["locale_ids", "locale_tables", "resource_keys"]
