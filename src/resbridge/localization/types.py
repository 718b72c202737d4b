"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user code
when annotating calls into the locale table, resolver and emitters.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LocaleId",
    "QuantityTag",
    "ResourceKey",
    "Text",
]

type LocaleId = str
"""Locale identifier: 'Base' or a hyphen-separated tag (e.g., 'zh-Hant', 'pt-BR')."""

type ResourceKey = str
"""Resource name taken from the ``name`` attribute (e.g., 'app_name')."""

type Text = str
"""Raw or normalized resource text."""

type QuantityTag = str
"""Plural category label (e.g., 'one', 'other')."""
