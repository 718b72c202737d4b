"""Enumerations for resbridge type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class ResourceKind(StrEnum):
    """Kind of translatable resource, selecting one bucket of a locale.

    StrEnum provides automatic string conversion: str(ResourceKind.STRINGS) == "strings"
    """

    STRINGS = "strings"
    """Plain strings: <string name="...">"""

    ARRAYS = "arrays"
    """String arrays: <string-array name="..."><item>...</item></string-array>"""

    PLURALS = "plurals"
    """Plurals: <plurals name="..."><item quantity="one">...</item></plurals>"""


__all__ = [
    "ResourceKind",
]
