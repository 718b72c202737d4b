"""Error types for resbridge.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    ConfigurationError,
    OutputWriteError,
    ResBridgeError,
    ResourceParseError,
)

__all__ = [
    "ConfigurationError",
    "OutputWriteError",
    "ResBridgeError",
    "ResourceParseError",
]
