"""resbridge exception hierarchy.

Configuration problems, malformed input and output failures are fatal and
raised as exceptions. Resolution misses are not errors: lookups return None
and emitters omit the entry.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "ConfigurationError",
    "OutputWriteError",
    "ResBridgeError",
    "ResourceParseError",
]


class ResBridgeError(Exception):
    """Base exception for all resbridge errors."""


class ConfigurationError(ResBridgeError):
    """Invalid conversion inputs.

    Raised before any resource is read, e.g. when the source directory
    does not exist or neither an output directory nor a report path is set.
    """


class ResourceParseError(ResBridgeError):
    """XML resource file could not be parsed.

    No partial recovery is attempted; the whole run is aborted.

    Attributes:
        path: File that failed to parse
    """

    def __init__(self, message: str, *, path: Path) -> None:
        """Initialize ResourceParseError.

        Args:
            message: Parser error description
            path: File that failed to parse
        """
        super().__init__(f"{path}: {message}")
        self.path = path


class OutputWriteError(ResBridgeError):
    """Output file could not be written.

    Attributes:
        path: Target that could not be written
    """

    def __init__(self, message: str, *, path: Path) -> None:
        """Initialize OutputWriteError.

        Args:
            message: Underlying OS error description
            path: Target that could not be written
        """
        super().__init__(f"{path}: {message}")
        self.path = path
