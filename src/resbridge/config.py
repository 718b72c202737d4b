"""Conversion configuration.

Provides a single frozen dataclass describing one conversion run: where to
read Android resources from and where to write Apple resources and/or the
CSV report.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from resbridge.diagnostics import ConfigurationError

__all__ = ["ConversionConfig"]


@dataclass(frozen=True, slots=True)
class ConversionConfig:
    """Immutable configuration for a conversion run.

    Paths are resolved to absolute paths at construction. At least one of
    ``dest_dir`` and ``report_path`` must be given.

    Attributes:
        source_dir: Android resource root holding `values*` directories
        dest_dir: Root for `<locale>.lproj` output directories (optional)
        report_path: CSV report file (optional)

    Example:
        >>> config = ConversionConfig(Path("android/res"), dest_dir=Path("ios/Resources"))
        >>> config.report_path is None
        True
    """

    source_dir: Path
    dest_dir: Path | None = None
    report_path: Path | None = None

    def __post_init__(self) -> None:
        """Resolve paths and validate them.

        Raises:
            ConfigurationError: If no output is requested or the source
                directory does not exist
        """
        if self.dest_dir is None and self.report_path is None:
            msg = "either an output directory or a report file must be specified"
            raise ConfigurationError(msg)

        source_dir = Path(self.source_dir).expanduser().resolve()
        if not source_dir.is_dir():
            msg = f"source directory not found: {source_dir}"
            raise ConfigurationError(msg)

        object.__setattr__(self, "source_dir", source_dir)
        if self.dest_dir is not None:
            object.__setattr__(self, "dest_dir", Path(self.dest_dir).expanduser().resolve())
        if self.report_path is not None:
            object.__setattr__(self, "report_path", Path(self.report_path).expanduser().resolve())

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ConversionConfig:
        """Build a configuration from parsed command-line arguments.

        Raises:
            ConfigurationError: If the source directory is missing or invalid
        """
        if args.source is None:
            msg = "source directory not specified"
            raise ConfigurationError(msg)
        return cls(source_dir=args.source, dest_dir=args.out, report_path=args.report)
