"""Conversion orchestration.

Loads the locale table once, then emits Apple resources and/or the CSV
report from it. The table is read-only during emission.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from resbridge.emit import CsvEmitter, ResourceEmitter
from resbridge.localization import LoadSummary, LocaleTable, load_locale_table
from resbridge.runtime import LocaleResolver, ValueNormalizer

if TYPE_CHECKING:
    from resbridge.config import ConversionConfig

__all__ = ["ConversionResult", "convert"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a conversion run.

    Attributes:
        table: Locale table built from the source directory
        summary: Load summary of the parsed XML files
        resource_files: Apple resource files written
        report_path: CSV report written, if requested
    """

    table: LocaleTable
    summary: LoadSummary
    resource_files: tuple[Path, ...] = ()
    report_path: Path | None = None


def convert(config: ConversionConfig) -> ConversionResult:
    """Run one conversion.

    Args:
        config: Validated conversion configuration

    Returns:
        Conversion result

    Raises:
        ResourceParseError: If an XML resource is malformed
        OutputWriteError: If an output file cannot be written
    """
    table, summary = load_locale_table(config.source_dir)
    logger.info(
        "Loaded %d locale(s) from %s: %r", len(table), config.source_dir, summary
    )

    resolver = LocaleResolver(table)
    normalizer = ValueNormalizer(resolver)

    resource_files: list[Path] = []
    if config.dest_dir is not None:
        resource_files = ResourceEmitter(resolver, normalizer).emit_all(config.dest_dir)

    report_path: Path | None = None
    if config.report_path is not None:
        report_path = CsvEmitter(resolver, normalizer).emit(config.report_path)

    return ConversionResult(
        table=table,
        summary=summary,
        resource_files=tuple(resource_files),
        report_path=report_path,
    )
