"""Resource directory loading.

Walks an Android `res` directory, maps each `values*` subdirectory to a
locale, parses its XML files and assembles the LocaleTable.

Components:
    ResourceLoadResult - Immutable record of one parsed XML file
    LoadSummary - Immutable aggregate of all load results
    load_locale_table - Build a LocaleTable from a resource directory

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from resbridge.constants import SECONDARY_LOCALE_ALIASES
from resbridge.locale_utils import directory_tag, locale_from_directory
from resbridge.localization.parser import ParseCounts, parse_document, read_document
from resbridge.localization.table import LocaleTable, ValueBucket
from resbridge.localization.types import LocaleId

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
    # Loading
    "iter_values_directories",
    "load_locale_table",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of parsing a single XML resource file.

    Attributes:
        locale: Locale the file was loaded into
        source_path: Parsed file
        counts: Number of entries extracted per kind
    """

    locale: LocaleId
    source_path: Path
    counts: ParseCounts

    @property
    def is_empty(self) -> bool:
        """Check if the file contributed no translatable entries."""
        return self.counts.total == 0


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of resource load results.

    Attributes:
        results: All individual load results (immutable tuple)
        skipped_directories: Values directories ignored during loading
    """

    results: tuple[ResourceLoadResult, ...]
    skipped_directories: tuple[str, ...] = ()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(files={self.files}, "
            f"entries={self.entries}, "
            f"empty={len(self.get_empty())}, "
            f"skipped_dirs={len(self.skipped_directories)})"
        )

    @property
    def files(self) -> int:
        """Number of XML files parsed."""
        return len(self.results)

    @property
    def entries(self) -> int:
        """Total number of entries extracted."""
        return sum(r.counts.total for r in self.results)

    def get_by_locale(self, locale: LocaleId) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)

    def get_empty(self) -> tuple[ResourceLoadResult, ...]:
        """Get results for files without translatable entries."""
        return tuple(r for r in self.results if r.is_empty)


def _directory_sort_key(path: Path) -> tuple[bool, str]:
    # Secondary aliases go last so a primary directory for the same locale wins
    return (directory_tag(path.name) in SECONDARY_LOCALE_ALIASES, path.name)


def iter_values_directories(source_dir: Path) -> list[Path]:
    """List `values*` subdirectories in processing order.

    Directories are sorted by name, with secondary aliases (values-zh-rHK)
    moved after all others.

    Args:
        source_dir: Android resource root (the directory holding `values*`)

    Returns:
        Values directories in the order they must be processed
    """
    candidates: Iterable[Path] = (
        entry
        for entry in source_dir.iterdir()
        if entry.is_dir() and locale_from_directory(entry.name) is not None
    )
    return sorted(candidates, key=_directory_sort_key)


def load_locale_table(source_dir: Path) -> tuple[LocaleTable, LoadSummary]:
    """Parse all values directories below `source_dir` into a LocaleTable.

    Args:
        source_dir: Android resource root

    Returns:
        Tuple of (populated table, load summary)

    Raises:
        ResourceParseError: If any XML file is malformed
        OSError: If a directory or file cannot be read
    """
    table = LocaleTable()
    results: list[ResourceLoadResult] = []
    skipped: list[str] = []

    for values_dir in iter_values_directories(source_dir):
        locale = locale_from_directory(values_dir.name)
        # iter_values_directories only yields directories with a locale
        assert locale is not None

        if directory_tag(values_dir.name) in SECONDARY_LOCALE_ALIASES and locale in table:
            logger.warning(
                "Skipping %s: locale '%s' is already registered", values_dir.name, locale
            )
            skipped.append(values_dir.name)
            continue

        logger.info("Loading %s as locale '%s'", values_dir.name, locale)
        bucket = ValueBucket()
        for xml_path in sorted(values_dir.glob("*.xml")):
            if not xml_path.is_file():
                continue
            logger.debug("xml: %s", xml_path)
            counts = parse_document(read_document(xml_path), bucket, table.keys)
            results.append(ResourceLoadResult(locale=locale, source_path=xml_path, counts=counts))

        table.register(locale, bucket)

    return table, LoadSummary(results=tuple(results), skipped_directories=tuple(skipped))
