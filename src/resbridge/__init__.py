"""resbridge - Android string resources to Apple localization resources.

Reads an Android `res` tree (`values`, `values-fr`, `values-zh-rTW`, ...)
and writes per-locale `.lproj` directories with `Localizable.strings`,
`LocalizableArray.strings` and `Localizable.stringsdict`, and/or a single
wide CSV translation report. Missing translations fall back along the
locale chain (`pt-BR` -> `pt` -> `Base`).

Public API:
    ConversionConfig - Paths of one conversion run
    convert - Load resources and write the requested outputs
    LocaleTable - Parsed values per locale
    load_locale_table - Build a LocaleTable from a resource directory
    LocaleResolver - Fallback lookups against a LocaleTable
    ValueNormalizer - Reference resolution and placeholder rewriting
    ResourceEmitter - Apple resource output
    CsvEmitter - CSV report output

Exceptions:
    ResBridgeError - Base exception class
    ConfigurationError - Invalid inputs
    ResourceParseError - Malformed XML resources
    OutputWriteError - Output could not be written
"""

from .config import ConversionConfig
from .converter import ConversionResult, convert
from .diagnostics import (
    ConfigurationError,
    OutputWriteError,
    ResBridgeError,
    ResourceParseError,
)
from .emit import CsvEmitter, ResourceEmitter
from .localization import LocaleTable, load_locale_table
from .runtime import LocaleResolver, ValueNormalizer

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("resbridge")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "ConversionConfig",
    "ConversionResult",
    "CsvEmitter",
    "LocaleResolver",
    "LocaleTable",
    "OutputWriteError",
    "ResBridgeError",
    "ResourceEmitter",
    "ResourceParseError",
    "ValueNormalizer",
    "__version__",
    "convert",
    "load_locale_table",
]
