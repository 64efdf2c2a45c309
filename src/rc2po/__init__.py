"""rc2po - Windows resource script to gettext PO converter.

Turns per-locale `.rc` language files (menus, `#define` string constants and
string tables) into `.po` catalogs keyed by the reference locale's text, for
applications that moved from a Win32 UI to Qt.

Public API:
    convert_directory - Convert a folder of xx-YY.rc files to xx-YY.po
    RcToPoConverter - Same, with access to the individual steps
    parse_rc - Parse resource script source to a LocaleFile
    classify_line - Extract entries from a single line
    align - Pair a translated locale with the reference locale
    serialize_po - Deduplicate and serialize aligned pairs

Exceptions:
    Rc2PoError - Base exception class
    InputDirectoryError - Missing input/output directory
    ReferenceLocaleNotFoundError - Reference locale script missing

Submodules:
    rc2po.syntax - Line classifier, filter splitter, text converter, parser
    rc2po.conversion - Aligner and catalog writer
    rc2po.localization - Locale discovery, loading and orchestration
    rc2po.diagnostics - Warning records and exceptions
    rc2po.cli - Command-line entry point
"""

from .conversion import align
from .conversion import serialize as serialize_po
from .diagnostics import (
    ConversionWarning,
    InputDirectoryError,
    Rc2PoError,
    ReferenceLocaleNotFoundError,
)
from .localization import ConversionSummary, RcToPoConverter, convert_directory
from .syntax import LocaleFile, ResourceEntry, TranslationPair, classify_line, parse_rc

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("rc2po")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConversionSummary",
    "ConversionWarning",
    "InputDirectoryError",
    "LocaleFile",
    "Rc2PoError",
    "RcToPoConverter",
    "ReferenceLocaleNotFoundError",
    "ResourceEntry",
    "TranslationPair",
    "__version__",
    "align",
    "classify_line",
    "convert_directory",
    "parse_rc",
    "serialize_po",
]
