"""Directory-level localization conversion package.

Submodules:
    types        - PEP 695 type aliases (LocaleCode, RcSource)
    loading      - Locale script discovery and loading
    orchestrator - RcToPoConverter, convert_directory and run summaries

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from rc2po.localization.loading import (
    LocaleSource,
    discover_locale_files,
    is_locale_file_name,
    load_locale,
    output_path_for,
    require_directory,
)
from rc2po.localization.orchestrator import (
    ConversionSummary,
    LocaleOutput,
    RcToPoConverter,
    convert_directory,
)
from rc2po.localization.types import LocaleCode, RcSource

__all__ = [
    # Orchestration
    "RcToPoConverter",
    "convert_directory",
    "ConversionSummary",
    "LocaleOutput",
    # Loading
    "LocaleSource",
    "discover_locale_files",
    "is_locale_file_name",
    "load_locale",
    "output_path_for",
    "require_directory",
    # Type aliases
    "LocaleCode",
    "RcSource",
]
