"""Directory-level conversion of resource scripts to PO catalogs.

Every locale script in the input directory is parsed up front. The reference
locale must be among them; otherwise the run aborts before any output file
is touched. Each locale (the reference included) is then aligned against the
reference and written to `<code>.po` in the output directory, one locale at
a time.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rc2po.constants import DEFAULT_INPUT_ENCODING, OUTPUT_ENCODING, REFERENCE_LOCALE
from rc2po.conversion import AlignmentResult, WriteResult, align, write_catalog
from rc2po.diagnostics import ConversionWarning, ReferenceLocaleNotFoundError
from rc2po.locale_utils import describe_locale, locale_key
from rc2po.localization.loading import (
    discover_locale_files,
    load_locale,
    output_path_for,
    require_directory,
)
from rc2po.localization.types import LocaleCode
from rc2po.syntax import LocaleFile

__all__ = [
    "ConversionSummary",
    "LocaleOutput",
    "RcToPoConverter",
    "convert_directory",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleOutput:
    """Result of converting one locale.

    Attributes:
        locale: Locale code
        path: Written PO file
        aligned: Number of positional pairs produced by alignment
        written: Number of msgid/msgstr blocks written
        skipped: Number of duplicate pairs dropped
        warnings: Alignment and duplicate warnings, in the order raised
    """

    locale: LocaleCode
    path: Path
    aligned: int
    written: int
    skipped: int
    warnings: tuple[ConversionWarning, ...] = ()


@dataclass(frozen=True, slots=True)
class ConversionSummary:
    """Immutable aggregate of one conversion run.

    Attributes:
        reference_locale: Code of the locale used as msgid source
        reference_entries: Entry count of the reference locale
        outputs: One LocaleOutput per converted locale, in processing order
    """

    reference_locale: LocaleCode
    reference_entries: int
    outputs: tuple[LocaleOutput, ...]

    def __repr__(self) -> str:
        return (
            f"ConversionSummary(reference={self.reference_locale!r}, "
            f"locales={len(self.outputs)}, "
            f"written={self.total_written}, "
            f"warnings={len(self.warnings)})"
        )

    @property
    def total_written(self) -> int:
        """Total number of blocks written across all catalogs."""
        return sum(output.written for output in self.outputs)

    @property
    def warnings(self) -> tuple[ConversionWarning, ...]:
        """All warnings across all locales."""
        return tuple(warning for output in self.outputs for warning in output.warnings)

    @property
    def has_warnings(self) -> bool:
        return any(output.warnings for output in self.outputs)

    def get_by_locale(self, locale: LocaleCode) -> LocaleOutput | None:
        """Get the output for a locale code (case-insensitive)."""
        key = locale_key(locale)
        for output in self.outputs:
            if locale_key(output.locale) == key:
                return output
        return None


class RcToPoConverter:
    """Convert a directory of locale resource scripts to PO catalogs.

    Example:
        >>> converter = RcToPoConverter()
        >>> summary = converter.convert("src/win/languages", "src/qt/languages")
        >>> summary.get_by_locale("de-DE").written
        512

    Attributes:
        reference_locale: Locale whose text becomes the msgids
        encoding: Encoding used to read resource scripts
    """

    __slots__ = ("encoding", "reference_locale")

    def __init__(
        self,
        reference_locale: LocaleCode = REFERENCE_LOCALE,
        *,
        encoding: str = DEFAULT_INPUT_ENCODING,
    ) -> None:
        self.reference_locale = reference_locale
        self.encoding = encoding

    def load(self, input_dir: Path | str) -> tuple[LocaleFile, ...]:
        """Parse every locale script in input_dir.

        Raises:
            InputDirectoryError: If input_dir does not exist
        """
        locales = tuple(
            load_locale(source, self.encoding) for source in discover_locale_files(input_dir)
        )
        for locale in locales:
            logger.debug(
                "Loaded %s (%s): %d entries", locale.code, describe_locale(locale.code), len(locale)
            )
        return locales

    def find_reference(self, locales: tuple[LocaleFile, ...], input_dir: Path | str) -> LocaleFile:
        """Pick the reference locale out of the loaded locales.

        Raises:
            ReferenceLocaleNotFoundError: If no locale matches reference_locale
        """
        key = locale_key(self.reference_locale)
        for locale in locales:
            if locale_key(locale.code) == key:
                return locale
        raise ReferenceLocaleNotFoundError(self.reference_locale, input_dir)

    def write_locale(
        self, reference: LocaleFile, target: LocaleFile, output_dir: Path | str
    ) -> LocaleOutput:
        """Align one locale against the reference and write its catalog."""
        alignment: AlignmentResult = align(reference, target)
        path = output_path_for(output_dir, target.code)

        logger.info("Writing %s", path)

        with path.open("w", encoding=OUTPUT_ENCODING, newline="\n") as sink:
            result: WriteResult = write_catalog(alignment.pairs, sink, target.code)

        return LocaleOutput(
            locale=target.code,
            path=path,
            aligned=len(alignment),
            written=result.written,
            skipped=result.skipped,
            warnings=alignment.warnings + result.warnings,
        )

    def convert(self, input_dir: Path | str, output_dir: Path | str) -> ConversionSummary:
        """Convert all locale scripts in input_dir into output_dir.

        Raises:
            InputDirectoryError: If either directory does not exist
            ReferenceLocaleNotFoundError: If the reference script is missing
        """
        output_root = require_directory(output_dir)
        locales = self.load(input_dir)
        reference = self.find_reference(locales, input_dir)

        outputs = tuple(self.write_locale(reference, locale, output_root) for locale in locales)
        return ConversionSummary(
            reference_locale=reference.code,
            reference_entries=len(reference),
            outputs=outputs,
        )


def convert_directory(
    input_dir: Path | str,
    output_dir: Path | str,
    *,
    reference_locale: LocaleCode = REFERENCE_LOCALE,
    encoding: str = DEFAULT_INPUT_ENCODING,
) -> ConversionSummary:
    """Convert a directory of locale resource scripts to PO catalogs.

    Convenience function for RcToPoConverter.convert().

    Args:
        input_dir: Directory containing `xx-YY.rc` scripts
        output_dir: Existing directory receiving `xx-YY.po` catalogs
        reference_locale: Locale whose text becomes the msgids
        encoding: Encoding used to read resource scripts

    Returns:
        ConversionSummary describing every catalog written

    Raises:
        InputDirectoryError: If either directory does not exist
        ReferenceLocaleNotFoundError: If the reference script is missing
    """
    converter = RcToPoConverter(reference_locale, encoding=encoding)
    return converter.convert(input_dir, output_dir)
