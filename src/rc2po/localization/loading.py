"""Resource script discovery and loading.

Components:
    LocaleSource - Immutable record of one locale resource script on disk
    discover_locale_files - Find `xx-YY.rc` scripts in a directory
    load_locale - Read and parse one script
    output_path_for - PO file path for a locale

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rc2po.constants import DEFAULT_INPUT_ENCODING, LOCALE_FILE_PATTERN, PO_EXTENSION
from rc2po.diagnostics import InputDirectoryError
from rc2po.locale_utils import locale_key
from rc2po.localization.types import LocaleCode, RcSource
from rc2po.syntax import LocaleFile, parse_rc

__all__ = [
    "LocaleSource",
    "discover_locale_files",
    "is_locale_file_name",
    "load_locale",
    "output_path_for",
    "require_directory",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleSource:
    """Locale resource script found on disk.

    Attributes:
        code: File stem, used as locale code and output name (e.g., 'de-DE')
        path: Path to the script
    """

    code: LocaleCode
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> LocaleSource:
        return cls(code=path.stem, path=path)

    @property
    def key(self) -> str:
        """Case-insensitive lookup key of the locale code."""
        return locale_key(self.code)

    def read(self, encoding: str = DEFAULT_INPUT_ENCODING) -> RcSource:
        """Read the script text.

        Raises:
            OSError: If file cannot be read
            UnicodeDecodeError: If file is not valid in the given encoding
        """
        return self.path.read_text(encoding=encoding)


def require_directory(path: Path | str) -> Path:
    """Return path as a Path if it names an existing directory.

    Raises:
        InputDirectoryError: If path is missing or not a directory
    """
    directory = Path(path)
    if not directory.is_dir():
        raise InputDirectoryError(directory)
    return directory


def is_locale_file_name(name: str) -> bool:
    """Check whether a file name looks like a locale resource script.

    Example:
        >>> is_locale_file_name("de-DE.rc")
        True
        >>> is_locale_file_name("PT-br.RC")
        True
        >>> is_locale_file_name("resource.rc")
        False
    """
    return LOCALE_FILE_PATTERN.fullmatch(name) is not None


def discover_locale_files(directory: Path | str) -> tuple[LocaleSource, ...]:
    """Find locale resource scripts in a directory.

    Results are sorted by file name so runs are deterministic. When two
    names differ only by case (possible on case-sensitive file systems),
    the first one in sorted order is kept.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        Locale sources, one per distinct locale code

    Raises:
        InputDirectoryError: If directory does not exist
    """
    root = require_directory(directory)

    sources: dict[str, LocaleSource] = {}
    for path in sorted(root.iterdir(), key=lambda p: p.name):
        if not path.is_file() or not is_locale_file_name(path.name):
            continue
        source = LocaleSource.from_path(path)
        if source.key in sources:
            logger.warning(
                "Ignoring %s: locale %s already provided by %s",
                path,
                source.code,
                sources[source.key].path,
            )
            continue
        sources[source.key] = source

    logger.debug("Found %d locale files in %s", len(sources), root)
    return tuple(sources.values())


def load_locale(source: LocaleSource, encoding: str = DEFAULT_INPUT_ENCODING) -> LocaleFile:
    """Read and parse one locale resource script.

    Raises:
        OSError: If file cannot be read
        UnicodeDecodeError: If file is not valid in the given encoding
    """
    return parse_rc(source.read(encoding), source.code)


def output_path_for(output_dir: Path | str, code: LocaleCode) -> Path:
    """PO file path for a locale: same base name, `.po` extension.

    Example:
        >>> output_path_for("out", "de-DE").as_posix()
        'out/de-DE.po'
    """
    return Path(output_dir) / f"{code}{PO_EXTENSION}"
