"""Sequence builder: a whole resource script to a LocaleFile.

Python 3.13+.
"""

import logging
import re
from collections.abc import Iterable
from typing import Final

from .classifier import classify_line
from .model import LocaleFile, ResourceEntry

__all__ = [
    "parse_lines",
    "parse_rc",
]

logger = logging.getLogger(__name__)

# Only CR, LF and CRLF end a line; form feeds and Unicode separators may
# appear inside string literals.
_LINE_BREAK: Final = re.compile(r"\r\n|\r|\n")


def parse_lines(lines: Iterable[str]) -> tuple[ResourceEntry, ...]:
    """Classify every line and concatenate the entries in source order.

    Args:
        lines: Resource script lines (terminators optional)

    Returns:
        Ordered entries of the whole script
    """
    entries: list[ResourceEntry] = []
    for line in lines:
        entries.extend(classify_line(line.rstrip("\r\n")))
    return tuple(entries)


def parse_rc(source: str, code: str) -> LocaleFile:
    """Parse resource script source text for one locale.

    Args:
        source: Complete file content
        code: Locale code the file belongs to (e.g., 'de-DE')

    Returns:
        LocaleFile holding the locale's ordered entries

    Example:
        >>> locale = parse_rc('POPUP "&File"\\n#define STR_OK "OK"\\n', "en-US")
        >>> [(e.identifier, e.text) for e in locale.entries]
        [(None, '&File'), ('STR_OK', 'OK')]
    """
    locale = LocaleFile(code=code, entries=parse_lines(_LINE_BREAK.split(source)))
    logger.debug("Parsed %d entries for %s", len(locale), code)
    return locale
