"""Resource script parsing package.

Provides the line classifier, file dialog filter splitter, text converter
and the sequence builder that turns a whole script into a LocaleFile.

Python 3.13+.
"""

from .classifier import classify_line, match_define, match_line, match_menu, match_numbered
from .filters import NOT_A_FILTER, split_filter
from .model import (
    NO_MATCH,
    DefineEntry,
    LineMatch,
    LocaleFile,
    MenuEntry,
    NoMatch,
    NumberedEntry,
    ResourceEntry,
    TranslationPair,
)
from .parser import parse_lines, parse_rc
from .text import convert_text

__all__ = [
    "NOT_A_FILTER",
    "NO_MATCH",
    "DefineEntry",
    "LineMatch",
    "LocaleFile",
    "MenuEntry",
    "NoMatch",
    "NumberedEntry",
    "ResourceEntry",
    "TranslationPair",
    "classify_line",
    "convert_text",
    "match_define",
    "match_line",
    "match_menu",
    "match_numbered",
    "parse",
    "parse_lines",
    "parse_rc",
    "split_filter",
]


def parse(source: str, code: str = "") -> LocaleFile:
    """Parse resource script source into a LocaleFile.

    Convenience alias for parse_rc().

    Example:
        >>> from rc2po.syntax import parse
        >>> parse('MENUITEM "E&xit", IDM_EXIT').entries[0].text
        'E&xit'
    """
    return parse_rc(source, code)
