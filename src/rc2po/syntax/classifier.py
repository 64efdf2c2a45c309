"""Line classification for resource scripts.

Three independent matchers inspect each line:

    POPUP "&File"                      -> MenuEntry
    MENUITEM "&Open...", IDM_OPEN      -> MenuEntry
    #define STR_NAME "Emulator"         -> DefineEntry
    IDS_2048 "Floppy images (*.86F)\\0*.86F\\0"
                                        -> NumberedEntry (filter fragments)
    2049 "Hard disk"                   -> NumberedEntry

Every matcher that fires contributes; lines matching nothing contribute
nothing. Classification is stateless: no memory is kept between lines.

Python 3.13+.
"""

import re
from typing import Final

from rc2po.constants import ENGLISH_MARKER_DEFINE

from .filters import NOT_A_FILTER, split_filter
from .model import NO_MATCH, DefineEntry, LineMatch, MenuEntry, NumberedEntry, ResourceEntry
from .text import convert_text

__all__ = [
    "classify_line",
    "match_define",
    "match_line",
    "match_menu",
    "match_numbered",
]

_MENU_LINE: Final = re.compile(r'^\s*(POPUP|MENUITEM)\s*"(?P<text>.+)"')
_DEFINE_LINE: Final = re.compile(r'^\s*#define\s+(?P<name>\w+)\s+(?P<quote>"?)(?P<value>.+)(?P=quote)')
_NUMBERED_LINE: Final = re.compile(r'^\s*(?P<base>(IDS_)?\d+).+?"(?P<text>.+)"')


def match_menu(line: str) -> MenuEntry | None:
    """Match a POPUP/MENUITEM caption.

    The caption runs to the last quote on the line.
    """
    match = _MENU_LINE.match(line)
    if match is None:
        return None
    return MenuEntry(text=convert_text(match.group("text")))


def match_define(line: str) -> DefineEntry | None:
    """Match a `#define` string constant, quoted or bare.

    The English/US language marker is not a translatable string and
    never produces an entry.
    """
    match = _DEFINE_LINE.match(line)
    if match is None or match.group("name") == ENGLISH_MARKER_DEFINE:
        return None
    return DefineEntry(name=match.group("name"), text=convert_text(match.group("value")))


def match_numbered(line: str) -> NumberedEntry | None:
    """Match a string table line keyed by a number.

    File dialog filter strings are split into their descriptions.
    """
    match = _NUMBERED_LINE.match(line)
    if match is None:
        return None

    raw = match.group("text")
    fragments = split_filter(raw)
    if fragments is NOT_A_FILTER:
        return NumberedEntry(base=match.group("base"), text=convert_text(raw))
    return NumberedEntry(
        base=match.group("base"),
        text=convert_text(raw),
        fragments=tuple(convert_text(fragment) for fragment in fragments),
    )


_MATCHERS: Final = (match_menu, match_define, match_numbered)


def match_line(line: str) -> tuple[LineMatch, ...]:
    """Run every matcher over a line.

    Returns:
        Matches in matcher order (menu, define, numbered), or (NO_MATCH,)
        when nothing fired.
    """
    matches = tuple(match for matcher in _MATCHERS if (match := matcher(line)) is not None)
    return matches or (NO_MATCH,)


def classify_line(line: str) -> tuple[ResourceEntry, ...]:
    """Classify one source line into zero or more resource entries.

    Args:
        line: Single line of a resource script, without line terminator

    Returns:
        Entries contributed by the line, in matcher order

    Example:
        >>> classify_line('  POPUP "&File"')
        (ResourceEntry(identifier=None, text='&File'),)
        >>> classify_line('#define IDS_LANG_ENUS "English (US)"')
        ()
    """
    return tuple(entry for match in match_line(line) for entry in match.entries())
