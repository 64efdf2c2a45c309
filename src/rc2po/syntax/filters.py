"""File dialog filter string detection.

Windows file dialogs take filters as description/pattern pairs separated by
NUL characters. In resource scripts the NULs are written as the two-character
escape `\\0`:

    "Text files (*.txt)\\0*.txt\\0All files (*.*)\\0*.*\\0"

Only the descriptions (including their parenthesized extension hint) are
translatable; the `\\0<pattern>\\0` runs are cut out.

Python 3.13+.
"""

import re
from typing import Final

__all__ = [
    "NOT_A_FILTER",
    "split_filter",
]

# "(<extensions>)\0<pattern>\0"; the "pattern" group is what gets cut.
_FILTER_PAIR: Final = re.compile(r"\(.+?\)(?P<pattern>\\0.+?\\0)")

NOT_A_FILTER: Final = None
"""Returned by split_filter() when the string has no filter pairs."""


def split_filter(text: str) -> tuple[str, ...] | None:
    """Extract the human-readable descriptions from a file dialog filter.

    Args:
        text: Quoted text of a string table line

    Returns:
        Descriptions in order of appearance (trimmed, empty ones dropped),
        or NOT_A_FILTER when the text contains no filter pair

    Example:
        >>> split_filter("Text files (*.txt)\\\\0*.txt\\\\0All files (*.*)\\\\0*.*\\\\0")
        ('Text files (*.txt)', 'All files (*.*)')
        >>> split_filter("Plain text") is NOT_A_FILTER
        True
    """
    pieces: list[str] = []
    position = 0
    for match in _FILTER_PAIR.finditer(text):
        pieces.append(text[position : match.start("pattern")])
        position = match.end("pattern")

    if not pieces:
        return NOT_A_FILTER

    pieces.append(text[position:])
    return tuple(stripped for piece in pieces if (stripped := piece.strip()))
