"""Enumerations for rc2po type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LineKind(StrEnum):
    """Kind of resource script line recognized by the classifier.

    StrEnum provides automatic string conversion: str(LineKind.MENU) == "menu"
    """

    MENU = "menu"
    """Menu caption: POPUP "&File" / MENUITEM "&Open...", IDM_OPEN"""

    DEFINE = "define"
    """String constant: #define STR_NAME "Text" """

    NUMBERED = "numbered"
    """String table line: IDS_2048 "Text" or 2048 "Text" """

    NONE = "none"
    """Line carries no translatable text"""


class WarningCode(StrEnum):
    """Recoverable conditions reported during conversion.

    StrEnum provides automatic string conversion for log aggregation:
    str(WarningCode.ID_MISMATCH) == "id-mismatch"
    """

    ID_MISMATCH = "id-mismatch"
    """Reference and translated entries at the same position have different ids"""

    LENGTH_MISMATCH = "length-mismatch"
    """Reference and translated files have different entry counts"""

    DUPLICATE_TRANSLATION = "duplicate-translation"
    """Same msgid seen again with a different translation; later one dropped"""


__all__ = [
    "LineKind",
    "WarningCode",
]
