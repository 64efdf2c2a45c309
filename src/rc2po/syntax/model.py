"""Data model for parsed resource scripts.

Two layers:
- Line matches: tagged variants produced by the line classifier
  (MenuEntry | DefineEntry | NumberedEntry | NoMatch)
- Entries: the flat, ordered ResourceEntry sequence of a LocaleFile, and the
  TranslationPair values produced by alignment

Includes type guards as static methods, like the rest of the syntax package.

Python 3.13+.
"""

from dataclasses import dataclass
from typing import ClassVar, TypeIs

from rc2po.enums import LineKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Entries
    "ResourceEntry",
    "LocaleFile",
    "TranslationPair",
    # Line matches
    "MenuEntry",
    "DefineEntry",
    "NumberedEntry",
    "NoMatch",
    "NO_MATCH",
    "LineMatch",
]


# ============================================================================
# ENTRIES
# ============================================================================


@dataclass(frozen=True, slots=True)
class ResourceEntry:
    """One translatable string extracted from a resource script.

    Attributes:
        identifier: Define name or string-table id; None for menu captions
        text: Converted text (macros expanded, quotes backslash-escaped)
    """

    identifier: str | None
    text: str


@dataclass(frozen=True, slots=True)
class LocaleFile:
    """All entries of one locale, in source line order.

    Attributes:
        code: Locale code as found in the file name (e.g., 'de-DE')
        entries: Entries in the order they were encountered
    """

    code: str
    entries: tuple[ResourceEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def identifiers(self) -> tuple[str | None, ...]:
        """Positional identifier sequence, used to compare locale layouts."""
        return tuple(entry.identifier for entry in self.entries)


@dataclass(frozen=True, slots=True)
class TranslationPair:
    """Aligned msgid/msgstr pair ready for serialization.

    Attributes:
        final_id: Reference text, or a reserved symbolic id such as FONT_NAME
        text: Translated text
    """

    final_id: str
    text: str


# ============================================================================
# LINE MATCHES
# ============================================================================


@dataclass(frozen=True, slots=True)
class MenuEntry:
    """POPUP or MENUITEM caption."""

    kind: ClassVar[LineKind] = LineKind.MENU

    text: str

    def entries(self) -> tuple[ResourceEntry, ...]:
        return (ResourceEntry(identifier=None, text=self.text),)

    @staticmethod
    def guard(match: object) -> TypeIs["MenuEntry"]:
        """Type guard for MenuEntry."""
        return isinstance(match, MenuEntry)


@dataclass(frozen=True, slots=True)
class DefineEntry:
    """`#define NAME "value"` string constant."""

    kind: ClassVar[LineKind] = LineKind.DEFINE

    name: str
    text: str

    def entries(self) -> tuple[ResourceEntry, ...]:
        return (ResourceEntry(identifier=self.name, text=self.text),)

    @staticmethod
    def guard(match: object) -> TypeIs["DefineEntry"]:
        """Type guard for DefineEntry."""
        return isinstance(match, DefineEntry)


@dataclass(frozen=True, slots=True)
class NumberedEntry:
    """String table line keyed by a (optionally IDS_-prefixed) number.

    Attributes:
        base: Numeric token including its prefix (e.g., '2048', 'IDS_2048')
        text: Converted quoted text
        fragments: File dialog filter descriptions, or None when the text
                   is not a filter string

    Example:
        NumberedEntry(base="123", text="...", fragments=("Text files (*.txt)",)).entries()
        # (ResourceEntry(identifier='123_1', text='Text files (*.txt)'),)
    """

    kind: ClassVar[LineKind] = LineKind.NUMBERED

    base: str
    text: str
    fragments: tuple[str, ...] | None = None

    @property
    def is_filter(self) -> bool:
        return self.fragments is not None

    def entries(self) -> tuple[ResourceEntry, ...]:
        """Expand into entries; filter fragments get 1-indexed '{base}_{n}' ids."""
        if self.fragments is None:
            return (ResourceEntry(identifier=self.base, text=self.text),)
        return tuple(
            ResourceEntry(identifier=f"{self.base}_{index}", text=fragment)
            for index, fragment in enumerate(self.fragments, start=1)
        )

    @staticmethod
    def guard(match: object) -> TypeIs["NumberedEntry"]:
        """Type guard for NumberedEntry."""
        return isinstance(match, NumberedEntry)


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Line carries nothing translatable. Use the NO_MATCH singleton."""

    kind: ClassVar[LineKind] = LineKind.NONE

    def entries(self) -> tuple[ResourceEntry, ...]:
        return ()

    @staticmethod
    def guard(match: object) -> TypeIs["NoMatch"]:
        """Type guard for NoMatch."""
        return isinstance(match, NoMatch)


NO_MATCH = NoMatch()


# ============================================================================
# TYPE ALIASES
# ============================================================================

type LineMatch = MenuEntry | DefineEntry | NumberedEntry | NoMatch
