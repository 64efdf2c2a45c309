"""Hypothesis strategies for resource script property-based testing.

Provides reusable strategies for generating:
- Caption text safe to place between quotes on a single line
- Define names, string table ids and locale codes
- Whole resource script lines of each recognized kind
- ResourceEntry sequences for alignment tests

Event-Emitting Strategies (HypoFuzz-Optimized):
- rc_lines: Emits rc_line_kind=menu|define|numbered|noise

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from rc2po.syntax.model import LocaleFile, ResourceEntry

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

# Printable text without quotes, backslashes or line breaks.
_CAPTION_ALPHABET = st.characters(
    codec="utf-8",
    categories=("L", "N", "P", "Zs"),
    exclude_characters='"\\',
)

captions = st.text(_CAPTION_ALPHABET, min_size=1, max_size=40).filter(
    lambda text: text.strip() == text and text != ""
)
"""Quote-free captions without surrounding whitespace."""

define_names = st.from_regex(r"[A-Z][A-Z0-9_]{1,20}", fullmatch=True).filter(
    lambda name: name != "IDS_LANG_ENUS"
)

string_ids = st.builds(
    lambda prefix, number: f"{prefix}{number}",
    st.sampled_from(["", "IDS_"]),
    st.integers(min_value=0, max_value=65535),
)

locale_codes = st.builds(
    lambda lang, region: f"{lang}-{region}",
    st.text(string.ascii_lowercase, min_size=2, max_size=2),
    st.text(string.ascii_uppercase, min_size=2, max_size=2),
)

indents = st.sampled_from(["", " ", "    ", "\t", "\t\t"])


@st.composite
def rc_lines(draw: DrawFn) -> str:
    """Generate a single resource script line of a random kind.

    Events emitted:
    - rc_line_kind=menu|define|numbered|noise
    """
    kind = draw(st.sampled_from(["menu", "define", "numbered", "noise"]))
    event(f"rc_line_kind={kind}")
    indent = draw(indents)
    match kind:
        case "menu":
            keyword = draw(st.sampled_from(["POPUP", "MENUITEM"]))
            return f'{indent}{keyword} "{draw(captions)}"'
        case "define":
            return f'{indent}#define {draw(define_names)} "{draw(captions)}"'
        case "numbered":
            return f'{indent}{draw(string_ids)}    "{draw(captions)}"'
        case _:
            return draw(st.sampled_from(["BEGIN", "END", "", "// comment", "MainMenu MENU"]))


@st.composite
def locale_files(draw: DrawFn, code: str = "en-US", max_size: int = 20) -> LocaleFile:
    """Generate a LocaleFile with a random mix of keyed and unkeyed entries."""
    entries = draw(
        st.lists(
            st.builds(
                ResourceEntry,
                identifier=st.one_of(st.none(), define_names, string_ids),
                text=captions,
            ),
            max_size=max_size,
        )
    )
    return LocaleFile(code=code, entries=tuple(entries))


@st.composite
def translated_locale(draw: DrawFn, reference: LocaleFile, code: str = "de-DE") -> LocaleFile:
    """Generate a translation of reference with the same identifier layout."""
    entries = tuple(
        ResourceEntry(identifier=entry.identifier, text=draw(captions))
        for entry in reference.entries
    )
    return LocaleFile(code=code, entries=entries)
