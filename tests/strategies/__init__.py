"""Hypothesis strategies for rc2po property-based testing.

Usage:
    from tests.strategies import captions, rc_lines
    from tests.strategies.rc import locale_files, translated_locale
"""

from .rc import (
    captions,
    define_names,
    indents,
    locale_codes,
    locale_files,
    rc_lines,
    string_ids,
    translated_locale,
)

__all__ = [
    "captions",
    "define_names",
    "indents",
    "locale_codes",
    "locale_files",
    "rc_lines",
    "string_ids",
    "translated_locale",
]
