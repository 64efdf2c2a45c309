"""Shared constants for rc2po.

This module provides centralized configuration constants used across
the syntax, conversion and localization packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locales: Reference locale and the English/US marker define
- Reserved identifiers: Font overrides that keep their symbolic id
- Text conversion: Macro-concatenation substitutions
- Files: Extensions, encodings and locale file name pattern

Python 3.13+.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locales
    "REFERENCE_LOCALE",
    "ENGLISH_MARKER_DEFINE",
    # Reserved identifiers
    "FONT_NAME_ID",
    "FONT_SIZE_ID",
    "RESERVED_IDS",
    # Text conversion
    "MACRO_SUBSTITUTIONS",
    "DOUBLED_QUOTE",
    "ESCAPED_QUOTE",
    # Files
    "PO_EXTENSION",
    "DEFAULT_INPUT_ENCODING",
    "OUTPUT_ENCODING",
    "LOCALE_FILE_PATTERN",
]

# ============================================================================
# LOCALES
# ============================================================================

# Locale whose text doubles as msgid in every generated catalog.
REFERENCE_LOCALE: str = "en-US"

# Language marker present in every locale file; never translated.
ENGLISH_MARKER_DEFINE: str = "IDS_LANG_ENUS"

# ============================================================================
# RESERVED IDENTIFIERS
# ============================================================================

FONT_NAME_ID: str = "FONT_NAME"
FONT_SIZE_ID: str = "FONT_SIZE"

# Reference identifiers written as-is instead of being keyed by source text.
RESERVED_IDS: frozenset[str] = frozenset({FONT_NAME_ID, FONT_SIZE_ID})

# ============================================================================
# TEXT CONVERSION
# ============================================================================

# Build-time library name macros spliced between string literals, e.g.
#   "Unable to initialize " LIB_NAME_PCAP "!"
# Applied in order, before quote unescaping.
MACRO_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ('" LIB_NAME_PCAP "', "libpcap"),
    ('" LIB_NAME_FREETYPE "', "libfreetype"),
    ('" LIB_NAME_FLUIDSYNTH "', "libfluidsynth"),
    ('" LIB_NAME_GS "', "libgs"),
)

# Resource scripts escape quotes by doubling them; PO uses backslashes.
DOUBLED_QUOTE: str = '""'
ESCAPED_QUOTE: str = '\\"'

# ============================================================================
# FILES
# ============================================================================

PO_EXTENSION: str = ".po"

# utf-8-sig strips a leading BOM when present.
DEFAULT_INPUT_ENCODING: str = "utf-8-sig"
OUTPUT_ENCODING: str = "utf-8"

# Locale resource script names, e.g. "de-DE.rc" or "ZH-tw.RC".
LOCALE_FILE_PATTERN: re.Pattern[str] = re.compile(r"\w{2}-\w{2}\.rc", re.IGNORECASE)
