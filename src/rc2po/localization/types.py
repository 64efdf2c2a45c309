"""Type aliases for the localization domain.

Python 3.13+.
"""

__all__ = [
    "LocaleCode",
    "RcSource",
]

type LocaleCode = str
"""Locale code as found in a resource script name (e.g., 'de-DE', 'zh-TW')."""

type RcSource = str
"""Raw resource script text as a Python string."""
