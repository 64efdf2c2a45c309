"""Locale utilities for file-name locale codes.

Resource script names use BCP-47 style codes with a hyphen (de-DE), matched
case-insensitively. Babel is used to turn codes into display names for
diagnostics.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "describe_locale",
    "get_babel_locale",
    "locale_key",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def locale_key(locale_code: str) -> str:
    """Case-insensitive lookup key for a locale code.

    Example:
        >>> locale_key("EN-us") == locale_key("en-US")
        True
    """
    return normalize_locale(locale_code).casefold()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def describe_locale(locale_code: str) -> str:
    """Human-readable name of a locale for log lines.

    Returns the English display name when Babel knows the locale, otherwise
    the code itself.

    Example:
        >>> describe_locale("de-DE")
        'German (Germany)'
        >>> describe_locale("xx-YY")
        'xx-YY'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError):
        return locale_code
    return locale.get_display_name("en") or locale_code


def clear_locale_cache() -> None:
    """Clear the Babel locale cache."""
    get_babel_locale.cache_clear()
