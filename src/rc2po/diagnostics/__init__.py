"""Diagnostic system for resource script conversion.

Provides warning records for recoverable conditions and the exception
hierarchy for run-aborting preconditions.

Python 3.13+.
"""

from .codes import ConversionWarning, WarningCode
from .errors import InputDirectoryError, Rc2PoError, ReferenceLocaleNotFoundError

__all__ = [
    "ConversionWarning",
    "InputDirectoryError",
    "Rc2PoError",
    "ReferenceLocaleNotFoundError",
    "WarningCode",
]
