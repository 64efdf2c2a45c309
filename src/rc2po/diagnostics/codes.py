"""Warning codes and structured warning records.

Python 3.13+.
"""

from dataclasses import dataclass

from rc2po.enums import WarningCode

__all__ = [
    "ConversionWarning",
    "WarningCode",
]


@dataclass(frozen=True, slots=True)
class ConversionWarning:
    """Structured recoverable condition raised while converting a locale.

    Warnings never change control flow: the component that produced one
    continues with its documented fallback (positional pairing, first
    translation wins).

    Attributes:
        code: Warning category
        message: Human-readable message, as printed on the console
        context: Locale code or other locating detail (optional)
    """

    code: WarningCode
    message: str
    context: str | None = None

    def format(self) -> str:
        """Format warning as a single log line.

        Example:
            >>> ConversionWarning(WarningCode.ID_MISMATCH, "ID mismatch: A vs B", "de-DE").format()
            '[id-mismatch] de-DE: ID mismatch: A vs B'
        """
        if self.context:
            return f"[{self.code}] {self.context}: {self.message}"
        return f"[{self.code}] {self.message}"
