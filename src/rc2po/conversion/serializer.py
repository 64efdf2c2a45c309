"""Deduplicate aligned pairs and serialize them as PO catalog blocks.

Each surviving pair becomes one LF-terminated block:

    msgid "&File"
    msgstr "&Datei"
    <blank line>

Text is written verbatim between the quotes; it has already been converted
to PO escaping by the text converter.

Python 3.13+.
"""

import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from rc2po.diagnostics import ConversionWarning, WarningCode
from rc2po.syntax.model import TranslationPair

__all__ = [
    "CatalogWriter",
    "WriteResult",
    "format_block",
    "serialize",
    "write_catalog",
]

logger = logging.getLogger(__name__)


def format_block(pair: TranslationPair) -> str:
    """Format one pair as a msgid/msgstr block followed by a blank line."""
    return f'msgid "{pair.final_id}"\nmsgstr "{pair.text}"\n\n'


@dataclass(frozen=True, slots=True)
class WriteResult:
    """Outcome of writing one catalog.

    Attributes:
        written: Number of blocks emitted
        skipped: Number of duplicate pairs dropped (identical or conflicting)
        warnings: One warning per conflicting duplicate
    """

    written: int
    skipped: int
    warnings: tuple[ConversionWarning, ...] = ()


class CatalogWriter:
    """Write pairs to a text sink, dropping repeated msgids.

    The first value seen for a msgid wins. A repeat with the same value is
    skipped silently; a repeat with a different value is skipped with a
    warning. Deduplication state lives on the instance, so use one writer
    per output file.

    Example:
        >>> sink = io.StringIO()
        >>> writer = CatalogWriter(sink)
        >>> writer.write(TranslationPair("OK", "OK"))
        True
        >>> writer.write(TranslationPair("OK", "OK"))
        False
        >>> sink.getvalue()
        'msgid "OK"\\nmsgstr "OK"\\n\\n'
    """

    __slots__ = ("_locale", "_seen", "_sink", "_skipped", "_warnings")

    def __init__(self, sink: TextIO, locale: str | None = None) -> None:
        """Initialize writer.

        Args:
            sink: Text stream to write blocks to (not closed by the writer)
            locale: Locale code used as warning context (optional)
        """
        self._sink = sink
        self._locale = locale
        self._seen: dict[str, str] = {}
        self._skipped = 0
        self._warnings: list[ConversionWarning] = []

    def write(self, pair: TranslationPair) -> bool:
        """Write a pair unless its msgid was already written.

        Returns:
            True if a block was emitted
        """
        first = self._seen.get(pair.final_id)
        if first is None:
            self._seen[pair.final_id] = pair.text
            self._sink.write(format_block(pair))
            return True

        self._skipped += 1
        if first != pair.text:
            warning = ConversionWarning(
                code=WarningCode.DUPLICATE_TRANSLATION,
                message=f"Omitted translation due to duplicate source string: {pair.text}",
                context=self._locale,
            )
            logger.warning("%s", warning.format())
            self._warnings.append(warning)
        return False

    def write_all(self, pairs: Iterable[TranslationPair]) -> WriteResult:
        """Write every pair in order and return the running totals."""
        for pair in pairs:
            self.write(pair)
        return self.result

    @property
    def result(self) -> WriteResult:
        return WriteResult(
            written=len(self._seen),
            skipped=self._skipped,
            warnings=tuple(self._warnings),
        )


def write_catalog(
    pairs: Iterable[TranslationPair], sink: TextIO, locale: str | None = None
) -> WriteResult:
    """Deduplicate and write pairs to an open text stream.

    Args:
        pairs: Aligned pairs in output order
        sink: Destination stream; should be opened with newline="\\n"
        locale: Locale code used as warning context (optional)

    Returns:
        WriteResult with block and duplicate counts
    """
    return CatalogWriter(sink, locale).write_all(pairs)


def serialize(pairs: Iterable[TranslationPair], locale: str | None = None) -> str:
    """Deduplicate and serialize pairs to a PO catalog string.

    Example:
        >>> serialize([TranslationPair("&File", "&Datei")])
        'msgid "&File"\\nmsgstr "&Datei"\\n\\n'
    """
    buffer = io.StringIO()
    write_catalog(pairs, buffer, locale)
    return buffer.getvalue()
