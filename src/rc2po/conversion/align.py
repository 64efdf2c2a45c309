"""Positional alignment of a translated locale against the reference locale.

Entries are paired by index, not by identifier: menu captions carry no
identifier, so position is the only key shared by all entry kinds. Locale
files are expected to have identical layouts; deviations are reported and
pairing continues regardless.

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from rc2po.constants import RESERVED_IDS
from rc2po.diagnostics import ConversionWarning, WarningCode
from rc2po.syntax.model import LocaleFile, ResourceEntry, TranslationPair

__all__ = [
    "AlignmentResult",
    "align",
    "align_entry",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AlignmentResult:
    """Aligned pairs of one target locale plus the warnings raised on the way.

    Attributes:
        locale: Target locale code
        pairs: msgid/msgstr pairs in reference order
        warnings: Identifier and length mismatches
    """

    locale: str
    pairs: tuple[TranslationPair, ...]
    warnings: tuple[ConversionWarning, ...] = ()

    def __len__(self) -> int:
        return len(self.pairs)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


def align_entry(original: ResourceEntry, translation: ResourceEntry) -> TranslationPair:
    """Resolve the final identifier of one positional pair.

    Font settings keep their symbolic identifier so a locale can override
    the font without the catalog being keyed by the font name itself.
    Everything else is keyed by the reference text.

    Example:
        >>> align_entry(ResourceEntry("FONT_NAME", "Tahoma"), ResourceEntry("FONT_NAME", "MS Shell Dlg"))
        TranslationPair(final_id='FONT_NAME', text='MS Shell Dlg')
        >>> align_entry(ResourceEntry(None, "&File"), ResourceEntry(None, "&Datei"))
        TranslationPair(final_id='&File', text='&Datei')
    """
    if original.identifier in RESERVED_IDS:
        return TranslationPair(final_id=original.identifier, text=translation.text)
    return TranslationPair(final_id=original.text, text=translation.text)


def align(reference: LocaleFile, target: LocaleFile) -> AlignmentResult:
    """Pair target entries with reference entries by position.

    Pairing stops at the shorter of the two sequences.

    Args:
        reference: Reference locale (source of msgids)
        target: Locale being converted (source of msgstrs)

    Returns:
        AlignmentResult with one pair per aligned position
    """
    pairs: list[TranslationPair] = []
    warnings: list[ConversionWarning] = []

    if len(reference) != len(target):
        warning = ConversionWarning(
            code=WarningCode.LENGTH_MISMATCH,
            message=(
                f"Entry count mismatch: {len(reference)} in {reference.code} "
                f"vs {len(target)} in {target.code}"
            ),
            context=target.code,
        )
        logger.warning("%s", warning.format())
        warnings.append(warning)

    for original, translation in zip(reference.entries, target.entries, strict=False):
        if original.identifier != translation.identifier:
            warning = ConversionWarning(
                code=WarningCode.ID_MISMATCH,
                message=f"ID mismatch: {original.identifier} vs {translation.identifier}",
                context=target.code,
            )
            logger.warning("%s", warning.format())
            warnings.append(warning)

        pairs.append(align_entry(original, translation))

    return AlignmentResult(locale=target.code, pairs=tuple(pairs), warnings=tuple(warnings))
