"""Text conversion from resource script literals to PO string content.

Python 3.13+.
"""

from rc2po.constants import DOUBLED_QUOTE, ESCAPED_QUOTE, MACRO_SUBSTITUTIONS

__all__ = ["convert_text"]


def convert_text(raw: str) -> str:
    """Expand library name macros and convert doubled quotes to PO escapes.

    Order matters: the macro idiom itself contains quote characters, so
    macros are expanded before quote conversion.

    Args:
        raw: Text extracted from between the outer quotes of a literal

    Returns:
        Text suitable for a double-quoted PO string

    Example:
        >>> convert_text('Unable to load " LIB_NAME_PCAP "')
        'Unable to load libpcap'
        >>> convert_text('She said ""hi""')
        'She said \\\\"hi\\\\"'
    """
    text = raw
    for macro, library in MACRO_SUBSTITUTIONS:
        text = text.replace(macro, library)
    return text.replace(DOUBLED_QUOTE, ESCAPED_QUOTE)
