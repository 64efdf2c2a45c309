"""Conversion of parsed locales into PO catalogs.

Provides positional alignment against the reference locale and the
deduplicating catalog writer.

Python 3.13+.
"""

from .align import AlignmentResult, align, align_entry
from .serializer import CatalogWriter, WriteResult, format_block, serialize, write_catalog

__all__ = [
    "AlignmentResult",
    "CatalogWriter",
    "WriteResult",
    "align",
    "align_entry",
    "format_block",
    "serialize",
    "write_catalog",
]
