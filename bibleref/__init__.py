"""
bibleref - Bible Reference Parsing

Parse free-text references ("Gen 1:1", "Matthew 1 - Jude 12") into a
validated ``Reference``, format them canonically, and encode them as a
pair of sortable integers.

Usage:
    from bibleref import from_string, format_reference, encode, decode

    ref = from_string("Genesis 1:1 - Exodus 5").unwrap()
    format_reference(ref)   # 'Genesis 1:1 - Exodus 5:23'
    encode(ref)             # EncodedReference(start=1001001, end=2005023)
"""
from .books import (
    BOOK_COUNT,
    BOOKS,
    Book,
    BookInfo,
    book_from_index,
    book_index,
    book_name,
    is_single_chapter,
    match_book_name,
    num_chapters,
    num_verses,
)
from .codec import decode, encode
from .errors import (
    BibleRefError,
    ConfigurationError,
    ReferenceBoundsError,
    ReferenceCodecError,
    ReferenceOrderError,
    ReferenceShapeError,
    ReferenceSyntaxError,
)
from .formatting import format_reference
from .parser import from_string
from .reference import EncodedReference, Reference
from .result import Err, ErrorKind, Ok, Result
from .validation import validate

__version__ = "1.0.0"

__all__ = [
    "BOOK_COUNT",
    "BOOKS",
    "Book",
    "BookInfo",
    "BibleRefError",
    "ConfigurationError",
    "EncodedReference",
    "Err",
    "ErrorKind",
    "Ok",
    "Reference",
    "ReferenceBoundsError",
    "ReferenceCodecError",
    "ReferenceOrderError",
    "ReferenceShapeError",
    "ReferenceSyntaxError",
    "Result",
    "book_from_index",
    "book_index",
    "book_name",
    "decode",
    "encode",
    "format_reference",
    "from_string",
    "is_single_chapter",
    "match_book_name",
    "num_chapters",
    "num_verses",
    "validate",
]
