"""
bibleref - Integer Codec

Each endpoint packs into one integer, ``book*1_000_000 + chapter*1_000 +
verse``, so encoded references sort in canonical order. Chapters and
verses never reach 1000 in the canon.
"""
from __future__ import annotations

from typing import Tuple, Union

from .books import Book, book_from_index
from .reference import EncodedReference, Reference
from .result import Ok, Result
from .validation import validate

BOOK_FACTOR = 1_000_000
CHAPTER_FACTOR = 1_000


def encode_point(book: Book, chapter: int, verse: int) -> int:
    return int(book) * BOOK_FACTOR + chapter * CHAPTER_FACTOR + verse


def decode_point(value: int) -> Result[Tuple[Book, int, int]]:
    book_number, rest = divmod(value, BOOK_FACTOR)
    chapter, verse = divmod(rest, CHAPTER_FACTOR)
    book = book_from_index(book_number)
    if book.is_err:
        return book
    return Ok((book.value, chapter, verse))


def encode(ref: Reference) -> EncodedReference:
    return EncodedReference(
        start=encode_point(*ref.start),
        end=encode_point(*ref.end),
    )


def decode(pair: Union[EncodedReference, Tuple[int, int]]) -> Result[Reference]:
    """Rebuild a Reference from its integer pair and validate it."""
    start_value, end_value = pair
    start = decode_point(start_value)
    if start.is_err:
        return start
    end = decode_point(end_value)
    if end.is_err:
        return end
    return validate(Reference(*start.value, *end.value))
