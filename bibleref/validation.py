"""
bibleref - Reference Validation

Five checks in fixed order; the first failure is the only one reported:

  1. book order
  2. chapter order (same book)
  3. verse order (same book and chapter)
  4. chapter bounds, start side then end side
  5. verse bounds, start side then end side
"""
from __future__ import annotations

from typing import Optional

from .books import Book, book_name, is_single_chapter, num_chapters, num_verses
from .reference import Reference
from .result import Err, ErrorKind, Ok, Result

BOOK_ORDER_ERROR = "End book must come after start book"
CHAPTER_ORDER_ERROR = "End chapter must come after start chapter"
VERSE_ORDER_ERROR = "End verse must come after start verse"
CHAPTER_START_ERROR = "Chapter numbers start at 1"
VERSE_START_ERROR = "Verse numbers start at 1"


def _check_chapter(book: Book, chapter: int) -> Optional[Err]:
    if chapter < 1:
        return Err(CHAPTER_START_ERROR, ErrorKind.BOUNDS)
    chapters = num_chapters(book)
    if chapter > chapters:
        return Err(f"{book_name(book)} only has {chapters} chapters", ErrorKind.BOUNDS)
    return None


def _check_verse(book: Book, chapter: int, verse: int) -> Optional[Err]:
    if verse < 1:
        return Err(VERSE_START_ERROR, ErrorKind.BOUNDS)
    verses = num_verses(book, chapter)
    if verse > verses:
        if is_single_chapter(book):
            return Err(f"{book_name(book)} only has {verses} verses", ErrorKind.BOUNDS)
        return Err(
            f"{book_name(book)} {chapter} only has {verses} verses", ErrorKind.BOUNDS
        )
    return None


def validate(ref: Reference) -> Result[Reference]:
    """Return ``Ok(ref)`` if the reference is in order and in bounds."""
    if ref.start_book > ref.end_book:
        return Err(BOOK_ORDER_ERROR, ErrorKind.ORDER)

    if ref.start_book == ref.end_book:
        if ref.start_chapter > ref.end_chapter:
            return Err(CHAPTER_ORDER_ERROR, ErrorKind.ORDER)
        if ref.start_chapter == ref.end_chapter and ref.start_verse > ref.end_verse:
            return Err(VERSE_ORDER_ERROR, ErrorKind.ORDER)

    error = (
        _check_chapter(ref.start_book, ref.start_chapter)
        or _check_chapter(ref.end_book, ref.end_chapter)
        or _check_verse(ref.start_book, ref.start_chapter, ref.start_verse)
        or _check_verse(ref.end_book, ref.end_chapter, ref.end_verse)
    )
    if error:
        return error
    return Ok(ref)


def is_valid(ref: Reference) -> bool:
    return validate(ref).is_ok
