"""
bibleref - Reference Resolver

Maps a token list to a Reference by its exact shape, the sequence of
token kinds. Each shape has one rule for filling in the chapter and verse
endpoints the text left out:

  shape                       example
  ------------------------    ------------------------------
  B                           Genesis
  B N                         Genesis 1 / Jude 5
  B N : N                     Genesis 1:1
  B N : N - N                 Genesis 1:1-5
  B N : N - N : N             Genesis 1:20-2:24
  B N - N                     Genesis 1-3 / Jude 3-5
  B N - B N                   Matthew 1 - Jude 12
  B N : N - B N               Genesis 1:1 - Exodus 5
  B N : N - B N : N           Genesis 1:1 - Exodus 5:3
  B N - B N : N               Genesis 1 - Exodus 5:3
  B - B N                     Genesis - Exodus 5
  B - B                       Genesis - Revelation

Wherever a bare number could be a chapter or a verse, a single-chapter
book reads it as a verse of chapter 1. Each side of a range is decided by
its own book.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

from .books import Book, is_single_chapter, num_chapters, num_verses
from .observability.logging import get_logger
from .reference import Reference
from .result import Err, ErrorKind, Result
from .tokenizer import NO_VALID_REFERENCE, Token, TokenKind
from .validation import validate

logger = get_logger(__name__)

NO_REFERENCE = "No reference found"

Point = Tuple[Book, int, int]

B = TokenKind.BOOK
N = TokenKind.NUMBER
D = TokenKind.DASH
C = TokenKind.COLON


def _last_verse(book: Book, chapter: int) -> int:
    # A missing chapter gets verse 1 so validation reports the chapter.
    return num_verses(book, chapter) or 1


def _book_start(book: Book) -> Point:
    return book, 1, 1


def _book_end(book: Book) -> Point:
    last_chapter = num_chapters(book)
    return book, last_chapter, _last_verse(book, last_chapter)


def _number_start(book: Book, number: int) -> Point:
    """Start point for a bare number: a verse or a chapter."""
    if is_single_chapter(book):
        return book, 1, number
    return book, number, 1


def _number_end(book: Book, number: int) -> Point:
    """End point for a bare number: a verse or a whole chapter."""
    if is_single_chapter(book):
        return book, 1, number
    return book, number, _last_verse(book, number)


def _span(start: Point, end: Point) -> Reference:
    return Reference(*start, *end)


def _whole_book(t: Sequence[Token]) -> Reference:
    return _span(_book_start(t[0].book), _book_end(t[0].book))


def _book_number(t: Sequence[Token]) -> Reference:
    book, number = t[0].book, t[1].value
    return _span(_number_start(book, number), _number_end(book, number))


def _chapter_verse(t: Sequence[Token]) -> Reference:
    point = (t[0].book, t[1].value, t[3].value)
    return _span(point, point)


def _verse_range(t: Sequence[Token]) -> Reference:
    book, chapter = t[0].book, t[1].value
    return _span((book, chapter, t[3].value), (book, chapter, t[5].value))


def _chapter_verse_range(t: Sequence[Token]) -> Reference:
    book = t[0].book
    return _span((book, t[1].value, t[3].value), (book, t[5].value, t[7].value))


def _number_range(t: Sequence[Token]) -> Reference:
    book = t[0].book
    return _span(_number_start(book, t[1].value), _number_end(book, t[3].value))


def _book_number_to_book_number(t: Sequence[Token]) -> Reference:
    return _span(
        _number_start(t[0].book, t[1].value),
        _number_end(t[3].book, t[4].value),
    )


def _verse_to_book_number(t: Sequence[Token]) -> Reference:
    return _span(
        (t[0].book, t[1].value, t[3].value),
        _number_end(t[5].book, t[6].value),
    )


def _verse_to_verse(t: Sequence[Token]) -> Reference:
    return _span(
        (t[0].book, t[1].value, t[3].value),
        (t[5].book, t[6].value, t[8].value),
    )


def _book_number_to_verse(t: Sequence[Token]) -> Reference:
    return _span(
        _number_start(t[0].book, t[1].value),
        (t[3].book, t[4].value, t[6].value),
    )


def _book_to_book_number(t: Sequence[Token]) -> Reference:
    return _span(_book_start(t[0].book), _number_end(t[2].book, t[3].value))


def _book_to_book(t: Sequence[Token]) -> Reference:
    return _span(_book_start(t[0].book), _book_end(t[2].book))


SHAPES: Dict[Tuple[TokenKind, ...], Callable[[Sequence[Token]], Reference]] = {
    (B,): _whole_book,
    (B, N): _book_number,
    (B, N, C, N): _chapter_verse,
    (B, N, C, N, D, N): _verse_range,
    (B, N, C, N, D, N, C, N): _chapter_verse_range,
    (B, N, D, N): _number_range,
    (B, N, D, B, N): _book_number_to_book_number,
    (B, N, C, N, D, B, N): _verse_to_book_number,
    (B, N, C, N, D, B, N, C, N): _verse_to_verse,
    (B, N, D, B, N, C, N): _book_number_to_verse,
    (B, D, B, N): _book_to_book_number,
    (B, D, B): _book_to_book,
}


def shape_of(tokens: Sequence[Token]) -> Tuple[TokenKind, ...]:
    return tuple(token.kind for token in tokens)


def resolve(tokens: List[Token]) -> Result[Reference]:
    """Resolve tokens to a validated Reference."""
    if not tokens:
        return Err(NO_REFERENCE, ErrorKind.SHAPE)

    shape = shape_of(tokens)
    rule = SHAPES.get(shape)
    if rule is None:
        logger.debug(
            "Unrecognized reference shape",
            shape="".join(kind.value[0].upper() for kind in shape),
        )
        return Err(NO_VALID_REFERENCE, ErrorKind.SHAPE)

    return validate(rule(tokens))
