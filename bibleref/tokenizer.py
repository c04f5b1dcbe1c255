"""
bibleref - Tokenizer

Turns lower-cased reference text into a flat list of tokens: book names,
integers, dashes and colons. Whitespace between tokens is skipped; any
other character is a syntax error.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .books import Book, match_book_at
from .result import Err, ErrorKind, Ok, Result

NO_VALID_REFERENCE = "No valid reference found"

DASHES = frozenset("-–—")  # hyphen, en dash, em dash
COLON = ":"

_WHITESPACE_RE = re.compile(r"\s+")
_DIGITS_RE = re.compile(r"[0-9]+")


class TokenKind(str, Enum):
    BOOK = "book"
    NUMBER = "number"
    DASH = "dash"
    COLON = "colon"


@dataclass(frozen=True)
class BookToken:
    book: Book
    position: int = 0
    kind = TokenKind.BOOK


@dataclass(frozen=True)
class NumberToken:
    value: int
    position: int = 0
    kind = TokenKind.NUMBER


@dataclass(frozen=True)
class DashToken:
    position: int = 0
    kind = TokenKind.DASH


@dataclass(frozen=True)
class ColonToken:
    position: int = 0
    kind = TokenKind.COLON


Token = Union[BookToken, NumberToken, DashToken, ColonToken]


def tokenize(text: str) -> Result[List[Token]]:
    """
    Split text into tokens.

    The text is expected lower-cased. On an unreadable character the
    result is an Err carrying that character's offset.

    >>> tokenize("gen 1:1").unwrap()
    [BookToken(book=<Book.GENESIS: 1>, position=0), NumberToken(value=1, position=4), ColonToken(position=5), NumberToken(value=1, position=6)]
    """
    tokens: List[Token] = []
    pos = 0
    length = len(text)

    while pos < length:
        space = _WHITESPACE_RE.match(text, pos)
        if space:
            pos = space.end()
            continue

        book_match = match_book_at(text, pos)
        if book_match:
            book, end = book_match
            tokens.append(BookToken(book, pos))
            pos = end
            continue

        char = text[pos]
        if char in DASHES:
            tokens.append(DashToken(pos))
            pos += 1
            continue

        if char == COLON:
            tokens.append(ColonToken(pos))
            pos += 1
            continue

        digits = _DIGITS_RE.match(text, pos)
        if digits:
            tokens.append(NumberToken(int(digits.group()), pos))
            pos = digits.end()
            continue

        return Err(NO_VALID_REFERENCE, ErrorKind.SYNTAX, position=pos)

    return Ok(tokens)
