"""
bibleref - Reference Types

A ``Reference`` is a validated span from a start (book, chapter, verse)
to an end (book, chapter, verse). Instances handed out by the public API
have always passed validation.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, NamedTuple, Tuple

from .books import Book, book_name


class EncodedReference(NamedTuple):
    """Sortable integer form: book*1_000_000 + chapter*1_000 + verse."""
    start: int
    end: int


@dataclass(frozen=True, order=True)
class Reference:
    """A span of scripture; field order gives canonical sort order."""

    start_book: Book
    start_chapter: int
    start_verse: int
    end_book: Book
    end_chapter: int
    end_verse: int

    @property
    def start_book_name(self) -> str:
        return book_name(self.start_book)

    @property
    def end_book_name(self) -> str:
        return book_name(self.end_book)

    @property
    def start(self) -> Tuple[Book, int, int]:
        return self.start_book, self.start_chapter, self.start_verse

    @property
    def end(self) -> Tuple[Book, int, int]:
        return self.end_book, self.end_chapter, self.end_verse

    @property
    def is_single_verse(self) -> bool:
        return self.start == self.end

    @classmethod
    def parse(cls, text: str) -> "Reference":
        """Parse text, raising a ``BibleRefError`` subclass on failure."""
        from .parser import from_string

        return from_string(text).unwrap()

    def format(self) -> str:
        from .formatting import format_reference

        return format_reference(self)

    def encode(self) -> EncodedReference:
        from .codec import encode

        return encode(self)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["start_book"] = self.start_book_name
        data["end_book"] = self.end_book_name
        return data

    def __str__(self) -> str:
        return self.format()
