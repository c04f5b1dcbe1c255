"""
bibleref - Canonical Formatting

Renders a Reference as the shortest text that parses back to the same
Reference. Chapter numbers are dropped for single-chapter books and
repeated parts are never written twice.
"""
from __future__ import annotations

from .books import is_single_chapter
from .reference import Reference


def _verse_span(start: int, end: int) -> str:
    if start == end:
        return str(start)
    return f"{start}-{end}"


def format_reference(ref: Reference) -> str:
    """Canonical text, e.g. "Genesis 1:1 - Exodus 5:23" or "Jude 3-5"."""
    start_name = ref.start_book_name
    start_single = is_single_chapter(ref.start_book)

    if ref.start_book == ref.end_book:
        if start_single:
            return f"{start_name} {_verse_span(ref.start_verse, ref.end_verse)}"
        if ref.start_chapter == ref.end_chapter:
            verses = _verse_span(ref.start_verse, ref.end_verse)
            return f"{start_name} {ref.start_chapter}:{verses}"
        return (
            f"{start_name} {ref.start_chapter}:{ref.start_verse}"
            f"-{ref.end_chapter}:{ref.end_verse}"
        )

    if start_single:
        start = f"{start_name} {ref.start_verse}"
    else:
        start = f"{start_name} {ref.start_chapter}:{ref.start_verse}"

    if is_single_chapter(ref.end_book):
        end = f"{ref.end_book_name} {ref.end_verse}"
    else:
        end = f"{ref.end_book_name} {ref.end_chapter}:{ref.end_verse}"

    return f"{start} - {end}"
