"""
Custom Hypothesis Strategies for Bible References

Provides domain-specific strategies for generating valid references and
reference text.
"""
from hypothesis import strategies as st

from bibleref import BOOKS, Book, Reference, num_chapters, num_verses

ALL_BOOKS = list(Book)

SINGLE_CHAPTER_BOOKS = [info.book for info in BOOKS if info.chapters == 1]

DASHES = ["-", "–", "—"]


# =============================================================================
# BOOK AND POINT STRATEGIES
# =============================================================================

def book_strategy():
    """Generate any of the 66 books."""
    return st.sampled_from(ALL_BOOKS)


@st.composite
def point_strategy(draw, book=None):
    """
    Generate an in-bounds (book, chapter, verse) triple.

    Args:
        book: Fix the book instead of drawing one.
    """
    if book is None:
        book = draw(book_strategy())
    chapter = draw(st.integers(min_value=1, max_value=num_chapters(book)))
    verse = draw(st.integers(min_value=1, max_value=num_verses(book, chapter)))
    return book, chapter, verse


# =============================================================================
# REFERENCE STRATEGIES
# =============================================================================

@st.composite
def reference_strategy(draw, same_book=None):
    """
    Generate a valid Reference.

    Args:
        same_book: True forces one book, False forces two different books,
            None allows either.
    """
    if same_book is False:
        start_book = draw(st.sampled_from(ALL_BOOKS[:-1]))
    else:
        start_book = draw(book_strategy())
    start_book, start_chapter, start_verse = draw(point_strategy(book=start_book))

    if same_book is True:
        end_book = start_book
    elif same_book is False:
        end_book = draw(st.sampled_from([b for b in ALL_BOOKS if b > start_book]))
    else:
        end_book = draw(st.sampled_from([b for b in ALL_BOOKS if b >= start_book]))

    min_chapter = start_chapter if end_book == start_book else 1
    end_chapter = draw(st.integers(min_value=min_chapter, max_value=num_chapters(end_book)))

    same_chapter = (end_book, end_chapter) == (start_book, start_chapter)
    min_verse = start_verse if same_chapter else 1
    end_verse = draw(
        st.integers(min_value=min_verse, max_value=num_verses(end_book, end_chapter))
    )
    return Reference(start_book, start_chapter, start_verse, end_book, end_chapter, end_verse)


def any_reference_strategy():
    """Valid references, weighted so both one-book and two-book spans appear."""
    return st.one_of(
        reference_strategy(same_book=True),
        reference_strategy(same_book=False),
    )


# =============================================================================
# TEXT STRATEGIES
# =============================================================================

@st.composite
def verse_text_strategy(draw):
    """Generate 'Name chapter:verse' text for a multi-chapter book, with its triple."""
    book = draw(st.sampled_from([b for b in ALL_BOOKS if b not in SINGLE_CHAPTER_BOOKS]))
    book, chapter, verse = draw(point_strategy(book=book))
    name = BOOKS[book - 1].name
    casing = draw(st.sampled_from([str.lower, str.upper, str.title, lambda s: s]))
    spacing = draw(st.sampled_from(["", " ", "  "]))
    return f"{casing(name)} {chapter}{spacing}:{spacing}{verse}", (book, chapter, verse)


def dash_strategy():
    return st.sampled_from(DASHES)
