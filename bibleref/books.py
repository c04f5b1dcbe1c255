"""
bibleref - Book Registry

The 66 books of the Protestant canon in canonical order, with display
names, recognized name aliases and King James verse counts per chapter.

Alias notes:
  - Aliases are lowercase regex fragments, most specific first.
  - Every pattern must start and end on a word boundary, so "phil" does
    not claim "philemon" and "gen" does not claim "general".
  - Registry order is match priority. The bare "John" pattern refuses a
    preceding 1/2/3/i qualifier so that "1 John" is never read as John.
  - Roman numeral prefixes need a following space ("i sam"), otherwise
    "isa" would read as 1 Samuel.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Pattern, Tuple

from .result import Err, ErrorKind, Ok, Result

BOOK_COUNT = 66

INVALID_BOOK_NUMBER = "Invalid book number"

_FIRST = r"(?:1\s*|i\s+|first\s+)"
_SECOND = r"(?:2\s*|ii\s+|second\s+)"
_THIRD = r"(?:3\s*|iii\s+|third\s+)"

_WHITESPACE_RUN = re.compile(r"\s+")


class Book(IntEnum):
    """A book of the canon; the value is its 1-based canonical position."""
    GENESIS = 1
    EXODUS = 2
    LEVITICUS = 3
    NUMBERS = 4
    DEUTERONOMY = 5
    JOSHUA = 6
    JUDGES = 7
    RUTH = 8
    FIRST_SAMUEL = 9
    SECOND_SAMUEL = 10
    FIRST_KINGS = 11
    SECOND_KINGS = 12
    FIRST_CHRONICLES = 13
    SECOND_CHRONICLES = 14
    EZRA = 15
    NEHEMIAH = 16
    ESTHER = 17
    JOB = 18
    PSALMS = 19
    PROVERBS = 20
    ECCLESIASTES = 21
    SONG_OF_SOLOMON = 22
    ISAIAH = 23
    JEREMIAH = 24
    LAMENTATIONS = 25
    EZEKIEL = 26
    DANIEL = 27
    HOSEA = 28
    JOEL = 29
    AMOS = 30
    OBADIAH = 31
    JONAH = 32
    MICAH = 33
    NAHUM = 34
    HABAKKUK = 35
    ZEPHANIAH = 36
    HAGGAI = 37
    ZECHARIAH = 38
    MALACHI = 39
    MATTHEW = 40
    MARK = 41
    LUKE = 42
    JOHN = 43
    ACTS = 44
    ROMANS = 45
    FIRST_CORINTHIANS = 46
    SECOND_CORINTHIANS = 47
    GALATIANS = 48
    EPHESIANS = 49
    PHILIPPIANS = 50
    COLOSSIANS = 51
    FIRST_THESSALONIANS = 52
    SECOND_THESSALONIANS = 53
    FIRST_TIMOTHY = 54
    SECOND_TIMOTHY = 55
    TITUS = 56
    PHILEMON = 57
    HEBREWS = 58
    JAMES = 59
    FIRST_PETER = 60
    SECOND_PETER = 61
    FIRST_JOHN = 62
    SECOND_JOHN = 63
    THIRD_JOHN = 64
    JUDE = 65
    REVELATION = 66


@dataclass(frozen=True)
class BookInfo:
    """Registry row for one book."""
    book: Book
    name: str
    aliases: Tuple[str, ...]
    verses: Tuple[int, ...]
    pattern: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = re.compile(
            r"(?<![a-z0-9])(?:" + "|".join(self.aliases) + r")(?![a-z])\.?"
        )
        object.__setattr__(self, "pattern", compiled)

    @property
    def chapters(self) -> int:
        return len(self.verses)


_SAMUEL = r"(?:samuel|sam|sa|sm)"
_KINGS = r"(?:kings|kgs|kin|ki)"
_CHRONICLES = r"(?:chronicles|chron|chr|ch)"
_CORINTHIANS = r"(?:corinthians|cor|co)"
_THESSALONIANS = r"(?:thessalonians|thess|thes|th)"
_TIMOTHY = r"(?:timothy|tim|ti)"
_PETER = r"(?:peter|pet|pe|pt)"
_JOHN = r"(?:john|joh|jhn|jn)"

_BOOK_TABLE = (
    # ── Old Testament ────────────────────────────────────────────────────
    (Book.GENESIS, "Genesis", ("genesis", "gen", "gn", "ge"), (
        31, 25, 24, 26, 32, 22, 24, 22, 29, 32, 32, 20, 18, 24, 21, 16, 27,
        33, 38, 18, 34, 24, 20, 67, 34, 35, 46, 22, 35, 43, 55, 32, 20, 31,
        29, 43, 36, 30, 23, 23, 57, 38, 34, 34, 28, 34, 31, 22, 33, 26)),
    (Book.EXODUS, "Exodus", ("exodus", "exod", "exo", "ex"), (
        22, 25, 22, 31, 23, 30, 25, 32, 35, 29, 10, 51, 22, 31, 27, 36, 16,
        27, 25, 26, 36, 31, 33, 18, 40, 37, 21, 43, 46, 38, 18, 35, 23, 35,
        35, 38, 29, 31, 43, 38)),
    (Book.LEVITICUS, "Leviticus", ("leviticus", "lev", "lv"), (
        17, 16, 17, 35, 19, 30, 38, 36, 24, 20, 47, 8, 59, 57, 33, 34, 16,
        30, 37, 27, 24, 33, 44, 23, 55, 46, 34)),
    (Book.NUMBERS, "Numbers", ("numbers", "numb", "num", "nm", "nu"), (
        54, 34, 51, 49, 31, 27, 89, 26, 23, 36, 35, 16, 33, 45, 41, 50, 13,
        32, 22, 29, 35, 41, 30, 25, 18, 65, 23, 31, 40, 16, 54, 42, 56, 29,
        34, 13)),
    (Book.DEUTERONOMY, "Deuteronomy", ("deuteronomy", "deut", "deu", "dt"), (
        46, 37, 29, 49, 33, 25, 26, 20, 29, 22, 32, 32, 18, 29, 23, 22, 20,
        22, 21, 20, 23, 30, 25, 22, 19, 19, 26, 68, 29, 20, 30, 52, 29, 12)),
    (Book.JOSHUA, "Joshua", ("joshua", "josh", "jos"), (
        18, 24, 17, 24, 15, 27, 26, 35, 27, 43, 23, 24, 33, 15, 63, 10, 18,
        28, 51, 9, 45, 34, 16, 33)),
    (Book.JUDGES, "Judges", ("judges", "judg", "jdgs", "jdg"), (
        36, 23, 31, 24, 31, 40, 25, 35, 57, 18, 40, 15, 25, 20, 20, 31, 13,
        31, 30, 48, 25)),
    (Book.RUTH, "Ruth", ("ruth", "rut", "rth", "ru"), (
        22, 23, 18, 22)),
    (Book.FIRST_SAMUEL, "1 Samuel", (_FIRST + _SAMUEL,), (
        28, 36, 21, 22, 12, 21, 17, 22, 27, 27, 15, 25, 23, 52, 35, 23, 58,
        30, 24, 42, 15, 23, 29, 22, 44, 25, 12, 25, 11, 31, 13)),
    (Book.SECOND_SAMUEL, "2 Samuel", (_SECOND + _SAMUEL,), (
        27, 32, 39, 12, 25, 23, 29, 18, 13, 19, 27, 31, 39, 33, 37, 23, 29,
        33, 43, 26, 22, 51, 39, 25)),
    (Book.FIRST_KINGS, "1 Kings", (_FIRST + _KINGS,), (
        53, 46, 28, 34, 18, 38, 51, 66, 28, 29, 43, 33, 34, 31, 34, 34, 24,
        46, 21, 43, 29, 53)),
    (Book.SECOND_KINGS, "2 Kings", (_SECOND + _KINGS,), (
        18, 25, 27, 44, 27, 33, 20, 29, 37, 36, 21, 21, 25, 29, 38, 20, 41,
        37, 37, 21, 26, 20, 37, 20, 30)),
    (Book.FIRST_CHRONICLES, "1 Chronicles", (_FIRST + _CHRONICLES,), (
        54, 55, 24, 43, 26, 81, 40, 40, 44, 14, 47, 40, 14, 17, 29, 43, 27,
        17, 19, 8, 30, 19, 32, 31, 31, 32, 34, 21, 30)),
    (Book.SECOND_CHRONICLES, "2 Chronicles", (_SECOND + _CHRONICLES,), (
        17, 18, 17, 22, 14, 42, 22, 18, 31, 19, 23, 16, 22, 15, 19, 14, 19,
        34, 11, 37, 20, 12, 21, 27, 28, 23, 9, 27, 36, 27, 21, 33, 25, 33,
        27, 23)),
    (Book.EZRA, "Ezra", ("ezra", "ezr"), (
        11, 70, 13, 24, 17, 22, 28, 36, 15, 44)),
    (Book.NEHEMIAH, "Nehemiah", ("nehemiah", "neh", "ne"), (
        11, 20, 32, 23, 19, 19, 73, 18, 38, 39, 36, 47, 31)),
    (Book.ESTHER, "Esther", ("esther", "esth", "est", "es"), (
        22, 23, 15, 17, 14, 14, 10, 17, 32, 3)),
    (Book.JOB, "Job", ("job", "jb"), (
        22, 13, 26, 21, 27, 30, 21, 22, 35, 22, 20, 25, 28, 22, 35, 22, 16,
        21, 29, 29, 34, 30, 17, 25, 6, 14, 23, 28, 25, 31, 40, 22, 33, 37,
        16, 33, 24, 41, 30, 24, 34, 17)),
    (Book.PSALMS, "Psalms", ("psalms", "psalm", "pslm", "psa", "psm", "pss", "ps"), (
        6, 12, 8, 8, 12, 10, 17, 9, 20, 18, 7, 8, 6, 7, 5, 11, 15, 50, 14, 9,
        13, 31, 6, 10, 22, 12, 14, 9, 11, 12, 24, 11, 22, 22, 28, 12, 40, 22,
        13, 17, 13, 11, 5, 26, 17, 11, 9, 14, 20, 23, 19, 9, 6, 7, 23, 13, 11,
        11, 17, 12, 8, 12, 11, 10, 13, 20, 7, 35, 36, 5, 24, 20, 28, 23, 10,
        12, 20, 72, 13, 19, 16, 8, 18, 12, 13, 17, 7, 18, 52, 17, 16, 15, 5,
        23, 11, 13, 12, 9, 9, 5, 8, 28, 22, 35, 45, 48, 43, 13, 31, 7, 10, 10,
        9, 8, 18, 19, 2, 29, 176, 7, 8, 9, 4, 8, 5, 6, 5, 6, 8, 8, 3, 18, 3, 3,
        21, 26, 9, 8, 24, 13, 10, 7, 12, 15, 21, 10, 20, 14, 9, 6)),
    (Book.PROVERBS, "Proverbs", ("proverbs", "prov", "prv", "pro", "pr"), (
        33, 22, 35, 27, 23, 35, 27, 36, 18, 32, 31, 28, 25, 35, 33, 33, 28,
        24, 29, 30, 31, 29, 35, 34, 28, 28, 27, 28, 27, 33, 31)),
    (Book.ECCLESIASTES, "Ecclesiastes",
     ("ecclesiastes", "eccles", "eccl", "ecc", "ec", "qoheleth", "qoh"), (
        18, 26, 22, 16, 20, 12, 29, 17, 18, 20, 10, 14)),
    (Book.SONG_OF_SOLOMON, "Song of Solomon",
     (r"song\s+of\s+(?:solomon|songs|sol)", "song", "sos", "canticles", "cant"), (
        17, 17, 11, 16, 16, 13, 13, 14)),
    (Book.ISAIAH, "Isaiah", ("isaiah", "isa"), (
        31, 22, 26, 6, 30, 13, 25, 22, 21, 34, 16, 6, 22, 32, 9, 14, 14, 7,
        25, 6, 17, 25, 18, 23, 12, 21, 13, 29, 24, 33, 9, 20, 24, 17, 10, 22,
        38, 22, 8, 31, 29, 25, 28, 28, 25, 13, 15, 22, 26, 11, 23, 15, 12, 17,
        13, 12, 21, 14, 21, 22, 11, 12, 19, 12, 25, 24)),
    (Book.JEREMIAH, "Jeremiah", ("jeremiah", "jer", "je", "jr"), (
        19, 37, 25, 31, 31, 30, 34, 22, 26, 25, 23, 17, 27, 22, 21, 21, 27,
        23, 15, 18, 14, 30, 40, 10, 38, 24, 22, 17, 32, 24, 40, 44, 26, 22,
        19, 32, 21, 28, 18, 16, 18, 22, 13, 30, 5, 28, 7, 47, 39, 46, 64, 34)),
    (Book.LAMENTATIONS, "Lamentations", ("lamentations", "lam", "la"), (
        22, 22, 66, 22, 22)),
    (Book.EZEKIEL, "Ezekiel", ("ezekiel", "ezek", "eze", "ezk"), (
        28, 10, 27, 17, 17, 14, 27, 18, 11, 22, 25, 28, 23, 23, 8, 63, 24, 32,
        14, 49, 32, 31, 49, 27, 17, 21, 36, 26, 21, 26, 18, 32, 33, 31, 15,
        38, 28, 23, 29, 49, 26, 20, 27, 31, 25, 24, 23, 35)),
    (Book.DANIEL, "Daniel", ("daniel", "dan", "da", "dn"), (
        21, 49, 30, 37, 31, 28, 28, 27, 27, 21, 45, 13)),
    (Book.HOSEA, "Hosea", ("hosea", "hos", "ho"), (
        11, 23, 5, 19, 15, 11, 16, 14, 17, 15, 12, 14, 16, 9)),
    (Book.JOEL, "Joel", ("joel", "jl"), (
        20, 32, 21)),
    (Book.AMOS, "Amos", ("amos", "am"), (
        15, 16, 15, 13, 27, 14, 17, 14, 15)),
    (Book.OBADIAH, "Obadiah", ("obadiah", "obad", "oba", "ob"), (
        21,)),
    (Book.JONAH, "Jonah", ("jonah", "jon", "jnh"), (
        17, 10, 10, 11)),
    (Book.MICAH, "Micah", ("micah", "mic", "mc"), (
        16, 13, 12, 13, 15, 16, 20)),
    (Book.NAHUM, "Nahum", ("nahum", "nah", "na"), (
        15, 13, 19)),
    (Book.HABAKKUK, "Habakkuk", ("habakkuk", "hab", "hb"), (
        17, 20, 19)),
    (Book.ZEPHANIAH, "Zephaniah", ("zephaniah", "zeph", "zep", "zp"), (
        18, 15, 20)),
    (Book.HAGGAI, "Haggai", ("haggai", "hag", "hg"), (
        15, 23)),
    (Book.ZECHARIAH, "Zechariah", ("zechariah", "zech", "zec", "zc"), (
        21, 13, 10, 14, 11, 15, 14, 23, 17, 12, 17, 14, 9, 21)),
    (Book.MALACHI, "Malachi", ("malachi", "mal", "ml"), (
        14, 17, 18, 6)),
    # ── New Testament ────────────────────────────────────────────────────
    (Book.MATTHEW, "Matthew", ("matthew", "matt", "mat", "mt"), (
        25, 23, 17, 25, 48, 34, 29, 34, 38, 42, 30, 50, 58, 36, 39, 28, 27,
        35, 30, 34, 46, 46, 39, 51, 46, 75, 66, 20)),
    (Book.MARK, "Mark", ("mark", "mrk", "mar", "mk", "mr"), (
        45, 28, 35, 41, 43, 56, 37, 38, 50, 52, 33, 44, 37, 72, 47, 20)),
    (Book.LUKE, "Luke", ("luke", "luk", "lk"), (
        80, 52, 38, 44, 39, 49, 50, 56, 62, 42, 54, 59, 35, 35, 32, 31, 37,
        43, 48, 47, 38, 71, 56, 53)),
    (Book.JOHN, "John",
     (r"(?<![123i]\s)(?<![123])(?<!first\s)(?<!second\s)(?<!third\s)" + _JOHN,), (
        51, 25, 36, 54, 47, 71, 53, 59, 41, 42, 57, 50, 38, 31, 27, 33, 26,
        40, 42, 31, 25)),
    (Book.ACTS, "Acts", ("acts", "act", "ac"), (
        26, 47, 26, 37, 42, 15, 60, 40, 43, 48, 30, 25, 52, 28, 41, 40, 34,
        28, 41, 38, 40, 30, 35, 27, 27, 32, 44, 31)),
    (Book.ROMANS, "Romans", ("romans", "rom", "ro", "rm"), (
        32, 29, 31, 25, 21, 23, 25, 39, 33, 21, 36, 21, 14, 23, 33, 27)),
    (Book.FIRST_CORINTHIANS, "1 Corinthians", (_FIRST + _CORINTHIANS,), (
        31, 16, 23, 21, 13, 20, 40, 13, 27, 33, 34, 31, 13, 40, 58, 24)),
    (Book.SECOND_CORINTHIANS, "2 Corinthians", (_SECOND + _CORINTHIANS,), (
        24, 17, 18, 18, 21, 18, 16, 24, 15, 18, 33, 21, 14)),
    (Book.GALATIANS, "Galatians", ("galatians", "gal", "ga"), (
        24, 21, 29, 31, 26, 18)),
    (Book.EPHESIANS, "Ephesians", ("ephesians", "ephes", "eph"), (
        23, 22, 21, 32, 33, 24)),
    (Book.PHILIPPIANS, "Philippians", ("philippians", "phil", "php", "pp"), (
        30, 30, 21, 23)),
    (Book.COLOSSIANS, "Colossians", ("colossians", "col"), (
        29, 23, 25, 18)),
    (Book.FIRST_THESSALONIANS, "1 Thessalonians", (_FIRST + _THESSALONIANS,), (
        10, 20, 13, 18, 28)),
    (Book.SECOND_THESSALONIANS, "2 Thessalonians", (_SECOND + _THESSALONIANS,), (
        12, 17, 18)),
    (Book.FIRST_TIMOTHY, "1 Timothy", (_FIRST + _TIMOTHY,), (
        20, 15, 16, 16, 25, 21)),
    (Book.SECOND_TIMOTHY, "2 Timothy", (_SECOND + _TIMOTHY,), (
        18, 26, 17, 22)),
    (Book.TITUS, "Titus", ("titus", "tit"), (
        16, 15, 15)),
    (Book.PHILEMON, "Philemon", ("philemon", "philem", "phlm", "phm"), (
        25,)),
    (Book.HEBREWS, "Hebrews", ("hebrews", "heb"), (
        14, 18, 19, 16, 14, 20, 28, 13, 28, 39, 40, 29, 25)),
    (Book.JAMES, "James", ("james", "jas", "jm"), (
        27, 26, 18, 17, 20)),
    (Book.FIRST_PETER, "1 Peter", (_FIRST + _PETER,), (
        25, 25, 22, 19, 14)),
    (Book.SECOND_PETER, "2 Peter", (_SECOND + _PETER,), (
        21, 22, 18)),
    (Book.FIRST_JOHN, "1 John", (_FIRST + _JOHN,), (
        10, 29, 24, 21, 21)),
    (Book.SECOND_JOHN, "2 John", (_SECOND + _JOHN,), (
        13,)),
    (Book.THIRD_JOHN, "3 John", (_THIRD + _JOHN,), (
        14,)),
    (Book.JUDE, "Jude", ("jude", "jud", "jd"), (
        25,)),
    (Book.REVELATION, "Revelation",
     ("revelations", "revelation", "rev", "re", "rv"), (
        20, 29, 22, 11, 14, 17, 17, 13, 21, 11, 19, 17, 18, 20, 8, 21, 18,
        24, 21, 15, 27, 21)),
)

# Registry order is match priority.
BOOKS: Tuple[BookInfo, ...] = tuple(
    BookInfo(book=book, name=name, aliases=aliases, verses=verses)
    for book, name, aliases, verses in _BOOK_TABLE
)

assert len(BOOKS) == BOOK_COUNT
assert all(info.book == index for index, info in enumerate(BOOKS, start=1))


def book_info(book: Book) -> BookInfo:
    return BOOKS[book - 1]


def book_name(book: Book) -> str:
    """Canonical display name, e.g. "1 Corinthians"."""
    return BOOKS[book - 1].name


def num_chapters(book: Book) -> int:
    return BOOKS[book - 1].chapters


def num_verses(book: Book, chapter: int) -> int:
    """
    Verse count of a chapter.

    Returns 0 for a chapter the book does not have; callers rely on
    validation to report the bad chapter.
    """
    verses = BOOKS[book - 1].verses
    if 1 <= chapter <= len(verses):
        return verses[chapter - 1]
    return 0


def is_single_chapter(book: Book) -> bool:
    return num_chapters(book) == 1


def book_index(book: Book) -> int:
    return int(book)


def book_from_index(index: int) -> Result[Book]:
    if isinstance(index, int) and 1 <= index <= BOOK_COUNT:
        return Ok(Book(index))
    return Err(INVALID_BOOK_NUMBER, ErrorKind.CODEC)


def match_book_name(text: str) -> Optional[Book]:
    """
    Find the first book, in registry order, whose aliases occur in text.

    >>> match_book_name("1 John")
    <Book.FIRST_JOHN: 62>
    """
    # Single spaces keep the fixed-width John lookbehinds effective.
    lowered = _WHITESPACE_RUN.sub(" ", text.lower())
    for info in BOOKS:
        if info.pattern.search(lowered):
            return info.book
    return None


def match_book_at(text: str, pos: int) -> Optional[Tuple[Book, int]]:
    """Match a book alias starting exactly at pos; returns (book, end)."""
    for info in BOOKS:
        match = info.pattern.match(text, pos)
        if match:
            return info.book, match.end()
    return None
