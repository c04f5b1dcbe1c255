"""
Tests for bibleref/resolver.py and bibleref/parser.py - Shape Resolution.

Covers:
- Every recognized token shape and its default filling
- Single-chapter books on each side of a range
- Shape and bounds errors surfaced through from_string
"""
import pytest

from bibleref import Book, Reference, from_string
from bibleref.resolver import NO_REFERENCE, SHAPES, resolve, shape_of
from bibleref.result import ErrorKind
from bibleref.tokenizer import NO_VALID_REFERENCE, tokenize

B = Book


def ref(sb, sc, sv, eb, ec, ev):
    return Reference(sb, sc, sv, eb, ec, ev)


class TestShapes:
    """One case per recognized shape."""

    @pytest.mark.parametrize("text, expected", [
        # B
        ("Genesis", ref(B.GENESIS, 1, 1, B.GENESIS, 50, 26)),
        ("Jude", ref(B.JUDE, 1, 1, B.JUDE, 1, 25)),
        # B N
        ("Genesis 1", ref(B.GENESIS, 1, 1, B.GENESIS, 1, 31)),
        ("Jude 5", ref(B.JUDE, 1, 5, B.JUDE, 1, 5)),
        # B N : N
        ("Gen 1:1", ref(B.GENESIS, 1, 1, B.GENESIS, 1, 1)),
        ("John 3:16", ref(B.JOHN, 3, 16, B.JOHN, 3, 16)),
        # B N : N - N
        ("Genesis 1:1-5", ref(B.GENESIS, 1, 1, B.GENESIS, 1, 5)),
        # B N : N - N : N
        ("Genesis 1:20-2:24", ref(B.GENESIS, 1, 20, B.GENESIS, 2, 24)),
        # B N - N
        ("Genesis 1-3", ref(B.GENESIS, 1, 1, B.GENESIS, 3, 24)),
        ("Jude 3-5", ref(B.JUDE, 1, 3, B.JUDE, 1, 5)),
        # B N - B N
        ("Matthew 1 - Jude 12", ref(B.MATTHEW, 1, 1, B.JUDE, 1, 12)),
        ("Obadiah 3 - Jonah 2", ref(B.OBADIAH, 1, 3, B.JONAH, 2, 10)),
        # B N : N - B N
        ("Genesis 1:1 - Exodus 5", ref(B.GENESIS, 1, 1, B.EXODUS, 5, 23)),
        ("Hebrews 13:20 - James 2", ref(B.HEBREWS, 13, 20, B.JAMES, 2, 26)),
        ("Titus 3:1 - Philemon 4", ref(B.TITUS, 3, 1, B.PHILEMON, 1, 4)),
        # B N : N - B N : N
        ("Genesis 1:1 - Exodus 5:3", ref(B.GENESIS, 1, 1, B.EXODUS, 5, 3)),
        # B N - B N : N
        ("Genesis 1 - Exodus 5:3", ref(B.GENESIS, 1, 1, B.EXODUS, 5, 3)),
        ("Philemon 3 - Hebrews 1:2", ref(B.PHILEMON, 1, 3, B.HEBREWS, 1, 2)),
        # B - B N
        ("Genesis - Exodus 5", ref(B.GENESIS, 1, 1, B.EXODUS, 5, 23)),
        ("2 John - 3 John 4", ref(B.SECOND_JOHN, 1, 1, B.THIRD_JOHN, 1, 4)),
        # B - B
        ("Genesis - Revelation", ref(B.GENESIS, 1, 1, B.REVELATION, 22, 21)),
    ])
    def test_shape(self, text, expected):
        assert from_string(text).unwrap() == expected

    def test_every_shape_is_exercised(self):
        assert len(SHAPES) == 12

    def test_shape_of(self):
        tokens = tokenize("gen 1:1 - exod 5").unwrap()
        assert len(shape_of(tokens)) == 7
        assert shape_of(tokens) in SHAPES


class TestScenarios:
    """End-to-end parsing cases."""

    def test_gen_1_1(self, genesis_1_1):
        result = from_string("Gen 1:1")
        assert result.is_ok
        assert result.value == genesis_1_1
        assert result.value.format() == "Genesis 1:1"

    def test_cross_book_fills_last_verse(self):
        result = from_string("Genesis 1:1 - Exodus 5")
        assert result.value.end_verse == 23
        assert result.value.format() == "Genesis 1:1 - Exodus 5:23"

    def test_whole_bible(self, whole_bible):
        assert from_string("Genesis - Revelation").value == whole_bible

    def test_input_is_trimmed_and_case_folded(self):
        assert from_string("  JOHN 3:16\n").value == from_string("john 3:16").value

    def test_numbered_books(self):
        assert from_string("1 John 1:9").value.start_book == B.FIRST_JOHN
        assert from_string("II Corinthians 5:17").value.start_book == B.SECOND_CORINTHIANS
        assert from_string("John 1:9").value.start_book == B.JOHN
        assert from_string("I  John 1:9").value.start_book == B.FIRST_JOHN


class TestErrors:
    """Rejected inputs and their messages."""

    @pytest.mark.parametrize("text, message", [
        ("Jude 32", "Jude only has 25 verses"),
        ("Mark 2-1", "End chapter must come after start chapter"),
        ("Gen 1:5-2", "End verse must come after start verse"),
        ("Exodus 1 - Genesis 2", "End book must come after start book"),
        ("Mark 20", "Mark only has 16 chapters"),
        ("Genesis 1:32", "Genesis 1 only has 31 verses"),
        ("Genesis 1:1 - Exodus 41", "Exodus only has 40 chapters"),
        ("Gen 0:1", "Chapter numbers start at 1"),
        ("Jude 0", "Verse numbers start at 1"),
    ])
    def test_validation_messages(self, text, message):
        assert from_string(text).error == message

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, text):
        result = from_string(text)
        assert result.error == NO_REFERENCE
        assert result.kind == ErrorKind.SHAPE

    @pytest.mark.parametrize("text", [
        "1:1",
        "Genesis Exodus",
        "Genesis 1:1:1",
        "Genesis 1 2",
        "Genesis 1:1 - Exodus",
        "Genesis -",
    ])
    def test_unknown_shape(self, text):
        result = from_string(text)
        assert result.error == NO_VALID_REFERENCE
        assert result.kind == ErrorKind.SHAPE

    @pytest.mark.parametrize("text", ["hello", "John 3:16; Rom 3:23", "Gen 1:1 and more"])
    def test_syntax_error(self, text):
        result = from_string(text)
        assert result.error == NO_VALID_REFERENCE
        assert result.kind == ErrorKind.SYNTAX
        assert result.position is not None

    def test_resolve_empty_list(self):
        assert resolve([]).error == NO_REFERENCE
