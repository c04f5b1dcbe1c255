"""
bibleref - Test Configuration

Pytest fixtures and configuration for all tests.
"""
import os

import pytest
from hypothesis import settings

from bibleref import Book, Reference

settings.register_profile("dev", max_examples=200, deadline=None)
settings.register_profile("ci", max_examples=1000, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def genesis_1_1() -> Reference:
    """Genesis 1:1 as a single-verse reference."""
    return Reference(Book.GENESIS, 1, 1, Book.GENESIS, 1, 1)


@pytest.fixture
def whole_bible() -> Reference:
    """Genesis 1:1 through Revelation 22:21."""
    return Reference(Book.GENESIS, 1, 1, Book.REVELATION, 22, 21)


@pytest.fixture
def single_chapter_books() -> set:
    """Books with exactly one chapter."""
    return {Book.OBADIAH, Book.PHILEMON, Book.SECOND_JOHN, Book.THIRD_JOHN, Book.JUDE}


# Test data validation helpers
def assert_reference_invariants(ref: Reference):
    """Assert that a reference satisfies the ordering invariants."""
    assert ref.start_book <= ref.end_book, f"Books out of order: {ref!r}"
    if ref.start_book == ref.end_book:
        assert ref.start_chapter <= ref.end_chapter, f"Chapters out of order: {ref!r}"
        if ref.start_chapter == ref.end_chapter:
            assert ref.start_verse <= ref.end_verse, f"Verses out of order: {ref!r}"


# Markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "property: marks property-based tests using Hypothesis")
    config.addinivalue_line("markers", "cli: marks command-line tests")
