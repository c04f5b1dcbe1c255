"""bibleref test suite."""
