"""Property-based tests for bibleref using Hypothesis."""
