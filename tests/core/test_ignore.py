# topmark:header:start
#
#   project      : WarnBox
#   file         : test_ignore.py
#   file_relpath : tests/core/test_ignore.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ignore pattern set."""

from __future__ import annotations

from warnbox.core.ignore import IgnorePatternSet


def test_substring_match_is_literal_and_case_sensitive() -> None:
    """Patterns match as literal, case-sensitive substrings."""
    patterns = IgnorePatternSet(["deprecated", "a.b"])

    assert patterns.matches("Warning: foo is deprecated")
    assert not patterns.matches("Warning: foo is DEPRECATED")
    # No regex semantics: '.' is a literal dot.
    assert not patterns.matches("axb")
    assert patterns.matches("a.b")


def test_add_deduplicates_and_drops_empty_patterns() -> None:
    """Duplicates and empty strings are not stored."""
    patterns = IgnorePatternSet()

    assert patterns.add(["x", "x", "", "y"]) == 2
    assert patterns.add(["y"]) == 0
    assert patterns.as_tuple() == ("x", "y")
    assert len(patterns) == 2
    assert not patterns.matches("no match here")


def test_empty_set_matches_nothing() -> None:
    """An empty set never suppresses a message."""
    assert not IgnorePatternSet().matches("")
    assert not IgnorePatternSet().matches("Warning: foo")
