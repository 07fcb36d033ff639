from __future__ import annotations

"""
Unit tests for the Near-Miss Suggestion Engine.

Verifies:
1. Bounded edit distance.
2. Ranking, tie-break order and truncation of suggestions.
3. Suggestions against the ARIA reference list.
"""

import pytest

from markup_a11y.core.analysis.suggestion import edit_distance, suggest
from markup_a11y.domain.vocabulary import ARIA_VOCABULARY


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "", 0),
        ("abc", "abc", 0),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
    ],
)
def test_edit_distance_within_limit(a, b, expected):
    assert edit_distance(a, b, 5) == expected


def test_edit_distance_is_capped():
    """Past the limit only 'too far' (limit + 1) is reported."""
    assert edit_distance("kitten", "sitting", 2) == 3
    assert edit_distance("a", "abcdef", 1) == 2
    assert edit_distance("abcdef", "uvwxyz", 2) == 3


def test_closest_entries_first():
    vocabulary = ["abcd", "abcx", "abxx"]
    assert suggest("abcd", vocabulary) == ["abcd", "abcx"]
    assert suggest("abxx", vocabulary, max_results=3) == ["abxx", "abcx", "abcd"]


def test_ties_keep_vocabulary_order():
    assert suggest("mat", ["cat", "bat", "hat"]) == ["cat", "bat"]
    assert suggest("mat", ["hat", "bat", "cat"]) == ["hat", "bat"]


def test_nothing_close_returns_empty():
    assert suggest("zzzzzzzz", ["cat", "bat"]) == []


def test_limits_can_disable_suggestions():
    assert suggest("cat", ["cat"], max_results=0) == []
    assert suggest("cat", ["cat"], max_distance=-1) == []
    assert suggest("cot", ["cat"], max_distance=0) == []


def test_comparison_ignores_case():
    assert suggest("ARIA-HIDDEN", ARIA_VOCABULARY) == ["aria-hidden"]


def test_aria_misspellings():
    assert suggest("aria-labeledby", ARIA_VOCABULARY) == ["aria-labelledby"]
    assert suggest("aria-hidder", ARIA_VOCABULARY) == ["aria-hidden"]
    assert suggest("aria-xyzzy-plugh-frobnicate", ARIA_VOCABULARY) == []


def test_single_best_match_with_generous_distance():
    assert suggest("aria-labeledby", ARIA_VOCABULARY, 1, 10) == ["aria-labelledby"]
    assert suggest("aria-completely-unknown-xyz", ARIA_VOCABULARY, 3, 2) == []


def test_repeated_calls_return_equal_results():
    assert suggest("aria-hiden", ARIA_VOCABULARY) == suggest("aria-hiden", ARIA_VOCABULARY)
