from __future__ import annotations

"""
Unit tests for the Static Name Vocabularies.

Verifies:
1. Case-insensitive membership with canonical iteration order.
2. Immutability.
"""

import pytest

from markup_a11y.domain.constants import ARIA_PROPERTIES
from markup_a11y.domain.vocabulary import ARIA_VOCABULARY, Vocabulary


def test_membership_ignores_case():
    assert "aria-label" in ARIA_VOCABULARY
    assert "ARIA-LABEL" in ARIA_VOCABULARY
    assert "aria-labeledby" not in ARIA_VOCABULARY
    assert 3 not in ARIA_VOCABULARY


def test_iteration_keeps_canonical_order():
    assert list(ARIA_VOCABULARY) == list(ARIA_PROPERTIES)
    assert len(ARIA_VOCABULARY) == len(ARIA_PROPERTIES)


def test_duplicates_are_dropped():
    vocabulary = Vocabulary(["b", "a", "b"])
    assert tuple(vocabulary) == ("b", "a")
    assert len(vocabulary) == 2


def test_vocabulary_is_immutable():
    with pytest.raises(AttributeError):
        ARIA_VOCABULARY.extra = ()
