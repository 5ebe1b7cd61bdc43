"""
Unit tests for word alignment strategies.
"""

import pytest
from pronscore.core.aligner import (
    AlignmentStrategy,
    align,
    align_edit_distance,
    align_positional,
)


class TestPositionalAlignment:
    """Test the default positional strategy."""

    def test_equal_length(self):
        pairs = align_positional(["how", "are", "you"], ["how", "r", "u"])
        assert pairs == [("how", "how"), ("are", "r"), ("you", "u")]

    def test_short_transcript_pads_with_none(self):
        pairs = align_positional(["i", "am", "here"], ["i", "am"])
        assert pairs == [("i", "i"), ("am", "am"), ("here", None)]

    def test_extra_spoken_words_ignored(self):
        pairs = align_positional(["i", "am"], ["i", "am", "here", "now"])
        assert pairs == [("i", "i"), ("am", "am")]

    def test_empty_transcript(self):
        pairs = align_positional(["a", "b"], [])
        assert pairs == [("a", None), ("b", None)]

    def test_dropped_word_shifts_later_pairs(self):
        """A dropped word misaligns every following word."""
        pairs = align_positional(["i", "am", "here"], ["i", "here"])
        assert pairs == [("i", "i"), ("am", "here"), ("here", None)]


class TestEditDistanceAlignment:
    """Test the opt-in sequence alignment strategy."""

    def test_dropped_word_becomes_missing(self):
        pairs = align_edit_distance(["i", "am", "here"], ["i", "here"])
        assert pairs == [("i", "i"), ("am", None), ("here", "here")]

    def test_inserted_word_is_ignored(self):
        pairs = align_edit_distance(["i", "am", "here"], ["i", "really", "am", "here"])
        assert pairs == [("i", "i"), ("am", "am"), ("here", "here")]

    def test_substitution_keeps_pairing(self):
        pairs = align_edit_distance(["hello", "how", "are", "you"], ["halo", "how", "r", "u"])
        assert pairs == [("hello", "halo"), ("how", "how"), ("are", "r"), ("you", "u")]

    def test_empty_transcript(self):
        assert align_edit_distance(["a", "b"], []) == [("a", None), ("b", None)]


class TestAlign:
    """Test the dispatching align() function."""

    @pytest.mark.parametrize("strategy", ["positional", "edit_distance"])
    @pytest.mark.parametrize("spoken", [[], ["x"], ["a", "b", "c", "d", "e"]])
    def test_one_pair_per_expected_word(self, strategy, spoken):
        expected = ["a", "b", "c"]
        pairs = align(expected, spoken, strategy)

        assert len(pairs) == len(expected)
        assert [p[0] for p in pairs] == expected

    def test_default_is_positional(self):
        assert align(["a", "b"], ["b"]) == [("a", "b"), ("b", None)]

    def test_accepts_enum(self):
        pairs = align(["a", "b"], ["b"], AlignmentStrategy.EDIT_DISTANCE)
        assert pairs == [("a", None), ("b", "b")]

    def test_invalid_strategy(self):
        with pytest.raises(ValueError):
            align(["a"], ["a"], "dtw")
