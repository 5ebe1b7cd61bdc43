"""
Unit tests for tip generation.
"""

import pytest
from pronscore.config import configure
from pronscore.core.classifier import classify
from pronscore.core.tips import (
    MISSING_WORD_ADVICE,
    PHONETIC_TIPS,
    generate_tips,
    phonetic_tip,
    tip_for,
)
from pronscore.models import WordStatus


class TestPhoneticTip:
    """Test the phonetic hint lookup."""

    @pytest.mark.parametrize("word", ["hello", "how", "are", "you"])
    def test_known_words(self, word):
        assert phonetic_tip(word) == PHONETIC_TIPS[word]
        assert phonetic_tip(word.upper()) == PHONETIC_TIPS[word]

    def test_fallback(self):
        assert phonetic_tip("coffee") == 'Focus on pronouncing "coffee" clearly'

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            PHONETIC_TIPS["new"] = "tip"


class TestGenerateTips:
    """Test generate_tips()."""

    def test_tip_content(self, sample_judgments):
        tips = generate_tips(sample_judgments)

        assert [t.word for t in tips] == ["hello", "coffee", "here"]
        assert tips[0].issue == 'You said "halo" but it should be "hello"'
        assert tips[0].advice == PHONETIC_TIPS["hello"]
        assert tips[1].issue == 'You said "cofee" but it should be "coffee"'
        assert tips[1].advice == 'Focus on pronouncing "coffee" clearly'
        assert tips[2].issue == 'The word "here" was not detected'
        assert tips[2].advice == MISSING_WORD_ADVICE

    def test_correct_words_get_no_tip(self):
        judgments = [classify(w, w) for w in ["hello", "how", "are", "you"]]
        assert generate_tips(judgments) == []

    def test_truncated_to_three_in_word_order(self):
        words = ["one", "two", "three", "four", "five"]
        judgments = [classify(w, None) for w in words]
        tips = generate_tips(judgments)

        assert [t.word for t in tips] == ["one", "two", "three"]

    def test_never_more_than_three(self):
        judgments = [classify(w, None) for w in "abcdefgh"]
        assert len(generate_tips(judgments, limit=10)) == 3

    def test_explicit_limit(self):
        judgments = [classify(w, None) for w in "abcd"]
        assert len(generate_tips(judgments, limit=1)) == 1
        assert generate_tips(judgments, limit=0) == []

    def test_configured_limit(self):
        configure(max_tips=2)
        judgments = [classify(w, None) for w in "abcd"]
        assert len(generate_tips(judgments)) == 2

    def test_stops_consuming_after_limit(self):
        """Judgments after the third tip are never inspected."""
        seen = []

        def judgments():
            for w in "abcdef":
                seen.append(w)
                yield classify(w, None)

        generate_tips(judgments())
        assert seen == ["a", "b", "c"]

    def test_never_includes_correct_word(self, sample_judgments):
        tips = generate_tips(sample_judgments)
        correct = {j.expected for j in sample_judgments if j.status == WordStatus.CORRECT}
        assert not correct & {t.word for t in tips}


class TestTipFor:
    """Test tip_for() for each word status."""

    def test_correct_word(self):
        assert tip_for(classify("hello", "hello")) is None

    def test_missing_word(self):
        tip = tip_for(classify("here", None))
        assert tip.issue == 'The word "here" was not detected'
        assert tip.advice == MISSING_WORD_ADVICE

    @pytest.mark.parametrize("expected,spoken", [("hello", "halo"), ("coffee", "cofee")])
    def test_mispronounced_word(self, expected, spoken):
        judgment = classify(expected, spoken)
        tip = tip_for(judgment)
        assert judgment.needs_tip is True
        assert tip.issue == f'You said "{spoken}" but it should be "{expected}"'
        assert tip.advice == phonetic_tip(expected)
