"""
Unit tests for aggregate scoring.
"""

import pytest
from pronscore.config import PronScoreSettings
from pronscore.core.classifier import classify
from pronscore.core.scoring import aggregate, grade, percentage
from pronscore.exceptions import InvalidInputError
from pronscore.models import OverallStatus


class TestGrade:
    """Test accuracy to status mapping."""

    @pytest.mark.parametrize("accuracy,status", [
        (100, OverallStatus.EXCELLENT),
        (80, OverallStatus.EXCELLENT),
        (79, OverallStatus.GOOD),
        (60, OverallStatus.GOOD),
        (59, OverallStatus.NEEDS_PRACTICE),
        (40, OverallStatus.NEEDS_PRACTICE),
        (39, OverallStatus.POOR),
        (0, OverallStatus.POOR),
    ])
    def test_thresholds(self, accuracy, status):
        """Test inclusive lower bounds."""
        assert grade(accuracy) == status

    def test_custom_thresholds(self):
        settings = PronScoreSettings(
            excellent_threshold=90, good_threshold=70, needs_practice_threshold=50
        )
        assert grade(85, settings) == OverallStatus.GOOD
        assert grade(45, settings) == OverallStatus.POOR

    def test_status_values(self):
        assert OverallStatus.NEEDS_PRACTICE.value == "needsPractice"


class TestAggregate:
    """Test combining judgments."""

    def test_all_correct(self):
        judgments = [classify(w, w) for w in ["a", "b", "c"]]
        assert aggregate(judgments) == (100, OverallStatus.EXCELLENT)

    def test_all_missing(self):
        judgments = [classify(w, None) for w in ["a", "b", "c"]]
        assert aggregate(judgments) == (0, OverallStatus.POOR)

    def test_only_correct_words_count(self, sample_judgments):
        """Similar words do not count towards accuracy."""
        accuracy, status = aggregate(sample_judgments)
        assert accuracy == 25
        assert status == OverallStatus.POOR

    def test_two_of_three(self):
        judgments = [classify("i", "i"), classify("am", "am"), classify("here", None)]
        assert aggregate(judgments) == (67, OverallStatus.GOOD)

    def test_empty_judgments_rejected(self):
        with pytest.raises(InvalidInputError):
            aggregate([])


class TestPercentage:
    """Test rounded percentages."""

    @pytest.mark.parametrize("count,total,expected", [
        (1, 8, 13),
        (5, 8, 63),
        (2, 3, 67),
        (1, 3, 33),
        (0, 5, 0),
        (5, 5, 100),
        (0, 0, 0),
    ])
    def test_percentage(self, count, total, expected):
        assert percentage(count, total) == expected
