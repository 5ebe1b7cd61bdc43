"""
Aggregate scoring of word judgments.
"""

from typing import Sequence

from pronscore.config import PronScoreSettings, get_settings
from pronscore.core.classifier import round_half_up
from pronscore.exceptions import InvalidInputError
from pronscore.models import OverallStatus, WordJudgment, WordStatus


def percentage(count: int, total: int) -> int:
    """
    Rounded percentage of count over total.

    Returns 0 when total is 0.
    """
    if total == 0:
        return 0
    return round_half_up(count / total * 100)


def grade(accuracy: int, settings: PronScoreSettings | None = None) -> OverallStatus:
    """
    Map an accuracy percentage to a qualitative status.

    Thresholds are inclusive lower bounds checked from high to low
    (80 / 60 / 40 by default).

    Examples:
        >>> grade(80)
        <OverallStatus.EXCELLENT: 'excellent'>
        >>> grade(39)
        <OverallStatus.POOR: 'poor'>
    """
    settings = settings or get_settings()

    if accuracy >= settings.excellent_threshold:
        return OverallStatus.EXCELLENT
    if accuracy >= settings.good_threshold:
        return OverallStatus.GOOD
    if accuracy >= settings.needs_practice_threshold:
        return OverallStatus.NEEDS_PRACTICE
    return OverallStatus.POOR


def aggregate(
    judgments: Sequence[WordJudgment],
    settings: PronScoreSettings | None = None,
) -> tuple[int, OverallStatus]:
    """
    Combine per-word judgments into accuracy and overall status.

    Args:
        judgments: One judgment per expected word
        settings: Settings supplying the grade thresholds

    Returns:
        Tuple of (accuracy, overall_status)

    Raises:
        InvalidInputError: If there are no judgments to aggregate
    """
    if not judgments:
        raise InvalidInputError("Cannot score an empty set of words", field="judgments")

    correct = sum(1 for j in judgments if j.status == WordStatus.CORRECT)
    accuracy = percentage(correct, len(judgments))

    return accuracy, grade(accuracy, settings)
