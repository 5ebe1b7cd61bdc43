"""
Per-word classification.
"""

import math
from typing import Optional

from pronscore.core.matcher import similarity
from pronscore.models import WordJudgment, WordStatus

# A mismatched word has to be strictly above this to count as "similar"
SIMILAR_THRESHOLD = 0.8


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def classify(
    expected: str,
    spoken: Optional[str],
    threshold: float = SIMILAR_THRESHOLD,
) -> WordJudgment:
    """
    Classify one aligned word pair.

    Rules, evaluated in order:
    1. No spoken word -> missing, confidence 0
    2. Exact match -> correct, confidence 100
    3. Similarity above threshold -> similar
    4. Otherwise -> wrong

    For similar and wrong the confidence is the rounded similarity
    percentage, capped at 99 so that 100 stays reserved for exact matches.

    Args:
        expected: Normalized expected word
        spoken: Normalized spoken word, or None
        threshold: Similarity a mismatch must exceed to be "similar"

    Returns:
        WordJudgment for the pair
    """
    if not spoken:
        return WordJudgment(
            expected=expected, spoken=None, status=WordStatus.MISSING, confidence=0
        )

    if expected == spoken:
        return WordJudgment(
            expected=expected, spoken=spoken, status=WordStatus.CORRECT, confidence=100
        )

    sim = similarity(expected, spoken)
    confidence = min(round_half_up(sim * 100), 99)
    status = WordStatus.SIMILAR if sim > threshold else WordStatus.WRONG

    return WordJudgment(
        expected=expected, spoken=spoken, status=status, confidence=confidence
    )
