"""
Pronunciation analysis entry point.

Wires normalization, alignment, classification and scoring together:

    normalize -> align -> classify (per word) -> aggregate

All steps are pure functions over the two input strings.
"""

import logging

from pronscore.config import PronScoreSettings, get_settings
from pronscore.core.aligner import AlignmentStrategy, align
from pronscore.core.classifier import classify
from pronscore.core.scoring import aggregate
from pronscore.core.text import normalize, require_text
from pronscore.exceptions import InvalidInputError
from pronscore.models import AnalysisResult

logger = logging.getLogger(__name__)


def analyze(
    expected_text: str,
    spoken_text: str,
    *,
    strategy: AlignmentStrategy | str | None = None,
    settings: PronScoreSettings | None = None,
) -> AnalysisResult:
    """
    Score a transcript against a reference phrase.

    Args:
        expected_text: Reference phrase the user was asked to say
        spoken_text: Transcript of what the user said (may be empty)
        strategy: Alignment strategy, defaults to the configured one
        settings: Settings instance to use

    Returns:
        AnalysisResult with one judgment per reference word

    Raises:
        InvalidInputError: If either text is missing or the reference has no words

    Examples:
        >>> analyze("I am here", "I am").accuracy
        67
    """
    settings = settings or get_settings()
    expected_text = require_text(expected_text, "expected_text")
    spoken_text = require_text(spoken_text, "spoken_text")

    expected = normalize(expected_text)
    if not expected:
        raise InvalidInputError(
            "Expected text must contain at least one word", field="expected_text"
        )
    spoken = normalize(spoken_text)

    strategy = AlignmentStrategy(strategy or settings.alignment_strategy)
    judgments = [
        classify(word, heard, settings.similar_threshold)
        for word, heard in align(expected, spoken, strategy)
    ]
    accuracy, status = aggregate(judgments, settings)

    logger.debug(
        "Scored %d/%d words (%s): accuracy=%d status=%s",
        len(spoken),
        len(expected),
        strategy.value,
        accuracy,
        status.value,
    )

    return AnalysisResult(
        expected_text=expected_text,
        user_text=spoken_text,
        accuracy=accuracy,
        status=status,
        judgments=judgments,
    )
