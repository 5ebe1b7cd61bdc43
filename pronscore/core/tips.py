"""
Pronunciation tip generation.

Tips are produced in reference word order for every word that was not
pronounced correctly, up to a fixed maximum.
"""

from types import MappingProxyType
from typing import Iterable

from pronscore.config import get_settings
from pronscore.models import Tip, WordJudgment, WordStatus


MAX_TIPS = 3

MISSING_WORD_ADVICE = "Try to speak more clearly and at a moderate pace"

# Phonetic hints keyed by lower-cased word
PHONETIC_TIPS = MappingProxyType({
    "hello": 'Pronounce: /həˈloʊ/ - Start with soft "h", end with "low"',
    "how": 'Pronounce: /haʊ/ - Like "h" + "ow" in "cow"',
    "are": 'Pronounce: /ɑr/ - Open mouth, "ar" sound',
    "you": 'Pronounce: /ju/ - Quick "y" sound + "oo"',
})


def phonetic_tip(word: str) -> str:
    """
    Look up the phonetic hint for a word.

    Falls back to a generic hint for words without an entry.

    Examples:
        >>> phonetic_tip("Hello")
        'Pronounce: /həˈloʊ/ - Start with soft "h", end with "low"'
        >>> phonetic_tip("coffee")
        'Focus on pronouncing "coffee" clearly'
    """
    return PHONETIC_TIPS.get(word.lower(), f'Focus on pronouncing "{word}" clearly')


def tip_for(judgment: WordJudgment) -> Tip | None:
    """Build the tip for one judgment, None for correct words."""
    if not judgment.needs_tip:
        return None
    if judgment.status == WordStatus.MISSING:
        return Tip(
            word=judgment.expected,
            issue=f'The word "{judgment.expected}" was not detected',
            advice=MISSING_WORD_ADVICE,
        )
    return Tip(
        word=judgment.expected,
        issue=f'You said "{judgment.spoken}" but it should be "{judgment.expected}"',
        advice=phonetic_tip(judgment.expected),
    )


def generate_tips(judgments: Iterable[WordJudgment], limit: int | None = None) -> list[Tip]:
    """
    Generate remediation tips from word judgments.

    Args:
        judgments: Word judgments in reference order
        limit: Maximum number of tips (defaults to the max_tips setting)

    Returns:
        At most `limit` tips, in the order the words appear
    """
    if limit is None:
        limit = get_settings().max_tips
    limit = min(limit, MAX_TIPS)

    tips: list[Tip] = []
    if limit <= 0:
        return tips

    for judgment in judgments:
        tip = tip_for(judgment)
        if tip is None:
            continue
        tips.append(tip)
        if len(tips) >= limit:
            break

    return tips
