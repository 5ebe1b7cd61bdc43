"""
Word alignment between reference tokens and transcript tokens.

The default strategy pairs words strictly by position. A single dropped or
inserted word in the transcript therefore shifts every later comparison.
The edit-distance strategy avoids that by aligning the two word sequences
first, and is available as an opt-in.
"""

from enum import Enum
from typing import Optional, Sequence

WordPair = tuple[str, Optional[str]]


class AlignmentStrategy(str, Enum):
    """Available alignment strategies."""

    POSITIONAL = "positional"
    EDIT_DISTANCE = "edit_distance"


def align_positional(expected: Sequence[str], spoken: Sequence[str]) -> list[WordPair]:
    """
    Pair expected[i] with spoken[i].

    Expected words past the end of the transcript pair with None. Spoken
    words past the end of the reference are ignored.

    Examples:
        >>> align_positional(["i", "am", "here"], ["i", "am"])
        [('i', 'i'), ('am', 'am'), ('here', None)]
    """
    return [
        (word, spoken[i] if i < len(spoken) else None)
        for i, word in enumerate(expected)
    ]


def align_edit_distance(expected: Sequence[str], spoken: Sequence[str]) -> list[WordPair]:
    """
    Pair words along a minimum word-level edit path.

    Matches and substitutions pair the two words, deletions pair the expected
    word with None and insertions (extra spoken words) are dropped, so the
    result still has exactly one pair per expected word.

    Examples:
        >>> align_edit_distance(["i", "am", "here"], ["i", "here"])
        [('i', 'i'), ('am', None), ('here', 'here')]
    """
    n, m = len(expected), len(spoken)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        dp[i][0] = i
    for j in range(1, m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost_sub = 0 if expected[i - 1] == spoken[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j - 1] + cost_sub,
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
            )

    # Backtrack, preferring diagonal moves so substitutions keep their pairing
    pairs: list[WordPair] = []
    i, j = n, m
    while i > 0:
        if j > 0:
            cost_sub = 0 if expected[i - 1] == spoken[j - 1] else 1
            if dp[i][j] == dp[i - 1][j - 1] + cost_sub:
                pairs.append((expected[i - 1], spoken[j - 1]))
                i -= 1
                j -= 1
                continue
            if dp[i][j] == dp[i][j - 1] + 1:
                j -= 1
                continue
        pairs.append((expected[i - 1], None))
        i -= 1

    pairs.reverse()
    return pairs


_STRATEGIES = {
    AlignmentStrategy.POSITIONAL: align_positional,
    AlignmentStrategy.EDIT_DISTANCE: align_edit_distance,
}


def align(
    expected: Sequence[str],
    spoken: Sequence[str],
    strategy: AlignmentStrategy | str = AlignmentStrategy.POSITIONAL,
) -> list[WordPair]:
    """
    Align expected tokens with spoken tokens.

    Args:
        expected: Normalized reference tokens
        spoken: Normalized transcript tokens
        strategy: Alignment strategy (positional by default)

    Returns:
        One (expected, spoken-or-None) pair per expected token, in order

    Raises:
        ValueError: If the strategy name is unknown
    """
    return _STRATEGIES[AlignmentStrategy(strategy)](expected, spoken)
