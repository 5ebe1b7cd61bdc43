"""
Similarity matching for normalized words.

This module provides the edit distance and the normalized similarity used to
compare an expected word with the word that was actually transcribed.

Uses SIMD-accelerated rapidfuzz for the Levenshtein distance.
"""

from rapidfuzz.distance import Levenshtein as _rapidfuzz_levenshtein


def levenshtein(a: str, b: str) -> int:
    """
    Classic Levenshtein edit distance between two strings.

    Counts the minimum number of single code point insertions, deletions
    or substitutions (each of cost 1) needed to turn one string into the other.

    Args:
        a: First string
        b: Second string

    Returns:
        Edit distance (0 for identical strings)

    Examples:
        >>> levenshtein("hello", "halo")
        2
        >>> levenshtein("", "abc")
        3
    """
    return _rapidfuzz_levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Compute similarity ratio between two words.

    Defined as ``1 - levenshtein(a, b) / max(len(a), len(b))``, so it
    returns 0.0 for completely different words and 1.0 for identical ones.
    Two empty strings are a vacuous match. The ratio is symmetric.

    Args:
        a: First word (already normalized)
        b: Second word (already normalized)

    Returns:
        Similarity ratio between 0.0 and 1.0

    Examples:
        >>> similarity("hello", "halo")
        0.6
        >>> similarity("you", "u")  # doctest: +ELLIPSIS
        0.333...
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0

    return (longest - levenshtein(a, b)) / longest
