"""
Text normalization utilities.

This module turns raw reference text and raw transcripts into comparable
word tokens, so that scoring is insensitive to case, accents and punctuation.
"""

import re
import unicodedata

from pronscore.exceptions import InvalidInputError


# Combining diacritical marks block
COMBINING_MARKS_PATTERN = re.compile(r"[\u0300-\u036f]")

NON_WORD_PATTERN = re.compile(r"[^\w\s]")

WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Normalize text for comparison.

    Performs the following normalizations:
    - Lower-case
    - Canonical decomposition (NFD) and removal of combining marks,
      so accented letters fold to their base letter
    - Remove punctuation (keeping word characters and spaces)
    - Collapse multiple spaces and strip

    Args:
        text: Text to normalize

    Returns:
        Normalized text string

    Examples:
        >>> normalize_text("Hello, how are you?")
        'hello how are you'
        >>> normalize_text("  Você   está?")
        'voce esta'
    """
    if not text:
        return ""

    text = text.lower()

    text = unicodedata.normalize("NFD", text)
    text = COMBINING_MARKS_PATTERN.sub("", text)

    text = NON_WORD_PATTERN.sub("", text)

    text = WHITESPACE_PATTERN.sub(" ", text).strip()

    return text


def normalize(text: str) -> list[str]:
    """
    Normalize text and split it into word tokens.

    Args:
        text: Raw reference text or transcript

    Returns:
        Ordered list of tokens, empty for empty or punctuation-only input

    Examples:
        >>> normalize("Hello, how are you?")
        ['hello', 'how', 'are', 'you']
        >>> normalize("?!")
        []
    """
    normalized = normalize_text(text)
    if not normalized:
        return []
    return normalized.split(" ")


def require_text(value: object, field: str) -> str:
    """Reject anything that is not a string before it reaches the scorer."""
    if value is None:
        raise InvalidInputError(f"{field} is required", field=field)
    if not isinstance(value, str):
        raise InvalidInputError(
            f"{field} must be a string, got {type(value).__name__}", field=field
        )
    return value
