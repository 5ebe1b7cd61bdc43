"""
Phrase catalogue.

Loads the reference phrases learners practise with. The bundled catalogue
lives in phrases.csv next to this module; a different CSV with the same
columns (id, text, difficulty, ipa, translation) can be configured through
the PRONSCORE_PHRASES_FILE setting.
"""

import csv
import random
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pronscore.config import get_settings
from pronscore.exceptions import InvalidInputError, PhraseNotFoundError
from pronscore.models import Difficulty, Phrase


def _read_rows(handle) -> tuple[Phrase, ...]:
    phrases = []
    for row in csv.DictReader(handle):
        phrases.append(
            Phrase(
                id=int(row["id"]),
                text=row["text"],
                difficulty=row.get("difficulty") or Difficulty.EASY,
                ipa=row.get("ipa") or None,
                translation=row.get("translation") or None,
            )
        )
    return tuple(phrases)


@lru_cache(maxsize=8)
def _load(path: Path | None) -> tuple[Phrase, ...]:
    if path is None:
        source = resources.files(__package__).joinpath("phrases.csv")
        with source.open(encoding="utf-8", newline="") as f:
            return _read_rows(f)

    with open(path, encoding="utf-8", newline="") as f:
        return _read_rows(f)


def load_phrases(path: str | Path | None = None) -> list[Phrase]:
    """
    Load the phrase catalogue.

    Args:
        path: CSV file to read; defaults to the configured file or the bundled one

    Returns:
        List of Phrase objects in file order
    """
    if path is None:
        path = get_settings().phrases_file
    return list(_load(Path(path) if path is not None else None))


def get_phrase(phrase_id: int, path: str | Path | None = None) -> Phrase:
    """
    Get a phrase by its id.

    Raises:
        PhraseNotFoundError: If no phrase has this id
    """
    for phrase in load_phrases(path):
        if phrase.id == phrase_id:
            return phrase
    raise PhraseNotFoundError(phrase_id=phrase_id)


def parse_difficulty(value: str | Difficulty | None) -> Difficulty | None:
    """Parse a difficulty filter, treating empty values as no filter."""
    if value is None or value == "":
        return None
    try:
        return Difficulty(value)
    except ValueError:
        choices = ", ".join(d.value for d in Difficulty)
        raise InvalidInputError(
            f"Invalid difficulty '{value}'. Must be one of: {choices}",
            field="difficulty",
        )


def random_phrase(
    difficulty: str | Difficulty | None = None,
    rng: random.Random | None = None,
    path: str | Path | None = None,
) -> Phrase:
    """
    Pick a random phrase, optionally restricted to one difficulty.

    Args:
        difficulty: Difficulty tier to choose from (all tiers when None)
        rng: Random generator, for reproducible picks
        path: Catalogue file override

    Raises:
        InvalidInputError: If the difficulty is not a known tier
        PhraseNotFoundError: If no phrase matches
    """
    tier = parse_difficulty(difficulty)
    phrases = load_phrases(path)
    if tier is not None:
        phrases = [p for p in phrases if p.difficulty == tier]
    if not phrases:
        raise PhraseNotFoundError(difficulty=tier.value if tier else None)

    return (rng or random).choice(phrases)


def list_difficulties(path: str | Path | None = None) -> list[Difficulty]:
    """Difficulty tiers present in the catalogue, easiest first."""
    present = {p.difficulty for p in load_phrases(path)}
    return [d for d in Difficulty if d in present]


__all__ = [
    "load_phrases",
    "get_phrase",
    "random_phrase",
    "parse_difficulty",
    "list_difficulties",
]
