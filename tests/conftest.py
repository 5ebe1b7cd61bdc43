"""
Shared fixtures and test configuration for pronscore tests.
"""

import pytest

from pronscore import config
from pronscore.models import WordJudgment, WordStatus


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Fresh default settings for every test, unaffected by the environment."""
    for name in ("WIT_AI_TOKEN", "PRONSCORE_WIT_AI_TOKEN", "PRONSCORE_ALIGNMENT_STRATEGY",
                 "PRONSCORE_MAX_TIPS", "PRONSCORE_SIMILAR_THRESHOLD", "PRONSCORE_PHRASES_FILE"):
        monkeypatch.delenv(name, raising=False)
    settings = config.configure()
    yield settings
    config._default_settings = None


@pytest.fixture
def sample_judgments():
    """One judgment of each status, in reference order."""
    return [
        WordJudgment(expected="hello", spoken="halo", status=WordStatus.WRONG, confidence=60),
        WordJudgment(expected="how", spoken="how", status=WordStatus.CORRECT, confidence=100),
        WordJudgment(expected="coffee", spoken="cofee", status=WordStatus.SIMILAR, confidence=83),
        WordJudgment(expected="here", spoken=None, status=WordStatus.MISSING, confidence=0),
    ]


@pytest.fixture
def scenario_texts():
    """Reference/transcript pairs with their expected accuracy and status."""
    return [
        ("Hello, how are you?", "hello how are you", 100, "excellent"),
        ("Hello, how are you?", "halo how r u", 25, "poor"),
        ("I am here", "I am", 67, "good"),
    ]


@pytest.fixture
def phrases_csv(tmp_path):
    """A small phrase catalogue written to a temporary CSV file."""
    path = tmp_path / "phrases.csv"
    path.write_text(
        "id,text,difficulty,ipa,translation\n"
        "10,Good morning,easy,,Bom dia\n"
        "11,See you tomorrow,hard,/si ju təˈmɑroʊ/,\n",
        encoding="utf-8",
    )
    return path
