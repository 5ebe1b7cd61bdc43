"""
pronscore - pronunciation scoring for language learners.

Compares a reference phrase with a speech-to-text transcript and reports
per-word judgments, an overall accuracy and remediation tips.

Example:
    from pronscore import analyze, generate_tips

    result = analyze("Hello, how are you?", "halo how r u")
    print(result.accuracy, result.status.value)
    for tip in generate_tips(result.judgments):
        print(tip.word, tip.advice)
"""

__version__ = "0.1.0"

from pronscore.config import PronScoreSettings, configure, get_settings
from pronscore.core import AlignmentStrategy, analyze, generate_tips, normalize, similarity
from pronscore.exceptions import (
    InvalidInputError,
    PhraseNotFoundError,
    PronScoreError,
    TranscriptionError,
)
from pronscore.models import (
    AnalysisResult,
    OverallStatus,
    Phrase,
    Tip,
    WordJudgment,
    WordStatus,
)

__all__ = [
    "__version__",
    "PronScoreSettings",
    "configure",
    "get_settings",
    "AlignmentStrategy",
    "analyze",
    "generate_tips",
    "normalize",
    "similarity",
    "InvalidInputError",
    "PhraseNotFoundError",
    "PronScoreError",
    "TranscriptionError",
    "AnalysisResult",
    "OverallStatus",
    "Phrase",
    "Tip",
    "WordJudgment",
    "WordStatus",
]
