"""
Pydantic data models for pronscore.

These models represent the core data structures used throughout the library:
- WordJudgment: Classification of one expected word
- AnalysisResult: Overall score for a transcript
- Tip: Remediation hint for a word
- Phrase: Reference phrase from the catalogue
- Transcription: Text returned by a transcription provider
"""

from pronscore.models.judgment import WordJudgment, WordStatus
from pronscore.models.result import AnalysisResult, OverallStatus
from pronscore.models.tip import Tip
from pronscore.models.phrase import Difficulty, Phrase
from pronscore.models.transcription import Transcription

__all__ = [
    "WordJudgment",
    "WordStatus",
    "AnalysisResult",
    "OverallStatus",
    "Tip",
    "Difficulty",
    "Phrase",
    "Transcription",
]
