"""
Transcription providers for pronscore.
"""

from pronscore.transcription.base import BaseTranscriber
from pronscore.transcription.witai import WitAITranscriber

__all__ = ["BaseTranscriber", "WitAITranscriber"]
