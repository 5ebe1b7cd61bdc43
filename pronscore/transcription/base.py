"""
Base class for transcription providers.
"""

from abc import ABC, abstractmethod

from pronscore.models import Transcription


class BaseTranscriber(ABC):
    """
    Interface every transcription provider implements.

    A transcriber turns raw audio bytes into text. Scoring only ever sees
    the returned text, never the audio.

    Example:
        with WitAITranscriber(token="...") as transcriber:
            result = transcriber.transcribe(audio_bytes)
    """

    @abstractmethod
    def transcribe(self, audio: bytes) -> Transcription:
        """
        Transcribe one audio clip.

        Args:
            audio: Encoded audio bytes

        Returns:
            Transcription with the recognized text and a confidence estimate
        """

    def close(self) -> None:
        """Release any resources held by the transcriber."""

    def __enter__(self) -> "BaseTranscriber":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
