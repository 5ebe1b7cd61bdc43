"""
Pronunciation evaluation service.

Glue between the phrase store, a transcription provider and the scoring
engine: resolves the reference text, transcribes the learner's audio and
scores the transcript.
"""

import logging

from pronscore.config import PronScoreSettings, get_settings
from pronscore.core import analyze, generate_tips
from pronscore.data import get_phrase
from pronscore.exceptions import InvalidInputError, PhraseNotFoundError
from pronscore.models import Phrase
from pronscore.transcription import BaseTranscriber, WitAITranscriber

logger = logging.getLogger(__name__)

TRANSCRIPTION_FAILED_MESSAGE = "Could not transcribe audio. Please try again."


class PronunciationService:
    """
    Evaluate a learner's recording against a reference phrase.

    Example:
        service = PronunciationService()
        response = service.evaluate(audio_bytes, phrase_id=1)
    """

    def __init__(
        self,
        transcriber: BaseTranscriber | None = None,
        settings: PronScoreSettings | None = None,
    ):
        self._settings = settings or get_settings()
        self._transcriber = transcriber

    @property
    def transcriber(self) -> BaseTranscriber:
        """Transcription provider, created on first use."""
        if self._transcriber is None:
            self._transcriber = WitAITranscriber(settings=self._settings)
        return self._transcriber

    def resolve_expected(
        self,
        expected_text: str | None = None,
        phrase_id: int | None = None,
    ) -> tuple[str, Phrase | None]:
        """
        Work out the reference text for an evaluation.

        A catalogue phrase wins over explicit text when both are given.
        An unknown phrase_id falls back to the explicit text.

        Raises:
            PhraseNotFoundError: If phrase_id is unknown and no text is given
            InvalidInputError: If neither source yields text
        """
        phrase = None
        if phrase_id is not None:
            try:
                phrase = get_phrase(phrase_id, self._settings.phrases_file)
            except PhraseNotFoundError:
                if not expected_text:
                    raise
                logger.warning(
                    "Phrase %s not found, scoring against the given text", phrase_id
                )
            else:
                expected_text = phrase.text

        if not expected_text:
            raise InvalidInputError(
                "Expected text or phraseId is required", field="expected_text"
            )
        return expected_text, phrase

    def score_text(self, expected_text: str, spoken_text: str) -> dict:
        """Score a transcript directly, without audio."""
        result = analyze(expected_text, spoken_text, settings=self._settings)
        tips = generate_tips(result.judgments, self._settings.max_tips)
        return {
            "success": True,
            "analysis": result.to_response(),
            "tips": [t.to_response() for t in tips],
        }

    def evaluate(
        self,
        audio: bytes,
        expected_text: str | None = None,
        phrase_id: int | None = None,
    ) -> dict:
        """
        Transcribe audio and score it.

        Args:
            audio: Encoded recording
            expected_text: Reference text (used when phrase_id is absent or unknown)
            phrase_id: Catalogue phrase to use as reference

        Returns:
            Response dict with success flag, transcription, analysis, tips and phrase

        Raises:
            InvalidInputError: If there is no audio or no reference text
            PhraseNotFoundError: If phrase_id is unknown and there is no expected_text
            TranscriptionError: If the provider call fails
        """
        if not audio:
            raise InvalidInputError("Audio is required", field="audio")

        expected, phrase = self.resolve_expected(expected_text, phrase_id)

        transcription = self.transcriber.transcribe(audio)
        if not transcription.is_success:
            logger.info("Transcription returned no text for %d bytes of audio", len(audio))
            return {"success": False, "error": TRANSCRIPTION_FAILED_MESSAGE}

        scored = self.score_text(expected, transcription.text)
        logger.info(
            "Evaluated phrase %s: accuracy=%d",
            phrase.id if phrase else "-",
            scored["analysis"]["overall"]["accuracy"],
        )

        return {
            "success": True,
            "transcription": transcription.text,
            "analysis": scored["analysis"],
            "tips": scored["tips"],
            "phrase": phrase.model_dump(mode="json") if phrase else None,
        }

    def close(self) -> None:
        if self._transcriber is not None:
            self._transcriber.close()
