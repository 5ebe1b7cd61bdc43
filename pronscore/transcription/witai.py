"""
Wit.ai speech-to-text client.

Posts raw audio to the Wit.ai /speech endpoint. The endpoint streams back a
sequence of JSON objects (partial, then final understanding); the last one
carrying text is taken as the transcript.
"""

import json
import logging
import time
from typing import Iterator

import requests

from pronscore.config import PronScoreSettings, get_settings
from pronscore.exceptions import TranscriptionError
from pronscore.models import Transcription
from pronscore.transcription.base import BaseTranscriber

logger = logging.getLogger(__name__)

# Wit.ai does not report a confidence for the transcript itself
CONFIDENCE_WITH_TRAITS = 1.0
CONFIDENCE_WITHOUT_TRAITS = 0.8

CHUNK_SIZE = 64 * 1024


def _chunks(audio: bytes, size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield audio in fixed-size chunks so requests uses chunked transfer."""
    for start in range(0, len(audio), size):
        yield audio[start:start + size]


def parse_wit_response(body: str) -> dict:
    """
    Parse a Wit.ai speech response body.

    The body is either a single JSON object or several concatenated objects.
    Returns the final object that has a "text" field, or the last object.

    Raises:
        TranscriptionError: If the body holds no JSON object
    """
    decoder = json.JSONDecoder()
    objects = []
    pos = 0
    body = body.strip()
    while pos < len(body):
        try:
            obj, end = decoder.raw_decode(body, pos)
        except json.JSONDecodeError as e:
            raise TranscriptionError(f"Invalid Wit.ai response: {e}")
        if isinstance(obj, dict):
            objects.append(obj)
        pos = end
        while pos < len(body) and body[pos].isspace():
            pos += 1

    if not objects:
        raise TranscriptionError("Empty Wit.ai response")

    with_text = [o for o in objects if "text" in o]
    final = [o for o in with_text if o.get("is_final")]
    if final:
        return final[-1]
    if with_text:
        return with_text[-1]
    return objects[-1]


class WitAITranscriber(BaseTranscriber):
    """
    Transcriber backed by the Wit.ai HTTP API.

    Connection errors, timeouts and 5xx responses are retried up to
    max_retries attempts; any other failure raises TranscriptionError.
    """

    def __init__(
        self,
        token: str | None = None,
        url: str | None = None,
        content_type: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff: float = 0.5,
        session: requests.Session | None = None,
        settings: PronScoreSettings | None = None,
    ):
        """
        Initialize the Wit.ai transcriber.

        Args:
            token: Server access token (overrides settings)
            url: Speech endpoint (overrides settings)
            content_type: Audio MIME type (overrides settings)
            timeout: Request timeout in seconds (overrides settings)
            max_retries: Maximum attempts per request (overrides settings)
            backoff: Base delay in seconds between attempts
            session: requests session to reuse
            settings: Settings instance to use
        """
        self._settings = settings or get_settings()

        self._token = token or self._settings.wit_ai_token
        self._url = url or self._settings.wit_ai_url
        self._content_type = content_type or self._settings.wit_ai_content_type
        self._timeout = timeout or self._settings.request_timeout
        self._max_retries = max_retries or self._settings.max_retries
        self._backoff = backoff

        self._session = session or requests.Session()
        self._owns_session = session is None

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": self._content_type,
        }

    def _post(self, audio: bytes) -> requests.Response:
        last_error: Exception | None = None

        for attempt in range(1, self._max_retries + 1):
            try:
                response = self._session.post(
                    self._url,
                    headers=self._headers(),
                    data=_chunks(audio),
                    timeout=self._timeout,
                )
            except (requests.ConnectionError, requests.Timeout) as e:
                last_error = e
                logger.warning(
                    "Wit.ai request failed (attempt %d/%d): %s",
                    attempt, self._max_retries, e,
                )
            else:
                if response.status_code < 500:
                    return response
                last_error = TranscriptionError(
                    f"Wit.ai error: {response.status_code}",
                    status_code=response.status_code,
                )
                logger.warning(
                    "Wit.ai returned %d (attempt %d/%d)",
                    response.status_code, attempt, self._max_retries,
                )

            if attempt < self._max_retries and self._backoff > 0:
                time.sleep(self._backoff * attempt)

        if isinstance(last_error, TranscriptionError):
            raise last_error
        raise TranscriptionError(f"Wit.ai request failed: {last_error}")

    def transcribe(self, audio: bytes) -> Transcription:
        """
        Transcribe audio with Wit.ai.

        Args:
            audio: Encoded audio bytes (OGG by default)

        Returns:
            Transcription; empty text when nothing was recognized

        Raises:
            TranscriptionError: If no token is configured or the request fails
        """
        if not self._token:
            raise TranscriptionError("Wit.ai token is not configured (set WIT_AI_TOKEN)")
        if not audio:
            raise TranscriptionError("No audio to transcribe")

        response = self._post(audio)
        if not response.ok:
            logger.error("Wit.ai transcription error: %d", response.status_code)
            raise TranscriptionError(
                f"Wit.ai error: {response.status_code}",
                status_code=response.status_code,
            )

        data = parse_wit_response(response.text)
        text = data.get("text") or ""
        if data.get("traits") is not None:
            confidence = CONFIDENCE_WITH_TRAITS
        else:
            confidence = CONFIDENCE_WITHOUT_TRAITS

        logger.debug("Wit.ai transcribed %d bytes: %r", len(audio), text)
        return Transcription(text=text, confidence=confidence)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()
