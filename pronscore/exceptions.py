"""
Exception hierarchy for pronscore.

Every error raised on purpose by the library derives from PronScoreError so
callers can catch the whole family in one place.
"""


class PronScoreError(Exception):
    """Base class for all pronscore errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(PronScoreError, ValueError):
    """
    Raised when text handed to the scoring engine cannot be scored.

    Covers a missing/non-string argument and a reference text that
    normalizes to zero words.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class PhraseNotFoundError(PronScoreError, LookupError):
    """Raised when the phrase store has no phrase matching a request."""

    def __init__(self, phrase_id: int | None = None, difficulty: str | None = None):
        self.phrase_id = phrase_id
        self.difficulty = difficulty
        if phrase_id is not None:
            message = f"Phrase {phrase_id} not found"
        elif difficulty is not None:
            message = f"No phrases with difficulty '{difficulty}'"
        else:
            message = "Phrase catalogue is empty"
        super().__init__(message)


class TranscriptionError(PronScoreError):
    """Raised when the transcription provider fails to return a result."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
