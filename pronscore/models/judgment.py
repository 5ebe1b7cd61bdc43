"""
Word judgment data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


NOT_DETECTED = "(not detected)"


class WordStatus(str, Enum):
    """Outcome of comparing one expected word with what was heard."""

    CORRECT = "correct"
    SIMILAR = "similar"
    WRONG = "wrong"
    MISSING = "missing"  # no transcribed word at this position


class WordJudgment(BaseModel):
    """
    Judgment for a single expected word.

    Attributes:
        expected: Normalized expected word
        spoken: Normalized transcribed word paired with it, None when absent
        status: Classification of the pair
        confidence: 100 for correct, 0 for missing, rounded similarity otherwise
    """

    expected: str = Field(
        ...,
        description="Normalized expected word",
        min_length=1,
    )
    spoken: Optional[str] = Field(
        default=None,
        description="Normalized transcribed word, None when not detected",
    )
    status: WordStatus = Field(
        ...,
        description="Classification of the word pair",
    )
    confidence: int = Field(
        ...,
        description="Confidence percentage (0-100)",
        ge=0,
        le=100,
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "expected": "hello",
                    "spoken": "halo",
                    "status": "wrong",
                    "confidence": 60,
                }
            ]
        },
    }

    @model_validator(mode="after")
    def check_status_consistency(self) -> "WordJudgment":
        """Missing iff no spoken word; correct always carries full confidence."""
        if (self.spoken is None) != (self.status == WordStatus.MISSING):
            raise ValueError("status 'missing' requires spoken to be None and vice versa")
        if self.status == WordStatus.MISSING and self.confidence != 0:
            raise ValueError("missing words must have confidence 0")
        if (self.status == WordStatus.CORRECT) != (self.confidence == 100):
            raise ValueError("confidence is 100 exactly when the word is correct")
        return self

    @property
    def user_said(self) -> str:
        """What the user said, or a placeholder when nothing was detected."""
        return self.spoken if self.spoken is not None else NOT_DETECTED

    @property
    def needs_tip(self) -> bool:
        return self.status != WordStatus.CORRECT

    def to_response(self) -> dict:
        return {
            "expected": self.expected,
            "userSaid": self.user_said,
            "status": self.status.value,
            "confidence": self.confidence,
        }

    def __str__(self) -> str:
        return f"WordJudgment({self.expected!r}, {self.status.value}, {self.confidence})"
