"""
Analysis result data model.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from pronscore.models.judgment import WordJudgment, WordStatus


class OverallStatus(str, Enum):
    """Qualitative rating derived from accuracy."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_PRACTICE = "needsPractice"
    POOR = "poor"


class AnalysisResult(BaseModel):
    """
    Result of scoring one transcript against one reference phrase.

    Attributes:
        expected_text: Reference text exactly as supplied
        user_text: Transcript exactly as supplied
        accuracy: Percentage of expected words judged correct (0-100)
        status: Qualitative rating for the accuracy
        judgments: One judgment per expected word, in reference order
    """

    expected_text: str = Field(
        ...,
        description="Reference text as supplied by the caller",
    )
    user_text: str = Field(
        ...,
        description="Transcript as supplied by the caller",
    )
    accuracy: int = Field(
        ...,
        description="Percentage of expected words judged correct",
        ge=0,
        le=100,
    )
    status: OverallStatus = Field(
        ...,
        description="Qualitative rating",
    )
    judgments: list[WordJudgment] = Field(
        ...,
        description="Per-word judgments in reference order",
        min_length=1,
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_accuracy_matches(self) -> "AnalysisResult":
        """Accuracy must agree with the number of correct judgments."""
        from pronscore.core.scoring import percentage

        expected = percentage(self.correct_count, len(self.judgments))
        if self.accuracy != expected:
            raise ValueError(
                f"accuracy {self.accuracy} does not match {self.correct_count}/"
                f"{len(self.judgments)} correct words"
            )
        return self

    @property
    def correct_count(self) -> int:
        """Number of words judged correct."""
        return sum(1 for j in self.judgments if j.status == WordStatus.CORRECT)

    @property
    def word_count(self) -> int:
        return len(self.judgments)

    def to_response(self) -> dict:
        """Render the result in the shape served by the HTTP API."""
        return {
            "overall": {
                "expected": self.expected_text,
                "userSaid": self.user_text,
                "accuracy": self.accuracy,
                "status": self.status.value,
            },
            "wordByWord": [j.to_response() for j in self.judgments],
        }

    def __str__(self) -> str:
        return f"AnalysisResult({self.accuracy}%, {self.status.value})"
