"""
Practice phrase data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Difficulty(str, Enum):
    """Difficulty tier of a practice phrase."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Phrase(BaseModel):
    """
    A reference phrase the learner is asked to read aloud.

    Attributes:
        id: Unique identifier within the catalogue
        text: The phrase text
        difficulty: Difficulty tier
        ipa: IPA transcription shown alongside the phrase (optional)
        translation: Translation into the learner's language (optional)
    """

    id: int = Field(
        ...,
        description="Unique identifier for the phrase",
        ge=1,
    )
    text: str = Field(
        ...,
        description="The phrase text",
        min_length=1,
    )
    difficulty: Difficulty = Field(
        default=Difficulty.EASY,
        description="Difficulty tier",
    )
    ipa: Optional[str] = Field(
        default=None,
        description="IPA transcription for display",
    )
    translation: Optional[str] = Field(
        default=None,
        description="Translation of the phrase",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "text": "Hello, how are you?",
                    "difficulty": "easy",
                    "ipa": "/həˈloʊ haʊ ɑr ju/",
                    "translation": "Olá, como você está?",
                }
            ]
        },
    }

    def __str__(self) -> str:
        return f"Phrase({self.id}, {self.difficulty.value})"
