"""
Transcription result data model.
"""

from pydantic import BaseModel, Field


class Transcription(BaseModel):
    """Text returned by a transcription provider for one audio clip."""

    text: str = Field(default="", description="Transcribed text")
    confidence: float = Field(
        default=0.0,
        description="Provider confidence estimate (0.0-1.0)",
        ge=0.0,
        le=1.0,
    )

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        """Whether the provider returned any text."""
        return bool(self.text)
