"""
Configuration management for pronscore.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the PRONSCORE_ prefix.
"""

from typing import Literal
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PronScoreSettings(BaseSettings):
    """
    Configuration settings for pronscore.

    All settings can be overridden via environment variables with PRONSCORE_ prefix.

    Example:
        export PRONSCORE_SIMILAR_THRESHOLD="0.85"
        export PRONSCORE_ALIGNMENT_STRATEGY="edit_distance"
        export WIT_AI_TOKEN="..."
    """

    model_config = SettingsConfigDict(
        env_prefix="PRONSCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # ============ Scoring Settings ============

    similar_threshold: float = Field(
        default=0.8,
        description="Similarity a mismatched word must exceed to count as 'similar'",
        ge=0.0,
        le=1.0,
    )

    excellent_threshold: int = Field(
        default=80,
        description="Minimum accuracy for an 'excellent' rating",
        ge=0,
        le=100,
    )

    good_threshold: int = Field(
        default=60,
        description="Minimum accuracy for a 'good' rating",
        ge=0,
        le=100,
    )

    needs_practice_threshold: int = Field(
        default=40,
        description="Minimum accuracy for a 'needsPractice' rating",
        ge=0,
        le=100,
    )

    max_tips: int = Field(
        default=3,
        description="Maximum number of pronunciation tips per analysis",
        ge=0,
        le=3,
    )

    alignment_strategy: Literal["positional", "edit_distance"] = Field(
        default="positional",
        description="How expected words are paired with transcribed words",
    )

    # ============ Transcription Settings ============

    wit_ai_token: str | None = Field(
        default=None,
        description="Wit.ai server access token",
        validation_alias=AliasChoices("PRONSCORE_WIT_AI_TOKEN", "WIT_AI_TOKEN"),
    )

    wit_ai_url: str = Field(
        default="https://api.wit.ai/speech",
        description="Wit.ai speech endpoint",
    )

    wit_ai_content_type: str = Field(
        default="audio/ogg",
        description="Content-Type sent with the audio payload",
    )

    request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for transcription requests",
        gt=0.0,
    )

    max_retries: int = Field(
        default=3,
        description="Maximum attempts for a transcription request",
        ge=1,
        le=10,
    )

    # ============ Phrase Store ============

    phrases_file: Path | None = Field(
        default=None,
        description="CSV file overriding the bundled phrase catalogue",
    )

    # ============ API Settings ============

    api_host: str = Field(default="0.0.0.0", description="Bind address for the API")
    api_port: int = Field(default=8000, description="Port for the API", ge=1, le=65535)
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS middleware",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level for the CLI and API",
    )

    # ============ Validators ============

    @field_validator("phrases_file", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path | None) -> Path | None:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v) if v else None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_grade_order(self) -> "PronScoreSettings":
        """Grade thresholds must be strictly descending."""
        if not (
            self.excellent_threshold > self.good_threshold > self.needs_practice_threshold
        ):
            raise ValueError(
                "grade thresholds must satisfy excellent > good > needs_practice"
            )
        return self


# Default settings instance
_default_settings: PronScoreSettings | None = None


def get_settings() -> PronScoreSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        PronScoreSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = PronScoreSettings()
    return _default_settings


def configure(**kwargs) -> PronScoreSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        PronScoreSettings: The new settings instance
    """
    global _default_settings
    _default_settings = PronScoreSettings(**kwargs)
    return _default_settings
