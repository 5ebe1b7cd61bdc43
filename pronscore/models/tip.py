"""
Pronunciation tip data model.
"""

from pydantic import BaseModel, Field


class Tip(BaseModel):
    """A remediation hint for one poorly pronounced or undetected word."""

    word: str = Field(..., description="Expected word the tip is about", min_length=1)
    issue: str = Field(..., description="What went wrong")
    advice: str = Field(..., description="How to improve")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "word": "hello",
                    "issue": 'You said "halo" but it should be "hello"',
                    "advice": 'Pronounce: /həˈloʊ/ - Start with soft "h", end with "low"',
                }
            ]
        },
    }

    def to_response(self) -> dict:
        return {"word": self.word, "issue": self.issue, "tip": self.advice}
