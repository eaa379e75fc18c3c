"""Models for the generateContent response envelope."""

from pydantic import BaseModel, Field


class Part(BaseModel):
    """Single content part of a candidate answer."""

    text: str


class Content(BaseModel):
    """Content block of a candidate answer."""

    parts: list[Part] = Field(min_length=1)


class Candidate(BaseModel):
    """One generated candidate."""

    content: Content


class GenerateContentResponse(BaseModel):
    """Top-level response of the generateContent endpoint."""

    candidates: list[Candidate] | None = None

    def answer_text(self) -> str:
        """Return the text of the first part of the first candidate."""
        return self.candidates[0].content.parts[0].text
