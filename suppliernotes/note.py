"""Note records produced by the ingestion pipeline.

A note moves through two shapes:

- `RawNote`: what the extractor sees between two note headers. Content may
  still be empty; nothing has been scored.
- `NoteRecord`: the finalized, attributable record handed to storage. It
  always belongs to exactly one supplier, always has content, and carries
  the sentiment analysis of that content.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from suppliernotes.lexicon import DEFAULT_STATUS

MAX_KEYWORDS = 5


class NoteType(str, Enum):
    """Kind of interaction a note records."""

    EMAIL = "EMAIL"
    MEETING = "MEETING"
    NOTE = "NOTE"


class Sentiment(str, Enum):
    """Tone label derived from lexicon hit counts."""

    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"


def _check_label_agrees_with_score(label: Sentiment, score: float) -> None:
    if score > 0 and label is not Sentiment.POSITIVE:
        raise ValueError(f"Positive score {score} labelled {label.value}")
    if score < 0 and label is not Sentiment.NEGATIVE:
        raise ValueError(f"Negative score {score} labelled {label.value}")
    if score == 0 and label is not Sentiment.NEUTRAL:
        raise ValueError(f"Zero score labelled {label.value}")


class NoteAnalysis(BaseModel, frozen=True):
    """Sentiment label, bounded score, and matched domain keywords for one text."""

    label: Sentiment
    score: float = Field(ge=-1.0, le=1.0)
    keywords: tuple[str, ...] = Field(default=(), max_length=MAX_KEYWORDS)
    positive_count: int = Field(default=0, ge=0)
    negative_count: int = Field(default=0, ge=0)
    neutral_count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def label_agrees_with_score(self) -> "NoteAnalysis":
        _check_label_agrees_with_score(self.label, self.score)
        return self


class RawNote(BaseModel, frozen=True):
    """A note as delimited by the extractor, before analysis and resolution."""

    supplier_name: str
    supplier_status: str = DEFAULT_STATUS
    note_type: NoteType = NoteType.NOTE
    author: str = "Unknown"
    date: str | None = None
    content: str = ""
    header: str = Field(default="", description="The header line that opened this note.")


class NoteRecord(BaseModel):
    """A finalized note attached to a resolved supplier."""

    model_config = {"frozen": True}

    supplier_id: str = Field(description="SupplierIdentity.supplier_id this note belongs to.")
    supplier_name: str = Field(description="Display name of the owning supplier.")
    supplier_status: str = Field(default=DEFAULT_STATUS, description="Tier read from the section header.")
    note_type: NoteType
    author: str = "Unknown"
    date: str | None = Field(default=None, description="ISO date when recognised, else the raw text.")
    content: str
    sentiment: Sentiment
    sentiment_score: float = Field(ge=-1.0, le=1.0)
    keywords: tuple[str, ...] = Field(default=(), max_length=MAX_KEYWORDS)
    created_at: datetime

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("NoteRecord content must not be empty")
        return value

    @model_validator(mode="after")
    def sentiment_agrees_with_score(self) -> "NoteRecord":
        _check_label_agrees_with_score(self.sentiment, self.sentiment_score)
        return self
