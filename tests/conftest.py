"""Test fixtures shared by the suppliernotes test suite.

This module provides:
- A pinned `IngestionClock` so identities and records are reproducible
- A sample notes corpus covering header sections, a continuation section,
  banners, skipped lines, an undated note, an invalid date and an empty note
- An orchestrator wired with the pinned clock
- In-memory storage fixtures
- A factory for hand-built `NoteRecord` instances
"""

from datetime import datetime, timezone

import pytest

from suppliernotes.clock import IngestionClock
from suppliernotes.ingest import IngestionOrchestrator
from suppliernotes.note import NoteRecord, NoteType, Sentiment
from suppliernotes.pipeline.patterns import SECTION_SEPARATOR
from suppliernotes.storage.memory import InMemoryNoteStorage, InMemorySupplierStorage

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

SAMPLE_FRAGMENTS = (
    "SUPPLIER PERFORMANCE NOTES",
    "QUICKFAB INDUSTRIES - CAUTION / HIGH RISK\n"
    "Email from Dana (3/5/2022)\n"
    "Parts arrived 2 weeks late. Quality issues reported.",
    "STELLAR METALWORKS - GOLD STANDARD\n"
    "\n"
    "Meeting notes from Priya (11/14/2023)\n"
    "Excellent finish and zero defects again.\n"
    "Delivered early.\n"
    "**NOTE: internal only\n"
    "Sam's note (spring 2023)\n"
    "Pricing is fair and consistent.",
    "Email from Priya (1/9/2024)\n"
    "Reliable as always.",
    "APEX MFG INC\n"
    "Note: (2/30/2023)\n"
    "Deliveries were okay.\n"
    "Jo's email",
    "APEX MANUFACTURING - SPECIALIST\n"
    "Email from Lee (7/4/2023)\n"
    "Great quality, competitive price.",
    "END OF NOTES",
)


def build_document(*fragments: str) -> str:
    """Join fragments with full-width separator lines, as the corpus does."""
    inner = f"\n{SECTION_SEPARATOR}\n".join(fragments)
    return f"{SECTION_SEPARATOR}\n{inner}\n{SECTION_SEPARATOR}\n"


@pytest.fixture
def clock() -> IngestionClock:
    """Clock pinned to FIXED_NOW."""
    return IngestionClock(now=FIXED_NOW)


@pytest.fixture
def orchestrator(clock: IngestionClock) -> IngestionOrchestrator:
    """Orchestrator with default components and the pinned clock."""
    return IngestionOrchestrator(clock=clock)


@pytest.fixture
def sample_text() -> str:
    return build_document(*SAMPLE_FRAGMENTS)


@pytest.fixture
def document_builder():
    """Expose build_document to tests without importing conftest."""
    return build_document


@pytest.fixture
def supplier_storage() -> InMemorySupplierStorage:
    return InMemorySupplierStorage()


@pytest.fixture
def note_storage() -> InMemoryNoteStorage:
    return InMemoryNoteStorage()


@pytest.fixture
def make_record():
    """Factory for NoteRecord instances with neutral defaults."""

    def _make(
        supplier_id: str = "0a1b2c3d",
        supplier_name: str = "Acme Widgets",
        content: str = "Deliveries were okay.",
        date: str | None = None,
        sentiment: Sentiment = Sentiment.NEUTRAL,
        score: float = 0.0,
        note_type: NoteType = NoteType.NOTE,
        author: str = "Unknown",
    ) -> NoteRecord:
        return NoteRecord(
            supplier_id=supplier_id,
            supplier_name=supplier_name,
            note_type=note_type,
            author=author,
            date=date,
            content=content,
            sentiment=sentiment,
            sentiment_score=score,
            created_at=FIXED_NOW,
        )

    return _make
