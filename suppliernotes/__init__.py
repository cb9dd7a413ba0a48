"""
Supplier Notes - Rule-Based Ingestion of Vendor Interaction Notes.

Turns a free-form notes corpus (emails, meeting summaries, ad-hoc notes about
suppliers) into attributable note records with a deterministic lexicon-based
sentiment score, and resolves the many spellings of a supplier's name to one
stable identity.

Lightweight data types are imported eagerly. The orchestrator is imported on
first access:

    # Data types only:
    from suppliernotes import NoteRecord, SupplierIdentity

    # Pulls in the full pipeline:
    from suppliernotes import IngestionOrchestrator
"""

from typing import TYPE_CHECKING

from suppliernotes.clock import IngestionClock
from suppliernotes.document import NotesDocument, Section, Segmentation
from suppliernotes.lexicon import (
    DEFAULT_LEXICON,
    DEFAULT_NAME_ALIASES,
    DEFAULT_STATUS_TIERS,
    Lexicon,
    StatusTier,
)
from suppliernotes.note import NoteAnalysis, NoteRecord, NoteType, RawNote, Sentiment
from suppliernotes.supplier import SupplierIdentity

if TYPE_CHECKING:
    from suppliernotes.ingest import (
        IngestionOrchestrator,
        IngestionResult,
        NoteFailure,
        SourceNotFoundError,
    )

__all__ = [
    "IngestionClock",
    "NotesDocument",
    "Section",
    "Segmentation",
    "Lexicon",
    "StatusTier",
    "DEFAULT_LEXICON",
    "DEFAULT_NAME_ALIASES",
    "DEFAULT_STATUS_TIERS",
    "NoteAnalysis",
    "NoteRecord",
    "NoteType",
    "RawNote",
    "Sentiment",
    "SupplierIdentity",
    "IngestionOrchestrator",
    "IngestionResult",
    "NoteFailure",
    "SourceNotFoundError",
]

__version__ = "0.1.0"

_LAZY = ("IngestionOrchestrator", "IngestionResult", "NoteFailure", "SourceNotFoundError")


def __getattr__(name: str):
    """Lazy import of the orchestrator and its result types."""
    if name in _LAZY:
        from suppliernotes import ingest
        return getattr(ingest, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
