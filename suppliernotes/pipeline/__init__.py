"""Pipeline components for notes segmentation, extraction, analysis and resolution."""

from suppliernotes.pipeline.analyzer import SCORE_DIVISOR, LexiconSentimentAnalyzer
from suppliernotes.pipeline.extractor import NotesExtractor, finalize_note
from suppliernotes.pipeline.interfaces import (
    DocumentSegmenterInterface,
    NoteAnalyzerInterface,
    NoteExtractorInterface,
    SupplierResolverInterface,
)
from suppliernotes.pipeline.resolve import (
    SupplierResolver,
    normalize_supplier_name,
    supplier_fingerprint,
    title_case_name,
)
from suppliernotes.pipeline.segmenter import NotesDocumentSegmenter

__all__ = [
    # Core interfaces
    "DocumentSegmenterInterface",
    "NoteExtractorInterface",
    "NoteAnalyzerInterface",
    "SupplierResolverInterface",
    # Rule-based implementations
    "NotesDocumentSegmenter",
    "NotesExtractor",
    "LexiconSentimentAnalyzer",
    "SupplierResolver",
    # Helpers
    "finalize_note",
    "normalize_supplier_name",
    "supplier_fingerprint",
    "title_case_name",
    "SCORE_DIVISOR",
]
