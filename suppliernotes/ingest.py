"""Ingestion orchestrator for supplier notes.

This module provides the `IngestionOrchestrator` class, which turns one raw
notes corpus into a clean stream of `(SupplierIdentity, NoteRecord)` pairs:

    1. Segment the document into supplier-attributed sections
    2. Extract the notes inside each section
    3. Analyze each note body for sentiment and domain keywords
    4. Resolve the section's supplier name to a deduplicated identity
    5. Finalize the note into an immutable `NoteRecord`

Each run builds a fresh `SupplierResolver`, so identities never leak from one
run into the next. The whole pass is synchronous and in-memory; only handing
the outputs to a storage backend (`persist`) is async, because the storage
interfaces are.

Error policy:
    - A document that cannot be read raises `SourceNotFoundError` before any
      processing starts.
    - Fragments without supplier context and notes without a body are
      dropped and counted.
    - Any failure while finalizing one note is recorded as a `NoteFailure`
      and the run continues with the next note.

Example usage:
    ```python
    orchestrator = IngestionOrchestrator()
    result = orchestrator.ingest_file("supplier_notes.txt")
    for supplier in result.suppliers:
        print(supplier.display_name, len(result.records_for(supplier.supplier_id)))
    ```
"""

import uuid
from pathlib import Path
from typing import Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from suppliernotes.clock import IngestionClock
from suppliernotes.document import NotesDocument
from suppliernotes.lexicon import DEFAULT_NAME_ALIASES, DEFAULT_STATUS
from suppliernotes.logging import get_logger
from suppliernotes.note import NoteRecord
from suppliernotes.pipeline.analyzer import LexiconSentimentAnalyzer
from suppliernotes.pipeline.extractor import NotesExtractor, finalize_note
from suppliernotes.pipeline.interfaces import (
    DocumentSegmenterInterface,
    NoteAnalyzerInterface,
    NoteExtractorInterface,
    SupplierResolverInterface,
)
from suppliernotes.pipeline.resolve import SupplierResolver, check_aliases
from suppliernotes.pipeline.segmenter import NotesDocumentSegmenter
from suppliernotes.storage.interfaces import NoteStorageInterface, SupplierStorageInterface
from suppliernotes.supplier import SupplierIdentity

logger = get_logger(__name__)


class SourceNotFoundError(FileNotFoundError):
    """The notes document could not be found or read."""


class NoteFailure(BaseModel):
    """A note skipped because finalizing it raised.

    Attributes:
        section_index: Fragment index of the section the note came from.
        note_index: Position of the note within its section.
        supplier_name: Raw supplier name of the section.
        header: The header line that opened the note.
        error: Text of the exception raised.
    """

    model_config = {"frozen": True}

    section_index: int
    note_index: int
    supplier_name: str
    header: str
    error: str


class IngestionResult(BaseModel):
    """Outcome of ingesting one notes document.

    Immutable (frozen) so it can be handed to storage and export unchanged.

    Attributes:
        document_id: Identifier assigned to the document for this run.
        source_uri: Where the document was read from, if known.
        records: Finalized notes in document order.
        suppliers: Deduplicated supplier registry in first-seen order.
        sections_seen: Number of separator-delimited fragments.
        sections_dropped: Fragments discarded for lack of supplier context.
        notes_dropped: Notes discarded because their body was empty.
        failures: Notes skipped because finalizing them raised.
    """

    model_config = {"frozen": True}

    document_id: str
    source_uri: str | None = None
    records: tuple[NoteRecord, ...] = ()
    suppliers: tuple[SupplierIdentity, ...] = ()
    sections_seen: int = 0
    sections_dropped: int = 0
    notes_dropped: int = 0
    failures: tuple[NoteFailure, ...] = ()

    def records_for(self, supplier_id: str) -> list[NoteRecord]:
        """Return the records belonging to one supplier, in document order."""
        return [record for record in self.records if record.supplier_id == supplier_id]

    def supplier(self, supplier_id: str) -> SupplierIdentity | None:
        for identity in self.suppliers:
            if identity.supplier_id == supplier_id:
                return identity
        return None


class _RunTally:
    """Counters accumulated while a run's records are being produced."""

    def __init__(self) -> None:
        self.sections_seen = 0
        self.sections_dropped = 0
        self.notes_dropped = 0
        self.failures: list[NoteFailure] = []


class IngestionOrchestrator(BaseModel):
    """Drives segmenter, extractor, analyzer and resolver over one document.

    All components default to the rule-based implementations, so
    `IngestionOrchestrator()` is ready to use; pass replacements to customise
    a stage.

    Attributes:
        segmenter: Splits the document into supplier-attributed sections.
        extractor: Delimits notes inside each section.
        analyzer: Scores note bodies and picks out keywords.
        name_aliases: Raw header text -> display name table given to each
            run's resolver.
        clock: Fixed timestamp source; when None each run reads the current
            UTC time once at its start.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    segmenter: DocumentSegmenterInterface = Field(default_factory=NotesDocumentSegmenter)
    extractor: NoteExtractorInterface = Field(default_factory=NotesExtractor)
    analyzer: NoteAnalyzerInterface = Field(default_factory=LexiconSentimentAnalyzer)
    name_aliases: Mapping[str, str] = Field(default_factory=lambda: dict(DEFAULT_NAME_ALIASES))
    clock: IngestionClock | None = None

    @field_validator("name_aliases")
    @classmethod
    def aliases_keep_keys(cls, value: Mapping[str, str]) -> dict[str, str]:
        return check_aliases(value)

    def new_resolver(self, clock: IngestionClock | None = None) -> SupplierResolver:
        """Create an empty resolver configured with this orchestrator's aliases."""
        return SupplierResolver(aliases=self.name_aliases, clock=clock or self.clock)

    def _records(
        self,
        text: str,
        resolver: SupplierResolverInterface,
        clock: IngestionClock,
        tally: _RunTally,
    ) -> Iterator[tuple[SupplierIdentity, NoteRecord]]:
        segmentation = self.segmenter.segment_document(text)
        tally.sections_seen = segmentation.fragments_seen
        tally.sections_dropped = len(segmentation.orphaned)

        for section in segmentation.sections:
            supplier_name = section.supplier_name or ""
            raw_notes = self.extractor.extract(
                section.lines,
                supplier_name,
                section.supplier_status or DEFAULT_STATUS,
            )
            for note_index, raw in enumerate(raw_notes):
                if not raw.content.strip():
                    logger.debug(
                        "Dropping empty note %r for %s in section %d",
                        raw.header, supplier_name, section.index,
                    )
                    tally.notes_dropped += 1
                    continue
                try:
                    analysis = self.analyzer.analyze(raw.content)
                    supplier = resolver.resolve(raw.supplier_name)
                    record = finalize_note(raw, supplier, analysis, clock.now)
                except Exception as e:
                    logger.warning(
                        "Skipping note %r for %s in section %d: %s",
                        raw.header, supplier_name, section.index, e,
                    )
                    tally.failures.append(
                        NoteFailure(
                            section_index=section.index,
                            note_index=note_index,
                            supplier_name=supplier_name,
                            header=raw.header,
                            error=str(e),
                        )
                    )
                    continue
                yield supplier, record

    def iter_records(
        self,
        text: str,
        resolver: SupplierResolverInterface | None = None,
    ) -> Iterator[tuple[SupplierIdentity, NoteRecord]]:
        """Yield `(SupplierIdentity, NoteRecord)` pairs for a document.

        Uses the same skip-and-continue policy as `run`, without collecting
        the run statistics.
        """
        clock = self.clock or IngestionClock.utcnow()
        resolver = resolver if resolver is not None else self.new_resolver(clock)
        yield from self._records(text, resolver, clock, _RunTally())

    def run(
        self,
        text: str,
        source_uri: str | None = None,
        resolver: SupplierResolverInterface | None = None,
    ) -> IngestionResult:
        """Ingest a complete document held in memory.

        Args:
            text: The full notes corpus.
            source_uri: Optional origin of the text, recorded on the result.
            resolver: Resolver to use instead of a fresh one. Passing the
                same resolver to several sequential runs shares supplier
                identities between them; it must never be shared between
                concurrent runs.

        Returns:
            An `IngestionResult` with the records, the supplier registry and
            the drop/failure accounting for the run.
        """
        clock = self.clock or IngestionClock.utcnow()
        document = NotesDocument(
            document_id=str(uuid.uuid4()),
            content=text,
            source_uri=source_uri,
            created_at=clock.now,
        )
        resolver = resolver if resolver is not None else self.new_resolver(clock)
        tally = _RunTally()
        pairs = list(self._records(document.content, resolver, clock, tally))

        result = IngestionResult(
            document_id=document.document_id,
            source_uri=source_uri,
            records=tuple(record for _, record in pairs),
            suppliers=tuple(resolver.list_all()),
            sections_seen=tally.sections_seen,
            sections_dropped=tally.sections_dropped,
            notes_dropped=tally.notes_dropped,
            failures=tuple(tally.failures),
        )
        logger.info(
            "Ingested %d notes for %d suppliers from %s (%d fragments dropped, %d empty notes, %d failures)",
            len(result.records),
            len(result.suppliers),
            source_uri or document.document_id,
            result.sections_dropped,
            result.notes_dropped,
            len(result.failures),
        )
        return result

    def ingest_file(self, path: str | Path) -> IngestionResult:
        """Read a notes document from disk and ingest it.

        Raises:
            SourceNotFoundError: If the path does not exist, is not a regular
                file, or cannot be read. Nothing is processed in that case.
        """
        path = Path(path)
        if not path.is_file():
            raise SourceNotFoundError(f"Notes file not found: {path}")
        try:
            text = path.read_bytes().decode("utf-8", errors="replace")
        except OSError as e:
            raise SourceNotFoundError(f"Notes file could not be read: {path}: {e}") from e
        return self.run(text, source_uri=str(path))

    async def persist(
        self,
        result: IngestionResult,
        supplier_storage: SupplierStorageInterface,
        note_storage: NoteStorageInterface,
    ) -> int:
        """Hand a run's outputs to the storage backends.

        Suppliers are stored first (insert-or-ignore by id) so every note's
        supplier reference is valid when the note is written. A note that
        storage rejects is logged and skipped.

        Returns:
            Number of notes stored.
        """
        for supplier in result.suppliers:
            await supplier_storage.add(supplier)

        stored = 0
        for index, record in enumerate(result.records):
            try:
                await note_storage.add(record)
            except Exception as e:
                logger.error("Error storing note %d for %s: %s", index, record.supplier_name, e)
                continue
            stored += 1
        return stored
