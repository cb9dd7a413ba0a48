"""Note extraction within a supplier section, and note finalization."""

import logging
from datetime import datetime
from typing import Sequence

from suppliernotes.lexicon import DEFAULT_STATUS
from suppliernotes.note import NoteAnalysis, NoteRecord, RawNote
from suppliernotes.pipeline.interfaces import NoteExtractorInterface
from suppliernotes.pipeline.patterns import (
    SKIP_LINE_PREFIXES,
    NoteHeaderMatch,
    is_skipped_line,
    match_note_header,
)
from suppliernotes.supplier import SupplierIdentity

logger = logging.getLogger(__name__)


class OpenNote:
    """Accumulator for the note currently being read."""

    def __init__(self, header: str, match: NoteHeaderMatch) -> None:
        self.header = header
        self.match = match
        self.body: list[str] = []

    def close(self, supplier_name: str, supplier_status: str) -> RawNote:
        return RawNote(
            supplier_name=supplier_name,
            supplier_status=supplier_status,
            note_type=self.match.note_type,
            author=self.match.author,
            date=self.match.date,
            content=" ".join(self.body),
            header=self.header,
        )


class NotesExtractor(NoteExtractorInterface):
    """Header-driven note extractor.

    A line matching one of the note-header lead-ins ("Email from Dana",
    "Meeting notes", "Dana's note", "Dana's email", "Note:") closes the note
    in progress and opens a new one. Every other non-blank line is body text
    of the open note. Lines seen before the first header of a section have
    no note to belong to and are ignored.
    """

    def __init__(self, skip_prefixes: Sequence[str] = SKIP_LINE_PREFIXES) -> None:
        self._skip_prefixes = tuple(skip_prefixes)

    def extract(
        self,
        lines: Sequence[str],
        supplier_name: str,
        supplier_status: str = DEFAULT_STATUS,
    ) -> list[RawNote]:
        notes: list[RawNote] = []
        open_note: OpenNote | None = None

        for line in lines:
            text = line.strip()
            if not text or is_skipped_line(text, self._skip_prefixes):
                continue

            header = match_note_header(text)
            if header is not None:
                if open_note is not None:
                    notes.append(open_note.close(supplier_name, supplier_status))
                open_note = OpenNote(text, header)
            elif open_note is not None:
                open_note.body.append(text)
            else:
                logger.debug("Ignoring line outside any note for %s: %r", supplier_name, text)

        if open_note is not None:
            notes.append(open_note.close(supplier_name, supplier_status))
        return notes


def finalize_note(
    note: RawNote,
    supplier: SupplierIdentity,
    analysis: NoteAnalysis,
    created_at: datetime,
) -> NoteRecord:
    """Attach the resolved supplier and the analysis to an extracted note.

    Raises:
        pydantic.ValidationError: If the note has no content or the analysis
            breaks a record invariant.
    """
    return NoteRecord(
        supplier_id=supplier.supplier_id,
        supplier_name=supplier.display_name,
        supplier_status=note.supplier_status,
        note_type=note.note_type,
        author=note.author,
        date=note.date,
        content=note.content,
        sentiment=analysis.label,
        sentiment_score=analysis.score,
        keywords=analysis.keywords,
        created_at=created_at,
    )
