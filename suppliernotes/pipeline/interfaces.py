"""Pipeline interface definitions for notes ingestion.

This module defines the abstract seams of the ingestion pipeline:

- **Segmentation**: split the raw corpus into ordered sections and decide
  which supplier each section belongs to.
- **Extraction**: find note headers inside a section and collect the lines
  that form each note body.
- **Analysis**: score a note body against the sentiment lexicon and pick out
  domain keywords.
- **Resolution**: map the many spellings of a supplier name onto one stable
  identity.

The default implementations are deterministic and rule based. The seams
exist so a deployment can swap a component (a different corpus layout, a
different lexicon strategy) without touching the orchestrator.

Typical flow:
    1. DocumentSegmenterInterface turns text into Section instances
    2. NoteExtractorInterface turns each section into RawNote instances
    3. NoteAnalyzerInterface scores each RawNote body
    4. SupplierResolverInterface attaches a SupplierIdentity
"""

from abc import ABC, abstractmethod
from typing import Sequence

from suppliernotes.document import Section, Segmentation
from suppliernotes.lexicon import DEFAULT_STATUS
from suppliernotes.note import NoteAnalysis, RawNote
from suppliernotes.supplier import SupplierIdentity


class DocumentSegmenterInterface(ABC):
    """Split a raw notes document into ordered, supplier-tagged sections.

    Implementations decide what separates sections, which sections are
    banners to discard, and which sections open a new supplier context.
    Sections that cannot be attributed to any supplier are not returned.
    """

    @abstractmethod
    def segment_document(self, document: str) -> Segmentation:
        """Segment a document and report what was discarded.

        Args:
            document: The full raw text of the notes corpus.

        Returns:
            A Segmentation whose sections are in document order. Every kept
            section carries a supplier name, either from its own header
            line or inherited from the closest preceding header section.
        """

    def segment(self, document: str) -> list[Section]:
        """Return only the kept sections of document."""
        return list(self.segment_document(document).sections)


class NoteExtractorInterface(ABC):
    """Delimit individual notes inside a supplier's lines."""

    @abstractmethod
    def extract(
        self,
        lines: Sequence[str],
        supplier_name: str,
        supplier_status: str = DEFAULT_STATUS,
    ) -> list[RawNote]:
        """Extract notes from the lines of one section.

        Args:
            lines: Section lines in document order, header line excluded.
            supplier_name: Raw supplier name the section belongs to.
            supplier_status: Status tier of that supplier's section.

        Returns:
            RawNote objects in document order, each tagged with the
            supplier name and status. Notes whose header was never
            followed by body text are still returned, with empty content;
            dropping them is the caller's decision.
        """


class NoteAnalyzerInterface(ABC):
    """Classify the tone of a note body and list its domain keywords."""

    @abstractmethod
    def analyze(self, content: str) -> NoteAnalysis:
        """Analyze note content.

        Args:
            content: The note body text.

        Returns:
            A NoteAnalysis whose score lies in [-1, 1], whose label agrees
            with the sign of the score, and which lists at most five
            keywords.
        """


class SupplierResolverInterface(ABC):
    """Resolve raw supplier names to stable identities within one run.

    Implementations own the run's dedup index. A resolver instance must
    not be shared between concurrent runs.
    """

    @abstractmethod
    def resolve(self, raw_name: str) -> SupplierIdentity:
        """Return the identity for raw_name, creating it on first sight."""

    @abstractmethod
    def get(self, supplier_id: str) -> SupplierIdentity | None:
        """Return a previously resolved identity by id, or None."""

    @abstractmethod
    def list_all(self) -> list[SupplierIdentity]:
        """Return every identity created so far, in creation order."""
