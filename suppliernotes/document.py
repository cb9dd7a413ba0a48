"""Document and section representation for the notes corpus."""

from datetime import datetime

from pydantic import BaseModel, Field


class NotesDocument(BaseModel):
    """A complete notes corpus loaded for one ingestion run."""

    model_config = {"frozen": True}

    document_id: str = Field(
        description="Unique identifier for this run's document."
    )
    content: str = Field(
        description="Full raw text of the document."
    )
    source_uri: str | None = Field(
        default=None,
        description="Original source location (file path, URL, etc.)."
    )
    created_at: datetime = Field(
        description="When the document was loaded."
    )


class Section(BaseModel):
    """A fragment of the document between two separator lines.

    Header sections name their supplier on the first line; continuation
    sections carry the supplier context inherited from the most recent
    header section. `lines` holds the non-blank lines after the header line
    (or all non-blank lines for a continuation section).
    """

    model_config = {"frozen": True}

    index: int = Field(ge=0, description="Position of the fragment in the document.")
    lines: tuple[str, ...] = ()
    is_header: bool = False
    supplier_name: str | None = Field(
        default=None,
        description="Raw supplier name from the header line.",
    )
    supplier_status: str | None = Field(
        default=None,
        description="Status tier derived from the header line.",
    )


class Segmentation(BaseModel):
    """Sections kept from one document plus the indexes of dropped fragments."""

    model_config = {"frozen": True}

    sections: tuple[Section, ...] = ()
    fragments_seen: int = Field(default=0, ge=0)
    orphaned: tuple[int, ...] = Field(
        default=(),
        description="Indexes of continuation fragments seen before any supplier header.",
    )
