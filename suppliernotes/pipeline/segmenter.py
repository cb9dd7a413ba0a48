"""Split a notes corpus into supplier-attributed sections.

The corpus is a sequence of fragments separated by a full-width rule of
"=" characters. A fragment whose first non-blank line looks like an
upper-case supplier header opens a new supplier context; any other fragment
continues the context of the last header seen. Fragments that arrive before
any header have nobody to belong to and are dropped.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from suppliernotes.document import Section, Segmentation
from suppliernotes.lexicon import DEFAULT_STATUS_TIERS, StatusTier
from suppliernotes.pipeline.interfaces import DocumentSegmenterInterface
from suppliernotes.pipeline.patterns import (
    BANNER_MARKERS,
    SECTION_SEPARATOR,
    is_banner,
    match_status_tier,
    match_supplier_header,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupplierContext:
    """The supplier that following continuation fragments belong to."""

    name: str
    status: str


class NotesDocumentSegmenter(DocumentSegmenterInterface):
    """Separator-delimited segmenter for the supplier notes corpus.

    Example:
        ```python
        segmenter = NotesDocumentSegmenter()
        for section in segmenter.segment(text):
            print(section.supplier_name, len(section.lines))
        ```
    """

    def __init__(
        self,
        separator: str = SECTION_SEPARATOR,
        banner_markers: Sequence[str] = BANNER_MARKERS,
        status_tiers: Sequence[StatusTier] = DEFAULT_STATUS_TIERS,
    ) -> None:
        if not separator:
            raise ValueError("separator must not be empty")
        self._separator = separator
        self._banner_markers = tuple(banner_markers)
        self._status_tiers = tuple(status_tiers)

    def segment_document(self, document: str) -> Segmentation:
        sections: list[Section] = []
        orphaned: list[int] = []
        context: SupplierContext | None = None
        fragments = document.split(self._separator)

        for index, fragment in enumerate(fragments):
            lines = [line.strip() for line in fragment.splitlines() if line.strip()]
            if not lines or is_banner(fragment, self._banner_markers):
                continue

            header = match_supplier_header(lines[0])
            if header is not None:
                context = SupplierContext(
                    name=header.supplier_name,
                    status=match_status_tier(" ".join(lines[0].split()), self._status_tiers),
                )
                sections.append(
                    Section(
                        index=index,
                        lines=tuple(lines[1:]),
                        is_header=True,
                        supplier_name=context.name,
                        supplier_status=context.status,
                    )
                )
            elif context is not None:
                sections.append(
                    Section(
                        index=index,
                        lines=tuple(lines),
                        is_header=False,
                        supplier_name=context.name,
                        supplier_status=context.status,
                    )
                )
            else:
                logger.debug("Dropping fragment %d: no supplier header seen yet", index)
                orphaned.append(index)

        return Segmentation(
            sections=tuple(sections),
            fragments_seen=len(fragments),
            orphaned=tuple(orphaned),
        )
