"""Line classifiers for the notes corpus.

Each classification (supplier header, note header, date) is an ordered tuple
of named matchers tried first to last; the first one that matches decides.
Keeping them as data makes the priority rules visible in one place and lets
each matcher be tested on its own.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Sequence

from suppliernotes.lexicon import DEFAULT_STATUS, StatusTier
from suppliernotes.note import NoteType

SECTION_SEPARATOR = "=" * 80

# Fragments containing one of these are title/closing banners, not supplier content.
BANNER_MARKERS: tuple[str, ...] = ("SUPPLIER PERFORMANCE NOTES", "END OF NOTES")

# Lines starting with one of these are skipped inside a section.
SKIP_LINE_PREFIXES: tuple[str, ...] = ("**NOTE:", "================")


@dataclass(frozen=True)
class LineMatcher:
    """A named regular expression anchored at the start of a line."""

    name: str
    pattern: re.Pattern[str]

    def match(self, line: str) -> re.Match[str] | None:
        return self.pattern.match(line)


@dataclass(frozen=True)
class SupplierHeaderMatch:
    matcher: str
    supplier_name: str
    status_text: str | None


@dataclass(frozen=True)
class NoteHeaderMatch:
    matcher: str
    note_type: NoteType
    author: str
    date: str | None


# Upper-case names may contain spaces, slashes, ampersands, parentheses and
# commas; an optional " - DESCRIPTOR" suffix carries the status tier.
SUPPLIER_HEADER_MATCHERS: tuple[LineMatcher, ...] = (
    LineMatcher(
        "name_with_status",
        re.compile(r"^(?P<name>[A-Z][A-Z\s/&(),]+?)\s*-\s*(?P<status>[A-Z\s/(),&]+)$"),
    ),
    LineMatcher(
        "name_only",
        re.compile(r"^(?P<name>[A-Z][A-Z\s/&(),]+?)\s*$"),
    ),
)

NOTE_HEADER_MATCHERS: tuple[LineMatcher, ...] = (
    LineMatcher("email_from", re.compile(r"^email\s+from\s+(?P<author>\w+)", re.IGNORECASE)),
    LineMatcher(
        "meeting_notes",
        re.compile(r"^meeting\s+notes(?:\s+(?:from|by)\s+(?P<author>\w+))?", re.IGNORECASE),
    ),
    LineMatcher("possessive_note", re.compile(r"^(?P<author>\w+)['’]s\s+note", re.IGNORECASE)),
    LineMatcher("possessive_email", re.compile(r"^(?P<author>\w+)['’]s\s+email", re.IGNORECASE)),
    LineMatcher("note_label", re.compile(r"^note(?:\s+from\s+(?P<author>\w+))?\s*:", re.IGNORECASE)),
)

# Checked in order against the lowercased header; the first cue present wins.
NOTE_TYPE_CUES: tuple[tuple[str, NoteType], ...] = (
    ("email", NoteType.EMAIL),
    ("meeting", NoteType.MEETING),
    ("note", NoteType.NOTE),
)

UNKNOWN_AUTHOR = "Unknown"

_PARENTHESIZED = re.compile(r"\(([^)]+)\)")
_US_DATE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")


def match_supplier_header(line: str) -> SupplierHeaderMatch | None:
    """Classify a section's first line as a supplier header, or return None."""
    line = " ".join(line.split())
    for matcher in SUPPLIER_HEADER_MATCHERS:
        m = matcher.match(line)
        if m is None:
            continue
        name = m.group("name").strip()
        status = m.groupdict().get("status")
        return SupplierHeaderMatch(
            matcher=matcher.name,
            supplier_name=name,
            status_text=status.strip() if status else None,
        )
    return None


def match_status_tier(header: str, tiers: Sequence[StatusTier]) -> str:
    """Return the label of the first tier with a marker in header, else STANDARD."""
    for tier in tiers:
        if any(marker in header for marker in tier.markers):
            return tier.label
    return DEFAULT_STATUS


def infer_note_type(header: str) -> NoteType:
    lowered = header.lower()
    for cue, note_type in NOTE_TYPE_CUES:
        if cue in lowered:
            return note_type
    return NoteType.NOTE


def parse_date(text: str) -> str:
    """Rewrite an embedded M/D/YYYY date as YYYY-MM-DD.

    Anything that is not a real calendar date in that shape is returned
    unchanged, so "2/30/2023" stays as written rather than becoming the
    impossible "2023-02-30".
    """
    m = _US_DATE.search(text)
    if m is None:
        return text
    month, day, year = (int(part) for part in m.groups())
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return text


def extract_header_date(header: str) -> str | None:
    """Return the parsed date from the first parenthesized part of header."""
    m = _PARENTHESIZED.search(header)
    if m is None:
        return None
    return parse_date(m.group(1).strip())


def match_note_header(line: str) -> NoteHeaderMatch | None:
    """Classify a line as a note header, or return None."""
    for matcher in NOTE_HEADER_MATCHERS:
        m = matcher.match(line)
        if m is None:
            continue
        return NoteHeaderMatch(
            matcher=matcher.name,
            note_type=infer_note_type(line),
            author=m.groupdict().get("author") or UNKNOWN_AUTHOR,
            date=extract_header_date(line),
        )
    return None


def is_skipped_line(line: str, prefixes: Sequence[str] = SKIP_LINE_PREFIXES) -> bool:
    return line.startswith(tuple(prefixes))


def is_banner(fragment: str, markers: Sequence[str] = BANNER_MARKERS) -> bool:
    return any(marker in fragment for marker in markers)
