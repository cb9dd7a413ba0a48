"""Tests for the line classifiers in suppliernotes.pipeline.patterns.

Each matcher family is exercised on its own: supplier headers, status
tiers, note headers (including type precedence and author capture), date
parsing, and the skip/banner helpers.
"""

import pytest

from suppliernotes.lexicon import DEFAULT_STATUS, DEFAULT_STATUS_TIERS
from suppliernotes.note import NoteType
from suppliernotes.pipeline.patterns import (
    UNKNOWN_AUTHOR,
    extract_header_date,
    infer_note_type,
    is_banner,
    is_skipped_line,
    match_note_header,
    match_status_tier,
    match_supplier_header,
    parse_date,
)


class TestSupplierHeader:
    """Tests for match_supplier_header."""

    def test_name_with_status(self) -> None:
        """An upper-case name with a dash suffix splits into name and status text."""
        m = match_supplier_header("QUICKFAB INDUSTRIES - CAUTION / HIGH RISK")
        assert m is not None
        assert m.matcher == "name_with_status"
        assert m.supplier_name == "QUICKFAB INDUSTRIES"
        assert m.status_text == "CAUTION / HIGH RISK"

    def test_name_only(self) -> None:
        m = match_supplier_header("APEX MFG INC")
        assert m is not None
        assert m.matcher == "name_only"
        assert m.supplier_name == "APEX MFG INC"
        assert m.status_text is None

    def test_slashes_and_ampersands_in_name(self) -> None:
        m = match_supplier_header("APEX MANUFACTURING / APEX MFG")
        assert m is not None
        assert m.supplier_name == "APEX MANUFACTURING / APEX MFG"

    def test_extra_whitespace_is_collapsed(self) -> None:
        m = match_supplier_header("  STELLAR   METALWORKS  -  GOLD STANDARD ")
        assert m is not None
        assert m.supplier_name == "STELLAR METALWORKS"
        assert m.status_text == "GOLD STANDARD"

    @pytest.mark.parametrize(
        "line",
        [
            "Email from Dana (3/5/2022)",
            "Parts arrived late.",
            "Quickfab Industries",
            "",
        ],
    )
    def test_non_headers(self, line: str) -> None:
        """Mixed-case or empty lines never open a supplier section."""
        assert match_supplier_header(line) is None


class TestStatusTier:
    """Tests for match_status_tier against the default tiers."""

    @pytest.mark.parametrize(
        "status_text,expected",
        [
            ("GOLD STANDARD", "GOLD STANDARD"),
            ("CAUTION / HIGH RISK", "CAUTION"),
            ("HIGH RISK", "CAUTION"),
            ("NICHE SPECIALIST", "SPECIALIST"),
            ("EXPERT", "EXPERT"),
            ("PREFERRED", DEFAULT_STATUS),
            ("", DEFAULT_STATUS),
        ],
    )
    def test_tiers(self, status_text: str, expected: str) -> None:
        assert match_status_tier(status_text, DEFAULT_STATUS_TIERS) == expected

    def test_first_tier_wins(self) -> None:
        """A header carrying two markers gets the earlier tier."""
        assert match_status_tier("GOLD STANDARD / EXPERT", DEFAULT_STATUS_TIERS) == "GOLD STANDARD"


class TestNoteHeader:
    """Tests for match_note_header and infer_note_type."""

    def test_email_from(self) -> None:
        m = match_note_header("Email from Dana (3/5/2022)")
        assert m is not None
        assert m.matcher == "email_from"
        assert m.note_type is NoteType.EMAIL
        assert m.author == "Dana"
        assert m.date == "2022-03-05"

    def test_meeting_notes_without_author(self) -> None:
        m = match_note_header("Meeting notes (4/1/2021)")
        assert m is not None
        assert m.note_type is NoteType.MEETING
        assert m.author == UNKNOWN_AUTHOR
        assert m.date == "2021-04-01"

    def test_meeting_notes_with_author(self) -> None:
        m = match_note_header("MEETING NOTES by Priya")
        assert m is not None
        assert m.author == "Priya"
        assert m.date is None

    def test_possessive_note(self) -> None:
        m = match_note_header("Sam's note (spring 2023)")
        assert m is not None
        assert m.matcher == "possessive_note"
        assert m.note_type is NoteType.NOTE
        assert m.author == "Sam"
        assert m.date == "spring 2023"

    def test_possessive_email_with_typographic_apostrophe(self) -> None:
        m = match_note_header("Dana’s email about pricing")
        assert m is not None
        assert m.matcher == "possessive_email"
        assert m.note_type is NoteType.EMAIL
        assert m.author == "Dana"

    def test_note_label(self) -> None:
        m = match_note_header("Note: call them back")
        assert m is not None
        assert m.matcher == "note_label"
        assert m.author == UNKNOWN_AUTHOR

    def test_note_label_with_author(self) -> None:
        m = match_note_header("Note from Kim: shipment slipped")
        assert m is not None
        assert m.author == "Kim"

    @pytest.mark.parametrize(
        "line",
        [
            "Parts arrived 2 weeks late.",
            "Notes were taken by the buyer.",
            "We emailed them twice.",
        ],
    )
    def test_body_lines_are_not_headers(self, line: str) -> None:
        assert match_note_header(line) is None

    def test_email_cue_outranks_meeting_and_note(self) -> None:
        """Type precedence is EMAIL, then MEETING, then NOTE."""
        assert infer_note_type("Sam's note on the meeting email") is NoteType.EMAIL
        assert infer_note_type("Sam's note on the meeting") is NoteType.MEETING
        assert infer_note_type("Sam's note") is NoteType.NOTE

    def test_possessive_note_mentioning_email_is_email(self) -> None:
        m = match_note_header("Sam's note forwarding an email")
        assert m is not None
        assert m.matcher == "possessive_note"
        assert m.note_type is NoteType.EMAIL


class TestDates:
    """Tests for parse_date and extract_header_date."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("3/5/2022", "2022-03-05"),
            ("12/31/2021", "2021-12-31"),
            ("sent 7/4/2023", "2023-07-04"),
        ],
    )
    def test_valid_dates_are_rewritten(self, text: str, expected: str) -> None:
        assert parse_date(text) == expected

    @pytest.mark.parametrize("text", ["2/30/2023", "13/1/2022", "March 2022", "Q3"])
    def test_other_text_passes_through(self, text: str) -> None:
        """Strings that are not a real M/D/YYYY date are returned unchanged."""
        assert parse_date(text) == text

    def test_header_without_parentheses_has_no_date(self) -> None:
        assert extract_header_date("Email from Dana") is None

    def test_first_parenthesized_part_is_used(self) -> None:
        assert extract_header_date("Email from Dana (3/5/2022) (resent 3/9/2022)") == "2022-03-05"


class TestLineHelpers:
    def test_skipped_lines(self) -> None:
        assert is_skipped_line("**NOTE: internal only")
        assert is_skipped_line("====================")
        assert not is_skipped_line("Note: call back")

    def test_custom_skip_prefixes(self) -> None:
        assert is_skipped_line("# comment", prefixes=("#",))
        assert not is_skipped_line("**NOTE: x", prefixes=("#",))

    def test_banners(self) -> None:
        assert is_banner("SUPPLIER PERFORMANCE NOTES\nQ1 2024")
        assert is_banner("END OF NOTES")
        assert not is_banner("QUICKFAB INDUSTRIES")
