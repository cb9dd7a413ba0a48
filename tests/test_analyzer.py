"""Tests for LexiconSentimentAnalyzer and the Lexicon model.

The analyzer is pure, so every test builds its own instance and checks the
counts, label, score and keywords for a short text.
"""

import pytest
from pydantic import ValidationError

from suppliernotes.lexicon import DEFAULT_LEXICON, Lexicon
from suppliernotes.note import Sentiment
from suppliernotes.pipeline.analyzer import LexiconSentimentAnalyzer


@pytest.fixture
def analyzer() -> LexiconSentimentAnalyzer:
    return LexiconSentimentAnalyzer()


class TestSentiment:
    """Tests for counting, labelling and scoring."""

    def test_late_delivery_with_quality_issues(self, analyzer: LexiconSentimentAnalyzer) -> None:
        """Phrases claim their words: 'quality issues' is one negative hit, not a positive one."""
        analysis = analyzer.analyze("Parts arrived 2 weeks late. Quality issues reported.")

        assert analysis.label is Sentiment.NEGATIVE
        assert analysis.positive_count == 0
        assert analysis.negative_count >= 2
        assert analysis.score == pytest.approx(-0.2)

    def test_positive_note(self, analyzer: LexiconSentimentAnalyzer) -> None:
        analysis = analyzer.analyze("Excellent finish and zero defects again. Delivered early.")
        assert analysis.label is Sentiment.POSITIVE
        assert analysis.positive_count == 3
        assert analysis.negative_count == 0
        assert analysis.score == pytest.approx(0.3)

    def test_neutral_terms_do_not_move_the_score(self, analyzer: LexiconSentimentAnalyzer) -> None:
        analysis = analyzer.analyze("Pricing is fair and consistent.")
        assert analysis.label is Sentiment.NEUTRAL
        assert analysis.neutral_count == 2
        assert analysis.score == 0.0

    def test_tie_is_neutral(self, analyzer: LexiconSentimentAnalyzer) -> None:
        analysis = analyzer.analyze("Good parts but late.")
        assert analysis.positive_count == 1
        assert analysis.negative_count == 1
        assert analysis.label is Sentiment.NEUTRAL
        assert analysis.score == 0.0

    def test_no_hits_is_neutral(self, analyzer: LexiconSentimentAnalyzer) -> None:
        analysis = analyzer.analyze("Shipment number 4471 received.")
        assert analysis.label is Sentiment.NEUTRAL
        assert analysis.score == 0.0

    def test_score_is_clamped(self, analyzer: LexiconSentimentAnalyzer) -> None:
        assert analyzer.analyze("excellent " * 15).score == 1.0
        assert analyzer.analyze("terrible " * 15).score == -1.0

    def test_matching_is_case_insensitive(self, analyzer: LexiconSentimentAnalyzer) -> None:
        assert analyzer.analyze("EXCELLENT").positive_count == 1

    def test_words_match_on_boundaries(self, analyzer: LexiconSentimentAnalyzer) -> None:
        """'lately' is not a hit for 'late'."""
        analysis = analyzer.analyze("We have talked lately.")
        assert analysis.negative_count == 0

    def test_phrase_tolerates_extra_whitespace(self, analyzer: LexiconSentimentAnalyzer) -> None:
        analysis = analyzer.analyze("zero   defects")
        assert analysis.positive_count == 1
        assert analysis.negative_count == 0

    def test_empty_lexicon(self) -> None:
        lexicon = Lexicon(positive=(), negative=(), neutral=())
        analysis = LexiconSentimentAnalyzer(lexicon).analyze("excellent but late")
        assert analysis.label is Sentiment.NEUTRAL
        assert analysis.positive_count == 0

    def test_count_terms(self, analyzer: LexiconSentimentAnalyzer) -> None:
        counts = analyzer.count_terms("good, great, late, fine")
        assert counts["positive"] == 2
        assert counts["negative"] == 1
        assert counts["neutral"] == 1


class TestKeywords:
    """Tests for domain keyword extraction."""

    def test_keywords_in_category_order(self, analyzer: LexiconSentimentAnalyzer) -> None:
        keywords = analyzer.analyze("Parts arrived 2 weeks late. Quality issues reported.").keywords
        assert keywords == ("quality", "late")

    def test_keywords_are_substring_matches(self, analyzer: LexiconSentimentAnalyzer) -> None:
        """Keyword matching is substring based, unlike sentiment counting."""
        assert analyzer.extract_keywords("We have talked lately.") == ("late",)

    def test_keyword_cap(self, analyzer: LexiconSentimentAnalyzer) -> None:
        text = "quality defects rework rejection perfect excellent late early price"
        keywords = analyzer.analyze(text).keywords
        assert keywords == ("quality", "defects", "rework", "rejection", "perfect")

    def test_keywords_are_deduplicated(self) -> None:
        lexicon = Lexicon(quality=("late",), delivery=("late", "early"), pricing=())
        analyzer = LexiconSentimentAnalyzer(lexicon)
        assert analyzer.extract_keywords("late and early") == ("late", "early")

    def test_smaller_cap(self) -> None:
        analyzer = LexiconSentimentAnalyzer(max_keywords=1)
        assert analyzer.extract_keywords("quality and price") == ("quality",)

    @pytest.mark.parametrize("cap", [-1, 6])
    def test_invalid_cap_rejected(self, cap: int) -> None:
        with pytest.raises(ValueError):
            LexiconSentimentAnalyzer(max_keywords=cap)


class TestLexicon:
    def test_defaults(self) -> None:
        assert LexiconSentimentAnalyzer().lexicon is DEFAULT_LEXICON
        assert "quality issues" in DEFAULT_LEXICON.negative
        assert DEFAULT_LEXICON.keyword_categories()[0] == DEFAULT_LEXICON.quality

    def test_term_in_two_polarities_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Lexicon(positive=("good",), negative=("Good",))

    def test_blank_term_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Lexicon(neutral=("fine", "  "))

    def test_lexicon_is_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_LEXICON.positive = ("x",)  # type: ignore[misc]
