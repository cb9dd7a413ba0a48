"""Lexicon-based sentiment scoring and domain keyword extraction.

Sentiment is a count of lexicon hits, not a model. All positive, negative and
neutral terms are compiled into one word-bounded alternation ordered longest
term first, and the text is scanned once left to right. A phrase therefore
claims the words inside it: "quality issues" counts as one negative hit and
does not also count "quality" as positive.

The score is `(positive - negative) / SCORE_DIVISOR` clamped to [-1, 1]. The
divisor is a fixed calibration constant, not a function of note length, so
a short note with a couple of strong hits already sits near the end of the
scale and scores of very different note lengths are not comparable.
"""

import re
from collections import Counter

from suppliernotes.lexicon import DEFAULT_LEXICON, Lexicon
from suppliernotes.note import MAX_KEYWORDS, NoteAnalysis, Sentiment
from suppliernotes.pipeline.interfaces import NoteAnalyzerInterface

SCORE_DIVISOR = 10


def _term_pattern(term: str) -> str:
    return r"\s+".join(re.escape(word) for word in term.lower().split())


class LexiconSentimentAnalyzer(NoteAnalyzerInterface):
    """Deterministic analyzer driven entirely by a Lexicon."""

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON, max_keywords: int = MAX_KEYWORDS) -> None:
        if not 0 <= max_keywords <= MAX_KEYWORDS:
            raise ValueError(f"max_keywords must be between 0 and {MAX_KEYWORDS}")
        self._lexicon = lexicon
        self._max_keywords = max_keywords
        self._polarity: dict[str, str] = {}
        for polarity in ("positive", "negative", "neutral"):
            for term in getattr(lexicon, polarity):
                self._polarity[" ".join(term.lower().split())] = polarity
        terms = sorted(self._polarity, key=len, reverse=True)
        self._pattern: re.Pattern[str] | None = None
        if terms:
            self._pattern = re.compile(
                r"\b(?:" + "|".join(_term_pattern(t) for t in terms) + r")\b",
                re.IGNORECASE,
            )

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    def count_terms(self, content: str) -> Counter[str]:
        """Count lexicon hits in content, keyed by polarity name."""
        counts: Counter[str] = Counter()
        if self._pattern is None:
            return counts
        for m in self._pattern.finditer(content):
            counts[self._polarity[" ".join(m.group().lower().split())]] += 1
        return counts

    def extract_keywords(self, content: str) -> tuple[str, ...]:
        """Return distinct domain terms found in content, in category order.

        Terms are matched as plain substrings of the lowercased text. A term
        listed in more than one category is reported once, at its first
        position. At most `max_keywords` terms are returned.
        """
        lowered = content.lower()
        found: list[str] = []
        for category in self._lexicon.keyword_categories():
            for term in category:
                if term.lower() in lowered and term not in found:
                    found.append(term)
        return tuple(found[: self._max_keywords])

    def analyze(self, content: str) -> NoteAnalysis:
        counts = self.count_terms(content)
        positive, negative = counts["positive"], counts["negative"]
        if positive > negative:
            label = Sentiment.POSITIVE
        elif negative > positive:
            label = Sentiment.NEGATIVE
        else:
            label = Sentiment.NEUTRAL
        score = max(-1.0, min(1.0, (positive - negative) / SCORE_DIVISOR))
        return NoteAnalysis(
            label=label,
            score=score,
            keywords=self.extract_keywords(content),
            positive_count=positive,
            negative_count=negative,
            neutral_count=counts["neutral"],
        )
