"""Static term tables used by the rule-based note analysis.

The lexicon is pure data: sentiment word/phrase lists, the domain keyword
categories (quality, delivery, pricing), the supplier status tiers recognised
in section headers, and the alias table that pins well-known supplier header
spellings to their preferred display names.

Everything here can be replaced through configuration (see
`suppliernotes.config`), but the defaults reproduce the tables the notes
corpus was tuned against.
"""

from pydantic import BaseModel, Field, model_validator

DEFAULT_STATUS = "STANDARD"


class StatusTier(BaseModel, frozen=True):
    """A supplier status tier and the header substrings that select it."""

    label: str = Field(description="Status written onto every note of the section.")
    markers: tuple[str, ...] = Field(
        min_length=1,
        description="Upper-case substrings; any one present in the header selects this tier.",
    )


class Lexicon(BaseModel, frozen=True):
    """Sentiment and domain-keyword term lists.

    Sentiment entries may be multi-word phrases ("zero defects"). Keyword
    categories are matched as plain substrings and reported in declaration
    order: quality first, then delivery, then pricing.
    """

    positive: tuple[str, ...] = (
        "excellent", "perfect", "outstanding", "reliable", "good", "great", "best",
        "premium", "quality", "flawless", "accurate", "competitive", "solid",
        "dependable", "trust", "worth", "amazing", "spectacular", "unmatched",
        "delivered early", "zero defects", "never missed", "zero rework",
    )
    negative: tuple[str, ...] = (
        "late", "delayed", "poor", "terrible", "bad", "issues", "problems",
        "failed", "rejected", "defects", "unacceptable", "mediocre", "disaster",
        "complained", "leaked", "wrong", "unusable", "gamble", "regret",
        "weeks late", "quality issues", "delivery issues", "not happy",
    )
    neutral: tuple[str, ...] = (
        "standard", "fair", "acceptable", "fine", "okay", "usual", "normal",
        "consistent", "default", "average",
    )
    quality: tuple[str, ...] = ("quality", "defects", "rework", "rejection", "perfect", "excellent")
    delivery: tuple[str, ...] = ("late", "early", "delivery", "deadline", "on time", "delayed")
    pricing: tuple[str, ...] = ("price", "cost", "expensive", "cheap", "premium", "competitive")

    @model_validator(mode="after")
    def polarities_are_disjoint(self) -> "Lexicon":
        seen: dict[str, str] = {}
        for polarity in ("positive", "negative", "neutral"):
            for term in getattr(self, polarity):
                key = term.strip().lower()
                if not key:
                    raise ValueError(f"Empty term in {polarity} list")
                if key in seen and seen[key] != polarity:
                    raise ValueError(f"Term {term!r} appears in both {seen[key]} and {polarity} lists")
                seen[key] = polarity
        return self

    def keyword_categories(self) -> tuple[tuple[str, ...], ...]:
        """Return the keyword lists in the order their matches are reported."""
        return (self.quality, self.delivery, self.pricing)


DEFAULT_LEXICON = Lexicon()

# First matching tier wins, so broader markers must come after the ones they
# would otherwise shadow.
DEFAULT_STATUS_TIERS: tuple[StatusTier, ...] = (
    StatusTier(label="GOLD STANDARD", markers=("GOLD STANDARD",)),
    StatusTier(label="CAUTION", markers=("CAUTION", "HIGH RISK")),
    StatusTier(label="SPECIALIST", markers=("SPECIALIST", "NICHE SPECIALIST")),
    StatusTier(label="EXPERT", markers=("EXPERT",)),
)

# Exact raw header text -> preferred display name. Each display name must
# normalize to the same key as its header text.
DEFAULT_NAME_ALIASES: dict[str, str] = {
    "QUICKFAB INDUSTRIES": "QuickFab Industries",
    "STELLAR METALWORKS": "Stellar Metalworks",
    "APEX MANUFACTURING": "Apex Manufacturing Inc",
    "APEX MFG": "Apex Manufacturing Inc",
    "APEX MFG INC": "Apex Manufacturing Inc",
    "APEX MANUFACTURING INC": "Apex Manufacturing Inc",
    "APEX MANUFACTURING / APEX MFG / APEX MFG INC / APEX MANUFACTURING INC": "Apex Manufacturing Inc",
    "TITANFORGE LLC": "TitanForge LLC",
    "AEROFLOW SYSTEMS": "AeroFlow Systems",
    "PRECISION THERMAL CO": "Precision Thermal Co",
}
