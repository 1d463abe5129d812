"""
Validation and fabrication-analysis result models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from quran_validator.models.riwaya import RiwayaId
from quran_validator.models.verse import Verse


class MatchType(str, Enum):
    """Type of match found during validation."""

    EXACT = "exact"  # Byte-identical to the reference text
    NORMALIZED = "normalized"  # Equal only after normalization
    NONE = "none"


class VerseSuggestion(BaseModel):
    """An alternative verse that the input also matches."""

    verse: Verse
    reference: str = Field(..., description="Reference string like '109:5'")

    model_config = {"frozen": True}

    @classmethod
    def from_verse(cls, verse: Verse) -> "VerseSuggestion":
        return cls(verse=verse, reference=verse.reference)


class RiwayaMatch(BaseModel):
    """A match of the input against one riwaya's text."""

    riwaya: RiwayaId
    match_type: MatchType
    verse: Verse
    riwaya_text: str = Field(..., description="The riwaya's own text for the verse")

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """
    Result of validating a potential Quran quote.

    Attributes:
        is_valid: Whether a Quran verse was found
        match_type: Type of match found
        matched_verse: The matched verse (if found)
        reference: Reference string like "2:255"
        normalized_input: The normalized input text that was checked
        expected_normalized: The expected normalized verse text (validate_against only)
        mismatch_index: Character index where input and expected text diverge
            (-1 if identical)
        suggestions: Other verses the input also matches
        riwaya_matches: Per-riwaya matches (multi-riwaya mode only)
    """

    is_valid: bool
    match_type: MatchType
    matched_verse: Optional[Verse] = None
    reference: Optional[str] = None
    normalized_input: Optional[str] = None
    expected_normalized: Optional[str] = None
    mismatch_index: Optional[int] = None
    suggestions: Optional[list[VerseSuggestion]] = None
    riwaya_matches: Optional[list[RiwayaMatch]] = None

    @classmethod
    def no_match(cls, normalized_input: Optional[str] = None) -> "ValidationResult":
        """Build the result returned when nothing matched."""
        return cls(is_valid=False, match_type=MatchType.NONE, normalized_input=normalized_input)

    def __str__(self) -> str:
        if not self.is_valid:
            return "ValidationResult(none)"
        return f"ValidationResult({self.match_type.value}, {self.reference})"


class VerseRange(BaseModel):
    """A contiguous range of verses within one surah."""

    text: str = Field(..., description="Verse texts joined with single spaces")
    text_simple: str = Field(default="", description="Simplified texts joined with single spaces")
    verses: list[Verse]

    @property
    def reference(self) -> str:
        first, last = self.verses[0], self.verses[-1]
        if first.ayah == last.ayah:
            return first.reference
        return f"{first.surah}:{first.ayah}-{last.ayah}"


class SearchResult(BaseModel):
    """A verse returned by containment search, with its relevance score."""

    verse: Verse
    similarity: float = Field(..., ge=0.0, le=1.0)


class WordAnalysis(BaseModel):
    """Fabrication verdict for a single word."""

    word: str
    is_fabricated: bool


class FabricationStats(BaseModel):
    """Aggregate counts for a fabrication analysis."""

    total_words: int = Field(default=0, ge=0)
    fabricated_words: int = Field(default=0, ge=0)
    fabricated_ratio: float = Field(default=0.0, ge=0.0, le=1.0)


class FabricationAnalysis(BaseModel):
    """
    Word-by-word fabrication analysis of a piece of text.

    Attributes:
        normalized_input: The normalized input text
        words: Every input word with its verdict, in order
        stats: Aggregate counts
    """

    normalized_input: str
    words: list[WordAnalysis] = Field(default_factory=list)
    stats: FabricationStats = Field(default_factory=FabricationStats)

    @property
    def fabricated(self) -> list[str]:
        """The fabricated words, in input order."""
        return [w.word for w in self.words if w.is_fabricated]

    @property
    def has_fabrication(self) -> bool:
        return self.stats.fabricated_words > 0
