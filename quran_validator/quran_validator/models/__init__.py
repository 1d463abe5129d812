"""
Pydantic data models for the quran-validator library.

These models represent the core data structures used throughout the library:
- Verse: A single verse from the Quran
- Surah: Surah metadata
- RiwayaId / RiwayaInfo: Transmission variants and their metadata
- ValidationResult: Result of checking a quote against the corpus
- FabricationAnalysis: Word-by-word fabrication verdicts
"""

from quran_validator.models.verse import Verse
from quran_validator.models.surah import Surah, RevelationType
from quran_validator.models.riwaya import RiwayaId, RiwayaInfo, PRIMARY_RIWAYA
from quran_validator.models.result import (
    MatchType,
    ValidationResult,
    VerseSuggestion,
    RiwayaMatch,
    VerseRange,
    SearchResult,
    WordAnalysis,
    FabricationStats,
    FabricationAnalysis,
)

__all__ = [
    "Verse",
    "Surah",
    "RevelationType",
    "RiwayaId",
    "RiwayaInfo",
    "PRIMARY_RIWAYA",
    "MatchType",
    "ValidationResult",
    "VerseSuggestion",
    "RiwayaMatch",
    "VerseRange",
    "SearchResult",
    "WordAnalysis",
    "FabricationStats",
    "FabricationAnalysis",
]
