"""
quran-validator: verify Arabic text against the Quran corpus.

Checks whether a piece of Arabic text is a verbatim quotation, finds the
verse it comes from, locates where a misquote diverges from the cited verse,
and flags words that never occur anywhere in the corpus.

Quick start:
    from quran_validator import QuranValidator

    validator = QuranValidator()
    result = validator.validate("بِسْمِ ٱللَّهِ ٱلرَّحْمَـٰنِ ٱلرَّحِيمِ")
    print(result.is_valid, result.reference)  # True 1:1
"""

from quran_validator.config import QuranValidatorSettings, configure, get_settings
from quran_validator.core import (
    QuranValidator,
    create_validator,
    get_validator,
    normalize_arabic,
    similarity,
    find_differences,
)
from quran_validator.data import CorpusDataError
from quran_validator.models import (
    FabricationAnalysis,
    MatchType,
    RiwayaId,
    RiwayaInfo,
    Surah,
    ValidationResult,
    Verse,
)

__version__ = "0.1.0"

__all__ = [
    "QuranValidator",
    "create_validator",
    "get_validator",
    "normalize_arabic",
    "similarity",
    "find_differences",
    "QuranValidatorSettings",
    "get_settings",
    "configure",
    "CorpusDataError",
    "FabricationAnalysis",
    "MatchType",
    "RiwayaId",
    "RiwayaInfo",
    "Surah",
    "ValidationResult",
    "Verse",
]
