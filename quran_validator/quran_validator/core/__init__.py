"""
Core modules for quran-validator.

This package contains the core business logic for:
- Arabic text normalization
- Indexing the reference corpus
- Validating quotes and detecting fabricated words

Primary API:
    from quran_validator.core import QuranValidator

    validator = QuranValidator(riwayat=["hafs", "warsh"])
    result = validator.validate("بسم الله الرحمن الرحيم")
    analysis = validator.analyze_fabrication("بسم الله الفلان")
"""

# Primary API - what most users need
from quran_validator.core.validator import QuranValidator, create_validator, get_validator

# Text utilities - commonly used
from quran_validator.core.arabic import (
    DISPLAY_OPTIONS,
    LOOKUP_OPTIONS,
    NormalizationOptions,
    contains_arabic,
    normalize_arabic,
    remove_diacritics,
)
from quran_validator.core.matcher import Difference, find_differences, similarity

# Index - for inspecting what a validator loaded
from quran_validator.core.index import CorpusIndex, IndexEntry

__all__ = [
    # Primary API
    "QuranValidator",
    "create_validator",
    "get_validator",
    # Text utilities
    "NormalizationOptions",
    "DISPLAY_OPTIONS",
    "LOOKUP_OPTIONS",
    "normalize_arabic",
    "remove_diacritics",
    "contains_arabic",
    "similarity",
    "find_differences",
    "Difference",
    # Index
    "CorpusIndex",
    "IndexEntry",
]
