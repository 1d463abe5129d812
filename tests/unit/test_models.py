"""
Unit tests for data models.
"""

import pytest
from pydantic import ValidationError

from quran_validator.models import (
    FabricationAnalysis,
    FabricationStats,
    MatchType,
    RevelationType,
    RiwayaId,
    RiwayaInfo,
    SearchResult,
    Surah,
    ValidationResult,
    Verse,
    VerseRange,
    VerseSuggestion,
    WordAnalysis,
)
from quran_validator.models.surah import SURAH_AYAH_COUNTS, TOTAL_VERSES


def make_verse(surah=1, ayah=1, text="بسم الله", **kwargs):
    return Verse(id=kwargs.pop("id", ayah), surah=surah, ayah=ayah, text=text, **kwargs)


class TestVerse:
    """Test Verse model."""

    def test_verse_creation_from_camel_case(self):
        """Test records with camelCase keys populate snake_case fields."""
        verse = Verse.model_validate({
            "id": 1, "surah": 1, "ayah": 1,
            "text": "بِسْمِ ٱللَّهِ", "textSimple": "بسم الله",
            "page": 1, "juz": 1,
        })

        assert verse.text_simple == "بسم الله"
        assert verse.page == 1
        assert verse.reference == "1:1"

    def test_minimal_riwaya_row(self):
        """Test rows with only id, surah, ayah and text are accepted."""
        verse = Verse.model_validate({"id": 3, "surah": 1, "ayah": 3, "text": "مَلِكِ يَوْمِ اِ۬لدِّينِۖ"})
        assert verse.text_simple == ""
        assert verse.page is None
        assert verse.juz is None

    @pytest.mark.parametrize("field,value", [
        ("surah", 0),
        ("surah", 115),
        ("ayah", 0),
        ("text", ""),
        ("juz", 31),
    ])
    def test_invalid_values(self, field, value):
        """Test out-of-range values are rejected."""
        data = {"id": 1, "surah": 1, "ayah": 1, "text": "بسم"}
        data[field] = value
        with pytest.raises(ValidationError):
            Verse.model_validate(data)

    def test_verse_is_frozen(self):
        verse = make_verse()
        with pytest.raises(ValidationError):
            verse.text = "قل"

    def test_str(self):
        assert str(make_verse(surah=112, ayah=1)) == "Verse(112:1)"


class TestSurah:
    """Test Surah model."""

    def test_from_id(self):
        surah = Surah.from_id(1)
        assert surah.name == "الفاتحة"
        assert surah.english_name == "Al-Fatiha"
        assert surah.verses_count == 7
        assert surah.revelation_type == RevelationType.MECCAN

    def test_from_id_medinan(self):
        assert Surah.from_id(2).revelation_type == RevelationType.MEDINAN

    def test_from_id_count_override(self):
        assert Surah.from_id(1, verses_count=3).verses_count == 3

    @pytest.mark.parametrize("surah_id", [0, 115, -1])
    def test_from_id_invalid(self, surah_id):
        with pytest.raises(ValueError):
            Surah.from_id(surah_id)

    def test_builtin_counts_cover_corpus(self):
        """Test the built-in Hafs counts partition 6236 verses over 114 surahs."""
        assert len(SURAH_AYAH_COUNTS) == 114
        assert sum(SURAH_AYAH_COUNTS.values()) == TOTAL_VERSES == 6236

    def test_serializes_camel_case(self):
        data = Surah.from_id(114).model_dump(by_alias=True)
        assert data["englishName"] == "An-Nas"
        assert data["versesCount"] == 6


class TestRiwaya:
    """Test riwaya identifiers and metadata."""

    def test_riwaya_ids(self):
        assert len(RiwayaId) == 8
        assert RiwayaId("warsh") is RiwayaId.WARSH

    def test_unknown_riwaya(self):
        with pytest.raises(ValueError):
            RiwayaId("unknown")

    def test_riwaya_info_aliases(self):
        info = RiwayaInfo.model_validate({
            "id": "warsh", "name": "Warsh", "nameArabic": "ورش",
            "reciterName": "Nafi", "reciterNameArabic": "نافع",
        })
        assert info.id == RiwayaId.WARSH
        assert info.reciter_name == "Nafi"
        assert str(info) == "Warsh (warsh)"


class TestValidationResult:
    """Test ValidationResult model."""

    def test_no_match(self):
        result = ValidationResult.no_match("مرحبا")
        assert not result.is_valid
        assert result.match_type == MatchType.NONE
        assert result.normalized_input == "مرحبا"
        assert result.matched_verse is None
        assert result.suggestions is None
        assert str(result) == "ValidationResult(none)"

    def test_str_valid(self):
        verse = make_verse()
        result = ValidationResult(
            is_valid=True, match_type=MatchType.EXACT,
            matched_verse=verse, reference=verse.reference,
        )
        assert str(result) == "ValidationResult(exact, 1:1)"

    def test_match_type_values(self):
        assert MatchType.EXACT.value == "exact"
        assert MatchType.NORMALIZED.value == "normalized"
        assert MatchType.NONE.value == "none"

    def test_suggestion_from_verse(self):
        suggestion = VerseSuggestion.from_verse(make_verse(surah=109, ayah=5))
        assert suggestion.reference == "109:5"


class TestVerseRange:
    """Test VerseRange model."""

    def test_single_verse_reference(self):
        verse_range = VerseRange(text="بسم الله", verses=[make_verse()])
        assert verse_range.reference == "1:1"

    def test_multi_verse_reference(self):
        verses = [make_verse(ayah=1), make_verse(ayah=2), make_verse(ayah=3)]
        verse_range = VerseRange(text="...", verses=verses)
        assert verse_range.reference == "1:1-3"


class TestSearchResult:
    """Test SearchResult model."""

    def test_similarity_bounds(self):
        with pytest.raises(ValidationError):
            SearchResult(verse=make_verse(), similarity=1.5)


class TestFabricationAnalysis:
    """Test FabricationAnalysis model."""

    def test_fabricated_words(self):
        analysis = FabricationAnalysis(
            normalized_input="بسم الله الفلان",
            words=[
                WordAnalysis(word="بسم", is_fabricated=False),
                WordAnalysis(word="الله", is_fabricated=False),
                WordAnalysis(word="الفلان", is_fabricated=True),
            ],
            stats=FabricationStats(total_words=3, fabricated_words=1, fabricated_ratio=1 / 3),
        )
        assert analysis.fabricated == ["الفلان"]
        assert analysis.has_fabrication

    def test_empty_defaults(self):
        analysis = FabricationAnalysis(normalized_input="")
        assert analysis.words == []
        assert analysis.stats.total_words == 0
        assert analysis.stats.fabricated_ratio == 0.0
        assert not analysis.has_fabrication
