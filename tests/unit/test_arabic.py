"""
Unit tests for Arabic text normalization.
"""

import json

import pytest
from pydantic import ValidationError

from quran_validator.core.arabic import (
    DISPLAY_OPTIONS,
    LOOKUP_OPTIONS,
    PIPELINE,
    SUPERSCRIPT_ALEF,
    NormalizationOptions,
    contains_arabic,
    correct_word_boundaries,
    normalize_arabic,
    normalize_digits,
    normalize_hamza_carriers,
    pipeline_steps,
    remove_diacritics,
    resolve_hamza_above,
    strip_bidi_controls,
    strip_standalone_hamza,
)


class TestArabicNormalization:
    """Test the full normalization pipeline."""

    def test_normalize_known_forms(self, normalization_test_cases):
        """Test Uthmani and voweled text reduces to common spelling."""
        for original, expected in normalization_test_cases:
            assert normalize_arabic(original) == expected

    @pytest.mark.parametrize("variant", ["أ", "إ", "آ", "ٱ"])
    def test_normalize_alef_variants(self, variant):
        """Test normalization of alef variants to bare alef."""
        assert normalize_arabic(variant) == "ا"

    @pytest.mark.parametrize("input_text,expected", [
        ("على", "علي"),
        ("رحمة", "رحمه"),
        ("كتـــاب", "كتاب"),
        ("بسم   الله", "بسم الله"),
        ("  قل هو الله احد\n", "قل هو الله احد"),
    ])
    def test_letter_level_rules(self, input_text, expected):
        """Test alef maqsura, teh marbuta, tatweel and whitespace rules."""
        assert normalize_arabic(input_text) == expected

    def test_allah_ligature_expands(self):
        """Test the single-codepoint Allah ligature expands to letters."""
        assert normalize_arabic("\uFDF2") == "الله"

    def test_section_marks_removed(self):
        """Test rub el hizb and end-of-ayah marks are dropped."""
        assert normalize_arabic("۞ إِنَّمَا") == "انما"
        assert normalize_arabic("ٱللَّهُ ٱلصَّمَدُ \u06DD") == "الله الصمد"

    def test_bidi_controls_removed(self):
        """Test directional marks around digits and words are dropped."""
        text = "سورة \u200F١١٢:١ \u200Fقُلْ هُوَ ٱللَّهُ أَحَدٌ"
        assert normalize_arabic(text) == "سوره 112:1 قل هو الله احد"

    def test_normalize_empty_string(self):
        """Test normalization of empty string."""
        assert normalize_arabic("") == ""

    def test_default_options_are_display(self):
        """Test normalize_arabic without options uses the display preset."""
        assert normalize_arabic("شيء") == normalize_arabic("شيء", DISPLAY_OPTIONS) == "شيء"

    def test_lookup_strips_hamza(self):
        """Test the lookup preset removes standalone hamza."""
        assert normalize_arabic("شيء", LOOKUP_OPTIONS) == "شي"
        assert normalize_arabic("السماء الأرض", LOOKUP_OPTIONS) == "السما الارض"

    def test_disabled_heuristics_keep_superscript_alef(self):
        """Test turning heuristics off leaves the superscript alef in place."""
        options = NormalizationOptions(apply_script_heuristics=False)
        assert SUPERSCRIPT_ALEF in normalize_arabic("ٱلصَّدَقَـٰتُ", options)

    def test_disabled_diacritics_keep_marks(self):
        """Test turning diacritics removal off keeps tashkeel."""
        options = NormalizationOptions(remove_diacritics=False, apply_script_heuristics=False)
        assert normalize_arabic("بِسْمِ", options) == "بِسْمِ"


# Heuristics off keeps hamza-above marks that a later tatweel removal exposes
NO_HEURISTICS = NormalizationOptions(apply_script_heuristics=False)


class TestIdempotence:
    """Test normalizing twice equals normalizing once."""

    @pytest.mark.parametrize("options", [DISPLAY_OPTIONS, LOOKUP_OPTIONS, NO_HEURISTICS])
    @pytest.mark.parametrize("text", [
        "بِسْمِ ٱللَّهِ ٱلرَّحْمَـٰنِ ٱلرَّحِيمِ",
        "قُلْ يَـٰٓأَيُّهَا ٱلْكَـٰفِرُونَ",
        "وَلَا يَـُٔودُهُۥ حِفْظُهُمَا",
        "يَسْـَٔلُونَكَ",
        "سَيِّـَٔاتِ",
        "إِلَـٰهِ ٱلنَّاسِ",
        "\uFDF2 ۞ ١٢٣ \u200F",
        "شيء ء ءا",
        "   ",
    ])
    def test_idempotent(self, text, options):
        """Test idempotence on tricky Uthmani spellings."""
        once = normalize_arabic(text, options)
        assert normalize_arabic(once, options) == once

    @pytest.mark.parametrize("text,expected", [
        ("سَيِّـَٔاتِ", "سيات"),
        ("يَـُٔودُهُۥ", "ووده"),
    ])
    def test_hamza_above_after_tatweel_without_heuristics(self, text, expected):
        """Test a hamza-above exposed by tatweel removal is settled in one pass."""
        once = normalize_arabic(text, NO_HEURISTICS)
        assert once == expected
        assert normalize_arabic(once, NO_HEURISTICS) == expected

    @pytest.mark.parametrize("options", [DISPLAY_OPTIONS, LOOKUP_OPTIONS, NO_HEURISTICS])
    def test_idempotent_on_corpus(self, data_dir, options):
        """Test idempotence on every fixture verse."""
        for filename in ["quran-verses.json", "riwayat/warsh.json"]:
            with open(data_dir / filename, encoding="utf-8") as f:
                rows = json.load(f)
            for row in rows:
                once = normalize_arabic(row["text"], options)
                assert normalize_arabic(once, options) == once, row["text"]


class TestPipelineSteps:
    """Test individual normalization steps in isolation."""

    @pytest.mark.parametrize("input_text,expected", [
        ("ـ\u0654و", "ـوو"),      # before waw
        ("يـ\u0654ا", "يـا"),     # after ya
        ("لـ\u064E\u0654ا", "لـ\u064Eا"),  # before alef, through marks
        ("ءا", "ا"),               # standalone hamza before alef
        ("سـ\u0654ل", "سـال"),    # otherwise alef
    ])
    def test_resolve_hamza_above(self, input_text, expected):
        """Test the hamza-above resolution rules."""
        assert resolve_hamza_above(input_text) == expected

    @pytest.mark.parametrize("input_text,expected", [
        ("مؤمن", "مومن"),
        ("مسئول", "مسوول"),
        ("خطيئه", "خطيه"),
        ("سائل", "سايل"),
    ])
    def test_normalize_hamza_carriers(self, input_text, expected):
        """Test hamza carrier letters collapse to their carriers."""
        assert normalize_hamza_carriers(input_text) == expected

    @pytest.mark.parametrize("input_text,expected", [
        ("الرحمان الرحيم", "الرحمن الرحيم"),
        ("اله الناس", "اله الناس"),
        ("الاه الناس", "اله الناس"),
        ("يا قوم", "ي قوم"),
        ("انا", "انا"),
    ])
    def test_correct_word_boundaries(self, input_text, expected):
        """Test word-position dependent corrections."""
        assert correct_word_boundaries(input_text) == expected

    def test_normalize_digits(self):
        """Test Arabic-Indic and Eastern Arabic digits become ASCII."""
        assert normalize_digits("١٢٣ ۴۵۶") == "123 456"

    def test_strip_bidi_controls(self):
        """Test zero-width and directional marks are removed."""
        assert strip_bidi_controls("\u200Bقل\u200F \u2066هو\u2069\uFEFF") == "قل هو"

    def test_strip_standalone_hamza(self):
        assert strip_standalone_hamza("شيء") == "شي"

    def test_pipeline_order(self):
        """Test the pipeline runs its steps in the documented order."""
        names = [step.name for step in PIPELINE]
        assert names.index("presentation_forms") == 0
        assert names.index("hamza_above") < names.index("diacritics")
        assert names.index("tatweel") + 1 == names.index("recompose_hamza") < names.index("alef_variants")
        assert names.index("hamza_carriers") < names.index("strip_hamza") < names.index("whitespace")
        assert names[-1] == "word_boundaries"

    def test_pipeline_steps_respect_options(self):
        """Test disabled options drop their steps."""
        display = [step.name for step in pipeline_steps(DISPLAY_OPTIONS)]
        lookup = [step.name for step in pipeline_steps(LOOKUP_OPTIONS)]
        assert "strip_hamza" not in display
        assert "strip_hamza" in lookup

        no_heuristics = NormalizationOptions(apply_script_heuristics=False)
        names = [step.name for step in pipeline_steps(no_heuristics)]
        assert "hamza_above" not in names
        assert "word_boundaries" not in names
        assert "section_marks" in names


class TestNormalizationOptions:
    """Test the immutable options value."""

    def test_defaults(self):
        """Test every flag defaults to on except strip_hamza."""
        options = NormalizationOptions()
        assert options.remove_diacritics
        assert options.apply_script_heuristics
        assert not options.strip_hamza

    def test_presets_are_frozen(self):
        """Test presets cannot be mutated."""
        with pytest.raises(ValidationError):
            DISPLAY_OPTIONS.strip_hamza = True

    def test_options_are_hashable(self):
        """Test equal options compare and hash equal."""
        assert NormalizationOptions(strip_hamza=True) == LOOKUP_OPTIONS
        assert hash(NormalizationOptions(strip_hamza=True)) == hash(LOOKUP_OPTIONS)


class TestRemoveDiacritics:
    """Test the standalone diacritics remover."""

    def test_remove_diacritics(self):
        """Test all vowel marks are removed."""
        result = remove_diacritics("بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ")
        assert result == "بسم الله الرحمن الرحيم"

    def test_remove_diacritics_plain_text(self):
        assert remove_diacritics("بسم الله") == "بسم الله"


class TestContainsArabic:
    """Test Arabic detection."""

    @pytest.mark.parametrize("text,expected", [
        ("مرحبا", True),
        ("Hello مرحبا world", True),
        ("\uFDF2", True),
        ("Hello world", False),
        ("123", False),
        ("", False),
    ])
    def test_contains_arabic(self, text, expected):
        assert contains_arabic(text) is expected
