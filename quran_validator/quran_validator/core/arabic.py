"""
Arabic text normalization utilities.

This module reduces the superficial variation between ways of writing the
same Quranic text (vowel marks, Uthmani versus common spelling, ligatures,
bidi marks, digit systems) to a single comparable form.

Normalization is a fixed, ordered pipeline of small named steps. Each step is
a pure ``str -> str`` function and is enabled or disabled by a flag on an
immutable ``NormalizationOptions`` value. The order matters: presentation
forms must be decomposed before any letter-level rule, the Uthmani hamza and
superscript-alef heuristics need the diacritics that the diacritics step
removes, and the word-boundary corrections only make sense on fully
normalized text.
"""

import re
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional

from pydantic import BaseModel, Field


class NormalizationOptions(BaseModel):
    """
    Flags controlling which normalization steps run.

    Every flag defaults to on except ``strip_hamza``, which is only used by
    the aggressive lookup preset.
    """

    remove_diacritics: bool = Field(default=True, description="Remove tashkeel")
    normalize_alef_variants: bool = Field(default=True, description="أ إ آ ٱ → ا")
    normalize_alef_maqsura: bool = Field(default=True, description="ى → ي")
    normalize_teh_marbuta: bool = Field(default=True, description="ة → ه")
    remove_tatweel: bool = Field(default=True, description="Remove kashida")
    normalize_hamza_carriers: bool = Field(default=True, description="ؤ → و, ئ → ي")
    normalize_whitespace: bool = Field(default=True, description="Collapse and trim whitespace")
    normalize_presentation_forms: bool = Field(
        default=True, description="NFKC: expand ligatures such as the Allah sign"
    )
    normalize_digits: bool = Field(default=True, description="Arabic-Indic digits → ASCII")
    strip_bidi_controls: bool = Field(default=True, description="Remove bidi/zero-width marks")
    apply_script_heuristics: bool = Field(
        default=True, description="Resolve Uthmani-only spellings (superscript alef, hamza above)"
    )
    strip_hamza: bool = Field(default=False, description="Remove any remaining standalone hamza")

    model_config = {"frozen": True}


# Settings used for everything shown back to callers
DISPLAY_OPTIONS = NormalizationOptions()

# Aggressive settings used for corpus keys and lookups
LOOKUP_OPTIONS = NormalizationOptions(strip_hamza=True)


# ============ Character classes ============

ALEF = "\u0627"
WAW = "\u0648"
YA = "\u064A"
HAMZA = "\u0621"
HAMZA_ABOVE = "\u0654"
SUPERSCRIPT_ALEF = "\u0670"
TATWEEL = "\u0640"

# Alef, hamza-on-alef forms, alef madda, alef wasla
_ALEF_FAMILY = "\u0627\u0623\u0625\u0622\u0671"

# Marks that may sit between a hamza and the letter after it
_MARKS = "\u0610-\u061A\u064B-\u065F\u0670\u06D6-\u06DC\u06DF-\u06E8\u06EA-\u06ED\u0640"

# Consonants that can precede an absorbed long-vowel alef
_CONSONANTS = "بتثجحخدذرزسشصضطظعغفقكلمنهوي"

_BIDI_CONTROLS = re.compile("[\u200B-\u200F\u061C\u202A-\u202E\u2066-\u2069\uFEFF]")

# End-of-ayah, rub el hizb and sajdah marks
_SECTION_MARKS = re.compile("[\u06DD\u06DE\u06E9]")

# Tashkeel and Quranic annotation marks. Hamza above (U+0654) and superscript
# alef (U+0670) are resolved by the script heuristics instead.
_DIACRITICS = re.compile(
    "[\u0610-\u061A\u064B-\u0653\u0655-\u065F\u06D6-\u06DC\u06DF-\u06E8\u06EA-\u06ED]"
)
_ALL_MARKS = re.compile(
    "[\u0610-\u061A\u064B-\u065F\u0670\u06D6-\u06DC\u06DF-\u06E8\u06EA-\u06ED]"
)

_HAMZA_ABOVE_BEFORE_WAW = re.compile(f"{HAMZA_ABOVE}(?=[{_MARKS}]*{WAW})")
_HAMZA_ABOVE_AFTER_YA = re.compile(f"({YA}[\u064B-\u0653\u0655-\u065F{TATWEEL}]*){HAMZA_ABOVE}")
_HAMZA_ABOVE_BEFORE_ALEF = re.compile(f"{HAMZA_ABOVE}(?=[{_MARKS}]*[{_ALEF_FAMILY}])")
_HAMZA_BEFORE_ALEF = re.compile(f"{HAMZA}(?=[{_MARKS}]*[{_ALEF_FAMILY}])")

_ALEF_VARIANTS = re.compile("[\u0623\u0625\u0622\u0671]")

_YA_HAMZA_BEFORE_WAW = re.compile("ئ(?=و)")
_YA_HAMZA_AFTER_YA = re.compile("(?<=ي)ئ")

_MULTIPLE_SPACES = re.compile(r"\s+")

_ALEF_BEFORE_NOON = re.compile(f"(?<=[{_CONSONANTS}]){ALEF}(?=ن)")
_YA_ALEF_AT_END = re.compile(r"يا(?=\s|$)")
_LAM_ALEF_HEH_AT_END = re.compile(r"لاه(?=\s|$)")

# Arabic-Indic (U+0660-0669) and Eastern Arabic (U+06F0-06F9) digits
_DIGITS = str.maketrans(
    {**{0x0660 + i: str(i) for i in range(10)}, **{0x06F0 + i: str(i) for i in range(10)}}
)

# Arabic, Supplement, Extended-A, Presentation Forms-A and -B
_ARABIC_RANGES = re.compile(
    "[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF]"
)


# ============ Pipeline steps ============


def decompose_presentation_forms(text: str) -> str:
    """NFKC: expand ligatures and presentation forms into base letters."""
    return unicodedata.normalize("NFKC", text)


def strip_bidi_controls(text: str) -> str:
    return _BIDI_CONTROLS.sub("", text)


def remove_section_marks(text: str) -> str:
    return _SECTION_MARKS.sub("", text)


def superscript_alef_to_alef(text: str) -> str:
    """
    Write the superscript alef as a full alef.

    Uthmani marks some long vowels with U+0670 where common spelling uses a
    letter: ٱلصَّدَقَـٰتُ → الصدقات.
    """
    return text.replace(SUPERSCRIPT_ALEF, ALEF)


def resolve_hamza_above(text: str) -> str:
    """
    Render the Uthmani hamza-above mark (U+0654) as a letter or drop it.

    The same hamza is written on a tatweel in Uthmani and as أ, ؤ or ئ in
    common spelling. In priority order:

    1. before waw: becomes waw (يَـُٔودُهُۥ → يوود)
    2. after ya: dropped, the ya already carries it (سَيِّـَٔاتِ → سيات)
    3. before an alef: dropped (ٱلْـَٔاخِرِ → الاخر)
    4. a standalone hamza before an alef is dropped as well
    5. anything else: becomes alef (يَسْـَٔلُونَكَ → يسالونك)
    """
    text = _HAMZA_ABOVE_BEFORE_WAW.sub(WAW, text)
    text = _HAMZA_ABOVE_AFTER_YA.sub(r"\1", text)
    text = _HAMZA_ABOVE_BEFORE_ALEF.sub("", text)
    text = _HAMZA_BEFORE_ALEF.sub("", text)
    return text.replace(HAMZA_ABOVE, ALEF)


def remove_tashkeel(text: str) -> str:
    return _DIACRITICS.sub("", text)


def normalize_alef_variants(text: str) -> str:
    return _ALEF_VARIANTS.sub(ALEF, text)


def normalize_alef_maqsura(text: str) -> str:
    return text.replace("ى", YA)


def normalize_teh_marbuta(text: str) -> str:
    return text.replace("ة", "ه")


def remove_tatweel(text: str) -> str:
    return text.replace(TATWEEL, "")


def recompose_hamza(text: str) -> str:
    """
    NFC: rejoin a hamza-above mark with the letter it now follows.

    Removing a tatweel can leave U+0654 right after ya, waw or alef. NFKC
    would compose those pairs on the next pass, so compose them here while
    the letter rules are still ahead.
    """
    return unicodedata.normalize("NFC", text)


def normalize_hamza_carriers(text: str) -> str:
    """ؤ → و; ئ before waw → و; ئ after ya dropped; remaining ئ → ي."""
    text = text.replace("ؤ", WAW)
    text = _YA_HAMZA_BEFORE_WAW.sub(WAW, text)
    text = _YA_HAMZA_AFTER_YA.sub("", text)
    return text.replace("ئ", YA)


def strip_standalone_hamza(text: str) -> str:
    return text.replace(HAMZA, "")


def normalize_digits(text: str) -> str:
    return text.translate(_DIGITS)


def normalize_whitespace(text: str) -> str:
    return _MULTIPLE_SPACES.sub(" ", text).strip()


def correct_word_boundaries(text: str) -> str:
    """
    Fix letter-count mismatches between scripts that depend on word position.

    - alef between a consonant and noon is dropped (الرحمان → الرحمن)
    - trailing ya+alef becomes ya (اليتاميا → اليتامي)
    - trailing lam+alef+heh becomes lam+heh (الاه → اله)
    """
    text = _ALEF_BEFORE_NOON.sub("", text)
    text = _YA_ALEF_AT_END.sub(YA, text)
    return _LAM_ALEF_HEH_AT_END.sub("له", text)


@dataclass(frozen=True)
class NormalizationStep:
    """A named pipeline stage and the option that enables it."""

    name: str
    apply: Callable[[str], str]
    enabled: Callable[[NormalizationOptions], bool]


def _always(options: NormalizationOptions) -> bool:
    return True


PIPELINE: tuple[NormalizationStep, ...] = (
    NormalizationStep(
        "presentation_forms", decompose_presentation_forms,
        lambda o: o.normalize_presentation_forms,
    ),
    NormalizationStep("bidi_controls", strip_bidi_controls, lambda o: o.strip_bidi_controls),
    NormalizationStep("section_marks", remove_section_marks, _always),
    NormalizationStep(
        "superscript_alef", superscript_alef_to_alef, lambda o: o.apply_script_heuristics
    ),
    NormalizationStep("hamza_above", resolve_hamza_above, lambda o: o.apply_script_heuristics),
    NormalizationStep("diacritics", remove_tashkeel, lambda o: o.remove_diacritics),
    NormalizationStep("tatweel", remove_tatweel, lambda o: o.remove_tatweel),
    NormalizationStep(
        "recompose_hamza", recompose_hamza, lambda o: o.normalize_presentation_forms
    ),
    NormalizationStep(
        "alef_variants", normalize_alef_variants, lambda o: o.normalize_alef_variants
    ),
    NormalizationStep("alef_maqsura", normalize_alef_maqsura, lambda o: o.normalize_alef_maqsura),
    NormalizationStep("teh_marbuta", normalize_teh_marbuta, lambda o: o.normalize_teh_marbuta),
    NormalizationStep(
        "hamza_carriers", normalize_hamza_carriers, lambda o: o.normalize_hamza_carriers
    ),
    NormalizationStep("strip_hamza", strip_standalone_hamza, lambda o: o.strip_hamza),
    NormalizationStep("digits", normalize_digits, lambda o: o.normalize_digits),
    NormalizationStep("whitespace", normalize_whitespace, lambda o: o.normalize_whitespace),
    NormalizationStep(
        "word_boundaries", correct_word_boundaries, lambda o: o.apply_script_heuristics
    ),
)


@lru_cache(maxsize=32)
def pipeline_steps(
    options: NormalizationOptions = DISPLAY_OPTIONS,
) -> tuple[NormalizationStep, ...]:
    """Return the steps enabled by ``options``, in execution order."""
    return tuple(step for step in PIPELINE if step.enabled(options))


def normalize_arabic(text: str, options: Optional[NormalizationOptions] = None) -> str:
    """
    Normalize Arabic text for comparison.

    Runs the enabled pipeline steps in order. The function is total and
    idempotent for a fixed set of options.

    Args:
        text: Arabic text to normalize
        options: Normalization options (defaults to DISPLAY_OPTIONS)

    Returns:
        Normalized text string

    Examples:
        >>> normalize_arabic("بِسْمِ اللَّهِ")
        'بسم الله'
        >>> normalize_arabic("ٱلرَّحْمَـٰنِ")
        'الرحمن'
        >>> normalize_arabic("ﷲ")
        'الله'
    """
    if not text:
        return ""

    for step in pipeline_steps(options or DISPLAY_OPTIONS):
        text = step.apply(text)

    return text


def remove_diacritics(text: str) -> str:
    """
    Remove all Arabic diacritics (tashkeel) and Quranic marks from text.

    Unlike the diacritics pipeline step, this also drops the superscript
    alef and hamza above rather than resolving them into letters.

    Args:
        text: Arabic text with diacritics

    Returns:
        Text without diacritics
    """
    return _ALL_MARKS.sub("", text)


def contains_arabic(text: str) -> bool:
    """Check whether text contains any character from the Arabic Unicode blocks."""
    return bool(text) and _ARABIC_RANGES.search(text) is not None
