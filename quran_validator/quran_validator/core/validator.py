"""
Quran quotation validator.

QuranValidator loads the reference corpus once, builds a CorpusIndex and
answers every query from it:

    validator = QuranValidator()
    result = validator.validate("بسم الله الرحمن الرحيم")
    result.is_valid, result.match_type, result.reference
    # (True, MatchType.NORMALIZED, "1:1")

Loading more than one riwaya enables multi-riwaya matching, where every
loaded transmission is searched and reported in ``riwaya_matches``.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Optional

from quran_validator.config import QuranValidatorSettings, get_settings
from quran_validator.core.arabic import (
    DISPLAY_OPTIONS,
    LOOKUP_OPTIONS,
    contains_arabic,
    normalize_arabic,
)
from quran_validator.core.fabrication import analyze_fabrication
from quran_validator.core.index import CorpusIndex, VerseRef
from quran_validator.core.matcher import containment_score, find_mismatch_index
from quran_validator.data import (
    bundled_riwayat_metadata,
    load_riwaya,
    load_riwayat_metadata,
    load_verses,
)
from quran_validator.models import (
    PRIMARY_RIWAYA,
    FabricationAnalysis,
    MatchType,
    RiwayaId,
    RiwayaInfo,
    RiwayaMatch,
    SearchResult,
    Surah,
    ValidationResult,
    Verse,
    VerseRange,
    VerseSuggestion,
)

logger = logging.getLogger(__name__)

# "surah:ayah" or "surah:start-end", ASCII digits only
REFERENCE_PATTERN = re.compile(r"^([0-9]+):([0-9]+)(?:-([0-9]+))?$")


def _collect_range(
    verses: Mapping[VerseRef, Verse], surah: int, start: int, end: int
) -> Optional[list[Verse]]:
    """Verses of an inclusive range, or None if the range is inverted or has a gap."""
    if start > end:
        return None
    collected = []
    for ayah in range(start, end + 1):
        verse = verses.get((surah, ayah))
        if verse is None:
            return None
        collected.append(verse)
    return collected


def _exact_first(matches: Iterable[RiwayaMatch]) -> list[RiwayaMatch]:
    return sorted(matches, key=lambda m: m.match_type != MatchType.EXACT)


class QuranValidator:
    """
    Validates Arabic text against the Quran corpus.

    Args:
        riwayat: Riwayat to load (default: settings.riwayat)
        max_suggestions: Maximum alternative verses reported (default: settings.max_suggestions)
        data_dir: Directory with the corpus files (default: settings.data_dir)
        settings: Settings to read defaults from (default: get_settings())

    Raises:
        ValueError: If a riwaya identifier is unknown or max_suggestions is negative
        CorpusDataError: If the reference data cannot be loaded
    """

    def __init__(
        self,
        riwayat: Optional[Iterable[RiwayaId | str]] = None,
        max_suggestions: Optional[int] = None,
        data_dir: Optional[Path | str] = None,
        settings: Optional[QuranValidatorSettings] = None,
    ):
        self.settings = settings or get_settings()

        requested = riwayat if riwayat is not None else self.settings.riwayat
        self.riwayat: list[RiwayaId] = list(dict.fromkeys(RiwayaId(r) for r in requested))
        if not self.riwayat:
            raise ValueError("At least one riwaya must be loaded")

        self.max_suggestions = (
            max_suggestions if max_suggestions is not None else self.settings.max_suggestions
        )
        if self.max_suggestions < 0:
            raise ValueError(f"max_suggestions must be >= 0, got {self.max_suggestions}")

        self.data_dir = Path(data_dir) if data_dir is not None else self.settings.data_dir

        primary_verses = load_verses(self.data_dir)
        variant_rows = {
            riwaya: primary_verses if riwaya == PRIMARY_RIWAYA else load_riwaya(riwaya, self.data_dir)
            for riwaya in self.riwayat
        }
        self._index = CorpusIndex.build(primary_verses, variant_rows, PRIMARY_RIWAYA)
        self._riwaya_info = self._resolve_riwaya_info()

        logger.info(
            "QuranValidator ready: %d verses, riwayat=%s",
            len(primary_verses),
            ",".join(r.value for r in self.riwayat),
        )

    def _resolve_riwaya_info(self) -> dict[RiwayaId, RiwayaInfo]:
        local = load_riwayat_metadata(self.data_dir)
        bundled = bundled_riwayat_metadata()

        info: dict[RiwayaId, RiwayaInfo] = {}
        for riwaya in self.riwayat:
            if riwaya in local:
                info[riwaya] = local[riwaya]
            elif riwaya in bundled:
                logger.debug("Using bundled metadata for riwaya %s", riwaya.value)
                info[riwaya] = bundled[riwaya]
            else:
                logger.warning("No metadata found for riwaya %s", riwaya.value)
        return info

    @property
    def index(self) -> CorpusIndex:
        """The read-only corpus index."""
        return self._index

    @property
    def is_multi_riwaya(self) -> bool:
        return self._index.is_multi_riwaya

    # ============ Validation ============

    def validate(self, text: str) -> ValidationResult:
        """
        Validate a potential Quran quote against the whole corpus.

        Args:
            text: The Arabic text to validate

        Returns:
            ValidationResult. ``match_type`` is EXACT for byte-identical
            text, NORMALIZED for text equal after normalization and NONE
            otherwise.
        """
        trimmed = text.strip()
        normalized_input = normalize_arabic(trimmed, DISPLAY_OPTIONS)

        if not contains_arabic(trimmed):
            return ValidationResult.no_match(normalized_input)

        lookup_key = normalize_arabic(trimmed, LOOKUP_OPTIONS)
        matches = self._find_matches(trimmed, lookup_key)
        if not matches:
            return ValidationResult.no_match(normalized_input)

        best = matches[0]
        result = ValidationResult(
            is_valid=True,
            match_type=best.match_type,
            matched_verse=best.verse,
            reference=best.verse.reference,
            normalized_input=normalized_input,
        )

        if self.is_multi_riwaya:
            distinct: dict[str, Verse] = {}
            for match in matches:
                distinct.setdefault(match.verse.reference, match.verse)
            suggestions = None
            if len(distinct) > 1:
                suggestions = [
                    VerseSuggestion.from_verse(v)
                    for v in list(distinct.values())[: self.max_suggestions]
                ]
            return result.model_copy(
                update={"suggestions": suggestions, "riwaya_matches": matches}
            )

        if best.match_type == MatchType.EXACT:
            return result

        others = [VerseSuggestion.from_verse(m.verse) for m in matches[1 : 1 + self.max_suggestions]]
        if others:
            result = result.model_copy(update={"suggestions": others})
        return result

    def _find_matches(self, trimmed: str, lookup_key: str) -> list[RiwayaMatch]:
        """Exact and normalized hits across the active riwayat, exact hits first."""
        matches = [
            RiwayaMatch(
                riwaya=entry.riwaya,
                match_type=MatchType.EXACT,
                verse=entry.verse,
                riwaya_text=entry.verse.text,
            )
            for entry in self._index.exact_text_map.get(trimmed, ())
        ]
        seen = {(m.riwaya, m.verse.surah, m.verse.ayah) for m in matches}

        for entry in self._index.normalized_text_map.get(lookup_key, ()):
            if (entry.riwaya, *entry.ref) in seen:
                continue
            matches.append(
                RiwayaMatch(
                    riwaya=entry.riwaya,
                    match_type=MatchType.NORMALIZED,
                    verse=entry.verse,
                    riwaya_text=entry.verse.text,
                )
            )

        return _exact_first(matches)

    def validate_against(self, text: str, reference: str) -> ValidationResult:
        """
        Validate text against a specific cited reference.

        Args:
            text: The Arabic text to validate
            reference: "surah:ayah" or "surah:start-end"

        Returns:
            ValidationResult keyed to the cited reference. On a mismatch,
            ``expected_normalized`` and ``mismatch_index`` locate the first
            divergence.
        """
        trimmed = text.strip()
        normalized_input = normalize_arabic(trimmed, DISPLAY_OPTIONS)

        ref_match = REFERENCE_PATTERN.fullmatch(reference)
        if ref_match is None:
            return ValidationResult.no_match(normalized_input)

        surah = int(ref_match.group(1))
        start = int(ref_match.group(2))
        end = int(ref_match.group(3)) if ref_match.group(3) else start

        verses = _collect_range(self._index.verses_by_ref, surah, start, end)
        if verses is None:
            return ValidationResult.no_match(normalized_input)

        expected_text = " ".join(v.text for v in verses)
        expected_normalized = normalize_arabic(expected_text, DISPLAY_OPTIONS)
        input_lookup = normalize_arabic(trimmed, LOOKUP_OPTIONS)
        expected_lookup = normalize_arabic(expected_text, LOOKUP_OPTIONS)

        match_type = None
        if trimmed == expected_text:
            match_type = MatchType.EXACT
        elif input_lookup == expected_lookup:
            match_type = MatchType.NORMALIZED

        if match_type is not None:
            riwaya_matches = None
            if self.is_multi_riwaya:
                riwaya_matches = self._matches_at(trimmed, input_lookup, surah, start, end)
            return ValidationResult(
                is_valid=True,
                match_type=match_type,
                matched_verse=verses[0],
                reference=reference,
                normalized_input=normalized_input,
                expected_normalized=expected_normalized,
                riwaya_matches=riwaya_matches,
            )

        if self.is_multi_riwaya:
            riwaya_matches = self._matches_at(trimmed, input_lookup, surah, start, end)
            if riwaya_matches:
                best = riwaya_matches[0]
                return ValidationResult(
                    is_valid=True,
                    match_type=best.match_type,
                    matched_verse=best.verse,
                    reference=reference,
                    normalized_input=normalized_input,
                    expected_normalized=expected_normalized,
                    riwaya_matches=riwaya_matches,
                )

        return ValidationResult(
            is_valid=False,
            match_type=MatchType.NONE,
            reference=reference,
            normalized_input=normalized_input,
            expected_normalized=expected_normalized,
            mismatch_index=find_mismatch_index(input_lookup, expected_lookup),
        )

    def _matches_at(
        self, trimmed: str, lookup_key: str, surah: int, start: int, end: int
    ) -> list[RiwayaMatch]:
        """Match text against every loaded riwaya's text at one address."""
        matches = []
        for riwaya in self.riwayat:
            verses = _collect_range(self._index.riwaya_verses[riwaya], surah, start, end)
            if verses is None:
                continue

            riwaya_text = " ".join(v.text for v in verses)
            if trimmed == riwaya_text:
                match_type = MatchType.EXACT
            elif lookup_key == normalize_arabic(riwaya_text, LOOKUP_OPTIONS):
                match_type = MatchType.NORMALIZED
            else:
                continue

            matches.append(
                RiwayaMatch(
                    riwaya=riwaya,
                    match_type=match_type,
                    verse=verses[0],
                    riwaya_text=riwaya_text,
                )
            )
        return _exact_first(matches)

    def analyze_fabrication(self, text: str) -> FabricationAnalysis:
        """Classify each word of text as found in the corpus or fabricated."""
        return analyze_fabrication(text, self._index)

    # ============ Accessors ============

    def get_verse(self, surah: int, ayah: int) -> Optional[Verse]:
        return self._index.get_verse(surah, ayah)

    def get_verse_range(self, surah: int, start_ayah: int, end_ayah: int) -> Optional[VerseRange]:
        """
        Get an inclusive range of verses from one surah.

        Returns:
            VerseRange with the texts joined by single spaces, or None if
            the range is inverted or any ayah is missing
        """
        verses = _collect_range(self._index.verses_by_ref, surah, start_ayah, end_ayah)
        if verses is None:
            return None
        return VerseRange(
            text=" ".join(v.text for v in verses),
            text_simple=" ".join(v.text_simple for v in verses),
            verses=verses,
        )

    def get_surah(self, surah_number: int) -> Optional[Surah]:
        """Surah metadata, with the verse count taken from the loaded corpus."""
        verses = self._index.surah_verses.get(surah_number)
        if not verses:
            return None
        return Surah.from_id(surah_number, verses_count=len(verses))

    def get_surah_verses(self, surah_number: int) -> list[Verse]:
        return list(self._index.surah_verses.get(surah_number, ()))

    def get_all_surahs(self) -> list[Surah]:
        return [
            Surah.from_id(number, verses_count=len(verses))
            for number, verses in sorted(self._index.surah_verses.items())
        ]

    def search(self, query: str, limit: Optional[int] = None) -> list[SearchResult]:
        """
        Find verses containing the query, or contained in it.

        Args:
            query: Arabic search text
            limit: Maximum number of results (default: settings.search_limit)

        Returns:
            Results sorted by descending relevance
        """
        if limit is None:
            limit = self.settings.search_limit
        if limit <= 0:
            return []

        normalized_query = normalize_arabic(query.strip(), DISPLAY_OPTIONS)
        if not normalized_query:
            return []

        scored = []
        for verse, verse_text in zip(self._index.primary_verses, self._index.display_texts):
            score = containment_score(normalized_query, verse_text)
            if score is not None:
                scored.append((score, verse))

        scored.sort(key=lambda item: item[0], reverse=True)
        return [
            SearchResult(verse=verse, similarity=min(score, 1.0))
            for score, verse in scored[:limit]
        ]

    def get_loaded_riwayat(self) -> list[RiwayaInfo]:
        """Metadata of the loaded riwayat, in load order."""
        return [self._riwaya_info[r] for r in self.riwayat if r in self._riwaya_info]

    def get_verse_riwayat(self, surah: int, ayah: int) -> list[tuple[RiwayaId, str]]:
        """The text of one verse in every loaded riwaya that has it."""
        texts = []
        for riwaya in self.riwayat:
            verse = self._index.get_riwaya_verse(riwaya, surah, ayah)
            if verse is not None:
                texts.append((riwaya, verse.text))
        return texts


def create_validator(**kwargs) -> QuranValidator:
    """
    Create a new QuranValidator.

    Args:
        **kwargs: Arguments passed to QuranValidator

    Returns:
        QuranValidator: A new validator instance
    """
    return QuranValidator(**kwargs)


# Default validator instance
_default_validator: QuranValidator | None = None


def get_validator() -> QuranValidator:
    """
    Get the default validator instance (lazily created from get_settings()).

    Returns:
        QuranValidator: The shared validator
    """
    global _default_validator
    if _default_validator is None:
        _default_validator = QuranValidator()
    return _default_validator
