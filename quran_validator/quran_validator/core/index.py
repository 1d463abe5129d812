"""
Read-only corpus index built once per validator.

The index is a flat tuple of entries (one per verse row of every loaded
riwaya) plus derived lookup maps over it. All maps are exposed as
MappingProxyType views so callers cannot mutate them.
"""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from quran_validator.core.arabic import DISPLAY_OPTIONS, LOOKUP_OPTIONS, normalize_arabic
from quran_validator.models import PRIMARY_RIWAYA, RiwayaId, Verse

logger = logging.getLogger(__name__)

VerseRef = tuple[int, int]


@dataclass(frozen=True)
class IndexEntry:
    """A verse row tagged with the riwaya it was loaded from."""

    verse: Verse
    riwaya: RiwayaId

    @property
    def ref(self) -> VerseRef:
        return (self.verse.surah, self.verse.ayah)


def build_text_index(
    entries: Iterable[IndexEntry],
    key: Callable[[IndexEntry], str],
) -> Mapping[str, tuple[IndexEntry, ...]]:
    """
    Group entries by a text key.

    Entries sharing a key keep their insertion order.

    Args:
        entries: Entries to index
        key: Function extracting the lookup key from an entry

    Returns:
        Read-only mapping of key to the entries with that key
    """
    buckets: dict[str, list[IndexEntry]] = {}
    for entry in entries:
        buckets.setdefault(key(entry), []).append(entry)
    return MappingProxyType({k: tuple(v) for k, v in buckets.items()})


def _exact_key(entry: IndexEntry) -> str:
    return entry.verse.text


def _lookup_key(entry: IndexEntry) -> str:
    return normalize_arabic(entry.verse.text, LOOKUP_OPTIONS)


def _ref_map(verses: Iterable[Verse]) -> Mapping[VerseRef, Verse]:
    return MappingProxyType({(v.surah, v.ayah): v for v in verses})


@dataclass(frozen=True)
class CorpusIndex:
    """
    Lookup structures shared by every query of a validator.

    Attributes:
        primary_riwaya: Riwaya of the primary corpus
        riwayat: Loaded riwayat, in load order
        entries: Active entries: the primary corpus when one riwaya is loaded,
            otherwise the rows of every loaded riwaya in load order
        exact_text_map: Raw verse text -> entries
        normalized_text_map: Lookup-normalized text -> entries
        flattened_corpus: Lookup-normalized primary texts followed by the
            texts of every loaded non-primary riwaya when more than one is
            loaded, space-joined
        primary_verses: The primary corpus in file order
        display_texts: Display-normalized primary texts, aligned with primary_verses
    """

    primary_riwaya: RiwayaId
    riwayat: tuple[RiwayaId, ...]
    entries: tuple[IndexEntry, ...]
    exact_text_map: Mapping[str, tuple[IndexEntry, ...]]
    normalized_text_map: Mapping[str, tuple[IndexEntry, ...]]
    flattened_corpus: str
    primary_verses: tuple[Verse, ...]
    display_texts: tuple[str, ...]
    verses_by_ref: Mapping[VerseRef, Verse]
    riwaya_verses: Mapping[RiwayaId, Mapping[VerseRef, Verse]]
    surah_verses: Mapping[int, tuple[Verse, ...]]

    @property
    def is_multi_riwaya(self) -> bool:
        return len(self.riwayat) > 1

    @classmethod
    def build(
        cls,
        primary_verses: Sequence[Verse],
        variant_rows: Mapping[RiwayaId, Sequence[Verse]],
        primary_riwaya: RiwayaId = PRIMARY_RIWAYA,
    ) -> "CorpusIndex":
        """
        Build the index.

        Args:
            primary_verses: Full records of the primary corpus
            variant_rows: Rows of every loaded riwaya, in load order. The
                primary riwaya, when loaded, maps to its own corpus records.
            primary_riwaya: Riwaya the primary corpus belongs to

        Returns:
            The immutable index
        """
        riwayat = tuple(variant_rows)
        multi = len(riwayat) > 1
        if multi:
            entries = tuple(
                IndexEntry(verse=verse, riwaya=riwaya)
                for riwaya, rows in variant_rows.items()
                for verse in rows
            )
        else:
            entries = tuple(
                IndexEntry(verse=verse, riwaya=primary_riwaya) for verse in primary_verses
            )

        exact_text_map = build_text_index(entries, _exact_key)
        normalized_text_map = build_text_index(entries, _lookup_key)

        corpus_texts = [normalize_arabic(v.text, LOOKUP_OPTIONS) for v in primary_verses]
        if multi:
            for riwaya, rows in variant_rows.items():
                if riwaya != primary_riwaya:
                    corpus_texts.extend(normalize_arabic(v.text, LOOKUP_OPTIONS) for v in rows)

        surah_groups: dict[int, list[Verse]] = {}
        for verse in primary_verses:
            surah_groups.setdefault(verse.surah, []).append(verse)

        index = cls(
            primary_riwaya=primary_riwaya,
            riwayat=riwayat,
            entries=entries,
            exact_text_map=exact_text_map,
            normalized_text_map=normalized_text_map,
            flattened_corpus=" ".join(corpus_texts),
            primary_verses=tuple(primary_verses),
            display_texts=tuple(normalize_arabic(v.text, DISPLAY_OPTIONS) for v in primary_verses),
            verses_by_ref=_ref_map(primary_verses),
            riwaya_verses=MappingProxyType(
                {riwaya: _ref_map(rows) for riwaya, rows in variant_rows.items()}
            ),
            surah_verses=MappingProxyType(
                {surah: tuple(sorted(vs, key=lambda v: v.ayah)) for surah, vs in surah_groups.items()}
            ),
        )

        logger.info(
            "Built corpus index: %d entries, %d exact keys, %d normalized keys, riwayat=%s",
            len(entries),
            len(exact_text_map),
            len(normalized_text_map),
            ",".join(r.value for r in riwayat),
        )
        return index

    def get_verse(self, surah: int, ayah: int) -> Optional[Verse]:
        """Primary-corpus verse at an address, or None."""
        return self.verses_by_ref.get((surah, ayah))

    def get_riwaya_verse(self, riwaya: RiwayaId, surah: int, ayah: int) -> Optional[Verse]:
        """A loaded riwaya's row at an address, or None."""
        rows = self.riwaya_verses.get(riwaya)
        if rows is None:
            return None
        return rows.get((surah, ayah))
