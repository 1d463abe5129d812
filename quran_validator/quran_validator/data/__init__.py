"""
Reference data loading for quran-validator.

The data directory holds the primary corpus and the riwayat files:

    <data_dir>/quran-verses.json        primary (Hafs) verse records
    <data_dir>/riwayat/<id>.json        {id, surah, ayah, text} rows per riwaya
    <data_dir>/riwayat/metadata.json    RiwayaInfo records

Every loader raises CorpusDataError when a file is missing or malformed.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from quran_validator.config import DEFAULT_DATA_DIR, get_settings
from quran_validator.models import RiwayaId, RiwayaInfo, Verse
from quran_validator.models.surah import SURAH_AYAH_COUNTS, SURAH_NAMES

logger = logging.getLogger(__name__)

VERSES_FILE = "quran-verses.json"
RIWAYAT_DIR = "riwayat"
METADATA_FILE = "metadata.json"


class CorpusDataError(RuntimeError):
    """Raised when reference data cannot be loaded."""


def _resolve_data_dir(data_dir: Optional[Path | str]) -> Path:
    if data_dir is None:
        return get_settings().data_dir
    return Path(data_dir)


def _read_json_array(path: Path) -> list[Any]:
    if not path.is_file():
        raise CorpusDataError(f"Data file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CorpusDataError(f"Malformed JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise CorpusDataError(f"Expected a JSON array in {path}, got {type(data).__name__}")
    return data


def _parse_verses(rows: list[Any], path: Path) -> list[Verse]:
    verses = []
    for i, row in enumerate(rows):
        try:
            verses.append(Verse.model_validate(row))
        except ValidationError as e:
            raise CorpusDataError(f"Invalid verse record #{i} in {path}") from e

    if not verses:
        raise CorpusDataError(f"No verses found in {path}")

    seen_ids: set[int] = set()
    seen_refs: set[tuple[int, int]] = set()
    for verse in verses:
        if verse.id in seen_ids:
            raise CorpusDataError(f"Duplicate verse id {verse.id} in {path}")
        if (verse.surah, verse.ayah) in seen_refs:
            raise CorpusDataError(f"Duplicate verse {verse.reference} in {path}")
        seen_ids.add(verse.id)
        seen_refs.add((verse.surah, verse.ayah))

    return verses


def load_verses(data_dir: Optional[Path | str] = None) -> list[Verse]:
    """
    Load the primary corpus.

    Args:
        data_dir: Data directory (defaults to settings.data_dir)

    Returns:
        List of Verse objects in file order

    Raises:
        CorpusDataError: If the file is missing, malformed, empty, or has duplicates
    """
    path = _resolve_data_dir(data_dir) / VERSES_FILE
    verses = _parse_verses(_read_json_array(path), path)
    logger.info("Loaded %d verses from %s", len(verses), path)
    return verses


def load_riwaya(riwaya: RiwayaId | str, data_dir: Optional[Path | str] = None) -> list[Verse]:
    """
    Load the verse rows of a single riwaya.

    Args:
        riwaya: Riwaya identifier (e.g. "warsh")
        data_dir: Data directory (defaults to settings.data_dir)

    Returns:
        List of Verse objects carrying the riwaya's own text

    Raises:
        ValueError: If the riwaya identifier is unknown
        CorpusDataError: If the file is missing, malformed, empty, or has duplicates
    """
    riwaya = RiwayaId(riwaya)
    path = _resolve_data_dir(data_dir) / RIWAYAT_DIR / f"{riwaya.value}.json"
    rows = _parse_verses(_read_json_array(path), path)
    logger.debug("Loaded %d rows for riwaya %s", len(rows), riwaya.value)
    return rows


def _parse_metadata(path: Path) -> dict[RiwayaId, RiwayaInfo]:
    metadata: dict[RiwayaId, RiwayaInfo] = {}
    for i, row in enumerate(_read_json_array(path)):
        try:
            info = RiwayaInfo.model_validate(row)
        except ValidationError as e:
            raise CorpusDataError(f"Invalid riwaya metadata record #{i} in {path}") from e
        metadata[info.id] = info
    return metadata


@lru_cache(maxsize=1)
def bundled_riwayat_metadata() -> dict[RiwayaId, RiwayaInfo]:
    """Riwayat metadata shipped with the package."""
    return _parse_metadata(DEFAULT_DATA_DIR / RIWAYAT_DIR / METADATA_FILE)


def load_riwayat_metadata(data_dir: Optional[Path | str] = None) -> dict[RiwayaId, RiwayaInfo]:
    """
    Load riwayat metadata from a data directory.

    A data directory without a metadata file yields an empty mapping;
    callers fall back to bundled_riwayat_metadata().

    Args:
        data_dir: Data directory (defaults to settings.data_dir)

    Returns:
        Mapping of riwaya id to its metadata record
    """
    path = _resolve_data_dir(data_dir) / RIWAYAT_DIR / METADATA_FILE
    if not path.is_file():
        return {}
    return _parse_metadata(path)


def get_surah_name(surah_id: int) -> str:
    """
    Get the Arabic name of a surah.

    Raises:
        ValueError: If surah_id is outside 1-114
    """
    if surah_id not in SURAH_NAMES:
        raise ValueError(f"Invalid surah_id: {surah_id}. Must be 1-114.")
    return SURAH_NAMES[surah_id]


def get_ayah_count(surah_id: int) -> int:
    """
    Get the number of ayahs in a surah (Hafs count).

    Raises:
        ValueError: If surah_id is outside 1-114
    """
    if surah_id not in SURAH_AYAH_COUNTS:
        raise ValueError(f"Invalid surah_id: {surah_id}. Must be 1-114.")
    return SURAH_AYAH_COUNTS[surah_id]


__all__ = [
    "CorpusDataError",
    "load_verses",
    "load_riwaya",
    "load_riwayat_metadata",
    "bundled_riwayat_metadata",
    "get_surah_name",
    "get_ayah_count",
]
