"""
String comparison helpers for Arabic text.

This module provides the comparisons used to explain why a quote did not
match: where two normalized strings first diverge, how similar they are, and
which chunks differ. It also scores containment for verse search.

Uses SIMD-accelerated rapidfuzz for edit-distance computations.
"""

from dataclasses import dataclass
from typing import Optional

from rapidfuzz.distance import Levenshtein as _rapidfuzz_levenshtein

from quran_validator.core.arabic import normalize_arabic


def find_mismatch_index(text1: str, text2: str) -> int:
    """
    Find the character index where two strings first differ.

    Args:
        text1: First string
        text2: Second string

    Returns:
        The first differing index; the shorter length when one string is a
        strict prefix of the other; -1 when the strings are identical.

    Examples:
        >>> find_mismatch_index("بسم الله الكريم", "بسم الله الرحمن")
        11
        >>> find_mismatch_index("بسم الله", "بسم الله الرحمن")
        8
    """
    shorter = min(len(text1), len(text2))
    for i in range(shorter):
        if text1[i] != text2[i]:
            return i

    if len(text1) != len(text2):
        return shorter
    return -1


def similarity(text1: str, text2: str, normalize: bool = True) -> float:
    """
    Compute similarity ratio between two strings.

    Returns ``1 - levenshtein_distance / max_length``: 0.0 for nothing in
    common, 1.0 for identical strings.

    Args:
        text1: First string to compare
        text2: Second string to compare
        normalize: Whether to normalize Arabic text before comparison

    Returns:
        Similarity ratio between 0.0 and 1.0

    Examples:
        >>> similarity("بِسْمِ اللَّهِ", "بسم الله")
        1.0
    """
    if normalize:
        text1 = normalize_arabic(text1)
        text2 = normalize_arabic(text2)

    return _rapidfuzz_levenshtein.normalized_similarity(text1, text2)


@dataclass(frozen=True)
class Difference:
    """A differing chunk between an input string and the correct string."""

    input: str
    correct: str
    position: int


MISSING = "(missing)"
EXTRA = "(extra)"


def find_differences(input_text: str, correct_text: str) -> list[Difference]:
    """
    List the chunks where input text differs from the correct text.

    Adjacent edit operations are merged into a single chunk. An empty side
    is reported as "(missing)" (input lacks text) or "(extra)" (input has
    text the correct string lacks).

    Args:
        input_text: The text being checked
        correct_text: The reference text

    Returns:
        Differences ordered by position in the input
    """
    differences: list[Difference] = []
    run: Optional[list[int]] = None  # [src_start, src_end, dest_start, dest_end]

    for op in _rapidfuzz_levenshtein.opcodes(input_text, correct_text):
        if op.tag == "equal":
            if run is not None:
                differences.append(_difference(input_text, correct_text, run))
                run = None
            continue

        if run is None:
            run = [op.src_start, op.src_end, op.dest_start, op.dest_end]
        else:
            run[1], run[3] = op.src_end, op.dest_end

    if run is not None:
        differences.append(_difference(input_text, correct_text, run))

    return differences


def _difference(input_text: str, correct_text: str, run: list[int]) -> Difference:
    src_start, src_end, dest_start, dest_end = run
    return Difference(
        input=input_text[src_start:src_end] or MISSING,
        correct=correct_text[dest_start:dest_end] or EXTRA,
        position=src_start,
    )


def containment_score(query: str, verse_text: str) -> float | None:
    """
    Score how well a normalized query and a normalized verse contain each other.

    A verse containing the query scores in [0.7, 1.0]; a query containing the
    whole verse scores in [0.5, 0.8]. Unrelated text scores None.

    Args:
        query: Normalized search query (non-empty)
        verse_text: Normalized verse text

    Returns:
        Relevance score, or None when neither contains the other
    """
    if not query or not verse_text:
        return None

    if query in verse_text:
        return 0.7 + (len(query) / len(verse_text)) * 0.3
    if verse_text in query:
        return 0.5 + (len(verse_text) / len(query)) * 0.3
    return None
