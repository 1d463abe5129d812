"""
Word-level fabrication detection.

Flags words of an input text that never occur anywhere in the corpus, as
opposed to real words quoted out of order. The input is scanned left to
right: at each position the longest run of words found verbatim in the
flattened corpus is marked as real; a position where not even a single
word is found is marked fabricated.
"""

from quran_validator.core.arabic import DISPLAY_OPTIONS, LOOKUP_OPTIONS, normalize_arabic
from quran_validator.core.index import CorpusIndex
from quran_validator.models import FabricationAnalysis, FabricationStats, WordAnalysis


def longest_contained_span(words: list[str], start: int, corpus: str) -> int:
    """
    Length of the longest run of words starting at ``start`` found in corpus.

    Binary search over span lengths. This assumes containment only ever
    shrinks as the span grows, which substring search does not strictly
    guarantee; a longer span matched at a different corpus position can be
    missed.

    Args:
        words: Normalized words
        start: Index of the first word of the span
        corpus: Space-joined normalized corpus

    Returns:
        Span length in words (0 when the first word itself is absent)
    """
    lo, hi = 1, len(words) - start
    best = 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if " ".join(words[start:start + mid]) in corpus:
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best


def analyze_fabrication(text: str, corpus: CorpusIndex) -> FabricationAnalysis:
    """
    Classify every word of a text as real or fabricated.

    Args:
        text: Arabic text to analyze
        corpus: Corpus index providing the flattened corpus

    Returns:
        FabricationAnalysis with per-word verdicts and aggregate stats

    Example:
        >>> analysis = analyze_fabrication("بسم الله الفلان", index)
        >>> analysis.fabricated
        ['الفلن']
    """
    trimmed = text.strip()
    display_words = normalize_arabic(trimmed, DISPLAY_OPTIONS).split()
    lookup_words = normalize_arabic(trimmed, LOOKUP_OPTIONS).split()

    # Show the display form only when both forms tokenize identically
    shown = display_words if len(display_words) == len(lookup_words) else lookup_words

    verdicts: list[bool] = []
    pos = 0
    while pos < len(lookup_words):
        span = longest_contained_span(lookup_words, pos, corpus.flattened_corpus)
        if span > 0:
            verdicts.extend([False] * span)
            pos += span
        else:
            verdicts.append(True)
            pos += 1

    words = [WordAnalysis(word=w, is_fabricated=f) for w, f in zip(shown, verdicts)]
    total = len(words)
    fabricated = sum(verdicts)

    return FabricationAnalysis(
        normalized_input=" ".join(display_words),
        words=words,
        stats=FabricationStats(
            total_words=total,
            fabricated_words=fabricated,
            fabricated_ratio=fabricated / total if total else 0.0,
        ),
    )
