#!/usr/bin/env python3
"""
Check a piece of Arabic text against the Quran corpus.

Usage:
    python validate_text.py <text> [--reference S:A[-B]] [--riwayat hafs warsh]
                            [--data-dir DIR] [--fabrication] [-v]

Examples:
    python validate_text.py "قل هو الله أحد" --data-dir ../../data
    python validate_text.py "الحمد لله رب العالمين" --reference 1:2
    python validate_text.py "بسم الله الفلان" --fabrication
"""

import argparse
import logging
import sys

from quran_validator import CorpusDataError, QuranValidator
from quran_validator.models import MatchType

logger = logging.getLogger("validate_text")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Validate Arabic text as a Quran quotation")
    parser.add_argument("text", help="Arabic text to check")
    parser.add_argument("--reference", help="Cited verse or range, e.g. 1:2 or 112:1-4")
    parser.add_argument("--riwayat", nargs="+", default=None, help="Riwayat to load (default: hafs)")
    parser.add_argument("--data-dir", default=None, help="Directory holding quran-verses.json")
    parser.add_argument("--fabrication", action="store_true", help="Show word-by-word fabrication analysis")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def print_result(result):
    icon = "✅" if result.is_valid else "❌"
    print(f"{icon} match: {result.match_type.value}")
    if result.reference:
        print(f"   Reference: {result.reference}")
    if result.matched_verse is not None:
        print(f"   Verse: {result.matched_verse.text}")
    print(f"   Normalized input: {result.normalized_input}")

    if result.expected_normalized is not None:
        print(f"   Expected: {result.expected_normalized}")
    if result.mismatch_index is not None:
        print(f"   First difference at character {result.mismatch_index}")

    for suggestion in result.suggestions or []:
        print(f"   Also matches: {suggestion.reference}")
    for match in result.riwaya_matches or []:
        print(f"   [{match.riwaya.value}] {match.match_type.value} {match.verse.reference}")


def print_fabrication(analysis):
    print("\n🔎 Fabrication analysis:")
    for word in analysis.words:
        mark = "⚠️" if word.is_fabricated else "  "
        print(f"   {mark} {word.word}")
    stats = analysis.stats
    print(f"   {stats.fabricated_words}/{stats.total_words} words not found "
          f"({stats.fabricated_ratio:.0%})")


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        validator = QuranValidator(riwayat=args.riwayat, data_dir=args.data_dir)
    except (CorpusDataError, ValueError) as e:
        logger.error("Could not load the corpus: %s", e)
        return 2

    if args.reference:
        result = validator.validate_against(args.text, args.reference)
    else:
        result = validator.validate(args.text)
    print_result(result)

    if args.fabrication or result.match_type == MatchType.NONE:
        print_fabrication(validator.analyze_fabrication(args.text))

    return 0 if result.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
