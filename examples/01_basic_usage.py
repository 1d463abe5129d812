"""
Basic Usage Example for quran-validator

This example demonstrates the simplest way to use quran-validator:
1. Build a validator over the corpus
2. Validate a few quotes
3. Check a quote against the verse it cites
4. Look verses up by reference and by text
"""

from quran_validator import QuranValidator


def main():
    # Directory holding quran-verses.json (or set QURAN_VALIDATOR_DATA_DIR)
    data_dir = "data"

    print("Step 1: Loading the corpus...")
    validator = QuranValidator(data_dir=data_dir)
    print(f"  Loaded {len(validator.index.primary_verses)} verses\n")

    # Step 2: Validate quotes with and without diacritics
    print("Step 2: Validating quotes...")
    quotes = [
        "بِسْمِ ٱللَّهِ ٱلرَّحْمَـٰنِ ٱلرَّحِيمِ",
        "قل هو الله أحد",
        "ولا أنتم عابدون ما أعبد",
        "بسم الله الرحمن",
    ]
    for quote in quotes:
        result = validator.validate(quote)
        print(f"  {quote}")
        print(f"    {result}")
        if result.suggestions:
            others = ", ".join(s.reference for s in result.suggestions)
            print(f"    Also found at: {others}")
    print()

    # Step 3: Check a quote against its citation
    print("Step 3: Checking a cited quote...")
    result = validator.validate_against("الحمد لله رب العالمين", "1:2")
    print(f"  1:2 -> {result.match_type.value}")

    result = validator.validate_against("الحمد لله رب العلمين", "1:2")
    print(f"  1:2 (misquoted) -> {result.match_type.value}")
    print(f"    expected: {result.expected_normalized}")
    print(f"    first difference at character {result.mismatch_index}\n")

    # Step 4: Look verses up
    print("Step 4: Looking verses up...")
    verse = validator.get_verse(112, 1)
    print(f"  112:1 = {verse.text}")

    verse_range = validator.get_verse_range(1, 1, 3)
    print(f"  {verse_range.reference} = {verse_range.text_simple}")

    surah = validator.get_surah(114)
    print(f"  Surah {surah.number}: {surah.name} ({surah.english_name}), {surah.verses_count} ayahs")

    print("\nSearch results for 'الصمد':")
    print("-" * 60)
    for hit in validator.search("الصمد", limit=5):
        print(f"  {hit.verse.reference:>8}  {hit.similarity:.2f}  {hit.verse.text_simple}")


if __name__ == "__main__":
    main()
