"""
Riwayat and Fabrication Example for quran-validator

This example demonstrates:
1. Loading more than one riwaya (Hafs and Warsh)
2. Seeing which riwayat a quote matches, and how
3. Comparing a verse across the loaded riwayat
4. Flagging words that appear nowhere in the corpus
"""

from quran_validator import QuranValidator, configure


def main():
    # Settings can also come from QURAN_VALIDATOR_* environment variables
    configure(data_dir="data", riwayat=["hafs", "warsh"], max_suggestions=5)

    validator = QuranValidator()

    print("Loaded riwayat:")
    for info in validator.get_loaded_riwayat():
        print(f"  {info} - {info.name_arabic}, from {info.reciter_name}")
    print()

    # A Warsh quote: exact in Warsh, normalized in Hafs
    quote = "قُلَ اَعُوذُ بِرَبِّ اِ۬لْفَلَقِ"
    result = validator.validate(quote)
    print(f"Quote: {quote}")
    print(f"  {result}")
    for match in result.riwaya_matches or []:
        print(f"  {match.riwaya.value:>6}: {match.match_type.value:<10} "
              f"{match.verse.reference}  {match.riwaya_text}")
    print()

    # The same verse as each riwaya writes it
    print("Al-Fatiha 1:4 across riwayat:")
    for riwaya, text in validator.get_verse_riwayat(1, 4):
        print(f"  {riwaya.value:>6}: {text}")
    print()

    # Fabrication analysis: which words never occur in the corpus?
    print("Fabrication analysis:")
    print("=" * 60)
    samples = [
        "قل هو الله أحد",
        "قل هو الله الفلان",
        "إن الله يحب المتقين والمبتكرين",
    ]
    for text in samples:
        analysis = validator.analyze_fabrication(text)
        print(f"  {analysis.normalized_input}")
        if analysis.has_fabrication:
            print(f"    not found: {', '.join(analysis.fabricated)}")
        print(f"    fabricated ratio: {analysis.stats.fabricated_ratio:.0%}")


if __name__ == "__main__":
    main()
