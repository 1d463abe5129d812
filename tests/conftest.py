"""
Shared fixtures and test configuration for quran-validator tests.
"""

from pathlib import Path

import pytest

from quran_validator.config import QuranValidatorSettings
from quran_validator.core import QuranValidator

FIXTURE_DATA_DIR = Path(__file__).parent / "fixtures" / "data"


@pytest.fixture(scope="session")
def data_dir():
    """Small self-consistent corpus: Hafs surahs 1, 109, 112-114 and Warsh 1, 112, 113."""
    return FIXTURE_DATA_DIR


@pytest.fixture(scope="session")
def settings(data_dir):
    """Settings pointing at the fixture corpus."""
    return QuranValidatorSettings(data_dir=data_dir)


@pytest.fixture(scope="session")
def validator(settings):
    """Single-riwaya (Hafs) validator over the fixture corpus."""
    return QuranValidator(settings=settings)


@pytest.fixture(scope="session")
def multi_validator(settings):
    """Hafs + Warsh validator over the fixture corpus."""
    return QuranValidator(riwayat=["hafs", "warsh"], settings=settings)


@pytest.fixture
def fatiha_basmala():
    """Surah 1, ayah 1 exactly as stored in the fixture corpus."""
    return "بِسْمِ ٱللَّهِ ٱلرَّحْمَـٰنِ ٱلرَّحِيمِ"


@pytest.fixture
def warsh_falaq_opening():
    """Warsh text of 113:1."""
    return "قُلَ اَعُوذُ بِرَبِّ اِ۬لْفَلَقِ"


@pytest.fixture
def normalization_test_cases():
    """Test cases for Arabic normalization (input, display form)."""
    return [
        ("بِسْمِ اللَّهِ", "بسم الله"),
        ("بِسْمِ ٱللَّهِ ٱلرَّحْمَـٰنِ ٱلرَّحِيمِ", "بسم الله الرحمن الرحيم"),
        ("ٱلْحَمْدُ لِلَّهِ رَبِّ ٱلْعَـٰلَمِينَ", "الحمد لله رب العالمين"),
        ("قُلْ هُوَ ٱللَّهُ أَحَدٌ", "قل هو الله احد"),
        ("ٱلصَّدَقَـٰتُ", "الصدقات"),
        ("ٱلسَّمَـٰوَٰتِ", "السماوات"),
        ("ٱلْـَٔاخِرِ", "الاخر"),
    ]
