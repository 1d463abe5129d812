"""
Verse (ayah) data model.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Verse(BaseModel):
    """
    Represents a single verse (ayah) from the Quran.

    Primary-corpus verses carry the full record. Rows loaded from a riwaya
    file only carry ``id``, ``surah``, ``ayah`` and ``text``; the remaining
    fields keep their defaults.

    Attributes:
        id: Sequential verse number (1-6236 in the Hafs corpus)
        surah: Surah number (1-114)
        ayah: Ayah number within the surah (1-based)
        text: Full Arabic text with diacritics (Uthmani script)
        text_simple: Simplified Arabic text without diacritics
        page: Page number in the standard mushaf
        juz: Juz (part) number (1-30)
    """

    id: int = Field(
        ...,
        description="Sequential verse number",
        ge=1,
    )
    surah: int = Field(
        ...,
        description="Surah number (1-114)",
        ge=1,
        le=114,
    )
    ayah: int = Field(
        ...,
        description="Ayah number within the surah (1-based)",
        ge=1,
    )
    text: str = Field(
        ...,
        description="The Arabic text of the verse (Uthmani script)",
        min_length=1,
    )
    text_simple: str = Field(
        default="",
        alias="textSimple",
        description="Simplified Arabic text without diacritics",
    )
    page: Optional[int] = Field(
        default=None,
        description="Page number in the standard mushaf",
        ge=1,
    )
    juz: Optional[int] = Field(
        default=None,
        description="Juz (part) number (1-30)",
        ge=1,
        le=30,
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "surah": 1,
                    "ayah": 1,
                    "text": "بِسْمِ ٱللَّهِ ٱلرَّحْمَـٰنِ ٱلرَّحِيمِ",
                    "textSimple": "بسم الله الرحمن الرحيم",
                    "page": 1,
                    "juz": 1,
                }
            ]
        },
    }

    @property
    def reference(self) -> str:
        """Reference string in ``surah:ayah`` form."""
        return f"{self.surah}:{self.ayah}"

    def __str__(self) -> str:
        return f"Verse({self.surah}:{self.ayah})"

    def __repr__(self) -> str:
        return f"Verse(id={self.id}, surah={self.surah}, ayah={self.ayah})"
