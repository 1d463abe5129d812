"""
Riwaya (transmission variant) identifiers and metadata.
"""

from enum import Enum

from pydantic import BaseModel, Field


class RiwayaId(str, Enum):
    """Known transmission variants of the Quranic text."""

    HAFS = "hafs"  # Hafs an Asim
    WARSH = "warsh"  # Warsh an Nafi
    QALUN = "qalun"  # Qalun an Nafi
    SHUBA = "shuba"  # Shu'bah an Asim
    DURI = "duri"  # Ad-Duri an Abi Amr
    SUSI = "susi"  # As-Susi an Abi Amr
    BAZZI = "bazzi"  # Al-Bazzi an Ibn Kathir
    QUNBUL = "qunbul"  # Qunbul an Ibn Kathir


# The riwaya whose full records form the primary corpus
PRIMARY_RIWAYA = RiwayaId.HAFS


class RiwayaInfo(BaseModel):
    """
    Metadata record for a riwaya.

    Attributes:
        id: Riwaya identifier
        name: English name
        name_arabic: Arabic name
        reciter_name: Name of the qari the riwaya transmits from
        reciter_name_arabic: Arabic name of the qari
    """

    id: RiwayaId
    name: str = Field(..., description="English name of the riwaya")
    name_arabic: str = Field(
        default="",
        alias="nameArabic",
        description="Arabic name of the riwaya",
    )
    reciter_name: str = Field(
        default="",
        alias="reciterName",
        description="Qari the riwaya is transmitted from",
    )
    reciter_name_arabic: str = Field(
        default="",
        alias="reciterNameArabic",
        description="Arabic name of the qari",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def __str__(self) -> str:
        return f"{self.name} ({self.id.value})"
