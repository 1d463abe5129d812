"""
Configuration management for the quran-validator library.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the QURAN_VALIDATOR_ prefix.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quran_validator.models.riwaya import RiwayaId

# Directory holding the bundled reference data (riwayat metadata, optional corpus files)
DEFAULT_DATA_DIR = Path(__file__).parent / "data"


class QuranValidatorSettings(BaseSettings):
    """
    Configuration settings for the quran-validator library.

    All settings can be overridden via environment variables with QURAN_VALIDATOR_ prefix.

    Example:
        export QURAN_VALIDATOR_DATA_DIR="/srv/quran-data"
        export QURAN_VALIDATOR_RIWAYAT='["hafs", "warsh"]'
        export QURAN_VALIDATOR_MAX_SUGGESTIONS="5"
    """

    model_config = SettingsConfigDict(
        env_prefix="QURAN_VALIDATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Reference Data ============

    data_dir: Path = Field(
        default=DEFAULT_DATA_DIR,
        description="Directory containing quran-verses.json and riwayat/*.json",
    )

    riwayat: list[RiwayaId] = Field(
        default_factory=lambda: [RiwayaId.HAFS],
        description="Riwayat to load; more than one enables multi-riwaya matching",
        min_length=1,
    )

    # ============ Validation Settings ============

    max_suggestions: int = Field(
        default=3,
        description="Maximum number of alternative verses returned as suggestions",
        ge=0,
        le=50,
    )

    search_limit: int = Field(
        default=10,
        description="Default number of results returned by search()",
        ge=1,
        le=500,
    )

    # ============ Validators ============

    @field_validator("data_dir", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("riwayat")
    @classmethod
    def deduplicate_riwayat(cls, v: list[RiwayaId]) -> list[RiwayaId]:
        """Drop repeated riwayat while keeping the requested order."""
        return list(dict.fromkeys(v))


# Default settings instance
_default_settings: QuranValidatorSettings | None = None


def get_settings() -> QuranValidatorSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        QuranValidatorSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = QuranValidatorSettings()
    return _default_settings


def configure(**kwargs) -> QuranValidatorSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        QuranValidatorSettings: The new settings instance
    """
    global _default_settings
    _default_settings = QuranValidatorSettings(**kwargs)
    return _default_settings
