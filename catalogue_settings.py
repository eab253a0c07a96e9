"""Settings for the catalogue demos, loaded from CATALOGUE_* environment variables."""

from typing import List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CATALOGUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Cash dispenser
    denominations: List[int] = Field(default_factory=lambda: [2000, 500, 200, 100])
    currency_symbol: str = "Rs."

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "console"] = "console"

    @field_validator("denominations")
    @classmethod
    def _descending(cls, value: List[int]) -> List[int]:
        return sorted(value, reverse=True)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
