from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``SPAMLINGUA_*`` environment variables."""

    app_name: str = "SpamLingua"
    debug: bool = False

    # Datasets
    default_language: str = "en"
    data_dir: Optional[Path] = None  # packaged datasets when unset
    preload_datasets: bool = True

    # Detection
    classifier_backend: Literal["langdetect", "lingua"] = "langdetect"
    subject_weight: float = Field(0.3, ge=0.0, le=1.0)
    min_text_length: int = Field(10, ge=0)
    detect_languages_limit: int = Field(5, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="SPAMLINGUA_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
