from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Cryptograms"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./cryptograms.db"

    # Corpora
    words_file: Path = DATA_DIR / "words.txt"
    quotes_file: Path = DATA_DIR / "quotes.json"
    word_min_length: int = 4
    word_max_length: int = 7

    # Cipher settings
    max_plaintext_length: int = 10_000
    cryptarithm_batch_size: int = 10
    # None draws batches until a puzzle turns up, so a request can wait for
    # as many batches as it takes. Each pair costs one carry search per
    # candidate word, pruned column by column, not a walk over every digit
    # assignment. Set a budget to bound latency; running out answers 503.
    cryptarithm_max_batches: int | None = None
    cryptarithm_parallel_threshold: int = 64
    cryptarithm_workers: int = 4

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
