"""
Dice 10000 - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Supabase credentials are optional; they are only needed when the
Supabase-backed ledger and history adapters are used.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Supabase
    supabase_url: str | None = None
    supabase_anon_key: str | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Betting
    default_bet: int = 100
    bet_step: int = 50
    min_bet: int = 50

    # Seconds between a settled round and the return to betting
    settlement_delay_seconds: float = 3.0

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
