"""
Central configuration loaded from environment variables with sensible defaults.
The province dataset itself is bundled code, not configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class APIConfig:
    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "8000"))
    cors_origins: tuple[str, ...] = _split_csv(os.getenv("API_CORS_ORIGINS", "*"))
    # Upper bound for the ?limit= of autocomplete queries
    max_search_results: int = int(os.getenv("SEARCH_MAX_RESULTS", "10"))


@dataclass(frozen=True)
class Settings:
    api: APIConfig = field(default_factory=APIConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    env: str = os.getenv("APP_ENV", "development")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
