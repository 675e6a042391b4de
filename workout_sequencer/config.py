from __future__ import annotations

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    # Fallbacks applied when a plan item carries missing or unusable values
    DEFAULT_TOTAL_SETS: int = 1
    DEFAULT_REST_SECONDS: int = 60


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
