from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "exercises.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Falls back to the bundled sample catalog when unset
    DATABASE_PATH: Optional[Path] = None

    # Query policies
    DEFAULT_SEARCH_LIMIT: int = 20
    MAX_SEARCH_LIMIT: int = 100
    DEFAULT_ALTERNATIVES_LIMIT: int = 10
    MAX_ALTERNATIVES_LIMIT: int = 50
    FUZZY_NAME_THRESHOLD: float = 0.7

    @property
    def catalog_path(self) -> Path:
        return self.DATABASE_PATH or BUNDLED_CATALOG_PATH


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at ``level`` (defaults to LOG_LEVEL)."""
    name = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
