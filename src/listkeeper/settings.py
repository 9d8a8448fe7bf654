"""Application settings."""

import os
from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "listkeeper"


class IdStrategy(StrEnum):
    """How new entry ids are assigned."""

    COUNTER = "counter"
    TIMESTAMP = "timestamp"


class Settings(BaseSettings):
    """Application settings loaded from LISTKEEPER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LISTKEEPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    page_size: int = Field(default=5, gt=0)
    data_dir: str | None = None
    storage_key: str = "myItems"
    id_strategy: IdStrategy = IdStrategy.COUNTER

    def resolve_data_dir(self) -> Path:
        """Directory holding the persisted slots.

        Uses data_dir if set, otherwise XDG_DATA_HOME/listkeeper or
        ~/.local/share/listkeeper.
        """
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        xdg_data = os.environ.get("XDG_DATA_HOME")
        if xdg_data:
            base = Path(xdg_data)
        else:
            base = Path.home() / ".local" / "share"
        return base / APP_NAME


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
