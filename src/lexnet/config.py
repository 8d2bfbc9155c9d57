# src/lexnet/config.py
"""
Runtime settings, read from LEXNET_* environment variables or a .env file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    # Directory holding index.{adj,adv,noun,verb} and data.{adj,adv,noun,verb}
    DATA_DIR: Path | None = None

    # Bytes read per sense; no data line is longer than this
    READ_WINDOW: int = Field(default=1024, gt=0)
    ENCODING: str = "utf-8"

    # Raise on a malformed index line instead of skipping it
    STRICT_INDEX: bool = True

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    model_config = SettingsConfigDict(env_prefix="LEXNET_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
