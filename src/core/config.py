"""Application settings. Read once from the environment, with defaults that keep everything in memory."""

import os
from functools import lru_cache

from pydantic import BaseModel

ENV_PREFIX = "CHESS_"


class Settings(BaseModel):
    # In-memory SQLite: games live only as long as the process does
    database_url: str = "sqlite:///:memory:"
    sql_echo: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Pick up CHESS_DATABASE_URL, CHESS_SQL_ECHO, CHESS_LOG_LEVEL (unset variables keep their default)."""
        values = {
            name: os.environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in os.environ
        }
        return cls.model_validate(values)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
