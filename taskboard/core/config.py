"""
Configuration helpers for the Taskboard backend.

Routers/services read a typed Settings object instead of fetching os.environ
directly. The database URL decides which storage backend is built at startup.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    data_dir: Path
    log_level: str
    log_file: str
    cors_origins: tuple[str, ...]

    @property
    def use_database(self) -> bool:
        return bool(self.database_url)


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _list(value: str | None) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        data_dir=Path(os.getenv("DATA_DIR") or ".").expanduser(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=(os.getenv("LOG_FILE") or "").strip(),
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
    )
