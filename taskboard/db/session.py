"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from taskboard.core.config import get_settings

Base = declarative_base()


def build_engine(url: str) -> Engine:
    url = (url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return create_engine(url, future=True, pool_pre_ping=True)


def build_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@lru_cache
def get_engine() -> Engine:
    """Engine for the configured DATABASE_URL (used by the schema script)."""
    return build_engine(get_settings().database_url)
