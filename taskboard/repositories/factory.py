"""Pick the storage backend once, at process start."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from taskboard.core.config import Settings
from taskboard.db.session import build_engine
from taskboard.domain.entities import PROJECT, TASK

from .base import EntityStore
from .json_storage import LocalStore
from .sql_repository import RemoteStore

logger = logging.getLogger(__name__)

TASKS_FILE = ".dev-tasks.json"
PROJECTS_FILE = ".dev-projects.json"


@dataclass
class StoreBundle:
    tasks: EntityStore
    projects: EntityStore


def local_stores(data_dir: str | Path) -> StoreBundle:
    base = Path(data_dir)
    base.mkdir(parents=True, exist_ok=True)
    return StoreBundle(
        tasks=LocalStore(TASK, base / TASKS_FILE),
        projects=LocalStore(PROJECT, base / PROJECTS_FILE),
    )


def build_stores(settings: Settings) -> StoreBundle:
    """RemoteStore when a database URL is configured, LocalStore otherwise."""
    if settings.use_database:
        engine = build_engine(settings.database_url)
        logger.info("Using SQL storage (%s)", engine.url.render_as_string(hide_password=True))
        return StoreBundle(
            tasks=RemoteStore.for_tasks(engine),
            projects=RemoteStore.for_projects(engine),
        )
    logger.info("Using local JSON storage in %s", Path(settings.data_dir).resolve())
    return local_stores(settings.data_dir)
