"""FastAPI application factory for the Taskboard API."""
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.core.config import Settings, get_settings
from taskboard.repositories.base import EntityStore
from taskboard.repositories.factory import build_stores
from taskboard.routers import milestones as milestones_router
from taskboard.routers import projects as projects_router
from taskboard.routers import tasks as tasks_router
from taskboard.services.milestone_service import MilestoneService
from taskboard.services.project_service import ProjectService
from taskboard.services.task_service import TaskService

DEV_ORIGINS = {
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
}


def create_app(
    settings: Optional[Settings] = None,
    *,
    task_store: Optional[EntityStore] = None,
    project_store: Optional[EntityStore] = None,
    task_service: Optional[TaskService] = None,
) -> FastAPI:
    """
    Build the API with its storage chosen up front.

    Stores passed in are used as-is; missing ones come from ``build_stores``
    (SQL when DATABASE_URL is set, JSON files under DATA_DIR otherwise).
    """
    settings = settings or get_settings()
    if task_store is None or project_store is None:
        bundle = build_stores(settings)
        task_store = task_store or bundle.tasks
        project_store = project_store or bundle.projects

    app = FastAPI(title="Taskboard API")

    tasks = task_service or TaskService(task_store)
    projects = ProjectService(project_store)
    app.state.settings = settings
    app.state.task_service = tasks
    app.state.project_service = projects
    app.state.milestone_service = MilestoneService(tasks, projects)

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update(DEV_ORIGINS)
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=["X-Storage-Warning"],
        )

    app.include_router(tasks_router.router)
    app.include_router(projects_router.router)
    app.include_router(milestones_router.router)
    return app
