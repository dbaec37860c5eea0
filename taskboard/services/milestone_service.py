"""Milestones page data: project progress and upcoming deadlines."""
from __future__ import annotations

from typing import Any

from taskboard.domain.views import project_progress, upcoming_deadlines

from .project_service import ProjectService
from .task_service import TaskService

UPCOMING_LIMIT = 5


class MilestoneService:
    def __init__(self, tasks: TaskService, projects: ProjectService) -> None:
        self.tasks = tasks
        self.projects = projects

    def summary(self) -> dict[str, Any]:
        tasks = self.tasks.list()
        projects = self.projects.list()
        return {
            "projects": project_progress(projects, tasks),
            "upcoming": upcoming_deadlines(tasks, self.tasks.today(), limit=UPCOMING_LIMIT),
            "todoCount": sum(1 for t in tasks if t.get("status") == "todo"),
        }
