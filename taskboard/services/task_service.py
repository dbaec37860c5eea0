"""Task use cases: CRUD plus the dashboard's filtered views and postpone."""
from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from taskboard.domain.views import filter_tasks, next_working_day
from taskboard.repositories.base import EntityStore, Record

from .resource_service import ResourceService


class TaskService(ResourceService):
    def __init__(self, store: EntityStore, today: Callable[[], date] = date.today) -> None:
        super().__init__(store)
        self._today = today

    def today(self) -> date:
        return self._today()

    def list(self, view: Optional[str] = None, project_id: Optional[int] = None) -> list[Record]:
        tasks = self.store.list()
        if project_id is not None:
            tasks = [t for t in tasks if t.get("projectId") == project_id]
        if view:
            tasks = filter_tasks(tasks, view, self.today())
        return tasks

    def postpone(self, entity_id: Optional[int]) -> Record:
        """Move a task's due date to the next working day after today."""
        due = next_working_day(self.today())
        return self.update(entity_id, {"dueDate": due.isoformat()})
