"""
Field rules for the two tracked entity kinds.

Stores and services share one EntitySchema per kind. The schema extracts the
recognised fields from a request payload (unknown keys are ignored), applies
creation defaults and rejects values the rest of the system cannot represent.
Keys use the wire names (camelCase) that also appear in the JSON snapshot and
as SQL column names.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping

from .errors import ValidationError

TASK_STATUSES = frozenset({"todo", "done"})
TASK_PRIORITIES = frozenset({"low", "medium", "high"})
PROJECT_STATUSES = frozenset({"Upcoming", "In Progress", "Completed", "On Hold"})


def parse_due_date(value: str | None) -> date | None:
    """Return the calendar date of an ISO date/datetime string, or None."""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


@dataclass(frozen=True)
class EntitySchema:
    kind: str
    required: str
    fields: tuple[str, ...]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    choices: Mapping[str, frozenset[str]] = field(default_factory=dict)
    integer_fields: frozenset[str] = frozenset()
    date_fields: frozenset[str] = frozenset()

    def prepare_create(self, payload: Mapping[str, Any] | None) -> dict[str, Any]:
        """Build the full field set for a new record."""
        payload = payload or {}
        record: dict[str, Any] = {}
        for name in self.fields:
            value = payload.get(name)
            if value is None:
                record[name] = self.defaults.get(name)
            else:
                record[name] = self._clean(name, value)
        if not (record.get(self.required) or "").strip():
            raise ValidationError(f"{self.required} is required", self.required)
        return record

    def prepare_update(self, payload: Mapping[str, Any] | None) -> dict[str, Any]:
        """Keep only supplied, non-null fields; everything else stays as stored."""
        payload = payload or {}
        changes: dict[str, Any] = {}
        for name in self.fields:
            value = payload.get(name)
            if value is None:
                continue
            changes[name] = self._clean(name, value)
        if self.required in changes and not changes[self.required].strip():
            raise ValidationError(f"{self.required} cannot be empty", self.required)
        return changes

    def _clean(self, name: str, value: Any) -> Any:
        if name in self.integer_fields:
            return self._integer(name, value)
        if not isinstance(value, str):
            raise ValidationError(f"{name} must be a string", name)
        if name == self.required:
            return value
        allowed = self.choices.get(name)
        if allowed is not None and value not in allowed:
            raise ValidationError(
                f"{name} must be one of: {', '.join(sorted(allowed))}", name
            )
        if name in self.date_fields and parse_due_date(value) is None:
            raise ValidationError(f"{name} must be an ISO date (YYYY-MM-DD)", name)
        return value

    @staticmethod
    def _integer(name: str, value: Any) -> int:
        if isinstance(value, bool):
            raise ValidationError(f"{name} must be an integer", name)
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        raise ValidationError(f"{name} must be an integer", name)


TASK = EntitySchema(
    kind="task",
    required="title",
    fields=("title", "description", "status", "priority", "dueDate", "projectId"),
    defaults={"description": "", "status": "todo", "priority": "medium"},
    choices={"status": TASK_STATUSES, "priority": TASK_PRIORITIES},
    integer_fields=frozenset({"projectId"}),
    date_fields=frozenset({"dueDate"}),
)

PROJECT = EntitySchema(
    kind="project",
    required="name",
    fields=("name", "description", "status"),
    defaults={"description": "", "status": "Upcoming"},
    choices={"status": PROJECT_STATUSES},
)
