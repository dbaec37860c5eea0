"""Derived task views used by the dashboard, calendar and milestones pages."""
from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Any, Iterable, Sequence

from .entities import parse_due_date
from .errors import ValidationError

VIEWS = ("all", "today", "tomorrow", "next-week", "this-month", "done")


def _is_open(task: dict) -> bool:
    return task.get("status") != "done"


def add_one_month(day: date) -> date:
    """Same day next month, clamped to the month's last day."""
    year = day.year + (1 if day.month == 12 else 0)
    month = 1 if day.month == 12 else day.month + 1
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))


def next_working_day(today: date) -> date:
    """The day after ``today``; Saturday and Sunday roll forward to Monday."""
    candidate = today + timedelta(days=1)
    if candidate.weekday() == 5:
        candidate += timedelta(days=2)
    elif candidate.weekday() == 6:
        candidate += timedelta(days=1)
    return candidate


def filter_tasks(tasks: Iterable[dict], view: str, today: date) -> list[dict]:
    """Apply a named view, keeping the input order."""
    view = (view or "all").strip().lower()
    if view not in VIEWS:
        raise ValidationError(f"view must be one of: {', '.join(VIEWS)}", "view")
    if view == "done":
        return [t for t in tasks if not _is_open(t)]
    if view == "all":
        return [t for t in tasks if _is_open(t)]

    if view == "today":
        lo, hi = today, today
    elif view == "tomorrow":
        lo = hi = today + timedelta(days=1)
    elif view == "next-week":
        lo, hi = today, today + timedelta(days=7)
    else:
        lo, hi = today, add_one_month(today)

    selected = []
    for task in tasks:
        if not _is_open(task):
            continue
        due = parse_due_date(task.get("dueDate"))
        if due is not None and lo <= due <= hi:
            selected.append(task)
    return selected


def project_progress(projects: Sequence[dict], tasks: Sequence[dict]) -> list[dict[str, Any]]:
    """Per-project task counts and the rounded percentage of done tasks."""
    summary = []
    for project in projects:
        owned = [t for t in tasks if t.get("projectId") == project.get("id")]
        done = sum(1 for t in owned if not _is_open(t))
        progress = round(done * 100 / len(owned)) if owned else 0
        summary.append(
            {
                "projectId": project.get("id"),
                "name": project.get("name"),
                "status": project.get("status"),
                "total": len(owned),
                "done": done,
                "progress": progress,
            }
        )
    return summary


def upcoming_deadlines(tasks: Iterable[dict], today: date, limit: int = 5) -> list[dict]:
    """Tasks due after today, done ones included, in the order given."""
    upcoming = []
    for task in tasks:
        due = parse_due_date(task.get("dueDate"))
        if due is not None and due > today:
            upcoming.append(task)
    return upcoming[:limit]
