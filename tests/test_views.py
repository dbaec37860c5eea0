from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

# Garante que o pacote taskboard seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from taskboard.domain.errors import ValidationError  # noqa: E402
from taskboard.domain.views import (  # noqa: E402
    add_one_month,
    filter_tasks,
    next_working_day,
    project_progress,
    upcoming_deadlines,
)

FRIDAY = date(2026, 10, 23)


def _task(id, due=None, status="todo", project=None):
    return {"id": id, "title": f"t{id}", "status": status, "dueDate": due, "projectId": project}


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2026, 10, 21), date(2026, 10, 22)),  # wednesday -> thursday
        (FRIDAY, date(2026, 10, 26)),
        (date(2026, 10, 24), date(2026, 10, 26)),  # saturday
        (date(2026, 10, 25), date(2026, 10, 26)),  # sunday
    ],
)
def test_next_working_day_skips_weekends(today, expected):
    assert next_working_day(today) == expected


def test_add_one_month_clamps_to_month_end():
    assert add_one_month(date(2026, 1, 31)) == date(2026, 2, 28)
    assert add_one_month(date(2026, 12, 15)) == date(2027, 1, 15)


def test_filter_views():
    tasks = [
        _task(1, "2026-10-23"),
        _task(2, "2026-10-24"),
        _task(3, "2026-10-29"),
        _task(4, "2026-11-20"),
        _task(5, "2026-10-23", status="done"),
        _task(6),
    ]
    ids = lambda view: [t["id"] for t in filter_tasks(tasks, view, FRIDAY)]  # noqa: E731
    assert ids("today") == [1]
    assert ids("tomorrow") == [2]
    assert ids("next-week") == [1, 2, 3]
    assert ids("this-month") == [1, 2, 3, 4]
    assert ids("done") == [5]
    assert ids("all") == [1, 2, 3, 4, 6]
    assert ids("Today") == [1]


def test_filter_rejects_unknown_view():
    with pytest.raises(ValidationError):
        filter_tasks([], "someday", FRIDAY)


def test_project_progress_counts_only_owned_tasks():
    projects = [{"id": 1, "name": "Home", "status": "In Progress"}, {"id": 2, "name": "Empty", "status": "Upcoming"}]
    tasks = [_task(1, project=1, status="done"), _task(2, project=1), _task(3, project=1), _task(4, project=9)]
    summary = project_progress(projects, tasks)
    assert summary[0] == {"projectId": 1, "name": "Home", "status": "In Progress", "total": 3, "done": 1, "progress": 33}
    assert summary[1]["total"] == 0
    assert summary[1]["progress"] == 0


def test_upcoming_deadlines_keep_list_order_and_limit():
    tasks = [
        _task(1, "2026-10-30"),
        _task(2, "2026-10-23"),  # today is not upcoming
        _task(3, "2026-10-24"),
        _task(4, "2026-10-25", status="done"),
        _task(5, "2026-11-02"),
        _task(6, None),
    ]
    # done tasks still count as deadlines; no re-sorting by date
    assert [t["id"] for t in upcoming_deadlines(tasks, FRIDAY)] == [1, 3, 4, 5]
    assert [t["id"] for t in upcoming_deadlines(tasks, FRIDAY, limit=1)] == [1]
