"""
Behaviour every storage backend must share, run against LocalStore and a
temporary SQLite RemoteStore.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote taskboard seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from taskboard.db.session import build_engine  # noqa: E402
from taskboard.domain.entities import PROJECT, TASK  # noqa: E402
from taskboard.domain.errors import ValidationError  # noqa: E402
from taskboard.repositories.json_storage import LocalStore  # noqa: E402
from taskboard.repositories.sql_repository import RemoteStore  # noqa: E402


@pytest.fixture(params=["local", "sql"])
def stores(request, tmp_path):
    """(task_store, project_store) for one backend."""
    if request.param == "local":
        yield LocalStore(TASK, tmp_path / "tasks.json"), LocalStore(PROJECT, tmp_path / "projects.json")
        return
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    yield RemoteStore.for_tasks(engine), RemoteStore.for_projects(engine)
    engine.dispose()


def test_create_assigns_increasing_ids_and_created_at(stores):
    tasks, _ = stores
    ids = []
    for title in ("a", "b", "c"):
        task = tasks.create({"title": title})
        assert task["createdAt"]
        ids.append(task["id"])
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_list_is_newest_first(stores):
    tasks, _ = stores
    for title in ("A", "B", "C"):
        tasks.create({"title": title})
    assert [t["title"] for t in tasks.list()] == ["C", "B", "A"]


def test_create_returns_defaults(stores):
    tasks, projects = stores
    task = tasks.create({"title": "Buy milk", "priority": "low"})
    assert task["status"] == "todo"
    assert task["priority"] == "low"
    assert task["description"] == ""
    assert task["dueDate"] is None
    project = projects.create({"name": "Home"})
    assert project["status"] == "Upcoming"
    assert project["description"] == ""


def test_update_merges_only_supplied_fields(stores):
    tasks, _ = stores
    created = tasks.create({"title": "Write report", "description": "Q3", "dueDate": "2026-10-30", "projectId": 4})
    updated = tasks.update(created["id"], {"priority": "high", "title": None})
    assert updated["priority"] == "high"
    for key in ("id", "title", "description", "status", "dueDate", "projectId", "createdAt"):
        assert updated[key] == created[key]


def test_update_unknown_id_returns_none(stores):
    tasks, _ = stores
    assert tasks.update(404, {"status": "done"}) is None


def test_delete_unknown_id_is_false_every_time(stores):
    tasks, _ = stores
    assert tasks.delete(12345) is False
    assert tasks.delete(12345) is False


def test_delete_removes_record(stores):
    tasks, _ = stores
    task = tasks.create({"title": "x"})
    assert tasks.delete(task["id"]) is True
    assert tasks.list() == []
    assert tasks.delete(task["id"]) is False


def test_ids_are_not_reused_after_delete(stores):
    tasks, _ = stores
    first = tasks.create({"title": "x"})
    tasks.delete(first["id"])
    second = tasks.create({"title": "y"})
    assert second["id"] > first["id"]


def test_deleting_project_leaves_referencing_task(stores):
    tasks, projects = stores
    project = projects.create({"name": "Garden"})
    task = tasks.create({"title": "Plant tulips", "projectId": project["id"]})
    assert projects.delete(project["id"]) is True
    assert tasks.list() == [task]


def test_store_rejects_empty_required_field(stores):
    tasks, projects = stores
    with pytest.raises(ValidationError):
        tasks.create({"title": ""})
    with pytest.raises(ValidationError):
        projects.create({"description": "no name"})
    assert tasks.list() == []
