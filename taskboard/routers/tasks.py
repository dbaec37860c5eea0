from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Query, Request

from taskboard.domain.errors import TrackerError
from taskboard.services.task_service import TaskService

from .common import error_response, get_service, parse_id, respond

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def _service(request: Request) -> TaskService:
    return get_service(request, "task_service")


@router.get("")
def list_tasks(
    request: Request,
    view: Optional[str] = None,
    project_id: Optional[int] = Query(None, alias="projectId"),
):
    svc = _service(request)
    try:
        tasks = svc.list(view=view, project_id=project_id)
    except TrackerError as exc:
        return error_response(exc)
    return tasks


@router.post("")
def create_task(request: Request, payload: Optional[dict] = Body(None)):
    svc = _service(request)
    try:
        task = svc.create(payload)
    except TrackerError as exc:
        return error_response(exc)
    return respond(svc, task, 201)


@router.patch("")
def update_task(request: Request, id: Optional[str] = None, payload: Optional[dict] = Body(None)):
    svc = _service(request)
    try:
        task = svc.update(parse_id(id), payload)
    except TrackerError as exc:
        return error_response(exc)
    return respond(svc, task)


@router.delete("")
def delete_task(request: Request, id: Optional[str] = None):
    svc = _service(request)
    try:
        svc.delete(parse_id(id))
    except TrackerError as exc:
        return error_response(exc)
    return respond(svc, status_code=204)


@router.post("/postpone")
def postpone_task(request: Request, id: Optional[str] = None):
    svc = _service(request)
    try:
        task = svc.postpone(parse_id(id))
    except TrackerError as exc:
        return error_response(exc)
    return respond(svc, task)
