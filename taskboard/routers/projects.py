from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from taskboard.domain.errors import TrackerError
from taskboard.services.project_service import ProjectService

from .common import error_response, get_service, parse_id, respond

router = APIRouter(prefix="/api/projects", tags=["projects"])


def _service(request: Request) -> ProjectService:
    return get_service(request, "project_service")


@router.get("")
def list_projects(request: Request):
    return _service(request).list()


@router.post("")
def create_project(request: Request, payload: Optional[dict] = Body(None)):
    svc = _service(request)
    try:
        project = svc.create(payload)
    except TrackerError as exc:
        return error_response(exc)
    return respond(svc, project, 201)


@router.patch("")
def update_project(request: Request, id: Optional[str] = None, payload: Optional[dict] = Body(None)):
    svc = _service(request)
    try:
        project = svc.update(parse_id(id), payload)
    except TrackerError as exc:
        return error_response(exc)
    return respond(svc, project)


@router.delete("")
def delete_project(request: Request, id: Optional[str] = None):
    svc = _service(request)
    try:
        svc.delete(parse_id(id))
    except TrackerError as exc:
        return error_response(exc)
    return respond(svc, status_code=204)
