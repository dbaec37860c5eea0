"""Helpers shared by the resource routers."""
from __future__ import annotations

from typing import Any, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from taskboard.domain.errors import NotFoundError, TrackerError, ValidationError
from taskboard.services.resource_service import ResourceService

STORAGE_WARNING_HEADER = "X-Storage-Warning"


def get_service(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if not svc:
        raise RuntimeError(f"{name} is not configured")
    return svc


def parse_id(raw: Optional[str]) -> int:
    try:
        return int((raw or "").strip())
    except ValueError:
        raise TrackerError("query parameter 'id' must be an integer", "missing_id", 400) from None


def error_response(err: TrackerError) -> Response:
    if isinstance(err, NotFoundError):
        return Response(status_code=404)
    body = {"ok": False, "error": err.code, "message": err.message}
    if isinstance(err, ValidationError) and err.field:
        body["field"] = err.field
    return JSONResponse(body, status_code=err.status_code)


def respond(svc: ResourceService, content: Any = None, status_code: int = 200) -> Response:
    """Response for a mutation, flagged when the store could not persist it."""
    if status_code == 204:
        response: Response = Response(status_code=204)
    else:
        response = JSONResponse(content, status_code=status_code)
    warning = svc.storage_warning()
    if warning:
        response.headers[STORAGE_WARNING_HEADER] = warning
    return response
