"""Exceptions shared by stores, services and routers."""
from __future__ import annotations


class TrackerError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class ValidationError(TrackerError):
    """Raised when a payload field is missing, empty or out of range."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, "invalid", 400)
        self.field = field


class NotFoundError(TrackerError):
    """Raised when an update/delete targets an id the store does not hold."""

    def __init__(self, kind: str, entity_id: int | None):
        super().__init__(f"{kind} {entity_id} not found", "not_found", 404)
        self.entity_id = entity_id
