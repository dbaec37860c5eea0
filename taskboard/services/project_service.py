"""Project use cases."""
from __future__ import annotations

from .resource_service import ResourceService


class ProjectService(ResourceService):
    """Plain CRUD; deleting a project leaves tasks that reference it untouched."""
