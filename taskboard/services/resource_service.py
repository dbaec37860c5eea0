"""CRUD use cases shared by tasks and projects."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from taskboard.domain.errors import NotFoundError
from taskboard.repositories.base import EntityStore, Record

logger = logging.getLogger(__name__)


class ResourceService:
    def __init__(self, store: EntityStore) -> None:
        self.store = store
        self.kind = store.schema.kind

    def list(self) -> list[Record]:
        return self.store.list()

    def create(self, payload: Mapping[str, Any] | None) -> Record:
        record = self.store.create(payload)
        logger.info("Created %s id=%s", self.kind, record.get("id"))
        return record

    def update(self, entity_id: Optional[int], payload: Mapping[str, Any] | None) -> Record:
        record = self.store.update(entity_id, payload) if entity_id is not None else None
        if record is None:
            raise NotFoundError(self.kind, entity_id)
        logger.info("Updated %s id=%s", self.kind, entity_id)
        return record

    def delete(self, entity_id: Optional[int]) -> None:
        if entity_id is None or not self.store.delete(entity_id):
            raise NotFoundError(self.kind, entity_id)
        logger.info("Deleted %s id=%s", self.kind, entity_id)

    def storage_warning(self) -> Optional[str]:
        """Message for the last failed durability write, if the store reported one."""
        result = self.store.last_save
        if result is None or result.ok:
            return None
        return result.message
