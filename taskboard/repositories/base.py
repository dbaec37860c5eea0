"""Storage contract shared by the local and SQL backends."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from taskboard.domain.entities import EntitySchema

Record = dict[str, Any]


@dataclass(frozen=True)
class StorageResult:
    """Outcome of a snapshot load/save; failures are recoverable, not raised."""

    ok: bool
    path: Optional[Path] = None
    error: Optional[BaseException] = None

    @property
    def message(self) -> str:
        if self.ok:
            return "ok"
        return f"{type(self.error).__name__}: {self.error}"


class EntityStore(ABC):
    """
    CRUD over one entity kind.

    ``create``/``update`` normalise their payload through the EntitySchema before
    reaching the backend, so both backends reject the same invalid input.
    """

    backend = "abstract"

    def __init__(self, schema: EntitySchema) -> None:
        self.schema = schema
        self.last_save: Optional[StorageResult] = None

    def create(self, fields: Mapping[str, Any] | None) -> Record:
        return self._insert(self.schema.prepare_create(fields))

    def update(self, entity_id: int, fields: Mapping[str, Any] | None) -> Optional[Record]:
        return self._update(entity_id, self.schema.prepare_update(fields))

    @abstractmethod
    def list(self) -> list[Record]:
        """All records, newest-created first."""

    @abstractmethod
    def delete(self, entity_id: int) -> bool:
        """Remove a record; False when the id is unknown."""

    @abstractmethod
    def _insert(self, record: Record) -> Record:
        ...

    @abstractmethod
    def _update(self, entity_id: int, changes: Record) -> Optional[Record]:
        ...
