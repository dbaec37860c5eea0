"""
File-backed in-memory store.

Records live in an ordered list (insertion order) and every mutation rewrites
the whole snapshot file: ``{"data": [...], "nextId": n, "lastUpdated": iso}``.
A missing file starts an empty store; an unreadable or corrupt file also starts
empty; the failure is logged here and kept on ``load_result``.
"""

from __future__ import annotations

import copy
import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from taskboard.domain.entities import EntitySchema

from .base import EntityStore, Record, StorageResult

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class LocalStore(EntityStore):
    backend = "local"

    def __init__(self, schema: EntitySchema, path: str | Path) -> None:
        super().__init__(schema)
        self.path = Path(path)
        self._data: list[Record] = []
        self._next_id = 1
        self._lock = threading.Lock()
        self.load_result = self._load()

    @property
    def next_id(self) -> int:
        return self._next_id

    # -------------------------- snapshot --------------------------
    def _load(self) -> StorageResult:
        if not self.path.exists():
            return StorageResult(ok=True, path=self.path)
        try:
            with self.path.open("r", encoding="utf-8") as f:
                parsed = json.load(f)
            data = parsed.get("data") or []
            if not isinstance(data, list):
                raise ValueError("'data' must be a list")
            next_id = int(parsed.get("nextId") or 1)
            records = [dict(item) for item in data if isinstance(item, dict)]
            highest = max((int(item.get("id") or 0) for item in records), default=0)
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("No usable %s data in %s, starting fresh (%s)", self.schema.kind, self.path, exc)
            self._data = []
            self._next_id = 1
            return StorageResult(ok=False, path=self.path, error=exc)

        self._data = records
        self._next_id = max(next_id, highest + 1)
        logger.info("Loaded %d %s record(s) from %s", len(self._data), self.schema.kind, self.path)
        return StorageResult(ok=True, path=self.path)

    def _save(self) -> StorageResult:
        snapshot = {
            "data": self._data,
            "nextId": self._next_id,
            "lastUpdated": _now_iso(),
        }
        try:
            self.path.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
            result = StorageResult(ok=True, path=self.path)
        except OSError as exc:
            logger.error("Failed to save %s data to %s: %s", self.schema.kind, self.path, exc)
            result = StorageResult(ok=False, path=self.path, error=exc)
        self.last_save = result
        return result

    def _index_of(self, entity_id: int) -> int:
        for index, item in enumerate(self._data):
            if item.get("id") == entity_id:
                return index
        return -1

    # -------------------------- contract --------------------------
    def list(self) -> list[Record]:
        with self._lock:
            return [copy.deepcopy(item) for item in reversed(self._data)]

    def _insert(self, record: Record) -> Record:
        with self._lock:
            entity = {"id": self._next_id, **record, "createdAt": _now_iso()}
            self._next_id += 1
            self._data.append(entity)
            self._save()
            return copy.deepcopy(entity)

    def _update(self, entity_id: int, changes: Record) -> Optional[Record]:
        with self._lock:
            index = self._index_of(entity_id)
            if index == -1:
                return None
            self._data[index].update(changes)
            self._save()
            return copy.deepcopy(self._data[index])

    def delete(self, entity_id: int) -> bool:
        with self._lock:
            index = self._index_of(entity_id)
            if index == -1:
                return False
            del self._data[index]
            self._save()
            return True
