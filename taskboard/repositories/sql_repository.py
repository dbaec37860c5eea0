"""SQL-backed store built on SQLAlchemy sessions."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import delete, func, inspect, literal, select, update
from sqlalchemy.engine import Engine

from taskboard.db.models import ProjectRow, TaskRow
from taskboard.db.session import build_sessionmaker
from taskboard.domain.entities import PROJECT, TASK, EntitySchema

from .base import EntityStore, Record

logger = logging.getLogger(__name__)


class RemoteStore(EntityStore):
    """
    CRUD over one table.

    The table is created (if missing) before every operation; there is no
    separate migration step. Partial updates are a single COALESCE statement so
    null/absent fields keep their stored value.
    """

    backend = "sql"

    def __init__(self, schema: EntitySchema, model, engine: Engine) -> None:
        super().__init__(schema)
        self.model = model
        self.engine = engine
        self._session_factory = build_sessionmaker(engine)
        # column name (wire name) -> mapped attribute
        self._attrs = {prop.columns[0].name: prop.key for prop in inspect(model).column_attrs}

    @classmethod
    def for_tasks(cls, engine: Engine) -> "RemoteStore":
        return cls(TASK, TaskRow, engine)

    @classmethod
    def for_projects(cls, engine: Engine) -> "RemoteStore":
        return cls(PROJECT, ProjectRow, engine)

    def _ensure_schema(self) -> None:
        self.model.__table__.create(bind=self.engine, checkfirst=True)

    def _to_record(self, row) -> Record:
        return {name: getattr(row, attr) for name, attr in self._attrs.items()}

    def _column(self, name: str):
        return self.model.__table__.c[name]

    # -------------------------- contract --------------------------
    def list(self) -> list[Record]:
        with self._session_factory() as session:
            self._ensure_schema()
            stmt = select(self.model).order_by(self.model.created_at.desc(), self.model.id.desc())
            return [self._to_record(row) for row in session.execute(stmt).scalars().all()]

    def _insert(self, record: Record) -> Record:
        entity = self.model(**{self._attrs[name]: value for name, value in record.items()})
        with self._session_factory() as session:
            self._ensure_schema()
            session.add(entity)
            session.commit()
            session.refresh(entity)
            logger.debug("Inserted %s id=%s", self.schema.kind, entity.id)
            return self._to_record(entity)

    def _update(self, entity_id: int, changes: Record) -> Optional[Record]:
        values = {}
        for name in self.schema.fields:
            column = self._column(name)
            values[column] = func.coalesce(literal(changes.get(name), column.type), column)
        with self._session_factory() as session:
            self._ensure_schema()
            stmt = (
                update(self.model)
                .where(self.model.id == entity_id)
                .values(values)
                .execution_options(synchronize_session=False)
            )
            result = session.execute(stmt)
            session.commit()
            if not result.rowcount:
                return None
            row = session.get(self.model, entity_id)
            return self._to_record(row) if row is not None else None

    def delete(self, entity_id: int) -> bool:
        with self._session_factory() as session:
            self._ensure_schema()
            result = session.execute(
                delete(self.model)
                .where(self.model.id == entity_id)
                .execution_options(synchronize_session=False)
            )
            session.commit()
            return bool(result.rowcount)
