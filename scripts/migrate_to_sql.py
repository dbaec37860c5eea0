"""One-off migration script: local JSON snapshots (.dev-*.json) -> SQL database.

Uso:
  DATABASE_URL=postgresql+psycopg://... python scripts/migrate_to_sql.py [--data-dir DIR]

Ids and createdAt values are preserved (createdAt rewritten in UTC as
"YYYY-MM-DD HH:MM:SS"), so task.projectId references keep
pointing at the same projects. Re-running the script overwrites rows by id.
"""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

# Garantir que o pacote taskboard seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import inspect, text  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402

from taskboard.core.config import get_settings  # noqa: E402
from taskboard.core.logging_setup import setup_logging  # noqa: E402
from taskboard.db.models import ProjectRow, TaskRow  # noqa: E402
from taskboard.db.session import Base, build_engine, build_sessionmaker  # noqa: E402
from taskboard.domain.entities import PROJECT, TASK, EntitySchema  # noqa: E402
from taskboard.repositories.factory import PROJECTS_FILE, TASKS_FILE  # noqa: E402
from taskboard.repositories.json_storage import LocalStore  # noqa: E402

logger = logging.getLogger("taskboard.migrate")

# text SQLite stores for the server-side now() default (CURRENT_TIMESTAMP)
SQL_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _load_records(schema: EntitySchema, path: Path) -> list[dict]:
    store = LocalStore(schema, path)
    if not store.load_result.ok:
        raise SystemExit(f"Nao foi possivel ler {path}: {store.load_result.message}")
    # oldest first, so ids are inserted in creation order
    return list(reversed(store.list()))


def _row_values(schema: EntitySchema, record: dict) -> dict | None:
    required = record.get(schema.required)
    if not isinstance(required, str) or not required.strip():
        return None
    values = {name: record.get(name) for name in schema.fields}
    for name, default in schema.defaults.items():
        if values.get(name) is None:
            values[name] = default
    return values


def _normalise_timestamp(value: str) -> str:
    """ISO-8601 from the JSON files -> the UTC text SQL defaults produce."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.strftime(SQL_TIMESTAMP_FORMAT)


def _reset_sequence(engine: Engine, table: str) -> None:
    if engine.dialect.name != "postgresql":
        return
    with engine.begin() as conn:
        conn.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"COALESCE((SELECT MAX(id) FROM {table}), 0) + 1, false)"
            )
        )


def migrate(data_dir: Path, engine: Engine) -> dict[str, int]:
    """Copy both snapshots into the database; returns migrated row counts."""
    Base.metadata.create_all(bind=engine, tables=[TaskRow.__table__, ProjectRow.__table__])
    Session = build_sessionmaker(engine)
    counts = {}
    with Session() as session:
        for schema, model, filename in (
            (PROJECT, ProjectRow, PROJECTS_FILE),
            (TASK, TaskRow, TASKS_FILE),
        ):
            migrated = 0
            for record in _load_records(schema, data_dir / filename):
                values = _row_values(schema, record)
                if values is None:
                    logger.warning("Skipping %s id=%s without %s", schema.kind, record.get("id"), schema.required)
                    continue
                values["id"] = record.get("id")
                if record.get("createdAt"):
                    values["createdAt"] = _normalise_timestamp(record["createdAt"])
                session.merge(_to_row(model, values))
                migrated += 1
            counts[model.__tablename__] = migrated
        session.commit()
    for table in counts:
        _reset_sequence(engine, table)
    return counts


def _to_row(model, values: dict):
    attrs = {prop.columns[0].name: prop.key for prop in inspect(model).column_attrs}
    return model(**{attrs[name]: value for name, value in values.items() if name in attrs})


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copiar .dev-tasks.json/.dev-projects.json para o banco SQL")
    ap.add_argument("--data-dir", default=str(settings.data_dir), help="Pasta com os arquivos JSON")
    args = ap.parse_args()

    setup_logging(settings.log_level)
    if not settings.database_url:
        raise SystemExit("DATABASE_URL nao configurada")
    engine = build_engine(settings.database_url)
    counts = migrate(Path(args.data_dir), engine)
    print("OK: dados migrados")
    for table, total in counts.items():
        print(f"  {table}: {total}")


if __name__ == "__main__":
    main()
