"""SQLAlchemy models mirroring the JSON snapshot records.

Column names keep the camelCase wire names so rows serialise without renaming.
"""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text, func

from .session import Base


class TaskRow(Base):
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, default="")
    status = Column(Text, default="todo", server_default="todo")
    priority = Column(Text, default="medium", server_default="medium")
    due_date = Column("dueDate", Text, nullable=True)
    project_id = Column("projectId", Integer, nullable=True)
    created_at = Column("createdAt", Text, server_default=func.now(), nullable=False)


class ProjectRow(Base):
    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, default="")
    status = Column(Text, default="Upcoming", server_default="Upcoming")
    created_at = Column("createdAt", Text, server_default=func.now(), nullable=False)
