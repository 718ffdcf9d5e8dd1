"""
Task persistence for Postgres and an in-memory test implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Protocol

from sqlalchemy import (
    Boolean,
    Column,
    String,
    Text,
    create_engine,
    delete,
    select,
    update,
)
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

EDITABLE_FIELDS = ("title", "description", "color", "favorite")


class TaskStore(Protocol):
    """Interface for task storage. Every call is scoped to one owner."""

    def list_tasks(
        self, user_id: str, search: Optional[str] = None
    ) -> list["TaskRecord"]:
        ...

    def create_task(self, record: "TaskRecord") -> "TaskRecord":
        ...

    def get_task(self, task_id: str, user_id: str) -> Optional["TaskRecord"]:
        ...

    def update_task(self, task_id: str, user_id: str, changes: dict) -> bool:
        ...

    def delete_task(self, task_id: str, user_id: str) -> bool:
        ...


@dataclass
class TaskRecord:
    id: str
    user_id: str
    title: str
    description: str
    color: str
    favorite: bool = False

    def as_dict(self) -> dict:
        """Public representation; the owner is never exposed."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "color": self.color,
            "favorite": self.favorite,
        }


def _editable(changes: dict) -> dict:
    unknown = set(changes) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValueError(f"Fields not editable: {sorted(unknown)}")
    return dict(changes)


class InMemoryTaskStore:
    """Simple in-memory task store for development and tests."""

    def __init__(self):
        self.tasks: Dict[str, TaskRecord] = {}

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.tasks.clear()

    def list_tasks(
        self, user_id: str, search: Optional[str] = None
    ) -> list[TaskRecord]:
        needle = search.lower() if search else None
        items = [
            replace(task)
            for task in self.tasks.values()
            if task.user_id == user_id
            and (needle is None or needle in task.title.lower())
        ]
        items.sort(key=lambda task: task.id, reverse=True)
        return items

    def create_task(self, record: TaskRecord) -> TaskRecord:
        if record.id in self.tasks:
            raise ValueError(f"Task {record.id} already exists")
        self.tasks[record.id] = replace(record)
        return replace(record)

    def get_task(self, task_id: str, user_id: str) -> Optional[TaskRecord]:
        task = self.tasks.get(task_id)
        if not task or task.user_id != user_id:
            return None
        return replace(task)

    def update_task(self, task_id: str, user_id: str, changes: dict) -> bool:
        values = _editable(changes)
        task = self.tasks.get(task_id)
        if not task or task.user_id != user_id:
            return False
        self.tasks[task_id] = replace(task, **values)
        return True

    def delete_task(self, task_id: str, user_id: str) -> bool:
        task = self.tasks.get(task_id)
        if not task or task.user_id != user_id:
            return False
        del self.tasks[task_id]
        return True


def _escape_like(value: str) -> str:
    return (
        value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )


class SqlTaskStore:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlTaskStore")
        engine_kwargs: dict = {"future": True, "pool_pre_ping": True}
        if database_url.startswith("sqlite") and ":memory:" in database_url:
            # One shared connection, otherwise each thread sees an empty database.
            engine_kwargs.update(
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            engine_kwargs["pool_recycle"] = 1800
        self.engine = create_engine(database_url, **engine_kwargs)
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    def _to_task_record(self, row: "TaskRow") -> TaskRecord:
        return TaskRecord(
            id=row.id,
            user_id=row.user_id,
            title=row.title,
            description=row.description,
            color=row.color,
            favorite=row.favorite,
        )

    def list_tasks(
        self, user_id: str, search: Optional[str] = None
    ) -> list[TaskRecord]:
        stmt = select(TaskRow).where(TaskRow.user_id == user_id)
        if search:
            stmt = stmt.where(
                TaskRow.title.ilike(f"%{_escape_like(search)}%", escape="\\")
            )
        stmt = stmt.order_by(TaskRow.id.desc())
        with self.Session() as session:
            rows = session.execute(stmt).scalars().all()
            return [self._to_task_record(row) for row in rows]

    def create_task(self, record: TaskRecord) -> TaskRecord:
        with self.Session() as session:
            row = TaskRow(
                id=record.id,
                user_id=record.user_id,
                title=record.title,
                description=record.description,
                color=record.color,
                favorite=record.favorite,
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_task_record(row)

    def get_task(self, task_id: str, user_id: str) -> Optional[TaskRecord]:
        stmt = select(TaskRow).where(
            TaskRow.id == task_id, TaskRow.user_id == user_id
        )
        with self.Session() as session:
            row = session.execute(stmt).scalar_one_or_none()
            if not row:
                return None
            return self._to_task_record(row)

    def update_task(self, task_id: str, user_id: str, changes: dict) -> bool:
        values = _editable(changes)
        if not values:
            return self.get_task(task_id, user_id) is not None
        stmt = (
            update(TaskRow)
            .where(TaskRow.id == task_id, TaskRow.user_id == user_id)
            .values(**values)
        )
        with self.Session() as session:
            result = session.execute(stmt)
            session.commit()
            return (result.rowcount or 0) > 0

    def delete_task(self, task_id: str, user_id: str) -> bool:
        stmt = delete(TaskRow).where(
            TaskRow.id == task_id, TaskRow.user_id == user_id
        )
        with self.Session() as session:
            result = session.execute(stmt)
            session.commit()
            return (result.rowcount or 0) > 0


Base = declarative_base()


class TaskRow(Base):
    __tablename__ = "tasks"

    id = Column(String(26), primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    color = Column(String, nullable=False)
    favorite = Column(Boolean, nullable=False, default=False)
