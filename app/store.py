"""Database-backed task storage."""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.models import Task, get_datetime_utc
from app.schemas import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskStore:
    """CRUD operations on the Tasks table, bound to one session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Task]:
        """Return all tasks sorted by creation time (oldest first)."""
        statement = select(Task).order_by(Task.created_at)
        return list(self._session.exec(statement).all())

    def get(self, task_id: UUID) -> Task | None:
        """Get a task by its ID, or None if not found."""
        return self._session.get(Task, task_id)

    def create(self, data: TaskCreate) -> Task:
        """Create a new task and return it."""
        now = get_datetime_utc()
        task = Task.model_validate(data.model_dump(), update={"created_at": now, "updated_at": now})
        self._session.add(task)
        self._commit()
        self._session.refresh(task)
        logger.info("Task created id=%s", task.id)
        return task

    def update(self, task_id: UUID, data: TaskUpdate) -> Task | None:
        """Update an existing task. Returns None if not found."""
        task = self._session.get(Task, task_id)
        if task is None:
            return None

        changes = data.changes()
        if changes:
            task.sqlmodel_update(changes, update={"updated_at": get_datetime_utc()})
            self._session.add(task)
            self._commit()
            self._session.refresh(task)
            logger.info("Task updated id=%s fields=%s", task_id, sorted(changes))
        return task

    def delete(self, task_id: UUID) -> bool:
        """Delete a task. Returns True if deleted, False if not found."""
        task = self._session.get(Task, task_id)
        if task is None:
            return False
        self._session.delete(task)
        self._commit()
        logger.info("Task deleted id=%s", task_id)
        return True

    def _commit(self) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise
