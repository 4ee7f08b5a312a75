"""Task CRUD endpoints.

The same router is mounted under ``/api/tasks`` and ``/api/tarefas``.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.database import get_session
from app.errors import persistence_errors
from app.models import Task
from app.schemas import Message, TaskCreate, TaskPublic, TaskUpdate
from app.store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter()

TASK_NOT_FOUND = "Task not found"


def get_store(session: Session = Depends(get_session)) -> TaskStore:
    return TaskStore(session)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)


@router.get("", response_model=list[TaskPublic])
def list_tasks(store: TaskStore = Depends(get_store)) -> list[Task]:
    """List all tasks."""
    with persistence_errors("Error fetching tasks."):
        return store.list_all()


@router.post("", response_model=TaskPublic)
def create_task(data: TaskCreate, store: TaskStore = Depends(get_store)) -> Task:
    """Create a new task from English or Portuguese field names."""
    logger.info("CREATE body: %s", data.model_dump())
    with persistence_errors("Error creating task."):
        return store.create(data)


@router.get("/{task_id}", response_model=TaskPublic)
def get_task(task_id: UUID, store: TaskStore = Depends(get_store)) -> Task:
    """Get a specific task by ID."""
    with persistence_errors("Error finding task."):
        task = store.get(task_id)
    if task is None:
        raise _not_found()
    return task


@router.delete("/{task_id}", response_model=Message)
def delete_task(task_id: UUID, store: TaskStore = Depends(get_store)) -> Message:
    """Delete a task."""
    logger.info("DELETE params: task_id=%s", task_id)
    with persistence_errors("Error deleting task."):
        deleted = store.delete(task_id)
    if not deleted:
        raise _not_found()
    return Message(message="Task deleted successfully")


@router.put("/update_priority/{task_id}", response_model=TaskPublic)
def update_priority(
    task_id: UUID, data: TaskUpdate, store: TaskStore = Depends(get_store)
) -> Task:
    """Partially update a task, in practice toggling ``important``."""
    with persistence_errors("Error updating task."):
        task = store.update(task_id, data)
    if task is None:
        raise _not_found()
    return task
