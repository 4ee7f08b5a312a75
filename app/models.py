"""SQLModel table models for the Task Tracker API."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def get_datetime_utc() -> datetime:
    return datetime.now(UTC)


# Shared columns
class TaskBase(SQLModel):
    title: str = Field(max_length=255)
    day: str | None = Field(default=None, max_length=255)
    important: bool = False


# Database model, one row per task
class Task(TaskBase, table=True):
    __tablename__ = "Tasks"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
    updated_at: datetime = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
