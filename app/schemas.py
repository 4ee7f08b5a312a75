"""Pydantic request and response models for the Task Tracker API.

Request bodies accept English field names and their Portuguese aliases
(``titulo``, ``dia``, ``importante``). When both are sent the Portuguese
value is used unless it is falsy, in which case the English one is.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

# canonical name -> Portuguese alias
FIELD_ALIASES = {"title": "titulo", "day": "dia", "important": "importante"}

# Fields that map to NOT NULL columns; an explicit null on update is dropped.
_NON_NULLABLE = ("title", "important")


def merge_aliases(data: Any, *, keep_null: bool) -> Any:
    """Fold ``titulo``/``dia``/``importante`` into their English names.

    The Portuguese value wins when truthy, otherwise the English one is used
    (or the falsy Portuguese value, when no English name was sent).
    A field whose merged value is None is omitted unless ``keep_null`` is set
    and the client sent one of its names.
    """
    if not isinstance(data, dict):
        return data
    merged = {key: value for key, value in data.items() if key not in FIELD_ALIASES.values()}
    for canonical, localized in FIELD_ALIASES.items():
        if canonical not in data and localized not in data:
            continue
        value = data.get(localized) or data.get(canonical, data.get(localized))
        if value is None and not keep_null:
            merged.pop(canonical, None)
        else:
            merged[canonical] = value
    return merged


class TaskCreate(BaseModel):
    """Request body for creating a new task."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="The task title (required, 1-255 characters)",
    )
    day: str | None = Field(
        default=None,
        max_length=255,
        description="When the task is due, free text",
    )
    important: bool = Field(
        default=False,
        description="Whether the task is flagged as important",
    )

    @model_validator(mode="before")
    @classmethod
    def fold_aliases(cls, data: Any) -> Any:
        return merge_aliases(data, keep_null=False)


class TaskUpdate(BaseModel):
    """Request body for a partial task update. Only sent fields are written."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    day: str | None = Field(default=None, max_length=255)
    important: bool | None = None

    @model_validator(mode="before")
    @classmethod
    def fold_aliases(cls, data: Any) -> Any:
        return merge_aliases(data, keep_null=True)

    def changes(self) -> dict[str, Any]:
        """Canonical field -> value for every field the client actually sent."""
        data = self.model_dump(exclude_unset=True)
        for name in _NON_NULLABLE:
            if data.get(name, ...) is None:
                del data[name]
        return data


class TaskPublic(BaseModel):
    """A task as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Unique identifier for the task")
    title: str = Field(..., description="The task title")
    day: str | None = Field(default=None, description="When the task is due")
    important: bool = Field(default=False, description="Whether the task is flagged as important")
    created_at: datetime = Field(
        ..., serialization_alias="createdAt", description="When the task was created"
    )
    updated_at: datetime = Field(
        ..., serialization_alias="updatedAt", description="When the task was last updated"
    )


class Message(BaseModel):
    """Generic message body, used for confirmations and errors."""

    message: str


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = "healthy"
    version: str = "1.0.0"
