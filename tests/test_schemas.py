"""Tests for request field aliasing."""

import pytest
from pydantic import ValidationError

from app.schemas import TaskCreate, TaskUpdate


@pytest.mark.parametrize(
    "body",
    [
        {"title": "Read", "day": "Today", "important": True},
        {"titulo": "Read", "dia": "Today", "importante": True},
        {"titulo": "Read", "day": "Today", "importante": True},
    ],
)
def test_create_accepts_both_languages(body: dict) -> None:
    """Test that either language produces the same canonical fields."""
    task = TaskCreate.model_validate(body)
    assert task.model_dump() == {"title": "Read", "day": "Today", "important": True}


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ({"titulo": "Tarefa", "title": "Task"}, {"title": "Tarefa", "day": None, "important": False}),
        ({"titulo": "", "title": "Real"}, {"title": "Real", "day": None, "important": False}),
        ({"titulo": None, "title": "Real"}, {"title": "Real", "day": None, "important": False}),
        (
            {"title": "x", "importante": False, "important": True},
            {"title": "x", "day": None, "important": True},
        ),
        ({"title": "x", "importante": False}, {"title": "x", "day": None, "important": False}),
    ],
)
def test_create_merges_names_like_or(body: dict, expected: dict) -> None:
    """Test that a truthy Portuguese value wins and a falsy one falls back."""
    assert TaskCreate.model_validate(body).model_dump() == expected


def test_create_defaults() -> None:
    """Test the optional field defaults."""
    task = TaskCreate.model_validate({"title": "Read"})
    assert task.day is None
    assert task.important is False


def test_create_ignores_unknown_keys() -> None:
    """Test that extra keys, including server-managed ones, are dropped."""
    task = TaskCreate.model_validate({"title": "Read", "createdAt": "yesterday", "color": "red"})
    assert task.model_dump() == {"title": "Read", "day": None, "important": False}


def test_create_requires_title() -> None:
    """Test that a body without any title is invalid."""
    with pytest.raises(ValidationError):
        TaskCreate.model_validate({"dia": "Today"})


def test_update_changes_only_include_sent_fields() -> None:
    """Test that unsent fields are not part of the update."""
    assert TaskUpdate.model_validate({"importante": True}).changes() == {"important": True}
    assert TaskUpdate.model_validate({"importante": False}).changes() == {"important": False}
    assert TaskUpdate.model_validate({}).changes() == {}


def test_update_drops_null_for_required_columns() -> None:
    """Test that nulls are only kept for the nullable day column."""
    update = TaskUpdate.model_validate({"title": None, "important": None, "day": None})
    assert update.changes() == {"day": None}
