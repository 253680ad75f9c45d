"""Unit tests for the task and draft models."""

from __future__ import annotations

import dataclasses

import pytest

from todo_list import Draft, InvalidPriorityError, Priority, Task, demo_tasks


class TestPriority:
    """Tests for Priority parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("high", Priority.HIGH),
            ("MEDIUM", Priority.MEDIUM),
            ("  Low ", Priority.LOW),
        ],
    )
    def test_from_string(self, text, expected):
        """Parsing ignores case and surrounding spaces."""
        assert Priority.from_string(text) is expected

    def test_from_string_passes_priority_through(self):
        """A Priority member is returned unchanged."""
        assert Priority.from_string(Priority.HIGH) is Priority.HIGH

    def test_from_string_rejects_unknown(self):
        """Unknown names raise InvalidPriorityError, which is a ValueError."""
        with pytest.raises(InvalidPriorityError) as exc_info:
            Priority.from_string("urgent")
        assert isinstance(exc_info.value, ValueError)
        assert "urgent" in str(exc_info.value)
        assert "high, medium, low" in str(exc_info.value)


class TestTask:
    """Tests for the immutable Task record."""

    def test_defaults(self):
        """A new task is not completed and has medium priority."""
        task = Task(id=1, title="Write report")
        assert task.completed is False
        assert task.priority is Priority.MEDIUM
        assert task.description == ""
        assert task.time == ""

    def test_is_frozen(self):
        """Fields cannot be assigned after creation."""
        task = Task(id=1, title="Write report")
        with pytest.raises(dataclasses.FrozenInstanceError):
            task.completed = True  # type: ignore[misc]

    def test_toggled_returns_new_task(self):
        """toggled() flips completion on a copy and leaves the original."""
        task = Task(id=7, title="Write report", time="1h", priority=Priority.LOW)
        flipped = task.toggled()

        assert flipped is not task
        assert flipped.completed is True
        assert task.completed is False
        assert dataclasses.replace(flipped, completed=False) == task


class TestDraft:
    """Tests for the Draft staging record."""

    def test_defaults(self):
        draft = Draft()
        assert (draft.title, draft.description, draft.time) == ("", "", "")
        assert draft.priority is Priority.MEDIUM

    @pytest.mark.parametrize("title, expected", [("", False), ("   ", False), (" x ", True)])
    def test_has_title(self, title, expected):
        """Only a title with visible characters counts."""
        assert Draft(title=title).has_title is expected

    def test_copy_is_independent(self):
        draft = Draft(title="a")
        copy = draft.copy()
        copy.title = "b"
        assert draft.title == "a"


def test_demo_tasks():
    """Sample data: one completed high task, one open medium task."""
    first, second = demo_tasks()
    assert (first.title, first.priority, first.completed) == ("Learn DSA", Priority.HIGH, True)
    assert (second.title, second.priority, second.completed) == (
        "Socrates",
        Priority.MEDIUM,
        False,
    )
    assert first.id != second.id
