"""Task model and related types."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from todo_list.exceptions import InvalidPriorityError


class Priority(Enum):
    """Task priority levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_string(cls, value: str | Priority) -> Priority:
        """Parse priority from string, case-insensitive."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            valid = ", ".join(p.value for p in cls)
            raise InvalidPriorityError(value, valid) from None


@dataclass(frozen=True)
class Task:
    """Immutable task representation.

    Tasks are never changed in place; the store swaps in a new instance
    whenever one of them changes.

    Attributes:
        id: Unique task identifier, assigned by the store.
        title: Task title, never blank.
        description: Free text, may be empty.
        time: Free-form time estimate such as "2 hours", may be empty.
        priority: Task priority level.
        completed: Completion status.
    """

    id: int
    title: str
    description: str = ""
    time: str = ""
    priority: Priority = Priority.MEDIUM
    completed: bool = False

    def toggled(self) -> Task:
        """Return a new Task with toggled completion status."""
        return replace(self, completed=not self.completed)


@dataclass
class Draft:
    """Editable staging record behind the entry form.

    A draft has no identity and no completion flag; it only turns into a
    Task once the store accepts it.
    """

    title: str = ""
    description: str = ""
    time: str = ""
    priority: Priority = Priority.MEDIUM

    @property
    def has_title(self) -> bool:
        return bool(self.title.strip())

    def copy(self) -> Draft:
        return replace(self)


def demo_tasks() -> tuple[Task, ...]:
    """Two sample tasks for a fresh session."""
    return (
        Task(
            id=1,
            title="Learn DSA",
            description="Focus on DP.",
            time="2 hours",
            priority=Priority.HIGH,
            completed=True,
        ),
        Task(
            id=2,
            title="Socrates",
            description="Knowledge is highest virtue.",
            time="3 hours",
            priority=Priority.MEDIUM,
        ),
    )
