"""Draft-entry form state."""

from __future__ import annotations

import logging

from todo_list.exceptions import UnknownFieldError
from todo_list.models import Draft, Priority, Task
from todo_list.store import TaskStore

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("title", "description", "time")


class DraftForm:
    """Accumulates field edits until the draft is committed as a task.

    When a commit is rejected because the title is blank, the draft is kept
    as it is so that whatever was typed into the other fields survives.
    """

    def __init__(self) -> None:
        self._draft = Draft()

    def current_values(self) -> Draft:
        """Return a copy of the draft as it stands."""
        return self._draft.copy()

    def set_field(self, name: str, value: str) -> None:
        """Overwrite one text field.

        Raises:
            UnknownFieldError: If name is not title, description or time.

        """
        if name not in TEXT_FIELDS:
            raise UnknownFieldError(name, ", ".join(TEXT_FIELDS))
        setattr(self._draft, name, value)

    def set_priority(self, priority: Priority | str) -> None:
        """Overwrite the priority, given as a Priority or its name."""
        self._draft.priority = Priority.from_string(priority)

    def reset(self) -> None:
        self._draft = Draft()

    def commit(self, store: TaskStore) -> Task | None:
        """Hand the draft to the store as a new task.

        Returns:
            The new task, or None if the store rejected the draft. The
            draft is reset only on success.

        """
        before = store.snapshot()
        after = store.add(self._draft.copy())
        if after is before:
            logger.debug("Commit rejected, keeping draft")
            return None

        self.reset()
        return after[-1]
