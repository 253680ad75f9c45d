"""In-memory task collection."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable, Iterator

from todo_list.models import Draft, Priority, Task

logger = logging.getLogger(__name__)

Snapshot = tuple[Task, ...]
Listener = Callable[[Snapshot], None]


class TaskStore:
    """Sole owner of the ordered task collection.

    Every change builds a new tuple and swaps it in, so a snapshot handed
    out earlier keeps describing the collection as it was. Invalid requests
    (blank title, unknown id) leave the collection untouched and return the
    current snapshot without raising.
    """

    def __init__(self, initial: Iterable[Task] = ()) -> None:
        """Initialize the store, optionally seeded with existing tasks."""
        tasks: list[Task] = []
        seen: set[int] = set()
        for task in initial:
            if not task.title.strip():
                logger.warning("Skipping seeded task %d with empty title", task.id)
                continue
            if task.id in seen:
                logger.warning("Skipping seeded task with duplicate id %d", task.id)
                continue
            seen.add(task.id)
            tasks.append(task)

        self._tasks: Snapshot = tuple(tasks)
        self._ids = itertools.count(max(seen, default=0) + 1)
        self._listeners: list[Listener] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def snapshot(self) -> Snapshot:
        """Return the current ordered collection."""
        return self._tasks

    def get(self, task_id: int) -> Task | None:
        """Get a task by ID, or None if absent."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, candidate: Draft) -> Snapshot:
        """Append a new task built from the candidate draft.

        A blank or whitespace-only title is ignored.

        Args:
            candidate: Field values for the new task.

        Returns:
            The snapshot after the call. It is the very same object as
            before when the candidate was rejected.

        Raises:
            InvalidPriorityError: If the priority is not a known level.

        """
        if not candidate.has_title:
            logger.debug("Ignoring task with empty title")
            return self._tasks

        priority = Priority.from_string(candidate.priority)
        task = Task(
            id=next(self._ids),
            title=candidate.title,
            description=candidate.description,
            time=candidate.time,
            priority=priority,
            completed=False,
        )
        logger.debug("Added task #%d: %s", task.id, task.title)
        return self._replace((*self._tasks, task))

    def toggle(self, task_id: int) -> Snapshot:
        """Flip the completion status of a task, keeping its position."""
        if self.get(task_id) is None:
            logger.debug("Toggle ignored, no task with id %s", task_id)
            return self._tasks

        logger.debug("Toggled task #%d", task_id)
        return self._replace(
            tuple(task.toggled() if task.id == task_id else task for task in self._tasks)
        )

    def delete(self, task_id: int) -> Snapshot:
        """Remove a task, keeping the order of the rest."""
        remaining = tuple(task for task in self._tasks if task.id != task_id)
        if len(remaining) == len(self._tasks):
            logger.debug("Delete ignored, no task with id %s", task_id)
            return self._tasks

        logger.debug("Deleted task #%d", task_id)
        return self._replace(remaining)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run with each new snapshot.

        Listeners are not called for requests that changed nothing. An
        exception raised by a listener is logged and does not undo the
        change or stop the other listeners.

        Returns:
            A function that removes the listener again.

        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _replace(self, tasks: Snapshot) -> Snapshot:
        self._tasks = tasks
        for listener in list(self._listeners):
            try:
                listener(tasks)
            except Exception:
                logger.exception("Snapshot listener %r failed", listener)
        return tasks
