"""Display formatting for tasks and the draft."""

from collections.abc import Sequence

from tabulate import tabulate

from todo_list.models import Draft, Priority, Task

PRIORITY_MARKERS = {
    Priority.HIGH: "●●●",
    Priority.MEDIUM: "●●",
    Priority.LOW: "●",
}


def format_tasks_table(tasks: Sequence[Task], tablefmt: str = "simple") -> str:
    """Format tasks as a table string."""
    if not tasks:
        return "No tasks yet."

    headers = ["ID", "Done", "Title", "Description", "Time", "Priority"]
    rows = [
        [
            task.id,
            "✓" if task.completed else "",
            _truncate(task.title, 30),
            _truncate(task.description, 40),
            task.time,
            f"{PRIORITY_MARKERS[task.priority]} {task.priority.value}",
        ]
        for task in tasks
    ]
    return tabulate(rows, headers=headers, tablefmt=tablefmt)


def format_draft(draft: Draft) -> str:
    """Format the draft form with its current values."""
    return f"""
Draft
{"─" * 40}
Title:       {draft.title or "(empty)"}
Description: {draft.description or "(empty)"}
Time:        {draft.time or "(empty)"}
Priority:    {draft.priority.value}
""".strip()


def format_summary(tasks: Sequence[Task]) -> str:
    """Format a one-line count of tasks and completed tasks."""
    done = sum(1 for task in tasks if task.completed)
    noun = "task" if len(tasks) == 1 else "tasks"
    return f"{len(tasks)} {noun}, {done} completed"


def _truncate(text: str, max_len: int) -> str:
    """Truncate text with ellipsis if too long."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"
