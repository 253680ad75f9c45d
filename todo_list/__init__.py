"""To-do list - an in-memory task list with a draft entry form."""

from todo_list.draft import DraftForm
from todo_list.exceptions import (
    ConfigurationError,
    InvalidPriorityError,
    TodoListError,
    UnknownFieldError,
)
from todo_list.models import Draft, Priority, Task, demo_tasks
from todo_list.store import TaskStore
from todo_list.utils.logger import configure_logging

__all__ = [
    "Task",
    "Draft",
    "Priority",
    "TaskStore",
    "DraftForm",
    "demo_tasks",
    "TodoListError",
    "ConfigurationError",
    "InvalidPriorityError",
    "UnknownFieldError",
    "configure_logging",
]
