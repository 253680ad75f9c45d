"""Interactive command-line interface for the to-do list.

The CLI is the presentation layer: it feeds typed commands into the draft
form and the task store and redraws the task table whenever the store
publishes a new snapshot.
"""

from __future__ import annotations

import argparse
import logging
import shlex
from collections.abc import Sequence
from typing import Optional

from todo_list.config import AppConfig
from todo_list.display import format_draft, format_summary, format_tasks_table
from todo_list.draft import DraftForm
from todo_list.exceptions import TodoListError
from todo_list.models import demo_tasks
from todo_list.store import Snapshot, TaskStore
from todo_list.utils.logger import configure_logging

logger = logging.getLogger(__name__)

HELP_TEXT = """
Commands
  title <text>        Set the draft title
  desc <text>         Set the draft description
  time <text>         Set the draft time estimate
  priority <level>    Set the draft priority (high, medium, low)
  add                 Commit the draft as a new task
  toggle <id>         Mark a task done / not done
  delete <id>         Remove a task
  list                Show all tasks
  draft               Show the draft
  clear               Reset the draft
  help                Show this help
  quit                Leave
""".strip()

FIELD_COMMANDS = {
    "title": "title",
    "desc": "description",
    "description": "description",
    "time": "time",
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="todo-list",
        description="An in-memory to-do list with a draft entry form.",
    )
    parser.add_argument(
        "--no-seed", action="store_true", help="Start with an empty task list"
    )
    parser.add_argument(
        "--log-level", choices=AppConfig.LOG_LEVELS, type=str.upper,
        help="Logging level (default: TODO_LIST_LOG_LEVEL or WARNING)"
    )
    parser.add_argument("--table-format", help="tabulate table format (default: simple)")
    return parser


class CLI:
    """Command-line interface handler."""

    def __init__(
        self,
        store: TaskStore,
        form: Optional[DraftForm] = None,
        table_format: str = AppConfig.DEFAULT_TABLE_FORMAT,
    ) -> None:
        """Initialize CLI with a task store and a draft form."""
        self._store = store
        self._form = form or DraftForm()
        self._table_format = table_format
        self._unsubscribe = store.subscribe(self._render)

    def run(self) -> int:
        """Read and execute commands until quit or end of input."""
        self._render(self._store.snapshot())
        try:
            while True:
                line = input("\n> ")
                if not self.execute(line):
                    break
        except (KeyboardInterrupt, EOFError):
            print()
        finally:
            self._unsubscribe()
        print("Goodbye.")
        return 0

    def execute(self, line: str) -> bool:
        """Execute one command line. Returns False when the user quits."""
        line = line.strip()
        if not line:
            return True

        command, _, rest = line.partition(" ")
        command = command.lower()
        if command in ("quit", "exit"):
            return False

        if command in FIELD_COMMANDS:
            self._form.set_field(FIELD_COMMANDS[command], rest.strip())
            return True

        handler = getattr(self, f"_handle_{command}", None)
        if handler is None:
            print(f"Unknown command: {command}. Type 'help' for commands.")
            return True

        try:
            handler(rest.strip())
        except TodoListError as e:
            print(f"Error: {e}")
        return True

    def _handle_priority(self, arg: str) -> None:
        """Handle priority command."""
        self._form.set_priority(arg)

    def _handle_add(self, arg: str) -> None:
        """Handle add command."""
        task = self._form.commit(self._store)
        if task is None:
            print("A title is required. The draft was kept.")
        else:
            print(f"Added task #{task.id}: {task.title}")

    def _handle_toggle(self, arg: str) -> None:
        """Handle toggle command."""
        task_id = self._parse_id(arg)
        if task_id is not None:
            self._store.toggle(task_id)

    def _handle_delete(self, arg: str) -> None:
        """Handle delete command."""
        task_id = self._parse_id(arg)
        if task_id is not None:
            self._store.delete(task_id)

    def _handle_list(self, arg: str) -> None:
        self._render(self._store.snapshot())

    def _handle_draft(self, arg: str) -> None:
        print(format_draft(self._form.current_values()))

    def _handle_clear(self, arg: str) -> None:
        self._form.reset()

    def _handle_help(self, arg: str) -> None:
        print(HELP_TEXT)

    def _parse_id(self, arg: str) -> Optional[int]:
        try:
            return int(shlex.split(arg)[0])
        except (IndexError, ValueError):
            print(f"Invalid task ID: '{arg}'")
            return None

    def _render(self, tasks: Snapshot) -> None:
        print(format_tasks_table(tasks, tablefmt=self._table_format))
        print(format_summary(tasks))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    overrides: dict[str, object] = {}
    if args.no_seed:
        overrides["seed_demo_tasks"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.table_format:
        overrides["table_format"] = args.table_format

    try:
        config = AppConfig(**overrides)  # type: ignore[arg-type]
    except TodoListError as e:
        print(f"Configuration error: {e}")
        return 1

    configure_logging(config.log_level_value)
    logger.debug("Starting with %s", config)

    store = TaskStore(demo_tasks() if config.seed_demo_tasks else ())
    cli = CLI(store, table_format=config.table_format)
    return cli.run()
