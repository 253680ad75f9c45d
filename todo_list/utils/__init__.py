"""Utility modules for the to-do list."""

from todo_list.utils.logger import configure_logging

__all__ = ["configure_logging"]
