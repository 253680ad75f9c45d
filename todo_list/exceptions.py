"""Custom exception hierarchy for the to-do list.

The task store and draft form never raise for rejected input: an empty title
or an unknown task id simply leaves the state unchanged. The exceptions below
are reserved for mistakes made by the calling code or by configuration.

Exception Hierarchy:
    TodoListError (base)
    ├── ConfigurationError     - Invalid settings or environment values
    ├── InvalidPriorityError   - Text that does not name a priority level
    └── UnknownFieldError      - Draft field name outside title/description/time

"""

from __future__ import annotations


class TodoListError(Exception):
    """Base exception for all to-do list errors.

    Attributes:
        message: Human-readable error description.

    """

    def __init__(self, message: str) -> None:
        """Initialize the exception."""
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        """Return a detailed representation for debugging."""
        return f"{self.__class__.__name__}(message={self.message!r})"

    def __str__(self) -> str:
        return self.message


class ConfigurationError(TodoListError):
    """Raised when application configuration is invalid."""


class InvalidPriorityError(TodoListError, ValueError):
    """Raised when a value cannot be parsed into a priority level."""

    def __init__(self, value: object, valid: str) -> None:
        self.value = value
        super().__init__(f"Invalid priority '{value}'. Must be one of: {valid}")


class UnknownFieldError(TodoListError, KeyError):
    """Raised when a draft text field name is not recognised."""

    def __init__(self, name: str, valid: str) -> None:
        self.name = name
        super().__init__(f"Unknown draft field '{name}'. Must be one of: {valid}")
