"""Test configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from todo_list import Draft, DraftForm, Priority, TaskStore, demo_tasks


@pytest.fixture
def store() -> TaskStore:
    """An empty task store."""
    return TaskStore()


@pytest.fixture
def seeded_store() -> TaskStore:
    """A store holding the two sample tasks."""
    return TaskStore(demo_tasks())


@pytest.fixture
def form() -> DraftForm:
    """A draft form with default values."""
    return DraftForm()


@pytest.fixture
def learn_dsa() -> Draft:
    """A complete, valid draft."""
    return Draft(
        title="Learn DSA",
        description="Focus on DP.",
        time="2 hours",
        priority=Priority.HIGH,
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of the tests."""
    for key in ("TODO_LIST_SEED", "TODO_LIST_LOG_LEVEL", "TODO_LIST_TABLE_FORMAT"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers that configure_logging attached during a test."""
    package_logger = logging.getLogger("todo_list")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
