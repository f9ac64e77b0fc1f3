"""Shared fixtures for tasknote tests."""

from datetime import datetime
from pathlib import Path

import pytest

from tasknote.manager import TaskManager
from tasknote.schema import Deadline, Event, TaskList, TaskPriority, Todo
from tasknote.storage import Storage


@pytest.fixture
def storage(tmp_path: Path) -> Storage:
    """Storage backed by a file that does not exist yet."""
    return Storage(tmp_path / "data" / "tasks.txt")


@pytest.fixture
def sample_tasks():
    """One task of every variant, with mixed state and priority."""
    return [
        Todo(description="Read book"),
        Todo(description="Complete assignment", is_done=True, priority=TaskPriority.HIGH),
        Deadline(
            description="Submit report",
            by=datetime(2024, 11, 5, 23, 59),
            is_done=True,
            priority=TaskPriority.HIGH,
        ),
        Deadline(description="Start project", by=datetime(2024, 12, 10, 12, 0)),
        Event(
            description="Attend workshop",
            start=datetime(2024, 11, 5, 9, 0),
            end=datetime(2024, 11, 5, 17, 0),
            priority=TaskPriority.MEDIUM,
        ),
        Event(
            description="Conference",
            start=datetime(2024, 11, 10, 8, 0),
            end=datetime(2024, 11, 12, 18, 0),
            is_done=True,
            priority=TaskPriority.HIGH,
        ),
    ]


@pytest.fixture
def task_list(sample_tasks) -> TaskList:
    tasks = TaskList()
    for task in sample_tasks:
        tasks.add(task)
    return tasks


@pytest.fixture
def manager(storage: Storage) -> TaskManager:
    """TaskManager over an empty task file."""
    return TaskManager(storage)
