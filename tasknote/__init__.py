"""
TASKNOTE - Interactive Task Manager
===================================

Todo, Deadline and Event tasks kept in a flat text file that is rewritten
after every change.

Usage:
    from tasknote import Storage, TaskManager

    manager = TaskManager(Storage("data/tasks.txt"))
    manager.execute("todo read book")
    manager.execute("deadline return book /by 2024-12-01 1800")
    result = manager.execute("list")
    print("\\n".join(result.lines))
"""

from .schema import (
    TaskList,
    Task,
    Todo,
    Deadline,
    Event,
    TaskType,
    TaskPriority,
    SortField,
    SortOrder,
)
from .codec import encode, decode
from .parser import parse_command
from .commands import Command, CommandResult, ErrorReport
from .storage import Storage
from .manager import TaskManager

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "Storage",
    "TaskList",
    "Task",
    "Todo",
    "Deadline",
    "Event",
    "TaskType",
    "TaskPriority",
    "SortField",
    "SortOrder",
    "Command",
    "CommandResult",
    "ErrorReport",
    "encode",
    "decode",
    "parse_command",
]
