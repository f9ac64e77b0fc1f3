"""
TASKNOTE - Task Manager
=======================
Owns the in-memory TaskList and its Storage for one session and runs
input lines through parse -> execute -> save.

A failed command leaves the list exactly as it was before the command,
even when the failure happens after a mutation (e.g. the save fails).
"""

import logging
from typing import Optional, Union

from .commands import CommandResult, ErrorReport
from .errors import TaskNoteError
from .parser import parse_command
from .schema import TaskList
from .storage import Storage

logger = logging.getLogger("tasknote.manager")


class TaskManager:
    """
    Session object for the interactive loop.

    Usage:
        manager = TaskManager(Storage("data/tasks.txt"))
        result = manager.execute("todo read book")
    """

    def __init__(self, storage: Storage, task_list: Optional[TaskList] = None):
        self.storage = storage
        self.task_list = task_list if task_list is not None else storage.load()

    def execute(self, user_input: str) -> Union[CommandResult, ErrorReport]:
        """Run one input line; errors come back as an ErrorReport"""
        snapshot = self.task_list.model_copy(deep=True)
        try:
            command = parse_command(user_input)
            result = command.execute(self.task_list, self.storage)
        except TaskNoteError as e:
            self.task_list = snapshot
            logger.warning(f"Command failed ({e.kind}): {e.message}")
            return ErrorReport.from_error(e)

        logger.debug(f"Executed {type(command).__name__}, {self.task_list.size()} tasks in list")
        return result
