"""
TASKNOTE - Storage
==================
Loads the TaskList from a flat text file and writes it back.

Every save rewrites the whole file from memory, so the file is always an
order-preserving snapshot of the list, even after sorts and deletes.
"""

import logging
import os
from pathlib import Path
from typing import Union

from .codec import decode, encode_all
from .errors import (
    DecodeError,
    FileContentError,
    StorageFilePathError,
    StorageOperationError,
)
from .messages import (
    MESSAGE_CREATE_FILE_ERROR,
    MESSAGE_FILE_CONTENT_HELP,
    MESSAGE_FILE_PATH_ERROR,
    MESSAGE_READ_FILE_ERROR,
    MESSAGE_WRITE_FILE_ERROR,
)
from .schema import TaskList

logger = logging.getLogger("tasknote.storage")

FILE_EXTENSION = ".txt"
DEFAULT_FILE_PATH = "data/tasks.txt"


class Storage:
    """
    Flat-file TaskList storage.

    The path is validated on construction: a file that does not end in
    ``.txt`` fails immediately rather than at the first save.
    """

    def __init__(self, file_path: Union[str, Path] = DEFAULT_FILE_PATH):
        path = Path(file_path)
        if path.suffix != FILE_EXTENSION:
            raise StorageFilePathError(MESSAGE_FILE_PATH_ERROR, f"FilePath='{file_path}'")
        self.file_path = path

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def load(self) -> TaskList:
        """Load the task list; a missing file is an empty list"""
        task_list = TaskList()
        if not self.file_path.exists():
            logger.info(f"No storage file at {self.file_path}, starting with an empty list")
            return task_list

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                for line_number, line in enumerate(f, start=1):
                    line = line.rstrip("\n")
                    if not line.strip():
                        continue
                    task_list.add(self._decode_line(line, line_number))
        except OSError as e:
            raise StorageOperationError(
                MESSAGE_READ_FILE_ERROR,
                f"FilePath='{self.file_path}', Reason='{e}'"
            ) from e
        except UnicodeDecodeError as e:
            raise FileContentError(
                MESSAGE_READ_FILE_ERROR,
                f"FilePath='{self.file_path}', Reason='{e}'"
            ) from e

        logger.info(f"📂 Loaded {task_list.size()} tasks from {self.file_path}")
        return task_list

    def save(self, task_list: TaskList) -> None:
        """Rewrite the whole file from the current task list"""
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageOperationError(
                MESSAGE_CREATE_FILE_ERROR,
                f"FilePath='{self.file_path}', Reason='{e}'"
            ) from e

        content = "".join(f"{line}\n" for line in encode_all(task_list.all()))
        # Write beside the target and swap, so a failed write never
        # leaves a half-written file behind.
        temp_path = self.file_path.with_name(self.file_path.name + ".tmp")
        try:
            with open(temp_path, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            os.replace(temp_path, self.file_path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise StorageOperationError(
                MESSAGE_WRITE_FILE_ERROR,
                f"FilePath='{self.file_path}', Reason='{e}'"
            ) from e

        logger.info(f"✅ Saved {task_list.size()} tasks to {self.file_path}")

    def _decode_line(self, line: str, line_number: int):
        try:
            return decode(line)
        except DecodeError as e:
            raise FileContentError(
                e.message,
                f"FilePath='{self.file_path}', LineNumber={line_number}, {e.detail}",
                MESSAGE_FILE_CONTENT_HELP
            ) from e
