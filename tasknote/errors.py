"""
TASKNOTE - Error Taxonomy
=========================
Every failure a command can hit is a TaskNoteError carrying a short
message, an optional detail (what was actually received) and optional
help text (how to fix it). All of them are recoverable at the top level
except StorageFilePathError, which means there is no usable file at all.
"""

from typing import Optional


class TaskNoteError(Exception):
    """Base class for all tasknote errors"""

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        help: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.help = help

    @property
    def kind(self) -> str:
        return type(self).__name__


# ========================================
# COMMAND ERRORS
# ========================================

class CommandFormatError(TaskNoteError):
    """Unrecognized command word or malformed command arguments"""


class TaskNumberError(CommandFormatError):
    """Task number is not numeric, or does not exist in the list"""


class TaskFormatError(TaskNoteError):
    """Malformed task-creation arguments (description, dates, date range)"""


class CommandOperationError(TaskNoteError):
    """Well-formed command that cannot be applied (e.g. duplicate task)"""


# ========================================
# STORAGE ERRORS
# ========================================

class StorageFilePathError(TaskNoteError):
    """Storage file path has the wrong extension"""


class StorageOperationError(TaskNoteError):
    """Creating, reading or writing the storage file failed"""


class FileContentError(TaskNoteError):
    """Storage file contains a line that is not a valid encoded task"""


class DecodeError(TaskNoteError):
    """A single line could not be decoded into a task"""
