"""
TASKNOTE - Task Schema Definition
=================================
Task variants (Todo, Deadline, Event) and the ordered TaskList that owns them.

The variants form a closed tagged union on the ``type`` field, so a TaskList
can be validated straight from plain data and every variant keeps its class.
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Callable, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, Field, field_validator

from .errors import TaskNumberError
from .messages import (
    MESSAGE_INVALID_DESCRIPTION,
    MESSAGE_INVALID_TASK_NUMBER,
    MESSAGE_INVALID_TASK_NUMBER_HELP,
)
from .timeparse import format_datetime


class TaskType(str, Enum):
    """Task variants, valued by their persisted tag"""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def rank(self) -> int:
        return list(TaskType).index(self)


class TaskPriority(str, Enum):
    """Task priority levels, valued by their single-letter code"""
    LOW = "L"
    MEDIUM = "M"
    HIGH = "H"

    @property
    def rank(self) -> int:
        return list(TaskPriority).index(self)

    @classmethod
    def from_code(cls, code: str) -> "TaskPriority":
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown priority code: {code!r}") from None


class SortField(str, Enum):
    PRIORITY = "priority"
    TASKTYPE = "tasktype"
    DATETIME = "datetime"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# ============================================================
# TASK VARIANTS
# ============================================================

class Task(BaseModel):
    """Fields and behaviour shared by every task variant"""
    description: str = Field(frozen=True)
    is_done: bool = False
    priority: TaskPriority = TaskPriority.LOW

    @field_validator("description")
    @classmethod
    def _check_description(cls, value: str) -> str:
        # The description is the last field of a persisted line.
        if not value or value != value.strip() or any(c in value for c in "|\n\r"):
            raise ValueError(MESSAGE_INVALID_DESCRIPTION)
        return value

    def get_type(self) -> TaskType:
        return self.type  # type: ignore[attr-defined]

    def mark_done(self) -> bool:
        """Mark as done. Returns False if the task was already done."""
        if self.is_done:
            return False
        self.is_done = True
        return True

    def mark_undone(self) -> bool:
        """Mark as not done. Returns False if the task was not done."""
        if not self.is_done:
            return False
        self.is_done = False
        return True

    def set_priority(self, priority: TaskPriority) -> bool:
        """Change the priority. Returns False if it was already set."""
        if self.priority == priority:
            return False
        self.priority = priority
        return True

    def comparable_datetime(self) -> Optional[datetime]:
        """Timestamp used by the datetime sort; None sorts last"""
        return None

    def occurs_on(self, day: date) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        # Duplicate detection only; tasks have no ordering.
        if not isinstance(other, Task):
            return NotImplemented
        return type(self) is type(other) and self.model_dump() == other.model_dump()

    def _suffix(self) -> str:
        return ""

    def __str__(self) -> str:
        icon = "X" if self.is_done else " "
        return (
            f"[{self.get_type().value}][{self.priority.value}][{icon}] "
            f"{self.description}{self._suffix()}"
        )


class Todo(Task):
    type: Literal[TaskType.TODO] = Field(default=TaskType.TODO, frozen=True)


class Deadline(Task):
    type: Literal[TaskType.DEADLINE] = Field(default=TaskType.DEADLINE, frozen=True)
    by: datetime = Field(frozen=True)

    def comparable_datetime(self) -> Optional[datetime]:
        return self.by

    def occurs_on(self, day: date) -> bool:
        return self.by.date() == day

    def _suffix(self) -> str:
        return f" (by: {format_datetime(self.by)})"


class Event(Task):
    """
    Task spanning a time range.

    ``start < end`` is checked when the event is created from user input,
    not here: files edited by hand may hold events that break it.
    """
    type: Literal[TaskType.EVENT] = Field(default=TaskType.EVENT, frozen=True)
    start: datetime = Field(frozen=True)
    end: datetime = Field(frozen=True)

    def comparable_datetime(self) -> Optional[datetime]:
        return self.start

    def occurs_on(self, day: date) -> bool:
        return self.start.date() <= day <= self.end.date()

    def _suffix(self) -> str:
        return f" (from: {format_datetime(self.start)} to: {format_datetime(self.end)})"


AnyTask = Annotated[Union[Todo, Deadline, Event], Field(discriminator="type")]


# ============================================================
# TASK LIST
# ============================================================

class TaskList(BaseModel):
    """
    Ordered task collection.

    Insertion order is the display order: the task at index ``i`` is shown
    to the user as task number ``i + 1``. Duplicates are rejected by the
    add command, not here, so a hand-edited file still loads.
    """
    tasks: List[AnyTask] = Field(default_factory=list)

    # ========================================
    # BASIC ACCESS
    # ========================================

    def size(self) -> int:
        return len(self.tasks)

    def is_empty(self) -> bool:
        return not self.tasks

    def all(self) -> List[Task]:
        return list(self.tasks)

    def add(self, task: Task) -> None:
        self.tasks.append(task)

    def get(self, index: int) -> Task:
        """Get task by 0-based index"""
        if not 0 <= index < len(self.tasks):
            raise IndexError(f"Task index out of range: {index}")
        return self.tasks[index]

    def contains(self, task: Task) -> bool:
        return any(existing == task for existing in self.tasks)

    def index_of(self, task: Task) -> int:
        # Identity, not equality: marking can make two entries compare equal.
        for index, existing in enumerate(self.tasks):
            if existing is task:
                return index
        return -1

    def delete(self, task: Task) -> None:
        index = self.index_of(task)
        if index == -1:
            raise ValueError(f"Task not in list: {task}")
        del self.tasks[index]

    def mark_done(self, index: int) -> bool:
        return self.get(index).mark_done()

    def mark_undone(self, index: int) -> bool:
        return self.get(index).mark_undone()

    # ========================================
    # QUERIES
    # ========================================

    def find(self, keywords: Sequence[str]) -> List[Task]:
        """Tasks whose description contains any keyword, in list order"""
        return [
            task for task in self.tasks
            if any(keyword in task.description for keyword in keywords)
        ]

    def on_date(self, day: date) -> List[Task]:
        return [task for task in self.tasks if task.occurs_on(day)]

    def resolve(self, task_numbers: Sequence[int]) -> List[Task]:
        """
        Map 1-based task numbers to tasks without mutating anything.

        Every number is checked before any task is returned, so a batch
        either resolves completely or fails as a whole. Repeated numbers
        resolve once.
        """
        unique = list(dict.fromkeys(task_numbers))
        invalid = [n for n in unique if not 1 <= n <= len(self.tasks)]
        if invalid:
            raise TaskNumberError(
                MESSAGE_INVALID_TASK_NUMBER,
                f"TaskNumber='{','.join(str(n) for n in invalid)}', TaskCount={len(self.tasks)}",
                MESSAGE_INVALID_TASK_NUMBER_HELP
            )
        return [self.tasks[n - 1] for n in unique]

    # ========================================
    # SORTING (stable, in place)
    # ========================================

    def sort(self, field: SortField, order: SortOrder) -> None:
        if field == SortField.PRIORITY:
            self.sort_by_priority(order)
        elif field == SortField.TASKTYPE:
            self.sort_by_task_type(order)
        elif field == SortField.DATETIME:
            self.sort_by_datetime(order)
        else:
            raise ValueError(f"Unknown sort field: {field}")

    def sort_by_priority(self, order: SortOrder) -> None:
        self._sort_by(lambda task: task.priority.rank, order)

    def sort_by_task_type(self, order: SortOrder) -> None:
        self._sort_by(lambda task: task.get_type().rank, order)

    def sort_by_datetime(self, order: SortOrder) -> None:
        """Sort timed tasks by deadline/start; Todo tasks always go last"""
        timed = [t for t in self.tasks if t.comparable_datetime() is not None]
        untimed = [t for t in self.tasks if t.comparable_datetime() is None]
        timed.sort(key=lambda task: task.comparable_datetime(), reverse=order == SortOrder.DESC)
        self.tasks = timed + untimed

    def _sort_by(self, key: Callable[[Task], int], order: SortOrder) -> None:
        # list.sort keeps equal keys in their original order even with reverse=True
        self.tasks.sort(key=key, reverse=order == SortOrder.DESC)
