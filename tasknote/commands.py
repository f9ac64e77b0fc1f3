"""
TASKNOTE - Commands
===================
Parsed command values and their execution against (TaskList, Storage).

Commands never print. ``execute`` returns a CommandResult holding the
display lines, or raises a TaskNoteError; the presentation layer decides
how either is shown.
"""

from abc import abstractmethod
from datetime import date
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from .errors import CommandOperationError, TaskNoteError
from .messages import (
    MESSAGE_AVAILABLE_COMMANDS,
    MESSAGE_DUPLICATE_TASK,
    MESSAGE_DUPLICATE_TASK_HELP,
    MESSAGE_GOODBYE,
    MESSAGE_TASK_LIST_TIPS,
)
from .schema import SortField, SortOrder, Task, TaskList, TaskPriority
from .storage import Storage

MESSAGE_ADDED = "Got it. I've added this task:"
MESSAGE_DELETED = "Noted. I've removed these tasks:"
MESSAGE_TASK_COUNT = "Now you have {count} tasks in the list."
MESSAGE_LIST = "Here are the tasks in your list:"
MESSAGE_LIST_EMPTY = "Your task list is currently empty."
MESSAGE_LIST_ON = "Here are the tasks on {day}:"
MESSAGE_LIST_ON_EMPTY = "No tasks found on {day}."
MESSAGE_FIND = "Here are the tasks in your list with the keyword(s) {keywords}:"
MESSAGE_FIND_EMPTY = "No tasks found with the keyword(s) {keywords}."
MESSAGE_MARKED = "Nice! I've marked these tasks as done:"
MESSAGE_ALREADY_MARKED = "These tasks were already marked as done:"
MESSAGE_UNMARKED = "OK, I've marked these tasks as not done yet:"
MESSAGE_ALREADY_UNMARKED = "These tasks were not marked as done:"
MESSAGE_PRIORITY_UPDATED = "Got it. I've updated the priority of this task to {priority}:"
MESSAGE_PRIORITY_UNCHANGED = "This task already has priority {priority}:"
MESSAGE_SORTED = "Tasks sorted by {field} ({order}):"


class CommandResult(BaseModel):
    """Display lines produced by a successful command"""
    lines: List[str] = Field(default_factory=list)
    is_exit: bool = False


class ErrorReport(BaseModel):
    """Structured description of a failed command"""
    kind: str
    message: str
    detail: Optional[str] = None
    help: Optional[str] = None

    @classmethod
    def from_error(cls, error: TaskNoteError) -> "ErrorReport":
        return cls(kind=error.kind, message=error.message, detail=error.detail, help=error.help)

    def lines(self) -> List[str]:
        lines = [f"Error: {self.message} ({self.kind})"]
        if self.detail:
            lines.append(f"Detail: {self.detail}")
        if self.help:
            lines.append("Help: " + self.help)
        return lines


def format_tasks(entries: Sequence[Tuple[int, Task]], total: int) -> List[str]:
    """Render (task number, task) pairs, right-aligning the numbers"""
    width = len(str(max(total, 1)))
    return [f" {number:>{width}}. {task}" for number, task in entries]


def numbered(task_list: TaskList, tasks: Sequence[Task]) -> List[Tuple[int, Task]]:
    return [(task_list.index_of(task) + 1, task) for task in tasks]


class Command(BaseModel):
    """Base class for every parsed command"""

    @abstractmethod
    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        ...


# ========================================
# CREATE
# ========================================

class AddCommand(Command):
    task: Task

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        if task_list.contains(self.task):
            raise CommandOperationError(
                MESSAGE_DUPLICATE_TASK,
                f"Task='{self.task}'",
                MESSAGE_DUPLICATE_TASK_HELP
            )
        task_list.add(self.task)
        storage.save(task_list)
        return CommandResult(lines=[
            MESSAGE_ADDED,
            *format_tasks(numbered(task_list, [self.task]), task_list.size()),
            MESSAGE_TASK_COUNT.format(count=task_list.size()),
        ])


# ========================================
# READ
# ========================================

class ListCommand(Command):
    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        if task_list.is_empty():
            return CommandResult(lines=[MESSAGE_LIST_EMPTY])
        return CommandResult(lines=[
            MESSAGE_LIST,
            *format_tasks(numbered(task_list, task_list.all()), task_list.size()),
            MESSAGE_TASK_LIST_TIPS,
        ])


class ListOnCommand(Command):
    on: date

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        day = self.on.strftime("%b %d %Y")
        matches = task_list.on_date(self.on)
        if not matches:
            return CommandResult(lines=[MESSAGE_LIST_ON_EMPTY.format(day=day)])
        return CommandResult(lines=[
            MESSAGE_LIST_ON.format(day=day),
            *format_tasks(numbered(task_list, matches), task_list.size()),
        ])


class FindCommand(Command):
    keywords: List[str]

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        keywords = ", ".join(f"'{k}'" for k in self.keywords)
        matches = task_list.find(self.keywords)
        if not matches:
            return CommandResult(lines=[MESSAGE_FIND_EMPTY.format(keywords=keywords)])
        return CommandResult(lines=[
            MESSAGE_FIND.format(keywords=keywords),
            *format_tasks(numbered(task_list, matches), task_list.size()),
        ])


# ========================================
# UPDATE / DELETE
# ========================================

class DeleteCommand(Command):
    task_numbers: List[int]

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        # Resolve the whole batch first so deleting one task cannot
        # shift which task a later number refers to.
        targets = task_list.resolve(self.task_numbers)
        total = task_list.size()
        entries = numbered(task_list, targets)
        for task in targets:
            task_list.delete(task)
        storage.save(task_list)
        return CommandResult(lines=[
            MESSAGE_DELETED,
            *format_tasks(entries, total),
            MESSAGE_TASK_COUNT.format(count=task_list.size()),
        ])


class _MarkBatchCommand(Command):
    task_numbers: List[int]

    def _apply(self, task_list: TaskList, index: int) -> bool:
        raise NotImplementedError

    def _headers(self) -> Tuple[str, str]:
        raise NotImplementedError

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        targets = task_list.resolve(self.task_numbers)
        changed: List[Task] = []
        unchanged: List[Task] = []
        for task in targets:
            if self._apply(task_list, task_list.index_of(task)):
                changed.append(task)
            else:
                unchanged.append(task)

        if changed:
            storage.save(task_list)

        changed_header, unchanged_header = self._headers()
        lines: List[str] = []
        for header, group in ((changed_header, changed), (unchanged_header, unchanged)):
            if group:
                lines.append(header)
                lines.extend(format_tasks(numbered(task_list, group), task_list.size()))
        return CommandResult(lines=lines)


class MarkCommand(_MarkBatchCommand):
    def _apply(self, task_list: TaskList, index: int) -> bool:
        return task_list.mark_done(index)

    def _headers(self) -> Tuple[str, str]:
        return MESSAGE_MARKED, MESSAGE_ALREADY_MARKED


class UnmarkCommand(_MarkBatchCommand):
    def _apply(self, task_list: TaskList, index: int) -> bool:
        return task_list.mark_undone(index)

    def _headers(self) -> Tuple[str, str]:
        return MESSAGE_UNMARKED, MESSAGE_ALREADY_UNMARKED


class UpdatePriorityCommand(Command):
    task_number: int
    priority: TaskPriority

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        task = task_list.resolve([self.task_number])[0]
        name = self.priority.name
        if not task.set_priority(self.priority):
            header = MESSAGE_PRIORITY_UNCHANGED.format(priority=name)
        else:
            storage.save(task_list)
            header = MESSAGE_PRIORITY_UPDATED.format(priority=name)
        return CommandResult(lines=[
            header,
            *format_tasks(numbered(task_list, [task]), task_list.size()),
        ])


class SortCommand(Command):
    field: SortField
    order: SortOrder

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        task_list.sort(self.field, self.order)
        storage.save(task_list)
        return CommandResult(lines=[
            MESSAGE_SORTED.format(field=self.field.value, order=self.order.value),
            *format_tasks(numbered(task_list, task_list.all()), task_list.size()),
        ])


# ========================================
# SESSION
# ========================================

class HelpCommand(Command):
    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        return CommandResult(lines=MESSAGE_AVAILABLE_COMMANDS.splitlines())


class ExitCommand(Command):
    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        return CommandResult(lines=[MESSAGE_GOODBYE], is_exit=True)
