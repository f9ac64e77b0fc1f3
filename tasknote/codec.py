"""
TASKNOTE - Line Codec
=====================
One task per line, pipe-delimited, fixed field order per type:

    T | done | priority | description
    D | done | priority | description | by
    E | done | priority | description | from | to

``done`` is 0/1, ``priority`` is L/M/H and datetimes are ISO-8601.
"""

from datetime import datetime
from typing import List

from .errors import DecodeError
from .messages import (
    MESSAGE_INVALID_DEADLINE_ENCODED,
    MESSAGE_INVALID_EVENT_ENCODED,
    MESSAGE_INVALID_TASK_ENCODED_FORMAT,
)
from .schema import Deadline, Event, Task, TaskPriority, TaskType, Todo

SEPARATOR = " | "

_DONE_FLAGS = {"0": False, "1": True}


def encode(task: Task) -> str:
    """Encode a task as a single persisted line (no trailing newline)"""
    fields = [
        task.get_type().value,
        "1" if task.is_done else "0",
        task.priority.value,
        task.description,
    ]
    if isinstance(task, Deadline):
        fields.append(task.by.isoformat())
    elif isinstance(task, Event):
        fields.extend([task.start.isoformat(), task.end.isoformat()])
    elif not isinstance(task, Todo):
        raise TypeError(f"Cannot encode task of type {type(task).__name__}")
    return SEPARATOR.join(fields)


def decode(line: str) -> Task:
    """Decode one persisted line back into a task, raising DecodeError"""
    fields = [field.strip() for field in line.split("|")]
    if len(fields) < 4:
        raise _invalid(line)

    tag, done, code, description = fields[:4]
    extra = fields[4:]

    if done not in _DONE_FLAGS:
        raise _invalid(line)
    try:
        task_type = TaskType(tag)
        priority = TaskPriority.from_code(code)
    except ValueError:
        raise _invalid(line) from None

    common = dict(description=description, is_done=_DONE_FLAGS[done], priority=priority)
    try:
        if task_type == TaskType.TODO:
            if extra:
                raise _invalid(line)
            return Todo(**common)

        if task_type == TaskType.DEADLINE:
            if len(extra) < 1:
                raise DecodeError(MESSAGE_INVALID_DEADLINE_ENCODED, f"Line='{line}'")
            if len(extra) > 1:
                raise _invalid(line)
            return Deadline(by=_parse_timestamp(extra[0], line), **common)

        if len(extra) < 2:
            raise DecodeError(MESSAGE_INVALID_EVENT_ENCODED, f"Line='{line}'")
        if len(extra) > 2:
            raise _invalid(line)
        return Event(
            start=_parse_timestamp(extra[0], line),
            end=_parse_timestamp(extra[1], line),
            **common
        )
    except ValueError:
        # pydantic.ValidationError is a ValueError (e.g. empty description)
        raise _invalid(line) from None


def encode_all(tasks: List[Task]) -> List[str]:
    return [encode(task) for task in tasks]


def _parse_timestamp(text: str, line: str) -> datetime:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise _invalid(line) from None


def _invalid(line: str) -> DecodeError:
    return DecodeError(MESSAGE_INVALID_TASK_ENCODED_FORMAT, f"Line='{line}'")
