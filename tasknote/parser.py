"""
TASKNOTE - Command Parser
=========================
Turns a raw input line into a command value.

The first whitespace-delimited word selects an entry in a grammar table;
the rest of the line is handed to that entry's preparer, which matches it
against a regex and builds the command. Parsing is purely syntactic:
whether a task number exists is only known when the command executes.
"""

import logging
import re
from datetime import datetime
from typing import Callable, Dict, List

from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    ListOnCommand,
    MarkCommand,
    SortCommand,
    UnmarkCommand,
    UpdatePriorityCommand,
)
from .errors import CommandFormatError, TaskFormatError, TaskNumberError
from .messages import (
    MESSAGE_AVAILABLE_COMMANDS,
    MESSAGE_EMPTY_COMMAND,
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_DATETIME_FORMAT,
    MESSAGE_INVALID_DATETIME_RANGE,
    MESSAGE_INVALID_DESCRIPTION,
    MESSAGE_INVALID_PRIORITY,
    MESSAGE_INVALID_SORT_FIELD,
    MESSAGE_INVALID_SORT_ORDER,
    MESSAGE_INVALID_TASK_FORMAT,
    MESSAGE_INVALID_TASK_NUMBERS_FORMAT,
    MESSAGE_MISSING_TASK_NUMBERS,
    MESSAGE_UNKNOWN_COMMAND,
    USAGE_DEADLINE,
    USAGE_EVENT,
    USAGE_FIND,
    USAGE_LIST_ON,
    USAGE_SORT,
    USAGE_TASK_NUMBERS,
    USAGE_TODO,
    USAGE_UPDATE_PRIORITY,
)
from .schema import Deadline, Event, SortField, SortOrder, TaskPriority, Todo
from .timeparse import DateTimeParseError, parse_datetime

logger = logging.getLogger("tasknote.parser")

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)
DEADLINE_ARGS_FORMAT = re.compile(r"(?P<description>.+) /by (?P<by>.+)")
# /from and /to may appear in either order: each lookahead scans the
# arguments independently, stopping at the other marker or end of input.
# The description runs up to the first whitespace-delimited marker, so it
# may itself contain '/' (e.g. "CS2103/T meeting").
EVENT_ARGS_FORMAT = re.compile(
    r"(?=.*?\s/from\s+(?P<start>(?:(?!\s/to\s).)+))"
    r"(?=.*?\s/to\s+(?P<end>(?:(?!\s/from\s).)+))"
    r"(?!/(?:from|to)\s)"
    r"(?P<description>(?:(?!\s/(?:from|to)\s).)+)"
    r"\s/(?:from|to)\s.*"
)
LIST_ARGS_FORMAT = re.compile(r"/on (?P<on>.+)")
SORT_ARGS_FORMAT = re.compile(
    r"(?=.*?/by\s+(?P<by>\S+))"
    r"(?=.*?/order\s+(?P<order>\S+))"
)
UPDATE_PRIORITY_ARGS_FORMAT = re.compile(r"(?P<task_number>\S+)\s+(?P<priority>\S+)")
TASK_NUMBER_FORMAT = re.compile(r"\d+")

Preparer = Callable[[str], Command]


def parse_command(user_input: str) -> Command:
    """
    Parse a raw input line into a command.

    Raises:
        CommandFormatError: unknown command word or malformed arguments
        TaskNumberError: a task number token is not a number
        TaskFormatError: malformed task-creation arguments
    """
    match = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
    if not match:
        raise CommandFormatError(MESSAGE_EMPTY_COMMAND, None, MESSAGE_AVAILABLE_COMMANDS)

    command_word = match.group("command_word")
    arguments = match.group("arguments").strip()

    preparer = COMMAND_TABLE.get(command_word)
    if preparer is None:
        logger.debug(f"Unknown command word: {command_word!r}")
        raise CommandFormatError(
            MESSAGE_UNKNOWN_COMMAND.format(word=command_word),
            f"Input='{user_input.strip()}'",
            MESSAGE_AVAILABLE_COMMANDS
        )
    return preparer(arguments)


# ========================================
# TASK CREATION
# ========================================

def prepare_todo(arguments: str) -> Command:
    if not arguments:
        raise TaskFormatError(
            MESSAGE_INVALID_TASK_FORMAT,
            f"Command='todo', Arguments='{arguments}'",
            USAGE_TODO
        )
    description = _clean_description(arguments, "todo", USAGE_TODO)
    return AddCommand(task=Todo(description=description))


def prepare_deadline(arguments: str) -> Command:
    match = DEADLINE_ARGS_FORMAT.fullmatch(arguments)
    if not match:
        raise TaskFormatError(
            MESSAGE_INVALID_TASK_FORMAT,
            f"Command='deadline', Arguments='{arguments}'",
            USAGE_DEADLINE
        )
    description = _clean_description(match.group("description"), "deadline", USAGE_DEADLINE)
    by = _parse_task_datetime(match.group("by"), "deadline", USAGE_DEADLINE)
    return AddCommand(task=Deadline(description=description, by=by))


def prepare_event(arguments: str) -> Command:
    match = EVENT_ARGS_FORMAT.fullmatch(arguments)
    if not match:
        raise TaskFormatError(
            MESSAGE_INVALID_TASK_FORMAT,
            f"Command='event', Arguments='{arguments}'",
            USAGE_EVENT
        )
    description = _clean_description(match.group("description"), "event", USAGE_EVENT)
    start = _parse_task_datetime(match.group("start"), "event", USAGE_EVENT)
    end = _parse_task_datetime(match.group("end"), "event", USAGE_EVENT)
    if not start < end:
        raise TaskFormatError(
            MESSAGE_INVALID_DATETIME_RANGE.format(
                start=match.group("start").strip(),
                end=match.group("end").strip()
            ),
            f"Command='event', Arguments='{arguments}'",
            USAGE_EVENT
        )
    return AddCommand(task=Event(description=description, start=start, end=end))


def _clean_description(text: str, command: str, usage: str) -> str:
    description = text.strip()
    if not description or any(c in description for c in "|\n\r"):
        raise TaskFormatError(
            MESSAGE_INVALID_DESCRIPTION,
            f"Command='{command}', Description='{description}'",
            usage
        )
    return description


def _parse_task_datetime(text: str, command: str, usage: str) -> datetime:
    try:
        return parse_datetime(text.strip())
    except DateTimeParseError as e:
        raise TaskFormatError(
            MESSAGE_INVALID_DATETIME_FORMAT,
            f"Command='{command}', {e}",
            usage
        ) from e


# ========================================
# READ COMMANDS
# ========================================

def prepare_list(arguments: str) -> Command:
    if not arguments:
        return ListCommand()

    match = LIST_ARGS_FORMAT.fullmatch(arguments)
    if not match:
        raise CommandFormatError(
            MESSAGE_INVALID_COMMAND_FORMAT,
            f"Command='list', Arguments='{arguments}'",
            USAGE_LIST_ON
        )
    try:
        on = parse_datetime(match.group("on").strip())
    except DateTimeParseError as e:
        raise CommandFormatError(
            MESSAGE_INVALID_DATETIME_FORMAT,
            f"Command='list', {e}",
            USAGE_LIST_ON
        ) from e
    return ListOnCommand(on=on.date())


def prepare_find(arguments: str) -> Command:
    keywords = [keyword.strip() for keyword in arguments.split(",")]
    keywords = [keyword for keyword in keywords if keyword]
    if not keywords:
        raise CommandFormatError(
            MESSAGE_INVALID_COMMAND_FORMAT,
            f"Command='find', Arguments='{arguments}'",
            USAGE_FIND
        )
    return FindCommand(keywords=keywords)


# ========================================
# UPDATE / DELETE COMMANDS
# ========================================

def parse_task_numbers(arguments: str, command: str) -> List[int]:
    """Parse 'n[,n...]' into task numbers, dropping repeats (first wins)"""
    usage = USAGE_TASK_NUMBERS.format(command=command)
    tokens = [token.strip() for token in arguments.split(",")]
    if not arguments or all(not token for token in tokens):
        raise CommandFormatError(
            MESSAGE_MISSING_TASK_NUMBERS,
            f"Command='{command}', Arguments='{arguments}'",
            usage
        )

    numbers: List[int] = []
    for token in tokens:
        if not TASK_NUMBER_FORMAT.fullmatch(token):
            raise TaskNumberError(
                MESSAGE_INVALID_TASK_NUMBERS_FORMAT.format(token=token),
                f"Command='{command}', Arguments='{arguments}'",
                usage
            )
        number = int(token)
        if number not in numbers:
            numbers.append(number)
    return numbers


def prepare_delete(arguments: str) -> Command:
    return DeleteCommand(task_numbers=parse_task_numbers(arguments, "delete"))


def prepare_mark(arguments: str) -> Command:
    return MarkCommand(task_numbers=parse_task_numbers(arguments, "mark"))


def prepare_unmark(arguments: str) -> Command:
    return UnmarkCommand(task_numbers=parse_task_numbers(arguments, "unmark"))


def prepare_update_priority(arguments: str) -> Command:
    match = UPDATE_PRIORITY_ARGS_FORMAT.fullmatch(arguments)
    if not match:
        raise CommandFormatError(
            MESSAGE_INVALID_COMMAND_FORMAT,
            f"Command='update-priority', Arguments='{arguments}'",
            USAGE_UPDATE_PRIORITY
        )
    token = match.group("task_number")
    if not TASK_NUMBER_FORMAT.fullmatch(token):
        raise TaskNumberError(
            MESSAGE_INVALID_TASK_NUMBERS_FORMAT.format(token=token),
            f"Command='update-priority', Arguments='{arguments}'",
            USAGE_UPDATE_PRIORITY
        )
    try:
        priority = TaskPriority.from_code(match.group("priority"))
    except ValueError:
        raise CommandFormatError(
            MESSAGE_INVALID_PRIORITY.format(value=match.group("priority")),
            f"Command='update-priority', Arguments='{arguments}'",
            USAGE_UPDATE_PRIORITY
        ) from None
    return UpdatePriorityCommand(task_number=int(token), priority=priority)


def prepare_sort(arguments: str) -> Command:
    match = SORT_ARGS_FORMAT.match(arguments)
    if not match:
        raise CommandFormatError(
            MESSAGE_INVALID_COMMAND_FORMAT,
            f"Command='sort', Arguments='{arguments}'",
            USAGE_SORT
        )
    try:
        field = SortField(match.group("by"))
    except ValueError:
        raise CommandFormatError(
            MESSAGE_INVALID_SORT_FIELD.format(value=match.group("by")),
            f"Command='sort', Arguments='{arguments}'",
            USAGE_SORT
        ) from None
    try:
        order = SortOrder(match.group("order"))
    except ValueError:
        raise CommandFormatError(
            MESSAGE_INVALID_SORT_ORDER.format(value=match.group("order")),
            f"Command='sort', Arguments='{arguments}'",
            USAGE_SORT
        ) from None
    return SortCommand(field=field, order=order)


# ========================================
# GRAMMAR TABLE
# ========================================

COMMAND_TABLE: Dict[str, Preparer] = {
    "todo": prepare_todo,
    "deadline": prepare_deadline,
    "event": prepare_event,
    "list": prepare_list,
    "find": prepare_find,
    "delete": prepare_delete,
    "mark": prepare_mark,
    "unmark": prepare_unmark,
    "update-priority": prepare_update_priority,
    "sort": prepare_sort,
    "help": lambda arguments: HelpCommand(),
    "bye": lambda arguments: ExitCommand(),
    "exit": lambda arguments: ExitCommand(),
}
