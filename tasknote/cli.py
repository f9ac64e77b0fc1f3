#!/usr/bin/env python3
"""
TASKNOTE - CLI Interface
========================
Interactive command-line task manager.

Usage:
    tasknote
    tasknote --file ~/notes/tasks.txt
    tasknote --log-level INFO

Then type commands at the prompt, e.g.:
    todo read book
    deadline return book /by 2024-12-01 1800
    event meeting /from 2024-12-01 1400 /to 2024-12-01 1600
    list
    mark 1,2
    sort /by datetime /order asc
    bye
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .commands import ErrorReport
from .config import Settings
from .errors import StorageFilePathError, TaskNoteError
from .manager import TaskManager
from .messages import MESSAGE_EMPTY_START_NOTICE, MESSAGE_GOODBYE, MESSAGE_WELCOME
from .schema import TaskList
from .storage import Storage

BORDER_LINE = "    " + "_" * 72
INDENT = "     "

logger = logging.getLogger("tasknote.cli")


def print_block(lines: List[str], out: TextIO) -> None:
    """Print message lines between border lines"""
    print(BORDER_LINE, file=out)
    for line in lines:
        for part in line.splitlines() or [""]:
            print(f"{INDENT}{part}", file=out)
    print(BORDER_LINE, file=out)


def run(manager: TaskManager, stdin: TextIO, stdout: TextIO) -> int:
    """Read-execute loop until an exit command or end of input"""
    print_block([MESSAGE_WELCOME], stdout)
    for raw in stdin:
        line = raw.strip()
        if not line:
            continue
        result = manager.execute(line)
        if isinstance(result, ErrorReport):
            print_block(result.lines(), stdout)
            continue
        print_block(result.lines, stdout)
        if result.is_exit:
            return 0

    print_block([MESSAGE_GOODBYE], stdout)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasknote",
        description="TaskNote - interactive task manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  TASKNOTE_FILE        Task file (default: data/tasks.txt)
  TASKNOTE_LOG_LEVEL   Log level (default: WARNING)

Type 'help' at the prompt to list the available commands.
        """
    )
    parser.add_argument("-f", "--file", help="Task file, must end with .txt")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.file:
        overrides["data_file"] = args.file
    if args.log_level:
        overrides["log_level"] = args.log_level
    try:
        settings = Settings.from_env()
        settings = Settings(**{**settings.model_dump(), **overrides})
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    try:
        storage = Storage(settings.data_file)
    except StorageFilePathError as e:
        logger.error(f"Cannot start: {e.message}")
        print_block(ErrorReport.from_error(e).lines(), sys.stderr)
        return 1

    try:
        manager = TaskManager(storage)
    except TaskNoteError as e:
        # Unreadable or corrupt file: start empty, the next save replaces it.
        logger.warning(f"⚠️ Starting with an empty list: {e.message}")
        print_block(ErrorReport.from_error(e).lines() + [MESSAGE_EMPTY_START_NOTICE], sys.stdout)
        manager = TaskManager(storage, TaskList())

    return run(manager, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
