"""Command grammar: raw input line -> command variant.

    list
    todo <description>
    deadline <description> /by <when>
    event <description> /from <start> /to <end>
    mark <n> | unmark <n> | delete <n>
    find <keyword>
    bye

Only syntax is checked here. Whether a task number exists is decided when
the command runs against the list.
"""

import re

from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)
from .errors import ParseError
from .tasks import Deadline, Event, ToDo

USAGE = {
    "list": "list",
    "todo": "todo <description>",
    "deadline": "deadline <description> /by <when>",
    "event": "event <description> /from <start> /to <end>",
    "mark": "mark <task number>",
    "unmark": "unmark <task number>",
    "delete": "delete <task number>",
    "find": "find <keyword>",
    "bye": "bye",
}

_NUMBER = re.compile(r"\d+")


def _split_flag(text: str, flag: str) -> tuple[str, str] | None:
    """Split text around the first standalone flag such as /by."""
    parts = re.split(rf"(?:^|\s){re.escape(flag)}(?:\s|$)", text, maxsplit=1)
    if len(parts) != 2:
        return None
    return parts[0].strip(), parts[1].strip()


def _number(keyword: str, args: str) -> int:
    if not args:
        raise ParseError(f"Please give a task number, e.g. {USAGE[keyword]}")
    if not _NUMBER.fullmatch(args) or int(args) < 1:
        raise ParseError(f"Task number must be a positive integer, got {args!r}")
    return int(args)


def _no_args(keyword: str, args: str) -> None:
    if args:
        raise ParseError(f"'{keyword}' does not take any arguments")


def _parse_deadline(args: str) -> AddCommand:
    split = _split_flag(args, "/by")
    if split is None:
        if not args:
            raise ParseError("description of a deadline cannot be empty")
        raise ParseError(f"A deadline needs a /by date, e.g. {USAGE['deadline']}")
    description, by = split
    if not description:
        raise ParseError("description of a deadline cannot be empty")
    if not by:
        raise ParseError("/by of a deadline cannot be empty")
    return AddCommand(Deadline(description, by))


def _parse_event(args: str) -> AddCommand:
    split = _split_flag(args, "/from")
    if split is None:
        if not args:
            raise ParseError("description of an event cannot be empty")
        raise ParseError(f"An event needs /from and /to, e.g. {USAGE['event']}")
    description, times = split
    if not description:
        raise ParseError("description of an event cannot be empty")
    split = _split_flag(times, "/to")
    if split is None:
        raise ParseError(f"An event needs /from and /to, e.g. {USAGE['event']}")
    start, end = split
    if not start:
        raise ParseError("/from of an event cannot be empty")
    if not end:
        raise ParseError("/to of an event cannot be empty")
    return AddCommand(Event(description, start, end))


def parse(raw_line: str) -> Command:
    """
    Turn one line of user input into a command.

    Raises ParseError for unknown keywords and malformed arguments, and
    ValidationError when a field cannot be stored in the data file.
    """
    line = raw_line.strip()
    if not line:
        raise ParseError("empty command")

    parts = line.split(maxsplit=1)
    keyword = parts[0]
    args = parts[1].strip() if len(parts) > 1 else ""

    match keyword:
        case "list":
            _no_args(keyword, args)
            return ListCommand()
        case "todo":
            if not args:
                raise ParseError("description of a todo cannot be empty")
            return AddCommand(ToDo(args))
        case "deadline":
            return _parse_deadline(args)
        case "event":
            return _parse_event(args)
        case "mark":
            return MarkCommand(_number(keyword, args))
        case "unmark":
            return UnmarkCommand(_number(keyword, args))
        case "delete":
            return DeleteCommand(_number(keyword, args))
        case "find":
            if not args:
                raise ParseError(f"Please give a keyword to search for, e.g. {USAGE['find']}")
            return FindCommand(args)
        case "bye":
            _no_args(keyword, args)
            return ExitCommand()
        case _:
            raise ParseError(f"unknown command: {keyword!r}")
