"""Functional core - task model, command grammar and execution with no I/O."""

from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
    execute,
    is_exit,
)
from .errors import (
    CharlotteError,
    MalformedRecordError,
    ParseError,
    RecordError,
    StoreError,
    TaskIndexError,
    UnknownTypeError,
    ValidationError,
)
from .parser import parse
from .records import LoadResult, SkippedRecord, decode_lines, decode_record
from .task_list import TaskList
from .tasks import Deadline, Event, Task, ToDo, to_display_string, to_file_format

__all__ = [
    # Tasks
    "Task",
    "ToDo",
    "Deadline",
    "Event",
    "to_display_string",
    "to_file_format",
    "TaskList",
    # Records
    "LoadResult",
    "SkippedRecord",
    "decode_lines",
    "decode_record",
    # Commands
    "Command",
    "ListCommand",
    "AddCommand",
    "DeleteCommand",
    "MarkCommand",
    "UnmarkCommand",
    "FindCommand",
    "ExitCommand",
    "execute",
    "is_exit",
    "parse",
    # Errors
    "CharlotteError",
    "ParseError",
    "TaskIndexError",
    "ValidationError",
    "StoreError",
    "RecordError",
    "MalformedRecordError",
    "UnknownTypeError",
]
