"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, field
from typing import ClassVar

from .errors import ValidationError

DELIMITER = " | "
EVENT_SEPARATOR = " to "


def _require(value: str, what: str, followed_by: str = "") -> str:
    """
    Reject empty fields and text that would not survive the data file.

    followed_by is the separator written right after the field; the field
    must not produce an earlier occurrence of it once joined.
    """
    if not value or not value.strip():
        raise ValidationError(f"{what} cannot be empty")
    if DELIMITER in value or "\n" in value or "\r" in value:
        raise ValidationError(f"{what} cannot contain '{DELIMITER.strip()}' or line breaks")
    if followed_by and (value + followed_by).find(followed_by) < len(value):
        raise ValidationError(f"{what} cannot end with '{followed_by.rstrip()}'")
    return value


@dataclass
class _TaskBase:
    """Fields and behaviour shared by every task variant."""

    TAG: ClassVar[str]

    description: str
    is_done: bool = field(default=False, kw_only=True)

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_not_done(self) -> None:
        self.is_done = False

    def to_file_format(self) -> str:
        return to_file_format(self)

    def to_display_string(self) -> str:
        return to_display_string(self)

    def __str__(self) -> str:
        return to_display_string(self)


@dataclass
class ToDo(_TaskBase):
    """A task with only a description."""

    TAG: ClassVar[str] = "T"

    def __post_init__(self):
        _require(self.description, "description of a todo")


@dataclass
class Deadline(_TaskBase):
    """A task that must be done by a given label (kept verbatim, not a date)."""

    TAG: ClassVar[str] = "D"

    by: str

    def __post_init__(self):
        _require(self.description, "description of a deadline", followed_by=DELIMITER)
        _require(self.by, "due date of a deadline")


@dataclass
class Event(_TaskBase):
    """A task spanning a start and end label."""

    TAG: ClassVar[str] = "E"

    start: str
    end: str

    def __post_init__(self):
        _require(self.description, "description of an event", followed_by=DELIMITER)
        _require(self.start, "start of an event", followed_by=EVENT_SEPARATOR)
        _require(self.end, "end of an event")


Task = ToDo | Deadline | Event


def status_icon(task: Task) -> str:
    return "X" if task.is_done else " "


def to_file_format(task: Task) -> str:
    """
    Encode a task as one line of the data file (without the newline).

    T | 1 | read book
    D | 0 | submit report | Friday
    E | 0 | project meetup | Mon 2pm to 4pm
    """
    fields = [task.TAG, "1" if task.is_done else "0", task.description]
    match task:
        case ToDo():
            pass
        case Deadline(by=by):
            fields.append(by)
        case Event(start=start, end=end):
            fields.append(f"{start}{EVENT_SEPARATOR}{end}")
    return DELIMITER.join(fields)


def to_display_string(task: Task) -> str:
    """Human-readable form, e.g. "[D][ ] submit report (by: Friday)"."""
    head = f"[{task.TAG}][{status_icon(task)}] {task.description}"
    match task:
        case ToDo():
            return head
        case Deadline(by=by):
            return f"{head} (by: {by})"
        case Event(start=start, end=end):
            return f"{head} (from: {start} to: {end})"
    raise TypeError(f"Not a task: {task!r}")
