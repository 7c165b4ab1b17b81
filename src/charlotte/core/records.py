"""Decoding of data-file records - pure, no I/O."""

from dataclasses import dataclass, field
from typing import Iterable

from .errors import MalformedRecordError, RecordError, UnknownTypeError, ValidationError
from .tasks import DELIMITER, EVENT_SEPARATOR, Deadline, Event, Task, ToDo


@dataclass
class SkippedRecord:
    """A data-file line that was left out of the loaded list."""

    line_number: int
    line: str
    reason: str


@dataclass
class LoadResult:
    """Outcome of loading the data file."""

    tasks: list[Task] = field(default_factory=list)
    found: bool = True
    skipped: list[SkippedRecord] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


def _extra_field(fields: list[str], tag: str) -> str:
    if len(fields) != 4:
        raise MalformedRecordError(f"Expected 4 fields for a {tag} record, got {len(fields)}")
    return fields[3]


def decode_record(line: str) -> Task:
    """
    Decode one data-file line into a task.

    Raises MalformedRecordError for missing fields or a bad done flag, and
    UnknownTypeError for a tag other than T, D or E.
    """
    fields = line.split(DELIMITER)
    if len(fields) < 3:
        raise MalformedRecordError(f"Expected at least 3 fields, got {len(fields)}")

    tag, done_flag, description = fields[0], fields[1], fields[2]
    if done_flag not in ("0", "1"):
        raise MalformedRecordError(f"Invalid done flag: {done_flag!r}")
    is_done = done_flag == "1"

    try:
        match tag:
            case "T":
                if len(fields) != 3:
                    raise MalformedRecordError(f"Expected 3 fields for a T record, got {len(fields)}")
                return ToDo(description, is_done=is_done)
            case "D":
                return Deadline(description, _extra_field(fields, tag), is_done=is_done)
            case "E":
                start, separator, end = _extra_field(fields, tag).partition(EVENT_SEPARATOR)
                if not separator:
                    raise MalformedRecordError("Event record is missing its end")
                return Event(description, start, end, is_done=is_done)
            case _:
                raise UnknownTypeError(f"Unknown task type: {tag!r}")
    except ValidationError as e:
        raise MalformedRecordError(str(e)) from e


def decode_lines(lines: Iterable[str]) -> LoadResult:
    """
    Decode data-file lines, skipping the ones that do not decode.

    Blank lines are ignored. Every other undecodable line is recorded in
    LoadResult.skipped and loading continues with the next line.
    """
    result = LoadResult()
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            result.tasks.append(decode_record(line))
        except RecordError as e:
            result.skipped.append(SkippedRecord(line_number, line, str(e)))
    return result
