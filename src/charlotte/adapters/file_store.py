"""Flat-file task storage adapter."""

import logging
from pathlib import Path
from typing import Iterable

from charlotte.core.errors import StoreError
from charlotte.core.records import LoadResult, decode_lines
from charlotte.core.tasks import Task, to_file_format

logger = logging.getLogger(__name__)


class FileTaskStore:
    """
    Flat-file task storage.

    Implements TaskStore protocol. One UTF-8 line per task:

        T | 0 | read book
        D | 1 | submit report | Friday
        E | 0 | project meetup | Mon 2pm to 4pm

    Every save rewrites the whole file.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> LoadResult:
        """Load tasks, skipping lines that do not decode."""
        if not self.path.exists():
            logger.info(f"No existing data file at {self.path}")
            return LoadResult(found=False)

        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"An error occurred while reading {self.path}: {e}") from e

        result = decode_lines(text.splitlines())
        for skipped in result.skipped:
            logger.warning(
                f"Skipping line {skipped.line_number} of {self.path}: {skipped.reason} ({skipped.line!r})"
            )
        logger.info(f"Loaded {len(result.tasks)} tasks from {self.path}")
        return result

    def save(self, tasks: Iterable[Task]) -> None:
        """Overwrite the file with one record per task, in order."""
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Failed to create directory: {directory}") from e

        records = [to_file_format(task) for task in tasks]
        content = "".join(f"{record}\n" for record in records)
        try:
            self.path.write_text(content, encoding="utf-8", newline="\n")
        except OSError as e:
            raise StoreError(f"An error occurred while saving {self.path}: {e}") from e
        logger.debug(f"Saved {len(records)} tasks to {self.path}")
