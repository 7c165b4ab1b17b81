"""Ordered, mutable collection of tasks."""

from typing import Iterable, Iterator

from .errors import TaskIndexError
from .tasks import Task


class TaskList:
    """
    Tasks in insertion order.

    Indices are 0-based here; user-facing numbers are 1-based and converted
    by the commands. Deleting compacts the list.
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    @property
    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def _check(self, index: int) -> None:
        # Negative indices would silently address from the end
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(f"No task at index {index} (list has {len(self._tasks)} tasks)")

    def get(self, index: int) -> Task:
        self._check(index)
        return self._tasks[index]

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def delete_at(self, index: int) -> Task:
        """Remove and return the task at index."""
        self._check(index)
        return self._tasks.pop(index)

    def mark_at(self, index: int) -> Task:
        task = self.get(index)
        task.mark_as_done()
        return task

    def unmark_at(self, index: int) -> Task:
        task = self.get(index)
        task.mark_as_not_done()
        return task

    def find(self, keyword: str) -> list[Task]:
        """Tasks whose description contains keyword, ignoring case, in list order."""
        needle = keyword.lower()
        return [t for t in self._tasks if needle in t.description.lower()]
