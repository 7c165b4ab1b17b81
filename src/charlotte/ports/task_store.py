"""Task store interface."""

from typing import Iterable, Protocol

from charlotte.core.records import LoadResult
from charlotte.core.tasks import Task


class TaskStore(Protocol):
    """Interface for loading and saving the task list."""

    def load(self) -> LoadResult:
        """Load all tasks. LoadResult.found is False when there is no saved data."""
        ...

    def save(self, tasks: Iterable[Task]) -> None:
        """Replace the saved data with exactly these tasks, in order."""
        ...
