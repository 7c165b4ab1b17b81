"""Command variants and their effects on the task list."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import TaskIndexError
from .task_list import TaskList
from .tasks import Task

if TYPE_CHECKING:
    from charlotte.ports.task_store import TaskStore

FAREWELL = "Bye. Hope to see you again soon!"


@dataclass(frozen=True)
class ListCommand:
    """Show every task."""


@dataclass(frozen=True)
class AddCommand:
    """Append an already-validated task."""

    task: Task


@dataclass(frozen=True)
class DeleteCommand:
    number: int


@dataclass(frozen=True)
class MarkCommand:
    number: int


@dataclass(frozen=True)
class UnmarkCommand:
    number: int


@dataclass(frozen=True)
class FindCommand:
    keyword: str


@dataclass(frozen=True)
class ExitCommand:
    """End the session."""


Command = (
    ListCommand
    | AddCommand
    | DeleteCommand
    | MarkCommand
    | UnmarkCommand
    | FindCommand
    | ExitCommand
)


def is_exit(command: Command) -> bool:
    return isinstance(command, ExitCommand)


def _count(tasks: TaskList) -> str:
    noun = "task" if len(tasks) == 1 else "tasks"
    return f"Now you have {len(tasks)} {noun} in the list."


def _enumerate(tasks: list[Task]) -> str:
    return "\n".join(f"{i}.{task}" for i, task in enumerate(tasks, start=1))


def _index_for(number: int, tasks: TaskList) -> int:
    """Convert a 1-based task number to a list index, checking bounds."""
    if number < 1 or number > len(tasks):
        raise TaskIndexError(
            f"Task number {number} is invalid. "
            f"Please choose a number between 1 and {len(tasks)}."
            if tasks
            else f"Task number {number} is invalid. Your task list is empty."
        )
    return number - 1


def execute(command: Command, tasks: TaskList, store: "TaskStore") -> str:
    """
    Apply a command to the task list and return the response text.

    Mutating commands save the whole list through the store after the change.
    A StoreError from the save propagates; the in-memory change is kept.
    Raises TaskIndexError for task numbers outside the list.
    """
    match command:
        case ListCommand():
            if tasks.is_empty():
                return "Your task list is empty."
            return "Here are the tasks in your list:\n" + _enumerate(list(tasks))

        case AddCommand(task=task):
            tasks.add(task)
            store.save(tasks)
            return f"Got it. I've added this task:\n  {task}\n{_count(tasks)}"

        case DeleteCommand(number=number):
            removed = tasks.delete_at(_index_for(number, tasks))
            store.save(tasks)
            return f"Noted. I've removed this task:\n  {removed}\n{_count(tasks)}"

        case MarkCommand(number=number):
            task = tasks.mark_at(_index_for(number, tasks))
            store.save(tasks)
            return f"Nice! I've marked this task as done:\n  {task}"

        case UnmarkCommand(number=number):
            task = tasks.unmark_at(_index_for(number, tasks))
            store.save(tasks)
            return f"OK, I've marked this task as not done yet:\n  {task}"

        case FindCommand(keyword=keyword):
            matches = tasks.find(keyword)
            if not matches:
                return f"No tasks found matching the keyword: {keyword}"
            return "Here are the matching tasks in your list:\n" + _enumerate(matches)

        case ExitCommand():
            return FAREWELL

    raise TypeError(f"Not a command: {command!r}")
