"""Interpreter session shared between the CLI and Telegram front ends.

A front end feeds raw lines to Session.handle and renders the Reply text;
Reply.exit tells it to stop reading.
"""

import logging
from dataclasses import dataclass

from .adapters.file_store import FileTaskStore
from .config import Config
from .core.commands import execute, is_exit
from .core.errors import CharlotteError, StoreError
from .core.parser import parse
from .core.records import LoadResult
from .core.task_list import TaskList
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)

GREETING = "Hello! I'm Charlotte!\nWhat can I do for you?"


@dataclass
class Reply:
    """Response to one line of input."""

    text: str
    exit: bool = False
    error: bool = False


class Session:
    """Owns the task list for one run and threads it through each command."""

    def __init__(self, store: TaskStore, tasks: TaskList | None = None, notice: str = ""):
        self.store = store
        self.tasks = tasks if tasks is not None else TaskList()
        self.notice = notice
        self.last_load: LoadResult | None = None

    @classmethod
    def open(cls, store: TaskStore) -> "Session":
        """Start a session from the store's saved tasks, or empty if there are none."""
        try:
            result = store.load()
        except StoreError as e:
            logger.warning(f"Could not load tasks, starting empty: {e}")
            return cls(store, notice=f"{e}\nStarting with an empty task list.")

        if not result.found:
            notice = "No existing data file found. Starting with an empty task list."
        elif result.skipped:
            notice = f"Skipped {result.skipped_count} unreadable line(s) in the data file."
        else:
            notice = ""

        session = cls(store, TaskList(result.tasks), notice=notice)
        session.last_load = result
        return session

    def greeting(self) -> str:
        if self.notice:
            return f"{GREETING}\n{self.notice}"
        return GREETING

    def handle(self, raw_line: str) -> Reply:
        """Parse and run one command; domain errors become error replies."""
        try:
            command = parse(raw_line)
            text = execute(command, self.tasks, self.store)
        except CharlotteError as e:
            logger.info(f"Command {raw_line!r} failed: {e}")
            return Reply(text=str(e), error=True)

        return Reply(text=text, exit=is_exit(command))


def open_session(config: Config) -> Session:
    """Open a session backed by the configured data file."""
    return Session.open(FileTaskStore(config.data_path()))
