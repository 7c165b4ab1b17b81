"""Shared fixtures."""

import pytest

from charlotte.adapters.file_store import FileTaskStore
from charlotte.core.errors import StoreError
from charlotte.core.records import LoadResult


class FailingStore:
    """Store whose saves always fail, as when the data directory cannot be created."""

    def __init__(self):
        self.save_calls = 0

    def load(self) -> LoadResult:
        return LoadResult(found=False)

    def save(self, tasks) -> None:
        self.save_calls += 1
        raise StoreError("Failed to create directory: /nope")


class RecordingStore:
    """In-memory store that remembers every save."""

    def __init__(self, tasks=None):
        self.tasks = list(tasks or [])
        self.saves: list[list] = []

    def load(self) -> LoadResult:
        return LoadResult(tasks=list(self.tasks), found=True)

    def save(self, tasks) -> None:
        self.saves.append(list(tasks))


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "charlotte.txt"


@pytest.fixture
def store(data_file):
    return FileTaskStore(data_file)


@pytest.fixture
def recording_store():
    return RecordingStore()


@pytest.fixture
def failing_store():
    return FailingStore()
