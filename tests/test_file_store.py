"""Tests for the flat-file task store."""

import logging

import pytest

from charlotte.adapters.file_store import FileTaskStore
from charlotte.core.commands import execute
from charlotte.core.errors import StoreError, ValidationError
from charlotte.core.parser import parse
from charlotte.core.task_list import TaskList
from charlotte.core.tasks import Deadline, Event, ToDo


@pytest.fixture
def sample_tasks():
    return [
        ToDo("read book", is_done=True),
        Deadline("submit report", "Friday"),
        Event("project meetup", "Mon 2pm", "4pm"),
    ]


class TestLoad:
    def test_missing_file_is_not_an_error(self, store):
        result = store.load()
        assert result.found is False
        assert result.tasks == []

    def test_reads_records(self, data_file, store):
        data_file.parent.mkdir(parents=True)
        data_file.write_text("T | 0 | read book\nD | 1 | submit report | Friday\n", encoding="utf-8")

        result = store.load()

        assert result.found is True
        assert result.tasks == [ToDo("read book"), Deadline("submit report", "Friday", is_done=True)]

    def test_skips_malformed_line(self, data_file, store, caplog):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(
            "T | 0 | read book\n"
            "this is not a task\n"
            "E | 0 | meetup | Mon to Tue\n",
            encoding="utf-8",
        )

        with caplog.at_level(logging.WARNING, logger="charlotte.adapters.file_store"):
            result = store.load()

        assert [t.description for t in result.tasks] == ["read book", "meetup"]
        assert result.skipped_count == 1
        assert result.skipped[0].line_number == 2
        assert "Skipping line 2" in caplog.text

    def test_windows_line_endings(self, data_file, store):
        data_file.parent.mkdir(parents=True)
        data_file.write_bytes(b"T | 0 | read book\r\nT | 1 | buy milk\r\n")
        assert [t.description for t in store.load().tasks] == ["read book", "buy milk"]

    def test_undecodable_file(self, data_file, store):
        data_file.parent.mkdir(parents=True)
        data_file.write_bytes(b"T | 0 | \xff\xfe\n")
        with pytest.raises(StoreError):
            store.load()


class TestSave:
    def test_creates_directories_and_file(self, data_file, store, sample_tasks):
        store.save(sample_tasks)
        assert data_file.read_text(encoding="utf-8") == (
            "T | 1 | read book\n"
            "D | 0 | submit report | Friday\n"
            "E | 0 | project meetup | Mon 2pm to 4pm\n"
        )

    def test_overwrites_instead_of_appending(self, data_file, store, sample_tasks):
        store.save(sample_tasks)
        store.save(sample_tasks[:1])
        assert data_file.read_text(encoding="utf-8") == "T | 1 | read book\n"

    def test_empty_list_empties_file(self, data_file, store, sample_tasks):
        store.save(sample_tasks)
        store.save([])
        assert data_file.read_text(encoding="utf-8") == ""
        assert store.load().tasks == []

    def test_round_trip(self, store, sample_tasks):
        store.save(sample_tasks)
        assert store.load().tasks == sample_tasks

    def test_round_trip_keeps_embedded_spaces(self, store):
        tasks = [ToDo("buy   milk"), Event("trip", "Mon", "Tue to Wed")]
        store.save(tasks)
        assert store.load().tasks == tasks

    def test_directory_creation_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file where a directory should be")
        store = FileTaskStore(blocker / "data" / "charlotte.txt")

        with pytest.raises(StoreError, match="Failed to create directory"):
            store.save([ToDo("read book")])

    def test_expands_user(self):
        store = FileTaskStore("~/tasks.txt")
        assert "~" not in str(store.path)


class TestSeparatorsAtFieldEdges:
    def test_event_start_ending_in_to_is_rejected_before_saving(self, store):
        tasks = TaskList()
        with pytest.raises(ValidationError, match="start of an event cannot end with ' to'"):
            execute(parse("event trip /from Mon up to /to Wed"), tasks, store)
        assert len(tasks) == 0
        assert store.load().found is False

    def test_description_ending_in_pipe_is_rejected_before_saving(self, store):
        tasks = TaskList()
        with pytest.raises(ValidationError, match=r"description of a deadline cannot end with ' \|'"):
            execute(parse("deadline pay A | /by Friday"), tasks, store)
        assert len(tasks) == 0
        assert store.load().found is False

    def test_near_separators_round_trip(self, store):
        tasks = [
            Deadline("pay A|B", "Friday |"),
            Event("trip |x", "Mon upto", "to Wed"),
            Event("a|", "to Mon", "Tue to"),
            ToDo("ends with |"),
        ]
        store.save(tasks)
        assert store.load().tasks == tasks
