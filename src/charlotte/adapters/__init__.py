"""Adapters - I/O implementations of ports."""

from .file_store import FileTaskStore

__all__ = [
    "FileTaskStore",
]
