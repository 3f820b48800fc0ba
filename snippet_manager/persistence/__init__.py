"""Persistence layer – each store owns its file path, data format, and I/O."""

from ._base import JsonStore
from .history import DEFAULT_HISTORY_FILE, HistoryFileStore
from .snippets import DEFAULT_SNIPPETS_FILE, SnippetFileStore

__all__ = [
    "DEFAULT_HISTORY_FILE",
    "DEFAULT_SNIPPETS_FILE",
    "HistoryFileStore",
    "JsonStore",
    "SnippetFileStore",
]
