"""Exception types.

User errors (``SnippetError`` subclasses) are reported as warnings and leave
the catalog untouched. ``StorageError`` means a file could not be written and
ends the process.
"""

from __future__ import annotations


class SnippetError(Exception):
    """Base class for recoverable catalog errors."""


class DuplicateSnippetError(SnippetError):
    def __init__(self, title: str) -> None:
        super().__init__("A snippet with this title already exists.")
        self.title = title


class SnippetNotFoundError(SnippetError):
    def __init__(self, title: str) -> None:
        super().__init__("Snippet not found.")
        self.title = title


class StorageError(Exception):
    """Raised when a data or export file cannot be created or written."""

    def __init__(self, path, cause: OSError) -> None:
        super().__init__(f"Cannot write {path}: {cause}")
        self.path = path
        self.cause = cause
