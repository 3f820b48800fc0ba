"""Append-only action history."""

from __future__ import annotations


class ActionHistory:
    """Chronological list of human-readable action descriptions.

    Entries are only ever appended; there is no pruning and no timestamping.
    Persisted by ``HistoryFileStore`` at clean exit.
    """

    def __init__(self, entries: list[str] | None = None) -> None:
        self._entries: list[str] = list(entries or [])  # oldest first

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def append(self, message: str) -> None:
        self._entries.append(message)

    def record_added(self, title: str) -> None:
        self.append(f"Added snippet: {title}")

    def record_edited(self, title: str) -> None:
        self.append(f"Edited snippet: {title}")

    def record_deleted(self, title: str) -> None:
        self.append(f"Deleted snippet: {title}")

    def record_imported(self, file_name: str) -> None:
        self.append(f"Imported snippets from file: {file_name}")
