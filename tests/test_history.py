"""Tests for snippet_manager.history -- ActionHistory append and message formats."""

from __future__ import annotations

from snippet_manager.history import ActionHistory


class TestActionHistory:
    def test_starts_empty(self):
        hist = ActionHistory()
        assert hist.is_empty
        assert hist.entry_count == 0
        assert hist.entries == []

    def test_loaded_entries_kept_in_order(self):
        hist = ActionHistory(["one", "two"])
        hist.append("three")
        assert hist.entries == ["one", "two", "three"]

    def test_entries_is_a_copy(self):
        hist = ActionHistory(["one"])
        hist.entries.append("sneaky")
        assert hist.entries == ["one"]

    def test_does_not_alias_initial_list(self):
        initial = ["one"]
        hist = ActionHistory(initial)
        hist.append("two")
        assert initial == ["one"]

    def test_duplicates_allowed(self):
        hist = ActionHistory()
        hist.record_added("X")
        hist.record_added("X")
        assert hist.entry_count == 2

    def test_message_formats(self):
        hist = ActionHistory()
        hist.record_added("X")
        hist.record_edited("X")
        hist.record_deleted("X")
        hist.record_imported("backup.json")
        assert hist.entries == [
            "Added snippet: X",
            "Edited snippet: X",
            "Deleted snippet: X",
            "Imported snippets from file: backup.json",
        ]
