"""Add, list, search, edit, delete, tag filter and history view."""

from __future__ import annotations

from ..constants import (
    MSG_NO_HISTORY,
    MSG_NO_MATCHES,
    MSG_NO_SNIPPETS,
    MSG_NO_TAG_MATCHES,
)
from ..errors import SnippetError
from ..log import logger
from ..models import Snippet


class SnippetCommandsMixin:
    """Menu actions that work on the in-memory catalog and history."""

    def _cmd_add(self) -> None:
        title = self._ask("Enter a title for the snippet: ")
        if title in self.catalog:
            self._warn("A snippet with this title already exists.")
            return
        code = self._ask("Enter the code for the snippet: ")
        tags_text = self._ask("Enter tags (comma-separated): ")
        try:
            self.catalog.insert(title, code, tags_text)
        except SnippetError as e:
            self._warn(str(e))
            return
        self.history.record_added(title)
        logger.info("added snippet %r", title)
        self._success("Snippet added successfully!")

    def _cmd_list(self) -> None:
        if self.catalog.is_empty:
            self._warn(MSG_NO_SNIPPETS)
            return
        self._header("Available Snippets")
        for snippet in self.catalog:
            self._echo(f"- {snippet.title} (Tags: {snippet.tags_display})")
        self._rule()

    def _cmd_search(self) -> None:
        query = self._ask("Enter a keyword to search for: ")
        results = self.catalog.search(query)
        if not results:
            self._warn(MSG_NO_MATCHES)
            return
        self._header("Search Results")
        for snippet in results:
            self._print_snippet(snippet)
        self._rule()

    def _cmd_edit(self) -> None:
        """Overwrite code and/or tags; a blank answer keeps the current value."""
        title = self._ask("Enter the title of the snippet to edit: ")
        if title not in self.catalog:
            self._warn("Snippet not found.")
            return
        self._echo(f"Editing snippet: {title}")
        new_code = self._ask("Enter the new code (leave empty to keep current): ")
        new_tags = self._ask(
            "Enter new tags (comma-separated, leave empty to keep current): "
        )
        try:
            self.catalog.update(title, code=new_code, tags_text=new_tags)
        except SnippetError as e:
            self._warn(str(e))
            return
        self.history.record_edited(title)
        logger.info("edited snippet %r", title)
        self._success("Snippet updated successfully!")

    def _cmd_delete(self) -> None:
        title = self._ask("Enter the title of the snippet to delete: ")
        try:
            self.catalog.remove(title)
        except SnippetError as e:
            self._warn(str(e))
            return
        self.history.record_deleted(title)
        logger.info("deleted snippet %r", title)
        self._success("Snippet deleted successfully.")

    def _cmd_list_by_tag(self) -> None:
        tag = self._ask("Enter a tag to filter by: ")
        results = self.catalog.filter_by_tag(tag)
        if not results:
            self._warn(MSG_NO_TAG_MATCHES)
            return
        self._header(f"Snippets with tag: {tag.lower()}")
        for snippet in results:
            self._print_snippet(snippet)
        self._rule()

    def _cmd_history(self) -> None:
        if self.history.is_empty:
            self._warn(MSG_NO_HISTORY)
            return
        self._header("Action History")
        for action in self.history.entries:
            self._echo(f"- {action}")
        self._rule()

    # -- output helpers -------------------------------------------------

    def _print_snippet(self, snippet: Snippet) -> None:
        self._echo(
            f"Title: {snippet.title}\n"
            f"Code:\n{snippet.code}\n"
            f"Tags: {snippet.tags_display}\n"
        )
