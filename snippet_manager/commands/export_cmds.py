"""Export and import of snippet files."""

from __future__ import annotations

from ..log import logger
from ..persistence import SnippetFileStore


class ExportCommandsMixin:
    """Copy the collection to and from user-named files."""

    def _cmd_export(self) -> None:
        """Write the whole collection to a file, overwriting it.

        Write failures raise ``StorageError`` and end the session.
        """
        file_name = self._ask("Enter the file name to export snippets: ")
        SnippetFileStore(file_name).save(self.catalog.snapshot())
        logger.info("exported %d snippet(s) to %s", len(self.catalog), file_name)
        self._success("Snippets exported successfully.")

    def _cmd_import(self) -> None:
        """Merge a snippet file into the catalog (same title = replaced).

        A missing or malformed file imports nothing, silently.
        """
        file_name = self._ask("Enter the file name to import snippets: ")
        imported = SnippetFileStore(file_name).load()
        count = self.catalog.merge(imported)
        self.history.record_imported(file_name)
        logger.info("imported %d snippet(s) from %s", count, file_name)
        self._success("Snippets imported successfully.")
