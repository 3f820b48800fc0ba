"""Snippet collection persistence store."""

from __future__ import annotations

from pathlib import Path

from ..log import logger
from ..models import Snippet
from ._base import JsonStore

DEFAULT_SNIPPETS_FILE = "snippets.json"


class SnippetFileStore(JsonStore):
    """Snippet collection (``{title: {title, code, tags}}``).

    Also used for export and import files, which share the same layout.
    """

    def __init__(self, path: Path | str = DEFAULT_SNIPPETS_FILE) -> None:
        super().__init__(path)

    def load(self) -> dict[str, Snippet]:
        """Load the collection, or an empty one if the file is missing or malformed.

        A single bad entry discards the whole file, mirroring a failed decode.
        """
        raw = self.load_raw()
        if not isinstance(raw, dict):
            logger.debug("ignoring %s: top-level value is not an object", self.path)
            return {}
        snippets: dict[str, Snippet] = {}
        try:
            for value in raw.values():
                snippet = Snippet.from_dict(value)
                snippets[snippet.title] = snippet
        except ValueError:
            logger.debug("ignoring %s: malformed snippet entry", self.path, exc_info=True)
            return {}
        logger.info("loaded %d snippet(s) from %s", len(snippets), self.path)
        return snippets

    def save(self, snippets: dict[str, Snippet]) -> None:
        """Persist *snippets* to disk."""
        self.save_raw({title: s.to_dict() for title, s in snippets.items()})
        logger.info("saved %d snippet(s) to %s", len(snippets), self.path)
