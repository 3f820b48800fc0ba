"""Base JSON persistence store."""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import StorageError
from ..log import logger


class JsonStore:
    """Pretty-printed JSON file store.

    Reads fail soft: a missing, unreadable or undecodable file yields
    ``_default()``. Writes fail hard: any ``OSError`` is raised as
    ``StorageError``. Subclasses override ``_default()`` to provide the
    empty-state value (``{}`` for dicts, ``[]`` for lists).
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> dict | list:
        """Read and parse the JSON file, returning ``_default()`` on any error."""
        try:
            if self.path.exists():
                return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.debug("failed to load JSON store from %s", self.path, exc_info=True)
        return self._default()

    def save_raw(self, data: dict | list) -> None:
        """Write *data* as pretty-printed JSON, replacing any existing file.

        Parent directories are not created; a missing directory is a write
        failure like any other.
        """
        try:
            self.path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as exc:
            logger.error("failed to write %s: %s", self.path, exc)
            raise StorageError(self.path, exc) from exc

    # -- override point -------------------------------------------------------

    def _default(self) -> dict | list:  # noqa: PLR6301
        """Return the empty-state value for this store (dict by default)."""
        return {}
