"""Action history persistence store."""

from __future__ import annotations

from pathlib import Path

from ..log import logger
from ._base import JsonStore

DEFAULT_HISTORY_FILE = "history.log"


class HistoryFileStore(JsonStore):
    """Action history (``["Added snippet: x", ...]``), oldest first."""

    def __init__(self, path: Path | str = DEFAULT_HISTORY_FILE) -> None:
        super().__init__(path)

    def _default(self) -> list:  # noqa: PLR6301
        return []

    def load(self) -> list[str]:
        """Load recorded actions, reading the older ``{"actions": [...]}`` layout too."""
        raw = self._migrate(self.load_raw())
        if not isinstance(raw, list) or not all(isinstance(a, str) for a in raw):
            logger.debug("ignoring %s: not a list of strings", self.path)
            return []
        return raw

    def save(self, actions: list[str]) -> None:
        """Persist *actions* to disk."""
        self.save_raw(list(actions))
        logger.info("saved %d history entries to %s", len(actions), self.path)

    # -- migration ------------------------------------------------------------

    @staticmethod
    def _migrate(data: dict | list) -> dict | list:
        """Unwrap ``{"actions": [...]}`` into a bare list."""
        if isinstance(data, dict) and isinstance(data.get("actions"), list):
            return data["actions"]
        return data
