"""User preferences for the snippet manager.

Loads settings from ``.snippet-manager.yaml`` in the working directory.
Falls back to defaults if the file doesn't exist or is invalid. Unlike the
data files, this file is never written by the program.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .log import logger
from .persistence import DEFAULT_HISTORY_FILE, DEFAULT_SNIPPETS_FILE

PREFS_FILE = ".snippet-manager.yaml"

# Example contents, for reference:
#
# storage:
#   snippets_file: snippets.json
#   history_file: history.log
# display:
#   clear_screen: true           # clear the terminal before each menu
# logging:
#   level: WARNING
#   file: ""                     # empty = no log file


@dataclass
class StoragePreferences:
    """Where the collection and the action history live."""

    snippets_file: Path = Path(DEFAULT_SNIPPETS_FILE)
    history_file: Path = Path(DEFAULT_HISTORY_FILE)


@dataclass
class DisplayPreferences:
    clear_screen: bool = True


@dataclass
class LoggingPreferences:
    level: str = "WARNING"
    file: Path | None = None


@dataclass
class Preferences:
    """Top-level preferences."""

    storage: StoragePreferences = field(default_factory=StoragePreferences)
    display: DisplayPreferences = field(default_factory=DisplayPreferences)
    logging: LoggingPreferences = field(default_factory=LoggingPreferences)


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to defaults, key by key, if the file doesn't exist or holds
    unexpected values.
    """
    path = path or Path(PREFS_FILE)
    prefs = Preferences()

    if not path.exists():
        return prefs
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        logger.debug("failed to read preferences from %s", path, exc_info=True)
        return prefs
    if not isinstance(data, dict):
        return prefs

    if isinstance(data.get("storage"), dict):
        sdata = data["storage"]
        if sdata.get("snippets_file"):
            prefs.storage.snippets_file = Path(str(sdata["snippets_file"])).expanduser()
        if sdata.get("history_file"):
            prefs.storage.history_file = Path(str(sdata["history_file"])).expanduser()
    if isinstance(data.get("display"), dict):
        ddata = data["display"]
        if isinstance(ddata.get("clear_screen"), bool):
            prefs.display.clear_screen = ddata["clear_screen"]
    if isinstance(data.get("logging"), dict):
        ldata = data["logging"]
        if ldata.get("level"):
            prefs.logging.level = str(ldata["level"]).upper()
        if ldata.get("file"):
            prefs.logging.file = Path(str(ldata["file"])).expanduser()

    return prefs
