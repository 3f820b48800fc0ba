"""Entry point for the snippet manager."""

from __future__ import annotations

import sys

from rich.console import Console

from .app import SnippetShell
from .catalog import SnippetCatalog
from .constants import WELCOME
from .errors import StorageError
from .history import ActionHistory
from .log import configure_logging, logger
from .persistence import HistoryFileStore, SnippetFileStore
from .preferences import load_preferences


def build_shell(console: Console | None = None) -> SnippetShell:
    """Load preferences and both data files, and wire up the shell."""
    prefs = load_preferences()
    try:
        configure_logging(prefs.logging.level, prefs.logging.file)
    except OSError as e:
        print(
            f"Warning: cannot open log file, file logging disabled: {e}",
            file=sys.stderr,
        )

    snippet_store = SnippetFileStore(prefs.storage.snippets_file)
    history_store = HistoryFileStore(prefs.storage.history_file)
    return SnippetShell(
        SnippetCatalog(snippet_store.load()),
        ActionHistory(history_store.load()),
        snippet_store,
        history_store,
        console=console,
        clear_screen=prefs.display.clear_screen,
    )


def main() -> None:
    """Run the interactive menu. Takes no command-line arguments."""
    console = Console(highlight=False, emoji=False)
    shell = build_shell(console)
    console.print(f"[bold]{WELCOME}[/bold]")
    try:
        shell.run()
    except StorageError as e:
        logger.error("fatal write failure: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("interrupted, exiting without saving")
        sys.exit(130)
    except EOFError:
        logger.info("end of input, exiting without saving")
        sys.exit(1)


if __name__ == "__main__":
    main()
