"""Interactive menu shell."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from .catalog import SnippetCatalog
from .commands import ExportCommandsMixin, SnippetCommandsMixin
from .constants import GOODBYE, MENU_HANDLERS, MENU_OPTIONS, MSG_INVALID_CHOICE
from .history import ActionHistory
from .log import logger
from .persistence import HistoryFileStore, SnippetFileStore


class SnippetShell(SnippetCommandsMixin, ExportCommandsMixin):
    """Menu loop that owns the catalog, the history and terminal I/O.

    Handlers get the catalog and history through ``self`` for the duration of
    one menu action. Nothing is written to disk until option 10.
    """

    def __init__(
        self,
        catalog: SnippetCatalog,
        history: ActionHistory,
        snippet_store: SnippetFileStore,
        history_store: HistoryFileStore,
        *,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
        clear_screen: bool = True,
    ) -> None:
        self.catalog = catalog
        self.history = history
        self.snippet_store = snippet_store
        self.history_store = history_store
        self.console = console or Console(highlight=False, emoji=False)
        self._read_line = read_line or self.console.input
        self._clear_screen = clear_screen

    # -- loop -----------------------------------------------------------

    def run(self) -> None:
        """Show the menu and dispatch choices until option 10 exits.

        ``EOFError`` and ``KeyboardInterrupt`` from the line reader propagate
        without saving.
        """
        while True:
            self.display_menu()
            self.dispatch(self._ask("Choose an option: "))

    def dispatch(self, choice: str) -> None:
        handler_name = MENU_HANDLERS.get(choice.strip())
        if handler_name is None:
            self._warn(MSG_INVALID_CHOICE)
            return
        logger.debug("menu choice %s -> %s", choice, handler_name)
        getattr(self, handler_name)()

    def display_menu(self) -> None:
        if self._clear_screen:
            self.console.clear()
        self.console.print("\n[bold]=== Main Menu ===[/bold]")
        for choice, label, _ in MENU_OPTIONS:
            self.console.print(f"{choice}) {label}")
        self.console.print("=================")

    # -- persistence ----------------------------------------------------

    def save(self) -> None:
        """Write the collection, then the history. Raises ``StorageError``."""
        self.snippet_store.save(self.catalog.snapshot())
        self._success("Snippets saved successfully.")
        self.history_store.save(self.history.entries)

    def _cmd_exit(self) -> None:
        self.save()
        self.console.print(GOODBYE)
        raise SystemExit(0)

    # -- I/O helpers ----------------------------------------------------

    def _ask(self, prompt: str) -> str:
        """Read one line and strip surrounding whitespace."""
        return self._read_line(prompt).strip()

    def _echo(self, text: str) -> None:
        """Print user-supplied text literally, without markup, emoji or wrapping."""
        self.console.print(
            text, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def _warn(self, message: str) -> None:
        self.console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def _success(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]")

    def _header(self, title: str) -> None:
        self.console.print(
            f"\n[bold]=== {escape(title)} ===[/bold]", emoji=False, soft_wrap=True
        )

    def _rule(self) -> None:
        self.console.print("==========================")
