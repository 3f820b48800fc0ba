"""Menu layout and user-facing text."""

from __future__ import annotations

# (choice, label, handler method) in display order.
MENU_OPTIONS: tuple[tuple[str, str, str], ...] = (
    ("1", "Add a snippet", "_cmd_add"),
    ("2", "List all snippets", "_cmd_list"),
    ("3", "Search snippets", "_cmd_search"),
    ("4", "Edit a snippet", "_cmd_edit"),
    ("5", "Delete a snippet", "_cmd_delete"),
    ("6", "List snippets by tag", "_cmd_list_by_tag"),
    ("7", "Export snippets to file", "_cmd_export"),
    ("8", "Import snippets from file", "_cmd_import"),
    ("9", "View action history", "_cmd_history"),
    ("10", "Exit", "_cmd_exit"),
)

MENU_HANDLERS: dict[str, str] = {choice: handler for choice, _, handler in MENU_OPTIONS}

WELCOME = "Welcome to the Snippet Manager!"
GOODBYE = "Goodbye!"

MSG_INVALID_CHOICE = "Invalid choice. Please try again."
MSG_NO_SNIPPETS = "No snippets available."
MSG_NO_MATCHES = "No matching snippets found."
MSG_NO_TAG_MATCHES = "No snippets found with this tag."
MSG_NO_HISTORY = "No actions recorded."
