"""Command handler mixins for SnippetShell."""

from .export_cmds import ExportCommandsMixin
from .snippet_cmds import SnippetCommandsMixin

__all__ = [
    "ExportCommandsMixin",
    "SnippetCommandsMixin",
]
