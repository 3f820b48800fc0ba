"""Shared test fixtures for the snippet-manager test suite."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from snippet_manager.app import SnippetShell
from snippet_manager.catalog import SnippetCatalog
from snippet_manager.history import ActionHistory
from snippet_manager.models import Snippet
from snippet_manager.persistence import HistoryFileStore, SnippetFileStore


@pytest.fixture
def sample_snippets() -> dict[str, Snippet]:
    return {
        "HashMap Example": Snippet(
            title="HashMap Example",
            code="let mut m = HashMap::new();",
            tags=["Collections", "rust"],
        ),
        "read file": Snippet(
            title="read file",
            code='with open(path) as f:\n    data = f.read()',
            tags=["python", "io"],
        ),
    }


class ScriptedInput:
    """Line reader that answers prompts from a fixed list of lines."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._lines)


@pytest.fixture
def make_shell(tmp_path: Path):
    """Build a ``SnippetShell`` over files in *tmp_path* with scripted input.

    Returns ``(shell, output)``; ``output.getvalue()`` holds everything printed.
    """

    def _make(
        lines: list[str],
        snippets: dict[str, Snippet] | None = None,
        actions: list[str] | None = None,
    ) -> tuple[SnippetShell, io.StringIO]:
        output = io.StringIO()
        shell = SnippetShell(
            SnippetCatalog(snippets),
            ActionHistory(actions),
            SnippetFileStore(tmp_path / "snippets.json"),
            HistoryFileStore(tmp_path / "history.log"),
            console=Console(file=output, highlight=False),
            read_line=ScriptedInput(lines),
            clear_screen=False,
        )
        return shell, output

    return _make
