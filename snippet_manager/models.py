"""Snippet data model."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


def parse_tags(text: str) -> list[str]:
    """Split comma-separated *text* into trimmed tags.

    Duplicates and empty pieces are kept: ``"a,,a"`` gives ``["a", "", "a"]``.
    """
    return [piece.strip() for piece in text.split(",")]


@dataclass
class Snippet:
    """A titled block of code with its tags."""

    title: str
    code: str
    tags: list[str] = field(default_factory=list)

    @staticmethod
    def from_dict(obj: Any) -> "Snippet":
        """Build a snippet from decoded JSON, raising ``ValueError`` if malformed."""
        if not isinstance(obj, dict):
            raise ValueError(f"snippet entry must be an object, got {type(obj).__name__}")
        title = obj.get("title")
        code = obj.get("code")
        tags = obj.get("tags")
        if not isinstance(title, str) or not isinstance(code, str):
            raise ValueError("snippet entry needs string 'title' and 'code'")
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError("snippet 'tags' must be a list of strings")
        return Snippet(title=title, code=code, tags=list(tags))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def tags_display(self) -> str:
        return ", ".join(self.tags)
