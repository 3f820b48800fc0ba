"""In-memory snippet catalog keyed by title."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .errors import DuplicateSnippetError, SnippetNotFoundError
from .models import Snippet, parse_tags


class SnippetCatalog:
    """Title-to-snippet mapping with lookup, search and tag filtering.

    Every key equals its snippet's ``title``.
    """

    def __init__(self, snippets: Mapping[str, Snippet] | None = None) -> None:
        self._snippets: dict[str, Snippet] = {}
        if snippets:
            self.merge(snippets)

    def __len__(self) -> int:
        return len(self._snippets)

    def __contains__(self, title: object) -> bool:
        return title in self._snippets

    def __iter__(self) -> Iterator[Snippet]:
        return iter(list(self._snippets.values()))

    @property
    def is_empty(self) -> bool:
        return not self._snippets

    def snapshot(self) -> dict[str, Snippet]:
        """Return a shallow copy of the mapping, for saving or exporting."""
        return dict(self._snippets)

    # -- mutation ---------------------------------------------------------------

    def insert(self, title: str, code: str, tags_text: str) -> Snippet:
        """Add a new snippet. Raises ``DuplicateSnippetError`` if *title* exists."""
        if title in self._snippets:
            raise DuplicateSnippetError(title)
        snippet = Snippet(title=title, code=code.strip(), tags=parse_tags(tags_text))
        self._snippets[title] = snippet
        return snippet

    def get(self, title: str) -> Snippet:
        try:
            return self._snippets[title]
        except KeyError:
            raise SnippetNotFoundError(title) from None

    def update(
        self,
        title: str,
        code: str | None = None,
        tags_text: str | None = None,
    ) -> Snippet:
        """Replace the fields that were given a non-blank value; keep the rest."""
        snippet = self.get(title)
        if code is not None and code.strip():
            snippet.code = code.strip()
        if tags_text is not None and tags_text.strip():
            snippet.tags = parse_tags(tags_text)
        return snippet

    def remove(self, title: str) -> Snippet:
        try:
            return self._snippets.pop(title)
        except KeyError:
            raise SnippetNotFoundError(title) from None

    def merge(self, incoming: Mapping[str, Snippet]) -> int:
        """Copy *incoming* in, overwriting snippets with the same title."""
        for snippet in incoming.values():
            self._snippets[snippet.title] = snippet
        return len(incoming)

    # -- queries ----------------------------------------------------------------

    def search(self, query: str) -> list[Snippet]:
        """Case-insensitive substring match on title, code or any tag."""
        q = query.lower()
        return [
            s
            for s in self._snippets.values()
            if q in s.title.lower()
            or q in s.code.lower()
            or any(q in tag.lower() for tag in s.tags)
        ]

    def filter_by_tag(self, tag: str) -> list[Snippet]:
        """Case-insensitive exact match against any tag."""
        wanted = tag.lower()
        return [
            s for s in self._snippets.values() if any(t.lower() == wanted for t in s.tags)
        ]
