"""Tests for snippet_manager.models."""

from __future__ import annotations

import pytest

from snippet_manager.models import Snippet, parse_tags


class TestParseTags:
    def test_trims_each_tag(self):
        assert parse_tags(" rust , collections,io ") == ["rust", "collections", "io"]

    def test_keeps_duplicates_and_empty_pieces(self):
        assert parse_tags("a,,a") == ["a", "", "a"]

    def test_empty_input_gives_single_empty_tag(self):
        assert parse_tags("") == [""]

    def test_single_tag(self):
        assert parse_tags("python") == ["python"]


class TestSnippet:
    def test_to_dict(self):
        s = Snippet(title="t", code="c", tags=["x"])
        assert s.to_dict() == {"title": "t", "code": "c", "tags": ["x"]}

    def test_from_dict_ignores_extra_keys(self):
        s = Snippet.from_dict(
            {"title": "t", "code": "c", "tags": ["x"], "created": "2026-01-01"}
        )
        assert s == Snippet(title="t", code="c", tags=["x"])

    @pytest.mark.parametrize(
        "obj",
        [
            "not a dict",
            {"title": "t", "code": "c"},
            {"title": "t", "tags": []},
            {"title": 1, "code": "c", "tags": []},
            {"title": "t", "code": "c", "tags": "x"},
            {"title": "t", "code": "c", "tags": ["x", 2]},
        ],
    )
    def test_from_dict_rejects_malformed(self, obj):
        with pytest.raises(ValueError):
            Snippet.from_dict(obj)

    def test_tags_display(self):
        assert Snippet("t", "c", ["a", "b"]).tags_display == "a, b"
