"""Tests for text utility functions."""

from __future__ import annotations

from docindexer.utils.text import normalize_whitespace


class TestNormalizeWhitespace:
    """Test normalize_whitespace function."""

    def test_strips_and_joins(self) -> None:
        assert normalize_whitespace(["  Line 1  ", "Line 2\t"]) == "Line 1\nLine 2"

    def test_drops_blank_lines(self) -> None:
        assert normalize_whitespace(["Line 1", "", "  ", "\n", "Line 2"]) == "Line 1\nLine 2"

    def test_all_blank(self) -> None:
        assert normalize_whitespace(["", "  ", "\t"]) == ""

    def test_accepts_generators(self) -> None:
        parts = (part for part in ["Header", "", "Cell"])
        assert normalize_whitespace(parts) == "Header\nCell"

    def test_inner_spacing_kept(self) -> None:
        assert normalize_whitespace(["  Hello   World  "]) == "Hello   World"
