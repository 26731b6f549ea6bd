"""Tests for data models."""

from __future__ import annotations

from pathlib import Path

import pytest

from docindexer.models import (
    Batch,
    Candidate,
    DetectedType,
    ExtractionOutcome,
    IndexStats,
    SearchDocument,
)


class TestCandidate:
    def test_from_path(self, tmp_path: Path) -> None:
        path = tmp_path / "a.pdf"
        path.write_bytes(b"12345")

        candidate = Candidate.from_path(path)

        assert candidate.path == path
        assert candidate.size == 5
        assert candidate.modified == path.stat().st_mtime

    def test_from_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            Candidate.from_path(tmp_path / "missing.pdf")


class TestExtractionOutcome:
    def test_succeeded(self) -> None:
        outcome = ExtractionOutcome.succeeded("text")
        assert outcome.ok
        assert outcome.error is None

    def test_failed(self) -> None:
        outcome = ExtractionOutcome.failed("boom")
        assert not outcome.ok
        assert outcome.text is None
        assert outcome.error == "boom"


class TestSearchDocument:
    def test_to_dict(self) -> None:
        document = SearchDocument(
            id="abc",
            filename="a.pdf",
            url="file:///tmp/a.pdf",
            content="Hello",
            created=None,
            modified=1.5,
            size=10,
            filetype="pdf",
        )

        assert document.to_dict() == {
            "id": "abc",
            "filename": "a.pdf",
            "url": "file:///tmp/a.pdf",
            "content": "Hello",
            "created": None,
            "modified": 1.5,
            "size": 10,
            "filetype": "pdf",
        }


class TestIndexStats:
    def test_defaults(self) -> None:
        stats = IndexStats()
        assert stats.observed == 0
        assert stats.dropped == 0

    def test_increment(self) -> None:
        stats = IndexStats()
        for status in ["indexed", "indexed", "unsupported", "failed", "unreadable", "other"]:
            stats.increment(status)

        assert stats.observed == 6
        assert stats.indexed == 2
        assert stats.unsupported == 1
        assert stats.unreadable == 1
        assert stats.failed == 2
        assert stats.dropped == 4
        assert stats.observed == stats.dropped + stats.indexed


class TestBatchAndType:
    def test_empty_batch(self) -> None:
        batch = Batch()
        assert len(batch) == 0
        assert batch.stats.observed == 0

    def test_detected_type_values(self) -> None:
        assert {t.value for t in DetectedType} == {"pdf", "docx", "unsupported"}
