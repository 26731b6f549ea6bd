"""Core DocIndexer data models."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class DetectedType(str, Enum):
    """Supported document types, as determined from file content."""

    PDF = "pdf"
    DOCX = "docx"
    UNSUPPORTED = "unsupported"


@dataclass(slots=True)
class Candidate:
    """A discovered file and the metadata captured when it was picked up."""

    path: Path
    size: int
    created: Optional[float] = None
    modified: Optional[float] = None

    @classmethod
    def from_path(cls, path: Path) -> "Candidate":
        """Stat ``path`` once. Raises ``OSError`` if the file cannot be read."""
        stat = os.stat(path)
        return cls(
            path=path,
            size=stat.st_size,
            # Only some platforms report a birth time.
            created=getattr(stat, "st_birthtime", None),
            modified=stat.st_mtime,
        )


@dataclass(slots=True)
class ExtractionOutcome:
    """Extracted text, or the reason extraction failed."""

    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.text is not None

    @classmethod
    def succeeded(cls, text: str) -> "ExtractionOutcome":
        return cls(text=text)

    @classmethod
    def failed(cls, reason: str) -> "ExtractionOutcome":
        return cls(error=reason)


@dataclass(slots=True)
class SearchDocument:
    """Record submitted to the search index, keyed by ``id``."""

    id: str
    filename: str
    url: str
    content: Optional[str]
    created: Optional[float]
    modified: Optional[float]
    size: int
    filetype: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class IndexStats:
    observed: int = 0
    indexed: int = 0
    unsupported: int = 0
    failed: int = 0
    unreadable: int = 0

    @property
    def dropped(self) -> int:
        return self.unsupported + self.failed + self.unreadable

    def increment(self, status: str) -> None:
        self.observed += 1
        if status == "indexed":
            self.indexed += 1
        elif status == "unsupported":
            self.unsupported += 1
        elif status == "unreadable":
            self.unreadable += 1
        else:
            self.failed += 1


@dataclass(slots=True)
class Batch:
    """Documents collected from one run, submitted together."""

    documents: List[SearchDocument] = field(default_factory=list)
    stats: IndexStats = field(default_factory=IndexStats)

    def __len__(self) -> int:
        return len(self.documents)
