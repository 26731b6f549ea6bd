"""Exception hierarchy for DocIndexer."""

from __future__ import annotations


class DocIndexerError(Exception):
    """Base class for all DocIndexer errors."""


class ExtractionError(DocIndexerError):
    """Raised by an extractor when a document body cannot be read."""


class IndexServiceError(DocIndexerError):
    """Raised when the search index rejects or fails a submission."""
