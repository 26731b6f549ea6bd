"""Build search documents from extraction results."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from docindexer.models import Candidate, ExtractionOutcome, SearchDocument
from docindexer.utils.files import document_id

LOGGER = logging.getLogger(__name__)

UNKNOWN_URL = "file:///unknown"
UNKNOWN_FILETYPE = "unknown"


def resolve_full_path(path: Path) -> Optional[Path]:
    """Join ``path`` onto the working directory. ``None`` if that fails."""
    try:
        return Path.cwd() / path
    except OSError as exc:
        LOGGER.debug("Cannot resolve %s against the working directory: %s", path, exc)
        return None


def file_url(full_path: Optional[Path]) -> str:
    if full_path is None:
        return UNKNOWN_URL
    try:
        return full_path.as_uri()
    except ValueError:
        return UNKNOWN_URL


def file_type(path: Path) -> str:
    suffix = path.suffix
    return suffix[1:].lower() if suffix else UNKNOWN_FILETYPE


def build_document(
    candidate: Candidate, full_path: Optional[Path], outcome: ExtractionOutcome
) -> Optional[SearchDocument]:
    """Assemble the index record for ``candidate``, or ``None`` if extraction failed."""
    if not outcome.ok:
        LOGGER.debug("No document for %s: %s", candidate.path, outcome.error)
        return None

    filename = str(candidate.path)
    return SearchDocument(
        id=document_id(filename),
        filename=filename,
        url=file_url(full_path),
        content=outcome.text,
        created=candidate.created,
        modified=candidate.modified,
        size=candidate.size,
        filetype=file_type(candidate.path),
    )
