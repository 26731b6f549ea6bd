"""Content-based detection of supported document types."""

from __future__ import annotations

import logging
from pathlib import Path

import filetype

from docindexer.models import DetectedType

LOGGER = logging.getLogger(__name__)

SNIFF_BYTES = 512

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_MIME = "application/pdf"
ZIP_MIME = "application/zip"


def classify(path: Path) -> DetectedType:
    """Classify ``path`` from its leading bytes.

    The content signature decides. The extension only matters for a plain
    zip signature, where ``.docx`` is the one way to be accepted as DOCX.
    """
    path = Path(path)
    try:
        with path.open("rb") as handle:
            head = handle.read(SNIFF_BYTES)
    except OSError as exc:
        LOGGER.debug("Could not read file %s: %s", path, exc)
        return DetectedType.UNSUPPORTED

    kind = filetype.guess(head)
    if kind is None:
        LOGGER.debug("File %s is of unknown type", path)
        return DetectedType.UNSUPPORTED

    LOGGER.debug("Assume file %s is of type %s with extension %r", path, kind.mime, path.suffix)
    if kind.mime == DOCX_MIME:
        return DetectedType.DOCX
    if kind.mime == PDF_MIME:
        return DetectedType.PDF
    if kind.mime == ZIP_MIME:
        if path.suffix.lower() == ".docx":
            return DetectedType.DOCX
        LOGGER.debug("File %s is a ZIP but not a DOCX", path)
        return DetectedType.UNSUPPORTED

    LOGGER.debug("File %s has unsupported mimetype %s", path, kind.mime)
    return DetectedType.UNSUPPORTED
