"""Dispatch classified files to the matching text extractor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict

from docindexer.ingestion.docx_loader import extract_docx_text
from docindexer.ingestion.pdf_loader import extract_pdf_text
from docindexer.models import DetectedType, ExtractionOutcome

LOGGER = logging.getLogger(__name__)


def _extractors() -> Dict[DetectedType, Callable[[Path], str]]:
    # Looked up on each call so tests can patch the module attributes.
    return {
        DetectedType.PDF: extract_pdf_text,
        DetectedType.DOCX: extract_docx_text,
    }


def extract(path: Path, detected: DetectedType) -> ExtractionOutcome:
    """Run the extractor for ``detected`` and turn any failure into an outcome."""
    extractor = _extractors().get(detected)
    if extractor is None:
        raise ValueError(f"No extractor for {detected.value} file {path}")

    LOGGER.debug("Extracting %s as %s", path, detected.value)
    try:
        text = extractor(path)
    except Exception as exc:
        LOGGER.warning("Extraction failed for %s: %s", path, exc)
        return ExtractionOutcome.failed(str(exc))
    return ExtractionOutcome.succeeded(text)
