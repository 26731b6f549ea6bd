"""PDF text extraction.

Uses PyMuPDF (fitz) for fast PDF text extraction.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import fitz  # PyMuPDF

from docindexer.errors import ExtractionError
from docindexer.utils.text import normalize_whitespace

LOGGER = logging.getLogger(__name__)


def iter_text_parts(doc: "fitz.Document", path: Path) -> Iterator[str]:
    """Yield normalized text from an open PDF page by page."""
    for index in range(len(doc)):
        try:
            page = doc[index]
            text = page.get_text() or ""
        except Exception as exc:
            LOGGER.warning("Failed to read page %s in %s: %s", index, path, exc)
            continue
        normalized = normalize_whitespace(text.splitlines())
        if normalized:
            yield normalized


def extract_pdf_text(path: Path) -> str:
    """Return the text of every page of ``path``, one page after another."""
    try:
        # The sniffer already decided this is a PDF, whatever the extension says.
        doc = fitz.open(path, filetype="pdf")
    except Exception as exc:
        raise ExtractionError(f"Failed to open PDF {path}: {exc}") from exc

    try:
        if doc.needs_pass:
            raise ExtractionError(f"PDF {path} is password protected")
        if len(doc) == 0:
            raise ExtractionError(f"PDF {path} has no pages")
        return "\n".join(iter_text_parts(doc, path))
    finally:
        doc.close()
