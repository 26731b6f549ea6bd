"""DOCX text extraction.

Reads ``word/document.xml`` straight from the zip container and collects
the ``w:t`` text runs, one line per paragraph. Only that part is required,
so stripped-down packages without content types or relationships still work.
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Iterator

from docx.oxml import parse_xml
from docx.oxml.ns import qn

from docindexer.errors import ExtractionError
from docindexer.utils.text import normalize_whitespace

DOCUMENT_PART = "word/document.xml"


def _read_document_part(path: Path) -> bytes:
    with zipfile.ZipFile(path) as archive:
        return archive.read(DOCUMENT_PART)


def _iter_paragraph_text(xml: bytes) -> Iterator[str]:
    root = parse_xml(xml)
    current: list[str] = []
    paragraph = None
    for node in root.iter(qn("w:t")):
        owner = next(node.iterancestors(qn("w:p")), None)
        if owner is not paragraph and current:
            yield "".join(current)
            current = []
        paragraph = owner
        current.append(node.text or "")
    if current:
        yield "".join(current)


def extract_docx_text(path: Path) -> str:
    """Return the text of every paragraph, table cells included, in document order."""
    try:
        xml = _read_document_part(path)
        if not xml.strip():
            return ""
        return normalize_whitespace(_iter_paragraph_text(xml))
    except (zipfile.BadZipFile, KeyError, OSError, SyntaxError) as exc:
        raise ExtractionError(f"Failed to read DOCX {path}: {exc}") from exc
