"""Shared fixtures for building small documents on disk."""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Callable

import docx
import fitz  # PyMuPDF
import pytest

WORD_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


def _write_pdf(path: Path, text: str) -> Path:
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    doc.save(str(path))
    doc.close()
    return path


def _write_docx(path: Path, *paragraphs: str) -> Path:
    document = docx.Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    document.save(str(path))
    return path


def _write_minimal_docx(path: Path, *paragraphs: str, body: str | None = None) -> Path:
    """Zip holding nothing but ``word/document.xml``."""
    if body is None:
        runs = "".join(f"<w:p><w:r><w:t>{text}</w:t></w:r></w:p>" for text in paragraphs)
        body = f'<w:document xmlns:w="{WORD_NS}"><w:body>{runs}</w:body></w:document>'
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("word/document.xml", body)
    return path


def _write_zip(path: Path) -> Path:
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("readme.txt", "just an archive")
    return path


@pytest.fixture
def write_pdf() -> Callable[..., Path]:
    return _write_pdf


@pytest.fixture
def write_docx() -> Callable[..., Path]:
    return _write_docx


@pytest.fixture
def write_minimal_docx() -> Callable[..., Path]:
    return _write_minimal_docx


@pytest.fixture
def write_zip() -> Callable[..., Path]:
    return _write_zip


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """Directory with one PDF, one bare DOCX, one plain zip and an excluded PDF."""
    root = tmp_path / "corpus"
    root.mkdir()
    _write_pdf(root / "a.pdf", "Test PDF")
    _write_minimal_docx(root / "b.docx", "Hello")
    _write_zip(root / "c.zip")
    excluded = root / "target"
    excluded.mkdir()
    _write_pdf(excluded / "d.pdf", "Excluded")
    return root
