"""Document indexing pipeline."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import AbstractSet, Optional, Tuple

from docindexer.ingestion.assembler import build_document, resolve_full_path
from docindexer.ingestion.router import extract
from docindexer.ingestion.sniffer import classify
from docindexer.models import Batch, Candidate, DetectedType, SearchDocument
from docindexer.utils.files import DEFAULT_SKIP_DIRS, iter_document_paths

LOGGER = logging.getLogger(__name__)

DEFAULT_WORKERS = 4

UnitResult = Tuple[str, Optional[SearchDocument]]


class Indexer:
    """Walks a directory and turns supported documents into search records."""

    def __init__(
        self,
        *,
        workers: int = DEFAULT_WORKERS,
        skip_dirs: AbstractSet[str] = DEFAULT_SKIP_DIRS,
    ) -> None:
        if workers < 1:
            raise ValueError("workers must be at least 1")
        self.workers = workers
        self.skip_dirs = skip_dirs

    def index(self, root: Path) -> Batch:
        """Process every file under ``root`` and collect the resulting batch."""
        batch = Batch()
        paths = iter_document_paths(root, self.skip_dirs)

        # Leaving the with block waits for every unit to finish.
        with ThreadPoolExecutor(
            max_workers=self.workers, thread_name_prefix="docindexer"
        ) as executor:
            for status, document in executor.map(self._process, paths):
                batch.stats.increment(status)
                if document is not None:
                    batch.documents.append(document)

        stats = batch.stats
        LOGGER.info(
            "Observed %d files: %d prepared, %d unsupported, %d failed, %d unreadable",
            stats.observed,
            stats.indexed,
            stats.unsupported,
            stats.failed,
            stats.unreadable,
        )
        return batch

    def _process(self, path: Path) -> UnitResult:
        try:
            return self._process_single(path)
        except Exception as exc:
            LOGGER.error("Failed to process %s: %s", path, exc)
            return "failed", None

    def _process_single(self, path: Path) -> UnitResult:
        """Index a single file: stat, classify, extract, assemble."""
        try:
            candidate = Candidate.from_path(path)
        except OSError as exc:
            LOGGER.debug("Could not stat %s: %s", path, exc)
            return "unreadable", None

        detected = classify(path)
        if detected is DetectedType.UNSUPPORTED:
            LOGGER.debug("Skipping unsupported file: %s", path)
            return "unsupported", None

        LOGGER.debug("Processing %s as %s", path, detected.value)
        outcome = extract(path, detected)
        document = build_document(candidate, resolve_full_path(path), outcome)
        if document is None:
            return "failed", None

        LOGGER.debug("Prepared document %s for %s", document.id, document.filename)
        return "indexed", document
