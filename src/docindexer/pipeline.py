"""Single-run entry point tying traversal, extraction and submission together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from docindexer.config import AppConfig
from docindexer.index.indexer import Indexer
from docindexer.index.meilisearch import MeilisearchClient
from docindexer.index.submission import SubmissionResult, submit_batch
from docindexer.models import Batch

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    batch: Batch
    submission: SubmissionResult


def run_pipeline(config: AppConfig, client: Optional[MeilisearchClient] = None) -> RunResult:
    """Index ``config.input_dir`` once and submit the batch.

    A client is created from the config only when one is needed and none was
    passed in, and it is closed before returning.
    """
    indexer = Indexer(workers=config.workers, skip_dirs=config.skip_dirs)
    LOGGER.debug("Indexer options %s", config)
    batch = indexer.index(config.input_dir)

    owns_client = client is None and not config.no_index and bool(batch.documents)
    if owns_client:
        client = MeilisearchClient(config.meili_url, config.api_key)
    try:
        submission = submit_batch(
            client,
            batch,
            index_name=config.index_name,
            no_index=config.no_index,
            primary_key=config.primary_key,
            wait=config.wait,
        )
    finally:
        if owns_client and client is not None:
            client.close()
    return RunResult(batch=batch, submission=submission)
