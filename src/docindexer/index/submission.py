"""Decide whether and how to hand a batch to the search index."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from docindexer.index.meilisearch import MeilisearchClient
from docindexer.models import Batch

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SubmissionResult:
    submitted: int = 0
    task_uid: Optional[int] = None
    dry_run: bool = False


def submit_batch(
    client: Optional[MeilisearchClient],
    batch: Batch,
    *,
    index_name: str,
    no_index: bool = False,
    primary_key: str = "id",
    wait: bool = False,
) -> SubmissionResult:
    """Submit ``batch`` in one upsert call unless it is empty or ``no_index`` is set.

    Errors from the index service propagate unchanged.
    """
    if no_index:
        LOGGER.info("Dry run, not submitting %d documents", len(batch))
        return SubmissionResult(dry_run=True)
    if not batch.documents:
        LOGGER.info("Nothing to submit")
        return SubmissionResult()
    if client is None:
        raise ValueError("An index client is required to submit documents")

    LOGGER.debug("Indexing %d documents into %s", len(batch), index_name)
    task_uid = client.add_documents(
        index_name,
        [document.to_dict() for document in batch.documents],
        primary_key=primary_key,
    )
    if wait:
        client.wait_for_task(task_uid)
    return SubmissionResult(submitted=len(batch), task_uid=task_uid)
