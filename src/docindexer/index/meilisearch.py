"""Minimal Meilisearch client for batch document upserts."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Sequence

import httpx

from docindexer.errors import IndexServiceError

LOGGER = logging.getLogger(__name__)


class MeilisearchClient:
    """Talks to the Meilisearch REST API over httpx."""

    def __init__(
        self,
        url: str,
        api_key: Optional[str] = None,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.url = url
        headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._client = httpx.Client(
            base_url=url, headers=headers, timeout=timeout, transport=transport
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "MeilisearchClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            response = self._client.request(method, endpoint, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise IndexServiceError(
                f"{method} {endpoint} failed with status "
                f"{exc.response.status_code}: {exc.response.text}"
            ) from exc
        except httpx.HTTPError as exc:
            raise IndexServiceError(f"{method} {endpoint} failed: {exc}") from exc
        return response.json()

    def add_documents(
        self,
        index_name: str,
        documents: Sequence[Dict[str, Any]],
        primary_key: str = "id",
    ) -> int:
        """Upsert ``documents`` into ``index_name`` and return the task uid."""
        payload = self._request(
            "POST",
            f"/indexes/{index_name}/documents",
            params={"primaryKey": primary_key},
            json=list(documents),
        )
        task_uid = payload.get("taskUid")
        if task_uid is None:
            raise IndexServiceError(f"Unexpected response from index service: {payload}")
        LOGGER.debug("Enqueued %d documents as task %s", len(documents), task_uid)
        return task_uid

    def get_task(self, task_uid: int) -> Dict[str, Any]:
        return self._request("GET", f"/tasks/{task_uid}")

    def wait_for_task(
        self, task_uid: int, *, timeout: float = 60.0, interval: float = 0.5
    ) -> Dict[str, Any]:
        """Poll until the task finishes. Raises if it failed or took too long."""
        deadline = time.monotonic() + timeout
        while True:
            task = self.get_task(task_uid)
            status = task.get("status")
            if status == "succeeded":
                return task
            if status in ("failed", "canceled"):
                error = task.get("error") or {}
                raise IndexServiceError(
                    f"Task {task_uid} {status}: {error.get('message', 'no details')}"
                )
            if time.monotonic() >= deadline:
                raise IndexServiceError(f"Timed out waiting for task {task_uid}")
            time.sleep(interval)
