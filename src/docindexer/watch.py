"""Re-run indexing whenever the watched tree changes.

Uses watchdog for cross-platform file system monitoring, with a short
debounce so a burst of saves triggers a single run.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import AbstractSet, Callable, Optional

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from docindexer.utils.files import DEFAULT_SKIP_DIRS

LOGGER = logging.getLogger(__name__)

# Open and read-only close events are ignored, or indexing would re-trigger itself.
WATCHED_EVENTS = frozenset(
    {EVENT_TYPE_CREATED, EVENT_TYPE_DELETED, EVENT_TYPE_MODIFIED, EVENT_TYPE_MOVED}
)


class RescanHandler(FileSystemEventHandler):
    """Flags a pending rescan for file events outside skipped directories."""

    def __init__(self, root: Path, skip_dirs: AbstractSet[str] = DEFAULT_SKIP_DIRS) -> None:
        super().__init__()
        self.root = Path(root)
        self.skip_dirs = skip_dirs
        self.pending = threading.Event()

    def _is_skipped(self, raw_path: str | bytes) -> bool:
        if isinstance(raw_path, bytes):
            raw_path = raw_path.decode("utf-8", errors="surrogateescape")
        path = Path(raw_path)
        try:
            parts = path.relative_to(self.root).parts
        except ValueError:
            parts = path.parts
        # The last part is the file itself.
        return any(part in self.skip_dirs for part in parts[:-1])

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in WATCHED_EVENTS:
            return
        paths = [event.src_path]
        dest = getattr(event, "dest_path", "")
        if dest:
            paths.append(dest)
        if all(self._is_skipped(path) for path in paths):
            return
        LOGGER.debug("Change detected: %s %s", event.event_type, event.src_path)
        self.pending.set()


def watch_and_reindex(
    root: Path,
    run_once: Callable[[], object],
    *,
    skip_dirs: AbstractSet[str] = DEFAULT_SKIP_DIRS,
    debounce: float = 1.0,
    stop: Optional[threading.Event] = None,
) -> None:
    """Run ``run_once`` now and again after every batch of changes under ``root``.

    Returns when ``stop`` is set or on ``KeyboardInterrupt``.
    """
    stop = stop or threading.Event()
    handler = RescanHandler(root, skip_dirs)
    observer = Observer()
    observer.schedule(handler, str(root), recursive=True)

    def _run_logged() -> None:
        try:
            run_once()
        except Exception as exc:
            LOGGER.error("Indexing run failed: %s", exc)

    observer.start()
    LOGGER.info("Watching %s for changes", root)
    try:
        _run_logged()
        while not stop.is_set():
            if not handler.pending.wait(timeout=debounce):
                continue
            # Let the burst settle before rescanning.
            if stop.wait(debounce):
                break
            handler.pending.clear()
            LOGGER.info("Changes detected, re-indexing %s", root)
            _run_logged()
    except KeyboardInterrupt:
        LOGGER.info("Watch interrupted")
    finally:
        observer.stop()
        observer.join(timeout=2)
        LOGGER.info("File watcher stopped")
