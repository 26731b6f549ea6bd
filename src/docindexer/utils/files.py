"""Utility helpers for working with files."""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path
from typing import AbstractSet, Iterator

LOGGER = logging.getLogger(__name__)

DEFAULT_SKIP_DIRS: frozenset[str] = frozenset({"target", ".git"})


def iter_document_paths(
    root: Path, skip_dirs: AbstractSet[str] = DEFAULT_SKIP_DIRS
) -> Iterator[Path]:
    """Yield regular files under ``root``, never descending into ``skip_dirs``.

    Directory names are matched exactly. Entries that cannot be listed are
    left out and the walk carries on with their siblings.
    """
    root = Path(root)
    if not root.is_dir():
        LOGGER.warning("Not a directory, nothing to walk: %s", root)
        return
    if root.name in skip_dirs:
        LOGGER.debug("Root %s is an excluded directory, nothing to walk", root)
        return

    def _on_error(exc: OSError) -> None:
        LOGGER.debug("Skipping unreadable entry %s: %s", exc.filename, exc)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        # Pruning in place keeps os.walk out of excluded subtrees.
        dirnames[:] = sorted(name for name in dirnames if name not in skip_dirs)
        base = Path(dirpath)
        for name in sorted(filenames):
            path = base / name
            try:
                if not path.is_file():
                    LOGGER.debug("Skipping non-regular file: %s", path)
                    continue
            except OSError as exc:
                LOGGER.debug("Skipping unreadable entry %s: %s", path, exc)
                continue
            yield path


def document_id(filename: str) -> str:
    """Compute the stable document id for a filename string.

    Only the name is hashed, so re-indexing a file under the same name
    replaces the earlier record.
    """
    data = filename.encode("utf-8", errors="surrogateescape")
    return hashlib.md5(data, usedforsecurity=False).hexdigest()
