"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet

from docindexer.index.indexer import DEFAULT_WORKERS
from docindexer.utils.files import DEFAULT_SKIP_DIRS

DEFAULT_MEILI_URL = "http://127.0.0.1:7700"
DEFAULT_API_KEY = "masterKey"
DEFAULT_INDEX_NAME = "documents"


def _get_default_url() -> str:
    return os.environ.get("MEILI_URL") or DEFAULT_MEILI_URL


def _get_default_api_key() -> str:
    return os.environ.get("MEILI_MASTER_KEY") or DEFAULT_API_KEY


@dataclass(slots=True)
class AppConfig:
    input_dir: Path = Path(".")
    no_index: bool = False
    watch: bool = False
    wait: bool = False
    workers: int = DEFAULT_WORKERS
    meili_url: str | None = None
    api_key: str | None = None
    index_name: str = DEFAULT_INDEX_NAME
    primary_key: str = "id"
    skip_dirs: AbstractSet[str] = DEFAULT_SKIP_DIRS

    def __post_init__(self) -> None:
        self.input_dir = Path(self.input_dir)
        if self.meili_url is None:
            self.meili_url = _get_default_url()
        if self.api_key is None:
            self.api_key = _get_default_api_key()
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
