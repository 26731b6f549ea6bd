"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from docindexer.config import DEFAULT_API_KEY, DEFAULT_MEILI_URL, AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should create config with default values."""
        monkeypatch.delenv("MEILI_URL", raising=False)
        monkeypatch.delenv("MEILI_MASTER_KEY", raising=False)

        config = AppConfig()

        assert config.input_dir == Path(".")
        assert config.no_index is False
        assert config.watch is False
        assert config.wait is False
        assert config.workers == 4
        assert config.meili_url == DEFAULT_MEILI_URL == "http://127.0.0.1:7700"
        assert config.api_key == DEFAULT_API_KEY
        assert config.index_name == "documents"
        assert config.primary_key == "id"
        assert config.skip_dirs == {"target", ".git"}

    def test_environment_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should pick up the Meilisearch location from the environment."""
        monkeypatch.setenv("MEILI_URL", "http://search:7700")
        monkeypatch.setenv("MEILI_MASTER_KEY", "secret")

        config = AppConfig()

        assert config.meili_url == "http://search:7700"
        assert config.api_key == "secret"

    def test_explicit_values_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEILI_URL", "http://search:7700")

        config = AppConfig(meili_url="http://other:7700", api_key="key")

        assert config.meili_url == "http://other:7700"
        assert config.api_key == "key"

    def test_input_dir_coerced(self) -> None:
        config = AppConfig(input_dir="docs")

        assert config.input_dir == Path("docs")

    def test_invalid_workers(self) -> None:
        with pytest.raises(ValueError):
            AppConfig(workers=0)
