"""Tests for layered config loading (TOML + local.toml + env overrides)."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from grow_light_advisor.config import AppConfig, LoggingConfig, RecommendConfig, load_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in ("CATALOG_FILE", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(f"GROW_LIGHT_ADVISOR_{name}", raising=False)


def _write_toml(path: Path, body: str) -> Path:
    path.write_text(body, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults_from_minimal_file(self, tmp_path: Path):
        cfg = load_config(_write_toml(tmp_path / "default.toml", ""))
        assert cfg == AppConfig()
        assert cfg.catalog.catalog_file is None
        assert cfg.recommend.alternatives == 3

    def test_values_from_toml(self, tmp_path: Path):
        cfg = load_config(_write_toml(tmp_path / "default.toml", (
            "debug = true\n"
            "[catalog]\ncatalog_file = \"fixtures.json\"\n"
            "[recommend]\nalternatives = 5\n"
            "[logging]\nlevel = \"debug\"\n"
        )))
        assert cfg.debug is True
        assert cfg.catalog.catalog_file == "fixtures.json"
        assert cfg.recommend.alternatives == 5
        assert cfg.logging.level == "DEBUG"

    def test_empty_catalog_file_means_reference(self, tmp_path: Path):
        cfg = load_config(_write_toml(tmp_path / "default.toml", '[catalog]\ncatalog_file = ""\n'))
        assert cfg.catalog.catalog_file is None

    def test_local_toml_overrides(self, tmp_path: Path):
        base = _write_toml(tmp_path / "default.toml", "[recommend]\nalternatives = 2\n")
        _write_toml(tmp_path / "local.toml", "[recommend]\nalternatives = 7\n")
        assert load_config(base).recommend.alternatives == 7

    def test_env_overrides(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GROW_LIGHT_ADVISOR_CATALOG_FILE", "env.json")
        monkeypatch.setenv("GROW_LIGHT_ADVISOR_LOG_LEVEL", "warning")
        monkeypatch.setenv("GROW_LIGHT_ADVISOR_DEBUG", "yes")
        cfg = load_config(_write_toml(tmp_path / "default.toml", ""))
        assert cfg.catalog.catalog_file == "env.json"
        assert cfg.logging.level == "WARNING"
        assert cfg.debug is True

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "nope.toml")

    def test_invalid_value_raises(self, tmp_path: Path):
        with pytest.raises(ValidationError, match="alternatives"):
            load_config(_write_toml(tmp_path / "default.toml", "[recommend]\nalternatives = -1\n"))


class TestSubConfigs:
    def test_bad_log_level(self):
        with pytest.raises(ValidationError, match="Log level"):
            LoggingConfig(level="LOUD")

    def test_frozen(self):
        cfg = RecommendConfig()
        with pytest.raises(ValidationError):
            cfg.alternatives = 10
