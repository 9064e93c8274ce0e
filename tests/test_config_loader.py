"""Tests for settings loading and environment overrides."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from minitools.config.loader import OVERRIDES_ENV_VAR, load_settings, merge_dicts
from minitools.config.schema import DEFAULT_PATHS, LoggingConfig


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from an empty directory with no override variable set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(OVERRIDES_ENV_VAR, raising=False)
    return tmp_path


def test_defaults_without_config_file():
    settings = load_settings()

    assert settings.quiz.limit == 30
    assert settings.quiz.csv_path == Path("problems.csv")
    assert settings.redirect.port == 8080
    assert settings.redirect.data_path is None
    assert settings.redirect.default_paths == DEFAULT_PATHS


def test_explicit_config_must_exist(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_yaml_values_and_env_overrides(tmp_path, monkeypatch):
    """Env overrides merge on top of the file without dropping sibling keys."""
    config_path = tmp_path / "custom.yaml"
    config_path.write_text(
        "quiz:\n  limit: 10\n  csv_path: quiz.csv\nredirect:\n  port: 9000\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(OVERRIDES_ENV_VAR, json.dumps({"quiz": {"limit": 5}}))

    settings = load_settings(config_path)

    assert settings.quiz.limit == 5
    assert settings.quiz.csv_path == Path("quiz.csv")
    assert settings.redirect.port == 9000


def test_default_config_file_is_picked_up(tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "default.yaml").write_text("quiz:\n  limit: 12\n", encoding="utf-8")

    assert load_settings().quiz.limit == 12


@pytest.mark.parametrize(
    "overrides",
    [
        "{not json",
        json.dumps({"redirect": {"port": 0}}),
        json.dumps({"quiz": {"limit": -1}}),
        json.dumps({"redirect": {"default_paths": {"google": "https://google.com"}}}),
    ],
)
def test_invalid_settings_raise_value_error(monkeypatch, overrides):
    monkeypatch.setenv(OVERRIDES_ENV_VAR, overrides)

    with pytest.raises(ValueError):
        load_settings()


def test_default_log_level_is_quiet():
    """Quiz-flow events stay off the terminal unless the level is lowered."""
    assert load_settings().logging.level == "WARNING"


def test_malformed_yaml_config_raises_value_error(tmp_path):
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("quiz: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError, match="not valid YAML"):
        load_settings(config_path)


def test_log_level_is_validated_and_normalized():
    assert LoggingConfig(level="debug").level == "DEBUG"
    with pytest.raises(ValueError):
        LoggingConfig(level="bogus")


def test_merge_dicts_is_recursive():
    merged = merge_dicts({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}})

    assert merged == {"a": {"x": 1, "y": 3}, "b": 1}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
