"""Tests for configuration management."""

import json

import pytest

from lines_match.core.config import Config, MatchingConfig, load_config


def test_default_config():
    config = Config.get_default()

    assert config.matching.strict is False
    assert config.matching.strip_trailing_whitespace is False
    assert config.matching.encoding == "utf-8"
    assert config.output.verbose is False


def test_load_from_file(tmp_path):
    config_path = tmp_path / "config.json"
    config = Config(matching=MatchingConfig(strict=True, encoding="latin-1"))
    config_path.write_text(config.model_dump_json())

    loaded = Config.load_from_file(config_path)

    assert loaded.matching.strict is True
    assert loaded.matching.encoding == "latin-1"


def test_partial_config_uses_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"matching": {"strip_trailing_whitespace": True}}))

    config = load_config(config_path)

    assert config.matching.strip_trailing_whitespace is True
    assert config.matching.strict is False
    assert config.output.show_lines is False


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")


def test_invalid_config_value(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"matching": {"strict": "sometimes"}}))

    with pytest.raises(ValueError):
        load_config(config_path)


def test_load_from_working_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    (tmp_path / "lines-match.json").write_text(json.dumps({"matching": {"strict": True}}))

    config = load_config()

    assert config.matching.strict is True
