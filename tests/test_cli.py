"""Tests for CLI commands."""

import json
import logging

from click.testing import CliRunner
import pytest

from lines_match.cli import main


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


def test_main_help(runner):
    """Test main help command."""
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Line Template Matching Tool" in result.output


def test_version(runner):
    """Test version command."""
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_compare_help(runner):
    """Test compare help command."""
    result = runner.invoke(main, ["compare", "--help"])
    assert result.exit_code == 0
    assert "Compare actual output against an expected line template" in result.output


def test_explain_help(runner):
    """Test explain help command."""
    result = runner.invoke(main, ["explain", "--help"])
    assert result.exit_code == 0
    assert "Show how each line of a template is matched" in result.output


def test_batch_help(runner):
    """Test batch help command."""
    result = runner.invoke(main, ["batch", "--help"])
    assert result.exit_code == 0
    assert "Compare every template/output pair" in result.output


def test_compare_through_main(runner, tmp_path):
    """Test compare invoked through the main group."""
    template = tmp_path / "expected.txt"
    template.write_text("id: [0-9a-f]{8}\n")

    result = runner.invoke(main, ["compare", str(template)], input="id: deadbeef\n")

    assert result.exit_code == 0
    assert "Lines match" in result.output


def test_verbose_flag(runner, tmp_path, package_logger):
    """Test verbose flag is accepted."""
    template = tmp_path / "expected.txt"
    template.write_text("a\n")

    result = runner.invoke(main, ["-v", "compare", str(template)], input="a\n")

    assert result.exit_code == 0


@pytest.fixture
def package_logger():
    """Restore the package logger after a test enables debug output."""
    package_logger = logging.getLogger("lines_match")
    level = package_logger.level
    handlers = list(package_logger.handlers)
    yield package_logger
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers


def test_verbose_from_config(runner, tmp_path, monkeypatch, caplog, package_logger):
    """Test output.verbose in the working-directory config enables debug logging."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    (tmp_path / "lines-match.json").write_text(json.dumps({"output": {"verbose": True}}))
    template = tmp_path / "expected.txt"
    template.write_text("a\n>>>>\nz\n")

    result = runner.invoke(main, ["compare", str(template)], input="a\nb\nz\n")

    assert result.exit_code == 0
    assert package_logger.level == logging.DEBUG
    assert any("Fast-forwarding" in message for message in caplog.messages)


def test_quiet_without_verbose(runner, tmp_path, monkeypatch, caplog, package_logger):
    """Test no debug records are emitted when verbose is off."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    template = tmp_path / "expected.txt"
    template.write_text("a\n>>>>\nz\n")

    result = runner.invoke(main, ["compare", str(template)], input="a\nb\nz\n")

    assert result.exit_code == 0
    assert not any("Fast-forwarding" in message for message in caplog.messages)


def test_invalid_config_reported(runner, tmp_path, monkeypatch):
    """Test a broken working-directory config is reported, not raised."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    (tmp_path / "lines-match.json").write_text(json.dumps({"output": {"verbose": "loud"}}))
    template = tmp_path / "expected.txt"
    template.write_text("a\n")

    result = runner.invoke(main, ["compare", str(template)], input="a\n")

    assert result.exit_code == 1
    assert "Error:" in result.output
