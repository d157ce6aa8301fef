"""Tests for reading line sequences."""

import io

import pytest

from lines_match.core.line_reader import read_lines


def test_read_file(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("one\ntwo\r\nthree\n", encoding="utf-8")

    assert read_lines(path) == ["one", "two", "three"]


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")

    assert read_lines(path) == []


def test_read_with_encoding(tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes("café\n".encode("latin-1"))

    assert read_lines(path, encoding="latin-1") == ["café"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")


def test_read_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a\nb\n"))

    assert read_lines("-") == ["a", "b"]


def test_read_stdin_when_no_source(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))

    assert read_lines(None) == ["x"]
