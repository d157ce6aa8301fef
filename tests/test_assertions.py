"""Tests for assert_lines_match."""

import pytest

from lines_match import LinesMismatchError, assert_lines_match
from lines_match.matching import FailureKind


def test_matching_lines_pass():
    assert_lines_match(["first", ">>>>", "last"], ["first", "x", "y", "last"])


def test_multiline_strings_are_split():
    expected = "started in \\d+ ms\n>>>>\ndone"
    actual = "started in 42 ms\nloading a\nloading b\ndone\n"

    assert_lines_match(expected, actual)


def test_mismatch_raises_assertion_error():
    with pytest.raises(AssertionError):
        assert_lines_match(["a", "b"], ["a", "c"])


def test_error_carries_result():
    with pytest.raises(LinesMismatchError) as exc_info:
        assert_lines_match(["first", ">>3>>"], ["first", "a", "b"])

    error = exc_info.value
    assert error.kind == FailureKind.TERMINAL_FAST_FORWARD
    assert not error.result.matched
    assert "terminal fast-forward(3)" in str(error)


def test_length_mismatch_includes_texts():
    with pytest.raises(LinesMismatchError) as exc_info:
        assert_lines_match(["a", "b", "c"], ["a", "b"])

    error = exc_info.value
    assert error.expected == "a\nb\nc"
    assert error.actual == "a\nb"
    assert "expected 3 lines, but only got 2" in str(error)
    assert "expected:\na\nb\nc\nactual:\na\nb" in str(error)


def test_custom_message_prefix():
    with pytest.raises(LinesMismatchError) as exc_info:
        assert_lines_match(["a"], ["a", "b"], message="server log")

    assert str(exc_info.value).startswith("server log ==> ")


def test_invalid_directive_reported():
    with pytest.raises(LinesMismatchError) as exc_info:
        assert_lines_match([">>0>>"], ["x"])

    assert exc_info.value.kind == FailureKind.INVALID_DIRECTIVE


def test_strict_mode():
    assert_lines_match(["a", "x", ">>>>"], ["a", "b", "c"])

    with pytest.raises(LinesMismatchError) as exc_info:
        assert_lines_match(["a", "x", ">>>>"], ["a", "b", "c"], strict=True)

    assert exc_info.value.kind == FailureKind.LINE_MISMATCH


def test_none_rejected():
    with pytest.raises(ValueError):
        assert_lines_match(None, ["a"])


def test_strict_is_keyword_only():
    with pytest.raises(TypeError):
        assert_lines_match(["a"], ["a"], True)
