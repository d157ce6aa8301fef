"""Assertion helpers that raise on line mismatches."""

from collections.abc import Iterable

from lines_match.matching import FailureKind, LineMatcher, MatchResult


class LinesMismatchError(AssertionError):
    """Raised when actual lines do not conform to the expected lines."""

    def __init__(self, result: MatchResult, message: str | None = None) -> None:
        self.result = result
        self.kind: FailureKind | None = result.kind
        self.expected = result.expected_text
        self.actual = result.actual_text

        text = result.message
        if message:
            text = f"{message} ==> {text}"
        if result.expected_text is not None and result.actual_text is not None:
            text = f"{text}\nexpected:\n{result.expected_text}\nactual:\n{result.actual_text}"
        super().__init__(text)


def _as_lines(value: str | Iterable[str]) -> Iterable[str]:
    if isinstance(value, str):
        return value.splitlines()
    return value


def assert_lines_match(
    expected: str | Iterable[str],
    actual: str | Iterable[str],
    *,
    strict: bool = False,
    message: str | None = None,
) -> None:
    """Assert that actual lines match the expected lines.

    Multi-line strings are split into lines first.

    Args:
        expected: Expected lines or multi-line template text
        actual: Actual lines or multi-line text
        strict: Fail on the first unmatched non-directive expected line
        message: Optional prefix for the failure message

    Raises:
        LinesMismatchError: If the lines do not match.
        ValueError: If either argument is None.
    """
    result = LineMatcher(strict=strict).match(_as_lines(expected), _as_lines(actual))
    if not result.matched:
        raise LinesMismatchError(result, message)
