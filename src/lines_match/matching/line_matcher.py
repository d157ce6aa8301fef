"""Matching of an expected line template against actual output lines.

This module provides the LineMatcher, which walks the expected and actual
lines with two cursors:
1. Lines that match (by equality or full-match pattern) consume one line on each side
2. Fast-forward directives skip actual lines, either a fixed count or until
   the next expected line matches
3. Leftover actual lines after the template is exhausted are a failure

Two fast paths run first: the same sequence object matches itself, and
equally sized sequences that match line-by-line are accepted without
running the cursors.
"""

from collections import deque
from collections.abc import Iterable, Sequence
import logging

from lines_match.matching.directives import FastForward, classify
from lines_match.matching.exceptions import InvalidDirectiveError
from lines_match.matching.match_types import FailureKind, MatchResult
from lines_match.matching.predicate import matches

logger = logging.getLogger(__name__)

__all__ = ["LineMatcher", "compare"]


class LineMatcher:
    """Matches actual lines against an expected line template.

    By default an expected line that neither matches the current actual
    line nor is a fast-forward directive only advances the expected cursor.
    The actual line stays in place for the next expected line, so a
    mismatch is reported later (usually as leftover lines). In strict mode
    such a line fails the comparison immediately.
    """

    def __init__(self, strict: bool = False, strip_trailing_whitespace: bool = False) -> None:
        """Initialize LineMatcher.

        Args:
            strict: Fail on the first expected line that does not match and is not
                a fast-forward directive.
            strip_trailing_whitespace: Right-strip every actual line before matching.
        """
        self.strict = strict
        self.strip_trailing_whitespace = strip_trailing_whitespace

    def match(self, expected_lines: Iterable[str], actual_lines: Iterable[str]) -> MatchResult:
        """Compare expected lines against actual lines.

        Args:
            expected_lines: Template lines (literal text, patterns, fast-forward directives)
            actual_lines: Observed lines

        Returns:
            MatchResult, successful or carrying a failure kind and diagnostic message.

        Raises:
            ValueError: If either argument is None.
        """
        if expected_lines is None:
            raise ValueError("expected must not be None")
        if actual_lines is None:
            raise ValueError("actual must not be None")

        if expected_lines is actual_lines:
            logger.debug("Same line sequence on both sides, nothing to compare")
            return MatchResult.success()

        expected = list(expected_lines)
        actual = list(actual_lines)
        if self.strip_trailing_whitespace:
            actual = [line.rstrip() for line in actual]

        if len(expected) > len(actual):
            return MatchResult.failure(
                FailureKind.LENGTH_MISMATCH,
                f"expected {len(expected)} lines, but only got {len(actual)}",
                expected_text="\n".join(expected),
                actual_text="\n".join(actual),
            )

        if len(expected) == len(actual) and all(
            matches(expected_line, actual_line)
            for expected_line, actual_line in zip(expected, actual)
        ):
            logger.debug("All %d lines matched pairwise", len(expected))
            return MatchResult.success()

        try:
            return self._match_with_fast_forward(expected, actual)
        except InvalidDirectiveError as e:
            return MatchResult.failure(FailureKind.INVALID_DIRECTIVE, str(e))

    def _match_with_fast_forward(self, expected: list[str], actual: list[str]) -> MatchResult:
        """Run the two-cursor matching over the full sequences."""
        expected_queue = deque(expected)
        actual_queue = deque(actual)

        while expected_queue:
            expected_line = expected_queue.popleft()
            actual_line = actual_queue[0] if actual_queue else None

            if matches(expected_line, actual_line):
                actual_queue.popleft()
                continue

            kind = classify(expected_line)
            if not isinstance(kind, FastForward):
                if self.strict:
                    return self._line_mismatch(expected, actual, expected_queue, actual_queue)
                logger.debug("No match for %r, advancing expected lines only", expected_line)
                continue

            # Directive in last expected line: the rest of the actual lines is skipped
            if not expected_queue:
                remaining = len(actual_queue)
                if kind.limit is None or kind.limit == remaining:
                    return MatchResult.success()
                return MatchResult.failure(
                    FailureKind.TERMINAL_FAST_FORWARD,
                    f"terminal fast-forward({kind.limit}) error: fast-forward({remaining}) "
                    f"expected, {remaining} actual lines remaining",
                )

            anchor = expected_queue[0]

            if kind.limit is not None:
                logger.debug("Fast-forwarding %d lines", kind.limit)
                for _ in range(kind.limit):
                    if not actual_queue:
                        break
                    actual_queue.popleft()
                if not actual_queue:
                    return MatchResult.failure(
                        FailureKind.STARVED_FAST_FORWARD,
                        f"{len(expected_queue)} more lines expected, actual lines is empty",
                    )
                continue

            logger.debug("Fast-forwarding until %r matches", anchor)
            while True:
                if not actual_queue:
                    return MatchResult.failure(
                        FailureKind.STARVED_FAST_FORWARD,
                        f"no match for `{anchor}` line fast-forwarding:\n" + "\n".join(actual),
                    )
                if matches(anchor, actual_queue.popleft()):
                    break
            if self.strict:
                expected_queue.popleft()

        if actual_queue:
            return MatchResult.failure(
                FailureKind.LEFTOVER_LINES,
                f"more actual lines than expected: {len(actual_queue)}",
            )
        return MatchResult.success()

    def _line_mismatch(
        self,
        expected: list[str],
        actual: list[str],
        expected_queue: deque[str],
        actual_queue: deque[str],
    ) -> MatchResult:
        # Positions are 1-based; the failing expected line was already popped
        expected_index = len(expected) - len(expected_queue)
        actual_index = len(actual) - len(actual_queue) + 1
        expected_line = expected[expected_index - 1]
        if actual_queue:
            found = f"actual line {actual_index} `{actual_queue[0]}`"
        else:
            found = "no more actual lines"
        return MatchResult.failure(
            FailureKind.LINE_MISMATCH,
            f"expected line {expected_index} `{expected_line}` does not match {found}",
        )


def compare(
    expected_lines: Sequence[str] | Iterable[str],
    actual_lines: Sequence[str] | Iterable[str],
    *,
    strict: bool = False,
) -> MatchResult:
    """Compare expected lines against actual lines with a default LineMatcher.

    Args:
        expected_lines: Template lines
        actual_lines: Observed lines
        strict: Fail on the first unmatched non-directive expected line

    Returns:
        MatchResult describing success or the first failure.
    """
    return LineMatcher(strict=strict).match(expected_lines, actual_lines)
