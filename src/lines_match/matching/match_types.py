"""Data types for line matching results.

This module defines the core data structures returned by the line matcher:
- FailureKind: Why a comparison failed
- MatchResult: Outcome of one comparison, with a diagnostic on failure
"""

from dataclasses import dataclass
from enum import Enum


class FailureKind(Enum):
    """Kind of failure reported by the line matcher."""

    INVALID_DIRECTIVE = "invalid_directive"
    LENGTH_MISMATCH = "length_mismatch"
    TERMINAL_FAST_FORWARD = "terminal_fast_forward"
    STARVED_FAST_FORWARD = "starved_fast_forward"
    LEFTOVER_LINES = "leftover_lines"
    LINE_MISMATCH = "line_mismatch"


@dataclass(frozen=True)
class MatchResult:
    """Result of comparing expected lines against actual lines.

    Attributes:
        matched: True if the actual lines conform to the expected lines
        kind: Failure kind (None on success)
        message: Human-readable diagnostic (empty on success)
        expected_text: Expected lines joined with newlines, set for length mismatches
        actual_text: Actual lines joined with newlines, set for length mismatches
    """

    matched: bool
    kind: FailureKind | None = None
    message: str = ""
    expected_text: str | None = None
    actual_text: str | None = None

    def __bool__(self) -> bool:
        return self.matched

    @classmethod
    def success(cls) -> "MatchResult":
        return cls(matched=True)

    @classmethod
    def failure(
        cls,
        kind: FailureKind,
        message: str,
        expected_text: str | None = None,
        actual_text: str | None = None,
    ) -> "MatchResult":
        return cls(
            matched=False,
            kind=kind,
            message=message,
            expected_text=expected_text,
            actual_text=actual_text,
        )
