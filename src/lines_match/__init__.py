"""Match multi-line output against templates with patterns and fast-forward directives."""

from lines_match.assertions import LinesMismatchError, assert_lines_match
from lines_match.matching import (
    FailureKind,
    FastForward,
    InvalidDirectiveError,
    LineMatcher,
    LinesMatchError,
    LiteralLine,
    MatchResult,
    classify,
    compare,
    is_fast_forward,
    matches,
)

__version__ = "0.1.0"

__all__ = [
    "assert_lines_match",
    "compare",
    "LineMatcher",
    "MatchResult",
    "FailureKind",
    "FastForward",
    "LiteralLine",
    "classify",
    "is_fast_forward",
    "matches",
    "LinesMatchError",
    "InvalidDirectiveError",
    "LinesMismatchError",
]
