"""Line matching module for comparing output against line templates.

Main entry point is the LineMatcher class.

Public API:
    - LineMatcher: Matches actual lines against expected lines
    - compare: Convenience wrapper around a default LineMatcher
    - MatchResult: Result data structure with failure kind and diagnostic
    - classify / matches: Line classifier and single-line match predicate
"""

from lines_match.matching.directives import (
    FastForward,
    LiteralLine,
    classify,
    is_fast_forward,
)
from lines_match.matching.exceptions import InvalidDirectiveError, LinesMatchError
from lines_match.matching.line_matcher import LineMatcher, compare
from lines_match.matching.match_types import FailureKind, MatchResult
from lines_match.matching.predicate import matches

__all__ = [
    "LineMatcher",
    "compare",
    "MatchResult",
    "FailureKind",
    "FastForward",
    "LiteralLine",
    "classify",
    "is_fast_forward",
    "matches",
    "LinesMatchError",
    "InvalidDirectiveError",
]
