"""Classification of expected lines into literal lines and fast-forward directives.

A fast-forward directive is an expected line whose trimmed text starts and
ends with ``>>``. The text between the markers controls how many actual
lines are skipped:

- ``>>3>>`` skips exactly three actual lines.
- ``>>>>``, ``>> >>`` or ``>> anything >>`` skips actual lines until the
  next expected line matches.

Every other line is a literal line, which is compared by equality and
then as a fully anchored regular expression (see ``predicate``).
"""

from dataclasses import dataclass
import re

from lines_match.matching.exceptions import InvalidDirectiveError
from lines_match.matching.matching_constants import DirectiveLimits, DirectiveMarkers

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class LiteralLine:
    """Expected line matched by equality or as a full-match pattern."""

    text: str


@dataclass(frozen=True)
class FastForward:
    """Fast-forward directive.

    Attributes:
        text: Original expected line
        limit: Number of actual lines to skip, or None to skip until the
            next expected line matches
    """

    text: str
    limit: int | None = None

    @property
    def is_bounded(self) -> bool:
        return self.limit is not None


LineKind = LiteralLine | FastForward


def is_fast_forward(line: str) -> bool:
    """Check whether the trimmed line is wrapped in fast-forward markers."""
    marker = DirectiveMarkers.FAST_FORWARD
    stripped = line.strip()
    return stripped.startswith(marker) and stripped.endswith(marker)


def parse_fast_forward_limit(line: str) -> int | None:
    """Parse the skip limit of a fast-forward directive.

    Args:
        line: Expected line already known to be a fast-forward directive

    Returns:
        Positive skip limit, or None if the inner text is empty, not an integer,
        or outside the signed 32-bit range

    Raises:
        InvalidDirectiveError: If the inner text is an integer <= 0
    """
    marker = DirectiveMarkers.FAST_FORWARD
    inner = line.strip()[len(marker) : -len(marker)].strip()

    if not _INTEGER.fullmatch(inner):
        return None

    limit = int(inner)
    if not DirectiveLimits.MIN_LIMIT <= limit <= DirectiveLimits.MAX_LIMIT:
        return None
    if limit <= 0:
        raise InvalidDirectiveError(line, limit)
    return limit


def classify(line: str) -> LineKind:
    """Classify an expected line.

    Args:
        line: Expected line

    Returns:
        FastForward for ``>>...>>`` lines, LiteralLine otherwise

    Raises:
        InvalidDirectiveError: If the line is a directive with a limit <= 0
    """
    if is_fast_forward(line):
        return FastForward(text=line, limit=parse_fast_forward_limit(line))
    return LiteralLine(text=line)
