"""Inspection of expected-line templates.

Describes how each template line will be treated by the matcher, which is
useful when writing templates by hand.
"""

from dataclasses import dataclass
from enum import Enum
import re

from lines_match.matching import FastForward, InvalidDirectiveError, classify

_PATTERN_CHARS = set(".^$*+?{}[]\\|()")


class TemplateLineKind(Enum):
    """How a template line is matched."""

    LITERAL = "literal"
    PATTERN = "pattern"
    BROKEN_PATTERN = "literal (invalid pattern)"
    FAST_FORWARD = "fast-forward"
    INVALID_DIRECTIVE = "invalid directive"


@dataclass
class TemplateLine:
    """Description of a single template line.

    Attributes:
        number: 1-based line number in the template
        text: Line text
        kind: How the line is matched
        limit: Skip limit for bounded fast-forward directives
        detail: Extra information (error text for invalid lines)
    """

    number: int
    text: str
    kind: TemplateLineKind
    limit: int | None = None
    detail: str = ""

    @property
    def label(self) -> str:
        if self.kind is TemplateLineKind.FAST_FORWARD:
            return f"fast-forward({self.limit if self.limit is not None else '*'})"
        return self.kind.value


def describe_line(number: int, line: str) -> TemplateLine:
    """Describe how a single template line is matched."""
    try:
        kind = classify(line)
    except InvalidDirectiveError as e:
        return TemplateLine(number, line, TemplateLineKind.INVALID_DIRECTIVE, detail=str(e))

    if isinstance(kind, FastForward):
        return TemplateLine(number, line, TemplateLineKind.FAST_FORWARD, limit=kind.limit)

    if not _PATTERN_CHARS.intersection(line):
        return TemplateLine(number, line, TemplateLineKind.LITERAL)

    try:
        re.compile(line)
    except re.error as e:
        return TemplateLine(number, line, TemplateLineKind.BROKEN_PATTERN, detail=str(e))
    return TemplateLine(number, line, TemplateLineKind.PATTERN)


def describe_template(lines: list[str]) -> list[TemplateLine]:
    """Describe every line of a template."""
    return [describe_line(number, line) for number, line in enumerate(lines, start=1)]
