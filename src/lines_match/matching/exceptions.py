"""Exceptions raised by the line matcher."""


class LinesMatchError(Exception):
    """Base class for all line matching errors."""


class InvalidDirectiveError(LinesMatchError, ValueError):
    """A fast-forward directive carries a limit that is not greater than zero."""

    def __init__(self, line: str, limit: int) -> None:
        self.line = line
        self.limit = limit
        super().__init__(f"fast-forward must be greater than zero, it is: {limit} (line: {line!r})")
