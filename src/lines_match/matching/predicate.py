"""Match predicate for a single expected/actual line pair."""

from functools import lru_cache
import re

from lines_match.matching.matching_constants import CacheConfig


@lru_cache(maxsize=CacheConfig.PATTERN_CACHE_SIZE)
def _compile(expected_line: str) -> re.Pattern[str] | None:
    """Compile an expected line as a pattern, or None if it is not valid regex syntax."""
    try:
        return re.compile(expected_line)
    except re.error:
        return None


def matches(expected_line: str, actual_line: str | None) -> bool:
    """Check whether an expected line matches an actual line.

    The expected line matches when it is equal to the actual line, or when
    it compiles as a regular expression that matches the whole actual line.
    Expected lines that are not valid patterns only match by equality.

    Args:
        expected_line: Line from the expected sequence
        actual_line: Line from the actual sequence, or None if none is left

    Returns:
        True if the lines match, False otherwise.
    """
    if actual_line is None:
        return False

    if expected_line == actual_line:
        return True

    pattern = _compile(expected_line)
    if pattern is None:
        return False
    return pattern.fullmatch(actual_line) is not None
