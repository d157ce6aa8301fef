"""Constants for line matching.

This module defines the directive markers and cache sizes used throughout
the matching process.
"""


class DirectiveMarkers:
    """Markers that delimit a fast-forward directive line."""

    # A trimmed expected line that starts and ends with this marker is a directive
    FAST_FORWARD = ">>"


class CacheConfig:
    """Configuration for caching mechanisms."""

    # Maximum size of LRU cache for compiled expected-line patterns
    PATTERN_CACHE_SIZE = 1024


class DirectiveLimits:
    """Bounds for fast-forward skip limits."""

    # Limits outside the signed 32-bit range are not integers and mean "unbounded"
    MAX_LIMIT = 2**31 - 1
    MIN_LIMIT = -(2**31)
