"""Constants for jwthandler."""

from datetime import UTC, datetime

__all__ = [
    "EPOCH",
    "LOGGER_NAME",
    "SEGMENT_COUNT",
    "SEGMENT_SEPARATOR",
]

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
"""Reference point for all numeric date claims."""

LOGGER_NAME = "jwthandler"
"""Name of the structlog logger used by the library."""

SEGMENT_COUNT = 3
"""Number of segments in a JWT in compact serialization."""

SEGMENT_SEPARATOR = "."
"""Literal separator between the segments of a compact JWT."""
