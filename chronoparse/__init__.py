"""Parse compound duration strings such as ``1h33m7s`` into tick counts."""

from .units import (
    HOURS,
    MICROSECONDS,
    MILLISECONDS,
    MINUTES,
    NANOSECONDS,
    SECONDS,
    Duration,
    Resolution,
)
from .util.timeformat import format_duration
from .util.timeparse import DurationParser, MalformedInput, parse_duration

__all__ = [
    "Duration",
    "DurationParser",
    "HOURS",
    "MICROSECONDS",
    "MILLISECONDS",
    "MINUTES",
    "MalformedInput",
    "NANOSECONDS",
    "Resolution",
    "SECONDS",
    "format_duration",
    "parse_duration",
]
