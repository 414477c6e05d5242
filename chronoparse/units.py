from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from fractions import Fraction
import math

REP_MIN = -(2**63)
REP_MAX = 2**63 - 1


def in_range(value: int) -> bool:
    return REP_MIN <= value <= REP_MAX


@dataclass(frozen=True, slots=True)
class Resolution:
    """Length of one tick, in seconds."""

    seconds: Fraction
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.seconds <= 0:
            raise ValueError(f"Resolution must be positive: {self.seconds}")

    @classmethod
    def ratio(cls, numerator: int, denominator: int = 1, name: str = "") -> "Resolution":
        return cls(Fraction(numerator, denominator), name)

    @classmethod
    def from_name(cls, name: str) -> "Resolution":
        key = name.strip().lower()
        try:
            return _BY_NAME[key]
        except KeyError:
            raise ValueError(f"Unknown resolution: {name}")

    def __str__(self) -> str:
        return self.name or str(self.seconds)


NANOSECONDS = Resolution.ratio(1, 1_000_000_000, "ns")
MICROSECONDS = Resolution.ratio(1, 1_000_000, "us")
MILLISECONDS = Resolution.ratio(1, 1_000, "ms")
SECONDS = Resolution.ratio(1, 1, "s")
MINUTES = Resolution.ratio(60, 1, "m")
HOURS = Resolution.ratio(3600, 1, "h")

_BY_NAME: dict[str, Resolution] = {}
for _resolution, _aliases in (
    (NANOSECONDS, ("ns", "nanosecond", "nanoseconds")),
    (MICROSECONDS, ("us", "microsecond", "microseconds")),
    (MILLISECONDS, ("ms", "millisecond", "milliseconds")),
    (SECONDS, ("s", "second", "seconds")),
    (MINUTES, ("m", "minute", "minutes")),
    (HOURS, ("h", "hour", "hours")),
):
    for _alias in _aliases:
        _BY_NAME[_alias] = _resolution


def convert(count: int, source: Resolution, target: Resolution) -> int:
    """Convert ``count`` ticks between resolutions, truncating toward zero."""
    if source.seconds == target.seconds:
        return count
    return math.trunc(count * source.seconds / target.seconds)


@dataclass(frozen=True, slots=True)
class Duration:
    count: int
    resolution: Resolution = NANOSECONDS

    def cast(self, resolution: Resolution) -> "Duration":
        return Duration(convert(self.count, self.resolution, resolution), resolution)

    def total_seconds(self) -> Fraction:
        return self.count * self.resolution.seconds

    def to_timedelta(self) -> timedelta:
        # timedelta keeps microseconds; anything finer is dropped toward zero
        micros = convert(self.count, self.resolution, MICROSECONDS)
        return timedelta(microseconds=micros)

    def _require_same(self, other: "Duration") -> None:
        if other.resolution != self.resolution:
            raise ValueError(f"Resolution mismatch: {self.resolution} vs {other.resolution}")

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        self._require_same(other)
        return Duration(self.count + other.count, self.resolution)

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        self._require_same(other)
        return Duration(self.count - other.count, self.resolution)

    def __neg__(self) -> "Duration":
        return Duration(-self.count, self.resolution)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        self._require_same(other)
        return self.count < other.count

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        self._require_same(other)
        return self.count <= other.count

    def __str__(self) -> str:
        return f"{self.count}{self.resolution}"
