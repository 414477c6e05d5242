from __future__ import annotations

from fractions import Fraction

from ..units import HOURS, MICROSECONDS, MILLISECONDS, MINUTES, NANOSECONDS, SECONDS, Duration, Resolution

_UNITS = (
    ("h", HOURS),
    ("m", MINUTES),
    ("s", SECONDS),
    ("ms", MILLISECONDS),
    ("us", MICROSECONDS),
    ("ns", NANOSECONDS),
)


def _nanoseconds(resolution: Resolution) -> int:
    ratio = Fraction(resolution.seconds) / NANOSECONDS.seconds
    if ratio.denominator != 1:
        raise ValueError(f"Resolution {resolution} is not a whole number of nanoseconds")
    return ratio.numerator


def format_duration(duration: Duration) -> str:
    """Render ``duration`` as tokens that parse back to the same tick count.

    Units larger than the tick are only used where they are whole multiples of
    it; whatever is left goes into the largest unit that divides it exactly.
    Every token of a negative duration carries its own ``-``.
    """
    tick = _nanoseconds(duration.resolution)
    if duration.count == 0:
        return "0s"
    sign = "-" if duration.count < 0 else ""
    remaining = abs(duration.count) * tick

    parts: list[str] = []
    for suffix, unit in _UNITS:
        size = _nanoseconds(unit)
        if size % tick:
            continue
        amount, remaining = divmod(remaining, size)
        if amount:
            parts.append(f"{sign}{amount}{suffix}")
    if remaining:
        for suffix, unit in _UNITS:
            size = _nanoseconds(unit)
            if remaining % size == 0:
                parts.append(f"{sign}{remaining // size}{suffix}")
                break
    return "".join(parts)
