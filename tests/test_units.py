from __future__ import annotations

from datetime import timedelta
from fractions import Fraction

import pytest

from chronoparse.units import (
    HOURS,
    MICROSECONDS,
    MILLISECONDS,
    MINUTES,
    NANOSECONDS,
    SECONDS,
    Duration,
    Resolution,
    convert,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("ns", NANOSECONDS),
        ("microseconds", MICROSECONDS),
        ("MS", MILLISECONDS),
        (" s ", SECONDS),
        ("minute", MINUTES),
        ("hours", HOURS),
    ],
)
def test_from_name(name: str, expected: Resolution) -> None:
    assert Resolution.from_name(name) == expected


def test_from_name_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown resolution"):
        Resolution.from_name("days")


def test_resolution_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Resolution.ratio(0)


def test_resolution_equality_ignores_name() -> None:
    assert Resolution.ratio(60) == MINUTES
    assert Resolution(Fraction(1, 1000)) == MILLISECONDS


def test_convert_truncates_toward_zero() -> None:
    assert convert(1_999, MILLISECONDS, SECONDS) == 1
    assert convert(-1_999, MILLISECONDS, SECONDS) == -1
    assert convert(2, HOURS, MINUTES) == 120
    assert convert(7, SECONDS, SECONDS) == 7


def test_cast() -> None:
    assert Duration(90, MINUTES).cast(HOURS) == Duration(1, HOURS)
    assert Duration(1, HOURS).cast(SECONDS) == Duration(3600, SECONDS)


def test_arithmetic_and_ordering() -> None:
    a = Duration(5, SECONDS)
    b = Duration(3, SECONDS)
    assert a + b == Duration(8, SECONDS)
    assert a - b == Duration(2, SECONDS)
    assert -a == Duration(-5, SECONDS)
    assert b < a
    assert a > b
    assert a >= Duration(5, SECONDS)


def test_arithmetic_requires_same_resolution() -> None:
    with pytest.raises(ValueError, match="Resolution mismatch"):
        Duration(1, SECONDS) + Duration(1, MINUTES)


def test_to_timedelta_and_seconds() -> None:
    duration = Duration(1_500_000_999, NANOSECONDS)
    assert duration.to_timedelta() == timedelta(seconds=1, microseconds=500_000)
    assert duration.total_seconds() == Fraction(1_500_000_999, 1_000_000_000)
    assert Duration(2, HOURS).to_timedelta() == timedelta(hours=2)


def test_str() -> None:
    assert str(Duration(12, MILLISECONDS)) == "12ms"
