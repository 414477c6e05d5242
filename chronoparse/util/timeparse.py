from __future__ import annotations

import logging
from typing import Iterable, NoReturn, Optional, Union

from ..units import (
    HOURS,
    MICROSECONDS,
    MILLISECONDS,
    MINUTES,
    NANOSECONDS,
    REP_MAX,
    REP_MIN,
    SECONDS,
    Duration,
    Resolution,
    convert,
    in_range,
)

LOGGER = logging.getLogger(__name__)

CharSequence = Union[str, bytes, bytearray, memoryview, Iterable[str]]

# units whose letter must be followed by "s"
_PAIRED_UNITS = {"n": NANOSECONDS, "u": MICROSECONDS}
_SINGLE_UNITS = {"s": SECONDS, "h": HOURS}


class MalformedInput(ValueError):
    """Raised when a duration string does not follow the token grammar."""

    def __init__(self, text: str, position: int, reason: str) -> None:
        super().__init__(f"Invalid duration {text!r} at position {position}: {reason}")
        self.text = text
        self.position = position
        self.reason = reason


def as_text(value: CharSequence) -> str:
    """Normalise any supported character sequence to ``str``.

    Byte-like input is narrow ASCII text; other iterables must yield single
    characters.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        try:
            return raw.decode("ascii")
        except UnicodeDecodeError as exc:
            text = raw.decode("ascii", errors="replace")
            raise MalformedInput(text, exc.start, "non-ASCII character") from exc
    chars = []
    for char in value:
        if not isinstance(char, str) or len(char) != 1:
            raise TypeError(f"Expected single characters, got {char!r}")
        chars.append(char)
    return "".join(chars)


class _Scanner:
    """Forward-only reader with one character of lookahead."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0
        self._chars = iter(text)
        self._current: Optional[str] = next(self._chars, None)

    def peek(self) -> Optional[str]:
        return self._current

    def advance(self) -> Optional[str]:
        char = self._current
        if char is not None:
            self.position += 1
            self._current = next(self._chars, None)
        return char

    def at_end(self) -> bool:
        return self._current is None


class DurationParser:
    """Parses ``([+-]?\\d*(ns|us|ms|s|m|h))*`` into a fixed resolution."""

    def __init__(self, resolution: Resolution = NANOSECONDS) -> None:
        self.resolution = resolution

    def parse(self, value: CharSequence) -> Duration:
        scanner = _Scanner(as_text(value))
        total = 0
        while not scanner.at_end():
            component = self._read_component(scanner)
            total += component
            if not in_range(total):
                self._fail(scanner, scanner.position, "duration out of range")
        return Duration(total, self.resolution)

    def _read_component(self, scanner: _Scanner) -> int:
        negative = False
        if scanner.peek() in ("+", "-"):
            negative = scanner.advance() == "-"

        limit = -REP_MIN if negative else REP_MAX
        magnitude = 0
        while True:
            char = scanner.peek()
            if char is None or not "0" <= char <= "9":
                break
            magnitude = magnitude * 10 + (ord(char) - ord("0"))
            if magnitude > limit:
                self._fail(scanner, scanner.position, "magnitude out of range")
            scanner.advance()
        signed = -magnitude if negative else magnitude

        unit_position = scanner.position
        unit = self._read_unit(scanner)
        component = convert(signed, unit, self.resolution)
        if not in_range(component):
            self._fail(scanner, unit_position, f"component out of range for {self.resolution}")
        return component

    def _read_unit(self, scanner: _Scanner) -> Resolution:
        position = scanner.position
        char = scanner.advance()
        if char is None:
            self._fail(scanner, position, "expected unit")
        if char in _SINGLE_UNITS:
            return _SINGLE_UNITS[char]
        if char == "m":
            if scanner.peek() == "s":
                scanner.advance()
                return MILLISECONDS
            return MINUTES
        if char in _PAIRED_UNITS:
            if scanner.advance() != "s":
                self._fail(scanner, position + 1, f"expected 's' after {char!r}")
            return _PAIRED_UNITS[char]
        self._fail(scanner, position, f"unknown unit {char!r}")

    @staticmethod
    def _fail(scanner: _Scanner, position: int, reason: str) -> NoReturn:
        LOGGER.debug(
            "Rejected duration",
            extra={"duration_text": scanner.text, "position": position, "reason": reason},
        )
        raise MalformedInput(scanner.text, position, reason)


def parse_duration(value: CharSequence, resolution: Resolution = NANOSECONDS) -> Duration:
    """Parse a compound duration such as ``"1h33m7s"`` into ``resolution`` ticks."""
    return DurationParser(resolution).parse(value)
