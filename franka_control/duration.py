"""Millisecond-resolution time spans as reported by the robot."""

from __future__ import annotations

from dataclasses import dataclass

_MODULUS = 1 << 64


def _wrap(value: int) -> "Duration":
    return Duration(value % _MODULUS)


def _check_divisor(divisor: int) -> int:
    if divisor < 0:
        raise ValueError("Duration divisor must not be negative.")
    return divisor


@dataclass(frozen=True, order=True)
class Duration:
    """Unsigned 64-bit span of time counted in milliseconds.

    Arithmetic wraps around modulo 2**64, like an unsigned counter.
    """

    milliseconds: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.milliseconds, bool) or not isinstance(self.milliseconds, int):
            raise TypeError("Duration requires an integer number of milliseconds.")
        if not 0 <= self.milliseconds < _MODULUS:
            raise ValueError("Duration must fit into an unsigned 64-bit integer.")

    def to_sec(self) -> float:
        """Return the duration in seconds."""
        return self.milliseconds / 1000.0

    def to_msec(self) -> int:
        """Return the duration in milliseconds."""
        return self.milliseconds

    def __int__(self) -> int:
        return self.milliseconds

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return _wrap(self.milliseconds + other.milliseconds)

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return _wrap(self.milliseconds - other.milliseconds)

    def __mul__(self, factor: object) -> "Duration":
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return _wrap(self.milliseconds * factor)

    def __rmul__(self, factor: object) -> "Duration":
        return self.__mul__(factor)

    def __floordiv__(self, other: object):
        """Divide by a duration (giving a count) or by an integer (giving a duration)."""
        if isinstance(other, Duration):
            return self.milliseconds // other.milliseconds
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(self.milliseconds // _check_divisor(other))

    def __mod__(self, other: object) -> "Duration":
        if isinstance(other, Duration):
            return Duration(self.milliseconds % other.milliseconds)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(self.milliseconds % _check_divisor(other))