"""32-bit wrapping sequence numbers relative to an initial sequence number."""

from __future__ import annotations

from dataclasses import dataclass

_MOD32 = 1 << 32
_MAX64 = (1 << 64) - 1


def _to_signed32(value: int) -> int:
    """Interpret the low 32 bits of ``value`` as a two's-complement integer."""
    value %= _MOD32
    return value - _MOD32 if value >= 1 << 31 else value


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer expressed relative to an arbitrary initial sequence number.

    Used for TCP sequence numbers (seqno) and acknowledgment numbers (ackno).
    """

    raw_value: int

    def __post_init__(self) -> None:
        if isinstance(self.raw_value, bool) or not isinstance(self.raw_value, int):
            raise TypeError("raw_value must be an int")
        if not 0 <= self.raw_value < _MOD32:
            raise ValueError(f"raw_value {self.raw_value} does not fit in 32 bits")

    def __add__(self, other: int) -> WrappingInt32:
        """The point ``other`` steps past this one, modulo 2**32."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value + other) % _MOD32)

    def __sub__(self, other):
        """With a WrappingInt32, the signed offset of ``self`` from ``other``.

        The result is negative when reaching ``self`` from ``other`` takes no
        more decrements than increments. With an int, the point ``other``
        steps before this one.
        """
        if isinstance(other, WrappingInt32):
            return _to_signed32(self.raw_value - other.raw_value)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value - other) % _MOD32)

    def __int__(self) -> int:
        return self.raw_value

    def __str__(self) -> str:
        return str(self.raw_value)


def _check_u64(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    if not 0 <= value <= _MAX64:
        raise ValueError(f"{name} {value} is not an unsigned 64-bit value")


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a relative 32-bit one."""
    _check_u64("n", n)
    return isn + (n % _MOD32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to ``n`` closest to ``checkpoint``."""
    _check_u64("checkpoint", checkpoint)
    offset = n - wrap(checkpoint, isn)
    result = checkpoint + offset
    return result if result >= 0 else result + _MOD32