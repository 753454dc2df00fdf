"""32-bit wrapping sequence numbers and their 64-bit absolute counterparts."""

from __future__ import annotations

from dataclasses import dataclass

_MOD32 = 1 << 32
_MASK32 = _MOD32 - 1
_MOD64 = 1 << 64
_HALF32 = 1 << 31


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer, taken relative to an arbitrary initial sequence number."""

    raw_value: int

    def __post_init__(self) -> None:
        if isinstance(self.raw_value, bool) or not isinstance(self.raw_value, int):
            raise TypeError(f"raw value must be an int, got {type(self.raw_value).__name__}")
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    def __add__(self, other: int) -> WrappingInt32:
        """Step `other` places past this point, wrapping at 2**32."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other: WrappingInt32 | int) -> WrappingInt32 | int:
        """Offset from `other` when given a WrappingInt32, else step back `other` places.

        The offset is the signed 32-bit number of increments needed to get from
        `other` to this point; it is negative when going backwards is no longer.
        """
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _MOD32 if diff >= _HALF32 else diff
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value - other)

    def __str__(self) -> str:
        return str(self.raw_value)


def _check_u64(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value < _MOD64:
        raise ValueError(f"{name} must be an unsigned 64-bit value, got {value}")


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a relative 32-bit one."""
    _check_u64("n", n)
    return isn + (n & _MASK32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to `n` and is closest to `checkpoint`."""
    _check_u64("checkpoint", checkpoint)
    result = checkpoint + (n - wrap(checkpoint, isn))
    if result < 0:
        result += _MOD32
    elif result >= _MOD64:
        result -= _MOD32
    return result