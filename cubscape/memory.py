"""Byte-buffer helpers: zeroing, filling, searching, comparing and copying."""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(count: int, *buffers: Sequence[int]) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError("count exceeds buffer length")


def zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def zero(buffer: bytearray, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to zero and return it."""
    return fill(buffer, 0, count)


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def find_byte(buffer: Sequence[int], value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``count``, or None."""
    _check_count(count, buffer)
    target = value & 0xFF
    return next((i for i, b in enumerate(buffer[:count]) if b == target), None)


def compare(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Difference of the first unequal pair of bytes in the first ``count``, or 0."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def copy_into(dest: bytearray, src: Sequence[int], count: int) -> bytearray:
    """Copy the first ``count`` bytes of ``src`` over the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def move_within(buffer: bytearray, dst: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes from offset ``src`` to offset ``dst``; overlap is safe."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if count < 0:
        raise ValueError("count must not be negative")
    if max(dst, src) + count > len(buffer):
        raise ValueError("range exceeds buffer length")
    buffer[dst:dst + count] = bytes(buffer[src:src + count])
    return buffer