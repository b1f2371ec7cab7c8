"""Byte-buffer helpers: fill, copy, search, compare and zeroed allocation."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_length(length: int, *buffers: ReadableBuffer) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise IndexError(
                f"length {length} exceeds buffer of {len(buffer)} bytes"
            )


def memset(buffer: Buffer, value: int, length: int) -> Buffer:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (as a byte)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: Buffer, length: int) -> Buffer:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    return memset(buffer, 0, length)


def memcpy(dest: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` to the start of ``dest``."""
    _check_length(length, dest, src)
    dest[:length] = bytes(src[:length])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` to ``dest``; the regions may overlap."""
    _check_length(length, dest, src)
    # Taking a snapshot of the source first makes overlapping views safe.
    snapshot = bytes(src[:length])
    dest[:length] = snapshot
    return dest


def memchr(data: ReadableBuffer, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes.

    Returns None when the byte does not occur.
    """
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, length: int) -> int:
    """Compare the first ``length`` bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_length(length, first, second)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total would exceed the largest object size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size > SIZE_MAX // count:
        raise OverflowError(f"{count} * {size} bytes exceeds the maximum size")
    return bytearray(count * size)