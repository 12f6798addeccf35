"""Byte-buffer helpers: fill, copy, search and compare.

Buffers are any writable byte sequence (bytearray, memoryview) for the
destination and any bytes-like object for the source. Counts that reach
past the end of a buffer raise ValueError.
"""

from __future__ import annotations

from typing import Optional


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buf in buffers:
        if count > len(buf):
            raise ValueError(f"count {count} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_count(count, buf)
    buf[:count] = bytes([value & 0xFF]) * count
    return buf


def bzero(buf: bytearray, count: int) -> bytearray:
    """Zero the first ``count`` bytes of ``buf``."""
    return memset(buf, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes, count: int) -> bytearray:
    """Copy the first ``count`` bytes of ``src`` to the start of ``dst``."""
    _check_count(count, dst, src)
    dst[:count] = bytes(src[:count])
    return dst


def memmove(buf: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied
    to a temporary buffer first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count)
    if max(dest, src) + count > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dest:dest + count] = bytes(buf[src:src + count])
    return buf


def memchr(data: bytes, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``count`` bytes, or None."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, count: int) -> int:
    """Difference of the first differing bytes within ``count`` bytes, else 0."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memccpy(dst: bytearray, src: bytes, stop: int, count: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including the byte ``stop``.

    At most ``count`` bytes are copied. Returns the offset in ``dst`` just
    past the copied stop byte, or None if it was not met within ``count``
    bytes (in which case all ``count`` bytes were copied).
    """
    _check_count(count, dst, src)
    index = bytes(src[:count]).find(stop & 0xFF)
    copied = count if index < 0 else index + 1
    dst[:copied] = bytes(src[:copied])
    return None if index < 0 else copied