"""Raw byte-buffer routines: search, compare, copy, move and fill."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _byte(c: int) -> int:
    """Reduce an integer to the byte value it stands for."""
    return c & 0xFF


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buffer)} bytes")


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in ``buf[:n]``, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair.

    Comparison stops at the first difference, so ``n`` may exceed a buffer
    as long as the buffers differ before its end.
    """
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    if n > min(len(a), len(b)):
        raise ValueError(f"byte count {n} runs past the end of a buffer")
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes at offset ``src`` to offset ``dest`` within ``buf``.

    The regions may overlap; the result is as if the source were copied
    to a temporary buffer first.
    """
    if n < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and byte count must not be negative")
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError(f"moving {n} bytes runs past the end of the buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the byte value ``c``."""
    _check_count(n, buf)
    buf[:n] = bytes([_byte(c)]) * n
    return buf