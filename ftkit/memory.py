"""Byte-buffer operations on ``bytes``, ``bytearray`` and ``memoryview`` objects.

Positions are returned as integer offsets into the buffer. ``None`` means that
nothing was found. A request to read or write past the end of a buffer raises
``ValueError``.
"""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check(buf: Buffer, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    _check(dst, n, "destination")
    _check(src, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: Buffer, c: int, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dst`` up to and including the byte ``c``.

    At most ``n`` bytes are copied. When ``c`` is found, the offset in ``dst``
    just past the copied ``c`` is returned. Otherwise all ``n`` bytes are
    copied, a zero byte is stored after them when ``dst`` has room for it, and
    ``None`` is returned.
    """
    _check(dst, n, "destination")
    _check(src, n, "source")
    chunk = bytes(src[:n])
    pos = chunk.find(c) if 0 <= c <= 255 else -1
    if pos >= 0:
        dst[: pos + 1] = chunk[: pos + 1]
        return pos + 1
    dst[:n] = chunk
    if len(dst) > n:
        dst[n] = 0
    return None


def mempcpy(dst: bytearray, src: Buffer, n: int) -> int:
    """Copy ``n`` bytes like :func:`memcpy` and return the offset past the copy."""
    memcpy(dst, src, n)
    return n


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf``; the two regions may overlap."""
    for offset in (dst_offset, src_offset):
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
        _check(buf, offset + n, "buffer")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if dst_offset != src_offset:
        buf[dst_offset : dst_offset + n] = bytes(buf[src_offset : src_offset + n])
    return buf


def memchr(data: Buffer, c: int, n: int) -> int | None:
    """Offset of the first byte equal to the low byte of ``c`` in ``data[:n]``."""
    _check(data, n, "buffer")
    pos = bytes(data[:n]).find(c & 0xFF)
    return None if pos < 0 else pos


def memrchr(data: Buffer, c: int, n: int) -> int | None:
    """Offset of the last byte equal to the low byte of ``c`` in ``data[:n]``."""
    _check(data, n, "buffer")
    pos = bytes(data[:n]).rfind(c & 0xFF)
    return None if pos < 0 else pos


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check(a, n, "first buffer")
    _check(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises ``OverflowError`` when the total would not fit in a 64-bit size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size > 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} elements of {size} bytes overflow the size limit")
    return bytearray(nmemb * size)