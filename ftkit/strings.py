"""NUL-terminated string routines over ``str`` and byte buffers.

Strings may be given as ``str`` (encoded as UTF-8) or as any bytes-like
object. A string ends at its first NUL byte, or at the end of the object when
it holds none. Routines that write take a ``bytearray`` destination and raise
``ValueError`` when it is too small for what they store. Search routines
return integer offsets, or ``None`` when nothing is found.
"""

from __future__ import annotations

from typing import Union

from ftkit.memory import memchr, memrchr

StrLike = Union[str, bytes, bytearray, memoryview]


def _cstr(s: StrLike | None) -> bytes:
    """Bytes of ``s`` up to, not including, its first NUL."""
    if s is None:
        raise TypeError("expected a string, got None")
    data = s.encode() if isinstance(s, str) else bytes(s)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _char(c: Union[str, int]) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        encoded = c.encode()
        if len(encoded) != 1:
            raise ValueError(f"character {c!r} does not fit in one byte")
        return encoded[0]
    return c


def _store(dst: bytearray, offset: int, data: bytes) -> None:
    end = offset + len(data)
    if end > len(dst):
        raise ValueError(
            f"destination holds {len(dst)} bytes, {end} needed"
        )
    dst[offset:end] = data


def strlen(s: StrLike | None) -> int:
    """Number of bytes before the first NUL; ``None`` has length 0."""
    if s is None:
        return 0
    return len(_cstr(s))


def strcpy(dst: bytearray, src: StrLike) -> bytearray:
    """Copy ``src`` and its terminating NUL to the start of ``dst``."""
    _store(dst, 0, _cstr(src) + b"\0")
    return dst


def strncpy(dst: bytearray, src: StrLike, n: int) -> bytearray:
    """Copy exactly ``n`` bytes: ``src`` cut to ``n``, padded with NULs.

    No terminator is added when ``src`` is ``n`` bytes or longer.
    """
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    _store(dst, 0, _cstr(src)[:n].ljust(n, b"\0"))
    return dst


def strlcpy(dst: bytearray, src: StrLike, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` and a NUL into ``dst``.

    Nothing is written when ``size`` is 0. Returns the length of ``src``.
    """
    data = _cstr(src)
    if size <= 0:
        return len(data)
    _store(dst, 0, data[: size - 1] + b"\0")
    return len(data)


def strdup(s: StrLike) -> Union[str, bytes]:
    """A copy of ``s`` up to its first NUL, of the same text or bytes kind."""
    if isinstance(s, str):
        return s.split("\0", 1)[0]
    return _cstr(s)


def strcat(dst: bytearray, src: StrLike) -> bytearray:
    """Append ``src`` and a NUL after the string held in ``dst``."""
    _store(dst, strlen(dst), _cstr(src) + b"\0")
    return dst


def strncat(dst: bytearray, src: StrLike, n: int) -> bytearray:
    """Append ``n`` bytes of ``src`` (NUL padded) and a NUL to ``dst``'s string."""
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    _store(dst, strlen(dst), _cstr(src)[:n].ljust(n, b"\0") + b"\0")
    return dst


def strlcat(dst: bytearray, src: StrLike, size: int) -> int:
    """Append ``src`` to ``dst`` so the result fits ``size`` bytes with its NUL.

    Returns the length the full concatenation would have; when ``size`` does
    not exceed the current length of ``dst``, nothing is written and
    ``size`` plus the length of ``src`` is returned.
    """
    dlen = strlen(dst)
    data = _cstr(src)
    total = dlen + len(data)
    if size <= dlen:
        return size + len(data)
    room = len(data) if total < size else size - dlen - 1
    _store(dst, dlen, data[:room] + b"\0")
    return total


def strchr(s: StrLike, c: Union[str, int]) -> int | None:
    """Offset of the first ``c`` in ``s``; NUL finds the terminator."""
    data = _cstr(s) + b"\0"
    return memchr(data, _char(c), len(data))


def strrchr(s: StrLike, c: Union[str, int]) -> int | None:
    """Offset of the last ``c`` in ``s``; NUL finds the terminator."""
    data = _cstr(s) + b"\0"
    return memrchr(data, _char(c), len(data))


def strstr(haystack: StrLike, needle: StrLike) -> int | None:
    """Offset of the first ``needle`` in ``haystack``.

    An empty needle matches at 0, except in an empty haystack, where nothing
    is found.
    """
    hay = _cstr(haystack)
    pos = hay.find(_cstr(needle))
    return pos if 0 <= pos < len(hay) else None


def strnstr(haystack: StrLike, needle: StrLike, length: int) -> int | None:
    """Offset of the first ``needle`` lying wholly in the first ``length`` bytes.

    An empty needle always matches at 0.
    """
    pattern = _cstr(needle)
    if not pattern:
        return 0
    pos = _cstr(haystack)[: max(length, 0)].find(pattern)
    return None if pos < 0 else pos


def strcmp(s1: StrLike, s2: StrLike) -> int:
    """Difference of the first unequal bytes, or 0 when the strings are equal."""
    for x, y in zip(_cstr(s1) + b"\0", _cstr(s2) + b"\0"):
        if x != y or not x:
            return x - y
    return 0


def strncmp(s1: StrLike | None, s2: StrLike | None, n: int) -> int:
    """Compare at most ``n`` bytes; stop at the first difference or NUL.

    Returns 0 when ``n`` is 0 or both strings are ``None``.
    """
    if n <= 0 or (s1 is None and s2 is None):
        return 0
    a = _cstr(s1) + b"\0"
    b = _cstr(s2) + b"\0"
    for _, x, y in zip(range(n), a, b):
        if x != y or not x or not y:
            return x - y
    return 0