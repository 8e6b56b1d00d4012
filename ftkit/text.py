"""Building, trimming, splitting and sorting strings, and NULL-terminated tables.

A string ends at its first NUL character, as a C string would.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Any, Callable, Iterable, MutableSequence, Optional, Union

Sortable = Union[str, bytes, bytearray]


def _text(s: Optional[str]) -> str:
    if s is None:
        raise TypeError("expected a string, got None")
    return s.split("\0", 1)[0]


def _separator(sep: str) -> str:
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return sep


def substr(s: Optional[str], start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``.

    ``None``, a zero length or a start past the end give an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None or not length:
        return ""
    return _text(s)[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """``s1`` followed by ``s2``; ``None`` counts as an empty string."""
    first = "" if s1 is None else _text(s1)
    second = "" if s2 is None else _text(s2)
    return first + second


def strtrim(s: Optional[str], charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end.

    ``None`` gives an empty string.
    """
    if s is None:
        return ""
    return _text(s).strip(_text(charset))


def count_words(s: str, sep: str) -> int:
    """Number of non-empty runs of characters between ``sep`` characters."""
    return sum(1 for word in _text(s).split(_separator(sep)) if word)


def split(s: str, sep: str) -> list[str]:
    """The non-empty pieces of ``s`` between ``sep`` characters, in order."""
    return [word for word in _text(s).split(_separator(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character of ``s``.

    A NUL returned by ``func`` ends the result there.
    """
    out = []
    for i, ch in enumerate(_text(s)):
        new = func(i, ch)
        if new == "\0":
            break
        out.append(new)
    return "".join(out)


def striteri(buf: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` for each item of ``buf`` before its first NUL.

    Whatever ``func`` returns, unless ``None``, replaces the item in place.
    ``buf`` may be a list of characters or a ``bytearray``.
    """
    for i, item in enumerate(buf):
        if item == "\0" or (isinstance(item, int) and item == 0):
            break
        new = func(i, item)
        if new is not None:
            buf[i] = new


def _sort_key(item: Sortable) -> bytes:
    if isinstance(item, str):
        return _text(item).encode()
    data = bytes(item)
    end = data.find(0)
    return data if end < 0 else data[:end]


def sort_strings(items: list[Sortable]) -> None:
    """Sort ``items`` in place by unsigned byte comparison."""
    items.sort(key=_sort_key)


def table_length(items: Optional[Iterable[Any]]) -> int:
    """Number of entries before the first ``None``; ``None`` itself has length 0."""
    if items is None:
        return 0
    return sum(1 for _ in takewhile(lambda item: item is not None, items))