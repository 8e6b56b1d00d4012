"""Character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The predicates return ``bool``. The case converters return a value of the
same kind they were given.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset(map(ord, " \n\t\v\f\r"))


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _byte(c: CharLike) -> int | None:
    """Return the code when it fits in an unsigned byte, else ``None``."""
    code = _code(c)
    return code if 0 <= code <= 255 else None


def is_space(c: CharLike) -> bool:
    """True for space, newline, tab, vertical tab, form feed and carriage return.

    Integer codes are reduced to their low byte before the check.
    """
    return (_code(c) & 0xFF) in _SPACE_CODES


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: CharLike) -> bool:
    """True for '0' to '9'."""
    code = _byte(c)
    return code is not None and ord("0") <= code <= ord("9")


def is_lower(c: CharLike) -> bool:
    """True for 'a' to 'z'."""
    code = _byte(c)
    return code is not None and ord("a") <= code <= ord("z")


def is_upper(c: CharLike) -> bool:
    """True for 'A' to 'Z'."""
    code = _byte(c)
    return code is not None and ord("A") <= code <= ord("Z")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    return is_lower(c) or is_upper(c)


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space to tilde."""
    code = _byte(c)
    return code is not None and ord(" ") <= code <= ord("~")


def is_charset(c: CharLike, set_char: CharLike) -> bool:
    """True when ``c`` is the character ``set_char``."""
    return _code(c) == _code(set_char)


def is_in_set(c: CharLike, charset: str) -> bool:
    """True when ``c`` occurs in ``charset``.

    The NUL character never matches, as it marks the end of a set.
    """
    code = _code(c)
    return code != 0 and any(ord(ch) == code for ch in charset)


def _convert(c: CharLike, delta: int) -> CharLike:
    code = _code(c) + delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an uppercase ASCII letter to lowercase; leave anything else."""
    return _convert(c, 32) if is_upper(c) else c


def to_upper(c: CharLike) -> CharLike:
    """Map a lowercase ASCII letter to uppercase; leave anything else."""
    return _convert(c, -32) if is_lower(c) else c