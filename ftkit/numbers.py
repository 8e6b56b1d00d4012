"""Parsing integers from text and rendering integers and decimals as text.

The parsers skip leading white space, take one optional sign and then as many
decimal digits as follow. Like fixed-width machine integers they wrap around
on overflow: 32 bits for :func:`atoi`, 64 bits for :func:`atol` and
:func:`atoll`.
"""

from __future__ import annotations

import operator
from typing import Union

from ftkit.chars import is_digit, is_space

TextLike = Union[str, bytes, bytearray]


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: TextLike, bits: int) -> int:
    data = text.encode() if isinstance(text, str) else bytes(text)
    i = 0
    while i < len(data) and is_space(data[i]):
        i += 1
    sign = 1
    if i < len(data) and data[i] in b"+-":
        if data[i] == ord("-"):
            sign = -1
        i += 1
    result = 0
    while i < len(data) and is_digit(data[i]):
        result = _wrap(result * 10 + data[i] - ord("0"), bits)
        i += 1
    return _wrap(result * sign, bits)


def atoi(text: TextLike) -> int:
    """Parse a leading decimal integer as a 32-bit value; 0 when there is none."""
    return _parse(text, 32)


def atol(text: TextLike) -> int:
    """Parse a leading decimal integer as a 64-bit value; 0 when there is none."""
    return _parse(text, 64)


def atoll(text: TextLike) -> int:
    """Parse a leading decimal integer as a 64-bit value; 0 when there is none."""
    return _parse(text, 64)


def itoa(n: int) -> str:
    """The decimal form of ``n``, with a leading '-' when negative."""
    return str(operator.index(n))


def dtoa(value: float, precision: int) -> str:
    """Render ``value`` as its whole part, a point and a scaled fraction.

    The fraction is multiplied by ten ``precision`` times; every step whose
    integer part is still zero adds a leading zero. Half a unit is then added
    and the result truncated to give the digits after those zeros. A
    carry out of the fraction is not moved into the whole part.
    """
    minus = value < 0
    if minus:
        value = -value
    whole = int(value)
    fraction = value - whole
    zeros = 0
    for _ in range(max(precision, 0)):
        fraction *= 10
        if int(fraction) == 0:
            zeros += 1
    fraction += 0.5
    text = f"{itoa(whole)}.{'0' * zeros}{itoa(int(fraction))}"
    return "-" + text if minus else text