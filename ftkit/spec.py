"""Conversion specifications: flags, formatting state and the spec parser."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields

from ftkit.chars import is_digit, is_in_set

FLAG_CHARS = "-0# +"
CONVERSIONS = "cspdiuxX%"

_DIGITS = re.compile(r"[0-9]*")


@dataclass
class Flags:
    """Flags, width and precision of one conversion specification."""

    minus: int = 0
    zero: int = 0
    dot: int = 0
    hash: int = 0
    space: int = 0
    plus: int = 0
    precision: int = 0
    width: int = 0

    def normalize(self) -> None:
        """Resolve conflicting flags and make width and precision positive."""
        if self.minus:
            self.zero = 0
        if self.dot:
            self.zero = 0
        if self.plus:
            self.space = 0
        self.width = abs(self.width)
        self.precision = abs(self.precision)

    def reset(self) -> None:
        """Return every field to zero."""
        for f in fields(self):
            setattr(self, f.name, 0)


@dataclass
class Format:
    """The pieces a conversion is built from before it is padded."""

    content: str | None = None
    prefix: str | None = None
    precise: str | None = None
    zeropad: str | None = None
    mid: str | None = None

    def clear(self) -> None:
        """Drop every piece."""
        for f in fields(self):
            setattr(self, f.name, None)


@dataclass
class ParsedSpec:
    """Result of parsing the text that follows a '%'.

    ``index`` is the position of the conversion character in that text.
    For a spec whose conversion is not recognised, ``literal`` holds the text
    that is echoed instead.
    """

    flags: Flags = field(default_factory=Flags)
    index: int = 0
    conversion: str = ""
    valid: bool = False
    literal: str = ""


def _read_number(text: str, pos: int) -> tuple[int, int]:
    match = _DIGITS.match(text, pos)
    digits = match.group()
    return int(digits) if digits else 0, match.end()


def parse_spec(text: str) -> ParsedSpec:
    """Parse flags, width, precision and conversion from ``text``.

    ``text`` starts just after the '%' sign.
    """
    flags = Flags()
    i = 0
    while i < len(text) and is_in_set(text[i], FLAG_CHARS):
        ch = text[i]
        flags.minus += ch == "-"
        flags.zero += ch == "0"
        flags.hash += ch == "#"
        flags.space += ch == " "
        flags.plus += ch == "+"
        i += 1

    if i < len(text) and "1" <= text[i] <= "9":
        flags.width, i = _read_number(text, i)
    if i < len(text) and text[i] == ".":
        flags.dot = 1
        i += 1
    if i < len(text) and is_digit(text[i]):
        flags.precision, i = _read_number(text, i)

    conversion = text[i] if i < len(text) else ""
    if conversion and is_in_set(conversion, CONVERSIONS):
        flags.normalize()
        return ParsedSpec(flags=flags, index=i, conversion=conversion, valid=True)

    literal = "%" + text[: i + 1]
    return ParsedSpec(
        flags=flags, index=i, conversion=conversion, valid=False, literal=literal
    )