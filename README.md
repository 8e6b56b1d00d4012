# ftkit

A small toolbox of helpers for characters, byte buffers, NUL-terminated
strings, text, singly linked lists and integer parsing, plus a parser for
`%`-style conversion specifications.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars`: character classification and case conversion on
  one-character strings or integer codes (`is_space`, `is_ascii`,
  `is_digit`, `is_alpha`, `is_lower`, `is_upper`, `is_alnum`, `is_print`,
  `is_charset`, `is_in_set`, `to_lower`, `to_upper`).
- `ftkit.memory`: byte-buffer operations on `bytes`, `bytearray` and
  `memoryview` objects (`memset`, `bzero`, `memcpy`, `memccpy`, `mempcpy`,
  `memmove`, `memchr`, `memrchr`, `memcmp`, `calloc`). Positions come back as
  integer offsets, `None` means nothing was found, and reading or writing past
  the end of a buffer raises `ValueError`.
- `ftkit.strings`: routines for NUL-terminated strings given as `str` or
  bytes (`strlen`, `strcpy`, `strncpy`, `strlcpy`, `strdup`, `strcat`,
  `strncat`, `strlcat`, `strchr`, `strrchr`, `strstr`, `strnstr`, `strcmp`,
  `strncmp`). Writing routines take a `bytearray` destination and raise
  `ValueError` when it is too small.
- `ftkit.text`: higher-level text helpers (`substr`, `strjoin`, `strtrim`,
  `count_words`, `split`, `strmapi`, `striteri`, `sort_strings`,
  `table_length`).
- `ftkit.numbers`: `atoi` (wraps at 32 bits), `atol` and `atoll` (wrap at
  64 bits), `itoa` and `dtoa`.
- `ftkit.lists`: a singly linked `LinkedList` of `Node` objects with
  `add_front`, `add_back`, `last`, `clear`, `for_each`, `map`, `len()` and
  iteration.
- `ftkit.spec`: `parse_spec` reads the flags (`- 0 # space +`), width,
  precision and conversion character (`c s p d i u x X %`) that follow a `%`
  sign and returns a `ParsedSpec` holding a `Flags` object. `Format` holds the
  pieces of a conversion under construction.

## Example

```python
from ftkit.numbers import atoi, itoa, dtoa
from ftkit.text import split
from ftkit.strings import strlcpy
from ftkit.lists import LinkedList
from ftkit.spec import parse_spec

atoi("   -123abc")                # -123
itoa(-2147483648)                 # '-2147483648'
dtoa(3.14159, 2)                  # '3.14'
split("  hello  world ", " ")     # ['hello', 'world']

buf = bytearray(8)
strlcpy(buf, "hello world", 8)    # 11; buf == bytearray(b'hello w\x00')

lst = LinkedList([1, 2, 3])
lst.add_front(0)
list(lst)                         # [0, 1, 2, 3]
list(lst.map(lambda x: x * 10, lambda x: None))  # [0, 10, 20, 30]

spec = parse_spec("-8.3d")
spec.conversion, spec.flags.width, spec.flags.precision  # ('d', 8, 3)
```

## What the package does not do

`ftkit.spec` only parses conversion specifications. The package has no
formatter that turns a format string and its arguments into text, and nothing
that prints it: there are no helpers for writing characters, strings or
numbers to standard output or to file descriptors, and there is no command to
run.