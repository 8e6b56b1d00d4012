import pytest

from ftkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    mempcpy,
    memrchr,
    memset,
)


def test_memset_fills_prefix_with_low_byte():
    buf = bytearray(b"abcdef")
    result = memset(buf, 0x100 + ord("z"), 3)
    assert result is buf
    assert buf == b"zzzdef"


def test_memset_past_end_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf == b"\0\0llo"


def test_memcpy_copies_and_returns_destination():
    dst = bytearray(b"xxxxxx")
    assert memcpy(dst, b"abc", 3) is dst
    assert dst == b"abcxxx"


def test_memcpy_source_too_short_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 4)


def test_memccpy_stops_after_stop_byte():
    dst = bytearray(b"........")
    end = memccpy(dst, b"key=value", ord("="), 8)
    assert end == len(b"key=")
    assert dst[:end] == b"key="
    assert dst[end:] == b"...."


def test_memccpy_not_found_terminates_when_room():
    dst = bytearray(b"#######")
    assert memccpy(dst, b"abcdef", ord("z"), 4) is None
    assert dst == b"abcd\0##"


def test_memccpy_out_of_byte_range_never_matches():
    dst = bytearray(3)
    assert memccpy(dst, b"abc", 0x100 + ord("a"), 3) is None
    assert dst == b"abc"


def test_mempcpy_returns_end_offset():
    dst = bytearray(6)
    end = mempcpy(dst, b"hello", 5)
    assert end == 5
    assert dst[:end] == b"hello"


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 2, 0, 5)
    assert buf == b"ab" + b"abcde" + b"h"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 0, 2, 5)
    assert buf == b"cdefg" + b"fgh"


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_and_memrchr_find_first_and_last():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")
    assert memrchr(data, ord("o"), len(data)) == data.rindex(b"o")


def test_memchr_limits_search_to_n():
    data = b"abcdef"
    assert memchr(data, ord("e"), 3) is None
    assert memrchr(data, ord("a"), 0) is None


def test_memchr_masks_search_byte():
    data = b"\x00\xff"
    assert memchr(data, -1, 2) == 1


def test_memcmp_sign_and_difference():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"\xff", b"\x00", 1) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_calloc_returns_zeroed_buffer():
    buf = calloc(4, 3)
    assert buf == bytearray(12)


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX // 2 + 1, 2)


def test_calloc_zero_size_is_empty():
    assert calloc(SIZE_MAX, 0) == bytearray()