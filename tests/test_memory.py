import pytest

from ftkit.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    realloc,
)


def test_bzero_zeroes_prefix_only():
    buf = bytearray(b"Hello,World!")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"o,World!"


def test_bzero_rejects_oversized_count():
    with pytest.raises(ValueError):
        bzero(bytearray(3), 4)


def test_calloc_is_zero_filled():
    buf = calloc(5, 6)
    assert len(buf) == 30
    assert all(b == 0 for b in buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memset_example():
    buf = bytearray(b"Hello, World!")
    result = memset(buf, "X", 3)
    assert result is buf
    assert buf == b"XXXlo, World!"


def test_memset_truncates_int_to_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == b"AA"


def test_memcpy_copies_prefix():
    dest = bytearray(10)
    result = memcpy(dest, b"Hello", 5)
    assert result is dest
    assert dest[:5] == b"Hello"
    assert dest[5:] == bytes(5)


def test_memcpy_rejects_reading_past_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(20), b"Hello", 20)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_memmove_bounds():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_within_limit():
    data = b"Hello, World!"
    assert memchr(data, "o", 7) == data.index(b"o")
    assert memchr(data, "W", 7) is None


def test_memchr_accepts_int():
    assert memchr(b"\x00\x01\x02", 2, 3) == 2


def test_memcmp_equal_and_difference():
    assert memcmp(b"Hello", b"Hello", 5) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_realloc_grow_keeps_data():
    grown = realloc(bytearray(b"abc"), 3, 6)
    assert len(grown) == 6
    assert grown[:3] == b"abc"


def test_realloc_shrink_truncates():
    assert realloc(bytearray(b"abcdef"), 6, 2) == b"ab"


def test_realloc_none_and_zero():
    fresh = realloc(None, 0, 4)
    assert len(fresh) == 4
    assert realloc(bytearray(b"abc"), 3, 0) is None