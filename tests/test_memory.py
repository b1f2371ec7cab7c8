import pytest

from minitalk.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)

TEXT = b"This is a test of the memset function."


def test_memset_fills_prefix_only():
    buf = bytearray(TEXT)
    result = memset(buf, ord("f"), 4)
    assert result is buf
    assert buf[:4] == b"f" * 4
    assert buf[4:] == TEXT[4:]


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray([0x41] * 3)


def test_memset_zero_length_is_noop():
    buf = bytearray(TEXT)
    memset(buf, ord("x"), 0)
    assert buf == bytearray(TEXT)


def test_memset_too_long_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_memset_negative_length_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero_clears_prefix():
    buf = bytearray(TEXT)
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == TEXT[4:]


def test_memcpy_copies_prefix():
    src = b"Hello world!"
    dest = bytearray(20)
    result = memcpy(dest, src, 8)
    assert result is dest
    assert dest[:8] == src[:8]
    assert dest[8:] == bytes(12)


def test_memcpy_source_too_short_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"abc", 5)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    view = memoryview(buf)
    result = memmove(view[2:], view, 4)
    assert bytes(result[:4]) == original[:4]
    assert buf[:2] == original[:2]
    assert buf[2:6] == original[:4]


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert bytes(result[:4]) == original[2:6]
    assert buf[:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memchr_finds_first_occurrence():
    assert memchr(b"Hello, world!", ord("o"), 5) == 4


def test_memchr_respects_length():
    assert memchr(b"Hello, world!", ord("w"), 5) is None


def test_memchr_compares_as_unsigned_byte():
    data = bytes([1, 2, 0xFF])
    assert memchr(data, -1, 3) == 2


def test_memcmp_equal_is_zero():
    assert memcmp(b"abcd", b"abcd", 4) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abqd", b"abgd", 4) > 0
    assert memcmp(b"abgd", b"abqd", 4) < 0
    assert memcmp(b"abqd", b"abgd", 4) == -memcmp(b"abgd", b"abqd", 4)


def test_memcmp_stops_at_length():
    assert memcmp(b"abqd", b"abgd", 2) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(bytes([0x80]), bytes([0x01]), 1) > 0


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert buf == bytearray(12)


def test_calloc_zero_count():
    assert calloc(0, 5) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, SIZE_MAX)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)