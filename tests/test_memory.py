import pytest

from antfarm.memory import (
    bzero,
    calloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray([0x41] * 4)


def test_memset_rejects_overlong_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00llo")


def test_calloc_size_and_content():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert all(byte == 0 for byte in buf)
    assert calloc(0, 8) == bytearray()


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 2)


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst == bytearray(b"abcd..")


def test_memcpy_zero_count_leaves_dst():
    dst = bytearray(b"keep")
    memcpy(dst, b"xxxx", 0)
    assert dst == bytearray(b"keep")


def test_memcpy_count_too_large():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"abc", 5)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 2, 0, 5)
    assert buf == bytearray(b"ababcdeh")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 0, 2, 5)
    assert buf == bytearray(b"cdefgfgh")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_count():
    data = b"hello world"
    assert memchr(data, ord("w"), 5) is None
    assert memchr(data, ord("h"), 1) == 0


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\xff\x10", b"\x00\x01\x20"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memccpy_stops_after_stop_byte():
    dst = bytearray(b"..........")
    offset = memccpy(dst, b"key=value", ord("="), 9)
    assert offset == 4
    assert dst[:offset] == bytearray(b"key=")
    assert dst[offset:] == bytearray(b"......")


def test_memccpy_without_stop_copies_all():
    dst = bytearray(b"......")
    assert memccpy(dst, b"abcdef", ord("z"), 4) is None
    assert dst == bytearray(b"abcd..")


def test_memccpy_count_too_large():
    with pytest.raises(ValueError):
        memccpy(bytearray(2), b"abcd", 0, 3)