import pytest
from hypothesis import given, strategies as st

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


@given(st.binary(min_size=0, max_size=64), st.integers(0, 255), st.data())
def test_memset_fills_prefix(data, value, draw):
    n = draw.draw(st.integers(0, len(data)))
    buf = bytearray(data)
    result = memset(buf, value, n)
    assert result is buf
    assert bytes(buf[:n]) == bytes([value]) * n
    assert bytes(buf[n:]) == data[n:]
    assert len(buf) == len(data)


def test_memset_masks_value():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray([0x41] * 4)


def test_memset_rejects_overflow():
    with pytest.raises(ValueError):
        memset(bytearray(3), 1, 4)


def test_memset_rejects_negative():
    with pytest.raises(ValueError):
        memset(bytearray(3), 1, -1)


@given(st.binary(min_size=1, max_size=64))
def test_bzero_clears_everything(data):
    buf = bytearray(data)
    bzero(buf, len(buf))
    assert buf == bytearray(len(data))


@given(st.integers(0, 32), st.integers(0, 32))
def test_calloc_is_zeroed(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert all(b == 0 for b in buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


@given(st.binary(max_size=64), st.integers(0, 255), st.data())
def test_memchr_matches_find(data, value, draw):
    n = draw.draw(st.integers(0, len(data)))
    index = data[:n].find(value)
    expected = None if index < 0 else index
    assert memchr(data, value, n) == expected


def test_memchr_missing_value():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memchr_masks_value():
    assert memchr(b"xyA", ord("A") + 256, 3) == memchr(b"xyA", ord("A"), 3)


def test_memchr_respects_limit():
    assert memchr(b"abc", ord("c"), 2) is None


@given(st.binary(max_size=32), st.binary(max_size=32))
def test_memcmp_sign_matches_ordering(a, b):
    n = min(len(a), len(b))
    result = memcmp(a, b, n)
    if a[:n] == b[:n]:
        assert result == 0
    elif a[:n] < b[:n]:
        assert result < 0
    else:
        assert result > 0


@given(st.binary(max_size=32))
def test_memcmp_equal_is_zero(a):
    assert memcmp(a, bytes(a), len(a)) == 0


def test_memcmp_rejects_overflow():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


@given(st.binary(max_size=32), st.binary(max_size=32))
def test_memcpy_copies_prefix(dest_data, src):
    n = min(len(dest_data), len(src))
    dest = bytearray(dest_data)
    result = memcpy(dest, src, n)
    assert result is dest
    assert bytes(dest[:n]) == src[:n]
    assert bytes(dest[n:]) == dest_data[n:]
    assert len(dest) == len(dest_data)


def test_memcpy_rejects_overflow():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    assert memmove(buf, 2, 0, 4) == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    assert memmove(buf, 0, 2, 4) == bytearray(b"cdefef")


@given(st.binary(min_size=1, max_size=32), st.data())
def test_memmove_copies_original_source(data, draw):
    src = draw.draw(st.integers(0, len(data)))
    dest = draw.draw(st.integers(0, len(data)))
    n = draw.draw(st.integers(0, len(data) - max(src, dest)))
    buf = bytearray(data)
    memmove(buf, dest, src, n)
    assert bytes(buf[dest:dest + n]) == data[src:src + n]
    assert len(buf) == len(data)


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memmove_rejects_negative_offset():
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)