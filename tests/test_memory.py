import pytest

from cstrkit.memory import (
    bzero,
    calloc,
    iteri,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strcat,
    strcpy,
    strlcat,
    strlcpy,
)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxx" + b"def")


def test_memset_too_many_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_only_prefix():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"cd"


@pytest.mark.parametrize("count,size", [(4, 3), (0, 5), (5, 0), (1, 1)])
def test_calloc_zero_filled(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert all(byte == 0 for byte in buf)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_limit():
    assert memchr(b"abcdef", ord("e"), 3) is None


def test_memchr_missing():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_only_first_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_antisymmetric():
    assert memcmp(b"k1", b"z9", 2) == -memcmp(b"z9", b"k1", 2)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest[:4] == b"abcd"
    assert dest[4:] == b".."


def test_memcpy_overrun_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_overlap_forward():
    buf = bytearray(b"12345")
    memmove(buf, 1, 0, 4)
    assert buf == bytearray(b"11234")


def test_memmove_overlap_backward():
    buf = bytearray(b"12345")
    memmove(buf, 0, 1, 4)
    assert buf == bytearray(b"23455")


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_strcpy_writes_terminator():
    dest = bytearray(b"zzzzzz")
    strcpy(dest, b"hi")
    assert dest[:3] == b"hi\0"
    assert dest[3:] == b"zzz"


def test_strcpy_none_source():
    dest = bytearray(b"abc")
    strcpy(dest, None)
    assert dest[0] == 0


def test_strcpy_too_small_raises():
    with pytest.raises(ValueError):
        strcpy(bytearray(2), b"hi")


def test_strcat_appends():
    dest = bytearray(b"ab" + bytes(4))
    strcat(dest, b"cd")
    assert dest[:5] == b"ab" + b"cd" + b"\0"


def test_strcat_none_source_untouched():
    dest = bytearray(b"ab\0")
    assert strcat(dest, None) == bytearray(b"ab\0")


def test_strcat_overflow_raises():
    with pytest.raises(ValueError):
        strcat(bytearray(b"ab\0"), b"cd")


def test_strlcpy_truncates_and_reports_source_length():
    dest = bytearray(4)
    src = b"hello"
    assert strlcpy(dest, src, 4) == len(src)
    assert dest == bytearray(src[:3] + b"\0")


def test_strlcpy_size_zero_leaves_dest():
    dest = bytearray(b"keep")
    assert strlcpy(dest, b"abc", 0) == 3
    assert dest == bytearray(b"keep")


def test_strlcat_fits():
    dest = bytearray(b"ab" + bytes(6))
    assert strlcat(dest, b"cd", 8) == 4
    assert dest[:5] == b"abcd\0"


def test_strlcat_truncates():
    dest = bytearray(b"ab" + bytes(2))
    src = b"cdef"
    assert strlcat(dest, src, 4) == 2 + len(src)
    assert dest == bytearray(b"abc\0")


def test_strlcat_size_zero_returns_source_length():
    dest = bytearray(b"ab\0")
    assert strlcat(dest, b"xyz", 0) == 3
    assert dest == bytearray(b"ab\0")


def test_iteri_modifies_until_nul():
    buf = bytearray(b"abc\0de")
    iteri(buf, lambda i, b: b - 32)
    assert buf == bytearray(b"ABC\0de")


def test_iteri_passes_indices():
    seen = []
    buf = bytearray(b"xyz")
    iteri(buf, lambda i, b: seen.append((i, b)))
    assert seen == list(enumerate(b"xyz"))
    assert buf == bytearray(b"xyz")