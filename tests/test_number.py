import pytest

from passerine.common.number import build_number, split_number


def test_encode_decode():
    x = 7_289_529_732_981_739_357
    assert build_number(split_number(x)) == (x, 9)


def test_rollover():
    assert split_number(256) == bytes([0b0000_0010, 0b1000_0000])


def test_extra_bytes():
    x = 42069
    encoded = split_number(x)
    eat = len(encoded)
    extra = encoded + bytes([0xBA, 0xDA, 0x55])

    assert build_number(encoded) == (x, eat)
    assert build_number(extra) == (x, eat)


def test_zero():
    zero = split_number(0) + bytes([2])
    assert build_number(zero) == (0, 1)


@pytest.mark.parametrize("n", [0, 1, 127, 128, 255, 16383, 16384, 2**40 + 7, 2**64 - 1])
def test_round_trip(n):
    encoded = split_number(n)
    assert build_number(encoded) == (n, len(encoded))


@pytest.mark.parametrize("n", [0, 5, 300, 2**30])
def test_only_last_byte_has_high_bit(n):
    encoded = split_number(n)
    assert encoded[-1] >= 0x80
    assert all(byte < 0x80 for byte in encoded[:-1])


def test_negative_rejected():
    with pytest.raises(ValueError):
        split_number(-1)


def test_empty_stream():
    assert build_number(b"") == (0, 0)