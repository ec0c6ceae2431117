import struct

import pytest

from pfckit import byteorder


@pytest.mark.parametrize("value,width", [(0x1234, 2), (0xDEADBEEF, 4), (0x0102030405060708, 8), (0x7F, 1)])
def test_byteswap_is_involution(value, width):
    assert byteorder.byteswap(byteorder.byteswap(value, width), width) == value


def test_byteswap_matches_struct():
    value = 0xDEADBEEF
    swapped = byteorder.byteswap(value, 4)
    assert struct.pack("<I", swapped) == struct.pack(">I", value)


def test_byteswap_pinned_value():
    assert byteorder.byteswap(0x1234, 2) == 0x3412


def test_byteswap_single_byte_unchanged():
    assert byteorder.byteswap(0xAB, 1) == 0xAB


def test_byteswap_negative_width_rejected():
    with pytest.raises(ValueError):
        byteorder.byteswap(1, -1)


def test_byteswap_raw_reverses():
    data = b"\x01\x02\x03\x04\x05"
    assert byteorder.byteswap_raw(data) == data[::-1]
    assert byteorder.byteswap_raw(byteorder.byteswap_raw(data)) == data


@pytest.mark.parametrize("value", [1.5, -2.25, 0.0, 1024.0])
def test_byteswap_float_round_trip(value):
    assert byteorder.byteswap_float(byteorder.byteswap_float(value)) == value


@pytest.mark.parametrize("value", [1.5, -2.25, 3.141592653589793])
def test_byteswap_double_round_trip(value):
    assert byteorder.byteswap_double(byteorder.byteswap_double(value)) == value


def test_byteswap_float_bytes():
    swapped = byteorder.byteswap_float(1.5)
    assert struct.pack("<f", swapped) == struct.pack(">f", 1.5)


def test_encode_matches_struct():
    value = 0x89ABCDEF
    assert byteorder.encode_little_endian(value, 4) == struct.pack("<I", value)
    assert byteorder.encode_big_endian(value, 4) == struct.pack(">I", value)


def test_encode_masks_value():
    assert byteorder.encode_little_endian(-1, 2) == b"\xff\xff"


@pytest.mark.parametrize("value,width", [(0, 1), (0x1234, 2), (0xCAFEBABE, 4), (0x0123456789ABCDEF, 8)])
def test_encode_decode_round_trip(value, width):
    assert byteorder.decode_little_endian(byteorder.encode_little_endian(value, width)) == value
    assert byteorder.decode_big_endian(byteorder.encode_big_endian(value, width)) == value


def test_decode_signed():
    assert byteorder.decode_little_endian(b"\xff\xff", signed=True) == -1
    assert byteorder.decode_big_endian(b"\x80\x00", signed=True) == -0x8000


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
def test_int_limits_invariants(bits):
    assert byteorder.int_min(bits, False) == 0
    assert byteorder.int_max(bits, False) == (1 << bits) - 1
    assert byteorder.int_min(bits, True) == -byteorder.int_max(bits, True) - 1


def test_int_limits_constants():
    assert byteorder.int_max(16, True) == 0x7FFF
    assert byteorder.int_max(32, False) == byteorder.INFINITE32
    assert byteorder.int_max(64, False) == byteorder.INFINITE64


def test_int_limits_reject_zero_bits():
    with pytest.raises(ValueError):
        byteorder.int_max(0, True)


def test_mul_div_size_plain():
    assert byteorder.mul_div_size(6, 7, 2) == 21


def test_mul_div_size_wraps():
    assert byteorder.mul_div_size(1 << 32, 1 << 32, 1) == 0


def test_mul_div_size_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        byteorder.mul_div_size(1, 2, 0)