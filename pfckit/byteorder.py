"""Byte-order helpers and fixed-width integer limits."""

from __future__ import annotations

import struct

__all__ = [
    "byteswap",
    "byteswap_raw",
    "byteswap_float",
    "byteswap_double",
    "encode_little_endian",
    "encode_big_endian",
    "decode_little_endian",
    "decode_big_endian",
    "int_min",
    "int_max",
    "mul_div_size",
    "INFINITE16",
    "INFINITE32",
    "INFINITE64",
    "INFINITE_SIZE",
]

INFINITE16 = 0xFFFF
INFINITE32 = 0xFFFFFFFF
INFINITE64 = 0xFFFFFFFFFFFFFFFF
INFINITE_SIZE = INFINITE64

_SIZE_MASK = INFINITE64


def _check_width(width: int) -> None:
    if width < 0:
        raise ValueError(f"width must not be negative: {width}")


def byteswap(value: int, width: int) -> int:
    """Reverse the byte order of an integer of ``width`` bytes.

    The value is taken modulo 2**(8*width); the result is unsigned.
    """
    _check_width(width)
    if width == 0:
        return 0
    masked = value & ((1 << (8 * width)) - 1)
    return int.from_bytes(masked.to_bytes(width, "little"), "big")


def byteswap_raw(data: bytes) -> bytes:
    """Return ``data`` with its bytes in reverse order."""
    return bytes(reversed(data))


def byteswap_float(value: float) -> float:
    """Reinterpret a 32-bit float with its bytes swapped."""
    return struct.unpack(">f", struct.pack("<f", value))[0]


def byteswap_double(value: float) -> float:
    """Reinterpret a 64-bit float with its bytes swapped."""
    return struct.unpack(">d", struct.pack("<d", value))[0]


def encode_little_endian(value: int, width: int) -> bytes:
    """Encode the low ``width`` bytes of ``value``, least significant first."""
    _check_width(width)
    if width == 0:
        return b""
    return (value & ((1 << (8 * width)) - 1)).to_bytes(width, "little")


def encode_big_endian(value: int, width: int) -> bytes:
    """Encode the low ``width`` bytes of ``value``, most significant first."""
    _check_width(width)
    if width == 0:
        return b""
    return (value & ((1 << (8 * width)) - 1)).to_bytes(width, "big")


def decode_little_endian(data: bytes, signed: bool = False) -> int:
    """Decode an integer stored least significant byte first."""
    return int.from_bytes(bytes(data), "little", signed=signed)


def decode_big_endian(data: bytes, signed: bool = False) -> int:
    """Decode an integer stored most significant byte first."""
    return int.from_bytes(bytes(data), "big", signed=signed)


def int_min(bits: int, signed: bool) -> int:
    """Smallest value of an integer type of the given width."""
    if bits <= 0:
        raise ValueError(f"bits must be positive: {bits}")
    return -(1 << (bits - 1)) if signed else 0


def int_max(bits: int, signed: bool) -> int:
    """Largest value of an integer type of the given width."""
    if bits <= 0:
        raise ValueError(f"bits must be positive: {bits}")
    return (1 << (bits - 1)) - 1 if signed else (1 << bits) - 1


def mul_div_size(x: int, y: int, z: int) -> int:
    """Compute x*y/z with a 64-bit wrapping intermediate product."""
    if z == 0:
        raise ZeroDivisionError("mul_div_size divisor is zero")
    product = ((x & _SIZE_MASK) * (y & _SIZE_MASK)) & _SIZE_MASK
    return (product // (z & _SIZE_MASK)) & _SIZE_MASK