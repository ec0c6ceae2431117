"""Sample conversion and level helpers for 32-bit float audio."""

from __future__ import annotations

import math
import struct
from typing import Iterable

__all__ = [
    "FLOAT16_SCALE",
    "scale",
    "convert_to_int16",
    "convert_to_int32",
    "convert_to_int16_calculate_peak",
    "convert_to_int32_calculate_peak",
    "convert_from_int16",
    "convert_from_int32",
    "calculate_peak",
    "remove_denormals",
    "add_offset",
    "time_to_samples",
    "samples_to_time",
    "rint32",
    "rint64",
    "gain_to_scale",
    "scale_to_gain",
    "decode_float24",
    "decode_float24_bs",
    "decode_float16",
]

FLOAT16_SCALE = 65536.0

_INT16_MIN, _INT16_MAX = -0x8000, 0x7FFF
_INT32_MIN, _INT32_MAX = -0x80000000, 0x7FFFFFFF


def _f32(value: float) -> float:
    """Round a value to single precision, overflowing to infinity."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _round_clip(value: float, low: int, high: int) -> int:
    if math.isnan(value):
        return 0
    value = min(max(value, float(low)), float(high))
    return min(max(math.floor(value + 0.5), low), high)


def rint32(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def rint64(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def scale(samples: Iterable[float], factor: float) -> list[float]:
    """Multiply every sample by ``factor``."""
    factor = _f32(factor)
    return [_f32(_f32(s) * factor) for s in samples]


def convert_to_int16(samples: Iterable[float], factor: float = 1.0) -> list[int]:
    """Convert float samples to clipped 16-bit integers."""
    mul = _f32(factor * 0x8000)
    return [_round_clip(_f32(_f32(s) * mul), _INT16_MIN, _INT16_MAX) for s in samples]


def convert_to_int32(samples: Iterable[float], factor: float = 1.0) -> list[int]:
    """Convert float samples to clipped 32-bit integers."""
    mul = _f32(factor * 0x80000000)
    return [_round_clip(_f32(_f32(s) * mul), _INT32_MIN, _INT32_MAX) for s in samples]


def convert_to_int16_calculate_peak(samples: Iterable[float], factor: float = 1.0) -> tuple[list[int], float]:
    """Convert to 16-bit integers and return the scaled peak as well."""
    data = list(samples)
    return convert_to_int16(data, factor), _f32(factor * calculate_peak(data))


def convert_to_int32_calculate_peak(samples: Iterable[float], factor: float = 1.0) -> tuple[list[int], float]:
    """Convert to 32-bit integers and return the scaled peak as well."""
    data = list(samples)
    return convert_to_int32(data, factor), _f32(factor * calculate_peak(data))


def convert_from_int16(samples: Iterable[int], factor: float = 1.0) -> list[float]:
    """Convert 16-bit integer samples to floats in [-1, 1)."""
    mul = _f32(factor / 0x8000)
    return [_f32(_f32(float(s)) * mul) for s in samples]


def convert_from_int32(samples: Iterable[int], factor: float = 1.0) -> list[float]:
    """Convert 32-bit integer samples to floats in [-1, 1)."""
    mul = _f32(factor / 0x80000000)
    return [_f32(_f32(float(s)) * mul) for s in samples]


def calculate_peak(samples: Iterable[float]) -> float:
    """Largest absolute sample value, 0 for no samples."""
    peak = 0.0
    for s in samples:
        magnitude = abs(_f32(s))
        if magnitude > peak:
            peak = magnitude
    return peak


def remove_denormals(samples: Iterable[float]) -> list[float]:
    """Replace single-precision denormal samples with zero."""
    result = []
    for s in samples:
        bits = struct.unpack("<I", struct.pack("<f", _f32(s)))[0]
        if (bits & 0x007FFFFF) and not (bits & 0x7F800000):
            result.append(0.0)
        else:
            result.append(_f32(s))
    return result


def add_offset(samples: Iterable[float], delta: float) -> list[float]:
    """Add ``delta`` to every sample."""
    delta = _f32(delta)
    return [_f32(_f32(s) + delta) for s in samples]


def time_to_samples(time: float, sample_rate: int) -> int:
    """Number of samples in ``time`` seconds, rounded to nearest."""
    return math.floor(float(sample_rate) * time + 0.5)


def samples_to_time(samples: int, sample_rate: int) -> float:
    """Duration in seconds of ``samples`` samples."""
    if sample_rate <= 0:
        raise ValueError(f"sample rate must be positive: {sample_rate}")
    return float(samples) / float(sample_rate)


def gain_to_scale(gain: float) -> float:
    """Convert a gain in decibels to a linear factor."""
    return _f32(math.pow(10.0, gain / 20.0))


def scale_to_gain(factor: float) -> float:
    """Convert a linear factor to a gain in decibels."""
    if factor > 0:
        return 20.0 * math.log10(factor)
    if factor == 0:
        return -math.inf
    return math.nan


def _require_three(data: bytes) -> bytes:
    data = bytes(data)
    if len(data) < 3:
        raise ValueError("24-bit float needs three bytes")
    return data[:3]


def decode_float24(data: bytes) -> float:
    """Decode a 24-bit float: the top three bytes of a little-endian float32."""
    return struct.unpack("<f", b"\x00" + _require_three(data))[0]


def decode_float24_bs(data: bytes) -> float:
    """Decode a byte-swapped 24-bit float."""
    return struct.unpack("<f", b"\x00" + _require_three(data)[::-1])[0]


def decode_float16(value: int) -> float:
    """Decode a 16-bit half float and divide it by ``FLOAT16_SCALE``.

    The exponent is rebased without special handling of zero, denormals,
    infinities or NaN.
    """
    value &= 0xFFFF
    fraction = value & 0x3FF
    exponent = ((value >> 10) & 0x1F) - 15
    sign = (value >> 15) & 1
    out = sign
    out <<= 8
    out |= (exponent + 127) & 0xFF
    out <<= 23
    out |= fraction << 13
    decoded = struct.unpack("<f", struct.pack("<I", out))[0]
    return _f32(decoded / FLOAT16_SCALE)