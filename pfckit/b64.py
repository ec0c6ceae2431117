"""Base64 encoding and strict decoding."""

from __future__ import annotations

__all__ = ["InvalidParamsError", "base64_encode", "base64_decode_estimate", "base64_decode"]

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_REVERSE = {c: i for i, c in enumerate(_ALPHABET)}


class InvalidParamsError(ValueError):
    """Raised for malformed input."""


def base64_encode(data: bytes) -> str:
    """Encode bytes as padded base64 text."""
    out = []
    shift = 0
    accum = 0
    for byte in bytes(data):
        accum = ((accum << 8) | byte) & 0xFFFF
        shift += 8
        while shift >= 6:
            shift -= 6
            out.append(_ALPHABET[(accum >> shift) & 0x3F])
    if shift == 4:
        out.append(_ALPHABET[(accum & 0xF) << 2] + "=")
    elif shift == 2:
        out.append(_ALPHABET[(accum & 0x3) << 4] + "==")
    return "".join(out)


def base64_decode_estimate(text: str) -> int:
    """Number of bytes that ``text`` decodes to, judged from length and padding."""
    length = len(text)
    if length % 4 != 0:
        raise InvalidParamsError("base64 text length is not a multiple of 4")
    out_len = (length // 4) * 3
    if length >= 4 and text[-1] == "=":
        out_len -= 1
        if text[-2] == "=":
            out_len -= 1
    return out_len


def _value(c: str) -> int:
    try:
        return _REVERSE[c]
    except KeyError:
        raise InvalidParamsError(f"invalid base64 character: {c!r}") from None


def _pack(values: list[int]) -> bytes:
    bits = 0
    for v in values:
        bits = (bits << 6) | v
    nbits = 6 * len(values)
    nbytes = nbits // 8
    return (bits >> (nbits - 8 * nbytes)).to_bytes(nbytes, "big") if nbytes else b""


def base64_decode(text: str) -> bytes:
    """Decode padded base64 text; raise :class:`InvalidParamsError` if malformed."""
    length = len(text)
    if length % 4 != 0:
        raise InvalidParamsError("base64 text length is not a multiple of 4")
    if length == 0:
        return b""

    body = [_value(c) for c in text[: length - 4]]
    tail = text[length - 4 :]
    stop = tail.find("=")
    if stop < 0:
        stop = 4
    last = [_value(c) for c in tail[:stop]]
    if any(c != "=" for c in tail[stop:]):
        raise InvalidParamsError("data after base64 padding")
    return _pack(body) + _pack(last)