"""A small printf-style formatter with a fixed set of conversions."""

from __future__ import annotations

from typing import Any, Iterator

__all__ = ["string_printf"]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: Any) -> int:
    value = int(value) & _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def string_printf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt``.

    Supported: ``%%``, an optional ``+`` flag, a width with optional ``0``
    padding, and the conversions ``s``, ``d``/``i``, ``u``, ``x``/``X`` and
    ``c`` (upper-case letters are accepted too). Integers are taken as 32-bit
    signed values; ``u`` and ``x`` print them as 64-bit unsigned numbers.
    An unknown conversion letter is copied to the output as plain text.
    """
    out: list[str] = []
    arg_iter = iter(args)
    n = len(fmt)
    i = 0
    while i < n:
        c = fmt[i]
        if c != "%":
            out.append(c)
            i += 1
            continue
        i += 1
        if i < n and fmt[i] == "%":
            out.append("%")
            i += 1
            continue

        force_sign = False
        if i < n and fmt[i] == "+":
            force_sign = True
            i += 1
        padchar = "0" if i < n and fmt[i] == "0" else " "
        pad = 0
        while i < n and "0" <= fmt[i] <= "9":
            pad = pad * 10 + ord(fmt[i]) - ord("0")
            i += 1
        if i >= n:
            break

        spec = fmt[i]
        if spec in "sS":
            text = str(_next_arg(arg_iter))
        elif spec in "iIdD":
            val = _as_int32(_next_arg(arg_iter))
            if force_sign and val > 0:
                out.append("+")
            text = str(val)
        elif spec in "uU":
            val = _as_int32(_next_arg(arg_iter))
            if force_sign and val > 0:
                out.append("+")
            text = str(val & _MASK64)
        elif spec in "xX":
            val = _as_int32(_next_arg(arg_iter))
            if force_sign and val > 0:
                out.append("+")
            text = format(val & _MASK64, "x")
            if spec == "X":
                text = text.upper()
        elif spec in "cC":
            out.append(_as_char(_next_arg(arg_iter)))
            i += 1
            continue
        else:
            continue

        if pad > len(text):
            out.append(padchar * (pad - len(text)))
        out.append(text)
        i += 1
    return "".join(out)