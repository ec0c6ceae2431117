"""128-bit GUIDs: parsing, printing, byte layout and ordering."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import total_ordering

__all__ = ["Guid", "GUID_NULL", "guid_compare", "print_hex_raw"]

_HEX_VALUES = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


def _read_hex(chunk: str) -> int:
    """Read hex digits; characters that are not hex digits count as zero."""
    value = 0
    for c in chunk:
        value = (value << 4) | _HEX_VALUES.get(c, 0)
    return value


def _read_bytes(chunk: str) -> bytes:
    return bytes(_read_hex(chunk[i : i + 2]) for i in range(0, len(chunk), 2))


@total_ordering
@dataclass(frozen=True)
class Guid:
    """A GUID with the usual 32/16/16-bit fields and eight trailing bytes."""

    data1: int = 0
    data2: int = 0
    data3: int = 0
    data4: bytes = bytes(8)

    def __post_init__(self) -> None:
        if not 0 <= self.data1 <= 0xFFFFFFFF:
            raise ValueError(f"data1 out of range: {self.data1}")
        for name in ("data2", "data3"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} out of range: {value}")
        data4 = bytes(self.data4)
        if len(data4) != 8:
            raise ValueError(f"data4 must hold 8 bytes, got {len(data4)}")
        object.__setattr__(self, "data4", data4)

    @classmethod
    def from_text(cls, text: str) -> "Guid":
        """Parse text such as ``{B296CF59-4D51-466F-8E0B-E57D3F91D908}``.

        Braces and dashes are optional. Parsing stops at the first field that
        does not fit; fields not read stay zero and non-hex digits read as zero.
        """
        if text.startswith("{"):
            text = text[1:]
        end = text.find("}")
        if end < 0:
            end = len(text)

        fields: list[str] = []
        pos = 0
        for index, width in enumerate((8, 4, 4, 4, 12)):
            if index:
                while pos < len(text) and text[pos] == "-":
                    pos += 1
            if pos + width > end:
                break
            fields.append(text[pos : pos + width])
            pos += width

        data1 = _read_hex(fields[0]) if len(fields) > 0 else 0
        data2 = _read_hex(fields[1]) if len(fields) > 1 else 0
        data3 = _read_hex(fields[2]) if len(fields) > 2 else 0
        data4 = bytearray(8)
        if len(fields) > 3:
            data4[0:2] = _read_bytes(fields[3])
        if len(fields) > 4:
            data4[2:8] = _read_bytes(fields[4])
        return cls(data1, data2, data3, bytes(data4))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Guid":
        """Build a GUID from its 16-byte in-memory layout (little-endian fields)."""
        data = bytes(data)
        if len(data) != 16:
            raise ValueError(f"a GUID needs 16 bytes, got {len(data)}")
        return cls(
            int.from_bytes(data[0:4], "little"),
            int.from_bytes(data[4:6], "little"),
            int.from_bytes(data[6:8], "little"),
            data[8:16],
        )

    @classmethod
    def create(cls) -> "Guid":
        """Return a new GUID made of random bytes."""
        return cls.from_bytes(os.urandom(16))

    def to_bytes(self) -> bytes:
        """The 16-byte in-memory layout, with little-endian fields."""
        return (
            self.data1.to_bytes(4, "little")
            + self.data2.to_bytes(2, "little")
            + self.data3.to_bytes(2, "little")
            + self.data4
        )

    def __str__(self) -> str:
        return (
            f"{self.data1:08X}-{self.data2:04X}-{self.data3:04X}-"
            f"{self.data4[:2].hex().upper()}-{self.data4[2:].hex().upper()}"
        )

    def format_cpp(self) -> str:
        """Format as a brace initializer of hex constants."""
        tail = ", ".join(f"0x{b:02X}" for b in self.data4)
        return f"{{0x{self.data1:08X}, 0x{self.data2:04X}, 0x{self.data3:04X}, {{{tail}}}}}"

    def byteswap(self) -> "Guid":
        """Swap the byte order of the three integer fields."""
        return Guid(
            int.from_bytes(self.data1.to_bytes(4, "little"), "big"),
            int.from_bytes(self.data2.to_bytes(2, "little"), "big"),
            int.from_bytes(self.data3.to_bytes(2, "little"), "big"),
            self.data4,
        )

    def __xor__(self, other: object) -> "Guid":
        if not isinstance(other, Guid):
            return NotImplemented
        return Guid.from_bytes(bytes(a ^ b for a, b in zip(self.to_bytes(), other.to_bytes())))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Guid):
            return NotImplemented
        return guid_compare(self, other) < 0


GUID_NULL = Guid()


def guid_compare(a: Guid, b: Guid) -> int:
    """Compare two GUIDs by their in-memory bytes; returns -1, 0 or 1."""
    left, right = a.to_bytes(), b.to_bytes()
    return (left > right) - (left < right)


def print_hex_raw(data: bytes) -> str:
    """Upper-case hex digits of every byte, two per byte."""
    return bytes(data).hex().upper()