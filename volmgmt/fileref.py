"""Unified 64-bit and 128-bit file identifiers used by NTFS and ReFS."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "IDType",
    "Descriptor",
    "FileID",
    "new64",
    "new128",
    "from_big_endian",
    "from_little_endian",
]

_U64 = 0xFFFFFFFFFFFFFFFF
_DESCRIPTOR_SIZE = 24


class IDType(IntEnum):
    """File identifier discriminator of a descriptor."""

    FILE = 0
    OBJECT_ID = 1
    EXTENDED_FILE_ID = 2


def _check_16(value: bytes) -> bytes:
    value = bytes(value)
    if len(value) != 16:
        raise ValueError(f"file identifier needs 16 bytes, got {len(value)}")
    return value


def _to_signed64(value: int) -> int:
    return value - (1 << 64) if value & (1 << 63) else value


def _to_unsigned64(value: int) -> int:
    value = int(value)
    if not -(1 << 63) <= value <= _U64:
        raise ValueError(f"value {value} does not fit in 64 bits")
    return value & _U64


@dataclass(frozen=True)
class Descriptor:
    """A file reference descriptor as used in file system API calls."""

    size: int
    type: IDType
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _check_16(self.data))

    def to_bytes(self) -> bytes:
        """Return the descriptor in its little-endian wire layout."""
        return struct.pack("<II16s", self.size, int(self.type), self.data)


@dataclass(frozen=True)
class FileID:
    """A file identifier holding up to 128 bits, stored big-endian."""

    data: bytes = bytes(16)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _check_16(self.data))

    def split(self) -> tuple[int, int]:
        """Return the upper and lower halves as signed 64-bit integers."""
        upper = int.from_bytes(self.data[:8], "big")
        lower = int.from_bytes(self.data[8:], "big")
        return _to_signed64(upper), _to_signed64(lower)

    def int64(self) -> int:
        """Return the identifier as a signed 64-bit integer, or -1."""
        upper, lower = self.split()
        return -1 if upper != 0 else lower

    def is_int64(self) -> bool:
        """Report whether the identifier fits in a signed 64-bit integer."""
        return not any(self.data[:8])

    def is_zero(self) -> bool:
        """Report whether the identifier is zero."""
        return not any(self.data)

    def big_endian(self) -> bytes:
        """Return the identifier in big-endian byte order."""
        return self.data

    def little_endian(self) -> bytes:
        """Return the identifier in little-endian byte order."""
        return self.data[::-1]

    def descriptor(self) -> Descriptor:
        """Return a descriptor suitable for opening the file by its id."""
        id_type = IDType.FILE if self.is_int64() else IDType.EXTENDED_FILE_ID
        return Descriptor(_DESCRIPTOR_SIZE, id_type, self.little_endian())

    def __str__(self) -> str:
        if self.is_int64():
            return str(self.int64())
        return str(int.from_bytes(self.data, "big"))


def new128(lower: int, upper: int) -> FileID:
    """Return a 128-bit identifier from its lower and upper 64-bit halves."""
    return FileID(
        _to_unsigned64(upper).to_bytes(8, "big")
        + _to_unsigned64(lower).to_bytes(8, "big")
    )


def new64(value: int) -> FileID:
    """Return a 64-bit identifier."""
    return new128(value, 0)


def from_big_endian(value: bytes) -> FileID:
    """Create an identifier from 16 bytes in big-endian order."""
    return FileID(_check_16(value))


def from_little_endian(value: bytes) -> FileID:
    """Create an identifier from 16 bytes in little-endian order."""
    return FileID(_check_16(value)[::-1])