"""Building blocks for Windows I/O control codes."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Method", "Access", "new_code"]


class Method(IntEnum):
    """Buffering method used to pass data with an I/O control request."""

    BUFFERED = 0
    IN_DIRECT = 1
    OUT_DIRECT = 2
    NEITHER = 3


class Access(IntEnum):
    """Access that the caller must hold on the handle for a request."""

    ANY = 0  # FILE_ANY_ACCESS
    SPECIAL = 0  # FILE_SPECIAL_ACCESS, same value as ANY
    READ = 1  # FILE_READ_ACCESS
    WRITE = 2  # FILE_WRITE_ACCESS
    READ_WRITE = 3  # FILE_READ_ACCESS | FILE_WRITE_ACCESS


def _check_range(name: str, value: int, limit: int) -> int:
    value = int(value)
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be between 0 and {limit:#x}, got {value}")
    return value


def new_code(device_type: int, function: int, method: int, access: int) -> int:
    """Return the 32-bit I/O control code for the given parameters."""
    device_type = _check_range("device_type", device_type, 0xFFFF)
    function = _check_range("function", function, 0xFFFF)
    method = _check_range("method", method, 0xFF)
    access = _check_range("access", access, 0xFF)
    code = device_type << 16 | access << 14 | function << 2 | method
    return code & 0xFFFFFFFF