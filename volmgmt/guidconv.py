"""Conversion of GUIDs to their string form."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["GUID", "format_guid"]

_EMPTY_GUID = "{00000000-0000-0000-0000-000000000000}"


@dataclass(frozen=True)
class GUID:
    """A globally unique identifier in its Windows field layout."""

    data1: int = 0
    data2: int = 0
    data3: int = 0
    data4: bytes = bytes(8)

    def __post_init__(self) -> None:
        for name, limit in (("data1", 0xFFFFFFFF), ("data2", 0xFFFF), ("data3", 0xFFFF)):
            value = getattr(self, name)
            if not 0 <= value <= limit:
                raise ValueError(f"{name} out of range: {value}")
        data4 = bytes(self.data4)
        if len(data4) != 8:
            raise ValueError(f"data4 needs 8 bytes, got {len(data4)}")
        object.__setattr__(self, "data4", data4)


def format_guid(guid: GUID | None) -> str:
    """Return ``guid`` as ``{XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX}``.

    ``None`` yields the string form of the empty GUID.
    """
    if guid is None:
        return _EMPTY_GUID
    return (
        f"{{{guid.data1:08X}-{guid.data2:04X}-{guid.data3:04X}-"
        f"{guid.data4[:2].hex().upper()}-{guid.data4[2:].hex().upper()}}}"
    )