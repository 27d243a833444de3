"""File information structures used by the Windows file system API."""

from __future__ import annotations

import stat
import struct
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import ClassVar

from volmgmt.fileattr import FileAttr

__all__ = [
    "FileInfoClass",
    "BasicInfo",
    "RenameInfo",
    "ByHandleFileInformation",
    "FileInfoForHandle",
    "datetime_to_filetime",
    "filetime_to_datetime",
]

_FILETIME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)
_U64_MAX = 0xFFFFFFFFFFFFFFFF


class FileInfoClass(IntEnum):
    """Class of file information accessed in file system API calls."""

    BASIC_INFO = 0
    STANDARD_INFO = 1
    NAME_INFO = 2
    RENAME_INFO = 3
    DISPOSITION_INFO = 4
    ALLOCATION_INFO = 5
    END_OF_FILE_INFO = 6
    STREAM_INFO = 7
    COMPRESSION_INFO = 8
    ATTRIBUTE_TAG_INFO = 9
    ID_BOTH_DIRECTORY_INFO = 10
    ID_BOTH_DIRECTORY_RESTART_INFO = 11
    IO_PRIORITY_HINT_INFO = 12
    REMOTE_PROTOCOL_INFO = 13
    FULL_DIRECTORY_INFO = 14
    FULL_DIRECTORY_RESTART_INFO = 15
    STORAGE_INFO = 16
    ALIGNMENT_INFO = 17
    ID_INFO = 18
    ID_EXTD_DIRECTORY_INFO = 19
    ID_EXTD_DIRECTORY_RESTART_INFO = 20
    DISPOSITION_INFO_EX = 21
    RENAME_INFO_EX = 22
    CASE_SENSITIVE_INFO = 23
    NORMALIZED_NAME_INFO = 24


def _ticks_to_datetime(ticks: int) -> datetime:
    try:
        return _FILETIME_EPOCH + timedelta(microseconds=ticks // 10)
    except OverflowError as exc:
        raise ValueError(f"file time {ticks} is out of range") from exc


def datetime_to_filetime(value: datetime | None) -> int:
    """Return ``value`` as a FILETIME count of 100ns intervals since 1601.

    ``None`` yields zero. Naive datetimes are taken as local time.
    """
    if value is None:
        return 0
    delta = value.astimezone(timezone.utc) - _FILETIME_EPOCH
    ticks = (delta.days * 86_400 + delta.seconds) * 10_000_000 + delta.microseconds * 10
    if not 0 <= ticks <= _U64_MAX:
        raise ValueError(f"{value} cannot be represented as a file time")
    return ticks


def filetime_to_datetime(filetime: int) -> datetime | None:
    """Return the UTC datetime for a FILETIME value, or ``None`` for zero."""
    if filetime == 0:
        return None
    return _ticks_to_datetime(filetime)


@dataclass
class BasicInfo:
    """Basic file information, laid out as FILE_BASIC_INFO."""

    creation_time: datetime | None = None
    last_access_time: datetime | None = None
    last_write_time: datetime | None = None
    change_time: datetime | None = None
    file_attributes: FileAttr = FileAttr(0)

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<QQQQII")
    SIZE: ClassVar[int] = _LAYOUT.size

    def info_class(self) -> FileInfoClass:
        """Return the file information class."""
        return FileInfoClass.BASIC_INFO

    def to_bytes(self) -> bytes:
        """Return the binary form suitable for API calls."""
        return self._LAYOUT.pack(
            datetime_to_filetime(self.creation_time),
            datetime_to_filetime(self.last_access_time),
            datetime_to_filetime(self.last_write_time),
            datetime_to_filetime(self.change_time),
            int(self.file_attributes),
            0,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> BasicInfo:
        """Build an instance from its binary form."""
        if len(data) < cls.SIZE:
            raise ValueError("insufficient data for BasicInfo unmarshaling")
        created, accessed, written, changed, attrs, _ = cls._LAYOUT.unpack_from(data)
        return cls(
            creation_time=filetime_to_datetime(created),
            last_access_time=filetime_to_datetime(accessed),
            last_write_time=filetime_to_datetime(written),
            change_time=filetime_to_datetime(changed),
            file_attributes=FileAttr(attrs),
        )


@dataclass
class RenameInfo:
    """Rename request, laid out as FILE_RENAME_INFO."""

    replace_if_exists: bool = False
    file_name: str = ""

    # Flag, padding, root directory handle and name length: 20 bytes.
    _HEADER: ClassVar[struct.Struct] = struct.Struct("<?7xQI")

    def info_class(self) -> FileInfoClass:
        """Return the file information class."""
        return FileInfoClass.RENAME_INFO

    def to_bytes(self) -> bytes:
        """Return the binary form suitable for API calls."""
        if "\0" in self.file_name:
            raise ValueError("file name contains a NUL character")
        name = (self.file_name + "\0").encode("utf-16-le")
        header = self._HEADER.pack(self.replace_if_exists, 0, len(name) - 2)
        return header + name


@dataclass
class ByHandleFileInformation:
    """File information as returned for an open handle."""

    file_attributes: int = 0
    creation_time: int = 0
    last_access_time: int = 0
    last_write_time: int = 0
    volume_serial_number: int = 0
    file_size_high: int = 0
    file_size_low: int = 0
    number_of_links: int = 0
    file_index_high: int = 0
    file_index_low: int = 0


@dataclass
class FileInfoForHandle:
    """File details gathered through a handle or a file reference number."""

    file_name: str = ""
    info: ByHandleFileInformation = field(default_factory=ByHandleFileInformation)

    def name(self) -> str:
        """Return the name of the file."""
        return self.file_name

    def size(self) -> int:
        """Return the size of the file in bytes."""
        return (self.info.file_size_high << 32) + self.info.file_size_low

    def mode(self) -> int:
        """Return a ``stat``-style mode for the file.

        Symbolic links are not distinguished.
        """
        attrs = self.info.file_attributes
        mode = 0o444 if attrs & FileAttr.READONLY else 0o666
        if attrs & FileAttr.DIRECTORY:
            mode |= stat.S_IFDIR | 0o111
        return mode

    def mod_time(self) -> datetime:
        """Return the last modification time of the file in UTC."""
        return _ticks_to_datetime(self.info.last_write_time)

    def is_dir(self) -> bool:
        """Report whether the file is a directory."""
        return stat.S_ISDIR(self.mode())