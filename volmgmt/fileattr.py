"""File attributes stored as part of a file's metadata on Windows volumes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntFlag

__all__ = ["FileAttr", "Format", "FORMAT_C", "FORMAT_NAME", "FORMAT_CODE"]

Format = Mapping[int, str]


class FileAttr(IntFlag):
    """A set of FILE_ATTRIBUTE_* flags."""

    READONLY = 0x000001
    HIDDEN = 0x000002
    SYSTEM = 0x000004
    DIRECTORY = 0x000010
    ARCHIVE = 0x000020
    DEVICE = 0x000040
    NORMAL = 0x000080
    TEMPORARY = 0x000100
    SPARSE_FILE = 0x000200
    REPARSE_POINT = 0x000400
    COMPRESSED = 0x000800
    OFFLINE = 0x001000
    NOT_CONTENT_INDEXED = 0x002000
    ENCRYPTED = 0x004000
    INTEGRITY_STREAM = 0x008000
    VIRTUAL = 0x010000
    NO_SCRUB_DATA = 0x020000
    RECALL_ON_OPEN = 0x040000
    RECALL_ON_DATA_ACCESS = 0x400000

    def match(self, other: int) -> bool:
        """Report whether every attribute in ``other`` is present."""
        other = int(other)
        return (int(self) & other) == other

    def join(self, sep: str, fmt: Format) -> str:
        """Render the attributes with ``fmt``, separated by ``sep``.

        A value that has its own entry in ``fmt`` is rendered by that entry
        alone; otherwise each set bit with an entry is rendered in bit order.
        """
        exact = fmt.get(int(self))
        if exact is not None:
            return exact
        bits = (1 << i for i in range(32))
        return sep.join(fmt[bit] for bit in bits if self.match(bit) and bit in fmt)

    def __str__(self) -> str:
        return self.join("|", FORMAT_NAME)


FORMAT_C: dict[int, str] = {
    FileAttr.READONLY: "FILE_ATTRIBUTE_READONLY",
    FileAttr.HIDDEN: "FILE_ATTRIBUTE_HIDDEN",
    FileAttr.SYSTEM: "FILE_ATTRIBUTE_SYSTEM",
    FileAttr.DIRECTORY: "FILE_ATTRIBUTE_DIRECTORY",
    FileAttr.ARCHIVE: "FILE_ATTRIBUTE_ARCHIVE",
    FileAttr.DEVICE: "FILE_ATTRIBUTE_DEVICE",
    FileAttr.NORMAL: "FILE_ATTRIBUTE_NORMAL",
    FileAttr.TEMPORARY: "FILE_ATTRIBUTE_TEMPORARY",
    FileAttr.SPARSE_FILE: "FILE_ATTRIBUTE_SPARSE_FILE",
    FileAttr.REPARSE_POINT: "FILE_ATTRIBUTE_REPARSE_POINT",
    FileAttr.COMPRESSED: "FILE_ATTRIBUTE_COMPRESSED",
    FileAttr.OFFLINE: "FILE_ATTRIBUTE_OFFLINE",
    FileAttr.NOT_CONTENT_INDEXED: "FILE_ATTRIBUTE_NOT_CONTENT_INDEXED",
    FileAttr.ENCRYPTED: "FILE_ATTRIBUTE_ENCRYPTED",
    FileAttr.INTEGRITY_STREAM: "FILE_ATTRIBUTE_INTEGRITY_STREAM",
    FileAttr.VIRTUAL: "FILE_ATTRIBUTE_VIRTUAL",
    FileAttr.NO_SCRUB_DATA: "FILE_ATTRIBUTE_NO_SCRUB_DATA",
    FileAttr.RECALL_ON_OPEN: "FILE_ATTRIBUTE_RECALL_ON_OPEN",
    FileAttr.RECALL_ON_DATA_ACCESS: "FILE_ATTRIBUTE_RECALL_ON_DATA_ACCESS",
}

FORMAT_NAME: dict[int, str] = {
    FileAttr.READONLY: "Readonly",
    FileAttr.HIDDEN: "Hidden",
    FileAttr.SYSTEM: "System",
    FileAttr.DIRECTORY: "Directory",
    FileAttr.ARCHIVE: "Archive",
    FileAttr.DEVICE: "Device",
    FileAttr.NORMAL: "Normal",
    FileAttr.TEMPORARY: "Temporary",
    FileAttr.SPARSE_FILE: "SparseFile",
    FileAttr.REPARSE_POINT: "ReparsePoint",
    FileAttr.COMPRESSED: "Compressed",
    FileAttr.OFFLINE: "Offline",
    FileAttr.NOT_CONTENT_INDEXED: "NotContentIndexed",
    FileAttr.ENCRYPTED: "Encrypted",
    FileAttr.INTEGRITY_STREAM: "IntegrityStream",
    FileAttr.VIRTUAL: "Virtual",
    FileAttr.NO_SCRUB_DATA: "NoScrubData",
    FileAttr.RECALL_ON_OPEN: "RecallOnOpen",
    FileAttr.RECALL_ON_DATA_ACCESS: "RecallOnDataAccess",
}

# Single-letter codes as shown in the attribute column of file managers.
FORMAT_CODE: dict[int, str] = {
    FileAttr.READONLY: "R",
    FileAttr.HIDDEN: "H",
    FileAttr.SYSTEM: "S",
    FileAttr.DIRECTORY: "D",
    FileAttr.ARCHIVE: "A",
    FileAttr.DEVICE: "^",  # unofficial
    FileAttr.NORMAL: "N",
    FileAttr.TEMPORARY: "T",
    FileAttr.SPARSE_FILE: "P",
    FileAttr.REPARSE_POINT: "L",
    FileAttr.COMPRESSED: "C",
    FileAttr.OFFLINE: "O",
    FileAttr.NOT_CONTENT_INDEXED: "I",
    FileAttr.ENCRYPTED: "E",
    FileAttr.INTEGRITY_STREAM: "V",  # ReFS
    FileAttr.VIRTUAL: "-",
    FileAttr.NO_SCRUB_DATA: "X",  # ReFS
    FileAttr.RECALL_ON_OPEN: "!",  # unofficial
    FileAttr.RECALL_ON_DATA_ACCESS: "?",  # unofficial
}