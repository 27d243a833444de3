"""I/O control codes for file system drivers.

This module holds the codes defined up to and including the Windows Vista
release.
"""

from __future__ import annotations

from volmgmt.ioctlcode import Access, Method, new_code
from volmgmt.ioctltype import DeviceType


def _fs(function: int, method: Method, access: Access) -> int:
    return new_code(DeviceType.FILE_SYSTEM, function, method, access)


_BUF = Method.BUFFERED
_NEITHER = Method.NEITHER
_OUT_DIRECT = Method.OUT_DIRECT

# Original file system control codes.
REQUEST_OPLOCK_LEVEL_1 = _fs(0, _BUF, Access.ANY)
REQUEST_OPLOCK_LEVEL_2 = _fs(1, _BUF, Access.ANY)
REQUEST_BATCH_OPLOCK = _fs(2, _BUF, Access.ANY)
OPLOCK_BREAK_ACKNOWLEDGE = _fs(3, _BUF, Access.ANY)
OPBATCH_ACK_CLOSE_PENDING = _fs(4, _BUF, Access.ANY)
OPLOCK_BREAK_NOTIFY = _fs(5, _BUF, Access.ANY)
LOCK_VOLUME = _fs(6, _BUF, Access.ANY)
UNLOCK_VOLUME = _fs(7, _BUF, Access.ANY)
DISMOUNT_VOLUME = _fs(8, _BUF, Access.ANY)
IS_VOLUME_MOUNTED = _fs(10, _BUF, Access.ANY)
IS_PATHNAME_VALID = _fs(11, _BUF, Access.ANY)
MARK_VOLUME_DIRTY = _fs(12, _BUF, Access.ANY)
QUERY_RETRIEVAL_POINTERS = _fs(14, _NEITHER, Access.ANY)
GET_COMPRESSION = _fs(15, _BUF, Access.ANY)
SET_COMPRESSION = _fs(16, _BUF, Access.READ_WRITE)
SET_BOOTLOADER_ACCESSED = _fs(19, _NEITHER, Access.ANY)
OPLOCK_BREAK_ACK_NO_2 = _fs(20, _BUF, Access.ANY)
INVALIDATE_VOLUMES = _fs(21, _BUF, Access.ANY)
QUERY_FAT_BPB = _fs(22, _BUF, Access.ANY)
REQUEST_FILTER_OPLOCK = _fs(23, _BUF, Access.ANY)
GET_STATISTICS = _fs(24, _BUF, Access.ANY)

# Added in the Windows NT 4.0 release.
GET_NTFS_VOLUME_DATA = _fs(25, _BUF, Access.ANY)
GET_NTFS_FILE_RECORD = _fs(26, _BUF, Access.ANY)
GET_VOLUME_BITMAP = _fs(27, _NEITHER, Access.ANY)
GET_RETRIEVAL_POINTERS = _fs(28, _NEITHER, Access.ANY)
MOVE_FILE = _fs(29, _BUF, Access.SPECIAL)
IS_VOLUME_DIRTY = _fs(30, _BUF, Access.ANY)
ALLOW_EXTENDED_DASD_IO = _fs(32, _NEITHER, Access.ANY)

# Added in the Windows 2000 release.
FIND_FILES_BY_SID = _fs(35, _NEITHER, Access.ANY)
SET_OBJECT_ID = _fs(38, _BUF, Access.SPECIAL)
GET_OBJECT_ID = _fs(39, _BUF, Access.ANY)
DELETE_OBJECT_ID = _fs(40, _BUF, Access.SPECIAL)
SET_REPARSE_POINT = _fs(41, _BUF, Access.SPECIAL)
GET_REPARSE_POINT = _fs(42, _BUF, Access.ANY)
DELETE_REPARSE_POINT = _fs(43, _BUF, Access.SPECIAL)
ENUM_USN_DATA = _fs(44, _NEITHER, Access.ANY)
SECURITY_ID_CHECK = _fs(45, _NEITHER, Access.READ)
READ_USN_JOURNAL = _fs(46, _NEITHER, Access.ANY)
SET_OBJECT_ID_EXTENDED = _fs(47, _BUF, Access.SPECIAL)
CREATE_OR_GET_OBJECT_ID = _fs(48, _BUF, Access.ANY)
SET_SPARSE = _fs(49, _BUF, Access.SPECIAL)
SET_ZERO_DATA = _fs(50, _BUF, Access.WRITE)
QUERY_ALLOCATED_RANGES = _fs(51, _NEITHER, Access.READ)
ENABLE_UPGRADE = _fs(52, _BUF, Access.WRITE)
SET_ENCRYPTION = _fs(53, _NEITHER, Access.ANY)
ENCRYPTION_IO = _fs(54, _NEITHER, Access.ANY)
WRITE_RAW_ENCRYPTED = _fs(55, _NEITHER, Access.SPECIAL)
READ_RAW_ENCRYPTED = _fs(56, _NEITHER, Access.SPECIAL)
CREATE_USN_JOURNAL = _fs(57, _NEITHER, Access.ANY)
READ_FILE_USN_DATA = _fs(58, _NEITHER, Access.ANY)
USN_CLOSE_RECORD = _fs(59, _NEITHER, Access.ANY)
EXTEND_VOLUME = _fs(60, _BUF, Access.ANY)
QUERY_USN_JOURNAL = _fs(61, _BUF, Access.ANY)
DELETE_USN_JOURNAL = _fs(62, _BUF, Access.ANY)
MARK_HANDLE = _fs(63, _BUF, Access.ANY)
SIS_COPYFILE = _fs(64, _BUF, Access.ANY)
SIS_LINK_FILES = _fs(65, _BUF, Access.READ_WRITE)
RECALL_FILE = _fs(69, _NEITHER, Access.ANY)
READ_FROM_PLEX = _fs(71, _OUT_DIRECT, Access.READ)
FILE_PREFETCH = _fs(72, _BUF, Access.SPECIAL)

# Added in the Windows Vista release.
MAKE_MEDIA_COMPATIBLE = _fs(76, _BUF, Access.WRITE)
SET_DEFECT_MANAGEMENT = _fs(77, _BUF, Access.WRITE)
QUERY_SPARING_INFO = _fs(78, _BUF, Access.ANY)
QUERY_ON_DISK_VOLUME_INFO = _fs(79, _BUF, Access.ANY)
SET_VOLUME_COMPRESSION_STATE = _fs(80, _BUF, Access.SPECIAL)
TXFS_MODIFY_RM = _fs(81, _BUF, Access.WRITE)
TXFS_QUERY_RM_INFORMATION = _fs(82, _BUF, Access.READ)
TXFS_ROLLFORWARD_REDO = _fs(84, _BUF, Access.WRITE)
TXFS_ROLLFORWARD_UNDO = _fs(85, _BUF, Access.WRITE)
TXFS_START_RM = _fs(86, _BUF, Access.WRITE)
TXFS_SHUTDOWN_RM = _fs(87, _BUF, Access.WRITE)
TXFS_READ_BACKUP_INFORMATION = _fs(88, _BUF, Access.READ)
TXFS_WRITE_BACKUP_INFORMATION = _fs(89, _BUF, Access.WRITE)
TXFS_CREATE_SECONDARY_RM = _fs(90, _BUF, Access.WRITE)
TXFS_GET_METADATA_INFO = _fs(91, _BUF, Access.READ)
TXFS_GET_TRANSACTED_VERSION = _fs(92, _BUF, Access.READ)
TXFS_SAVEPOINT_INFORMATION = _fs(94, _BUF, Access.WRITE)
TXFS_CREATE_MINIVERSION = _fs(95, _BUF, Access.WRITE)
TXFS_TRANSACTION_ACTIVE = _fs(99, _BUF, Access.READ)
SET_VOLUME_ZERO_ON_DEALLOCATION = _fs(101, _BUF, Access.SPECIAL)
SET_REPAIR = _fs(102, _BUF, Access.ANY)
GET_REPAIR = _fs(103, _BUF, Access.ANY)
WAIT_FOR_REPAIR = _fs(104, _BUF, Access.ANY)
INITIATE_REPAIR = _fs(106, _BUF, Access.ANY)
CSC_INTERNAL = _fs(107, _NEITHER, Access.ANY)
SHRINK_VOLUME = _fs(108, _BUF, Access.SPECIAL)
SET_SHORT_NAME_BEHAVIOR = _fs(109, _BUF, Access.ANY)
DFSR_SET_GHOST_HANDLE_STATE = _fs(110, _BUF, Access.ANY)
TXFS_LIST_TRANSACTION_LOCKED_FILES = _fs(120, _BUF, Access.READ)
TXFS_LIST_TRANSACTIONS = _fs(121, _BUF, Access.READ)
QUERY_PAGEFILE_ENCRYPTION = _fs(122, _BUF, Access.ANY)
RESET_VOLUME_ALLOCATION_HINTS = _fs(123, _BUF, Access.ANY)
TXFS_READ_BACKUP_INFORMATION2 = _fs(126, _BUF, Access.ANY)