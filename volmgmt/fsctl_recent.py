"""I/O control codes for file system drivers.

This module holds the codes added from the Windows 7 release onwards.
"""

from __future__ import annotations

from volmgmt.ioctlcode import Access, Method, new_code
from volmgmt.ioctltype import DeviceType


def _fs(function: int, method: Method, access: Access) -> int:
    return new_code(DeviceType.FILE_SYSTEM, function, method, access)


_BUF = Method.BUFFERED
_NEITHER = Method.NEITHER

# Added in the Windows 7 release.
QUERY_DEPENDENT_VOLUME = _fs(124, _BUF, Access.ANY)
SD_GLOBAL_CHANGE = _fs(125, _BUF, Access.ANY)
LOOKUP_STREAM_FROM_CLUSTER = _fs(127, _BUF, Access.ANY)
TXFS_WRITE_BACKUP_INFORMATION2 = _fs(128, _BUF, Access.ANY)
FILE_TYPE_NOTIFICATION = _fs(129, _BUF, Access.ANY)
BOOT_AREA_INFO = _fs(140, _BUF, Access.ANY)
GET_RETRIEVAL_POINTER_BASE = _fs(141, _BUF, Access.ANY)
SET_PERSISTENT_VOLUME_STATE = _fs(142, _BUF, Access.ANY)
QUERY_PERSISTENT_VOLUME_STATE = _fs(143, _BUF, Access.ANY)
REQUEST_OPLOCK = _fs(144, _BUF, Access.ANY)
CSV_TUNNEL_REQUEST = _fs(145, _BUF, Access.ANY)
IS_CSV_FILE = _fs(146, _BUF, Access.ANY)
QUERY_FILE_SYSTEM_RECOGNITION = _fs(147, _BUF, Access.ANY)
GET_VOLUME_PATH_NAME = _fs(148, _BUF, Access.ANY)
CSV_GET_VOLUME_NAME_FOR_VOLUME_MOUNT_POINT = _fs(149, _BUF, Access.ANY)
CSV_GET_VOLUME_PATH_NAMES_FOR_VOLUME_NAME = _fs(150, _BUF, Access.ANY)
IS_FILE_ON_CSV_VOLUME = _fs(151, _BUF, Access.ANY)
CSV_INTERNAL = _fs(155, _BUF, Access.ANY)
SET_EXTERNAL_BACKING = _fs(195, _BUF, Access.SPECIAL)
GET_EXTERNAL_BACKING = _fs(196, _BUF, Access.ANY)
DELETE_EXTERNAL_BACKING = _fs(197, _BUF, Access.SPECIAL)
ENUM_EXTERNAL_BACKING = _fs(198, _BUF, Access.ANY)
ENUM_OVERLAY = _fs(199, _NEITHER, Access.ANY)
ADD_OVERLAY = _fs(204, _BUF, Access.WRITE)
REMOVE_OVERLAY = _fs(205, _BUF, Access.WRITE)
UPDATE_OVERLAY = _fs(206, _BUF, Access.WRITE)
GET_WOF_VERSION = _fs(218, _BUF, Access.ANY)
SUSPEND_OVERLAY = _fs(225, _BUF, Access.ANY)

# Added in the Windows 8 release.
FILE_LEVEL_TRIM = _fs(130, _BUF, Access.WRITE)
CORRUPTION_HANDLING = _fs(152, _BUF, Access.ANY)
OFFLOAD_READ = _fs(153, _BUF, Access.READ)
OFFLOAD_WRITE = _fs(154, _BUF, Access.WRITE)
SET_PURGE_FAILURE_MODE = _fs(156, _BUF, Access.ANY)
QUERY_FILE_LAYOUT = _fs(157, _NEITHER, Access.ANY)
IS_VOLUME_OWNED_BY_CSVFS = _fs(158, _BUF, Access.ANY)
GET_INTEGRITY_INFORMATION = _fs(159, _BUF, Access.ANY)
SET_INTEGRITY_INFORMATION = _fs(160, _BUF, Access.READ_WRITE)
QUERY_FILE_REGIONS = _fs(161, _BUF, Access.ANY)
DEDUP_FILE = _fs(165, _BUF, Access.ANY)
DEDUP_QUERY_FILE_HASHES = _fs(166, _NEITHER, Access.READ)
DEDUP_QUERY_RANGE_STATE = _fs(167, _NEITHER, Access.READ)
DEDUP_QUERY_REPARSE_INFO = _fs(168, _NEITHER, Access.ANY)
RKF_INTERNAL = _fs(171, _NEITHER, Access.ANY)
SCRUB_DATA = _fs(172, _BUF, Access.ANY)
REPAIR_COPIES = _fs(173, _BUF, Access.READ_WRITE)
DISABLE_LOCAL_BUFFERING = _fs(174, _BUF, Access.ANY)
CSV_MGMT_LOCK = _fs(175, _BUF, Access.ANY)
CSV_QUERY_DOWN_LEVEL_FILE_SYSTEM_CHARACTERISTICS = _fs(176, _BUF, Access.ANY)
ADVANCE_FILE_ID = _fs(177, _BUF, Access.ANY)
CSV_SYNC_TUNNEL_REQUEST = _fs(178, _BUF, Access.ANY)
CSV_QUERY_VETO_FILE_DIRECT_IO = _fs(179, _BUF, Access.ANY)
WRITE_USN_REASON = _fs(180, _BUF, Access.ANY)
CSV_CONTROL = _fs(181, _BUF, Access.ANY)
GET_REFS_VOLUME_DATA = _fs(182, _BUF, Access.ANY)
CSV_H_BREAKING_SYNC_TUNNEL_REQUEST = _fs(185, _BUF, Access.ANY)

# Added in the Windows 8.1 release.
QUERY_STORAGE_CLASSES = _fs(187, _BUF, Access.ANY)
QUERY_REGION_INFO = _fs(188, _BUF, Access.ANY)
USN_TRACK_MODIFIED_RANGES = _fs(189, _BUF, Access.ANY)
QUERY_SHARED_VIRTUAL_DISK_SUPPORT = _fs(192, _BUF, Access.ANY)
SVHDX_SYNC_TUNNEL_REQUEST = _fs(193, _BUF, Access.ANY)
SVHDX_SET_INITIATOR_INFORMATION = _fs(194, _BUF, Access.ANY)
DUPLICATE_EXTENTS_TO_FILE = _fs(209, _BUF, Access.WRITE)
SPARSE_OVERALLOCATE = _fs(211, _NEITHER, Access.SPECIAL)
STORAGE_QOS_CONTROL = _fs(212, _NEITHER, Access.ANY)
SVHDX_ASYNC_TUNNEL_REQUEST = _fs(217, _BUF, Access.ANY)

# Added in the Windows 10 release.
INITIATE_FILE_METADATA_OPTIMIZATION = _fs(215, _BUF, Access.SPECIAL)
QUERY_FILE_METADATA_OPTIMIZATION = _fs(216, _BUF, Access.SPECIAL)
HCS_SYNC_TUNNEL_REQUEST = _fs(219, _BUF, Access.ANY)
HCS_ASYNC_TUNNEL_REQUEST = _fs(220, _BUF, Access.ANY)
QUERY_EXTENT_READ_CACHE_INFO = _fs(221, _BUF, Access.ANY)
QUERY_REFS_VOLUME_COUNTER_INFO = _fs(222, _BUF, Access.ANY)
CLEAN_VOLUME_METADATA = _fs(223, _BUF, Access.ANY)
SET_INTEGRITY_INFORMATION_EX = _fs(224, _BUF, Access.ANY)
VIRTUAL_STORAGE_QUERY_PROPERTY = _fs(226, _BUF, Access.ANY)