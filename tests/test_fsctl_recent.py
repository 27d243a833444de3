import pytest

from volmgmt import fsctl, fsctl_recent
from volmgmt.ioctlcode import Access, Method, new_code
from volmgmt.ioctltype import DeviceType

RECENT_CODES = (
    fsctl_recent.QUERY_DEPENDENT_VOLUME,
    fsctl_recent.REQUEST_OPLOCK,
    fsctl_recent.SET_EXTERNAL_BACKING,
    fsctl_recent.ENUM_OVERLAY,
    fsctl_recent.ADD_OVERLAY,
    fsctl_recent.OFFLOAD_READ,
    fsctl_recent.SET_INTEGRITY_INFORMATION,
    fsctl_recent.DEDUP_QUERY_FILE_HASHES,
    fsctl_recent.REPAIR_COPIES,
    fsctl_recent.GET_REFS_VOLUME_DATA,
    fsctl_recent.DUPLICATE_EXTENTS_TO_FILE,
    fsctl_recent.SPARSE_OVERALLOCATE,
    fsctl_recent.STORAGE_QOS_CONTROL,
    fsctl_recent.INITIATE_FILE_METADATA_OPTIMIZATION,
    fsctl_recent.VIRTUAL_STORAGE_QUERY_PROPERTY,
)

OLDER_CODES = (
    fsctl.REQUEST_OPLOCK_LEVEL_1,
    fsctl.LOCK_VOLUME,
    fsctl.READ_USN_JOURNAL,
    fsctl.SET_COMPRESSION,
    fsctl.GET_NTFS_VOLUME_DATA,
    fsctl.QUERY_USN_JOURNAL,
    fsctl.SHRINK_VOLUME,
    fsctl.TXFS_READ_BACKUP_INFORMATION2,
)


def _fields(code):
    return {
        "device": code >> 16,
        "access": (code >> 14) & 0x3,
        "function": (code >> 2) & 0xFFF,
        "method": code & 0x3,
    }


def test_request_oplock_documented_value():
    expected = new_code(DeviceType.FILE_SYSTEM, 144, Method.BUFFERED, Access.ANY)
    assert fsctl_recent.REQUEST_OPLOCK == expected == 0x00090240


def test_duplicate_extents_documented_value():
    expected = new_code(DeviceType.FILE_SYSTEM, 209, Method.BUFFERED, Access.WRITE)
    assert fsctl_recent.DUPLICATE_EXTENTS_TO_FILE == expected == 0x00098344


def test_get_refs_volume_data_documented_value():
    expected = new_code(DeviceType.FILE_SYSTEM, 182, Method.BUFFERED, Access.ANY)
    assert fsctl_recent.GET_REFS_VOLUME_DATA == expected == 0x000902D8


@pytest.mark.parametrize(
    "code, function, method, access",
    [
        (fsctl_recent.QUERY_DEPENDENT_VOLUME, 124, Method.BUFFERED, Access.ANY),
        (fsctl_recent.ENUM_OVERLAY, 199, Method.NEITHER, Access.ANY),
        (fsctl_recent.ADD_OVERLAY, 204, Method.BUFFERED, Access.WRITE),
        (fsctl_recent.SET_EXTERNAL_BACKING, 195, Method.BUFFERED, Access.SPECIAL),
        (fsctl_recent.OFFLOAD_READ, 153, Method.BUFFERED, Access.READ),
        (fsctl_recent.SET_INTEGRITY_INFORMATION, 160, Method.BUFFERED, Access.READ_WRITE),
        (fsctl_recent.DEDUP_QUERY_FILE_HASHES, 166, Method.NEITHER, Access.READ),
        (fsctl_recent.REPAIR_COPIES, 173, Method.BUFFERED, Access.READ_WRITE),
        (fsctl_recent.SPARSE_OVERALLOCATE, 211, Method.NEITHER, Access.SPECIAL),
        (fsctl_recent.STORAGE_QOS_CONTROL, 212, Method.NEITHER, Access.ANY),
        (
            fsctl_recent.INITIATE_FILE_METADATA_OPTIMIZATION,
            215,
            Method.BUFFERED,
            Access.SPECIAL,
        ),
        (fsctl_recent.VIRTUAL_STORAGE_QUERY_PROPERTY, 226, Method.BUFFERED, Access.ANY),
    ],
)
def test_code_fields(code, function, method, access):
    assert _fields(code) == {
        "device": DeviceType.FILE_SYSTEM,
        "access": access,
        "function": function,
        "method": method,
    }


def test_all_codes_target_file_system_device():
    devices = {DeviceType(code >> 16) for code in RECENT_CODES}
    assert devices == {DeviceType.FILE_SYSTEM}


def test_codes_are_unique():
    rebuilt = [
        new_code(code >> 16, (code >> 2) & 0xFFF, code & 0x3, (code >> 14) & 0x3)
        for code in RECENT_CODES
    ]
    assert rebuilt == list(RECENT_CODES)
    assert len(set(RECENT_CODES)) == len(RECENT_CODES)


def test_no_overlap_with_older_codes():
    recent_functions = {(code >> 2) & 0xFFF for code in RECENT_CODES}
    older_functions = {(code >> 2) & 0xFFF for code in OLDER_CODES}
    assert DeviceType(OLDER_CODES[0] >> 16) is DeviceType.FILE_SYSTEM
    assert recent_functions.isdisjoint(older_functions)
    assert set(RECENT_CODES).isdisjoint(OLDER_CODES)


def test_codes_fit_in_32_bits():
    methods = [Method(code & 0x3) for code in RECENT_CODES]
    assert len(methods) == len(RECENT_CODES)
    assert all(0 <= code <= 0xFFFFFFFF for code in RECENT_CODES)