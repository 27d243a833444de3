"""I/O control codes for mass storage drivers and volume mounts."""

from __future__ import annotations

from volmgmt.ioctlcode import Access, Method, new_code
from volmgmt.ioctltype import DeviceType, MountType

_MGR = MountType.MOUNT_MGR
_DEV = MountType.MOUNT_DEV
_STORAGE = DeviceType.MASS_STORAGE
_BUF = Method.BUFFERED

# Interaction with the mount manager.
MOUNTMGR_CREATE_POINT = new_code(_MGR, 0, _BUF, Access.READ_WRITE)
MOUNTMGR_DELETE_POINTS = new_code(_MGR, 1, _BUF, Access.READ_WRITE)
MOUNTMGR_QUERY_POINTS = new_code(_MGR, 2, _BUF, Access.ANY)
MOUNTMGR_DELETE_POINTS_DBONLY = new_code(_MGR, 3, _BUF, Access.READ_WRITE)
MOUNTMGR_NEXT_DRIVE_LETTER = new_code(_MGR, 4, _BUF, Access.READ_WRITE)
MOUNTMGR_AUTO_DL_ASSIGNMENTS = new_code(_MGR, 5, _BUF, Access.READ_WRITE)
MOUNTMGR_VOLUME_MOUNT_POINT_CREATED = new_code(_MGR, 6, _BUF, Access.READ_WRITE)
MOUNTMGR_VOLUME_MOUNT_POINT_DELETED = new_code(_MGR, 7, _BUF, Access.READ_WRITE)
MOUNTMGR_CHANGE_NOTIFY = new_code(_MGR, 8, _BUF, Access.READ)
MOUNTMGR_KEEP_LINKS_WHEN_OFFLINE = new_code(_MGR, 9, _BUF, Access.READ_WRITE)
MOUNTMGR_CHECK_UNPROCESSED_VOLUMES = new_code(_MGR, 10, _BUF, Access.READ)
MOUNTMGR_VOLUME_ARRIVAL_NOTIFICATION = new_code(_MGR, 11, _BUF, Access.READ)

# Interaction with mounted devices.
MOUNTDEV_QUERY_UNIQUE_ID = new_code(_DEV, 0, _BUF, Access.ANY)
MOUNTDEV_UNIQUE_ID_CHANGE_NOTIFY = new_code(_DEV, 1, _BUF, Access.READ_WRITE)
MOUNTDEV_QUERY_DEVICE_NAME = new_code(_DEV, 2, _BUF, Access.ANY)
MOUNTDEV_QUERY_SUGGESTED_LINK_NAME = new_code(_DEV, 3, _BUF, Access.ANY)
MOUNTDEV_LINK_CREATED = new_code(_DEV, 4, _BUF, Access.READ_WRITE)
MOUNTDEV_LINK_DELETED = new_code(_DEV, 5, _BUF, Access.READ_WRITE)
MOUNTDEV_QUERY_STABLE_GUID = new_code(_DEV, 6, _BUF, Access.ANY)

# Mass storage devices.
STORAGE_CHECK_VERIFY = new_code(_STORAGE, 0x0200, _BUF, Access.READ)
STORAGE_CHECK_VERIFY2 = new_code(_STORAGE, 0x0200, _BUF, Access.ANY)
STORAGE_EJECT_MEDIA = new_code(_STORAGE, 0x0202, _BUF, Access.READ)
STORAGE_EJECTION_CONTROL = new_code(_STORAGE, 0x0250, _BUF, Access.ANY)
STORAGE_FIND_NEW_DEVICES = new_code(_STORAGE, 0x0206, _BUF, Access.READ)
STORAGE_GET_DEVICE_NUMBER = new_code(_STORAGE, 0x0420, _BUF, Access.ANY)
STORAGE_GET_MEDIA_SERIAL_NUMBER = new_code(_STORAGE, 0x0304, _BUF, Access.ANY)
STORAGE_GET_MEDIA_TYPES = new_code(_STORAGE, 0x0300, _BUF, Access.ANY)
STORAGE_GET_MEDIA_TYPES_EX = new_code(_STORAGE, 0x0301, _BUF, Access.ANY)
STORAGE_LOAD_MEDIA = new_code(_STORAGE, 0x0203, _BUF, Access.READ)
STORAGE_LOAD_MEDIA2 = new_code(_STORAGE, 0x0203, _BUF, Access.ANY)
STORAGE_MCN_CONTROL = new_code(_STORAGE, 0x0251, _BUF, Access.ANY)
STORAGE_MEDIA_REMOVAL = new_code(_STORAGE, 0x0201, _BUF, Access.READ)
STORAGE_PREDICT_FAILURE = new_code(_STORAGE, 0x0440, _BUF, Access.ANY)
STORAGE_QUERY_PROPERTY = new_code(_STORAGE, 0x0500, _BUF, Access.ANY)
STORAGE_RELEASE = new_code(_STORAGE, 0x0205, _BUF, Access.READ)
STORAGE_RESERVE = new_code(_STORAGE, 0x0204, _BUF, Access.READ)
STORAGE_RESET_BUS = new_code(_STORAGE, 0x0400, _BUF, Access.READ_WRITE)
STORAGE_RESET_DEVICE = new_code(_STORAGE, 0x0401, _BUF, Access.READ_WRITE)