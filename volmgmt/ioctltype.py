"""Device types used in Windows I/O control codes."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["DeviceType", "MountType"]


class DeviceType(IntEnum):
    """FILE_DEVICE_* device types."""

    BEEP = 1
    CD_ROM = 2
    CD_ROM_FILE_SYSTEM = 3
    CONTROLLER = 4
    DATALINK = 5
    DFS = 6
    DISK = 7
    DISK_FILE_SYSTEM = 8
    FILE_SYSTEM = 9
    INPORT_PORT = 10
    KEYBOARD = 11
    MAILSLOT = 12
    MIDI_IN = 13
    MIDI_OUT = 14
    MOUSE = 15
    MULTI_UNC_PROVIDER = 16
    NAMED_PIPE = 17
    NETWORK = 18
    NETWORK_BROWSER = 19
    NETWORK_FILE_SYSTEM = 20
    NULL = 21
    PARALLEL_PORT = 22
    PHYSICAL_NETCARD = 23
    PRINTER = 24
    SCANNER = 25
    SERIAL_MOUSE_PORT = 26
    SERIAL_PORT = 27
    SCREEN = 28
    SOUND = 29
    STREAMS = 30
    TAPE = 31
    TAPE_FILE_SYSTEM = 32
    TRANSPORT = 33
    UNKNOWN = 34
    VIDEO = 35
    VIRTUAL_DISK = 36
    WAVE_IN = 37
    WAVE_OUT = 38
    PORT_8042 = 39
    NETWORK_REDIRECTOR = 40
    BATTERY = 41
    BUS_EXTENDER = 42
    MODEM = 43
    VDM = 44
    MASS_STORAGE = 45
    SMB = 46
    KS = 47
    CHANGER = 48
    SMARTCARD = 49
    ACPI = 50
    DVD = 51
    FULLSCREEN_VIDEO = 52
    DFS_FILE_SYSTEM = 53
    DFS_VOLUME = 54
    SERENUM = 55
    TERMSRV = 56
    KSEC = 57


class MountType(IntEnum):
    """Control types of the mount manager and mounted devices."""

    MOUNT_MGR = 109  # MOUNTMGRCONTROLTYPE
    MOUNT_DEV = 77  # MOUNTDEVCONTROLTYPE