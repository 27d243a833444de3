"""Windows volume and file system management primitives."""

__version__ = "0.1.0"

__all__ = [
    "fileapi",
    "fileattr",
    "fileref",
    "fsctl",
    "fsctl_recent",
    "guidconv",
    "hsync",
    "ioctl",
    "ioctlcode",
    "ioctltype",
    "mftscan",
]