# volmgmt

Building blocks for working with Windows volumes and file systems, written
in plain Python so that they can be used, inspected and tested on any
platform.

## What is in the package

- `volmgmt.ioctlcode`: the `Method` and `Access` enumerations and
  `new_code(device_type, function, method, access)`, which builds a 32-bit
  I/O control code and raises `ValueError` for out-of-range parts.
- `volmgmt.ioctltype`: the `DeviceType` (FILE_DEVICE_*) and `MountType`
  enumerations.
- `volmgmt.ioctl`: control codes for the mount manager (`MOUNTMGR_*`),
  mounted devices (`MOUNTDEV_*`) and mass storage devices (`STORAGE_*`).
- `volmgmt.fsctl` and `volmgmt.fsctl_recent`: file system control codes,
  those up to Windows Vista in the first and those added from Windows 7
  onwards in the second (for example `fsctl.LOCK_VOLUME`,
  `fsctl.READ_USN_JOURNAL`, `fsctl_recent.GET_REFS_VOLUME_DATA`).
- `volmgmt.fileattr`: `FileAttr`, an `IntFlag` of FILE_ATTRIBUTE_* values,
  with `match()` and `join(sep, fmt)`, and the formats `FORMAT_C`,
  `FORMAT_NAME` (used by `str()`) and `FORMAT_CODE` (single letters).
- `volmgmt.fileref`: `FileID`, a 64-bit or 128-bit NTFS/ReFS file
  identifier stored big-endian, built with `new64`, `new128`,
  `from_big_endian` or `from_little_endian`; and `Descriptor`, whose
  `to_bytes()` gives the 24-byte file id descriptor layout.
- `volmgmt.guidconv`: `GUID` and `format_guid`, which gives the braced
  upper-case form (and the empty GUID for `None`).
- `volmgmt.hsync`: `SharedHandle`, a thread-safe, reference-counted handle.
  Clones share one underlying handle, which is passed to the `closer`
  callable once every instance has been closed. Using a closed instance
  raises `HandleClosedError`.
- `volmgmt.fileapi`: `FileInfoClass`; `BasicInfo` (FILE_BASIC_INFO, with
  `to_bytes()` and `from_bytes()`); `RenameInfo` (FILE_RENAME_INFO,
  `to_bytes()`); `datetime_to_filetime` and `filetime_to_datetime`;
  `ByHandleFileInformation` and `FileInfoForHandle` with `name()`,
  `size()`, `mode()`, `mod_time()` and `is_dir()`.
- `volmgmt.mftscan`: helpers for scanning the files of a volume:
  `Settings` and its `summary()`, `build_record_filter` (include/exclude
  regular expressions on a record's `path` or `file_name`),
  `build_file_info_filter` (size and modification-time bounds),
  `compile_regex` (case-insensitive), `parse_time`, `parse_size`,
  `format_bytes`, `Summary` with `mean()` and `median()`, `combine`, and
  the `Result` enumeration. Bad input raises `UsageError`.

## Examples

Building an I/O control code:

```python
from volmgmt.ioctlcode import new_code

# File system device (9), function 6, buffered method, any access
assert new_code(9, 6, 0, 0) == 0x00090018
```

File identifiers:

```python
from volmgmt.fileref import new64

file_id = new64(5)
assert file_id.is_int64()
assert file_id.split() == (0, 5)
assert str(file_id) == "5"
```

Sharing a handle between several owners:

```python
from volmgmt.hsync import SharedHandle

closed = []
handle = SharedHandle(42, closed.append)
with handle.clone() as worker:
    assert worker.value() == 42
handle.close()
assert closed == [42]
```

Parsing and formatting sizes for scans:

```python
from volmgmt.mftscan import format_bytes, parse_size

assert parse_size("1 KiB") == 1024
assert format_bytes(1500) == "1.5 kB"
```

## What the package does not do

The package makes no system calls. It does not open volumes or files, send
control codes to a device, read the master file table or the USN change
journal, or query volume labels and device details. The `mftscan` module
provides the filters, settings and summaries for a scan, but there is no
scanning command; records and file details are supplied by the caller.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
root.