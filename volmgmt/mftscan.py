"""Filtering, settings and summaries for scans of the master file table."""

from __future__ import annotations

import math
import os
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from enum import IntEnum
from typing import Any

from dateutil import parser as date_parser

__all__ = [
    "UsageError",
    "Result",
    "Summary",
    "Settings",
    "combine",
    "build_record_filter",
    "build_file_info_filter",
    "compile_regex",
    "parse_time",
    "parse_size",
    "format_bytes",
]

_SIZE_SUFFIXES = ("B", "kB", "MB", "GB", "TB", "PB", "EB")

_SIZE_TABLE = {
    "": 1,
    "b": 1,
    "k": 1000,
    "kb": 1000,
    "ki": 1 << 10,
    "kib": 1 << 10,
    "m": 1000**2,
    "mb": 1000**2,
    "mi": 1 << 20,
    "mib": 1 << 20,
    "g": 1000**3,
    "gb": 1000**3,
    "gi": 1 << 30,
    "gib": 1 << 30,
    "t": 1000**4,
    "tb": 1000**4,
    "ti": 1 << 40,
    "tib": 1 << 40,
    "p": 1000**5,
    "pb": 1000**5,
    "pi": 1 << 50,
    "pib": 1 << 50,
    "e": 1000**6,
    "eb": 1000**6,
    "ei": 1 << 60,
    "eib": 1 << 60,
}

_U64 = 1 << 64


class UsageError(Exception):
    """Raised when a command-line value cannot be understood."""


class Result(IntEnum):
    """Assessment of a file."""

    SKIPPED = 0
    INACCESSIBLE = 1
    DIR = 2
    FILE = 3
    REPARSE = 4


def format_bytes(size: int) -> str:
    """Return a human-readable size in SI units, such as ``1.5 kB``."""
    size = int(size) % _U64
    if size < 10:
        return f"{size} B"
    exponent = math.floor(math.log(size) / math.log(1000))
    suffix = _SIZE_SUFFIXES[exponent]
    value = math.floor(size / 1000**exponent * 10 + 0.5) / 10
    return f"{value:.1f} {suffix}" if value < 10 else f"{value:.0f} {suffix}"


def _parse_bytes(text: str) -> int:
    digits = 0
    for char in text:
        if char not in "0123456789.,":
            break
        digits += 1
    number = text[:digits].replace(",", "")
    try:
        value = float(number)
    except ValueError:
        raise ValueError(f"invalid number: {number!r}") from None
    unit = text[digits:].strip().lower()
    if unit not in _SIZE_TABLE:
        raise ValueError(f"unhandled size name: {unit}")
    value *= _SIZE_TABLE[unit]
    if value >= _U64:
        raise ValueError(f"too large: {text}")
    return int(value)


def parse_size(value: str) -> int:
    """Parse a human-readable size into bytes; an empty string yields zero."""
    if value == "":
        return 0
    try:
        return _parse_bytes(value)
    except ValueError as exc:
        raise UsageError(f'Unable to parse file size "{value}": {exc}') from exc


def compile_regex(pattern: str) -> re.Pattern[str] | None:
    """Compile ``pattern`` for case-insensitive matching, or return ``None``."""
    if pattern == "":
        return None
    if not pattern.startswith("(?i)"):
        pattern = "(?i)" + pattern
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise UsageError(
            f'Unable to compile regular expression "{pattern}": {exc}\n'
        ) from exc


def parse_time(value: str, tz: tzinfo | None) -> datetime | None:
    """Parse a date and time, placing it in ``tz`` when it names no zone.

    When ``tz`` is ``None`` the local zone is used. An empty string yields
    ``None``.
    """
    if value == "":
        return None
    try:
        parsed = date_parser.parse(value)
    except (ValueError, OverflowError) as exc:
        raise UsageError(f'Unable to parse time "{value}": {exc}') from exc
    if parsed.tzinfo is None:
        parsed = parsed.astimezone() if tz is None else parsed.replace(tzinfo=tz)
    return parsed


def _format_time(value: datetime) -> str:
    text = value.strftime("%Y-%m-%d %H:%M:%S")
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    if value.tzinfo is not None:
        text += f" {value.strftime('%z')} {value.tzname()}"
    return text


@dataclass
class Summary:
    """Counts and sizes gathered by a scan."""

    skipped: int = 0
    directories: int = 0
    files: int = 0
    total_bytes: int = 0
    sizes: list[int] = field(default_factory=list)

    def mean(self) -> int:
        """Return the mean file size."""
        if self.files == 0:
            return 0
        return self.total_bytes // self.files

    def median(self) -> int:
        """Return the median of the recorded sizes, in recorded order."""
        if not self.sizes:
            return 0
        middle, odd = divmod(len(self.sizes), 2)
        if odd:
            return self.sizes[middle]
        return (self.sizes[middle - 1] + self.sizes[middle]) // 2

    def __str__(self) -> str:
        return (
            f"Skipped: {self.skipped}, Directories: {self.directories}, "
            f"Files: {self.files} (Total: {format_bytes(self.total_bytes)}, "
            f"Mean: {format_bytes(self.mean())}, "
            f"Median: {format_bytes(self.median())})"
        )


def combine(*args: Summary) -> Summary:
    """Merge a series of summaries into one."""
    return Summary(
        skipped=sum(s.skipped for s in args),
        directories=sum(s.directories for s in args),
        files=sum(s.files for s in args),
        total_bytes=sum(s.total_bytes for s in args),
        sizes=[size for s in args for size in s.sizes],
    )


@dataclass
class Settings:
    """Settings for a scan."""

    include: re.Pattern[str] | None = None
    exclude: re.Pattern[str] | None = None
    after: datetime | None = None
    before: datetime | None = None
    location: tzinfo | None = None
    bigger_than: int = 0
    smaller_than: int = 0
    list_files: bool = False
    progress: bool = False
    verbose: bool = False
    limit: int = field(default_factory=lambda: os.cpu_count() or 1)

    def summary(self) -> str:
        """Return a multi-line description of the settings in effect."""
        lines = []
        if self.include is not None:
            lines.append(f"Include: {self.include.pattern}")
        if self.exclude is not None:
            lines.append(f"Exclude: {self.exclude.pattern}")
        if self.after is not None:
            lines.append(f"After: {_format_time(self.after)}")
        if self.before is not None:
            lines.append(f"Before: {_format_time(self.before)}")
        if self.bigger_than > 0:
            lines.append(f"Bigger Than: {format_bytes(self.bigger_than)}")
        if self.smaller_than > 0:
            lines.append(f"Smaller Than: {format_bytes(self.smaller_than)}")
        if self.list_files:
            lines.append("List Files: On")
        if self.progress:
            lines.append("Progress: On")
        if self.verbose:
            lines.append("Verbose: On")
        if self.limit != 1:
            lines.append(f"Concurrent Reads: {self.limit}")
        return "\n".join(lines) + "\n" if lines else ""


def build_record_filter(settings: Settings) -> Callable[[Any], bool]:
    """Return a predicate over journal records with ``path`` and ``file_name``.

    The path is matched when present, otherwise the file name.
    """

    def accept(record: Any) -> bool:
        subject = record.path or record.file_name
        if settings.include is not None and not settings.include.search(subject):
            return False
        if settings.exclude is not None and settings.exclude.search(subject):
            return False
        return True

    return accept


def build_file_info_filter(settings: Settings) -> Callable[[Any], bool]:
    """Return a predicate over file details with ``size()`` and ``mod_time()``."""

    def accept(info: Any) -> bool:
        if settings.bigger_than > 0 and info.size() <= settings.bigger_than:
            return False
        if settings.smaller_than > 0 and info.size() >= settings.smaller_than:
            return False
        if settings.after is not None and info.mod_time() < settings.after:
            return False
        if settings.before is not None and info.mod_time() > settings.before:
            return False
        return True

    return accept