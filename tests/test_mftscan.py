from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest

from volmgmt.fileapi import ByHandleFileInformation, FileInfoForHandle, datetime_to_filetime
from volmgmt.mftscan import (
    Settings,
    Summary,
    UsageError,
    build_file_info_filter,
    build_record_filter,
    combine,
    compile_regex,
    format_bytes,
    parse_size,
    parse_time,
)

UTC = timezone.utc


@dataclass
class _Record:
    path: str
    file_name: str


def _file(size, when):
    info = ByHandleFileInformation(
        file_size_low=size, last_write_time=datetime_to_filetime(when)
    )
    return FileInfoForHandle("f", info)


def test_mean():
    assert Summary().mean() == 0
    assert Summary(files=3, total_bytes=300).mean() == 100


def test_median():
    assert Summary().median() == 0
    assert Summary(sizes=[1, 2, 3]).median() == 2
    assert Summary(sizes=[10, 20, 30, 40]).median() == (20 + 30) // 2


def test_combine():
    a = Summary(skipped=1, directories=2, files=1, total_bytes=5, sizes=[5])
    b = Summary(skipped=3, directories=4, files=2, total_bytes=7, sizes=[3, 4])
    merged = combine(a, b)
    assert merged == Summary(4, 6, 3, 12, [5, 3, 4])
    assert combine() == Summary()


def test_summary_str():
    s = Summary(skipped=1, directories=2, files=3, total_bytes=3000, sizes=[1000] * 3)
    text = str(s)
    assert text.startswith("Skipped: 1, Directories: 2, Files: 3 (")
    assert f"Total: {format_bytes(3000)}" in text
    assert f"Median: {format_bytes(1000)}" in text


def test_format_bytes():
    assert format_bytes(5) == "5 B"
    assert format_bytes(1000) == "1.0 kB"


def test_parse_size():
    assert parse_size("") == 0
    assert parse_size("1 kB") == 1000
    assert parse_size("1KiB") == 1024
    assert parse_size("1,000") == 1000


def test_parse_size_round_trip():
    assert parse_size(format_bytes(2000)) == 2000


@pytest.mark.parametrize("text", ["bogus", "5 zz", "99999999999999999999 EB"])
def test_parse_size_errors(text):
    with pytest.raises(UsageError):
        parse_size(text)


def test_compile_regex():
    assert compile_regex("") is None
    pattern = compile_regex("foo")
    assert pattern.pattern == "(?i)foo"
    assert pattern.search("xFOOx")
    assert compile_regex("(?i)bar").pattern == "(?i)bar"


def test_compile_regex_error():
    with pytest.raises(UsageError):
        compile_regex("(")


def test_parse_time():
    assert parse_time("", UTC) is None
    assert parse_time("2021-03-04 05:06:07", UTC) == datetime(2021, 3, 4, 5, 6, 7, tzinfo=UTC)


def test_parse_time_keeps_explicit_zone():
    zone = timezone(timedelta(hours=2))
    parsed = parse_time("2021-03-04T05:06:07+02:00", UTC)
    assert parsed == datetime(2021, 3, 4, 5, 6, 7, tzinfo=zone)


def test_parse_time_error():
    with pytest.raises(UsageError):
        parse_time("not a time at all", UTC)


def test_settings_summary_empty():
    assert Settings(limit=1).summary() == ""


def test_settings_summary_lines():
    settings = Settings(
        include=compile_regex("foo"),
        after=datetime(2021, 3, 4, 5, 6, 7, tzinfo=UTC),
        bigger_than=1000,
        list_files=True,
        verbose=True,
        limit=4,
    )
    lines = settings.summary().splitlines()
    assert lines[0] == "Include: (?i)foo"
    assert lines[1].startswith("After: 2021-03-04 05:06:07")
    assert lines[2] == f"Bigger Than: {format_bytes(1000)}"
    assert lines[3:] == ["List Files: On", "Verbose: On", "Concurrent Reads: 4"]
    assert settings.summary().endswith("\n")


def test_record_filter_include_and_exclude():
    accept = build_record_filter(
        Settings(include=compile_regex("docs"), exclude=compile_regex(r"\.tmp$"), limit=1)
    )
    assert accept(_Record(r"C:\Docs\a.txt", "a.txt"))
    assert not accept(_Record(r"C:\Docs\a.tmp", "a.tmp"))
    assert not accept(_Record(r"C:\other\a.txt", "a.txt"))


def test_record_filter_uses_file_name_without_path():
    accept = build_record_filter(Settings(include=compile_regex("report"), limit=1))
    assert accept(_Record("", "Report.pdf"))
    assert not accept(_Record("", "notes.pdf"))


def test_record_filter_accepts_all_by_default():
    assert build_record_filter(Settings(limit=1))(_Record("", "anything"))


def test_file_info_filter_sizes():
    when = datetime(2021, 1, 1, tzinfo=UTC)
    accept = build_file_info_filter(Settings(bigger_than=100, smaller_than=200, limit=1))
    assert accept(_file(150, when))
    assert not accept(_file(100, when))
    assert not accept(_file(200, when))


def test_file_info_filter_times():
    after = datetime(2021, 1, 1, tzinfo=UTC)
    before = datetime(2021, 12, 31, tzinfo=UTC)
    accept = build_file_info_filter(Settings(after=after, before=before, limit=1))
    assert accept(_file(1, after))
    assert accept(_file(1, before))
    assert not accept(_file(1, after - timedelta(seconds=1)))
    assert not accept(_file(1, before + timedelta(seconds=1)))