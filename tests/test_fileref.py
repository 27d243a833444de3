import struct

import pytest

from volmgmt.fileref import (
    Descriptor,
    FileID,
    IDType,
    from_big_endian,
    from_little_endian,
    new64,
    new128,
)


@pytest.mark.parametrize("value", [0, 1, 12345, 2**40 + 7, 2**63 - 1, -1])
def test_new64_int64_round_trip(value):
    fid = new64(value)
    assert fid.int64() == value
    assert fid.is_int64()


@pytest.mark.parametrize("lower,upper", [(1, 2), (-5, 9), (0, -1), (2**62, 3)])
def test_new128_split_round_trip(lower, upper):
    assert new128(lower, upper).split() == (upper, lower)


def test_int64_is_minus_one_when_upper_set():
    fid = new128(10, 1)
    assert not fid.is_int64()
    assert fid.int64() == -1


def test_byte_order_round_trips():
    fid = new128(123456789, 987654321)
    assert from_big_endian(fid.big_endian()) == fid
    assert from_little_endian(fid.little_endian()) == fid
    assert fid.little_endian() == fid.big_endian()[::-1]


def test_big_endian_layout_puts_lower_last():
    fid = new64(5)
    assert fid.big_endian()[-1] == 5
    assert not any(fid.big_endian()[:-1])


def test_is_zero():
    assert new64(0).is_zero()
    assert FileID().is_zero()
    assert not new64(1).is_zero()
    assert not new128(0, 1).is_zero()


def test_str_small_value():
    assert str(new64(12345)) == "12345"


def test_str_negative_64bit():
    assert str(new64(-1)) == "-1"


def test_str_wide_value_is_unsigned_big_endian():
    fid = new128(-1, 7)
    assert int(str(fid)) == int.from_bytes(fid.big_endian(), "big")
    assert int(str(fid)) > 0


def test_descriptor_for_64bit_id():
    fid = new64(42)
    desc = fid.descriptor()
    assert desc.size == 24
    assert desc.type == IDType.FILE
    assert desc.data == fid.little_endian()


def test_descriptor_for_128bit_id():
    fid = new128(1, 1)
    desc = fid.descriptor()
    assert desc.size == 24
    assert desc.type == IDType.EXTENDED_FILE_ID
    assert desc.data == fid.little_endian()


def test_descriptor_to_bytes_layout():
    fid = new128(77, 3)
    raw = fid.descriptor().to_bytes()
    assert len(raw) == 24
    size, id_type, data = struct.unpack("<II16s", raw)
    assert (size, id_type, data) == (24, IDType.EXTENDED_FILE_ID, fid.little_endian())


def test_invalid_lengths_rejected():
    with pytest.raises(ValueError):
        from_big_endian(b"\x00" * 15)
    with pytest.raises(ValueError):
        from_little_endian(b"\x00" * 17)
    with pytest.raises(ValueError):
        Descriptor(24, IDType.FILE, b"\x00")


def test_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        new64(2**64)