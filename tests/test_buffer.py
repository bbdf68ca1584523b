import pytest

from globalcoin.buffer import (
    BufferReader,
    BufferReaderError,
    BufferWriter,
    EndOfBufferError,
    ValueExceedsU32Error,
)
from globalcoin.hashing import Hash


def test_u16_is_little_endian():
    w = BufferWriter()
    w.write_u16(0x0102)
    assert w.getvalue() == b"\x02\x01"


def test_var_u64_small_is_single_byte():
    w = BufferWriter()
    w.write_var_u64(252)
    assert w.getvalue() == bytes([252])


def test_var_u64_marker_253():
    w = BufferWriter()
    w.write_var_u64(253)
    assert w.getvalue() == b"\xfd\xfd\x00"


@pytest.mark.parametrize(
    "value, size",
    [(0, 1), (252, 1), (253, 3), (0xFFFF, 3), (0x10000, 5), (0xFFFFFFFF, 5), (1 << 32, 9)],
)
def test_var_u64_round_trip_and_size(value, size):
    w = BufferWriter()
    w.write_var_u64(value)
    assert len(w) == size
    r = BufferReader(w.getvalue())
    assert r.read_var_u64() == value
    assert r.remaining == 0


@pytest.mark.parametrize("value", [0, 100, 253, 0xFFFF, 0x10000, 0xFFFFFFFF])
def test_var_u32_round_trip(value):
    w = BufferWriter()
    w.write_var_u32(value)
    assert BufferReader(w.getvalue()).read_var_u32() == value


def test_var_u32_rejects_64bit_marker():
    w = BufferWriter()
    w.write_var_u64(1 << 40)
    with pytest.raises(ValueExceedsU32Error):
        BufferReader(w.getvalue()).read_var_u32()


def test_fixed_width_round_trip():
    w = BufferWriter()
    w.write_u8(7)
    w.write_u16(65535)
    w.write_u32(123456789)
    w.write_u64(1 << 63)
    r = BufferReader(w.getvalue())
    assert r.read_u8() == 7
    assert r.read_u16() == 65535
    assert r.read_u32() == 123456789
    assert r.read_u64() == 1 << 63
    assert r.position == 15


def test_bytes_and_hash_round_trip():
    h = Hash.compute(b"data")
    w = BufferWriter()
    w.write_var_bytes(b"hello")
    w.write_bytes(b"raw")
    w.write_hash(h)
    r = BufferReader(w.getvalue())
    assert r.read_var_bytes() == b"hello"
    assert r.read_bytes(3) == b"raw"
    assert r.read_hash() == h
    assert r.remaining == 0


def test_read_past_end_leaves_position():
    r = BufferReader(b"\x01\x02")
    assert r.read_u8() == 1
    with pytest.raises(EndOfBufferError):
        r.read_u32()
    assert r.position == 1


def test_errors_share_base_class():
    with pytest.raises(BufferReaderError):
        BufferReader(b"").read_u8()


def test_short_hash_raises():
    with pytest.raises(EndOfBufferError):
        BufferReader(bytes(31)).read_hash()


@pytest.mark.parametrize("method, value", [("write_u8", 256), ("write_u16", -1), ("write_var_u32", 1 << 32)])
def test_writer_rejects_out_of_range(method, value):
    w = BufferWriter()
    with pytest.raises(ValueError):
        getattr(w, method)(value)
    assert w.getvalue() == b""


def test_getvalue_is_a_copy():
    w = BufferWriter()
    w.write_u8(1)
    first = w.getvalue()
    w.write_u8(2)
    assert first == b"\x01"
    assert w.getvalue() == b"\x01\x02"