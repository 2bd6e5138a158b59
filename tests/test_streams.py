import pytest

from chunk_codec.streams import ByteReader, ByteWriter
from chunk_codec.streams.common import get_endian_sign


def test_reader_u_int32_endianness():
    assert ByteReader(b"\x00\x00\x00\x2a").read_u_int32() == 42
    assert ByteReader(b"\x2a\x00\x00\x00", "little").read_u_int32() == 42


def test_reader_tracks_position():
    reader = ByteReader(b"abcdef")
    reader.read(2)

    assert reader.tell() == 2
    assert reader.remaining() == 4
    assert reader.size == 6


def test_reader_never_reads_past_end():
    reader = ByteReader(b"abc")

    with pytest.raises(EOFError):
        reader.read_u_int32()

    with pytest.raises(EOFError):
        reader.read(-1)


def test_writer():
    writer = ByteWriter()
    writer.write_u_int32(42)
    writer.write(b"RuSt")

    assert writer.buffer == b"\x00\x00\x00\x2aRuSt"
    assert writer.position == 8


def test_unknown_endian():
    with pytest.raises(NotImplementedError):
        get_endian_sign("middle")
