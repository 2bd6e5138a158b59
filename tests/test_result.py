import pytest

from chunk_codec import DecodeResult, decode_chunk
from chunk_codec.chunk.exceptions import (
    ChunkIntegrityException,
    ChunkLengthMismatchException,
    ChunkStructureException,
)
from conftest import MESSAGE, MESSAGE_CRC, build_chunk_bytes


def test_decode_chunk_success(rust_chunk_bytes):
    result = decode_chunk(rust_chunk_bytes)

    assert result.ok
    assert result.error is None
    assert result.unwrap().crc == MESSAGE_CRC


def test_decode_chunk_structure_error():
    result = decode_chunk(b"\x00\x00\x00")

    assert not result.ok
    assert result.chunk is None
    assert isinstance(result.error, ChunkStructureException)

    with pytest.raises(ChunkStructureException):
        result.unwrap()


def test_decode_chunk_integrity_error():
    result = decode_chunk(build_chunk_bytes(42, b"RuSt", MESSAGE, 2882656333))

    assert result.chunk is None
    assert isinstance(result.error, ChunkIntegrityException)


def test_decode_chunk_strict():
    buffer = build_chunk_bytes(7, b"RuSt", MESSAGE, MESSAGE_CRC)

    assert decode_chunk(buffer).ok
    assert isinstance(
        decode_chunk(buffer, strict=True).error, ChunkLengthMismatchException
    )


def test_result_needs_exactly_one_outcome(rust_chunk_bytes):
    with pytest.raises(ValueError):
        DecodeResult()

    with pytest.raises(ValueError):
        DecodeResult(
            chunk=decode_chunk(rust_chunk_bytes).chunk,
            error=ChunkStructureException("short"),
        )
