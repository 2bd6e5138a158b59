import pytest

from chunk_codec import ChunkType

MESSAGE = b"This is where your secret message will be!"
MESSAGE_CRC = 2882656334


def build_chunk_bytes(length: int, chunk_type: bytes, data: bytes, crc: int) -> bytes:
    return (
        length.to_bytes(4, "big")
        + chunk_type
        + data
        + crc.to_bytes(4, "big")
    )


@pytest.fixture
def rust_type() -> ChunkType:
    return ChunkType.from_str("RuSt")


@pytest.fixture
def rust_chunk_bytes() -> bytes:
    return build_chunk_bytes(42, b"RuSt", MESSAGE, MESSAGE_CRC)
