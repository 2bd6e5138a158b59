from .checksum import crc32
from .chunk import CHUNK_OVERHEAD_SIZE, MAX_CHUNK_LENGTH, Chunk
from .chunk_type import ChunkType
from .result import DecodeResult, decode_chunk

__all__ = [
    "Chunk",
    "ChunkType",
    "DecodeResult",
    "decode_chunk",
    "crc32",
    "CHUNK_OVERHEAD_SIZE",
    "MAX_CHUNK_LENGTH",
]
