__all__ = [
    "Chunk",
    "ChunkType",
    "DecodeResult",
    "decode_chunk",
    "crc32",
]

from chunk_codec.chunk import Chunk, ChunkType, DecodeResult, crc32, decode_chunk
