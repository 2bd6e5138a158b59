__all__ = [
    "ChunkException",
    "ChunkDecodeException",
    "ChunkStructureException",
    "ChunkLengthMismatchException",
    "ChunkIntegrityException",
    "ChunkTextDecodeException",
    "InvalidChunkTypeException",
    "InvalidChunkLengthException",
]

from chunk_codec.chunk.exceptions.chunk_exception import (
    ChunkDecodeException,
    ChunkException,
)
from chunk_codec.chunk.exceptions.chunk_integrity_exception import (
    ChunkIntegrityException,
)
from chunk_codec.chunk.exceptions.chunk_structure_exception import (
    ChunkLengthMismatchException,
    ChunkStructureException,
)
from chunk_codec.chunk.exceptions.chunk_text_decode_exception import (
    ChunkTextDecodeException,
)
from chunk_codec.chunk.exceptions.invalid_chunk_length_exception import (
    InvalidChunkLengthException,
)
from chunk_codec.chunk.exceptions.invalid_chunk_type_exception import (
    InvalidChunkTypeException,
)
