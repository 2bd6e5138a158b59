import logging
from dataclasses import dataclass, field
from typing import Any, Self

import numpy as np
import orjson

from chunk_codec.chunk.checksum import crc32
from chunk_codec.chunk.chunk_type import CHUNK_TYPE_SIZE, ChunkType
from chunk_codec.chunk.exceptions import (
    ChunkIntegrityException,
    ChunkLengthMismatchException,
    ChunkStructureException,
    ChunkTextDecodeException,
    InvalidChunkLengthException,
)
from chunk_codec.streams import ByteReader, ByteWriter

logger = logging.getLogger(__name__)

CHUNK_LENGTH_SIZE = 4
CHUNK_CRC_SIZE = 4
CHUNK_OVERHEAD_SIZE = CHUNK_LENGTH_SIZE + CHUNK_TYPE_SIZE + CHUNK_CRC_SIZE

# Largest value the u32 length field can hold
MAX_CHUNK_LENGTH = 0xFFFFFFFF


@dataclass(frozen=True, repr=False)
class Chunk:
    """
    Length-prefixed, type-tagged and CRC-checked record:
    ``length (u32 BE) | type (4 bytes) | data | crc (u32 BE)``.

    ``crc`` is always computed here over the type and data bytes, so every
    instance is internally consistent. ``length`` is the declared length; it
    equals ``len(data)`` unless the chunk was decoded from a buffer that
    says otherwise.
    """

    chunk_type: ChunkType
    data: bytes
    length: int | None = None
    crc: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

        if self.length is None:
            object.__setattr__(self, "length", len(self.data))
        elif not 0 <= self.length <= MAX_CHUNK_LENGTH:
            raise InvalidChunkLengthException(
                f"Chunk length must be in 0..{MAX_CHUNK_LENGTH}, got {self.length}"
            )

        object.__setattr__(self, "crc", crc32(self.chunk_type.to_bytes(), self.data))

    @classmethod
    def new(cls, chunk_type: ChunkType, data: bytes) -> Self:
        return cls(chunk_type, data)

    @classmethod
    def from_bytes(cls, buffer: bytes, *, strict: bool = False) -> Self:
        """
        Parses a single serialized chunk.

        The data slice spans everything between the type tag and the last
        4 bytes, whatever the declared length says. With ``strict`` the
        declared length must match that slice.

        :param buffer: serialized chunk, at least 12 bytes
        :param strict: reject a declared length that differs from the data size
        :return: decoded chunk with the verified CRC
        """

        if len(buffer) < CHUNK_OVERHEAD_SIZE:
            logger.debug("Chunk buffer too short: %d bytes", len(buffer))
            raise ChunkStructureException(
                f"Chunk needs at least {CHUNK_OVERHEAD_SIZE} bytes, got {len(buffer)}"
            )

        reader = ByteReader(bytes(buffer))
        length = reader.read_u_int32()
        chunk_type = ChunkType(reader.read(CHUNK_TYPE_SIZE))
        data = reader.read(reader.remaining() - CHUNK_CRC_SIZE)
        expected_crc = reader.read_u_int32()

        if strict and length != len(data):
            logger.debug(
                "Chunk %s declares %d bytes but carries %d", chunk_type, length, len(data)
            )
            raise ChunkLengthMismatchException(length, len(data))

        chunk = cls(chunk_type, data, length)
        if chunk.crc != expected_crc:
            logger.debug(
                "Chunk %s CRC mismatch: trailer %d, computed %d",
                chunk_type,
                expected_crc,
                chunk.crc,
            )
            raise ChunkIntegrityException(expected_crc, chunk.crc)

        return chunk

    def as_bytes(self) -> bytes:
        writer = ByteWriter("big")
        writer.write_u_int32(self.length)
        writer.write(self.chunk_type.to_bytes())
        writer.write(self.data)
        writer.write_u_int32(self.crc)

        return writer.buffer

    def data_as_text(self, encoding: str = "utf-8") -> str:
        try:
            return self.data.decode(encoding)
        except UnicodeDecodeError as exception:
            raise ChunkTextDecodeException(
                f"Chunk {self.chunk_type} data is not valid {encoding}"
            ) from exception

    def json(self) -> Any:
        try:
            return orjson.loads(self.data)
        except orjson.JSONDecodeError as exception:
            raise ChunkTextDecodeException(
                f"Chunk {self.chunk_type} data is not valid JSON"
            ) from exception

    def data_as_array(self, dtype: np.dtype = np.uint8) -> np.ndarray:
        # Backed by immutable bytes, so the array is read-only
        return np.frombuffer(self.data, dtype=dtype)

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        chunk_data = self.data.decode("utf-8", errors="replace")
        return (
            f"CRC: {self.crc}, Chunk type: {self.chunk_type}, "
            f"Chunk data: {chunk_data}, Length: {self.length}"
        )

    def __repr__(self) -> str:
        return f"Chunk(type={self.chunk_type}, length={self.length}, crc={self.crc})"
