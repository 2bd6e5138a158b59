from dataclasses import dataclass

from chunk_codec.chunk.chunk import Chunk
from chunk_codec.chunk.exceptions import ChunkDecodeException


@dataclass(frozen=True)
class DecodeResult:
    chunk: Chunk | None = None
    error: ChunkDecodeException | None = None

    def __post_init__(self) -> None:
        if (self.chunk is None) == (self.error is None):
            raise ValueError("DecodeResult needs exactly one of chunk and error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Chunk:
        if self.error is not None:
            raise self.error

        return self.chunk


def decode_chunk(buffer: bytes, *, strict: bool = False) -> DecodeResult:
    """
    Same as :meth:`Chunk.from_bytes`, but decode failures are returned
    instead of raised. Exactly one of ``chunk`` and ``error`` is set.
    """

    try:
        return DecodeResult(chunk=Chunk.from_bytes(buffer, strict=strict))
    except ChunkDecodeException as exception:
        return DecodeResult(error=exception)
