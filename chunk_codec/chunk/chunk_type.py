from dataclasses import dataclass
from typing import Self

from chunk_codec.chunk.exceptions import InvalidChunkTypeException

CHUNK_TYPE_SIZE = 4

# Bit 5 of each tag byte is the ASCII lowercase bit
PROPERTY_BIT = 0x20


def _is_ascii_letter(value: int) -> bool:
    return 65 <= value <= 90 or 97 <= value <= 122


@dataclass(frozen=True)
class ChunkType:
    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != CHUNK_TYPE_SIZE:
            raise InvalidChunkTypeException(
                f"Chunk type must be {CHUNK_TYPE_SIZE} bytes, got {len(self.raw)}"
            )

        object.__setattr__(self, "raw", bytes(self.raw))

    @classmethod
    def from_str(cls, value: str) -> Self:
        """
        Builds a chunk type from its textual form, e.g. ``"IHDR"``.
        Every character must be an ASCII letter.
        """

        try:
            raw = value.encode("ascii")
        except UnicodeEncodeError as exception:
            raise InvalidChunkTypeException(
                f"Chunk type {value!r} is not ASCII"
            ) from exception

        if not all(_is_ascii_letter(byte) for byte in raw):
            raise InvalidChunkTypeException(
                f"Chunk type {value!r} must contain only ASCII letters"
            )

        return cls(raw)

    def to_bytes(self) -> bytes:
        return self.raw

    def __bytes__(self) -> bytes:
        return self.raw

    def is_critical(self) -> bool:
        return not self.raw[0] & PROPERTY_BIT

    def is_public(self) -> bool:
        return not self.raw[1] & PROPERTY_BIT

    def is_reserved_bit_valid(self) -> bool:
        return not self.raw[2] & PROPERTY_BIT

    def is_safe_to_copy(self) -> bool:
        return bool(self.raw[3] & PROPERTY_BIT)

    def is_valid(self) -> bool:
        return (
            all(_is_ascii_letter(byte) for byte in self.raw)
            and self.is_reserved_bit_valid()
        )

    def __str__(self) -> str:
        return self.raw.decode("latin-1")

    def __repr__(self) -> str:
        return f"ChunkType({str(self)!r})"
