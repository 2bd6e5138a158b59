from io import BytesIO
from struct import unpack

from .common import U_INT32_SIZE, Endian, get_endian_sign


class ByteReader:
    """Sequential reader over an in-memory buffer.

    Reads never go past the end of the buffer: asking for more bytes than
    remain raises ``EOFError`` instead of returning a short slice.
    """

    def __init__(self, initial_bytes: bytes, endian: Endian = "big"):
        self._internal_reader = BytesIO(initial_bytes)
        self._size = len(initial_bytes)
        self._endian_sign = get_endian_sign(endian)

    @property
    def size(self) -> int:
        return self._size

    def tell(self) -> int:
        return self._internal_reader.tell()

    def remaining(self) -> int:
        return self._size - self.tell()

    def read(self, size: int) -> bytes:
        if size < 0 or size > self.remaining():
            raise EOFError(
                f"Cannot read {size} bytes at offset {self.tell()}, "
                f"{self.remaining()} left."
            )

        return self._internal_reader.read(size)

    def read_u_int32(self) -> int:
        return unpack(f"{self._endian_sign}I", self.read(U_INT32_SIZE))[0]
