from .chunk_exception import ChunkDecodeException


class ChunkIntegrityException(ChunkDecodeException):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"CRC mismatch: trailer has {expected}, data gives {actual}.")
        self.expected = expected
        self.actual = actual
