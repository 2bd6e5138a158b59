from .chunk_exception import ChunkDecodeException


class ChunkStructureException(ChunkDecodeException):
    pass


class ChunkLengthMismatchException(ChunkStructureException):
    def __init__(self, declared_length: int, actual_length: int):
        super().__init__(
            f"Declared length {declared_length} "
            f"doesn't match payload size {actual_length}."
        )
        self.declared_length = declared_length
        self.actual_length = actual_length
