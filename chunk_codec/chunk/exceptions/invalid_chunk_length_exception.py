from .chunk_exception import ChunkException


class InvalidChunkLengthException(ChunkException, ValueError):
    pass
