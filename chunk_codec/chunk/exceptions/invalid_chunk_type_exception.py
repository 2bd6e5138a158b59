from .chunk_exception import ChunkException


class InvalidChunkTypeException(ChunkException, ValueError):
    pass
