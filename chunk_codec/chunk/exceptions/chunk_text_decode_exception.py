from .chunk_exception import ChunkException


class ChunkTextDecodeException(ChunkException, ValueError):
    pass
