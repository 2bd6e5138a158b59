class ChunkException(Exception):
    pass


class ChunkDecodeException(ChunkException):
    pass
