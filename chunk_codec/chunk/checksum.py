import zlib

CRC32_INITIAL = 0


def crc32(*parts: bytes) -> int:
    """
    CRC-32 (ISO-HDLC, the zlib/PNG variant) over the concatenation of parts.

    :return: unsigned 32-bit checksum
    """

    checksum = CRC32_INITIAL
    for part in parts:
        checksum = zlib.crc32(part, checksum)

    return checksum & 0xFFFFFFFF
