__all__ = ["ByteReader", "ByteWriter"]

from .bytereader import ByteReader
from .bytewriter import ByteWriter
