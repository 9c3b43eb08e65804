'''
Checksum used to protect each chunk of the file.
'''
from zlib import crc32 as _crc32


def crc32(*parts: bytes) -> int:
    """Return the CRC-32 of the parts as if they were a single buffer.

    A chunk's crc covers its type followed by its data, so Chunk.crc calls
    crc32(type, data). zlib's running value is fed part after part, which
    avoids copying the data into a concatenation.

    The variant is CRC-32/ISO-HDLC (the zlib one): it uses the reflected
    polynomial 0xedb88320, the register starts at all ones and the result
    is inverted. The value returned is an unsigned 32-bit integer; writing
    it MSB first is up to the caller.

    See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.
    """
    value = 0
    for part in parts:
        value = _crc32(part, value)

    return value
