import logging
import struct

from .chunk_type import ChunkType
from .common.crc import crc32
from .exceptions import (
    ConstructionException,
    ChecksumException,
    InvalidTypeException,
    LengthMismatchException,
    NotUtf8TextException,
    TruncatedException,
)


logger = logging.getLogger(__name__)

# length, type and crc fields around the data
CHUNK_OVERHEAD = 12
MAX_CHUNK_LENGTH = 2 ** 32 - 1

_UINT32 = struct.Struct('>I')


class Chunk(object):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

        +--------+------+------+-------+
        | length | type | data |  crc  |
        +--------+------+------+-------+
            4       4     length    4

    Only type and data are stored: length and crc are derived from them
    each time they are requested, so they cannot get out of sync.

    The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.
    '''
    __slots__ = ('_type', '_data')

    def __init__(self, chunk_type: ChunkType, data: bytes):
        self._type = chunk_type
        self._data = bytes(data)

    @property
    def chunk_type(self) -> ChunkType:
        return self._type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def crc(self) -> int:
        return crc32(self._type.raw, self._data)

    def data_as_string(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise NotUtf8TextException(f'data of chunk {self._type} is not UTF-8: {e.reason}', chain=[str(self._type)]) from e

    def pack(self) -> bytes:
        length = self.length
        if length > MAX_CHUNK_LENGTH:
            raise ValueError(f'chunk {self._type} has {length} bytes of data, the maximum is {MAX_CHUNK_LENGTH}')

        return b''.join((
            _UINT32.pack(length),
            self._type.raw,
            self._data,
            _UINT32.pack(self.crc),
        ))

    @classmethod
    def unpack(cls, raw: bytes) -> 'Chunk':
        '''Build a chunk from a buffer holding exactly one record.

        The checks go from the cheapest to the most expensive: first the
        sizes, then the type and only at the end the crc over the data.'''
        raw = bytes(raw)
        if len(raw) < CHUNK_OVERHEAD:
            raise TruncatedException(f'a chunk needs at least {CHUNK_OVERHEAD} bytes, got {len(raw)}')

        length, = _UINT32.unpack_from(raw, 0)
        data_length = len(raw) - CHUNK_OVERHEAD
        if length != data_length:
            raise LengthMismatchException(
                f'declared length {length} but {data_length} bytes of data are present',
                chain=['length'])

        try:
            chunk_type = ChunkType(raw[4:8])
        except ConstructionException as e:
            raise InvalidTypeException(str(e), chain=['type']) from e

        crc_offset = 8 + length
        crc, = _UINT32.unpack_from(raw, crc_offset)
        chunk = cls(chunk_type, raw[8:crc_offset])

        logger.debug('unpacked chunk %s with length %d' % (chunk_type, length))

        if chunk.crc != crc:
            raise ChecksumException(
                f'crc of chunk {chunk_type} is 0x{crc:08x}, expected 0x{chunk.crc:08x}',
                chain=['crc'])

        return chunk

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented

        return self._type == other._type and self._data == other._data

    __hash__ = None

    def __repr__(self):
        return f'<{self.__class__.__name__}(type={self._type}, length={self.length}, crc=0x{self.crc:08x})>'

    def __str__(self):
        preview = self._data[:16]
        ellipsis = '...' if self.length > len(preview) else ''
        return f'{self.length}, {self._type}, {preview!r}{ellipsis}, 0x{self.crc:08x}'
