'''
# Portable Network Graphics

The file is an 8 bytes signature followed by a sequence of chunks; the
chunks are kept in the order they were read and nothing here interprets
their data, so auxiliary chunks can be added and removed without touching
the image itself.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

'''
import logging
from typing import Iterable, Iterator, Optional, Tuple

from .chunk import Chunk, CHUNK_OVERHEAD
from .enum import ChunkProperty
from .exceptions import (
    ChunkNotFoundException,
    MagicException,
    UnpackException,
)
from .streams import Stream


logger = logging.getLogger(__name__)


class Png(object):
    '''Ordered list of chunks after the fixed signature.

    More chunks with the same type are allowed: lookups and removal act on
    the first one in file order.

    Instances are not thread-safe: who mutates a Png must own it.
    '''
    STANDARD_HEADER = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'

    def __init__(self, chunks: Iterable[Chunk] = ()):
        self._chunks = list(chunks)

    @classmethod
    def from_chunks(cls, chunks: Iterable[Chunk]) -> 'Png':
        return cls(chunks)

    @classmethod
    def unpack(cls, raw: bytes) -> 'Png':
        '''Parse a whole file: any error in any chunk fails the entire
        unpacking, there is no best-effort result.'''
        if raw[:len(cls.STANDARD_HEADER)] != cls.STANDARD_HEADER:
            raise MagicException(f'signature {bytes(raw[:8])!r} is not {cls.STANDARD_HEADER!r}', chain=['header'])

        stream = Stream(raw)
        stream.seek(len(cls.STANDARD_HEADER))

        chunks = []
        while stream.remaining():
            idx = len(chunks)
            offset = stream.tell()
            logger.debug('unpacking chunks[%d] at offset 0x%08x' % (idx, offset))
            try:
                length = int.from_bytes(stream.peek(4), 'big')
                record = stream.read_exactly(CHUNK_OVERHEAD + length)
                chunks.append(Chunk.unpack(record))
            except UnpackException as e:
                e.chain.append(f'chunks[{idx}]')
                logger.debug('failed unpacking %s at offset 0x%08x' % (e.where(), offset))
                raise

        return cls(chunks)

    def pack(self) -> bytes:
        logger.debug('packing %d chunks' % len(self._chunks))
        return self.STANDARD_HEADER + b''.join(_.pack() for _ in self._chunks)

    @property
    def header(self) -> bytes:
        return self.STANDARD_HEADER

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)

    def _index_by_type(self, chunk_type: str) -> Optional[int]:
        for idx, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return idx

        return None

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        '''Return the first chunk with the given type, None if there is not.'''
        idx = self._index_by_type(chunk_type)

        return self._chunks[idx] if idx is not None else None

    def remove_chunk(self, chunk_type: str) -> Chunk:
        '''Remove and return the first chunk with the given type.

        Only a single chunk is removed even if others with the same type follow.'''
        idx = self._index_by_type(chunk_type)
        if idx is None:
            raise ChunkNotFoundException(f'no chunk with type {chunk_type!r}')

        return self._chunks.pop(idx)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(str(_.chunk_type) for _ in self._chunks))

    def __str__(self):
        msg = ''
        for idx, chunk in enumerate(self._chunks):
            flags = chunk.chunk_type.properties
            names = '|'.join(_.name for _ in ChunkProperty if _ and _ in flags) or ChunkProperty.NONE.name
            msg += f'[{idx:02d}] {chunk} {names}\n'
        return msg
