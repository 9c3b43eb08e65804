'''
The chunk type is a 4-byte code that identifies what a chunk contains.

Each of the four bytes must be an ASCII letter, and the case of each letter
(i.e. bit 5 of the byte) carries one property of the chunk:

 1. ancillary bit (first byte): uppercase means critical
 2. private bit (second byte): uppercase means public
 3. reserved bit (third byte): must be uppercase in this version of the format
 4. safe-to-copy bit (fourth byte): lowercase means safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structures.html#Chunk-naming-conventions>.
'''
from bitstring import Bits

from .enum import ChunkProperty
from .exceptions import NonAlphabeticByteException, WrongLengthException


# index of bit 5 (0x20) inside a byte when counting from the most significant bit
_CASE_BIT = 2


def _is_alpha(byte: int) -> bool:
    return 0x41 <= byte <= 0x5a or 0x61 <= byte <= 0x7a


class ChunkType(object):
    '''Immutable wrapper around the 4 raw bytes of a chunk type.

    Being constructible only requires alphabetic bytes; being valid also
    requires the reserved bit to be clear, use is_valid() to check it.
    '''
    __slots__ = ('_raw',)

    SIZE = 4

    def __init__(self, raw: bytes):
        raw = bytes(raw)
        if len(raw) != self.SIZE:
            raise WrongLengthException(f'chunk type must be {self.SIZE} bytes, got {len(raw)}')

        for idx, byte in enumerate(raw):
            if not _is_alpha(byte):
                raise NonAlphabeticByteException(f'byte 0x{byte:02x} at position {idx} is not an ASCII letter')

        object.__setattr__(self, '_raw', raw)

    @classmethod
    def from_str(cls, value: str) -> 'ChunkType':
        try:
            raw = value.encode('utf-8')
        except UnicodeEncodeError as e:
            raise NonAlphabeticByteException(f'chunk type {value!r} contains characters that are not ASCII letters') from e

        if len(raw) != cls.SIZE:
            raise WrongLengthException(f'chunk type {value!r} must be {cls.SIZE} bytes long, got {len(raw)}')

        return cls(raw)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    @property
    def raw(self) -> bytes:
        return self._raw

    def _case_bit(self, index: int) -> bool:
        return Bits(self._raw)[index * 8 + _CASE_BIT]

    def is_critical(self) -> bool:
        return not self._case_bit(0)

    def is_public(self) -> bool:
        return not self._case_bit(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._case_bit(2)

    def is_safe_to_copy(self) -> bool:
        return self._case_bit(3)

    def is_valid(self) -> bool:
        return all(_is_alpha(_) for _ in self._raw) and self.is_reserved_bit_valid()

    @property
    def properties(self) -> ChunkProperty:
        flags = ChunkProperty.NONE
        if self.is_critical():
            flags |= ChunkProperty.CRITICAL
        if self.is_public():
            flags |= ChunkProperty.PUBLIC
        if not self.is_reserved_bit_valid():
            flags |= ChunkProperty.RESERVED
        if self.is_safe_to_copy():
            flags |= ChunkProperty.SAFE_TO_COPY

        return flags

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self})>'

    def __str__(self):
        return self._raw.decode('ascii')
