import io

import pytest
from PIL import Image

from pngme import Chunk, ChunkType, Png
from pngme.exceptions import (
    ChecksumException,
    ChunkNotFoundException,
    InvalidTypeException,
    MagicException,
    TruncatedException,
    UnpackException,
)


def new_chunk(chunk_type, data):
    return Chunk(ChunkType.from_str(chunk_type), data)


def test_header():
    """Check header is right"""
    assert Png().header == b'\x89PNG\x0d\x0a\x1a\x0a'
    assert Png().pack() == Png.STANDARD_HEADER


def test_png_file(png_bytes):
    """Check unpacking a PNG file produced by a real encoder"""
    png = Png.unpack(png_bytes)

    assert str(png.chunks[0].chunk_type) == 'IHDR'
    assert str(png.chunks[-1].chunk_type) == 'IEND'
    assert png.chunk_by_type('IDAT') is not None

    for chunk in png:
        assert chunk.chunk_type.is_valid()


def test_roundtrip(png_bytes):
    assert Png.unpack(png_bytes).pack() == png_bytes


def test_from_chunks():
    chunks = [new_chunk('IHDR', b'\x00' * 13), new_chunk('IEND', b'')]
    png = Png.from_chunks(chunks)

    assert len(png) == 2
    assert list(png) == chunks
    assert Png.unpack(png.pack()).chunks == tuple(chunks)


def test_hello_scenario():
    png = Png()
    png.append_chunk(new_chunk('ruSt', 'hello'.encode()))

    png = Png.unpack(png.pack())
    chunk = png.chunk_by_type('ruSt')

    assert chunk.data_as_string() == 'hello'
    assert chunk.crc == chunk.crc == Chunk(ChunkType.from_str('ruSt'), b'hello').crc


def test_append_find_remove(png_bytes):
    png = Png.unpack(png_bytes)
    n_chunks = len(png)

    assert png.chunk_by_type('teXt') is None

    png.append_chunk(new_chunk('teXt', b'payload'))

    assert len(png) == n_chunks + 1
    assert png.chunk_by_type('teXt').data == b'payload'

    removed = png.remove_chunk('teXt')

    assert removed.data == b'payload'
    assert png.chunk_by_type('teXt') is None
    assert png.pack() == png_bytes


def test_duplicated_types():
    png = Png()
    png.append_chunk(new_chunk('zzZz', b'first'))
    png.append_chunk(new_chunk('zzZz', b'second'))

    assert png.chunk_by_type('zzZz').data == b'first'

    assert png.remove_chunk('zzZz').data == b'first'
    assert png.chunk_by_type('zzZz').data == b'second'
    assert len(png) == 1


def test_remove_not_found():
    png = Png()
    png.append_chunk(new_chunk('ruSt', b'hello'))

    with pytest.raises(ChunkNotFoundException):
        png.remove_chunk('teXt')

    assert len(png) == 1


def test_find_is_exact():
    png = Png()
    png.append_chunk(new_chunk('ruSt', b'hello'))

    assert png.chunk_by_type('RUST') is None
    assert png.chunk_by_type('ruS') is None


def test_chunks_is_a_snapshot():
    png = Png()
    chunks = png.chunks
    png.append_chunk(new_chunk('ruSt', b'hello'))

    assert chunks == ()
    assert len(png.chunks) == 1


@pytest.mark.parametrize('raw', [
    b'',
    b'\x89PNG',
    b'\x89PNG\r\n\x1a',
    b'GIF89a\x00\x00',
    b'\x89PNG\r\n\x1a\x0b',
])
def test_bad_signature(raw):
    with pytest.raises(MagicException):
        Png.unpack(raw)


def test_truncated(png_bytes):
    for size in (len(png_bytes) - 1, len(png_bytes) - 13, 8 + 3, 8 + 11):
        with pytest.raises(TruncatedException):
            Png.unpack(png_bytes[:size])


def test_trailing_garbage(png_bytes):
    with pytest.raises(TruncatedException):
        Png.unpack(png_bytes + b'\x00\x00')


def test_corrupted_chunk_fails_everything(png_bytes):
    png = Png.unpack(png_bytes)
    offset = len(Png.STANDARD_HEADER) + len(png.chunks[0].pack()) + 8
    corrupted = bytearray(png_bytes)
    # first byte of data of the second chunk
    corrupted[offset] ^= 0xff

    with pytest.raises(ChecksumException) as exc:
        Png.unpack(bytes(corrupted))

    assert exc.value.chain == ['crc', 'chunks[1]']
    assert exc.value.where() == 'chunks[1].crc'


def test_invalid_type_in_file():
    png = Png()
    png.append_chunk(new_chunk('ruSt', b'hello'))
    raw = bytearray(png.pack())
    raw[8 + 4 + 2] = ord('1')

    with pytest.raises(InvalidTypeException):
        Png.unpack(bytes(raw))


def test_failed_unpack_is_an_unpack_exception():
    with pytest.raises(UnpackException):
        Png.unpack(b'not a png at all')


def test_image_is_unchanged(png_bytes):
    """The chunks added must not change what the image shows."""
    png = Png.unpack(png_bytes)
    png.append_chunk(new_chunk('ruSt', b'hello'))

    original = Image.open(io.BytesIO(png_bytes))
    modified = Image.open(io.BytesIO(png.pack()))

    assert modified.size == original.size
    assert list(modified.getdata()) == list(original.getdata())


def test_str(png_bytes):
    lines = str(Png.unpack(png_bytes)).splitlines()

    assert lines[0].startswith('[00] 13, IHDR, ')
    assert lines[0].endswith('CRITICAL|PUBLIC')
    assert lines[-1].startswith(f'[{len(lines) - 1:02d}] 0, IEND, ')
