import io
from pathlib import Path

import pytest
from PIL import Image

from pngme import Chunk, ChunkType


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def png_bytes():
    """A real 5x10 image: red on top, green at the bottom."""
    image = Image.new('RGB', (5, 10), 'red')
    image.paste(Image.new('RGB', (5, 5), 'green'), (0, 5))

    output = io.BytesIO()
    image.save(output, format='PNG')

    return output.getvalue()


@pytest.fixture
def png_path(tmp_path, png_bytes):
    path = tmp_path / 'image.png'
    path.write_bytes(png_bytes)

    return path


@pytest.fixture
def message_chunk():
    return Chunk(
        ChunkType.from_str('RuSt'),
        b'This is where your secret message will be!',
    )
