"""
# Hide messages into PNG files.

A PNG file is a fixed signature followed by a list of chunks, each one
with a type, some data and a CRC; decoders skip the ancillary chunks whose
type they don't know, so a message stored in a chunk with a made-up type
leaves the image as it is.

Three layers are defined, each one using the previous:

 1. ChunkType: the 4 letters identifying the kind of a chunk
 2. Chunk: type and data, packed with length and crc around them
 3. Png: the signature and the ordered list of chunks

Every layer has a pack() method producing the binary data and an unpack()
class method doing the inverse, so that for a successfully unpacked file

    Png.unpack(raw).pack() == raw

"""
from .chunk_type import ChunkType
from .chunk import Chunk
from .png import Png
