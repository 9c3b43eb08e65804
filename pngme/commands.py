'''
Each command loads a file, unpacks it, acts on the chunks and, when the
chunks changed, writes the file back atomically.
'''
import logging
from typing import Optional

from .args import DecodeArgs, EncodeArgs, PngMeArgs, PrintArgs, RemoveArgs
from .chunk import Chunk
from .chunk_type import ChunkType
from .exceptions import NotUtf8TextException
from .png import Png
from .streams import load_bytes, write_atomic


logger = logging.getLogger(__name__)


def load_png(path) -> Png:
    return Png.unpack(load_bytes(path))


def message_to_bytes(message: str) -> bytes:
    '''The bytes of argv that are not UTF-8 arrive as lone surrogates: they
    go back to the original bytes.'''
    try:
        return message.encode('utf-8', 'surrogateescape')
    except UnicodeEncodeError as e:
        raise NotUtf8TextException(f'message cannot be encoded as UTF-8: {e.reason}') from e


def encode(args: EncodeArgs) -> Chunk:
    png = load_png(args.path)
    chunk = Chunk(ChunkType.from_str(args.chunk_type), message_to_bytes(args.message))
    png.append_chunk(chunk)

    destination = args.output if args.output is not None else args.path
    logger.info(f'hiding {chunk.length} bytes in chunk {chunk.chunk_type} of \'{destination}\'')
    write_atomic(destination, png.pack())

    return chunk


def decode(args: DecodeArgs) -> Optional[str]:
    png = load_png(args.path)
    chunk = png.chunk_by_type(args.chunk_type)

    return chunk.data_as_string() if chunk is not None else None


def remove(args: RemoveArgs) -> Chunk:
    png = load_png(args.path)
    chunk = png.remove_chunk(args.chunk_type)

    logger.info(f'removed chunk {chunk.chunk_type} from \'{args.path}\'')
    write_atomic(args.path, png.pack())

    return chunk


def print_png(args: PrintArgs) -> str:
    return str(load_png(args.path))


def run(args: PngMeArgs) -> None:
    if isinstance(args, EncodeArgs):
        encode(args)
    elif isinstance(args, DecodeArgs):
        message = decode(args)
        print(f'Hidden message: {message}' if message is not None else 'No message found')
    elif isinstance(args, RemoveArgs):
        remove(args)
    elif isinstance(args, PrintArgs):
        print(print_png(args), end='')
    else:
        raise ValueError(f'\'{args.__class__.__name__}\' is not a command')
