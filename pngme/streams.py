import io
import logging
import os
import shutil
import tempfile

from .exceptions import FileException, TruncatedException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around an in-memory buffer: the unpacking
    reads records one after the other and needs to know when the data
    ends before the record does.'''
    def __init__(self, obj: bytes):
        self._size = len(obj)
        self.obj = io.BytesIO(obj)

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def remaining(self) -> int:
        return self._size - self.obj.tell()

    def read_exactly(self, n: int) -> bytes:
        offset = self.obj.tell()
        data = self.obj.read(n)
        if len(data) != n:
            raise TruncatedException(f'wanted {n} bytes at offset {offset}, only {len(data)} available')

        return data

    def peek(self, n: int) -> bytes:
        offset = self.obj.tell()
        data = self.read_exactly(n)
        self.obj.seek(offset)

        return data


def load_bytes(path) -> bytes:
    '''Read the whole content of the file at path.'''
    logger.debug('opening path \'%s\'' % path)
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise FileException(f'cannot read \'{path}\': {e.strerror}') from e


def write_atomic(path, data: bytes) -> None:
    '''Replace the content of the file at path so that a reader never
    observes a partial write: the data goes to a temporary file in the
    same directory that is then renamed over the destination.'''
    path = os.fspath(path)
    directory = os.path.dirname(os.path.abspath(path))

    logger.debug('writing %d bytes to \'%s\'' % (len(data), path))
    try:
        fd, tmp_path = tempfile.mkstemp(prefix='.%s.' % os.path.basename(path), suffix='.tmp', dir=directory)
    except OSError as e:
        raise FileException(f'cannot write \'{path}\': {e.strerror}') from e

    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        if os.path.exists(path):
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException as e:
        os.unlink(tmp_path)
        if isinstance(e, OSError):
            raise FileException(f'cannot write \'{path}\': {e.strerror}') from e
        raise

    try:
        _fsync_directory(directory)
    except OSError as e:
        raise FileException(f'cannot sync directory of \'{path}\': {e.strerror}') from e


def _fsync_directory(directory) -> None:
    '''The rename is durable only after the directory entry is on disk.'''
    if os.name != 'posix':
        return

    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)
