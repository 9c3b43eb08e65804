class PngMeException(Exception):
    '''Base class to extend in order to throw exception in pngme.

    It takes an optional message and the chain of the layers that
    caused the exception: each layer the exception passes through
    appends its own location, so the outermost element is the last one.
    '''
    description = 'Error: other'

    def __init__(self, msg=None, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(msg or self.description)

    def where(self):
        return '.'.join(reversed(self.chain))


class ConstructionException(PngMeException):
    description = 'Invalid chunk type'


class NonAlphabeticByteException(ConstructionException):
    pass


class WrongLengthException(ConstructionException):
    pass


class UnpackException(PngMeException):
    description = 'The input file is not a valid PNG file'


class MagicException(UnpackException):
    pass


class TruncatedException(UnpackException):
    pass


class LengthMismatchException(UnpackException):
    pass


class InvalidTypeException(UnpackException):
    pass


class ChecksumException(UnpackException):
    pass


class ChunkNotFoundException(PngMeException):
    description = 'Chunk not found'


class NotUtf8TextException(PngMeException):
    description = 'The chunk data is not valid UTF-8 text'


class FileException(PngMeException):
    description = 'Error opening file'


class ArgsException(PngMeException):
    description = 'Syntax Error'


class NoCommandException(ArgsException):
    description = 'You did not provide a command.'


class InvalidCommandException(ArgsException):
    pass


class NotEnoughArgsException(ArgsException):
    pass


class TooManyArgsException(ArgsException):
    pass
