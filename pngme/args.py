'''
Parsing of the command line: the first argument is the command, the
others are its positional operands.
'''
from typing import List, Union

from .exceptions import (
    InvalidCommandException,
    NoCommandException,
    NotEnoughArgsException,
    TooManyArgsException,
)


class CommandArgs(object):
    name = None
    # names of the operands, the ones in optional can be omitted
    operands: List[str] = []
    optional: List[str] = []

    def __init__(self, *values):
        names = self.operands + self.optional
        for idx, name in enumerate(names):
            setattr(self, name, values[idx] if idx < len(values) else None)

    @classmethod
    def from_operands(cls, operands: List[str]) -> 'CommandArgs':
        n_min = len(cls.operands)
        n_max = n_min + len(cls.optional)
        if len(operands) < n_min:
            raise NotEnoughArgsException(
                f'You only provided {len(operands)} arguments to {cls.name}, which is not enough.')
        if len(operands) > n_max:
            raise TooManyArgsException(
                f'You provided {len(operands)} arguments to {cls.name}, which is too many.')

        return cls(*operands)

    @classmethod
    def usage(cls) -> str:
        return ' '.join([cls.name] + [f'<{_}>' for _ in cls.operands] + [f'[{_}]' for _ in cls.optional])

    def __repr__(self):
        values = ', '.join(f'{_}={getattr(self, _)!r}' for _ in self.operands + self.optional)
        return f'<{self.__class__.__name__}({values})>'


class EncodeArgs(CommandArgs):
    name = 'encode'
    operands = ['path', 'chunk_type', 'message']
    optional = ['output']


class DecodeArgs(CommandArgs):
    name = 'decode'
    operands = ['path', 'chunk_type']


class RemoveArgs(CommandArgs):
    name = 'remove'
    operands = ['path', 'chunk_type']


class PrintArgs(CommandArgs):
    name = 'print'
    operands = ['path']


COMMANDS = {_.name: _ for _ in (EncodeArgs, DecodeArgs, RemoveArgs, PrintArgs)}

PngMeArgs = Union[EncodeArgs, DecodeArgs, RemoveArgs, PrintArgs]


def parse_args(argv: List[str]) -> PngMeArgs:
    '''The argv doesn't contain the program name.'''
    if not argv:
        raise NoCommandException()

    command = argv[0].lower()
    cls = COMMANDS.get(command)
    if cls is None:
        raise InvalidCommandException(f'{command} is not a valid command.')

    return cls.from_operands(argv[1:])
