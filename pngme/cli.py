'''
Hide and retrieve messages in the chunks of a PNG file.

 $ pngme encode image.png ruSt 'hello' [output.png]
 $ pngme decode image.png ruSt
 $ pngme remove image.png ruSt
 $ pngme print image.png

Set DEBUG in the environment to have the debug logging.
'''
import logging
import os
import sys

from .args import COMMANDS, parse_args
from .commands import run
from .exceptions import ArgsException, PngMeException


logger = logging.getLogger(__name__)


def usage(progname):
    commands = '\n'.join(f'  {progname} {_.usage()}' for _ in COMMANDS.values())
    return f'usage:\n{commands}'


def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    progname = os.path.basename(argv[0]) if argv else 'pngme'

    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.WARNING)

    try:
        run(parse_args(argv[1:]))
    except ArgsException as e:
        print(f'{e}\n{usage(progname)}', file=sys.stderr)
        return 1
    except PngMeException as e:
        logger.debug('failed at %s' % e.where(), exc_info=True)
        print(f'{e.description}: {e}', file=sys.stderr)
        return 1

    return 0
