r'''
getopt-style scanning of command line arguments.

Both scanners consume options from the front of a caller-owned `list` *in place* and return the
options they found as `(flag, value)` pairs. Whatever is left in the list afterwards are the
positional arguments. GNU scanning moves the positional arguments it skipped over behind
anything that followed `--`.

>>> args = ['-a', '1', '-b', 'arg1', 'arg2']
>>> getopt(args, 'a:b')
[('-a', '1'), ('-b', None)]
>>> args
['arg1', 'arg2']

>>> args = ['arg1', '-a1', '--', '-b']
>>> gnu_getopt(args, 'a:b')
[('-a', '1')]
>>> args
['-b', 'arg1']
'''

import enum
from logging import debug
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .errors import AmbiguousLongOption, MissingOptionArgument, UnexpectedOptionArgument, UnrecognizedOption


ParsedPair = Tuple[str, Optional[str]]
LongOpts = Union[str, Iterable[str]]


class ScanMode(enum.Enum):
    POSIX = 'posix'
    GNU = 'gnu'


def scan(
    shortopts: str,
    longopts: LongOpts,
    args: List[str],
    mode: ScanMode = ScanMode.POSIX,
    posixly_correct: bool = False,
) -> List[ParsedPair]:
    """
    Scan `args` in place with either algorithm and return the parsed `(flag, value)` pairs.
    """
    if mode is ScanMode.GNU:
        return gnu_getopt(args, shortopts, longopts, posixly_correct=posixly_correct)
    return getopt(args, shortopts, longopts)


def getopt(args: List[str], shortopts: str, longopts: LongOpts = ()) -> List[ParsedPair]:
    """
    POSIX scanning: stop at `--` (which is consumed) or at the first positional argument.

    A lone `-` counts as a positional argument.
    """
    long_names = _long_names(longopts)
    opts: List[ParsedPair] = []

    while args and args[0].startswith('-') and args[0] != '-':
        if args[0] == '--':
            del args[0]
            break
        token = args.pop(0)
        if token.startswith('--'):
            opts.append(_do_long(token[2:], long_names, args))
        else:
            opts.extend(_do_shorts(token[1:], shortopts, args))

    return opts


def gnu_getopt(
    args: List[str],
    shortopts: str,
    longopts: LongOpts = (),
    posixly_correct: bool = False,
) -> List[ParsedPair]:
    """
    GNU scanning: options and positional arguments may be intermixed.

    Scanning goes on past positional arguments until `--` or the end of `args`. Positional
    arguments are appended back to `args`, after anything that followed `--`.

    A `shortopts` starting with `+`, or `posixly_correct`, selects POSIX scanning instead.

    >>> args = ['-a', '+x', 'arg1', '-b']
    >>> gnu_getopt(args, '+a:b')
    [('-a', '+x')]
    >>> args
    ['arg1', '-b']
    """
    if shortopts.startswith('+'):
        shortopts = shortopts[1:]
        posixly_correct = True
    if posixly_correct:
        return getopt(args, shortopts, longopts)

    long_names = _long_names(longopts)
    opts: List[ParsedPair] = []
    positionals: List[str] = []

    while args:
        if args[0] == '--':
            del args[0]
            break
        token = args.pop(0)
        if token.startswith('--'):
            opts.append(_do_long(token[2:], long_names, args))
        elif token.startswith('-') and token != '-':
            opts.extend(_do_shorts(token[1:], shortopts, args))
        else:
            positionals.append(token)

    args.extend(positionals)
    return opts


def _long_names(longopts: LongOpts) -> List[str]:
    if isinstance(longopts, str):
        return [longopts]
    return list(longopts)


def _do_long(token: str, long_names: Sequence[str], args: List[str]) -> ParsedPair:
    name, sep, inline = token.partition('=')
    optarg = inline if sep else None

    has_arg, name = _long_has_args(name, long_names)
    if has_arg:
        if optarg is None:
            if not args:
                raise MissingOptionArgument(f'option --{name} requires argument', name)
            optarg = args.pop(0)
    elif optarg is not None:
        raise UnexpectedOptionArgument(f'option --{name} must not have an argument', name)

    debug(f'Scanned long option --{name}: {optarg!r}')
    return '--' + name, optarg


def _long_has_args(name: str, long_names: Sequence[str]) -> Tuple[bool, str]:
    """
    Resolve `name` to a declared long option: exact match first, then unique prefix.

    Returns whether the option takes a value, and its full name.
    """
    possibilities = [o for o in long_names if o.startswith(name)]
    if not possibilities:
        raise UnrecognizedOption(f'option --{name} not recognized', name)

    if name in possibilities:
        return False, name
    if name + '=' in possibilities:
        return True, name

    if len(possibilities) > 1:
        raise AmbiguousLongOption(f'option --{name} not a unique prefix', name)

    unique_match = possibilities[0]
    if unique_match.endswith('='):
        return True, unique_match[:-1]
    return False, unique_match


def _do_shorts(cluster: str, shortopts: str, args: List[str]) -> List[ParsedPair]:
    opts: List[ParsedPair] = []

    while cluster:
        opt, cluster = cluster[0], cluster[1:]
        if _short_has_arg(opt, shortopts):
            if not cluster:
                if not args:
                    raise MissingOptionArgument(f'option -{opt} requires argument', opt)
                cluster = args.pop(0)
            opts.append(('-' + opt, cluster))
            debug(f'Scanned short option -{opt}: {cluster!r}')
            cluster = ''
        else:
            opts.append(('-' + opt, None))
            debug(f'Scanned short option -{opt}')

    return opts


def _short_has_arg(opt: str, shortopts: str) -> bool:
    for i, char in enumerate(shortopts):
        if opt == char != ':':
            return shortopts.startswith(':', i + 1)
    raise UnrecognizedOption(f'option -{opt} not recognized', opt)
