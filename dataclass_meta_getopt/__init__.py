r"""
getopt-style command line parsing: POSIX and GNU scanners, typed option parsers, and
front ends that feed the parsed options to a function or a dataclass.

To use:

 1. Scan raw arguments with `getopt` or `gnu_getopt`, which work like their C namesakes and
    remove what they consume from the list they are given.

 2. Or declare `OptionSpec`s (short name, long name, default, description) and `parse` them
    into a dict of typed values. The option type (`Flag`, `Number`, `Text`, `Repeated`,
    `Custom`) is inferred from the default unless given explicitly.

 3. Or decorate a function with `command` to run it with the parsed options and positional
    arguments, or a dataclass with `dataclass_meta_getopt` to populate it from fields declared
    with `option_field` and `args_field`.

Example:

>>> from dataclasses import dataclass
>>> from typing import List
>>> @dataclass_meta_getopt(prog='my-cli', usage='usage: %name [options] FILE...')
... @dataclass
... class MyCliArgs:
...   'My CLI app that does a thing'
...   my_arg: int = option_field('m', 'myarg', 5, 'my integer argument')
...   verbose: bool = option_field('v', 'verbose', False, 'talk more')
...   remainder: List[str] = args_field()
>>> MyCliArgs.from_args(['--myarg', '7', 'foo', '-v', 'bar'])
MyCliArgs(my_arg=7, verbose=False, remainder=['foo', '-v', 'bar'])
>>> MyCliArgs.option_parser.print_help()
usage: my-cli [options] FILE...
<BLANKLINE>
My CLI app that does a thing
<BLANKLINE>
 -h --help       show this help message and exit
 -m --myarg      my integer argument (5)
 -v --verbose    talk more (False)
"""

from .command import Command, command
from .config import ScanConfig
from .decorator import DataclassMetaGetoptPlugin, dataclass_meta_getopt
from .errors import (
    AmbiguousLongOption,
    GetoptError,
    HelpRequested,
    InvalidOptionSpec,
    InvalidOptionValue,
    MissingOptionArgument,
    PositionalCountError,
    UnexpectedOptionArgument,
    UnrecognizedOption,
)
from .metadata import ARGS, OPT, OptionSpec, args_field, option_field
from .option_types import Custom, Flag, Number, OptionType, Repeated, Text
from .parser import OptionParser, parse
from .scanner import ScanMode, getopt, gnu_getopt, scan

__all__ = [
  'getopt',
  'gnu_getopt',
  'scan',
  'ScanMode',
  'ScanConfig',
  'OptionSpec',
  'OptionType',
  'Flag',
  'Number',
  'Text',
  'Repeated',
  'Custom',
  'OptionParser',
  'parse',
  'Command',
  'command',
  'dataclass_meta_getopt',
  'DataclassMetaGetoptPlugin',
  'OPT',
  'ARGS',
  'option_field',
  'args_field',
  'GetoptError',
  'UnrecognizedOption',
  'AmbiguousLongOption',
  'MissingOptionArgument',
  'UnexpectedOptionArgument',
  'InvalidOptionValue',
  'InvalidOptionSpec',
  'PositionalCountError',
  'HelpRequested',
]
