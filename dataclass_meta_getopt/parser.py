r'''
Declarative option parsing on top of the getopt scanners.

An `OptionParser` holds `OptionSpec`s, derives the scanner's short and long option specs from
them and turns the scanned `(flag, value)` pairs into a dict of typed values.

>>> parser = OptionParser([
...     OptionSpec('v', 'verbose', False, 'talk more'),
...     OptionSpec('n', 'count', 1, 'number of runs'),
...     OptionSpec('I', 'include', [], 'include directory'),
... ])
>>> parser.shortopts, parser.longopts
('hvn:I:', ['help', 'verbose', 'count=', 'include='])
>>> args = ['-v', '--count=3', '-I', 'a', '-Ib', 'file']
>>> parser.parse(args)
{'verbose': True, 'count': 3, 'include': ['a', 'b']}
>>> args
['file']
'''

from logging import debug
from typing import IO, Any, Dict, Iterable, List, Optional

from .config import ScanConfig
from .errors import InvalidOptionSpec, InvalidOptionValue
from .formatting import format_help, program_name
from .metadata import OptionSpec
from .scanner import ParsedPair, ScanMode, scan


DEFAULT_USAGE = 'usage: %name [options]'
HELP_OPTION = OptionSpec('h', 'help', None, 'show this help message and exit')


class OptionParser:
    """
    Parser for a set of options. `-h` / `--help` is always declared.

    `usage` is a template in which `%name` stands for the program name, `prog`, which defaults to
    the base name of `sys.argv[0]`.
    """

    def __init__(
        self,
        options: Iterable[OptionSpec] = (),
        usage: str = DEFAULT_USAGE,
        description: str = '',
        prog: Optional[str] = None,
        config: ScanConfig = ScanConfig(),
    ) -> None:
        self.usage = usage
        self.description = description
        self.prog = prog or program_name()
        self.config = config
        self.options: List[OptionSpec] = []
        self._options_by_flag: Dict[str, OptionSpec] = {}

        self.add_option(HELP_OPTION)
        for spec in options:
            self.add_option(spec)

    def add_option(self, spec: OptionSpec) -> OptionSpec:
        for flag in spec.flags:
            if flag in self._options_by_flag:
                raise InvalidOptionSpec(f'conflicting option string {flag}', flag.lstrip('-'))
        if any(option.key == spec.key for option in self.options):
            raise InvalidOptionSpec(f'conflicting result key {spec.key!r}', spec.long)

        self.options.append(spec)
        for flag in spec.flags:
            self._options_by_flag[flag] = spec
        return spec

    @property
    def shortopts(self) -> str:
        return ''.join(
            spec.short + (':' if spec.takes_value else '')
            for spec in self.options
            if spec.short
        )

    @property
    def longopts(self) -> List[str]:
        return [spec.long + ('=' if spec.takes_value else '') for spec in self.options]

    def defaults(self) -> Dict[str, Any]:
        return {
            spec.key: spec.type.initial(spec.default)  # type: ignore[union-attr]
            for spec in self.options
            if spec.seeds_default
        }

    def scan(self, args: List[str], gnu: Optional[bool] = None) -> List[ParsedPair]:
        """
        Scan options off the front of `args`, in place, and return them as `(flag, value)` pairs.
        """
        mode = self.config.mode if gnu is None else (ScanMode.GNU if gnu else ScanMode.POSIX)
        return scan(self.shortopts, self.longopts, args, mode, posixly_correct=self.config.posixly_correct)

    def parse(self, args: List[str], gnu: Optional[bool] = None) -> Dict[str, Any]:
        """
        Parse options off `args`, in place, into a dict keyed by each option's `key`.

        The dict starts out with the options' defaults. Later occurrences of an option replace
        earlier ones, except for repeated options whose values accumulate.
        """
        results = self.defaults()

        for flag, raw in self.scan(args, gnu):
            spec = self._options_by_flag[flag]
            try:
                results[spec.key] = spec.type.coerce(raw, results.get(spec.key))  # type: ignore[union-attr]
            except InvalidOptionValue as error:
                raise InvalidOptionValue(f'option {flag}: {error.msg}', spec.long) from error
            debug(f'Parsed option {flag} into {spec.key}={results[spec.key]!r}')

        return results

    def format_help(self) -> str:
        return format_help(self.usage, self.prog, self.description, self.options)

    def print_help(self, file: Optional[IO[str]] = None) -> None:
        print(self.format_help(), end='', file=file)


def parse(options: Iterable[OptionSpec], args: List[str], gnu: bool = False) -> Dict[str, Any]:
    """
    Parse `args` in place against `options` and return the typed results.

    >>> args = ['-a1', 'arg1', '--de', 'arg2']
    >>> parse([OptionSpec('a', 'abc', 0), OptionSpec(None, 'def', False)], args, gnu=True)
    {'abc': 1, 'def': True}
    >>> args
    ['arg1', 'arg2']
    """
    return OptionParser(options).parse(args, gnu=gnu)
