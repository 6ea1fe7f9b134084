r'''
Run a function as a command line program.

The function's positional parameters receive the positional arguments and its keyword
parameters receive the parsed options.

>>> @command([OptionSpec('n', 'count', 1, 'times to copy')], prog='cp')
... def copy(src, dst, count=1):
...     """Copy SRC to DST."""
...     return f'{src} -> {dst} x{count}'
>>> copy.invoke(['-n', '2', 'a', 'b'])
'a -> b x2'
>>> copy.parser.usage
'usage: %name [options] SRC DST'
'''

import inspect
import sys
from logging import debug
from typing import IO, Any, Callable, Dict, Iterable, List, Optional, Tuple

from .config import ScanConfig
from .errors import GetoptError, HelpRequested, InvalidOptionSpec, PositionalCountError
from .metadata import OptionSpec
from .option_types import Flag
from .parser import OptionParser


_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
_KEYWORD_KINDS = (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)


class Command:
    """
    A function bound to an `OptionParser`.

    `usage` defaults to one built from the function's positional parameters and `description` to
    the first paragraph of its docstring.
    """

    def __init__(
        self,
        function: Callable[..., Any],
        options: Iterable[OptionSpec] = (),
        usage: Optional[str] = None,
        description: Optional[str] = None,
        prog: Optional[str] = None,
        gnu: bool = True,
        config: Optional[ScanConfig] = None,
    ) -> None:
        self.function = function
        self.signature = inspect.signature(function)
        self.gnu = gnu
        self.config = config

        options = list(options)
        self.option_keys = {spec.key for spec in options}
        params = [p for p in self.signature.parameters.values() if p.name not in self.option_keys]
        self.positional_params = [p for p in params if p.kind in _POSITIONAL_KINDS]
        self.min_args = sum(1 for p in self.positional_params if p.default is p.empty)
        self.max_args: Optional[int] = len(self.positional_params)
        if any(p.kind is p.VAR_POSITIONAL for p in params):
            self.max_args = None

        self.parser = OptionParser(
            options,
            usage=_default_usage(params) if usage is None else usage,
            description=_doc_summary(function) if description is None else description,
            prog=prog,
            config=config or ScanConfig(gnu=gnu),
        )
        self._check_options_bindable(list(self.signature.parameters.values()))

    def _check_options_bindable(self, params: List[inspect.Parameter]) -> None:
        if any(p.kind is p.VAR_KEYWORD for p in params):
            return
        keywords = {p.name for p in params if p.kind in _KEYWORD_KINDS}
        for spec in self.parser.options[1:]:
            if spec.key not in keywords:
                raise InvalidOptionSpec(
                    f'option --{spec.long} has no keyword parameter {spec.key!r} in {self.function.__name__}',
                    spec.long,
                )

    def accepts(self, count: int) -> bool:
        return count >= self.min_args and (self.max_args is None or count <= self.max_args)

    def invoke(self, args: List[str], file: Optional[IO[str]] = None) -> Any:
        """
        Parse `args` and call the function with the result.

        On a parse error, on `--help`, or on a wrong number of positional arguments, help is
        printed to `file` (stdout for `--help`, stderr otherwise) and the error is raised
        instead of calling the function. `args` itself is left untouched.
        """
        positionals = list(args)
        try:
            options = self.parser.parse(positionals)
        except GetoptError:
            self.parser.print_help(file=file or sys.stderr)
            raise

        if options.pop('help', False):
            self.parser.print_help(file=file or sys.stdout)
            raise HelpRequested('')

        if not self.accepts(len(positionals)):
            self.parser.print_help(file=file or sys.stderr)
            raise PositionalCountError(f'wrong number of arguments: {len(positionals)}')

        call_args, call_kwargs = self._call_arguments(positionals, options)
        debug(f'Calling {self.function.__name__} with {call_args!r} and {call_kwargs!r}')
        return self.function(*call_args, **call_kwargs)

    def _call_arguments(self, positionals: List[str], options: Dict[str, Any]) -> Tuple[List[Any], Dict[str, Any]]:
        """
        Lay out positional arguments and options by parameter name.

        Options that were neither given nor seeded are passed as `False` (flags) or `None` when
        their parameter has no default.
        """
        kwargs = dict(options)
        for spec in self.parser.options[1:]:
            param = self.signature.parameters.get(spec.key)
            if param is not None and param.default is param.empty:
                kwargs.setdefault(spec.key, False if isinstance(spec.type, Flag) else None)

        args: List[Any] = []
        remaining = list(positionals)
        for param in self.signature.parameters.values():
            if not remaining:
                break
            if param.kind is param.VAR_POSITIONAL:
                args.extend(remaining)
                remaining = []
            elif param.kind not in _POSITIONAL_KINDS:
                continue
            elif param.name in self.option_keys:
                args.append(kwargs.pop(param.name, param.default))
            else:
                args.append(remaining.pop(0))
        return args, kwargs

    def main(self, argv: Optional[List[str]] = None) -> Any:
        """
        Run as the program's entry point: exits the process when the command cannot run.
        """
        if argv is None:
            argv = sys.argv[1:]
        if self.config is None:
            self.parser.config = ScanConfig.from_environ(gnu=self.gnu)

        try:
            return self.invoke(argv)
        except GetoptError as error:
            if error.msg:
                print(f'{self.parser.prog}: {error}', file=sys.stderr)
            sys.exit(error.error_code)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.function(*args, **kwargs)


def command(options: Iterable[OptionSpec] = (), **kwargs: Any) -> Callable[[Callable[..., Any]], Command]:
    """
    Decorator turning a function into a `Command`. Keyword arguments are passed to `Command`.
    """

    def wrapper(function: Callable[..., Any]) -> Command:
        return Command(function, options, **kwargs)

    return wrapper


def _default_usage(params: List[inspect.Parameter]) -> str:
    words = ['usage: %name [options]']
    for p in params:
        if p.kind in _POSITIONAL_KINDS:
            words.append(p.name.upper() if p.default is p.empty else f'[{p.name.upper()}]')
        elif p.kind is p.VAR_POSITIONAL:
            words.append(f'[{p.name.upper()}...]')
    return ' '.join(words)


def _doc_summary(function: Callable[..., Any]) -> str:
    doc = inspect.getdoc(function) or ''
    return doc.split('\n\n', 1)[0].replace('\n', ' ')
