import inspect
import sys
from dataclasses import Field, fields, is_dataclass
from functools import update_wrapper
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar

from .errors import GetoptError, HelpRequested, InvalidOptionSpec, PositionalCountError
from .metadata import ARGS, OptionSpec, field_option_spec
from .parser import OptionParser


T = TypeVar('T')


class DataclassMetaGetopt(type):
    """
    Metaclass of dataclasses populated from command line options.

    Keyword arguments given at class creation are passed on to the `OptionParser`.
    """

    def __new__(mcs, name: str, bases: Tuple[type, ...], namespace: Dict[str, Any], **_kwargs: Any):
        return super().__new__(mcs, name, bases, namespace)

    def __init__(cls, name: str, bases: Tuple[type, ...], namespace: Dict[str, Any], **kwargs: Any):
        cls._parser_kwargs = kwargs
        cls._option_parser = None
        super().__init__(name, bases, namespace)

    @property
    def option_parser(cls) -> OptionParser:
        if cls._option_parser is None:
            if not is_dataclass(cls):
                raise ValueError('dataclass_meta_getopt should only be used with dataclasses!')
            cls._option_parser = cls.init_option_parser(**cls._parser_kwargs)
        return cls._option_parser

    def init_option_parser(cls, **kwargs: Any) -> OptionParser:
        kwargs.setdefault('description', (inspect.getdoc(cls) or '').split('\n\n', 1)[0])
        parser = OptionParser(**kwargs)
        for field in fields(cls):  # type: ignore[arg-type]
            cls.init_field(parser, field)
        return parser

    def init_field(cls, parser: OptionParser, field: Field) -> Optional[OptionSpec]:
        spec = field_option_spec(field)
        if spec is None:
            return None
        return parser.add_option(spec)

    @property
    def args_field_name(cls) -> Optional[str]:
        names = [field.name for field in fields(cls) if field.metadata.get(ARGS)]  # type: ignore[arg-type]
        if len(names) > 1:
            raise InvalidOptionSpec(f'only one field may receive positional arguments, got {names}')
        return names[0] if names else None


class DataclassMetaGetoptPlugin(metaclass=DataclassMetaGetopt):
    """
    Base of the mix-ins added to dataclasses by `dataclass_meta_getopt`.

    Plugins extend `from_args` and `post_parse`, calling `super()`.
    """

    def __new__(cls, *a, **kw):
        if cls is DataclassMetaGetoptPlugin:
            raise ValueError(f'{cls.__name__}s should not be instantiated!')
        return super().__new__(cls)

    @classmethod
    def from_sys_args(cls):
        """
        Returns an instance of the wrapped dataclass from parsed system arguments.

        Prints the error and exits the process when the arguments cannot be parsed.
        """
        try:
            return cls.from_args(sys.argv[1:])
        except GetoptError as error:
            if error.msg:
                print(f'{cls.option_parser.prog}: {error}', file=sys.stderr)  # type: ignore[attr-defined]
            sys.exit(error.error_code)

    @classmethod
    def from_args(cls, argv: List[str]):
        """
        Returns an instance of the wrapped dataclass from the parsed arguments.

        Raises `HelpRequested` after printing help when `--help` is given. Parse errors and
        unexpected positional arguments print help to stderr before being raised.
        """
        parser: OptionParser = cls.option_parser  # type: ignore[attr-defined]
        args = list(argv)
        try:
            values = parser.parse(args)
        except GetoptError:
            parser.print_help(file=sys.stderr)
            raise

        if values.pop('help', False):
            parser.print_help()
            raise HelpRequested('')

        args_field_name = cls.args_field_name  # type: ignore[attr-defined]
        if args_field_name is not None:
            values[args_field_name] = args
        elif args:
            parser.print_help(file=sys.stderr)
            raise PositionalCountError(f'unexpected arguments: {args}')

        instance = cls(**values)
        instance.post_parse()
        return instance

    def post_parse(self) -> None:
        pass


def dataclass_meta_getopt(
    plugins: Tuple[Type[DataclassMetaGetoptPlugin], ...] = (),
    **kwargs: Any,
) -> Callable[[Type[T]], Type[T]]:
    """
    Wraps a `dataclass` definition to add convenience methods for populating from command line arguments.

    Keyword arguments are passed to the `OptionParser`.
    """

    def wrapper_generator(cls: Type[T]) -> Type[T]:
        if not is_dataclass(cls):
            raise ValueError(f'Class is not a dataclass: {cls}')

        wrapper = DataclassMetaGetopt(cls.__name__, (cls, *plugins, DataclassMetaGetoptPlugin), {}, **kwargs)

        update_wrapper(wrapper, cls, updated=[])  # type: ignore[arg-type]
        return wrapper  # type: ignore

    return wrapper_generator
