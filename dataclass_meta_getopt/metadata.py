from dataclasses import Field, dataclass, field, replace
from typing import Any, Callable, Optional

from .errors import InvalidOptionSpec
from .option_types import OptionType, Repeated, infer_option_type
from .str_utils import canonical_key


@dataclass(frozen=True)
class OptionSpec:
    """
    Declaration of one command line option, detached from any specific `OptionParser` instance.

    `short` is a single character and `long` a non-empty name, both given without dashes.
    When `type` is omitted it is inferred from `default`.

    >>> OptionSpec('n', 'dry-run', False, 'only print what would be done')
    OptionSpec(short='n', long='dry-run', default=False, description='only print what would be done', type=Flag(), dest=None)
    >>> OptionSpec('n', 'dry-run').key
    'dry_run'
    >>> OptionSpec('nope', 'dry-run')
    Traceback (most recent call last):
      ...
    dataclass_meta_getopt.errors.InvalidOptionSpec: short option 'nope' must be a single character
    """

    short: Optional[str] = None
    long: str = ''
    default: Any = None
    description: str = ''
    type: Optional[OptionType] = None
    dest: Optional[str] = None

    def __post_init__(self):
        if self.short is not None and (len(self.short) != 1 or self.short in '-:'):
            raise InvalidOptionSpec(f'short option {self.short!r} must be a single character', self.short)
        if not self.long:
            raise InvalidOptionSpec(f'option -{self.short} must have a long name', self.short or '')
        if self.long.startswith('-') or '=' in self.long:
            raise InvalidOptionSpec(f'invalid long option name {self.long!r}', self.long)
        if self.type is None:
            object.__setattr__(self, 'type', infer_option_type(self.default))

    @property
    def key(self) -> str:
        """Key of this option in a parsed result mapping."""
        return self.dest or canonical_key(self.long)

    @property
    def takes_value(self) -> bool:
        return self.type.takes_value  # type: ignore[union-attr]

    @property
    def seeds_default(self) -> bool:
        """Whether the result mapping starts out holding this option's default."""
        return self.default is not None and not callable(self.default)

    @property
    def flags(self) -> tuple:
        return tuple(f for f in (self.short and '-' + self.short, '--' + self.long) if f)


class _MetadataKey:
    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name


OPT = _MetadataKey('OPT')
OPT.__doc__ = """
  Sentinel object for use as a dataclass field `metadata` key, mapping to an `OptionSpec`.

  `option_field` fills it in for you.
"""

ARGS = _MetadataKey('ARGS')
ARGS.__doc__ = """
  Sentinel dataclass field `metadata` key marking the field that receives the remaining
  positional arguments. See `args_field`.
"""


def option_field(
    short: Optional[str] = None,
    long: str = '',
    default: Any = None,
    description: str = '',
    type: Optional[OptionType] = None,
    **kwargs: Any,
) -> Any:
    """
    A dataclass `field` carrying an `OptionSpec` under the `OPT` metadata key.

    The field's default is the option's default. List defaults become a `default_factory` so
    instances never share them.

    Extra keyword arguments are passed through to `dataclasses.field`.
    """
    spec = OptionSpec(short, long, default, description, type)
    metadata = {**kwargs.pop('metadata', {}), OPT: spec}

    if isinstance(spec.type, Repeated):
        return field(default_factory=_copier(spec.type.initial(default or ())), metadata=metadata, **kwargs)
    if callable(default):
        return field(default=None, metadata=metadata, **kwargs)
    return field(default=default, metadata=metadata, **kwargs)


def args_field(**kwargs: Any) -> Any:
    """A dataclass `field` that receives the positional arguments left over after parsing."""
    metadata = {**kwargs.pop('metadata', {}), ARGS: True}
    return field(default_factory=list, metadata=metadata, **kwargs)


def field_option_spec(f: Field) -> Optional[OptionSpec]:
    """The `OptionSpec` declared on dataclass field `f`, with its result key set to the field name."""
    spec = f.metadata.get(OPT)
    if spec is None:
        return None
    return replace(spec, dest=f.name)


def _copier(items) -> Callable[[], list]:
    return lambda: list(items)
