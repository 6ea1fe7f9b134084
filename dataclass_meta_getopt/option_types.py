"""
Option types: how an option's raw string value becomes a result value.

Each option is declared with one of `Flag`, `Number`, `Text`, `Repeated` or `Custom`. When no
type is given, `infer_option_type` picks one from the option's default value.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .errors import InvalidOptionSpec, InvalidOptionValue


class OptionType:
    """
    Base of the option types.

    `takes_value` says whether the option consumes a value on the command line.
    """

    takes_value: bool = True

    def initial(self, default: Any) -> Any:
        """
        Value a result mapping is seeded with before any option is seen.
        """
        return default

    def coerce(self, raw: Optional[str], previous: Any) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Flag(OptionType):
    """Presence flag: takes no value, and is `True` once given."""

    takes_value = False

    def coerce(self, raw: Optional[str], previous: Any) -> Any:
        return True


@dataclass(frozen=True)
class Number(OptionType):
    """An `int`, or a `float` when the value is not an integer literal."""

    def coerce(self, raw: Optional[str], previous: Any) -> Any:
        try:
            return int(raw)  # type: ignore[arg-type]
        except ValueError:
            pass
        try:
            return float(raw)  # type: ignore[arg-type]
        except ValueError:
            raise InvalidOptionValue(f'invalid number: {raw!r}')


@dataclass(frozen=True)
class Text(OptionType):
    def coerce(self, raw: Optional[str], previous: Any) -> Any:
        return raw


@dataclass(frozen=True)
class Repeated(OptionType):
    """
    Repeatable option: every occurrence appends `item(raw)` to the result list.

    The declared default is copied, never appended to.
    """

    item: Callable[[str], Any] = str

    def initial(self, default: Any) -> Any:
        if isinstance(default, str):
            return [default]
        return list(default)

    def coerce(self, raw: Optional[str], previous: Any) -> Any:
        values: List[Any] = list(previous or ())
        values.append(_convert(self.item, raw))
        return values


@dataclass(frozen=True)
class Custom(OptionType):
    """The result is `convert(raw)`."""

    convert: Callable[[str], Any]

    def coerce(self, raw: Optional[str], previous: Any) -> Any:
        return _convert(self.convert, raw)


def _convert(convert: Callable[[str], Any], raw: Optional[str]) -> Any:
    try:
        return convert(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise InvalidOptionValue(f'invalid value {raw!r}: {error}') from error


def infer_option_type(default: Any) -> OptionType:
    """
    Pick an option type from a sample default value.

    >>> infer_option_type(None), infer_option_type(False), infer_option_type(0)
    (Flag(), Flag(), Number())
    >>> infer_option_type(''), infer_option_type([])
    (Text(), Repeated(item=<class 'str'>))
    >>> infer_option_type(int)
    Custom(convert=<class 'int'>)
    """
    if default is None or isinstance(default, bool):
        return Flag()
    if isinstance(default, (int, float)):
        return Number()
    if isinstance(default, str):
        return Text()
    if isinstance(default, (list, tuple)):
        return Repeated()
    if callable(default):
        return Custom(default)
    raise InvalidOptionSpec(f'cannot infer an option type from default {default!r}')
