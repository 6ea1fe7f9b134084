"""
Errors raised while declaring options, scanning arguments or dispatching commands.

All of them derive from `GetoptError`, so callers that only want to "show help and abort" can
catch that one type.
"""


class GetoptError(ValueError):
    """
    Base class of every error raised by `dataclass_meta_getopt`.

    `msg` is the human readable message and `opt` the option it is about (without dashes), if any.
    `error_code` is the process exit status used by `Command.main`.
    """

    error_code = 1

    def __init__(self, msg: str, opt: str = '') -> None:
        super().__init__(msg)
        self.msg = msg
        self.opt = opt

    def __str__(self) -> str:
        return self.msg


class UnrecognizedOption(GetoptError):
    """A short or long option that was never declared."""


class AmbiguousLongOption(GetoptError):
    """A long option prefix that matches more than one declared long option."""


class MissingOptionArgument(GetoptError):
    """An option that requires a value was given none."""


class UnexpectedOptionArgument(GetoptError):
    """A long flag was given an inline `=value`."""


class InvalidOptionValue(GetoptError):
    """A raw option value could not be converted to the option's type."""


class InvalidOptionSpec(GetoptError):
    """An option declaration is malformed or conflicts with another one."""


class PositionalCountError(GetoptError):
    """A command was given the wrong number of positional arguments."""


class HelpRequested(GetoptError):
    """`-h` / `--help` was given; help has been printed."""

    error_code = 0
