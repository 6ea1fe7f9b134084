import pytest

from dataclass_meta_getopt.errors import (
    AmbiguousLongOption,
    MissingOptionArgument,
    UnexpectedOptionArgument,
    UnrecognizedOption,
)
from dataclass_meta_getopt.scanner import ScanMode, getopt, gnu_getopt, scan


@pytest.mark.parametrize('mode', list(ScanMode))
def test_empty_args(mode: ScanMode) -> None:
    args: list = []
    assert scan('a:b', ['abc=', 'def'], args, mode) == []
    assert args == []


def test_posix_stops_at_first_positional() -> None:
    args = ['-a', '1', '-b', 'arg1', 'arg2']
    assert getopt(args, 'a:b') == [('-a', '1'), ('-b', None)]
    assert args == ['arg1', 'arg2']


def test_posix_does_not_look_past_positional() -> None:
    args = ['arg1', '-b']
    assert getopt(args, 'b') == []
    assert args == ['arg1', '-b']


def test_posix_lone_dash_is_positional() -> None:
    args = ['-b', '-', '-b']
    assert getopt(args, 'b') == [('-b', None)]
    assert args == ['-', '-b']


def test_gnu_intermixes_options_and_positionals() -> None:
    args = ['-a1', 'arg1', 'arg2']
    assert gnu_getopt(args, 'a:') == [('-a', '1')]
    assert args == ['arg1', 'arg2']


def test_gnu_options_after_positionals() -> None:
    args = ['arg1', '-b', 'arg2', '--abc', 'x', '-', 'arg3']
    assert gnu_getopt(args, 'b', ['abc=']) == [('-b', None), ('--abc', 'x')]
    assert args == ['arg1', 'arg2', '-', 'arg3']


def test_gnu_positionals_go_after_terminated_args() -> None:
    args = ['arg1', '--', '-b', 'arg2']
    assert gnu_getopt(args, 'b') == []
    assert args == ['-b', 'arg2', 'arg1']


@pytest.mark.parametrize('mode', list(ScanMode))
def test_terminator(mode: ScanMode) -> None:
    args = ['--', '-a']
    assert scan('a', [], args, mode) == []
    assert args == ['-a']


def test_gnu_plus_prefix_is_posix() -> None:
    args = ['-b', 'arg1', '-b']
    assert gnu_getopt(args, '+b') == [('-b', None)]
    assert args == ['arg1', '-b']


def test_gnu_posixly_correct_is_posix() -> None:
    args = ['arg1', '-b']
    assert scan('b', [], args, ScanMode.GNU, posixly_correct=True) == []
    assert args == ['arg1', '-b']


def test_short_clustering() -> None:
    args = ['-bca', 'value', '-bavalue2']
    assert getopt(args, 'a:bc') == [
        ('-b', None),
        ('-c', None),
        ('-a', 'value'),
        ('-b', None),
        ('-a', 'value2'),
    ]
    assert args == []


def test_short_value_may_look_like_an_option() -> None:
    args = ['-a', '-b']
    assert getopt(args, 'a:b') == [('-a', '-b')]


def test_short_missing_argument() -> None:
    with pytest.raises(MissingOptionArgument, match='option -a requires argument') as info:
        getopt(['-a'], 'a:')
    assert info.value.opt == 'a'


def test_short_unrecognized() -> None:
    with pytest.raises(UnrecognizedOption, match='option -z not recognized'):
        getopt(['-z'], 'a:b')


def test_colon_is_not_an_option() -> None:
    with pytest.raises(UnrecognizedOption):
        getopt(['-:'], 'a:')


def test_long_inline_value_and_prefix() -> None:
    args = ['--abc=@x7', '--de', 'rest']
    assert getopt(args, '', ['abc=', 'def']) == [('--abc', '@x7'), ('--def', None)]
    assert args == ['rest']


def test_long_value_from_next_token() -> None:
    args = ['--abc', '@x7']
    assert getopt(args, '', ['abc=']) == [('--abc', '@x7')]
    assert args == []


def test_long_empty_inline_value() -> None:
    assert getopt(['--abc='], '', ['abc=']) == [('--abc', '')]


def test_long_spec_as_single_string() -> None:
    assert getopt(['--abc'], '', 'abc') == [('--abc', None)]


def test_long_ambiguous_prefix() -> None:
    with pytest.raises(AmbiguousLongOption, match='not a unique prefix'):
        getopt(['--ab'], '', ['abc', 'abd'])


def test_long_exact_match_wins_over_prefix() -> None:
    assert getopt(['--ab'], '', ['ab', 'abc']) == [('--ab', None)]
    assert getopt(['--ab', 'x'], '', ['ab=', 'abc']) == [('--ab', 'x')]


def test_long_unrecognized() -> None:
    with pytest.raises(UnrecognizedOption, match='option --xyz not recognized'):
        getopt(['--xyz'], '', ['abc'])


def test_long_missing_argument() -> None:
    with pytest.raises(MissingOptionArgument, match='option --abc requires argument'):
        getopt(['--abc'], '', ['abc='])


def test_long_unexpected_argument() -> None:
    with pytest.raises(UnexpectedOptionArgument, match='option --def must not have an argument'):
        getopt(['--def=1'], '', ['def'])


def test_repeated_flags_are_kept() -> None:
    assert gnu_getopt(['-b', 'x', '-b'], 'b') == [('-b', None), ('-b', None)]
