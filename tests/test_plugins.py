from dataclasses import dataclass
from typing import List, Optional

import pytest

from dataclass_meta_getopt.decorator import dataclass_meta_getopt
from dataclass_meta_getopt.errors import InvalidOptionValue, UnrecognizedOption
from dataclass_meta_getopt.metadata import args_field, option_field
from dataclass_meta_getopt.option_types import Custom
from dataclass_meta_getopt.plugins.args_from_env import ArgsFromEnv
from dataclass_meta_getopt.plugins.type_validation import ValidateTypes


@dataclass_meta_getopt(plugins=(ArgsFromEnv,), prog='my-cli')
@dataclass
class EnvArgs:
    dry_run: bool = option_field('n', 'dry-run', False, 'do nothing')
    output: str = option_field('o', 'output', '-', 'where to write')
    files: List[str] = args_field()


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ('MY_CLI_DRY_RUN', 'MY_CLI_OUTPUT', 'MY_CLI_COLOR'):
        monkeypatch.delenv(name, raising=False)


def test_args_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv('MY_CLI_DRY_RUN', '1')
    monkeypatch.setenv('MY_CLI_OUTPUT', 'env.txt')
    assert EnvArgs.from_args(['a']) == EnvArgs(dry_run=True, output='env.txt', files=['a'])


def test_command_line_wins_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv('MY_CLI_OUTPUT', 'env.txt')
    assert EnvArgs.from_args(['-o', 'cli.txt']).output == 'cli.txt'


def test_empty_env_values_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv('MY_CLI_DRY_RUN', '')
    assert EnvArgs.from_args([]).dry_run is False


def test_unknown_env_option(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv('MY_CLI_COLOR', 'red')
    with pytest.raises(UnrecognizedOption, match='MY_CLI_COLOR'):
        EnvArgs.from_args([])


def test_args_from_explicit_env() -> None:
    env = {'MY_CLI_OUTPUT': 'x', 'OTHER': 'y'}
    assert EnvArgs.args_from_env(env) == ['--output', 'x']


def test_env_prefix_override() -> None:
    @dataclass_meta_getopt(plugins=(ArgsFromEnv,), prog='ignored')
    @dataclass
    class Prefixed(ArgsFromEnv):
        env_prefix = 'APP'
        level: int = option_field('l', 'level', 0)

    assert Prefixed.args_from_env({'APP_LEVEL': '3'}) == ['--level', '3']


@dataclass_meta_getopt(plugins=(ValidateTypes,), prog='typed')
@dataclass
class TypedArgs:
    count: int = option_field('c', 'count', 0, 'a count')
    name: Optional[str] = option_field(None, 'name', None, 'a name', Custom(lambda s: s.split(',')))


def test_validate_types_accepts_matching_values() -> None:
    pytest.importorskip('trycast')
    assert TypedArgs.from_args(['-c', '3']).count == 3


def test_validate_types_rejects_mismatch() -> None:
    pytest.importorskip('trycast')
    with pytest.raises(InvalidOptionValue, match='name'):
        TypedArgs.from_args(['--name', 'a,b'])
