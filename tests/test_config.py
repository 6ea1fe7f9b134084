import pytest

from dataclass_meta_getopt.config import ScanConfig
from dataclass_meta_getopt.scanner import ScanMode


def test_default_config_is_posix() -> None:
    assert ScanConfig().mode is ScanMode.POSIX
    assert ScanConfig(gnu=True).mode is ScanMode.GNU


def test_from_environ_reads_posixly_correct(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('POSIXLY_CORRECT', '1')
    assert ScanConfig.from_environ(gnu=True) == ScanConfig(gnu=True, posixly_correct=True)


def test_from_environ_without_posixly_correct(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('POSIXLY_CORRECT', raising=False)
    assert ScanConfig.from_environ(gnu=True) == ScanConfig(gnu=True)


def test_from_environ_explicit_mapping() -> None:
    assert ScanConfig.from_environ(environ={}).posixly_correct is False
    assert ScanConfig.from_environ(environ={'POSIXLY_CORRECT': ''}).posixly_correct is True
