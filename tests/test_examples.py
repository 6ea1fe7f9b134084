import os
import runpy

import pytest

EXAMPLES = os.path.join(os.path.dirname(__file__), '..', 'examples')


def test_basic_cli(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    pytest.importorskip('trycast')
    monkeypatch.delenv('POSIXLY_CORRECT', raising=False)
    monkeypatch.setenv('BASIC_CLI_TIMES', '2')
    example = runpy.run_path(os.path.join(EXAMPLES, 'basic_cli.py'))

    example['main'](['a.txt', '-x', 'b.txt', 'b.txt', 'c.txt'])

    assert capsys.readouterr().out == 'a.txt\na.txt\nc.txt\nc.txt\n'
