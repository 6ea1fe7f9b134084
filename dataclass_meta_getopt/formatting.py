"""
Rendering of help text: usage banner, description and the option table.

>>> print(format_help(
...     'usage: %name [options] FILE',
...     'demo',
...     'Count things.',
...     [OptionSpec('h', 'help', None, 'show this help message'), OptionSpec('n', 'count', 1, 'how many')],
... ), end='')
usage: demo [options] FILE
<BLANKLINE>
Count things.
<BLANKLINE>
 -h --help     show this help message
 -n --count    how many (1)
"""

import os
import sys
from typing import Any, List, Optional, Sequence

from .metadata import OptionSpec


HELP_WIDTH = 80
SHORT_WIDTH = 3
LONG_PADDING = 4


def program_name(argv0: Optional[str] = None) -> str:
    """Base file name of the running program."""
    return os.path.basename(sys.argv[0] if argv0 is None else argv0)


def format_usage(template: str, prog: str) -> str:
    return template.replace('%name', prog)


def format_default(default: Any) -> str:
    if default is None or callable(default):
        return ''
    if isinstance(default, (list, tuple)):
        return ','.join(map(str, default))
    return str(default)


def format_option_table(options: Sequence[OptionSpec], width: int = HELP_WIDTH) -> List[str]:
    """
    One row per option: short flag, long flag, description and default.

    Descriptions are cut short so that each row, default included, fits in `width` columns.
    """
    if not options:
        return []

    # the long column counts the flag's leading dashes
    long_width = max(len(spec.long) + 2 for spec in options) + LONG_PADDING
    rows = []
    for spec in options:
        short = '-' + spec.short if spec.short else ''
        prefix = f'{short:>{SHORT_WIDTH}} {"--" + spec.long:<{long_width}}'
        default = format_default(spec.default)
        suffix = f' ({default})' if default else ''
        budget = max(width - len(prefix) - len(suffix), 0)
        rows.append((prefix + spec.description[:budget] + suffix).rstrip())
    return rows


def format_help(usage: str, prog: str, description: str, options: Sequence[OptionSpec]) -> str:
    lines = [format_usage(usage, prog)]
    if description:
        lines += ['', description]
    rows = format_option_table(options)
    if rows:
        lines += [''] + rows
    return '\n'.join(lines) + '\n'
