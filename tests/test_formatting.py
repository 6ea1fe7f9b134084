from dataclass_meta_getopt.formatting import (
    HELP_WIDTH,
    LONG_PADDING,
    SHORT_WIDTH,
    format_default,
    format_help,
    format_option_table,
    format_usage,
    program_name,
)
from dataclass_meta_getopt.metadata import OptionSpec


def test_format_usage_substitutes_program_name() -> None:
    assert format_usage('usage: %name [options] FILE', 'tool') == 'usage: tool [options] FILE'


def test_program_name_is_base_name() -> None:
    assert program_name('/usr/local/bin/tool') == 'tool'


def test_format_default() -> None:
    assert format_default(None) == ''
    assert format_default(int) == ''
    assert format_default([]) == ''
    assert format_default(['a', 'b']) == 'a,b'
    assert format_default(3) == '3'
    assert format_default('') == ''


def test_option_table_truncates_descriptions() -> None:
    rows = format_option_table([
        OptionSpec('x', 'extra-long-name', 'value', 'word ' * 40),
        OptionSpec(None, 'y', None, 'short'),
    ])
    assert len(rows[0]) == HELP_WIDTH
    assert rows[0].endswith(' (value)')
    assert rows[0].startswith(' -x --extra-long-name    word')
    assert rows[1] == '    --y                  short'


def test_option_table_empty() -> None:
    assert format_option_table([]) == []


def test_format_help_without_description() -> None:
    text = format_help('usage: %name', 'tool', '', [OptionSpec('h', 'help', None, 'help')])
    assert text == 'usage: tool\n\n -h --help    help\n'


def test_long_column_fits_longest_flag_and_padding() -> None:
    rows = format_option_table([
        OptionSpec('v', 'verbose', None, 'talk'),
        OptionSpec('n', 'n', None, 'count'),
    ])
    description_column = SHORT_WIDTH + 1 + len('--verbose') + LONG_PADDING
    assert rows[0].index('talk') == description_column
    assert rows[1].index('count') == description_column
