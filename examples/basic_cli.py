from dataclasses import dataclass
from typing import List

from dataclass_meta_getopt import ScanConfig, args_field, dataclass_meta_getopt, option_field
from dataclass_meta_getopt.plugins.args_from_env import ArgsFromEnv
from dataclass_meta_getopt.plugins.type_validation import ValidateTypes


@dataclass_meta_getopt(
  plugins=(ArgsFromEnv, ValidateTypes),
  prog='basic-cli',
  usage='usage: %name [options] FILE...',
  config=ScanConfig.from_environ(gnu=True),
)
@dataclass
class BasicCli:
  'Print the files it was given.'
  verbose: bool = option_field('v', 'verbose', False, 'print the parsed options too')
  times: int = option_field('n', 'times', 1, 'how many times to print each file')
  exclude: List[str] = option_field('x', 'exclude', [], 'file to leave out, repeatable')
  files: List[str] = args_field()


def main(argv: List[str]) -> None:
  cli = BasicCli.from_args(argv)
  if cli.verbose:
    print(cli)
  for name in cli.files:
    if name not in cli.exclude:
      print('\n'.join([name] * cli.times))


if __name__ == '__main__':
  import sys

  main(sys.argv[1:])
