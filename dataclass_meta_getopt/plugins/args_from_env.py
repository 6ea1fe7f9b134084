import os
from logging import debug
from typing import Callable, ClassVar, Dict, List, Mapping, Optional

from ..decorator import DataclassMetaGetoptPlugin
from ..errors import UnrecognizedOption
from ..metadata import OptionSpec
from ..str_utils import default_envize_string


class ArgsFromEnv(DataclassMetaGetoptPlugin):
    """
    Takes options from environment variables named `<PREFIX>_<OPTION>`, e.g. `MY_CLI_DRY_RUN=1`.

    The prefix is `env_prefix`, or the program name run through `envize_str_fn`. Options given
    on the command line win over the environment.
    """

    env_prefix: ClassVar[Optional[str]] = None
    envize_str_fn: ClassVar[Callable[[str], str]] = default_envize_string

    @classmethod
    def from_args(cls, argv: List[str]):
        return super().from_args(cls.args_from_env() + list(argv))

    @classmethod
    def args_from_env(cls, env: Optional[Mapping[str, str]] = None) -> List[str]:
        if env is None:
            env = os.environ
        parser = cls.option_parser  # type: ignore[attr-defined]
        prefix: str = cls.env_prefix or cls.envize_str_fn(parser.prog)

        envized_opts: Dict[str, OptionSpec] = {
            cls.envize_str_fn(spec.long): spec for spec in parser.options
        }

        extra_args: List[str] = []
        for envvar, envvar_val in env.items():
            if not envvar.startswith(prefix + '_') or not envvar_val:
                continue

            envized_opt = envvar[len(prefix) + 1 :]
            if envized_opt not in envized_opts:
                raise UnrecognizedOption(
                    f'Envvar {envvar}: Unrecognized option {envized_opt!r}. Must be one of {sorted(envized_opts)}.',
                    envized_opt,
                )

            spec = envized_opts[envized_opt]
            extra_arg = ['--' + spec.long] + ([envvar_val] if spec.takes_value else [])
            extra_args = extra_arg + extra_args  # prepend

            debug(f'Extra arg from env var {envvar}: {extra_arg}')

        return extra_args
