import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .scanner import ScanMode


POSIXLY_CORRECT = 'POSIXLY_CORRECT'


@dataclass(frozen=True)
class ScanConfig:
    """
    How an `OptionParser` scans its arguments.

    `gnu` selects intermixed options and positional arguments. `posixly_correct` forces GNU
    scanning back to stopping at the first positional argument.
    """

    gnu: bool = False
    posixly_correct: bool = False

    @property
    def mode(self) -> ScanMode:
        return ScanMode.GNU if self.gnu else ScanMode.POSIX

    @classmethod
    def from_environ(cls, gnu: bool = False, environ: Optional[Mapping[str, str]] = None) -> 'ScanConfig':
        """
        Build a configuration honouring `POSIXLY_CORRECT` (set to any value) in the environment.

        >>> ScanConfig.from_environ(gnu=True, environ={'POSIXLY_CORRECT': ''})
        ScanConfig(gnu=True, posixly_correct=True)
        """
        if environ is None:
            environ = os.environ
        return cls(gnu=gnu, posixly_correct=POSIXLY_CORRECT in environ)
