import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

__all__ = ["CommandResult", "CommandRunner", "SubprocessRunner"]


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of an external program.

    stdout is empty when the output was not captured.
    """

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Whether the program exited successfully."""
        return self.returncode == 0


class CommandRunner(Protocol):
    """Something able to run an external program."""

    def run(self, args: Sequence[str], *, capture_output: bool = True) -> CommandResult: ...  # noqa: D102


class SubprocessRunner:
    """Run external programs with subprocess.

    Without capture, the program writes straight to our stdout and stderr.
    OSError (e.g. a missing executable) is left to the caller.
    """

    def run(self, args: Sequence[str], *, capture_output: bool = True) -> CommandResult:
        """Run the program to completion and report its exit status."""
        logger.debug(f"Running: {' '.join(args)}")

        completed = subprocess.run(  # noqa: S603
            list(args),
            capture_output=capture_output,
            text=True,
            check=False,
        )

        return CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
