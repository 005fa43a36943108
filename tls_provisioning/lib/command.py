"""Blocking execution of external commands."""

import subprocess
from collections.abc import Sequence

from .logging_config import LOGGER
from .models import CommandResult

COMMAND_NOT_FOUND = 127


class CommandRunner:
    """Runs commands to completion and returns structured results.

    Never raises on a non-zero exit; callers decide what a failure means.
    """

    def run(self, args: Sequence[str], capture_stdout: bool = True) -> CommandResult:
        """Run a command and wait for it.

        Args:
            args: Executable followed by its arguments
            capture_stdout: Capture stdout; when False it stays attached to
                the terminal so the command can interact with the operator

        Returns:
            CommandResult with exit code and captured output
        """
        argv = tuple(args)
        LOGGER.info("Running: %s", " ".join(argv))
        try:
            completed = subprocess.run(
                argv,
                check=False,
                stdout=subprocess.PIPE if capture_stdout else None,
                stderr=subprocess.PIPE,
                text=True,
            )
        except FileNotFoundError as e:
            return CommandResult(args=argv, returncode=COMMAND_NOT_FOUND, stderr=str(e))

        return CommandResult(
            args=argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
