"""External command execution.

Package-manager commands run through a ``CommandRunner`` so the
materializer can be driven without spawning real processes.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from create_internet.logging import get_logger

logger = get_logger("runner")


class CommandFailedError(Exception):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"Command '{' '.join(command)}' exited with status {returncode}"
        )


class CommandRunner(Protocol):
    """Runs a command to completion and reports its exit status."""

    def run(self, command: list[str], cwd: Path) -> int: ...


class SubprocessRunner:
    """Run commands as child processes sharing this process's stdio.

    The user sees the tool's own output. There is no timeout; a hung child
    hangs the run.
    """

    def run(self, command: list[str], cwd: Path) -> int:
        logger.debug("Running %s in %s", command, cwd)
        # npm/yarn are .cmd shims on Windows; resolve to the full path first
        executable = shutil.which(command[0]) or command[0]
        completed = subprocess.run([executable, *command[1:]], cwd=cwd, check=False)
        logger.debug("%s exited with %d", command[0], completed.returncode)
        return completed.returncode


def run_checked(runner: CommandRunner, command: list[str], cwd: Path) -> None:
    """Run ``command`` and raise CommandFailedError on a non-zero exit."""
    returncode = runner.run(command, cwd)
    if returncode != 0:
        raise CommandFailedError(command, returncode)
