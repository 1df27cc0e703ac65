"""Runs external commands for the installer."""

from __future__ import annotations

import logging
import subprocess
from typing import NamedTuple, Protocol, Sequence

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
EXIT_NOT_FOUND = 127


class CommandResult(NamedTuple):
    exit_code: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    """Anything that can run an argv and report how it went."""

    def run(self, argv: Sequence[str]) -> CommandResult: ...


class SubprocessRunner:
    """Runs commands with :func:`subprocess.run`, blocking until they exit.

    With ``capture_output=False`` the child writes straight to the terminal
    and the returned stdout/stderr are empty.
    """

    def __init__(self, capture_output: bool = True) -> None:
        self.capture_output = capture_output

    def run(self, argv: Sequence[str]) -> CommandResult:
        argv = [str(a) for a in argv]
        logger.debug("Running: %s", " ".join(argv))
        try:
            proc = subprocess.run(
                argv,
                capture_output=self.capture_output,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.warning("Could not start '%s': %s", argv[0], e)
            return CommandResult(EXIT_NOT_FOUND, "", f"{argv[0]}: {e}")

        return CommandResult(proc.returncode, proc.stdout or "", proc.stderr or "")
