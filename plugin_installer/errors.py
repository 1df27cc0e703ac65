"""Error types raised while installing a plugin.

Every error is terminal: the installer never retries, and the first failure
aborts the remaining steps.
"""

from __future__ import annotations

from pathlib import Path


class InstallError(Exception):
    """Base class for all installer failures."""


class InvalidPath(InstallError):
    """The package file has no parent directory to build from."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Package file has no parent directory: '{path}'")


class MissingEnvironment(InstallError):
    """A required environment variable is unset or empty."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"Environment variable {variable} is not set")


class DescriptorReadError(InstallError):
    """The package descriptor is missing or unreadable."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


class DescriptorParseError(InstallError):
    """The package descriptor is not valid or lacks ``package.name``."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot parse {path}: {reason}")


class CommandFailed(InstallError):
    """An external command exited non-zero.

    Attributes:
        argv: The command line that was run
        exit_code: The command's exit status
        stdout: Captured standard output (empty when not captured)
        stderr: Captured standard error (empty when not captured)
    """

    step = "Command"

    def __init__(
        self,
        argv: list[str],
        exit_code: int,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.argv = list(argv)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"{self.step} failed with exit code {exit_code}: {' '.join(self.argv)}"
        )

    def output(self) -> str:
        """Return the captured output, stdout first, or an empty string."""
        parts = [p.rstrip("\n") for p in (self.stdout, self.stderr) if p.strip()]
        return "\n".join(parts)


class BuildFailed(CommandFailed):
    step = "Build"


class RegistrationFailed(CommandFailed):
    step = "Registration"
