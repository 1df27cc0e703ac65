"""plugin_installer - Build nushell plugins into NUPM_HOME and register them with nu."""

__version__ = "0.1.0"

from .errors import (
    BuildFailed,
    CommandFailed,
    DescriptorParseError,
    DescriptorReadError,
    InstallError,
    InvalidPath,
    MissingEnvironment,
    RegistrationFailed,
)
from .schema import InstallConfig, InstallPlan
from .runner import CommandResult, CommandRunner, SubprocessRunner
from .installer import Installer, binary_extension, binary_path, install

__all__ = [
    "BuildFailed",
    "CommandFailed",
    "DescriptorParseError",
    "DescriptorReadError",
    "InstallError",
    "InvalidPath",
    "MissingEnvironment",
    "RegistrationFailed",
    "InstallConfig",
    "InstallPlan",
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
    "Installer",
    "binary_extension",
    "binary_path",
    "install",
]
