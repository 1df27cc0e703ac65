"""Data structures for plugin installation."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .errors import MissingEnvironment

HOME_ENV_VAR = "NUPM_HOME"
PLUGINS_DIR = "plugins"


@dataclass
class InstallConfig:
    """Environment-derived settings for an install run.

    Attributes:
        nupm_home: Plugin manager home directory (``$NUPM_HOME``)
        cargo: Build tool executable
        host: Host application executable that registers plugins
        os_name: Operating system name used to pick the binary extension
    """

    nupm_home: Path
    cargo: str = "cargo"
    host: str = "nu"
    os_name: str = field(default_factory=platform.system)

    @property
    def install_root(self) -> Path:
        """Directory the build tool installs into (``$NUPM_HOME/plugins``)."""
        return Path(self.nupm_home) / PLUGINS_DIR

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides,
    ) -> InstallConfig:
        """Build a config from ``NUPM_HOME``.

        Raises:
            MissingEnvironment: If ``NUPM_HOME`` is unset or empty.
        """
        if environ is None:
            environ = os.environ
        home = environ.get(HOME_ENV_VAR, "").strip()
        if not home:
            raise MissingEnvironment(HOME_ENV_VAR)
        return cls(nupm_home=Path(home), **overrides)


@dataclass
class InstallPlan:
    """Everything resolved for one install before any command runs.

    Attributes:
        package_file: Path given by the caller
        repo_root: Directory holding the package (build input)
        install_root: Directory the build installs under
        descriptor_path: Cargo manifest the package name was read from
        package_name: ``package.name`` from the manifest
        binary_path: Where the build is expected to place the plugin binary
        build_argv: Build command line
        register_argv: Registration command line
    """

    package_file: Path
    repo_root: Path
    install_root: Path
    descriptor_path: Path
    package_name: str
    binary_path: Path
    build_argv: list[str] = field(default_factory=list)
    register_argv: list[str] = field(default_factory=list)
