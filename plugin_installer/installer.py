"""Builds a nushell plugin into $NUPM_HOME/plugins and registers it with nu.

Usage:
    plugin-install path/to/nu_plugin_dns/package.nuon
    plugin-install --home ~/.local/share/nupm --dry-run ../nu_plugin_dns/package.nuon
    plugin-install --quiet /src/nu_plugin_dns/package.nuon
"""

from __future__ import annotations

import argparse
import logging
import os
import shlex
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .descriptor import DESCRIPTOR_NAME, read_package_name
from .errors import (
    BuildFailed,
    CommandFailed,
    InstallError,
    InvalidPath,
    RegistrationFailed,
)
from .runner import CommandRunner, SubprocessRunner
from .schema import InstallConfig, InstallPlan

logger = logging.getLogger(__name__)


def binary_extension(os_name: str) -> str:
    """Return the executable suffix for an OS name (``".exe"`` on Windows)."""
    name = os_name.strip().lower()
    if name.startswith("win") or name == "nt":
        return ".exe"
    return ""


def binary_path(install_root: Path, package_name: str, os_name: str) -> Path:
    """Return where ``cargo install --root`` places the package's binary."""
    return install_root / "bin" / f"{package_name}{binary_extension(os_name)}"


def resolve_repo_root(package_file: Path | str) -> Path:
    """Return the directory containing the package file.

    The directory is taken from the path as written, so ``./package.nuon``
    resolves to ``.``.

    Raises:
        InvalidPath: If the path has no parent directory component.
    """
    dirname = os.path.dirname(str(package_file))
    path = Path(package_file)
    # A bare file name has no dirname, a root is its own parent
    if not dirname or path.parent == path:
        raise InvalidPath(package_file)
    return Path(dirname)


def build_command(config: InstallConfig, repo_root: Path) -> list[str]:
    return [
        config.cargo,
        "install",
        "--path",
        str(repo_root),
        "--root",
        str(config.install_root),
    ]


def register_command(config: InstallConfig, binary: Path) -> list[str]:
    """Return the host command line that registers ``binary`` as a plugin."""
    # Nushell double-quoted string: only backslash and quote need escaping here
    escaped = str(binary).replace("\\", "\\\\").replace('"', '\\"')
    return [config.host, "--commands", f'register "{escaped}"']


class Installer:
    """Builds, installs and registers one plugin package.

    Args:
        config: Install settings (home directory, executables, OS name)
        runner: Runs external commands; defaults to :class:`SubprocessRunner`
    """

    def __init__(
        self,
        config: InstallConfig,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config
        self.runner = runner if runner is not None else SubprocessRunner()

    def plan(self, package_file: Path | str) -> InstallPlan:
        """Resolve paths and the package name without running anything.

        Raises:
            InvalidPath: If the package file has no parent directory.
            DescriptorReadError: If the Cargo manifest is missing or unreadable.
            DescriptorParseError: If the manifest lacks ``package.name``.
        """
        repo_root = resolve_repo_root(package_file)
        install_root = self.config.install_root
        descriptor_path = repo_root / DESCRIPTOR_NAME
        package_name = read_package_name(descriptor_path)
        binary = binary_path(install_root, package_name, self.config.os_name)

        return InstallPlan(
            package_file=Path(package_file),
            repo_root=repo_root,
            install_root=install_root,
            descriptor_path=descriptor_path,
            package_name=package_name,
            binary_path=binary,
            build_argv=build_command(self.config, repo_root),
            register_argv=register_command(self.config, binary),
        )

    def install(self, package_file: Path | str) -> InstallPlan:
        """Build the package, install its binary and register it with the host.

        Returns:
            The executed InstallPlan.

        Raises:
            InstallError: The first failure; later steps do not run.
        """
        plan = self.plan(package_file)

        logger.info(
            "Building '%s' from %s into %s",
            plan.package_name,
            plan.repo_root,
            plan.install_root,
        )
        exit_code, stdout, stderr = self.runner.run(plan.build_argv)
        if exit_code != 0:
            raise BuildFailed(plan.build_argv, exit_code, stdout, stderr)

        logger.info("Registering %s", plan.binary_path)
        exit_code, stdout, stderr = self.runner.run(plan.register_argv)
        if exit_code != 0:
            raise RegistrationFailed(plan.register_argv, exit_code, stdout, stderr)

        logger.info(
            "Restart %s to start using plugin '%s'",
            self.config.host,
            plan.package_name,
        )
        return plan


def install(
    package_file: Path | str,
    config: InstallConfig | None = None,
    runner: CommandRunner | None = None,
) -> InstallPlan:
    """Install a plugin package, reading ``NUPM_HOME`` when no config is given.

    Raises:
        InvalidPath: If the package file has no parent directory.
        MissingEnvironment: If ``config`` is None and ``NUPM_HOME`` is unset.
        InstallError: Any other install failure.
    """
    resolve_repo_root(package_file)
    if config is None:
        config = InstallConfig.from_env()
    return Installer(config, runner).install(package_file)


def _print_error(error: InstallError) -> None:
    print(f"Error: {error}", file=sys.stderr)
    if isinstance(error, CommandFailed):
        output = error.output()
        if output:
            print(output, file=sys.stderr)


def cmd_install(args: argparse.Namespace) -> int:
    """Handle an install (or dry run) from parsed CLI arguments."""
    overrides = {"cargo": args.cargo, "host": args.host}

    try:
        resolve_repo_root(args.package_file)
        if args.home:
            config = InstallConfig(nupm_home=Path(args.home), **overrides)
        else:
            config = InstallConfig.from_env(**overrides)

        installer = Installer(config, SubprocessRunner(capture_output=args.quiet))

        if args.dry_run:
            plan = installer.plan(args.package_file)
            print(f"Package:  {plan.package_name}")
            print(f"Build:    {shlex.join(plan.build_argv)}")
            print(f"Register: {shlex.join(plan.register_argv)}")
            print(f"Binary:   {plan.binary_path}")
            return 0

        plan = installer.install(args.package_file)
    except InstallError as e:
        _print_error(e)
        return 1

    print(f"Installed plugin '{plan.package_name}' at {plan.binary_path}")
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="plugin-install",
        description="Build a nushell plugin into $NUPM_HOME/plugins and register it with nu",
    )
    parser.add_argument(
        "package_file",
        help="Package file in the plugin's repository (e.g. nu_plugin_dns/package.nuon)",
    )
    parser.add_argument(
        "--home", help="Plugin manager home directory (default: $NUPM_HOME)"
    )
    parser.add_argument("--cargo", default="cargo", help="Build tool executable")
    parser.add_argument("--host", default="nu", help="nu executable to register with")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the build and register commands without running them",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Capture command output and show it only on failure",
    )
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log commands as they run"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)

    sys.exit(cmd_install(args))


if __name__ == "__main__":
    main()
