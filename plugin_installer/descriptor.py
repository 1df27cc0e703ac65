"""Reads the package name from a Cargo manifest."""

from __future__ import annotations

import tomllib
from pathlib import Path

from .errors import DescriptorParseError, DescriptorReadError

DESCRIPTOR_NAME = "Cargo.toml"


def read_package_name(descriptor_path: Path) -> str:
    """Return ``package.name`` from a Cargo manifest.

    Args:
        descriptor_path: Path to ``Cargo.toml``

    Returns:
        The package name.

    Raises:
        DescriptorReadError: If the file is missing or unreadable.
        DescriptorParseError: If the file is not valid TOML or has no
            non-empty string ``package.name``.
    """
    try:
        raw = descriptor_path.read_bytes()
    except OSError as e:
        raise DescriptorReadError(descriptor_path, e.strerror or str(e)) from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise DescriptorParseError(descriptor_path, str(e)) from e

    package = data.get("package")
    if not isinstance(package, dict):
        raise DescriptorParseError(descriptor_path, "missing [package] table")

    name = package.get("name")
    if not isinstance(name, str) or not name.strip():
        raise DescriptorParseError(descriptor_path, "missing package.name")

    return name
