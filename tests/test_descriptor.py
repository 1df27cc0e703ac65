"""Tests for plugin_installer.descriptor module."""

from __future__ import annotations

from pathlib import Path

import pytest

from plugin_installer.descriptor import DESCRIPTOR_NAME, read_package_name
from plugin_installer.errors import DescriptorParseError, DescriptorReadError


def write_manifest(tmp_path: Path, text: str) -> Path:
    path = tmp_path / DESCRIPTOR_NAME
    path.write_text(text, encoding="utf-8")
    return path


class TestReadPackageName:
    def test_reads_name(self, tmp_path: Path):
        path = write_manifest(tmp_path, """
[package]
name = "nu_plugin_dns"
version = "1.0.5"
edition = "2021"

[dependencies]
nu-plugin = "0.86"
""")
        assert read_package_name(path) == "nu_plugin_dns"

    def test_missing_file(self, tmp_path: Path):
        path = tmp_path / DESCRIPTOR_NAME

        with pytest.raises(DescriptorReadError) as exc_info:
            read_package_name(path)
        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

    def test_directory_instead_of_file(self, tmp_path: Path):
        path = tmp_path / DESCRIPTOR_NAME
        path.mkdir()

        with pytest.raises(DescriptorReadError):
            read_package_name(path)

    def test_invalid_toml(self, tmp_path: Path):
        path = write_manifest(tmp_path, "[package\nname = ")

        with pytest.raises(DescriptorParseError):
            read_package_name(path)

    def test_missing_package_table(self, tmp_path: Path):
        path = write_manifest(tmp_path, '[workspace]\nmembers = ["a", "b"]\n')

        with pytest.raises(DescriptorParseError, match=r"\[package\]"):
            read_package_name(path)

    def test_package_is_not_a_table(self, tmp_path: Path):
        path = write_manifest(tmp_path, 'package = "nu_plugin_dns"\n')

        with pytest.raises(DescriptorParseError):
            read_package_name(path)

    def test_missing_name(self, tmp_path: Path):
        path = write_manifest(tmp_path, '[package]\nversion = "1.0.0"\n')

        with pytest.raises(DescriptorParseError, match="package.name"):
            read_package_name(path)

    def test_empty_name(self, tmp_path: Path):
        path = write_manifest(tmp_path, '[package]\nname = ""\n')

        with pytest.raises(DescriptorParseError):
            read_package_name(path)

    def test_non_string_name(self, tmp_path: Path):
        path = write_manifest(tmp_path, "[package]\nname = 42\n")

        with pytest.raises(DescriptorParseError):
            read_package_name(path)

    def test_not_utf8(self, tmp_path: Path):
        path = tmp_path / DESCRIPTOR_NAME
        path.write_bytes(b"[package]\nname = \"\xff\xfe\"\n")

        with pytest.raises(DescriptorParseError):
            read_package_name(path)
