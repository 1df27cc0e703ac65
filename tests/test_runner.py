"""Tests for plugin_installer.runner module."""

from __future__ import annotations

import subprocess
import sys
from unittest.mock import patch

from plugin_installer.runner import EXIT_NOT_FOUND, CommandResult, SubprocessRunner


class TestCommandResult:
    def test_unpacks_as_triple(self):
        exit_code, stdout, stderr = CommandResult(2, "out", "err")
        assert (exit_code, stdout, stderr) == (2, "out", "err")


class TestSubprocessRunner:
    def test_captures_output(self):
        runner = SubprocessRunner()

        result = runner.run([sys.executable, "-c", "import sys; print('hi'); sys.exit(3)"])

        assert result.exit_code == 3
        assert result.stdout.strip() == "hi"
        assert result.stderr == ""

    def test_passes_flags_to_subprocess(self):
        completed = subprocess.CompletedProcess(["cargo"], 0, stdout=None, stderr=None)

        with patch("plugin_installer.runner.subprocess.run", return_value=completed) as mock_run:
            result = SubprocessRunner(capture_output=False).run(["cargo", "install"])

        mock_run.assert_called_once_with(
            ["cargo", "install"],
            capture_output=False,
            text=True,
            check=False,
        )
        # Uncaptured streams come back as empty strings
        assert result == CommandResult(0, "", "")

    def test_stringifies_argv(self, tmp_path):
        completed = subprocess.CompletedProcess([], 0, stdout="", stderr="")

        with patch("plugin_installer.runner.subprocess.run", return_value=completed) as mock_run:
            SubprocessRunner().run(["cargo", "--path", tmp_path])

        assert mock_run.call_args.args[0] == ["cargo", "--path", str(tmp_path)]

    def test_missing_executable(self):
        with patch(
            "plugin_installer.runner.subprocess.run",
            side_effect=FileNotFoundError(2, "No such file or directory"),
        ):
            result = SubprocessRunner().run(["cargo", "install"])

        assert result.exit_code == EXIT_NOT_FOUND
        assert result.stdout == ""
        assert result.stderr.startswith("cargo:")
