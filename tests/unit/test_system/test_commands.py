"""
Unit tests for command execution, tool discovery and CPU detection.
"""

import os
from unittest.mock import Mock, patch

import pytest

from mybuild.system import (
    build_child_environment,
    find_first_executable,
    get_cpu_count,
    get_git_commit,
    run_command,
)


@pytest.mark.unit
class TestRunCommand:
    """Test cases for run_command."""

    @patch("mybuild.system.commands.subprocess.run")
    def test_returns_output(self, mock_run, temp_dir):
        mock_run.return_value = Mock(returncode=0, stdout="out\n", stderr="")

        assert run_command(["git", "status"], cwd=temp_dir) == (0, "out\n", "")
        assert mock_run.call_args.kwargs["cwd"] == temp_dir

    @patch("mybuild.system.commands.subprocess.run", side_effect=FileNotFoundError("git"))
    def test_missing_command(self, mock_run, temp_dir):
        return_code, stdout, stderr = run_command(["git", "log"], cwd=temp_dir)

        assert return_code == -1
        assert stdout == ""
        assert "Command not found 'git'" in stderr


@pytest.mark.unit
class TestToolDiscovery:
    """Test cases for PATH lookups."""

    @patch("mybuild.system.commands.shutil.which")
    def test_prefers_first_candidate(self, mock_which):
        mock_which.side_effect = lambda name: f"/usr/bin/{name}"

        assert find_first_executable(["cmake3", "cmake"]) == "cmake3"

    @patch("mybuild.system.commands.shutil.which")
    def test_falls_back_to_next_candidate(self, mock_which):
        mock_which.side_effect = lambda name: "/usr/bin/cmake" if name == "cmake" else None

        assert find_first_executable(["cmake3", "cmake"]) == "cmake"

    @patch("mybuild.system.commands.shutil.which", return_value=None)
    def test_none_found(self, mock_which):
        assert find_first_executable(["cmake3", "cmake"]) is None


@pytest.mark.unit
class TestGitCommit:
    """Test cases for commit id detection."""

    @patch("mybuild.system.commands.run_command")
    def test_returns_hash(self, mock_run_command, temp_dir):
        mock_run_command.return_value = (0, "0123abcd\n", "")

        assert get_git_commit(temp_dir) == "0123abcd"
        assert mock_run_command.call_args.args[0][:2] == ["git", "log"]

    @patch("mybuild.system.commands.run_command")
    def test_not_a_repository(self, mock_run_command, temp_dir, caplog):
        mock_run_command.return_value = (128, "", "fatal: not a git repository")

        assert get_git_commit(temp_dir) == ""
        assert "Could not determine git commit" in caplog.text


@pytest.mark.unit
class TestEnvironment:
    """Test cases for child environments."""

    def test_overrides_do_not_leak(self, monkeypatch):
        monkeypatch.setenv("CC", "gcc")

        env = build_child_environment({"CC": "clang", "CXX": "clang++"})

        assert env["CC"] == "clang"
        assert env["CXX"] == "clang++"
        assert os.environ["CC"] == "gcc"


@pytest.mark.unit
class TestCpuCount:
    """Test cases for processor detection."""

    @patch("mybuild.system.cpu.psutil.cpu_count", return_value=16)
    def test_logical_count(self, mock_cpu_count):
        assert get_cpu_count() == 16
        mock_cpu_count.assert_called_once_with(logical=True)

    @patch("mybuild.system.cpu.psutil.cpu_count", return_value=None)
    def test_unknown_count(self, mock_cpu_count, caplog):
        assert get_cpu_count() == 1
        assert "Unable to determine processor count" in caplog.text
