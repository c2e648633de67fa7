"""
Pytest configuration and shared fixtures for the mybuild test suite.

This module provides common fixtures, fake external tools and configuration
helpers for all test modules.
"""

import os
import shutil
import stat
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "e2e: mark test as an end-to-end test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path).resolve()
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def app_config():
    """Built-in defaults with unbuffer disabled so commands are host independent."""
    from mybuild.config import validate_app_config

    return validate_app_config({"toolchain": {"unbuffer_command": ""}})


@pytest.fixture
def source_tree(temp_dir, monkeypatch):
    """A fake source root used as the working directory, with a boost bundle."""
    source_dir = temp_dir / "mysql-server"
    source_dir.mkdir()
    (source_dir / "boost").mkdir()
    monkeypatch.chdir(source_dir)
    return source_dir


@pytest.fixture
def raw_options_factory(source_tree):
    """Create RawOptions with the wrapper defaults, overridable per test."""
    from mybuild.models import RawOptions

    def _factory(**overrides):
        values = {
            "boost_dir": str(source_tree),
            "dest_dir": "/usr/local/mysql",
            "build_type": "debug",
            "build_action": "1",
            "valgrind": "0",
        }
        values.update(overrides)
        return RawOptions(**values)

    return _factory


@pytest.fixture
def resolved_options(raw_options_factory, app_config, source_tree):
    """Resolve options for the fake source tree."""
    from mybuild.options import resolve_options

    def _resolve(**overrides):
        return resolve_options(raw_options_factory(**overrides), app_config, source_tree)

    return _resolve


# ============================================================================
# Fake External Tools
# ============================================================================


_FAKE_CMAKE = """#!/bin/sh
printf '%s\\n' "$@" > "$FAKE_TOOL_LOG_DIR/cmake.args"
printf '%s\\n' "${CC:-}" > "$FAKE_TOOL_LOG_DIR/cmake.cc"
pwd > "$FAKE_TOOL_LOG_DIR/cmake.cwd"
echo "-- Configuring done"
exit "${FAKE_CMAKE_EXIT:-0}"
"""

_FAKE_MAKE = """#!/bin/sh
printf '%s\\n' "$@" > "$FAKE_TOOL_LOG_DIR/make.args"
printf '%s\\n' "${CXX:-}" > "$FAKE_TOOL_LOG_DIR/make.cxx"
echo "Scanning dependencies of target mysqld"
echo "compiler warning: unused variable" >&2
printf '%s\\n' "${FAKE_MAKE_OUTPUT-[100%] Built target mysqld}"
exit "${FAKE_MAKE_EXIT:-0}"
"""


def _write_executable(path: Path, content: str) -> None:
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


class FakeTools:
    """Fake cmake/make executables recording how they were invoked."""

    CMAKE = "fake-cmake"
    MAKE = "fake-make"

    def __init__(self, bin_dir: Path, log_dir: Path):
        self.bin_dir = bin_dir
        self.log_dir = log_dir

    def _read_lines(self, name: str):
        path = self.log_dir / name
        if not path.exists():
            return None
        return path.read_text().splitlines()

    @property
    def cmake_args(self):
        return self._read_lines("cmake.args")

    @property
    def make_args(self):
        return self._read_lines("make.args")

    @property
    def cmake_cc(self):
        lines = self._read_lines("cmake.cc")
        return lines[0] if lines else None

    @property
    def make_cxx(self):
        lines = self._read_lines("make.cxx")
        return lines[0] if lines else None

    @property
    def cmake_cwd(self):
        lines = self._read_lines("cmake.cwd")
        return Path(lines[0]).resolve() if lines else None


@pytest.fixture
def fake_tools(temp_dir, monkeypatch):
    """Install fake cmake/make on PATH and record their invocations."""
    if os.name != "posix":
        pytest.skip("fake tools are POSIX shell scripts")

    bin_dir = temp_dir / "fake-bin"
    log_dir = temp_dir / "fake-logs"
    bin_dir.mkdir()
    log_dir.mkdir()
    _write_executable(bin_dir / FakeTools.CMAKE, _FAKE_CMAKE)
    _write_executable(bin_dir / FakeTools.MAKE, _FAKE_MAKE)

    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    monkeypatch.setenv("FAKE_TOOL_LOG_DIR", str(log_dir))
    for var in ("FAKE_CMAKE_EXIT", "FAKE_MAKE_EXIT", "FAKE_MAKE_OUTPUT", "CC", "CXX"):
        monkeypatch.delenv(var, raising=False)
    return FakeTools(bin_dir, log_dir)


@pytest.fixture
def fake_tools_config(app_config, fake_tools):
    """Configuration pointing the toolchain at the fake executables."""
    app_config.toolchain.configure_tools = ["fake-cmake3-missing", FakeTools.CMAKE]
    app_config.toolchain.make_command = FakeTools.MAKE
    return app_config


@pytest.fixture
def config_file(temp_dir, fake_tools):
    """Write a config.toml using the fake tools and point MYBUILD_CONFIG at it."""
    import toml

    def _write(build_overrides=None):
        data = {
            "build": {"completion_marker": "100%"},
            "toolchain": {
                "configure_tools": ["fake-cmake3-missing", FakeTools.CMAKE],
                "make_command": FakeTools.MAKE,
                "unbuffer_command": "",
            },
        }
        data["build"].update(build_overrides or {})
        path = temp_dir / "config.toml"
        with open(path, "w") as f:
            toml.dump(data, f)
        return path

    return _write


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically clear configuration cache after each test."""
    yield

    from mybuild.config import clear_config_cache

    clear_config_cache()
