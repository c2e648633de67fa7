"""
Unit tests for option resolution.

Tests domain validation, the debug flag derivation from the build profile and
the absence of side effects when resolution fails.
"""

import logging

import pytest

from mybuild.options import dump_options, resolve_debug_flag
from mybuild.validation import ValidationError


@pytest.mark.unit
class TestDebugFlagResolution:
    """Test cases for the debug flag."""

    @pytest.mark.parametrize(
        "build_type, expected", [("debug", "1"), ("release", "0")]
    )
    def test_default_follows_build_type(self, resolved_options, build_type, expected):
        options = resolved_options(build_type=build_type)

        assert options.debug == expected
        assert options.debug_enabled is (build_type == "debug")

    @pytest.mark.parametrize("value", ["0", "1"])
    def test_explicit_value_overrides_profile(self, resolved_options, value):
        assert resolved_options(build_type="release", debug=value).debug == value

    @pytest.mark.parametrize("value", ["yes", "2", "", "Default"])
    def test_invalid_value(self, value):
        with pytest.raises(ValidationError, match="it must be 1, 0, or default"):
            resolve_debug_flag(value, "Debug")


@pytest.mark.unit
class TestResolveOptions:
    """Test cases for the full resolution step."""

    def test_release_example(self, resolved_options, source_tree):
        options = resolved_options(build_type="release", build_action="1")

        assert options.build_type == "release"
        assert options.cmake_build_type == "RelWithDebInfo"
        assert options.debug == "0"
        assert options.build_action == "1"
        assert options.should_build
        assert options.build_dir == source_tree / "bld-release"

    def test_debug_profile(self, resolved_options):
        assert resolved_options().cmake_build_type == "Debug"

    def test_sanitizers_become_flags(self, resolved_options):
        options = resolved_options(asan=True, ubsan=True)

        assert (options.asan, options.msan, options.tsan, options.ubsan) == ("1", "0", "0", "1")

    def test_gmock_zip(self, resolved_options, source_tree):
        assert resolved_options().gmock_zip == ""
        assert resolved_options(gmock_enable=True).gmock_zip == str(
            source_tree / "source_downloads" / "googletest-release-1.10.0.zip"
        )

    def test_empty_commit_override_is_ignored(self, resolved_options):
        assert resolved_options(commit_input="").commit_input is None
        assert resolved_options(commit_input="abc123").commit_input == "abc123"

    def test_options_are_read_only(self, resolved_options):
        options = resolved_options()

        with pytest.raises(AttributeError):
            options.build_type = "release"

    @pytest.mark.parametrize("value", ["2", "true", "", "-1"])
    def test_invalid_build_action(self, resolved_options, value):
        with pytest.raises(ValidationError, match="Invalid build_action value"):
            resolved_options(build_action=value)

    @pytest.mark.parametrize("value", ["2", "on", ""])
    def test_invalid_valgrind(self, resolved_options, value):
        with pytest.raises(ValidationError, match="Invalid valgrind value"):
            resolved_options(valgrind=value)

    def test_invalid_build_type_creates_nothing(self, resolved_options, source_tree):
        before = sorted(p.name for p in source_tree.iterdir())

        with pytest.raises(ValidationError, match="Invalid build type"):
            resolved_options(build_type="bogus")

        assert sorted(p.name for p in source_tree.iterdir()) == before

    def test_missing_boost_dir_fails_first(self, resolved_options, source_tree):
        with pytest.raises(ValidationError) as exc_info:
            resolved_options(boost_dir=str(source_tree / "missing"), build_type="bogus")

        assert exc_info.value.field_name == "Boost directory"
        assert not (source_tree / "bld-bogus").exists()

    def test_boost_dir_must_be_directory(self, resolved_options, source_tree):
        boost_file = source_tree / "boost.tar"
        boost_file.write_text("")

        with pytest.raises(ValidationError, match="not exists or is not a directory"):
            resolved_options(boost_dir=str(boost_file))

    def test_build_dir_as_regular_file(self, resolved_options, source_tree):
        (source_tree / "bld-debug").write_text("not a directory")

        with pytest.raises(ValidationError, match="exists but it is not a directory"):
            resolved_options()

    def test_existing_build_dir_is_accepted(self, resolved_options, source_tree):
        (source_tree / "bld-debug").mkdir()

        assert resolved_options().build_dir.is_dir()


@pytest.mark.unit
def test_dump_options_lists_resolved_values(resolved_options, caplog):
    caplog.set_level(logging.INFO)

    dump_options(resolved_options(build_type="release", valgrind="1"))

    assert "Dumping the options used by mybuild ..." in caplog.text
    for line in ("build_type=release", "valgrind=1", "debug=0", "build_action=1", "gmock_zip="):
        assert line in caplog.text
