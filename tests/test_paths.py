"""Tests for in-archive and data directory path derivation."""

from pathlib import PurePosixPath

import pytest

from splitlib.arch import ArchitectureNames
from splitlib.errors import InvalidArgumentError
from splitlib.paths import (
    data_directory_from_hint_paths,
    data_directory_from_library_path,
    relative_library_path,
)

APP_DIR = "/data/app/~~7LtReIkm5snW_oXeDoJ5TQ==/com.example.shorebird_test-rpkDZSLBRv2jWcc1gQpwdg=="


class TestRelativeLibraryPath:
    """Tests for relative_library_path."""

    def test_uses_library_directory_name(self, arch: ArchitectureNames) -> None:
        """Path is lib/<library dir>/<file>."""
        assert relative_library_path("libapp.so", arch) == f"lib/{arch.library_directory_name}/libapp.so"

    def test_deterministic(self, arch: ArchitectureNames) -> None:
        """Same input gives the same path."""
        assert relative_library_path("libfoo.so", arch) == relative_library_path("libfoo.so", arch)


class TestDataDirectoryFromHintPaths:
    """Tests for data_directory_from_hint_paths."""

    def test_empty_hint_paths(self) -> None:
        """An empty list is an invalid argument."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            data_directory_from_hint_paths([])

        assert exc_info.value.field == "hint_paths"
        assert exc_info.value.detail == "empty"

    def test_full_library_path(self) -> None:
        """Three trailing segments are stripped from the full path."""
        hint = f"{APP_DIR}/lib/x86_64/libapp.so"

        assert data_directory_from_hint_paths([hint]) == PurePosixPath(APP_DIR)

    def test_uses_last_entry(self) -> None:
        """The bare dlopen name comes first and is ignored."""
        hints = ["libapp.so", f"{APP_DIR}/lib/arm64-v8a/libapp.so"]

        assert str(data_directory_from_hint_paths(hints)) == APP_DIR

    def test_last_entry_is_trusted_even_when_short(self) -> None:
        """Only the last entry is considered."""
        hints = [f"{APP_DIR}/lib/x86/libapp.so", "libapp.so"]

        with pytest.raises(InvalidArgumentError) as exc_info:
            data_directory_from_hint_paths(hints)

        assert exc_info.value.detail == "invalid path: libapp.so"

    @pytest.mark.parametrize("path", ["", "libapp.so", "x86/libapp.so"])
    def test_too_shallow(self, path: str) -> None:
        """Paths with fewer than three ancestors are rejected."""
        with pytest.raises(InvalidArgumentError, match="invalid path"):
            data_directory_from_library_path(path)

    def test_exactly_three_levels(self) -> None:
        """A root-level lib directory resolves to the root."""
        assert data_directory_from_library_path("/lib/x86/libapp.so") == PurePosixPath("/")

    def test_invalid_argument_is_value_error(self) -> None:
        """Callers catching ValueError also see argument errors."""
        with pytest.raises(ValueError):
            data_directory_from_hint_paths([])
