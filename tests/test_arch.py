"""Tests for architecture naming pairs."""

import pytest

from splitlib.arch import (
    ARCHITECTURES,
    ArchitectureNames,
    architecture_by_name,
    resolve_architecture,
)
from splitlib.errors import UnsupportedArchitectureError


class TestArchitectureTable:
    """Tests for the fixed naming table."""

    @pytest.mark.parametrize(
        ("name", "archive_match_name", "library_directory_name"),
        [
            ("x86", "x86", "x86"),
            ("x86_64", "x86_64", "x86_64"),
            ("arm64", "arm64_v8a", "arm64-v8a"),
            ("arm", "armeabi_v7a", "armeabi-v7a"),
        ],
    )
    def test_naming_pairs(self, name: str, archive_match_name: str, library_directory_name: str) -> None:
        """Split names use underscores where ARM library dirs use hyphens."""
        arch = ARCHITECTURES[name]

        assert arch.archive_match_name == archive_match_name
        assert arch.library_directory_name == library_directory_name

    def test_table_is_closed(self) -> None:
        """Exactly four families are supported."""
        assert set(ARCHITECTURES) == {"x86", "x86_64", "arm64", "arm"}

    def test_pairs_are_immutable(self) -> None:
        """Naming pairs cannot be mutated after creation."""
        arch = ARCHITECTURES["arm64"]

        with pytest.raises(AttributeError):
            arch.archive_match_name = "arm64-v8a"  # type: ignore[misc]


class TestResolveArchitecture:
    """Tests for resolve_architecture and architecture_by_name."""

    @pytest.mark.parametrize(
        ("machine", "expected"),
        [
            ("x86_64", "x86_64"),
            ("AMD64", "x86_64"),
            ("i686", "x86"),
            ("aarch64", "arm64"),
            ("arm64", "arm64"),
            ("armv8l", "arm64"),
            ("armv7l", "arm"),
        ],
    )
    def test_machine_aliases(self, machine: str, expected: str) -> None:
        """Common machine identifiers map onto the four families."""
        assert resolve_architecture(machine).name == expected

    def test_unknown_machine_raises(self) -> None:
        """An unknown machine is reported rather than guessed."""
        with pytest.raises(UnsupportedArchitectureError) as exc_info:
            resolve_architecture("riscv64")

        assert exc_info.value.machine == "riscv64"

    def test_defaults_to_platform_machine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without an argument the interpreter's machine is used."""
        monkeypatch.setattr("splitlib.arch.platform.machine", lambda: "aarch64")

        assert resolve_architecture() is ARCHITECTURES["arm64"]

    def test_by_name(self) -> None:
        """Family names select pairs directly."""
        arch = architecture_by_name(" ARM ")

        assert isinstance(arch, ArchitectureNames)
        assert arch.library_directory_name == "armeabi-v7a"

    def test_by_name_unknown(self) -> None:
        """Unknown family names raise UnsupportedArchitectureError."""
        with pytest.raises(UnsupportedArchitectureError):
            architecture_by_name("mips")
