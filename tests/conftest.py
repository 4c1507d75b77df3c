"""Shared pytest fixtures for splitlib tests."""

import zipfile
from pathlib import Path

import pytest

from splitlib.arch import ARCHITECTURES, ArchitectureNames


def write_zip(zip_path: Path, entries: dict[str, bytes] | list[str]) -> Path:
    """Write a zip at ``zip_path``; list entries are written empty."""
    if isinstance(entries, list):
        entries = {name: b"" for name in entries}
    with zipfile.ZipFile(zip_path, "w") as archive:
        for name, payload in entries.items():
            archive.writestr(name, payload)
    return zip_path


@pytest.fixture(params=sorted(ARCHITECTURES), ids=str)
def arch(request: pytest.FixtureRequest) -> ArchitectureNames:
    """Every supported architecture pair."""
    return ARCHITECTURES[request.param]


@pytest.fixture
def apk_dir(tmp_path: Path) -> Path:
    """An empty directory standing in for the app's APK directory."""
    directory = tmp_path / "apks"
    directory.mkdir()
    return directory


def write_zip_with_undecodable_name(zip_path: Path) -> Path:
    """Write a zip whose entry is flagged UTF-8 but whose name bytes are not."""
    info = zipfile.ZipInfo("lib/é.so", date_time=(2020, 1, 1, 0, 0, 0))
    with zipfile.ZipFile(zip_path, "w") as archive:
        archive.writestr(info, b"")
    data = zip_path.read_bytes()
    zip_path.write_bytes(data.replace("é".encode("utf-8"), b"\xff\xfe"))
    return zip_path
