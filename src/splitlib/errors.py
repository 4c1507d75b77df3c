"""Error types raised by split-archive library lookup."""

from __future__ import annotations

from pathlib import Path


class SplitLibError(Exception):
    """Base class for all splitlib errors."""


class InvalidArgumentError(SplitLibError, ValueError):
    """Raised when caller input is malformed."""

    def __init__(self, field: str, detail: str) -> None:
        super().__init__(f"Invalid argument {field}: {detail}")
        self.field = field
        self.detail = detail


class LibraryNotFoundError(SplitLibError, LookupError):
    """Raised when an archive does not list the expected library entry."""

    def __init__(self, archive_path: Path, library_path: str) -> None:
        super().__init__(f"Library not found in APK: {library_path} ({archive_path})")
        self.archive_path = archive_path
        self.library_path = library_path


class InvalidArchiveError(SplitLibError):
    """Raised when a file cannot be parsed as a zip archive."""

    def __init__(self, archive_path: Path, reason: str) -> None:
        super().__init__(f"invalid Zip archive: {archive_path}: {reason}")
        self.archive_path = archive_path
        self.reason = reason


class ArchiveEntryError(SplitLibError):
    """Raised when a listed archive entry cannot be opened."""

    def __init__(self, archive_path: Path, internal_path: str) -> None:
        super().__init__(f"Failed to open {internal_path} in APK {archive_path}")
        self.archive_path = archive_path
        self.internal_path = internal_path


class UnsupportedArchitectureError(SplitLibError):
    """Raised when the running CPU architecture has no known naming pair."""

    def __init__(self, machine: str) -> None:
        super().__init__(f"Unsupported architecture: {machine!r}")
        self.machine = machine
