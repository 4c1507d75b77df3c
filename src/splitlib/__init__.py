"""Locate native libraries inside split APK directories."""

from splitlib.arch import (
    ARCHITECTURES,
    ArchitectureNames,
    architecture_by_name,
    resolve_architecture,
)
from splitlib.archive import ARCHIVE_EXTENSION, BASE_ARCHIVE_NAME, LibraryLocation, check_for_library
from splitlib.errors import (
    ArchiveEntryError,
    InvalidArchiveError,
    InvalidArgumentError,
    LibraryNotFoundError,
    SplitLibError,
    UnsupportedArchitectureError,
)
from splitlib.locator import SplitArchiveLocator, find_library, open_library_bytes
from splitlib.paths import data_directory_from_hint_paths, relative_library_path

__version__ = "0.1.0"

__all__ = [
    "ARCHITECTURES",
    "ArchitectureNames",
    "architecture_by_name",
    "resolve_architecture",
    "ARCHIVE_EXTENSION",
    "BASE_ARCHIVE_NAME",
    "LibraryLocation",
    "check_for_library",
    "SplitLibError",
    "InvalidArgumentError",
    "LibraryNotFoundError",
    "InvalidArchiveError",
    "ArchiveEntryError",
    "UnsupportedArchitectureError",
    "SplitArchiveLocator",
    "find_library",
    "open_library_bytes",
    "relative_library_path",
    "data_directory_from_hint_paths",
]
