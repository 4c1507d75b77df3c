"""Zip archive probing and the owned handle for a matched library."""

from __future__ import annotations

import logging
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from splitlib.errors import ArchiveEntryError, InvalidArchiveError, LibraryNotFoundError

LOGGER = logging.getLogger(__name__)

ARCHIVE_EXTENSION = ".apk"
BASE_ARCHIVE_NAME = f"base{ARCHIVE_EXTENSION}"


@dataclass(slots=True)
class LibraryLocation:
    """An opened archive plus the entry name confirmed present in it.

    The location owns ``archive``; entry readers are opened from it on demand
    rather than held across calls.
    """

    archive: zipfile.ZipFile
    internal_path: str
    archive_path: Path

    def open_entry(self) -> IO[bytes]:
        """Open a fresh reader for the matched entry."""

        try:
            return self.archive.open(self.internal_path)
        except (KeyError, zipfile.BadZipFile, NotImplementedError, EOFError) as exc:
            raise ArchiveEntryError(self.archive_path, self.internal_path) from exc

    def read_bytes(self) -> bytes:
        """Read the whole matched entry."""

        with self.open_entry() as handle:
            try:
                return handle.read()
            except (zipfile.BadZipFile, zlib.error, EOFError) as exc:
                raise ArchiveEntryError(self.archive_path, self.internal_path) from exc

    def close(self) -> None:
        self.archive.close()

    def __enter__(self) -> "LibraryLocation":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_archive(archive_path: Path) -> zipfile.ZipFile:
    """Open ``archive_path`` as a zip file.

    ``OSError`` (missing or unreadable file) propagates unchanged; a file that
    is not a zip, or whose central directory is corrupt, raises
    ``InvalidArchiveError``.
    """

    try:
        return zipfile.ZipFile(archive_path, "r")
    except (zipfile.BadZipFile, UnicodeDecodeError, ValueError, EOFError) as exc:
        raise InvalidArchiveError(archive_path, str(exc)) from exc


def check_for_library(archive_path: Path, library_path: str) -> LibraryLocation:
    """Return a location if the archive at ``archive_path`` lists ``library_path``."""

    archive = open_archive(archive_path)
    if library_path in archive.namelist():
        return LibraryLocation(archive=archive, internal_path=library_path, archive_path=archive_path)
    archive.close()
    raise LibraryNotFoundError(archive_path, library_path)
