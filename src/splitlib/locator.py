"""Find the split APK holding a native library and read the library bytes.

Android splits APKs per ABI, so the library may live in an architecture split
(``base-arm64_v8a.apk``, ``split_config.arm64_v8a.apk``) or, when no split
applies, in ``base.apk`` itself. Splits whose name carries the architecture
token are probed first so a wrong-architecture copy in another archive is
never picked up.
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path

from splitlib.arch import ArchitectureNames, resolve_architecture
from splitlib.archive import (
    ARCHIVE_EXTENSION,
    BASE_ARCHIVE_NAME,
    LibraryLocation,
    check_for_library,
)
from splitlib.errors import SplitLibError
from splitlib.paths import relative_library_path

LOGGER = logging.getLogger(__name__)


def _text_file_name(name: str) -> str | None:
    """Return ``name`` if it is valid text, else None.

    On POSIX, undecodable bytes in file names surface as lone surrogates.
    """

    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return name


class SplitArchiveLocator:
    """Scan a directory of APKs for the one holding a given native library."""

    def __init__(
        self,
        arch: ArchitectureNames,
        logger: logging.Logger | None = None,
    ) -> None:
        self.arch = arch
        self.logger = logger or LOGGER

    def is_candidate(self, file_name: str) -> bool:
        """True for ``.apk`` names containing the architecture split token.

        ``base.apk`` only matches if it happens to carry the token.
        """

        return file_name.endswith(ARCHIVE_EXTENSION) and self.arch.archive_match_name in file_name

    def candidate_paths(self, archive_directory: Path) -> list[Path]:
        """Return split candidates in directory enumeration order."""

        candidates: list[Path] = []
        with os.scandir(archive_directory) as entries:
            for entry in entries:
                if entry.is_dir():
                    continue
                file_name = _text_file_name(entry.name)
                if file_name is None:
                    self.logger.debug("locator.skip_non_text_name dir=%s", archive_directory)
                    continue
                if self.is_candidate(file_name):
                    candidates.append(Path(archive_directory) / file_name)
        return candidates

    def find_library(self, archive_directory: Path, library_file_name: str) -> LibraryLocation:
        """Return the first archive listing the library, falling back to base.apk.

        Failures on split candidates are logged and skipped. Failures on
        ``base.apk`` propagate: ``FileNotFoundError`` when it is missing,
        ``InvalidArchiveError`` when it is not a zip, and
        ``LibraryNotFoundError`` when it lacks the entry.
        """

        archive_directory = Path(archive_directory)
        library_path = relative_library_path(library_file_name, self.arch)

        for candidate in self.candidate_paths(archive_directory):
            self.logger.debug("locator.check_split apk=%s", candidate)
            try:
                location = check_for_library(candidate, library_path)
            except (OSError, SplitLibError) as exc:
                self.logger.debug("locator.skip_split apk=%s reason=%s", candidate, exc)
                continue
            self.logger.info("locator.found_in_split apk=%s path=%s", candidate, library_path)
            return location

        base_archive_path = archive_directory / BASE_ARCHIVE_NAME
        self.logger.debug("locator.check_base apk=%s", base_archive_path)
        location = check_for_library(base_archive_path, library_path)
        self.logger.info("locator.found_in_base apk=%s path=%s", base_archive_path, library_path)
        return location

    def open_library_bytes(self, archive_directory: Path, library_file_name: str) -> io.BytesIO:
        """Read the matched library fully into a seekable in-memory buffer.

        Binary patch consumers need random access, and native library images
        are small enough to hold in memory.
        """

        with self.find_library(archive_directory, library_file_name) as location:
            payload = location.read_bytes()
        self.logger.debug(
            "locator.read_library apk=%s path=%s bytes=%s",
            location.archive_path,
            location.internal_path,
            len(payload),
        )
        return io.BytesIO(payload)


def find_library(
    archive_directory: Path,
    library_file_name: str,
    arch: ArchitectureNames | None = None,
    logger: logging.Logger | None = None,
) -> LibraryLocation:
    """Locate ``library_file_name`` under ``archive_directory`` for ``arch``.

    ``arch`` defaults to the running interpreter's architecture.
    """

    active_arch = arch or resolve_architecture()
    return SplitArchiveLocator(active_arch, logger=logger).find_library(archive_directory, library_file_name)


def open_library_bytes(
    archive_directory: Path,
    library_file_name: str,
    arch: ArchitectureNames | None = None,
    logger: logging.Logger | None = None,
) -> io.BytesIO:
    """Return a seekable buffer holding the bytes of ``library_file_name``."""

    active_arch = arch or resolve_architecture()
    return SplitArchiveLocator(active_arch, logger=logger).open_library_bytes(archive_directory, library_file_name)
