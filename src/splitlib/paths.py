"""Path derivation for libraries inside APKs and for the app data directory."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Sequence

from splitlib.arch import ArchitectureNames
from splitlib.errors import InvalidArgumentError

LOGGER = logging.getLogger(__name__)

HINT_PATHS_FIELD = "hint_paths"
# libapp.so, its architecture directory, and "lib".
_HINT_PATH_TRAILING_SEGMENTS = 3


def relative_library_path(library_file_name: str, arch: ArchitectureNames) -> str:
    """Return the in-archive path of a native library, e.g. ``lib/x86_64/libapp.so``."""

    return str(PurePosixPath("lib") / arch.library_directory_name / library_file_name)


def data_directory_from_library_path(library_path: str) -> PurePosixPath:
    """Walk up three levels from the extracted library path to the app data dir.

    For example::

        /data/app/~~7LtReIkm5snW_oXeDoJ5TQ==/com.example-rpkD==/lib/x86_64/libapp.so

    yields ``/data/app/~~7LtReIkm5snW_oXeDoJ5TQ==/com.example-rpkD==``.
    """

    path = PurePosixPath(library_path)
    parents = path.parents
    if len(parents) < _HINT_PATH_TRAILING_SEGMENTS:
        raise InvalidArgumentError(HINT_PATHS_FIELD, f"invalid path: {library_path}")
    return parents[_HINT_PATH_TRAILING_SEGMENTS - 1]


def data_directory_from_hint_paths(
    hint_paths: Sequence[str],
    logger: logging.Logger | None = None,
) -> PurePosixPath:
    """Recover the app data directory from the engine's library hint paths.

    The host passes two entries today: the bare ``libapp.so`` name for dlopen,
    then the full path Android would extract the library to (built from
    ``ApplicationInfo.nativeLibraryDir``). The last entry is assumed to be that
    full path. Nothing on the platform side guarantees this layout.
    """

    effective_logger = logger or LOGGER
    if not hint_paths:
        raise InvalidArgumentError(HINT_PATHS_FIELD, "empty")
    full_library_path = hint_paths[-1]
    effective_logger.debug("paths.hint_examined hint=%s", full_library_path)
    return data_directory_from_library_path(full_library_path)
