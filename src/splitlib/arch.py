"""CPU architecture naming conventions for split APKs.

Android bundles name architecture-specific split archives differently from
the library directories inside them, e.g. ``base-armeabi_v7a.apk`` holds
``lib/armeabi-v7a/libapp.so``. Both names are needed, and they are never
interchangeable.
"""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass
from typing import Final

from splitlib.errors import UnsupportedArchitectureError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ArchitectureNames:
    """Archive-name and library-directory tokens for one ABI family."""

    name: str
    # Token found in split archive file names, e.g. base-arm64_v8a.apk.
    archive_match_name: str
    # Directory inside the archive, e.g. lib/arm64-v8a/libapp.so.
    library_directory_name: str


# Generated from the apk splits bundletool produces.
# https://developer.android.com/ndk/guides/abis
X86: Final = ArchitectureNames(name="x86", archive_match_name="x86", library_directory_name="x86")
X86_64: Final = ArchitectureNames(name="x86_64", archive_match_name="x86_64", library_directory_name="x86_64")
ARM64: Final = ArchitectureNames(name="arm64", archive_match_name="arm64_v8a", library_directory_name="arm64-v8a")
ARM: Final = ArchitectureNames(name="arm", archive_match_name="armeabi_v7a", library_directory_name="armeabi-v7a")

ARCHITECTURES: Final[dict[str, ArchitectureNames]] = {
    arch.name: arch for arch in (X86, X86_64, ARM64, ARM)
}

_MACHINE_ALIASES: Final[dict[str, str]] = {
    "x86": "x86",
    "i386": "x86",
    "i686": "x86",
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv8l": "arm64",
    "armv7l": "arm",
    "armv7": "arm",
    "arm": "arm",
}


def architecture_by_name(name: str) -> ArchitectureNames:
    """Return the naming pair for an ABI family name (x86, x86_64, arm64, arm)."""

    try:
        return ARCHITECTURES[name.strip().lower()]
    except KeyError as exc:
        raise UnsupportedArchitectureError(name) from exc


def resolve_architecture(machine: str | None = None) -> ArchitectureNames:
    """Return the naming pair for a machine identifier.

    Defaults to the interpreter's ``platform.machine()``. Call once at startup
    and inject the result; the pair never changes for a running process.
    """

    raw_machine = machine if machine is not None else platform.machine()
    family = _MACHINE_ALIASES.get(raw_machine.strip().lower())
    if family is None:
        raise UnsupportedArchitectureError(raw_machine)
    arch = ARCHITECTURES[family]
    LOGGER.debug("arch.resolved machine=%s family=%s", raw_machine, arch.name)
    return arch
