"""Typer CLI entrypoint for splitlib."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import NoReturn

import typer
import yaml

from splitlib.arch import ArchitectureNames, architecture_by_name, resolve_architecture
from splitlib.config import AppSettings, load_settings
from splitlib.errors import SplitLibError
from splitlib.locator import SplitArchiveLocator
from splitlib.logging_utils import configure_logging
from splitlib.paths import data_directory_from_hint_paths

app = typer.Typer(
    add_completion=False,
    help="Locate native libraries inside split APK directories.",
    no_args_is_help=True,
)

_CONFIG_FILE_OPTION = typer.Option(
    None,
    "--config-file",
    help="Optional settings YAML path.",
    exists=False,
    file_okay=True,
    dir_okay=False,
    readable=True,
)


def _load_and_optionally_configure_logger(
    config_file: Path | None,
    configure: bool,
) -> tuple[AppSettings, logging.Logger]:
    settings = load_settings(config_file=config_file)
    if configure:
        logger = configure_logging(settings.log_file(), level=settings.log_level())
    else:
        logger = logging.getLogger("splitlib")
    return settings, logger


def _select_architecture(settings: AppSettings, arch_name: str | None) -> ArchitectureNames:
    try:
        if arch_name is not None:
            return architecture_by_name(arch_name)
        return settings.architecture_names()
    except SplitLibError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1)


def _echo_arch(arch: ArchitectureNames) -> None:
    typer.echo(f"name: {arch.name}")
    typer.echo(f"archive_match_name: {arch.archive_match_name}")
    typer.echo(f"library_directory_name: {arch.library_directory_name}")


@app.command("show-config")
def show_config(config_file: Path | None = _CONFIG_FILE_OPTION) -> None:
    """Print the effective configuration after env overrides."""

    settings, _ = _load_and_optionally_configure_logger(config_file, configure=False)
    rendered = yaml.safe_dump(settings.as_dict(), sort_keys=False)
    typer.echo(rendered)


@app.command("arch")
def arch(
    machine: str | None = typer.Option(
        None,
        "--machine",
        help="Machine identifier to resolve (defaults to this interpreter's).",
    ),
) -> None:
    """Print the split-archive and library-directory names for an architecture."""

    try:
        resolved = resolve_architecture(machine)
    except SplitLibError as exc:
        _fail(exc)
    _echo_arch(resolved)


@app.command("data-dir")
def data_dir(
    hint_paths: list[str] = typer.Argument(
        ...,
        help="Library hint paths as passed by the engine; the last one is used.",
    ),
    config_file: Path | None = _CONFIG_FILE_OPTION,
) -> None:
    """Derive the app data directory from library hint paths."""

    _, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    try:
        directory = data_directory_from_hint_paths(hint_paths, logger=logger)
    except SplitLibError as exc:
        _fail(exc)
    typer.echo(str(directory))


@app.command("find")
def find(
    archive_directory: Path = typer.Argument(
        ...,
        help="Directory holding base.apk and any split APKs.",
        file_okay=False,
        dir_okay=True,
    ),
    library: str | None = typer.Option(None, "--library", help="Library file name (default from settings)."),
    arch_name: str | None = typer.Option(None, "--arch", help="Architecture override: x86, x86_64, arm64, arm."),
    config_file: Path | None = _CONFIG_FILE_OPTION,
) -> None:
    """Print which APK holds the library and its path inside the APK."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    selected_arch = _select_architecture(settings, arch_name)
    library_name = library or settings.locator.library_name
    locator = SplitArchiveLocator(selected_arch, logger=logger)
    try:
        location = locator.find_library(archive_directory, library_name)
    except (OSError, SplitLibError) as exc:
        _fail(exc)
    with location:
        typer.echo(f"archive_path: {location.archive_path}")
        typer.echo(f"internal_path: {location.internal_path}")


@app.command("inspect")
def inspect(
    archive_directory: Path = typer.Argument(
        ...,
        help="Directory holding base.apk and any split APKs.",
        file_okay=False,
        dir_okay=True,
    ),
    library: str | None = typer.Option(None, "--library", help="Library file name (default from settings)."),
    arch_name: str | None = typer.Option(None, "--arch", help="Architecture override: x86, x86_64, arm64, arm."),
    config_file: Path | None = _CONFIG_FILE_OPTION,
) -> None:
    """Read the library bytes and print their size and SHA-256 digest."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    selected_arch = _select_architecture(settings, arch_name)
    library_name = library or settings.locator.library_name
    locator = SplitArchiveLocator(selected_arch, logger=logger)
    try:
        buffer = locator.open_library_bytes(archive_directory, library_name)
    except (OSError, SplitLibError) as exc:
        _fail(exc)
    payload = buffer.getvalue()
    typer.echo(f"library: {library_name}")
    typer.echo(f"size_bytes: {len(payload)}")
    typer.echo(f"sha256: {hashlib.sha256(payload).hexdigest()}")


def main() -> None:
    """CLI script entrypoint."""

    app()


if __name__ == "__main__":
    main()
