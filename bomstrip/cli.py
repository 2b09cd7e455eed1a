"""Typer CLI entrypoint for bomstrip."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from . import __version__
from .config import BomStripSettings, CLIConfig
from .logging import configure_logging
from .metrics import BomStripMetrics
from .paths import expand_arguments
from .pipeline import process_files

app = typer.Typer(add_completion=False, help="Remove the UTF-8 BOM from files in place.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bomstrip {__version__}")
        raise typer.Exit()


def _load_settings() -> BomStripSettings:
    try:
        return BomStripSettings()
    except ValidationError as exc:
        typer.echo(f"invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2) from exc


@app.command()
def run(
    files: List[Path] = typer.Argument(..., help="files to process"),
    nobackup: bool = typer.Option(False, "-n", "--nobackup", help="do not create backup files"),
    machine: bool = typer.Option(False, "--machine", help="print a JSON summary on stdout"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="show the version and exit",
    ),
) -> None:
    settings = _load_settings()
    config = CLIConfig(
        files=tuple(expand_arguments(files)),
        keep_backup=not nobackup,
        machine_output=machine,
        settings=settings,
    )
    configure_logging(settings.level_number, correlation_id=settings.correlation_id)

    metrics = BomStripMetrics()
    summary = process_files(config.files, keep_backup=config.keep_backup, metrics=metrics)

    if config.machine_output:
        typer.echo(json.dumps(summary.to_payload(), ensure_ascii=False))
    elif summary.first_error is not None:
        typer.echo(f"error: {summary.first_error.message}", err=True)

    raise typer.Exit(code=summary.exit_code)


def main() -> None:
    """Console-script entrypoint."""

    app()


if __name__ == "__main__":  # pragma: no cover
    main()
