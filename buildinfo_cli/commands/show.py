"""
Show commands for buildinfo CLI

Read one artifact and print its build metadata, either as a Rich table or as
plain values for scripts.
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from buildinfo import BuildInfo, BuildInfoError, BuildInfoSettings, resolve_artifact

from ..utils.config_helpers import load_cli_settings

console = Console()
err_console = Console(stderr=True)

_LABELS = [
    ("title", "Title"),
    ("description", "Description"),
    ("company", "Company"),
    ("product", "Product"),
    ("copyright", "Copyright"),
    ("trademark", "Trademark"),
    ("version", "Version"),
    ("informational_version", "Informational Version"),
    ("commit_hash", "Commit"),
    ("repository_url", "Repository"),
]


def print_error(error: BuildInfoError) -> None:
    err_console.print(error.format_diagnostic_message(), style="red", markup=False, highlight=False)


def _read(target: str, kind: str, config: Optional[str]) -> BuildInfo:
    try:
        settings: BuildInfoSettings = load_cli_settings(config)
        return BuildInfo.from_artifact(resolve_artifact(target, kind), settings)
    except BuildInfoError as e:
        print_error(e)
        raise typer.Exit(1)


def show_build_info(target: str, kind: str = "auto", config: Optional[str] = None, as_json: bool = False):
    """Print every field of an artifact."""
    info = _read(target, kind, config)

    if as_json:
        typer.echo(json.dumps(info.to_dict(), indent=2))
        return

    table = Table(title=f"Build metadata: {info.artifact}", show_header=True, header_style="bold blue")
    table.add_column("Field", style="bold cyan")
    table.add_column("Value", overflow="fold")

    data = info.to_dict()
    for key, label in _LABELS:
        value = data[key]
        table.add_row(label, Text(value) if value else Text("-", style="dim"))

    console.print(table)


def show_version(target: str, kind: str = "auto", config: Optional[str] = None):
    """Print the normalized informational version."""
    typer.echo(_read(target, kind, config).informational_version)


def show_commit(target: str, kind: str = "auto", config: Optional[str] = None):
    """Print the embedded commit hash."""
    typer.echo(_read(target, kind, config).commit_hash)


def show_repository(target: str, kind: str = "auto", config: Optional[str] = None):
    """Print the repository URL."""
    typer.echo(_read(target, kind, config).repository_url)
