#!/usr/bin/env python3
"""
buildinfo CLI

Rich-based CLI over the buildinfo package: read build metadata stamped into
distributions, modules and CI manifests.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import typer
from rich.console import Console

from buildinfo import configure_logging

from .commands.show import show_build_info, show_commit, show_repository, show_version
from .commands.types import list_decorated_types

# Initialize Rich console
console = Console()


class ArtifactKind(str, Enum):
    AUTO = "auto"
    DISTRIBUTION = "distribution"
    MODULE = "module"
    MANIFEST = "manifest"


# Main app
app = typer.Typer(
    name="buildinfo",
    help="buildinfo - read build metadata and commit hashes from artifacts",
    rich_markup_mode="rich",
    no_args_is_help=True,
    add_completion=False,
)


def version_callback(value: bool):
    if value:
        from buildinfo_cli import get_full_version
        console.print(f"buildinfo v{get_full_version()}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit structured JSON logs on stderr"),
):
    """
    [bold blue]buildinfo[/bold blue]

    Read title, company, version, commit hash and repository URL from
    installed distributions, modules and CI build manifests.

    [dim]Examples:[/dim]
        buildinfo show requests                  # Installed distribution
        buildinfo show buildinfo._version --kind module    # Module dunders
        buildinfo commit build/manifest.yaml     # CI manifest
    """
    try:
        configure_logging(log_level, json_output=json_logs)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")


_TARGET_HELP = "Distribution name, module name or manifest path"
_KIND_HELP = "Artifact kind (auto, distribution, module, manifest)"
_CONFIG_HELP = "Path to buildinfo settings YAML"


@app.command("show")
def show(
    target: str = typer.Argument(..., help=_TARGET_HELP),
    kind: ArtifactKind = typer.Option(ArtifactKind.AUTO, "--kind", "-k", help=_KIND_HELP),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """📦 Show all build metadata of an artifact."""
    show_build_info(target, kind=kind.value, config=config, as_json=as_json)


@app.command("version")
def version(
    target: str = typer.Argument(..., help=_TARGET_HELP),
    kind: ArtifactKind = typer.Option(ArtifactKind.AUTO, "--kind", "-k", help=_KIND_HELP),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
):
    """🏷️  Print the informational version without build metadata."""
    show_version(target, kind=kind.value, config=config)


@app.command("commit")
def commit(
    target: str = typer.Argument(..., help=_TARGET_HELP),
    kind: ArtifactKind = typer.Option(ArtifactKind.AUTO, "--kind", "-k", help=_KIND_HELP),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
):
    """🔖 Print the commit hash embedded in the informational version."""
    show_commit(target, kind=kind.value, config=config)


@app.command("repository")
def repository(
    target: str = typer.Argument(..., help=_TARGET_HELP),
    kind: ArtifactKind = typer.Option(ArtifactKind.AUTO, "--kind", "-k", help=_KIND_HELP),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
):
    """🔗 Print the source repository URL."""
    show_repository(target, kind=kind.value, config=config)


@app.command("types")
def types(
    module: str = typer.Argument(..., help="Importable module to scan"),
    marker: str = typer.Argument(..., help="Marker class as 'package.module:ClassName'"),
):
    """🔎 List classes in a module decorated with a marker."""
    list_decorated_types(module, marker)


if __name__ == "__main__":
    app()
