"""
Types command for buildinfo CLI

List the classes of a module carrying a given marker.
"""

from __future__ import annotations

import typer
from rich.console import Console

from buildinfo import BuildInfoError, ModuleArtifact, decorated_types

from ..utils.config_helpers import import_marker
from .show import print_error

console = Console()


def list_decorated_types(module: str, marker_reference: str):
    """Print 'module.ClassName' for every marked class in `module`."""
    try:
        marker_type = import_marker(marker_reference)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="MARKER")

    try:
        artifact = ModuleArtifact.from_name(module)
    except BuildInfoError as e:
        print_error(e)
        raise typer.Exit(1)

    found = [f"{cls.__module__}.{cls.__qualname__}" for cls in decorated_types(artifact, marker_type)]
    if not found:
        console.print(f"No types in {module} carry {marker_type.__name__}", style="yellow", markup=False)
        return

    for name in found:
        typer.echo(name)
