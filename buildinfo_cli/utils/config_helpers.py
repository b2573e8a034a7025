"""
Configuration helper utilities for buildinfo CLI

Functions to find settings files and resolve marker references.
"""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from buildinfo import BuildInfoSettings, load_settings


def find_default_config() -> Optional[Path]:
    """Find the default settings file, if any."""
    default_paths = [
        Path("buildinfo.yaml"),
        Path("config/buildinfo.yaml"),
    ]

    for config_path in default_paths:
        if config_path.exists():
            return config_path

    return None


def load_cli_settings(config: Optional[str]) -> BuildInfoSettings:
    """Load settings from --config, the default location, or defaults only."""
    config_path = Path(config) if config else find_default_config()
    return load_settings(config_path)


def import_marker(reference: str) -> type:
    """
    Import a marker class from a 'package.module:ClassName' reference.

    Raises:
        ValueError: If the reference is malformed or does not name a class
    """
    module_name, sep, class_name = reference.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Invalid marker reference: {reference}. Expected 'package.module:ClassName'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import marker module '{module_name}': {e}") from e

    marker_type = getattr(module, class_name, None)
    if not isinstance(marker_type, type):
        raise ValueError(f"'{class_name}' is not a class in module '{module_name}'")
    return marker_type
