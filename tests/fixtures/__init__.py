"""
Shared Test Fixtures for buildinfo

This package contains reusable test fixtures:
- artifacts.py: Module, manifest and distribution artifacts with known metadata
"""

from .artifacts import (
    COMMIT_SHA,
    INFORMATIONAL_VERSION,
    REPOSITORY_URL,
    bare_module,
    empty_manifest,
    make_distribution,
    make_module,
    manifest_path,
    stamped_artifact,
    stamped_module,
    write_manifest,
)

__all__ = [
    # Constants
    "COMMIT_SHA",
    "INFORMATIONAL_VERSION",
    "REPOSITORY_URL",

    # Artifact fixtures
    "make_module",
    "stamped_module",
    "bare_module",
    "stamped_artifact",
    "empty_manifest",
    "write_manifest",
    "manifest_path",
    "make_distribution",
]
