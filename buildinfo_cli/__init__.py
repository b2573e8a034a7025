"""
buildinfo CLI Package

A Rich-based CLI for reading build metadata from distributions, modules and
CI manifests.
"""

from .main import app
from buildinfo._version import __version__, get_full_version, get_version_dict

__all__ = ["app", "__version__", "get_full_version", "get_version_dict"]
