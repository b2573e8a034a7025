"""
buildinfo Version Information

This module provides centralized version management for buildinfo.
Follow Semantic Versioning 2.0.0 (https://semver.org/)

Version format: MAJOR.MINOR.PATCH[+COMMIT]
- MAJOR: Incompatible API changes
- MINOR: New artifact kinds or CLI commands in a backwards-compatible manner
- PATCH: Backwards-compatible bug fixes

The module doubles as a module artifact: `buildinfo show buildinfo._version --kind module`
reads the dunder constants below.

Version History:
- 1.0.0: Initial release
  - Distribution, module and manifest artifacts
  - Informational version normalization (prefix and legacy cut)
  - typer CLI
"""

from __future__ import annotations

__version__ = "1.0.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Descriptive metadata
__title__ = "buildinfo"
__description__ = "Build metadata reader and informational-version normalizer"
__company__ = "buildinfo contributors"
__product__ = "buildinfo"
__copyright__ = "Copyright (c) 2026 buildinfo contributors"
__trademark__ = ""

# Git information (can be populated by CI/CD or build scripts)
__git_sha__ = None
__git_branch__ = None

__metadata__ = {
    "RepositoryUrl": "https://github.com/buildinfo/buildinfo",
}


def get_version() -> str:
    """Get the current version string."""
    return __version__


def get_version_info() -> tuple[int, int, int]:
    """Get version as a tuple of integers (major, minor, patch)."""
    return __version_info__


def get_full_version() -> str:
    """Get full version string including git info if available."""
    version = __version__
    if __git_sha__:
        version += f"+{__git_sha__}"
    return version


# Informational version in the `<version>+<commit>` shape read by the normalizer
__informational_version__ = get_full_version()


def get_version_dict() -> dict[str, str | tuple[int, int, int] | None]:
    """Get version information as a dictionary."""
    return {
        "version": __version__,
        "version_info": __version_info__,
        "informational_version": __informational_version__,
        "git_sha": __git_sha__,
        "git_branch": __git_branch__,
    }
