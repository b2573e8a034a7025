"""
buildinfo core package.

Reads build metadata (title, company, version, informational version,
repository URL, commit hash, ...) stamped into installed distributions,
modules and CI manifests, and normalizes informational versions.
"""

from ._version import __version__, get_full_version, get_version_dict

from .artifacts import (Artifact, DistributionArtifact, ManifestArtifact,
                        ModuleArtifact, resolve_artifact)
from .config import BuildInfoSettings, load_settings
from .exceptions import (ArtifactNotFoundError, BuildInfoError,
                         ConfigurationError, ErrorCategory, ErrorSeverity,
                         InvalidConfigurationError, ManifestFormatError,
                         ResolutionHint)
from .fields import REPOSITORY_URL_KEY, MetadataField
from .logger import JSONFormatter, configure_logging
from .models import BuildInfo, read_build_info
from .reader import (lookup, read_commit, read_field,
                     read_informational_version, read_repository_url)
from .scanning import decorated_types, marker, markers_of
from .versioning import (COMMIT_LENGTH_THRESHOLD,
                         DEFAULT_INFORMATIONAL_VERSION, VersionCut,
                         VersionNormalizer, commit_hash, normalized_version)

__all__ = [
    # Version
    "__version__",
    "get_full_version",
    "get_version_dict",
    # Fields
    "MetadataField",
    "REPOSITORY_URL_KEY",
    # Artifacts
    "Artifact",
    "DistributionArtifact",
    "ModuleArtifact",
    "ManifestArtifact",
    "resolve_artifact",
    # Reader
    "lookup",
    "read_field",
    "read_repository_url",
    "read_informational_version",
    "read_commit",
    # Versioning
    "VersionCut",
    "VersionNormalizer",
    "normalized_version",
    "commit_hash",
    "DEFAULT_INFORMATIONAL_VERSION",
    "COMMIT_LENGTH_THRESHOLD",
    # Snapshot
    "BuildInfo",
    "read_build_info",
    # Scanning
    "marker",
    "markers_of",
    "decorated_types",
    # Config
    "BuildInfoSettings",
    "load_settings",
    # Logging
    "JSONFormatter",
    "configure_logging",
    # Exceptions
    "BuildInfoError",
    "ArtifactNotFoundError",
    "ManifestFormatError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ErrorCategory",
    "ErrorSeverity",
    "ResolutionHint",
]
