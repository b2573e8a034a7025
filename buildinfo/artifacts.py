"""
Artifact adapters exposing embedded build metadata.

An artifact is anything build metadata was stamped into at build time:

- DistributionArtifact: an installed distribution's core metadata
  (Name, Summary, Author, Version, Project-URL, ...)
- ModuleArtifact: an imported module's dunder constants
  (__title__, __version__, __informational_version__, __metadata__, ...)
- ManifestArtifact: a YAML manifest written by a CI step

Distribution and manifest adapters load their source once at construction;
module adapters read the live module attributes.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from importlib import metadata as importlib_metadata
from pathlib import Path
from types import ModuleType
from typing import (Any, Dict, List, Mapping, Optional, Protocol, Sequence,
                    Tuple, runtime_checkable)

import yaml

from .exceptions import ArtifactNotFoundError, ManifestFormatError
from .fields import MetadataField

logger = logging.getLogger(__name__)

MetadataPair = Tuple[str, Optional[str]]

ARTIFACT_KINDS = ("auto", "distribution", "module", "manifest")
MANIFEST_SUFFIXES = (".yaml", ".yml")


@runtime_checkable
class Artifact(Protocol):
    """Read-only view over one artifact's embedded metadata."""

    name: str

    def field_values(self, field: MetadataField) -> Sequence[str]:
        """All values stamped for `field`, in declaration order."""
        ...

    def metadata_pairs(self) -> Sequence[MetadataPair]:
        """Generic key/value metadata pairs."""
        ...

    def types(self) -> Sequence[type]:
        """Classes defined by the artifact, empty when not applicable."""
        ...


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_values(value: Any) -> List[str]:
    """Scalar or list of scalars -> list of strings."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [_as_text(v) for v in value]
    return [_as_text(value)]


def _is_pair_entry(item: Any) -> bool:
    if isinstance(item, Mapping):
        return True
    return isinstance(item, (list, tuple)) and len(item) == 2


def _as_pairs(value: Any) -> List[MetadataPair]:
    """Mapping, list of (key, value), or list of {key, value} -> pairs.

    Entries of any other shape are skipped.
    """
    if not value:
        return []
    if isinstance(value, Mapping):
        return [(_as_text(k), None if v is None else _as_text(v)) for k, v in value.items()]
    if not isinstance(value, (list, tuple)):
        logger.debug("Ignoring metadata of type %s", type(value).__name__)
        return []

    pairs: List[MetadataPair] = []
    for item in value:
        if not _is_pair_entry(item):
            logger.debug("Ignoring malformed metadata entry %r", item)
            continue
        if isinstance(item, Mapping):
            key, val = item.get("key"), item.get("value")
        else:
            key, val = item
        pairs.append((_as_text(key), None if val is None else _as_text(val)))
    return pairs


# =============================================================================
# Installed distributions
# =============================================================================

_DISTRIBUTION_HEADERS: Dict[MetadataField, Tuple[str, ...]] = {
    MetadataField.TITLE: ("Name",),
    MetadataField.PRODUCT: ("Name",),
    MetadataField.DESCRIPTION: ("Summary",),
    MetadataField.COMPANY: ("Author", "Author-email"),
    MetadataField.VERSION: ("Version",),
    # PEP 440 local version labels carry the commit: 1.2.3+a34a913
    MetadataField.INFORMATIONAL_VERSION: ("Version",),
    MetadataField.COPYRIGHT: (),
    MetadataField.TRADEMARK: (),
}


class DistributionArtifact:
    """Core metadata of an installed distribution."""

    def __init__(self, distribution: importlib_metadata.Distribution):
        self._metadata = distribution.metadata
        self.name = _as_text(self._metadata["Name"])

    @classmethod
    def from_name(cls, name: str) -> "DistributionArtifact":
        try:
            distribution = importlib_metadata.distribution(name)
        except (importlib_metadata.PackageNotFoundError, ValueError) as e:
            # ValueError: empty or otherwise unusable distribution name
            raise ArtifactNotFoundError(name, "distribution", original_exception=e) from e
        return cls(distribution)

    def field_values(self, field: MetadataField) -> List[str]:
        values: List[str] = []
        for header in _DISTRIBUTION_HEADERS[MetadataField(field)]:
            values.extend(_as_text(v) for v in self._metadata.get_all(header) or [])
        return values

    def metadata_pairs(self) -> List[MetadataPair]:
        pairs: List[MetadataPair] = []
        for entry in self._metadata.get_all("Project-URL") or []:
            label, _, url = entry.partition(",")
            pairs.append((label.strip(), url.strip()))
        return pairs

    def types(self) -> List[type]:
        return []

    def __repr__(self) -> str:
        return f"DistributionArtifact({self.name!r})"


# =============================================================================
# Imported modules
# =============================================================================

_MODULE_ATTRIBUTES: Dict[MetadataField, Tuple[str, ...]] = {
    MetadataField.TITLE: ("__title__",),
    MetadataField.COMPANY: ("__company__", "__author__"),
    MetadataField.COPYRIGHT: ("__copyright__",),
    MetadataField.DESCRIPTION: ("__description__",),
    MetadataField.PRODUCT: ("__product__",),
    MetadataField.TRADEMARK: ("__trademark__",),
    MetadataField.VERSION: ("__version__",),
    MetadataField.INFORMATIONAL_VERSION: ("__informational_version__",),
}


class ModuleArtifact:
    """Dunder constants of an imported module.

    Empty dunders are skipped, so `__company__ = ""` still lets
    `__author__` supply the company.
    """

    def __init__(self, module: ModuleType):
        self._module = module
        self.name = module.__name__

    @classmethod
    def from_name(cls, name: str) -> "ModuleArtifact":
        try:
            module = importlib.import_module(name)
        except (ImportError, TypeError, ValueError) as e:
            # TypeError: relative names such as "./build.yaml"; ValueError: empty name
            raise ArtifactNotFoundError(name, "module", original_exception=e) from e
        return cls(module)

    def field_values(self, field: MetadataField) -> List[str]:
        values: List[str] = []
        for attribute in _MODULE_ATTRIBUTES[MetadataField(field)]:
            values.extend(v for v in _as_values(getattr(self._module, attribute, None)) if v)
        return values

    def metadata_pairs(self) -> List[MetadataPair]:
        return _as_pairs(getattr(self._module, "__metadata__", None))

    def types(self) -> List[type]:
        return [
            obj for _, obj in inspect.getmembers(self._module, inspect.isclass)
            if obj.__module__ == self._module.__name__
        ]

    def __repr__(self) -> str:
        return f"ModuleArtifact({self.name!r})"


# =============================================================================
# CI build manifests
# =============================================================================

class ManifestArtifact:
    """
    Build metadata written to a YAML manifest, e.g. by a CI step:

        title: Example Service
        company: Example Corp
        version: 2.5.0
        informational_version: 2.5.0+0123456789abcdef0123456789abcdef01234567
        metadata:
          RepositoryUrl: https://example.com/repo.git
    """

    def __init__(self, data: Mapping[str, Any], name: str = "manifest"):
        self.name = name
        self._data = {str(k).lower(): v for k, v in data.items()}

    @classmethod
    def from_path(cls, path: Path | str) -> "ManifestArtifact":
        p = Path(path)
        if not p.is_file():
            raise ArtifactNotFoundError(str(p), "manifest")

        with open(p, "r") as fh:
            try:
                raw = yaml.safe_load(fh)
            except yaml.YAMLError as e:
                raise ManifestFormatError(str(p), "not valid YAML", original_exception=e) from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ManifestFormatError(str(p), "top level must be a mapping")

        metadata = raw.get("metadata")
        if metadata and not isinstance(metadata, Mapping) and not (
            isinstance(metadata, list) and all(_is_pair_entry(item) for item in metadata)
        ):
            raise ManifestFormatError(str(p), "metadata must be a mapping or a list of key/value entries")

        return cls(raw, name=str(p))

    def field_values(self, field: MetadataField) -> List[str]:
        return _as_values(self._data.get(MetadataField(field).value))

    def metadata_pairs(self) -> List[MetadataPair]:
        return _as_pairs(self._data.get("metadata"))

    def types(self) -> List[type]:
        return []

    def __repr__(self) -> str:
        return f"ManifestArtifact({self.name!r})"


# =============================================================================
# Resolution
# =============================================================================

def _looks_like_manifest(target: str) -> bool:
    path = Path(target)
    return path.suffix.lower() in MANIFEST_SUFFIXES and path.is_file()


def resolve_artifact(target: str, kind: str = "auto") -> Artifact:
    """Turn a user-supplied target into an artifact.

    `auto` tries, in order: an existing manifest path, an installed
    distribution, an importable module.
    """
    if kind not in ARTIFACT_KINDS:
        raise ValueError(f"Unknown artifact kind: {kind}. Expected one of {', '.join(ARTIFACT_KINDS)}")

    if kind == "manifest":
        return ManifestArtifact.from_path(target)
    if kind == "distribution":
        return DistributionArtifact.from_name(target)
    if kind == "module":
        return ModuleArtifact.from_name(target)

    if _looks_like_manifest(target):
        logger.debug("Resolved %s as manifest", target)
        return ManifestArtifact.from_path(target)

    try:
        artifact: Artifact = DistributionArtifact.from_name(target)
        logger.debug("Resolved %s as distribution", target)
        return artifact
    except ArtifactNotFoundError:
        pass

    try:
        artifact = ModuleArtifact.from_name(target)
        logger.debug("Resolved %s as module", target)
        return artifact
    except ArtifactNotFoundError:
        pass

    raise ArtifactNotFoundError(target)

