"""
Field accessors over artifacts.

Every accessor is total: absent or empty metadata reads as "" (or, for the
commit hash, the local-build sentinel). Nothing here raises for missing data.
"""

from __future__ import annotations

import logging
from typing import Optional

from .artifacts import Artifact
from .fields import REPOSITORY_URL_KEY, MetadataField
from .versioning import VersionNormalizer

logger = logging.getLogger(__name__)

_DEFAULT_NORMALIZER = VersionNormalizer()


def _first_value(artifact: Artifact, field: MetadataField) -> Optional[str]:
    values = artifact.field_values(field)
    if not values:
        return None
    return values[0]


def lookup(artifact: Artifact, field: MetadataField) -> Optional[str]:
    """Return the first value stamped for `field`, or None when missing or empty."""
    value = _first_value(artifact, field)
    if not value:
        logger.debug("%s has no %s", artifact.name, MetadataField(field).value)
        return None
    return value


def read_field(artifact: Artifact, field: MetadataField) -> str:
    """Return the field verbatim, or "" when absent."""
    return lookup(artifact, field) or ""


def read_repository_url(artifact: Artifact, key: str = REPOSITORY_URL_KEY) -> str:
    """Return the value of the metadata pair whose key is exactly `key`."""
    for pair_key, value in artifact.metadata_pairs():
        if pair_key == key:
            return value or ""
    return ""


def read_informational_version(
    artifact: Artifact, normalizer: Optional[VersionNormalizer] = None
) -> str:
    """Informational version with the build-metadata suffix removed."""
    normalizer = normalizer or _DEFAULT_NORMALIZER
    return normalizer.normalized_version(lookup(artifact, MetadataField.INFORMATIONAL_VERSION))


def read_commit(artifact: Artifact, normalizer: Optional[VersionNormalizer] = None) -> str:
    """Commit hash embedded in the informational version.

    Uses the first stamped value as-is, empty strings included; the length
    threshold in the normalizer decides whether it is usable.
    """
    normalizer = normalizer or _DEFAULT_NORMALIZER
    return normalizer.commit_hash(_first_value(artifact, MetadataField.INFORMATIONAL_VERSION))
