"""BuildInfo snapshot of one artifact."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .artifacts import Artifact, resolve_artifact
from .config import BuildInfoSettings
from .fields import MetadataField
from .reader import read_commit, read_field, read_informational_version, read_repository_url


class BuildInfo(BaseModel):
    """Every well-known field of one artifact, read once.

    Example:
        >>> info = BuildInfo.from_artifact(ModuleArtifact.from_name("buildinfo._version"))
        >>> info.commit_hash
        'LOCALBUILD'
    """
    model_config = ConfigDict(frozen=True)

    artifact: str = Field(..., description="Display name of the artifact")
    title: str = ""
    description: str = ""
    company: str = ""
    product: str = ""
    copyright: str = ""
    trademark: str = ""
    version: str = ""
    informational_version: str = Field(default="", description="Informational version without build metadata")
    commit_hash: str = ""
    repository_url: str = ""

    @classmethod
    def from_artifact(
        cls, artifact: Artifact, settings: Optional[BuildInfoSettings] = None
    ) -> "BuildInfo":
        settings = settings or BuildInfoSettings()
        normalizer = settings.normalizer()
        return cls(
            artifact=artifact.name,
            title=read_field(artifact, MetadataField.TITLE),
            description=read_field(artifact, MetadataField.DESCRIPTION),
            company=read_field(artifact, MetadataField.COMPANY),
            product=read_field(artifact, MetadataField.PRODUCT),
            copyright=read_field(artifact, MetadataField.COPYRIGHT),
            trademark=read_field(artifact, MetadataField.TRADEMARK),
            version=read_field(artifact, MetadataField.VERSION),
            informational_version=read_informational_version(artifact, normalizer),
            commit_hash=read_commit(artifact, normalizer),
            repository_url=read_repository_url(artifact, settings.repository_url_key),
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


def read_build_info(
    target: str, kind: str = "auto", settings: Optional[BuildInfoSettings] = None
) -> BuildInfo:
    """Resolve `target` and read its BuildInfo in one call."""
    return BuildInfo.from_artifact(resolve_artifact(target, kind), settings)
