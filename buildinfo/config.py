"""Settings model and loader for buildinfo.

Settings come from an optional YAML file, then environment overrides:

    version_cut: legacy
    fallback_informational_version: "0.0.0+UNKNOWN"

    BUILDINFO_COMMIT_LENGTH_THRESHOLD=8
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationError, InvalidConfigurationError
from .fields import REPOSITORY_URL_KEY
from .versioning import (
    COMMIT_LENGTH_THRESHOLD,
    DEFAULT_INFORMATIONAL_VERSION,
    VersionCut,
    VersionNormalizer,
)


class BuildInfoSettings(BaseModel):
    """Normalizer and lookup options."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    version_cut: VersionCut = Field(default=VersionCut.PREFIX, description="Cut rule for normalized versions")
    fallback_informational_version: str = Field(
        default=DEFAULT_INFORMATIONAL_VERSION,
        description="Informational version used when none is embedded",
    )
    commit_length_threshold: int = Field(default=COMMIT_LENGTH_THRESHOLD, ge=0)
    repository_url_key: str = Field(default=REPOSITORY_URL_KEY, min_length=1)

    @field_validator("fallback_informational_version")
    @classmethod
    def fallback_carries_commit(cls, value: str) -> str:
        if "+" not in value:
            raise ValueError("fallback informational version must contain '+'")
        return value

    def normalizer(self) -> VersionNormalizer:
        return VersionNormalizer(
            cut=self.version_cut,
            fallback=self.fallback_informational_version,
            threshold=self.commit_length_threshold,
        )


def _lower_keys(d: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize dictionary keys to lowercase."""
    return {str(k).lower(): v for k, v in d.items()}


def _apply_env_overrides(cfg: Dict[str, Any], env: Dict[str, str], prefix: str) -> None:
    """Apply env overrides for top-level settings.

    Example: BUILDINFO_VERSION_CUT=legacy overrides version_cut
    """
    plen = len(prefix)
    for key, value in env.items():
        if not key.startswith(prefix):
            continue
        leaf = key[plen:].lower()
        if leaf not in BuildInfoSettings.model_fields:
            continue
        # pydantic coerces numeric strings for int fields
        cfg[leaf] = value


def load_settings(
    path: Path | str | None = None,
    *,
    env_overrides: bool = True,
    env: Optional[Dict[str, str]] = None,
    env_prefix: str = "BUILDINFO_",
) -> BuildInfoSettings:
    """Load YAML settings and return a typed `BuildInfoSettings`.

    - `path=None` starts from defaults
    - Optionally applies environment variable overrides
    """
    data: Dict[str, Any] = {}
    if path is not None:
        p = Path(path)
        if not p.exists():
            raise ConfigurationError(f"Config file not found: {p}", config_path=str(p))

        with open(p, "r") as fh:
            try:
                raw = yaml.safe_load(fh) or {}
            except yaml.YAMLError as e:
                raise InvalidConfigurationError(
                    "Config file is not valid YAML", config_path=str(p), original_exception=e
                ) from e
        if not isinstance(raw, dict):
            raise InvalidConfigurationError("Config file must hold a mapping", config_path=str(p))
        data = _lower_keys(raw)

    if env_overrides:
        _apply_env_overrides(data, env if env is not None else dict(os.environ), env_prefix)

    try:
        return BuildInfoSettings(**data)
    except ValidationError as e:
        raise InvalidConfigurationError(
            f"Invalid buildinfo settings: {e}",
            config_path=str(path) if path is not None else None,
            original_exception=e,
        ) from e
