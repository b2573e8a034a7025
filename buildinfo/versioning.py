"""
Informational version normalization.

An informational version is a version string optionally extended with build
metadata after a `+`, by convention the source-control commit hash:

    1.4.2+a34a913742f8845d3da5309b7b17242222d41a21

Two independent derivations are computed from the same raw value:

- normalized_version: the human-facing version, empty when nothing was embedded
- commit_hash: the build-traceability hash, `LOCALBUILD` when nothing usable
  was embedded

Both are total: every input, including None, yields a string.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Stand-in informational version for local builds that embed no commit
DEFAULT_INFORMATIONAL_VERSION = "1.0.0+LOCALBUILD"

# Raw values this short or shorter cannot carry a `+<hash>` suffix
COMMIT_LENGTH_THRESHOLD = 6


class VersionCut(str, Enum):
    """Where normalized_version cuts a version carrying build metadata"""
    PREFIX = "prefix"    # everything before the first '+'
    LEGACY = "legacy"    # len(raw) - index('+') - 2 characters


def _cut_point(raw: str, plus_index: int, cut: VersionCut) -> int:
    if cut is VersionCut.LEGACY:
        # Bug-compatible arithmetic; clamped so short inputs yield "" instead of
        # slicing from the end of the string.
        return max(0, len(raw) - plus_index - 2)
    return plus_index


def normalized_version(
    raw: Optional[str], *, cut: VersionCut = VersionCut.PREFIX
) -> str:
    """Strip build metadata from an informational version.

    Args:
        raw: Informational version as embedded, or None when absent
        cut: Cut rule applied when a '+' follows at least one character

    Returns:
        "" for a missing or empty value, the value unchanged when it has no
        '+' (or starts with one), otherwise the value up to the cut point.
    """
    if not raw:
        return ""

    plus_index = raw.find("+")
    if plus_index > 0:
        return raw[:_cut_point(raw, plus_index, VersionCut(cut))]
    return raw


def commit_hash(
    raw: Optional[str],
    *,
    fallback: str = DEFAULT_INFORMATIONAL_VERSION,
    threshold: int = COMMIT_LENGTH_THRESHOLD,
) -> str:
    """Extract the commit hash embedded after the first '+'.

    Values longer than `threshold` are assumed to carry a suffix; anything
    else (including None) is replaced by `fallback` before the split. When the
    working value holds no '+', it is returned whole.
    """
    version = fallback
    if raw is not None and len(raw) > threshold:
        version = raw
    return version[version.find("+") + 1:]


@dataclass(frozen=True)
class VersionNormalizer:
    """Normalizer options bundled for callers that read many artifacts."""

    cut: VersionCut = VersionCut.PREFIX
    fallback: str = DEFAULT_INFORMATIONAL_VERSION
    threshold: int = COMMIT_LENGTH_THRESHOLD

    def normalized_version(self, raw: Optional[str]) -> str:
        return normalized_version(raw, cut=self.cut)

    def commit_hash(self, raw: Optional[str]) -> str:
        return commit_hash(raw, fallback=self.fallback, threshold=self.threshold)

    def split(self, raw: Optional[str]) -> Tuple[str, str]:
        """Return (normalized_version, commit_hash) for one raw value."""
        return self.normalized_version(raw), self.commit_hash(raw)
