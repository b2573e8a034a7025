"""
Structured exception hierarchy for buildinfo.

Field accessors and the version normalizer never raise: missing metadata
degrades to empty strings or sentinels. These exceptions cover the outer
surface only (resolving an artifact, loading configuration, parsing a
manifest).

All exceptions include:
- category: ARTIFACT, CONFIGURATION, MANIFEST
- severity: ERROR, WARNING
- resolution_hints: Actionable suggestions for common issues
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorSeverity(str, Enum):
    """Error severity levels"""
    ERROR = "error"      # Operation cannot produce a result
    WARNING = "warning"  # Result produced with degraded input


class ErrorCategory(str, Enum):
    """Error categories for diagnostics"""
    ARTIFACT = "artifact"              # Distribution, module or manifest not found
    CONFIGURATION = "configuration"    # Invalid settings file or override
    MANIFEST = "manifest"              # Manifest file not shaped as expected


@dataclass
class ResolutionHint:
    """Actionable resolution guidance for common error patterns"""

    title: str
    description: str
    steps: List[str]


class BuildInfoError(Exception):
    """
    Base exception for buildinfo with structured context.

    All buildinfo exceptions inherit from this class so the CLI can print a
    consistent diagnostic for any of them.
    """

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.ARTIFACT,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        resolution_hints: Optional[List[ResolutionHint]] = None,
        original_exception: Optional[Exception] = None,
        **kwargs
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.resolution_hints = resolution_hints or []
        self.original_exception = original_exception
        self.additional_data = kwargs

    def format_diagnostic_message(self) -> str:
        """
        Format diagnostic message for logs and user display.

        Returns multi-line formatted error with:
        - Error message and severity
        - Additional context
        - Resolution hints
        - Original exception (if available)
        """
        lines = [
            f"ERROR: {self.message}",
            f"Severity: {self.severity.value.upper()} | Category: {self.category.value}",
        ]

        if self.additional_data:
            lines.append("")
            lines.append("CONTEXT:")
            for key, value in self.additional_data.items():
                lines.append(f"  {key}: {value}")

        if self.resolution_hints:
            lines.append("")
            lines.append("RESOLUTION HINTS:")
            for i, hint in enumerate(self.resolution_hints, 1):
                lines.append(f"{i}. {hint.title}")
                lines.append(f"   {hint.description}")
                for step in hint.steps:
                    lines.append(f"     - {step}")

        if self.original_exception:
            lines.append("")
            lines.append("ORIGINAL EXCEPTION:")
            lines.append(f"  {type(self.original_exception).__name__}: {self.original_exception}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize exception for structured logging"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "resolution_hints": [
                {
                    "title": hint.title,
                    "description": hint.description,
                    "steps": hint.steps,
                }
                for hint in self.resolution_hints
            ],
            "original_exception": str(self.original_exception) if self.original_exception else None,
            **self.additional_data
        }


# Artifact Errors
class ArtifactNotFoundError(BuildInfoError):
    """No distribution, module or manifest matches the requested target"""
    def __init__(self, target: str, kind: str = "auto", **kwargs):
        message = f"No {kind} artifact found for '{target}'" if kind != "auto" else (
            f"No artifact found for '{target}'"
        )
        if "resolution_hints" not in kwargs:
            kwargs["resolution_hints"] = [
                ResolutionHint(
                    title="Check the Artifact Target",
                    description="Targets are distribution names, importable modules or manifest paths",
                    steps=[
                        "List installed distributions: pip list",
                        "Pass --kind module for importable modules",
                        "Pass the path of a .yaml manifest for CI-generated metadata",
                    ],
                )
            ]
        super().__init__(
            message,
            category=ErrorCategory.ARTIFACT,
            target=target,
            kind=kind,
            **kwargs,
        )


class ManifestFormatError(BuildInfoError):
    """Manifest file exists but is not a YAML mapping of metadata fields"""
    def __init__(self, path: str, reason: str, **kwargs):
        super().__init__(
            f"Invalid build manifest {path}: {reason}",
            category=ErrorCategory.MANIFEST,
            path=path,
            **kwargs,
        )


# Configuration Errors
class ConfigurationError(BuildInfoError):
    """Configuration-related errors"""
    def __init__(self, message: str, **kwargs):
        super().__init__(message, category=ErrorCategory.CONFIGURATION, **kwargs)


class InvalidConfigurationError(ConfigurationError):
    """Invalid configuration parameter or structure"""
    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        **kwargs
    ):
        if config_path:
            message = f"{message} (config_path: {config_path})"
        if "resolution_hints" not in kwargs:
            kwargs["resolution_hints"] = [
                ResolutionHint(
                    title="Fix Settings",
                    description="Settings are validated against BuildInfoSettings",
                    steps=[
                        "version_cut must be 'prefix' or 'legacy'",
                        "fallback_informational_version must contain '+'",
                        "commit_length_threshold must be zero or greater",
                    ],
                )
            ]
        super().__init__(message, **kwargs)
