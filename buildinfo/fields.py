"""Well-known metadata fields read from build artifacts."""

from __future__ import annotations

from enum import Enum


class MetadataField(str, Enum):
    """Single-valued descriptive fields embedded in an artifact at build time"""
    COMPANY = "company"
    COPYRIGHT = "copyright"
    TITLE = "title"
    DESCRIPTION = "description"
    PRODUCT = "product"
    TRADEMARK = "trademark"
    VERSION = "version"
    INFORMATIONAL_VERSION = "informational_version"


# Key of the generic metadata pair holding the source repository URL
REPOSITORY_URL_KEY = "RepositoryUrl"
