"""
Unit tests for artifact adapters and resolution.
"""

from __future__ import annotations

from importlib.metadata import PathDistribution

import pytest

from buildinfo import (
    ArtifactNotFoundError,
    DistributionArtifact,
    ManifestArtifact,
    ManifestFormatError,
    MetadataField,
    ModuleArtifact,
    resolve_artifact,
)
from buildinfo.artifacts import Artifact
from tests.fixtures import INFORMATIONAL_VERSION, REPOSITORY_URL


class TestModuleArtifact:
    """Test dunder-based module artifacts"""

    def test_reads_dunders(self, stamped_artifact):
        assert stamped_artifact.name == "acme_widgets_build"
        assert stamped_artifact.field_values(MetadataField.INFORMATIONAL_VERSION) == [INFORMATIONAL_VERSION]
        assert stamped_artifact.field_values(MetadataField.VERSION) == ["2.5.0"]

    def test_company_falls_back_to_author(self, make_module):
        module = make_module("acme_author_only", __author__="Jane Doe")
        assert ModuleArtifact(module).field_values(MetadataField.COMPANY) == ["Jane Doe"]

    def test_company_before_author(self, make_module):
        module = make_module("acme_both", __company__="Acme Corp", __author__="Jane Doe")
        assert ModuleArtifact(module).field_values(MetadataField.COMPANY) == ["Acme Corp", "Jane Doe"]

    def test_metadata_mapping(self, make_module):
        module = make_module("acme_mapping", __metadata__={"RepositoryUrl": REPOSITORY_URL})
        assert ModuleArtifact(module).metadata_pairs() == [("RepositoryUrl", REPOSITORY_URL)]

    def test_no_metadata(self, bare_module):
        artifact = ModuleArtifact(bare_module)
        assert artifact.metadata_pairs() == []
        assert artifact.field_values(MetadataField.TITLE) == []

    def test_from_name_missing(self):
        with pytest.raises(ArtifactNotFoundError) as exc_info:
            ModuleArtifact.from_name("acme_module_that_does_not_exist")
        assert exc_info.value.additional_data["kind"] == "module"

    @pytest.mark.parametrize("name", ["./missing-manifest.yaml", ""])
    def test_from_name_unimportable(self, name):
        with pytest.raises(ArtifactNotFoundError) as exc_info:
            ModuleArtifact.from_name(name)
        assert exc_info.value.additional_data["target"] == name

    def test_empty_company_falls_back_to_author(self, make_module):
        module = make_module("acme_blank_company", __company__="", __author__="Jane Doe")
        assert ModuleArtifact(module).field_values(MetadataField.COMPANY) == ["Jane Doe"]

    def test_malformed_metadata_entries_skipped(self, make_module):
        module = make_module(
            "acme_odd_metadata",
            __metadata__=["RepositoryUrl=https://x", "ab", ("Branch", "main"), ("a", "b", "c")],
        )
        assert ModuleArtifact(module).metadata_pairs() == [("Branch", "main")]

    def test_string_metadata_ignored(self, make_module):
        module = make_module("acme_string_metadata", __metadata__="ab")
        assert ModuleArtifact(module).metadata_pairs() == []

    def test_satisfies_protocol(self, stamped_artifact):
        assert isinstance(stamped_artifact, Artifact)


class TestManifestArtifact:
    """Test YAML manifests"""

    def test_from_path(self, manifest_path):
        artifact = ManifestArtifact.from_path(manifest_path)
        assert artifact.name == str(manifest_path)
        assert artifact.field_values(MetadataField.TITLE) == ["Acme Service"]
        assert artifact.field_values(MetadataField.INFORMATIONAL_VERSION) == [INFORMATIONAL_VERSION]
        assert ("RepositoryUrl", REPOSITORY_URL) in artifact.metadata_pairs()

    def test_keys_are_case_insensitive(self):
        artifact = ManifestArtifact({"Title": "Acme"})
        assert artifact.field_values(MetadataField.TITLE) == ["Acme"]

    def test_non_string_scalars_stringified(self):
        artifact = ManifestArtifact({"version": 2.5, "trademark": None})
        assert artifact.field_values(MetadataField.VERSION) == ["2.5"]
        assert artifact.field_values(MetadataField.TRADEMARK) == []

    def test_metadata_entry_list(self, write_manifest):
        path = write_manifest(
            """
metadata:
  - key: Branch
    value: main
  - key: RepositoryUrl
    value: https://example.com/r.git
"""
        )
        artifact = ManifestArtifact.from_path(path)
        assert artifact.metadata_pairs() == [
            ("Branch", "main"),
            ("RepositoryUrl", "https://example.com/r.git"),
        ]

    def test_empty_file(self, write_manifest):
        artifact = ManifestArtifact.from_path(write_manifest(""))
        assert artifact.field_values(MetadataField.TITLE) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArtifactNotFoundError):
            ManifestArtifact.from_path(tmp_path / "missing.yaml")

    def test_top_level_list_rejected(self, write_manifest):
        with pytest.raises(ManifestFormatError, match="mapping"):
            ManifestArtifact.from_path(write_manifest("- a\n- b\n"))

    def test_invalid_yaml_rejected(self, write_manifest):
        with pytest.raises(ManifestFormatError, match="YAML"):
            ManifestArtifact.from_path(write_manifest("title: [unclosed\n"))

    def test_malformed_metadata_rejected(self, write_manifest):
        with pytest.raises(ManifestFormatError, match="metadata"):
            ManifestArtifact.from_path(write_manifest("metadata:\n  - just-a-string\n"))

    def test_scalar_metadata_rejected(self, write_manifest):
        with pytest.raises(ManifestFormatError, match="metadata"):
            ManifestArtifact.from_path(write_manifest("metadata: RepositoryUrl=https://x\n"))

    def test_three_item_metadata_entry_rejected(self, write_manifest):
        with pytest.raises(ManifestFormatError, match="metadata"):
            ManifestArtifact.from_path(write_manifest("metadata:\n  - [a, b, c]\n"))


class TestDistributionArtifact:
    """Test core-metadata distributions"""

    def test_reads_headers(self, make_distribution):
        dist_info = make_distribution(
            {
                "Name": "acme-widgets",
                "Version": "2.5.0+abc1234def",
                "Summary": "Widget toolkit",
                "Author": "Acme Corp",
                "Project-URL": [
                    "Homepage, https://example.com",
                    f"RepositoryUrl, {REPOSITORY_URL}",
                ],
            }
        )
        artifact = DistributionArtifact(PathDistribution(dist_info))

        assert artifact.name == "acme-widgets"
        assert artifact.field_values(MetadataField.TITLE) == ["acme-widgets"]
        assert artifact.field_values(MetadataField.PRODUCT) == ["acme-widgets"]
        assert artifact.field_values(MetadataField.DESCRIPTION) == ["Widget toolkit"]
        assert artifact.field_values(MetadataField.COMPANY) == ["Acme Corp"]
        assert artifact.field_values(MetadataField.INFORMATIONAL_VERSION) == ["2.5.0+abc1234def"]
        assert artifact.metadata_pairs() == [
            ("Homepage", "https://example.com"),
            ("RepositoryUrl", REPOSITORY_URL),
        ]

    def test_headers_without_counterpart_are_empty(self, make_distribution):
        artifact = DistributionArtifact(PathDistribution(make_distribution({"Name": "acme-min"})))
        assert artifact.field_values(MetadataField.COPYRIGHT) == []
        assert artifact.field_values(MetadataField.TRADEMARK) == []
        assert artifact.field_values(MetadataField.VERSION) == []
        assert artifact.metadata_pairs() == []
        assert artifact.types() == []

    def test_author_email_used_for_company(self, make_distribution):
        dist_info = make_distribution({"Name": "acme-email", "Author-email": "Acme <dev@acme.test>"})
        artifact = DistributionArtifact(PathDistribution(dist_info))
        assert artifact.field_values(MetadataField.COMPANY) == ["Acme <dev@acme.test>"]

    def test_installed_distribution(self):
        artifact = DistributionArtifact.from_name("pytest")
        assert artifact.field_values(MetadataField.VERSION) == [pytest.__version__]

    def test_missing_distribution(self):
        with pytest.raises(ArtifactNotFoundError) as exc_info:
            DistributionArtifact.from_name("acme-distribution-that-does-not-exist")
        assert exc_info.value.additional_data["kind"] == "distribution"

    def test_empty_name(self):
        with pytest.raises(ArtifactNotFoundError):
            DistributionArtifact.from_name("")


class TestResolveArtifact:
    """Test target resolution"""

    def test_auto_manifest(self, manifest_path):
        assert isinstance(resolve_artifact(str(manifest_path)), ManifestArtifact)

    def test_auto_distribution(self):
        assert isinstance(resolve_artifact("pytest"), DistributionArtifact)

    def test_auto_module(self, stamped_module):
        assert isinstance(resolve_artifact("acme_widgets_build"), ModuleArtifact)

    def test_explicit_kind(self):
        assert isinstance(resolve_artifact("pytest", "module"), ModuleArtifact)

    def test_not_found(self):
        with pytest.raises(ArtifactNotFoundError, match="No artifact found"):
            resolve_artifact("acme-target-that-does-not-exist")

    @pytest.mark.parametrize("target", ["./missing-manifest.yaml", ""])
    def test_unimportable_target_not_found(self, target):
        with pytest.raises(ArtifactNotFoundError, match="No artifact found"):
            resolve_artifact(target)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown artifact kind"):
            resolve_artifact("pytest", "wheel")
