"""Unit tests for package.json lookups."""

import pytest

from setupkit.preflight import Check, CheckKind, ChecklistValidator, ManifestMode
from setupkit.preflight.checks import Manifest


@pytest.mark.unit
class TestSubstringMode:
    """Legacy substring semantics."""

    def test_unquoted_mention_does_not_count(self, tmp_path, manifest_writer):
        manifest_writer(tmp_path, {"description": "uses vitest for testing"})
        validator = ChecklistValidator(tmp_path)
        check = Check("Vitest package installed", CheckKind.PACKAGE_DECLARED, "vitest")
        assert not validator.evaluate(check).passed

    def test_quoted_name_anywhere_counts(self, tmp_path, manifest_writer):
        manifest_writer(tmp_path, {"description": "vitest", "dependencies": {}})
        validator = ChecklistValidator(tmp_path)
        check = Check("Vitest package installed", CheckKind.PACKAGE_DECLARED, "vitest")
        assert validator.evaluate(check).passed

    def test_script_found_outside_scripts_section(self, tmp_path, manifest_writer):
        manifest_writer(tmp_path, {"devDependencies": {"storybook": "^8.0.0"}})
        manifest = Manifest(tmp_path)
        assert manifest.declares_script("storybook")
        assert manifest.declares_package("storybook")

    def test_malformed_json_still_searched(self, tmp_path, manifest_writer):
        manifest_writer(tmp_path, '{"devDependencies": {"vitest": ')
        assert Manifest(tmp_path).declares_package("vitest")

    def test_partial_name_does_not_match(self, tmp_path, manifest_writer):
        manifest_writer(tmp_path, {"devDependencies": {"@storybook/react-vite": "^8"}})
        assert not Manifest(tmp_path).declares_package("@storybook/react")

    def test_missing_manifest(self, tmp_path):
        manifest = Manifest(tmp_path)
        assert manifest.text is None
        assert not manifest.declares_package("vitest")
        assert not manifest.declares_script("test")


@pytest.mark.unit
class TestStructuredMode:
    """JSON-scoped lookups."""

    def test_unrelated_value_does_not_count(self, tmp_path, manifest_writer):
        manifest_writer(tmp_path, {"description": "uses \"vitest\" for testing"})
        manifest = Manifest(tmp_path, ManifestMode.STRUCTURED)
        assert manifest.mentions("vitest")
        assert not manifest.declares_package("vitest")

    @pytest.mark.parametrize(
        "section",
        ["dependencies", "devDependencies", "peerDependencies", "optionalDependencies"],
    )
    def test_each_dependency_section(self, tmp_path, manifest_writer, section):
        manifest_writer(tmp_path, {section: {"vitest": "^2.0.0"}})
        assert Manifest(tmp_path, ManifestMode.STRUCTURED).declares_package("vitest")

    def test_scripts_scoped_to_scripts(self, tmp_path, manifest_writer):
        manifest_writer(tmp_path, {
            "scripts": {"dev": "next dev"},
            "devDependencies": {"storybook": "^8.0.0"},
        })
        manifest = Manifest(tmp_path, ManifestMode.STRUCTURED)
        assert manifest.declares_script("dev")
        assert not manifest.declares_script("storybook")
        assert not manifest.declares_package("dev")

    def test_malformed_json_fails_lookups(self, tmp_path, manifest_writer, caplog):
        manifest_writer(tmp_path, '{"devDependencies": {"vitest": ')
        manifest = Manifest(tmp_path, ManifestMode.STRUCTURED)
        assert not manifest.declares_package("vitest")
        assert "Malformed manifest" in caplog.text

    def test_non_object_manifest(self, tmp_path, manifest_writer):
        manifest_writer(tmp_path, '["vitest"]')
        manifest = Manifest(tmp_path, ManifestMode.STRUCTURED)
        assert manifest.data is None
        assert not manifest.declares_package("vitest")

    def test_non_mapping_section_ignored(self, tmp_path, manifest_writer):
        manifest_writer(tmp_path, {"scripts": ["dev"]})
        assert not Manifest(tmp_path, ManifestMode.STRUCTURED).declares_script("dev")
