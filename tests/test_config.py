"""Unit tests for checklist and scaffold configuration."""

import pytest
import yaml

from setupkit.config import ChecklistLoader, ConfigError, ScaffoldConfig
from setupkit.config.defaults import DEFAULT_SCRIPTS, get_default_checklist
from setupkit.config.loader import parse_scaffold
from setupkit.preflight import CheckKind, ManifestMode


MINIMAL_CHECKLIST = {
    "name": "minimal",
    "sections": [
        {
            "title": "Basics",
            "checks": [
                {"description": "manifest", "kind": "file_exists", "target": "package.json"},
                {"description": "tests", "kind": "script_declared", "target": "test"},
            ],
        }
    ],
}


@pytest.mark.unit
class TestChecklistLoader:
    """Tests for ChecklistLoader."""

    def test_default_checklist(self):
        loader = ChecklistLoader()
        config = loader.checklist
        assert config.name == "nextjs-storybook"
        assert config.manifest_mode == ManifestMode.SUBSTRING
        assert [s.title for s in config.sections] == [
            "Prerequisites",
            "Next.js Setup",
            "Storybook Setup",
            "Components and Stories",
            "Test Setup",
            "package.json Scripts",
        ]
        assert config.check_count == 27

    def test_sections_are_immutable_tuples(self):
        sections = ChecklistLoader().sections()
        assert isinstance(sections, tuple)
        assert isinstance(sections[0].checks, tuple)
        assert sections[0].checks[0].kind == CheckKind.COMMAND_AVAILABLE
        assert sections[0].checks[0].target == "node"

    def test_load_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump(MINIMAL_CHECKLIST))
        loader = ChecklistLoader(path).load()
        assert loader.source == path
        assert loader.checklist.name == "minimal"
        assert loader.checklist.check_count == 2

    def test_load_directory_finds_setupkit_yaml(self, tmp_path):
        (tmp_path / "setupkit.yml").write_text(yaml.safe_dump(MINIMAL_CHECKLIST))
        loader = ChecklistLoader(tmp_path).load()
        assert loader.checklist.name == "minimal"

    def test_load_directory_without_file_uses_default(self, tmp_path):
        loader = ChecklistLoader(tmp_path).load()
        assert loader.source is None
        assert loader.checklist.name == "nextjs-storybook"

    def test_nested_document_with_scaffold(self, tmp_path):
        path = tmp_path / "setupkit.yaml"
        path.write_text(yaml.safe_dump({
            "checklist": MINIMAL_CHECKLIST,
            "scaffold": {"project_name": "storefront", "run_tests": False},
        }))
        loader = ChecklistLoader(path).load()
        assert loader.checklist.name == "minimal"
        assert loader.scaffold.project_name == "storefront"
        assert loader.scaffold.run_tests is False
        # Unset fields fall back to the defaults
        assert loader.scaffold.scripts == DEFAULT_SCRIPTS

    def test_missing_path(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            ChecklistLoader(tmp_path / "missing.yaml").load()
        assert "does not exist" in str(exc_info.value)

    def test_no_path(self):
        with pytest.raises(ConfigError):
            ChecklistLoader().load()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("sections: [unclosed")
        with pytest.raises(ConfigError) as exc_info:
            ChecklistLoader(path).load()
        assert "Invalid YAML" in str(exc_info.value)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError) as exc_info:
            ChecklistLoader(path).load()
        assert "mapping" in str(exc_info.value)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.yaml"
        path.write_bytes(b"name: x\ndescription: \xff\xfe\n")
        with pytest.raises(ConfigError) as exc_info:
            ChecklistLoader(path).load()
        assert str(path) in str(exc_info.value)

    def test_default_checklist_follows_component(self):
        sections = ChecklistLoader(component="Card").sections()
        targets = [c.target for s in sections for c in s.checks]
        assert "src/components/Card.tsx" in targets
        assert "src/components/Card.stories.tsx" in targets
        assert "src/components/Card.test.tsx" in targets
        assert not any("Button" in t for t in targets)
        assert sections[3].checks[1].description == "Card component (Card.tsx)"

    def test_default_component_is_button(self):
        assert get_default_checklist() == get_default_checklist("Button")
        sections = ChecklistLoader().sections()
        assert sections[3].checks[1].description == "Button component (Button.tsx)"

    def test_loaded_checklist_ignores_component(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump(MINIMAL_CHECKLIST))
        loader = ChecklistLoader(path, component="Card").load()
        assert loader.checklist.name == "minimal"

    def test_save_round_trips(self, tmp_path):
        output = ChecklistLoader().save(tmp_path / "out" / "setupkit.yaml")
        data = yaml.safe_load(output.read_text())
        assert data == get_default_checklist()

    def test_from_dict(self):
        loader = ChecklistLoader.from_dict(checklist=MINIMAL_CHECKLIST)
        assert loader.checklist.name == "minimal"


@pytest.mark.unit
class TestChecklistValidation:
    """Tests for pydantic checklist validation."""

    def _with_check(self, **check):
        data = {"sections": [{"title": "S", "checks": [check]}]}
        return ChecklistLoader.from_dict(checklist=data)

    def test_unknown_kind(self):
        with pytest.raises(ConfigError) as exc_info:
            self._with_check(description="x", kind="url_reachable", target="x")
        assert "Invalid checklist configuration" in str(exc_info.value)

    def test_blank_target(self):
        with pytest.raises(ConfigError):
            self._with_check(description="x", kind="file_exists", target="  ")

    def test_absolute_path_rejected_for_filesystem_kinds(self):
        with pytest.raises(ConfigError) as exc_info:
            self._with_check(description="x", kind="file_exists", target="/etc/passwd")
        assert "relative" in str(exc_info.value)

    def test_empty_checklist_rejected(self):
        with pytest.raises(ConfigError):
            ChecklistLoader.from_dict(checklist={"name": "empty", "sections": [{"title": "S"}]})

    def test_structured_mode(self):
        data = dict(MINIMAL_CHECKLIST, manifest_mode="structured")
        loader = ChecklistLoader.from_dict(checklist=data)
        assert loader.checklist.manifest_mode == ManifestMode.STRUCTURED


@pytest.mark.unit
class TestScaffoldConfig:
    """Tests for scaffold settings."""

    def test_defaults(self):
        config = ChecklistLoader().scaffold
        assert config.project_name == "my-app"
        assert config.component_name == "Button"
        assert "vitest" in config.dev_dependencies
        assert config.scripts["e2e"] == "playwright test"
        assert config.script_descriptions["storybook:test"] == "Run Storybook interaction tests"
        assert set(config.script_descriptions) == set(DEFAULT_SCRIPTS)

    @pytest.mark.parametrize("name", ["My App", "../escape", "-leading", ""])
    def test_invalid_project_name(self, name):
        with pytest.raises(ConfigError):
            parse_scaffold({"project_name": name})

    def test_invalid_component_name(self):
        with pytest.raises(ConfigError):
            parse_scaffold({"component_name": "button"})

    def test_port_range(self):
        with pytest.raises(ConfigError):
            parse_scaffold({"dev_port": 70000})

    def test_model_accepts_valid_values(self):
        config = ScaffoldConfig(project_name="web.app_2", component_name="Card", dev_port=4000)
        assert config.dev_port == 4000
