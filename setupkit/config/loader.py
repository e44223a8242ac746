"""
Configuration loader for YAML files.

Handles loading and validation of checklist and scaffold configuration.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from ..preflight.models import ChecklistSection
from .defaults import get_default_checklist, get_default_scaffold
from .models import ChecklistConfig, ScaffoldConfig

CHECKLIST_FILENAMES = ("setupkit.yaml", "setupkit.yml")


class ConfigError(Exception):
    """Configuration loading or validation error."""
    pass


class ChecklistLoader:
    """
    Loads and validates checklist configuration from YAML.

    Accepts a single YAML file, or a directory containing setupkit.yaml.
    Falls back to the built-in checklist when nothing was loaded.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        component: str = "Button",
    ):
        """
        Initialize the loader.

        Args:
            config_path: Path to a checklist file or a directory
            component: Sample component the default checklist expects
        """
        self.config_path = Path(config_path) if config_path else None
        self.component = component
        self.source: Optional[Path] = None
        self._checklist: Optional[ChecklistConfig] = None
        self._scaffold: Optional[ScaffoldConfig] = None

    def load(self) -> "ChecklistLoader":
        """
        Load the checklist from the config path.

        Returns:
            Self for method chaining
        """
        if self.config_path is None:
            raise ConfigError("No configuration path specified")

        if self.config_path.is_file():
            self._load_file(self.config_path)
        elif self.config_path.is_dir():
            for filename in CHECKLIST_FILENAMES:
                candidate = self.config_path / filename
                if candidate.is_file():
                    self._load_file(candidate)
                    break
        else:
            raise ConfigError(f"Configuration path does not exist: {self.config_path}")

        return self

    def _load_file(self, file_path: Path) -> None:
        data = read_yaml(file_path)
        self.source = file_path

        # Either a bare checklist document or one with top-level sections
        if "checklist" in data or "scaffold" in data:
            if data.get("checklist") is not None:
                self._checklist = parse_checklist(data["checklist"])
            if data.get("scaffold") is not None:
                self._scaffold = parse_scaffold(data["scaffold"])
        else:
            self._checklist = parse_checklist(data)

    @property
    def checklist(self) -> ChecklistConfig:
        """Loaded checklist, or the default one."""
        if self._checklist is None:
            self._checklist = parse_checklist(get_default_checklist(self.component))
        return self._checklist

    @property
    def scaffold(self) -> ScaffoldConfig:
        """Loaded scaffold settings, or the defaults."""
        if self._scaffold is None:
            self._scaffold = parse_scaffold(get_default_scaffold())
        return self._scaffold

    def sections(self) -> Tuple[ChecklistSection, ...]:
        """Immutable checklist sections, in declared order."""
        return self.checklist.to_sections()

    def save(self, output_path: Union[str, Path]) -> Path:
        """
        Save the current checklist to a YAML file.

        Args:
            output_path: File to write

        Returns:
            The written path
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            yaml.dump(
                self.checklist.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
        return output_path

    @classmethod
    def from_dict(
        cls,
        checklist: Optional[Dict[str, Any]] = None,
        scaffold: Optional[Dict[str, Any]] = None,
    ) -> "ChecklistLoader":
        """Create a loader from dictionaries."""
        loader = cls()
        if checklist:
            loader._checklist = parse_checklist(checklist)
        if scaffold:
            loader._scaffold = parse_scaffold(scaffold)
        return loader


def read_yaml(file_path: Path) -> Dict[str, Any]:
    """Read and parse a YAML mapping."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {file_path}: {e}")
    except UnicodeDecodeError as e:
        raise ConfigError(f"Cannot decode {file_path} as UTF-8: {e}")
    except IOError as e:
        raise ConfigError(f"Cannot read {file_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {file_path}")
    return data


def parse_checklist(data: Dict[str, Any]) -> ChecklistConfig:
    """Parse checklist configuration."""
    try:
        return ChecklistConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid checklist configuration: {e}")


def parse_scaffold(data: Dict[str, Any]) -> ScaffoldConfig:
    """Parse scaffold configuration, filling unset fields from the defaults."""
    merged = get_default_scaffold()
    merged.update(data)
    try:
        return ScaffoldConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid scaffold configuration: {e}")
