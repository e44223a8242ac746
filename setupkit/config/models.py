"""
Pydantic models for configuration validation.

These models define the schema for checklist and scaffold
configuration files.
"""

import re
from pathlib import PurePosixPath
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from ..preflight.models import Check, CheckKind, ChecklistSection, ManifestMode


# ============================================================
# Checklist Configuration
# ============================================================

class CheckConfig(BaseModel):
    """Configuration for a single check."""

    description: str = Field(..., min_length=1, description="Human-readable label")
    kind: CheckKind = Field(..., description="What the check tests")
    target: str = Field(..., description="Path, command, package or script name")

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: str) -> str:
        """Reject blank targets."""
        if not v.strip():
            raise ValueError("target must not be blank")
        return v

    @model_validator(mode="after")
    def check_relative_path(self):
        """Filesystem targets are relative to the project root."""
        if self.kind.reads_filesystem and PurePosixPath(self.target).is_absolute():
            raise ValueError(f"Path must be relative to the project root: {self.target}")
        return self

    def to_check(self) -> Check:
        return Check(description=self.description, kind=self.kind, target=self.target)


class SectionConfig(BaseModel):
    """A titled group of checks."""

    title: str = Field(..., min_length=1, description="Section heading")
    checks: List[CheckConfig] = Field(default_factory=list)

    def to_section(self) -> ChecklistSection:
        return ChecklistSection(
            title=self.title,
            checks=tuple(c.to_check() for c in self.checks),
        )


class ChecklistConfig(BaseModel):
    """Complete checklist definition."""

    name: str = Field(default="setup", description="Checklist name")
    manifest_mode: ManifestMode = Field(
        default=ManifestMode.SUBSTRING,
        description="How package.json lookups are performed",
    )
    sections: List[SectionConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_not_empty(self):
        """A checklist needs at least one check."""
        if not any(s.checks for s in self.sections):
            raise ValueError("Checklist must define at least one check")
        return self

    @property
    def check_count(self) -> int:
        return sum(len(s.checks) for s in self.sections)

    def to_sections(self) -> Tuple[ChecklistSection, ...]:
        return tuple(s.to_section() for s in self.sections)


# ============================================================
# Scaffold Configuration
# ============================================================

PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9._-]*$")
COMPONENT_NAME_PATTERN = re.compile(r"^[A-Z][A-Za-z0-9]*$")


class ScaffoldConfig(BaseModel):
    """Settings for generating a new project."""

    project_name: str = Field(default="my-app", description="Directory and package name")
    component_name: str = Field(default="Button", description="Sample component name")
    dev_port: int = Field(default=3000, ge=1, le=65535, description="Next.js dev server port")
    dev_dependencies: List[str] = Field(default_factory=list)
    scripts: Dict[str, str] = Field(default_factory=dict)
    script_descriptions: Dict[str, str] = Field(
        default_factory=dict, description="Summary text per script name"
    )
    run_tests: bool = Field(default=True, description="Run unit tests after setup")

    @field_validator("project_name")
    @classmethod
    def validate_project_name(cls, v: str) -> str:
        """Project names must be valid npm package and directory names."""
        if not PROJECT_NAME_PATTERN.match(v):
            raise ValueError(
                f"Invalid project name: {v} "
                "(use lowercase letters, digits, '.', '_' or '-')"
            )
        return v

    @field_validator("component_name")
    @classmethod
    def validate_component_name(cls, v: str) -> str:
        """Component names are PascalCase identifiers."""
        if not COMPONENT_NAME_PATTERN.match(v):
            raise ValueError(f"Invalid component name: {v} (use PascalCase)")
        return v
